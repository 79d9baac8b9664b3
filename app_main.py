"""Application entry point for the ClassroomAdmin console."""

from __future__ import annotations

import socket
import sys

from PySide6.QtWidgets import QApplication

from classroom_admin.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from classroom_admin.core.admin_manager import AdminManager
from classroom_admin.core.backend.factory import build_backend
from classroom_admin.core.backend.firebase_app import FirebaseConfigError
from classroom_admin.server.api_server import start_api_server
from classroom_admin.ui.admin_main_window import AdminMainWindow
from classroom_admin.utils.logging_config import configure_logging


def _determine_viewer_url(port: int) -> str:
    """Best-effort determination of the local IP for the student viewer URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def main() -> None:
    """Initialize logging and the backend, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting ClassroomAdmin console")

    try:
        backend = build_backend()
    except (FirebaseConfigError, ValueError) as exc:
        logger.error("Firebase configuration is invalid: %s", exc)
        sys.exit(f"Error: {exc}")
    logger.info("Using backend: %s", backend.description)

    admin_manager = AdminManager(backend.documents, backend.objects)
    start_api_server(admin_manager=admin_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    viewer_url = _determine_viewer_url(DEFAULT_PORT)
    logger.info("Student viewer available at %s", viewer_url)

    app = QApplication(sys.argv)
    window = AdminMainWindow(admin_manager=admin_manager, backend=backend, viewer_url=viewer_url)
    window.resize(1100, 750)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
