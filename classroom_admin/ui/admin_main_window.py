"""Qt main window switching between the live, upload and results screens."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from classroom_admin.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from classroom_admin.constants.ui_constants import (
    MODE_BUTTON_LIVE,
    MODE_BUTTON_RESULTS,
    MODE_BUTTON_UPLOAD,
    WINDOW_TITLE,
)
from classroom_admin.core.admin_manager import AdminManager
from classroom_admin.core.backend.factory import Backend
from classroom_admin.ui.dialog_helpers import show_error, show_info
from classroom_admin.ui.settings_dialog import SettingsDialog
from classroom_admin.ui.components.live_panel import LivePanel
from classroom_admin.ui.components.results_panel import ResultsPanel
from classroom_admin.ui.components.upload_panel import UploadPanel
from classroom_admin.styling.styles import Styles


class AdminMode(Enum):
    """High-level screen shown by the console."""

    LIVE_CLASS = auto()
    UPLOAD_QUESTIONS = auto()
    STUDENT_RESULTS = auto()


class AdminMainWindow(QMainWindow):
    """Main Qt window orchestrating the three admin screens."""

    def __init__(
        self,
        admin_manager: AdminManager,
        backend: Backend,
        viewer_url: str | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.admin_manager = admin_manager
        self.backend = backend
        self.viewer_url = viewer_url

        self._mode = AdminMode.LIVE_CLASS
        self._ui_font_size: int = 10
        self._confirm_before_delete: bool = True

        self._build_ui()
        self._apply_styles()
        self._set_mode(AdminMode.LIVE_CLASS)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_mode_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.live_panel = LivePanel(self.admin_manager, self)
        self.upload_panel = UploadPanel(self.admin_manager, self)
        self.results_panel = ResultsPanel(self.admin_manager, self)

        self.mode_stack.addWidget(self.live_panel)
        self.mode_stack.addWidget(self.upload_panel)
        self.mode_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.mode_stack, stretch=1)

        footer = f"Backend: {self.backend.description}"
        if self.viewer_url:
            footer += f"  |  Student viewer: {self.viewer_url}"
        self.footer_label = QLabel(footer, self)
        self.footer_label.setStyleSheet(Styles.get_hint_style())
        root_layout.addWidget(self.footer_label)

    def _build_mode_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.live_mode_button = QPushButton(MODE_BUTTON_LIVE, self)
        self.live_mode_button.setCheckable(True)
        self.live_mode_button.clicked.connect(lambda: self._set_mode(AdminMode.LIVE_CLASS))
        button_row.addWidget(self.live_mode_button)

        self.upload_mode_button = QPushButton(MODE_BUTTON_UPLOAD, self)
        self.upload_mode_button.setCheckable(True)
        self.upload_mode_button.clicked.connect(lambda: self._set_mode(AdminMode.UPLOAD_QUESTIONS))
        button_row.addWidget(self.upload_mode_button)

        self.results_mode_button = QPushButton(MODE_BUTTON_RESULTS, self)
        self.results_mode_button.setCheckable(True)
        self.results_mode_button.clicked.connect(lambda: self._set_mode(AdminMode.STUDENT_RESULTS))
        button_row.addWidget(self.results_mode_button)

        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: AdminMode) -> None:
        self._mode = mode
        self.live_mode_button.setChecked(mode == AdminMode.LIVE_CLASS)
        self.upload_mode_button.setChecked(mode == AdminMode.UPLOAD_QUESTIONS)
        self.results_mode_button.setChecked(mode == AdminMode.STUDENT_RESULTS)

        index_map = {
            AdminMode.LIVE_CLASS: 0,
            AdminMode.UPLOAD_QUESTIONS: 1,
            AdminMode.STUDENT_RESULTS: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

        if mode == AdminMode.LIVE_CLASS:
            self.live_panel.refresh_status()
        elif mode == AdminMode.STUDENT_RESULTS:
            self.results_panel.reload_results()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self.backend.documents.timeout_seconds,
            self._confirm_before_delete,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._confirm_before_delete = dialog.get_confirm_before_delete()
            try:
                self.backend.set_timeout(dialog.get_store_timeout_seconds())
            except ValueError as exc:
                show_error(self, "Invalid timeout", str(exc))
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())

        ui_style = f"font-size: {self._ui_font_size}pt;"
        buttons = [
            self.live_mode_button,
            self.upload_mode_button,
            self.results_mode_button,
            self.about_button,
            self.help_button,
            self.settings_button,
        ]
        for button in buttons:
            button.setStyleSheet(ui_style)

        # Pass settings to components
        self.live_panel.apply_font_size(self._ui_font_size)
        self.upload_panel.apply_font_size(self._ui_font_size)
        self.results_panel.apply_font_size(self._ui_font_size)
        self.results_panel.confirm_before_delete = self._confirm_before_delete

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self.backend.shutdown()
        super().closeEvent(event)
