"""Component for starting and ending the live class."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from classroom_admin.constants.ui_constants import (
    LIVE_END_BUTTON,
    LIVE_END_FAILED_MESSAGE,
    LIVE_ENDED_MESSAGE,
    LIVE_HINT,
    LIVE_INVALID_LINK_MESSAGE,
    LIVE_LINK_LABEL,
    LIVE_LINK_PLACEHOLDER,
    LIVE_NO_STREAM_MESSAGE,
    LIVE_START_BUTTON,
    LIVE_START_FAILED_MESSAGE,
    LIVE_STARTED_MESSAGE,
    LIVE_STATUS_IDLE,
    LIVE_STATUS_TEMPLATE,
)
from classroom_admin.core.admin_manager import AdminManager
from classroom_admin.core.errors import InvalidLinkError, NoActiveStreamError, PersistenceError
from classroom_admin.core.youtube_links import extract_video_id
from classroom_admin.ui.dialog_helpers import confirm_replace_live, show_info
from classroom_admin.styling.styles import Styles

logger = logging.getLogger(__name__)


class LivePanel(QWidget):
    """UI component with the link field and the Start/End Live actions."""

    def __init__(self, admin_manager: AdminManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.admin_manager = admin_manager
        self._is_live: bool = False

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel("Manage Live Class", self)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)

        self.status_label = QLabel(LIVE_STATUS_IDLE, self)
        self.status_label.setWordWrap(True)
        self.status_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        layout.addWidget(self.status_label)

        self.message_label = QLabel("", self)
        self.message_label.setWordWrap(True)
        self.message_label.setVisible(False)
        layout.addWidget(self.message_label)

        layout.addWidget(QLabel(LIVE_LINK_LABEL, self))
        self.link_input = QLineEdit(self)
        self.link_input.setPlaceholderText(LIVE_LINK_PLACEHOLDER)
        self.link_input.returnPressed.connect(self._handle_start_live)
        layout.addWidget(self.link_input)

        button_row = QHBoxLayout()
        self.start_button = QPushButton(LIVE_START_BUTTON, self)
        self.start_button.setStyleSheet(Styles.get_action_button_style(danger=False))
        self.start_button.clicked.connect(self._handle_start_live)
        button_row.addWidget(self.start_button)

        self.end_button = QPushButton(LIVE_END_BUTTON, self)
        self.end_button.setStyleSheet(Styles.get_action_button_style(danger=True))
        self.end_button.clicked.connect(self._handle_end_live)
        button_row.addWidget(self.end_button)
        button_row.addStretch()
        layout.addLayout(button_row)

        hint = QLabel(LIVE_HINT, self)
        hint.setWordWrap(True)
        hint.setStyleSheet(Styles.get_hint_style())
        layout.addWidget(hint)

        layout.addStretch()

    def _handle_start_live(self) -> None:
        self._clear_message()
        link = self.link_input.text()
        if extract_video_id(link) is None:
            self._show_message(LIVE_INVALID_LINK_MESSAGE, error=True)
            return
        if self._is_live and not confirm_replace_live(self):
            return

        self._set_busy(True)
        try:
            state = self.admin_manager.start_live(link)
        except InvalidLinkError:
            self._show_message(LIVE_INVALID_LINK_MESSAGE, error=True)
            return
        except PersistenceError as exc:
            logger.warning("Starting live class failed: %s", exc)
            self._show_message(LIVE_START_FAILED_MESSAGE, error=True)
            return
        finally:
            self._set_busy(False)

        self.link_input.clear()
        self._apply_state(state.is_live, state.url)
        show_info(self, "Live Class", LIVE_STARTED_MESSAGE)

    def _handle_end_live(self) -> None:
        self._clear_message()
        self._set_busy(True)
        try:
            self.admin_manager.end_live()
        except NoActiveStreamError:
            self._show_message(LIVE_NO_STREAM_MESSAGE, error=True)
            self._apply_state(False, "")
            return
        except PersistenceError as exc:
            logger.warning("Ending live class failed: %s", exc)
            self._show_message(LIVE_END_FAILED_MESSAGE, error=True)
            return
        finally:
            self._set_busy(False)

        self._apply_state(False, "")
        show_info(self, "Live Class", LIVE_ENDED_MESSAGE)

    def refresh_status(self) -> None:
        """Re-read the live record; failures only update the status line."""
        try:
            state = self.admin_manager.get_live_state()
        except PersistenceError as exc:
            self.status_label.setText(f"Live status unavailable: {exc}")
            return
        self._apply_state(state.is_live, state.url)

    def _apply_state(self, is_live: bool, url: str) -> None:
        self._is_live = is_live and bool(url)
        if self._is_live:
            self.status_label.setText(LIVE_STATUS_TEMPLATE.format(url=url))
        else:
            self.status_label.setText(LIVE_STATUS_IDLE)

    def _set_busy(self, busy: bool) -> None:
        self.start_button.setEnabled(not busy)
        self.end_button.setEnabled(not busy)
        if busy:
            QGuiApplication.setOverrideCursor(Qt.WaitCursor)
        else:
            QGuiApplication.restoreOverrideCursor()

    def _show_message(self, message: str, error: bool) -> None:
        self.message_label.setText(message)
        self.message_label.setStyleSheet(Styles.get_message_style(error))
        self.message_label.setVisible(True)

    def _clear_message(self) -> None:
        self.message_label.clear()
        self.message_label.setVisible(False)

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.link_input.setStyleSheet(style)
        self.status_label.setStyleSheet(style)
