"""Component for setting the test timer and uploading question images."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication, QPixmap
from PySide6.QtWidgets import (
    QButtonGroup,
    QFileDialog,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QScrollArea,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from classroom_admin.constants.quiz_constants import OPTION_LABELS
from classroom_admin.constants.ui_constants import (
    TIMER_GROUP_TITLE,
    TIMER_MAX_HOURS,
    TIMER_SAVE_BUTTON,
    TIMER_SAVED_MESSAGE,
    UPLOAD_ALL_BUTTON,
    UPLOAD_CLEAR_BUTTON,
    UPLOAD_DIALOG_TITLE,
    UPLOAD_DONE_MESSAGE,
    UPLOAD_FILE_FILTER,
    UPLOAD_GROUP_TITLE,
    UPLOAD_IN_PROGRESS,
    UPLOAD_PICK_BUTTON,
    UPLOAD_THUMBNAIL_SIZE,
)
from classroom_admin.core.admin_manager import AdminManager
from classroom_admin.core.errors import (
    InvalidTimerError,
    NothingToUploadError,
    PersistenceError,
    UploadInterruptedError,
)
from classroom_admin.core.services.question_uploader import QuestionDraft
from classroom_admin.ui.dialog_helpers import (
    confirm_discard_drafts,
    show_error,
    show_warning,
)
from classroom_admin.styling.styles import Styles

logger = logging.getLogger(__name__)

_PREVIEW_COLUMNS = 3


class QuestionPreviewCard(QWidget):
    """Thumbnail of one picked image with its correct-option selector."""

    def __init__(self, draft: QuestionDraft, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.draft = draft

        layout = QVBoxLayout()
        self.setLayout(layout)

        preview = QLabel(self)
        pixmap = QPixmap()
        if pixmap.loadFromData(draft.data):
            preview.setPixmap(
                pixmap.scaled(
                    UPLOAD_THUMBNAIL_SIZE,
                    UPLOAD_THUMBNAIL_SIZE,
                    Qt.KeepAspectRatio,
                    Qt.SmoothTransformation,
                )
            )
        else:
            preview.setText(draft.filename)
        preview.setAlignment(Qt.AlignCenter)
        layout.addWidget(preview)

        name_label = QLabel(draft.filename, self)
        name_label.setStyleSheet(Styles.get_hint_style())
        name_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(name_label)

        options_row = QHBoxLayout()
        self.option_group = QButtonGroup(self)
        for label in OPTION_LABELS:
            button = QRadioButton(label, self)
            button.setChecked(label == draft.correct_option)
            self.option_group.addButton(button)
            options_row.addWidget(button)
        self.option_group.buttonToggled.connect(self._handle_option_toggled)
        layout.addLayout(options_row)

    def _handle_option_toggled(self, button: QRadioButton, checked: bool) -> None:
        if checked:
            self.draft.correct_option = button.text()


class UploadPanel(QWidget):
    """UI component for the test timer and batch question upload."""

    def __init__(self, admin_manager: AdminManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.admin_manager = admin_manager
        self._drafts: list[QuestionDraft] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)

        # Timer section
        timer_group = QGroupBox(TIMER_GROUP_TITLE, self)
        timer_layout = QVBoxLayout()
        timer_group.setLayout(timer_layout)

        spin_row = QHBoxLayout()
        self.hours_spinbox = self._make_time_spinbox(" h", TIMER_MAX_HOURS)
        self.minutes_spinbox = self._make_time_spinbox(" min", 59)
        self.seconds_spinbox = self._make_time_spinbox(" s", 59)
        for spinbox in (self.hours_spinbox, self.minutes_spinbox, self.seconds_spinbox):
            spin_row.addWidget(spinbox)
        timer_layout.addLayout(spin_row)

        self.save_timer_button = QPushButton(TIMER_SAVE_BUTTON, self)
        self.save_timer_button.clicked.connect(self._handle_save_timer)
        timer_layout.addWidget(self.save_timer_button)

        self.timer_status_label = QLabel("", self)
        self.timer_status_label.setWordWrap(True)
        self.timer_status_label.setVisible(False)
        timer_layout.addWidget(self.timer_status_label)
        timer_layout.addStretch()

        layout.addWidget(timer_group, stretch=1)

        # Upload section
        upload_group = QGroupBox(UPLOAD_GROUP_TITLE, self)
        upload_layout = QVBoxLayout()
        upload_group.setLayout(upload_layout)

        pick_row = QHBoxLayout()
        self.pick_button = QPushButton(UPLOAD_PICK_BUTTON, self)
        self.pick_button.clicked.connect(self._handle_pick_images)
        pick_row.addWidget(self.pick_button)

        self.clear_button = QPushButton(UPLOAD_CLEAR_BUTTON, self)
        self.clear_button.clicked.connect(self._handle_clear_drafts)
        pick_row.addWidget(self.clear_button)
        pick_row.addStretch()
        upload_layout.addLayout(pick_row)

        self.preview_container = QWidget(self)
        self.preview_grid = QGridLayout()
        self.preview_container.setLayout(self.preview_grid)
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.preview_container)
        upload_layout.addWidget(scroll, stretch=1)

        self.upload_button = QPushButton(UPLOAD_ALL_BUTTON, self)
        self.upload_button.setStyleSheet(Styles.get_action_button_style(danger=False))
        self.upload_button.clicked.connect(self._handle_upload_all)
        upload_layout.addWidget(self.upload_button)

        self.upload_status_label = QLabel("", self)
        self.upload_status_label.setVisible(False)
        upload_layout.addWidget(self.upload_status_label)

        layout.addWidget(upload_group, stretch=2)

        self._rebuild_previews()

    def _make_time_spinbox(self, suffix: str, maximum: int) -> QSpinBox:
        spinbox = QSpinBox(self)
        spinbox.setRange(0, maximum)
        spinbox.setSuffix(suffix)
        return spinbox

    # --- Timer ---

    def _handle_save_timer(self) -> None:
        try:
            total = self.admin_manager.set_test_timer(
                self.hours_spinbox.value(),
                self.minutes_spinbox.value(),
                self.seconds_spinbox.value(),
            )
        except InvalidTimerError as exc:
            show_warning(self, "Invalid timer", str(exc))
            return
        except PersistenceError as exc:
            logger.warning("Saving timer failed: %s", exc)
            show_error(self, "Timer not saved", "Failed to set the timer. Please try again.")
            return

        for spinbox in (self.hours_spinbox, self.minutes_spinbox, self.seconds_spinbox):
            spinbox.setValue(0)
        self.timer_status_label.setText(f"{TIMER_SAVED_MESSAGE} ({total} seconds)")
        self.timer_status_label.setStyleSheet(Styles.get_message_style(error=False))
        self.timer_status_label.setVisible(True)

    # --- Drafts ---

    def _handle_pick_images(self) -> None:
        file_paths, _ = QFileDialog.getOpenFileNames(
            self,
            UPLOAD_DIALOG_TITLE,
            str(Path.home()),
            UPLOAD_FILE_FILTER,
        )
        if not file_paths:
            return

        unreadable: list[str] = []
        for file_path in file_paths:
            try:
                self._drafts.append(QuestionDraft.from_file(Path(file_path)))
            except OSError:
                unreadable.append(Path(file_path).name)
        if unreadable:
            show_warning(self, "Some files skipped", "Could not read: " + ", ".join(unreadable))

        self.upload_status_label.setVisible(False)
        self._rebuild_previews()

    def _handle_clear_drafts(self) -> None:
        if not self._drafts:
            return
        if confirm_discard_drafts(self, len(self._drafts)):
            self._drafts = []
            self._rebuild_previews()

    def _rebuild_previews(self) -> None:
        while self.preview_grid.count():
            widget = self.preview_grid.takeAt(0).widget()
            if widget is not None:
                widget.deleteLater()
        for index, draft in enumerate(self._drafts):
            card = QuestionPreviewCard(draft, self.preview_container)
            self.preview_grid.addWidget(card, index // _PREVIEW_COLUMNS, index % _PREVIEW_COLUMNS)

        has_drafts = bool(self._drafts)
        self.upload_button.setVisible(has_drafts)
        self.clear_button.setEnabled(has_drafts)

    # --- Upload ---

    def _handle_upload_all(self) -> None:
        self.upload_button.setEnabled(False)
        self.upload_button.setText(UPLOAD_IN_PROGRESS)
        QGuiApplication.setOverrideCursor(Qt.WaitCursor)
        try:
            uploaded = self.admin_manager.upload_questions(list(self._drafts))
        except NothingToUploadError as exc:
            show_warning(self, "Nothing to upload", str(exc))
            return
        except UploadInterruptedError as exc:
            # Drafts upload in order, so the leading ones are already stored.
            self._drafts = self._drafts[len(exc.uploaded):]
            self._rebuild_previews()
            show_error(self, "Upload failed", f"Some questions failed to upload. Try again.\n\n{exc}")
            return
        finally:
            QGuiApplication.restoreOverrideCursor()
            self.upload_button.setEnabled(True)
            self.upload_button.setText(UPLOAD_ALL_BUTTON)

        self._drafts = []
        self._rebuild_previews()
        self.upload_status_label.setText(f"{UPLOAD_DONE_MESSAGE} ({len(uploaded)} uploaded)")
        self.upload_status_label.setStyleSheet(Styles.get_message_style(error=False))
        self.upload_status_label.setVisible(True)

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        self.pick_button.setStyleSheet(style)
        self.save_timer_button.setStyleSheet(style)
