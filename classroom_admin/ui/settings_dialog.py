"""Settings dialog for configuring console preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDoubleSpinBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        store_timeout_seconds: float = 10.0,
        confirm_before_delete: bool = True,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._store_timeout_seconds = store_timeout_seconds
        self._confirm_before_delete = confirm_before_delete

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Appearance
        font_group = QGroupBox("Appearance")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size:")
        ui_font_label.setToolTip("Font size for buttons, tables and labels")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        layout.addWidget(font_group)

        # Backend
        backend_group = QGroupBox("Backend")
        backend_layout = QVBoxLayout()
        backend_group.setLayout(backend_layout)

        timeout_row = QHBoxLayout()
        timeout_label = QLabel("Store call timeout:")
        timeout_label.setToolTip("Requests to the database or file storage taking longer than this are reported as failed.")
        self.timeout_spinbox = QDoubleSpinBox()
        self.timeout_spinbox.setRange(1.0, 120.0)
        self.timeout_spinbox.setSingleStep(1.0)
        self.timeout_spinbox.setDecimals(1)
        self.timeout_spinbox.setSuffix(" s")
        self.timeout_spinbox.setValue(self._store_timeout_seconds)
        timeout_row.addWidget(timeout_label)
        timeout_row.addStretch()
        timeout_row.addWidget(self.timeout_spinbox)
        backend_layout.addLayout(timeout_row)

        self.confirm_delete_checkbox = QCheckBox("Ask for confirmation before deleting results")
        self.confirm_delete_checkbox.setChecked(self._confirm_before_delete)
        backend_layout.addWidget(self.confirm_delete_checkbox)

        layout.addWidget(backend_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        return self.ui_font_spinbox.value()

    def get_store_timeout_seconds(self) -> float:
        """Get the per-call backend timeout in seconds."""
        return self.timeout_spinbox.value()

    def get_confirm_before_delete(self) -> bool:
        return self.confirm_delete_checkbox.isChecked()
