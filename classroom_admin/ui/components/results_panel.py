"""Component for reviewing, deleting and printing student results."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QTextDocument
from PySide6.QtPrintSupport import QPrintPreviewDialog, QPrinter
from PySide6.QtWidgets import (
    QAbstractItemView,
    QCheckBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from classroom_admin.constants.ui_constants import (
    RESULTS_COLUMNS,
    RESULTS_COUNT_TEMPLATE,
    RESULTS_DELETE_BUTTON,
    RESULTS_EMPTY_STATE,
    RESULTS_PRINT_BUTTON,
    RESULTS_REFRESH_BUTTON,
    RESULTS_SELECT_ALL,
)
from classroom_admin.core.admin_manager import AdminManager
from classroom_admin.core.errors import (
    EmptySelectionError,
    PartialDeleteFailure,
    PersistenceError,
)
from classroom_admin.core.models import StudentResult
from classroom_admin.core.report_renderer import ResultsReportRenderer
from classroom_admin.ui.dialog_helpers import (
    confirm_delete_results,
    show_error,
    show_info,
    show_warning,
)
from classroom_admin.styling.styles import Styles

logger = logging.getLogger(__name__)

_ID_ROLE = Qt.UserRole


class ResultsPanel(QWidget):
    """UI component showing the deduplicated results with bulk actions."""

    def __init__(self, admin_manager: AdminManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.admin_manager = admin_manager
        self.confirm_before_delete: bool = True
        self._populating: bool = False
        self._cell_renderer = ResultsReportRenderer()

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel("Student Results", self)
        title.setStyleSheet(Styles.get_large_label_style())
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        action_row = QHBoxLayout()
        self.select_all_checkbox = QCheckBox(RESULTS_SELECT_ALL, self)
        self.select_all_checkbox.clicked.connect(self._handle_select_all)
        action_row.addWidget(self.select_all_checkbox)

        self.count_label = QLabel("", self)
        action_row.addWidget(self.count_label)
        action_row.addStretch()

        self.refresh_button = QPushButton(RESULTS_REFRESH_BUTTON, self)
        self.refresh_button.clicked.connect(self.reload_results)
        action_row.addWidget(self.refresh_button)

        self.delete_button = QPushButton(RESULTS_DELETE_BUTTON, self)
        self.delete_button.setStyleSheet(Styles.get_action_button_style(danger=True))
        self.delete_button.clicked.connect(self._handle_delete_selected)
        action_row.addWidget(self.delete_button)

        self.print_button = QPushButton(RESULTS_PRINT_BUTTON, self)
        self.print_button.setStyleSheet(Styles.get_action_button_style(danger=False))
        self.print_button.clicked.connect(self._handle_print)
        action_row.addWidget(self.print_button)

        layout.addLayout(action_row)

        self.table = QTableWidget(0, len(RESULTS_COLUMNS), self)
        self.table.setHorizontalHeaderLabels(list(RESULTS_COLUMNS))
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.NoSelection)
        self.table.setAlternatingRowColors(True)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.Stretch)
        self.table.itemChanged.connect(self._handle_item_changed)
        layout.addWidget(self.table, stretch=1)

        self.empty_label = QLabel(RESULTS_EMPTY_STATE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

    # --- Loading ---

    def reload_results(self) -> None:
        """Fetch a fresh snapshot; the selection always starts empty."""
        try:
            results = self.admin_manager.refresh_results()
        except PersistenceError as exc:
            logger.warning("Loading results failed: %s", exc)
            show_error(self, "Loading failed", f"Could not load results.\n\n{exc}")
            results = self.admin_manager.get_loaded_results()
        self._populate(results)

    def _populate(self, results: list[StudentResult]) -> None:
        self._populating = True
        try:
            selected = self.admin_manager.get_selected_ids()
            self.table.setRowCount(len(results))
            for row, (result, cells) in enumerate(zip(results, self._cell_renderer.report_rows(results))):
                check_item = QTableWidgetItem()
                check_item.setFlags(Qt.ItemIsUserCheckable | Qt.ItemIsEnabled)
                check_item.setCheckState(Qt.Checked if result.id in selected else Qt.Unchecked)
                check_item.setData(_ID_ROLE, result.id)
                self.table.setItem(row, 0, check_item)
                for column, text in enumerate(cells, start=1):
                    self.table.setItem(row, column, QTableWidgetItem(text))
        finally:
            self._populating = False

        has_results = bool(results)
        self.table.setVisible(has_results)
        self.empty_label.setVisible(not has_results)
        self.select_all_checkbox.setEnabled(has_results)
        self.delete_button.setEnabled(has_results)
        self._sync_selection_widgets()

    # --- Selection ---

    def _handle_item_changed(self, item: QTableWidgetItem) -> None:
        if self._populating or item.column() != 0:
            return
        result_id = item.data(_ID_ROLE)
        is_checked = item.checkState() == Qt.Checked
        if is_checked != (result_id in self.admin_manager.get_selected_ids()):
            self.admin_manager.toggle_result(result_id)
        self._sync_selection_widgets()

    def _handle_select_all(self) -> None:
        self.admin_manager.toggle_all_results()
        self._populate(self.admin_manager.get_loaded_results())

    def _sync_selection_widgets(self) -> None:
        selected_count = len(self.admin_manager.get_selected_ids())
        self.select_all_checkbox.setChecked(self.admin_manager.is_all_selected())
        self.count_label.setText(
            RESULTS_COUNT_TEMPLATE.format(count=self.table.rowCount(), selected=selected_count)
        )

    # --- Actions ---

    def _handle_delete_selected(self) -> None:
        selected = self.admin_manager.get_selected_ids()
        if not selected:
            show_warning(self, "Nothing selected", "No results selected!")
            return
        if self.confirm_before_delete and not confirm_delete_results(self, len(selected)):
            return

        try:
            batch = self.admin_manager.delete_selected_results()
        except EmptySelectionError:
            show_warning(self, "Nothing selected", "No results selected!")
            return
        except PartialDeleteFailure as exc:
            show_warning(
                self,
                "Some deletes failed",
                f"{exc}\n\nThe list has been reloaded to show what remains.",
            )
        else:
            show_info(self, "Results deleted", f"Deleted {len(batch.outcomes)} result(s).")
        self.reload_results()

    def _handle_print(self) -> None:
        html = self.admin_manager.build_loaded_report()
        document = QTextDocument(self)
        document.setHtml(html)

        printer = QPrinter(QPrinter.PrinterMode.HighResolution)
        preview = QPrintPreviewDialog(printer, self)
        preview.setWindowTitle("Print Student Results")
        preview.paintRequested.connect(document.print_)
        preview.exec()

    def apply_font_size(self, font_size: int) -> None:
        self.table.setStyleSheet(f"font-size: {font_size}pt;")
        self.count_label.setStyleSheet(f"font-size: {font_size}pt;")
