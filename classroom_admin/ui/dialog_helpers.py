"""Helper functions for common dialog patterns in the admin UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def _ask_yes_no(parent: QWidget, title: str, message: str) -> bool:
    reply = QMessageBox.question(
        parent,
        title,
        message,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def confirm_delete_results(parent: QWidget, count: int) -> bool:
    """Ask before deleting selected results.

    Args:
        parent: Parent widget for the dialog
        count: Number of selected results

    Returns:
        True if user confirmed, False otherwise
    """
    return _ask_yes_no(
        parent,
        "Confirm Delete",
        f"Are you sure you want to delete {count} selected result(s)? This cannot be undone.",
    )


def confirm_replace_live(parent: QWidget) -> bool:
    """Ask before replacing a stream that is already live."""
    return _ask_yes_no(
        parent,
        "Class Already Live",
        "A class is already live. Replace it with the new link?",
    )


def confirm_discard_drafts(parent: QWidget, count: int) -> bool:
    """Ask before clearing picked question images that were not uploaded."""
    return _ask_yes_no(
        parent,
        "Discard Questions",
        f"Discard {count} question(s) that have not been uploaded?",
    )


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)
