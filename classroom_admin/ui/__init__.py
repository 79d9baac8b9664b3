"""Qt UI components for the admin console."""

from .admin_main_window import AdminMainWindow
from .dialog_helpers import (
    confirm_delete_results,
    confirm_discard_drafts,
    confirm_replace_live,
    show_error,
    show_info,
    show_warning,
)

__all__ = [
    "AdminMainWindow",
    "confirm_delete_results",
    "confirm_discard_drafts",
    "confirm_replace_live",
    "show_error",
    "show_info",
    "show_warning",
]
