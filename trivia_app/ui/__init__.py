"""Qt UI components for the trivia host application."""

from .dialog_helpers import (
    confirm_delete,
    confirm_discard_round,
    show_error,
    show_info,
    show_warning,
)
from .host_main_window import HostMainWindow

__all__ = [
    "HostMainWindow",
    "confirm_delete",
    "confirm_discard_round",
    "show_error",
    "show_info",
    "show_warning",
]
