"""Message boxes shared by the host panels."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def confirm_discard_round(parent: QWidget) -> bool:
    """Ask before throwing away the round currently in the editor.

    Args:
        parent: Widget the message box is centred on

    Returns:
        True when the host chose to discard the edits
    """
    reply = QMessageBox.question(
        parent,
        "Discard Changes",
        "The round in the editor has unsaved changes. Discard them?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Report a failed file operation or a missing event."""
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    """Report input the host can fix, such as a round failing validation."""
    QMessageBox.warning(parent, title, message)


def confirm_delete(parent: QWidget, kind: str, name: str) -> bool:
    """Ask before deleting a saved round or event from the library."""
    reply = QMessageBox.question(
        parent,
        "Confirm Delete",
        f"Delete the {kind} {name!r} from the library?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes
