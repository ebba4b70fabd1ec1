"""Qt main window switching between round editing, event editing and presenting."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.about import APP_NAME, APP_VERSION
from trivia_app.constants.network_constants import AUDIENCE_POLL_INTERVAL_MS
from trivia_app.constants.ui_constants import (
    LIBRARY_DIALOG_TITLE,
    LIBRARY_FILE_FILTER,
    MODE_BUTTON_EDIT,
    MODE_BUTTON_EVENTS,
    MODE_BUTTON_OPEN_LIBRARY,
    MODE_BUTTON_PRESENT,
    MODE_BUTTON_SAVE_LIBRARY,
    NO_EVENTS_MESSAGE,
    WINDOW_TITLE,
)
from trivia_app.core.library_file import LibraryImportError, load_library, save_library
from trivia_app.core.presentation_manager import PresentationManager
from trivia_app.ui.components.event_editor_panel import EventEditorPanel
from trivia_app.ui.components.presentation_panel import PresentationPanel
from trivia_app.ui.components.round_editor_panel import RoundEditorPanel
from trivia_app.ui.dialog_helpers import confirm_discard_round, show_error, show_info


class HostMode(Enum):
    """High-level UI mode for the host console."""

    ROUND_EDITING = auto()
    EVENT_EDITING = auto()
    PRESENTING = auto()


class HostMainWindow(QMainWindow):
    """Main Qt window orchestrating the editing and presenting modes."""

    def __init__(
        self,
        presentation_manager: PresentationManager,
        audience_url: str | None = None,
        library_path: Path | None = None,
    ) -> None:
        super().__init__()
        title = f"{WINDOW_TITLE} {APP_VERSION}"
        if audience_url:
            title += f" | Audience: {audience_url}"
        self.setWindowTitle(title)

        self.presentation_manager = presentation_manager
        self._library_path = library_path
        self._mode = HostMode.ROUND_EDITING

        self._configure_refresh_timer()
        self._build_ui()
        self._reload_events()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        button_row = QHBoxLayout()
        self.edit_mode_button = QPushButton(MODE_BUTTON_EDIT, self)
        self.edit_mode_button.setCheckable(True)
        self.edit_mode_button.clicked.connect(self._handle_edit_mode)
        button_row.addWidget(self.edit_mode_button)

        self.events_mode_button = QPushButton(MODE_BUTTON_EVENTS, self)
        self.events_mode_button.setCheckable(True)
        self.events_mode_button.clicked.connect(self._handle_events_mode)
        button_row.addWidget(self.events_mode_button)

        self.event_combo = QComboBox(self)
        button_row.addWidget(self.event_combo, stretch=1)

        self.present_button = QPushButton(MODE_BUTTON_PRESENT, self)
        self.present_button.setCheckable(True)
        self.present_button.clicked.connect(self._handle_present)
        button_row.addWidget(self.present_button)

        self.open_library_button = QPushButton(MODE_BUTTON_OPEN_LIBRARY, self)
        self.open_library_button.clicked.connect(self._handle_open_library)
        button_row.addWidget(self.open_library_button)

        self.save_library_button = QPushButton(MODE_BUTTON_SAVE_LIBRARY, self)
        self.save_library_button.clicked.connect(self._handle_save_library)
        button_row.addWidget(self.save_library_button)
        root_layout.addLayout(button_row)

        self.mode_stack = QStackedWidget(self)
        self.editor_panel = RoundEditorPanel(
            self.presentation_manager,
            on_rounds_changed=self._handle_rounds_changed,
            parent=self,
        )
        self.event_panel = EventEditorPanel(
            self.presentation_manager,
            on_events_changed=self._reload_events,
            parent=self,
        )
        self.presentation_panel = PresentationPanel(
            self.presentation_manager,
            on_exit=self._handle_presentation_exit,
            parent=self,
        )
        self.mode_stack.addWidget(self.editor_panel)
        self.mode_stack.addWidget(self.event_panel)
        self.mode_stack.addWidget(self.presentation_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(HostMode.ROUND_EDITING)

    def _configure_refresh_timer(self) -> None:
        # Audience devices can navigate through the API as well.
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(AUDIENCE_POLL_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_presentation)

    def _set_mode(self, mode: HostMode) -> None:
        self._mode = mode
        presenting = mode == HostMode.PRESENTING
        panels = {
            HostMode.ROUND_EDITING: self.editor_panel,
            HostMode.EVENT_EDITING: self.event_panel,
            HostMode.PRESENTING: self.presentation_panel,
        }
        self.mode_stack.setCurrentWidget(panels[mode])
        self.edit_mode_button.setChecked(mode == HostMode.ROUND_EDITING)
        self.events_mode_button.setChecked(mode == HostMode.EVENT_EDITING)
        self.present_button.setChecked(presenting)
        self.event_combo.setEnabled(not presenting)
        self.open_library_button.setEnabled(not presenting)
        if presenting:
            self.refresh_timer.start()
        else:
            self.refresh_timer.stop()

    def _reload_events(self) -> None:
        self.event_combo.clear()
        for event in self.presentation_manager.get_repository().list_events():
            self.event_combo.addItem(f"{event.title} ({event.date.isoformat()})", userData=event.id)

    def _handle_rounds_changed(self) -> None:
        self.event_panel.reload()
        self._reload_events()

    def _handle_edit_mode(self) -> None:
        if self._mode == HostMode.PRESENTING:
            self.presentation_manager.end_presentation()
        self._set_mode(HostMode.ROUND_EDITING)

    def _handle_events_mode(self) -> None:
        if self._mode == HostMode.PRESENTING:
            self.presentation_manager.end_presentation()
        self.event_panel.reload()
        self._set_mode(HostMode.EVENT_EDITING)

    def _handle_present(self) -> None:
        event_id = self.event_combo.currentData()
        if event_id is None:
            show_info(self, "No event", NO_EVENTS_MESSAGE)
            self._set_mode(self._mode)
            return
        if not self.presentation_panel.start(event_id):
            self._set_mode(HostMode.ROUND_EDITING)
            return
        self._set_mode(HostMode.PRESENTING)

    def _handle_presentation_exit(self) -> None:
        self._set_mode(HostMode.ROUND_EDITING)

    def _refresh_presentation(self) -> None:
        if not self.presentation_manager.has_active_presentation():
            self._set_mode(HostMode.ROUND_EDITING)
            return
        self.presentation_panel.refresh()

    def _handle_open_library(self) -> None:
        if self.editor_panel.has_unsaved_changes() and not confirm_discard_round(self):
            return
        file_name, _ = QFileDialog.getOpenFileName(self, LIBRARY_DIALOG_TITLE, "", LIBRARY_FILE_FILTER)
        if file_name:
            self.open_library(Path(file_name))

    def open_library(self, path: Path) -> bool:
        try:
            repository = load_library(path)
        except (LibraryImportError, OSError) as exc:
            show_error(self, "Open failed", str(exc))
            return False
        self.presentation_manager.replace_repository(repository)
        self._library_path = path
        self.editor_panel.reload_rounds()
        self.event_panel.reload()
        self._reload_events()
        self.setWindowTitle(f"{APP_NAME} - {path.name}")
        return True

    def _handle_save_library(self) -> None:
        path = self._library_path
        if path is None:
            file_name, _ = QFileDialog.getSaveFileName(self, LIBRARY_DIALOG_TITLE, "", LIBRARY_FILE_FILTER)
            if not file_name:
                return
            path = Path(file_name)
        try:
            save_library(path, self.presentation_manager.get_repository())
        except OSError as exc:
            show_error(self, "Save failed", str(exc))
            return
        self._library_path = path
        show_info(self, "Library saved", f"Saved library to {path}.")
