"""Component for assembling saved rounds into an event."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QComboBox,
    QDateEdit,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.ui_constants import (
    EVENT_ADD_ROUND_BUTTON,
    EVENT_DELETE_BUTTON,
    EVENT_MOVE_DOWN_BUTTON,
    EVENT_MOVE_UP_BUTTON,
    EVENT_NEW_BUTTON,
    EVENT_REMOVE_ROUND_BUTTON,
    EVENT_SAVE_BUTTON,
    PLACEHOLDER_EVENT_TITLE,
)
from trivia_app.core.presentation_manager import PresentationManager
from trivia_app.core.round_drafts import move_item
from trivia_app.ui.dialog_helpers import confirm_delete, show_warning


class EventEditorPanel(QWidget):
    """UI component for naming, dating and ordering the rounds of an event."""

    def __init__(
        self,
        presentation_manager: PresentationManager,
        on_events_changed: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.presentation_manager = presentation_manager
        self.on_events_changed = on_events_changed
        self._event_id: str | None = None
        self._round_ids: list[str] = []

        self._build_ui()
        self.reload()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        selector_row = QHBoxLayout()
        self.event_combo = QComboBox(self)
        self.event_combo.activated.connect(self._handle_event_selected)
        selector_row.addWidget(self.event_combo, stretch=1)
        self.new_button = QPushButton(EVENT_NEW_BUTTON, self)
        self.new_button.clicked.connect(lambda: self._load_event(None))
        selector_row.addWidget(self.new_button)
        self.save_button = QPushButton(EVENT_SAVE_BUTTON, self)
        self.save_button.clicked.connect(self._handle_save)
        selector_row.addWidget(self.save_button)
        self.delete_button = QPushButton(EVENT_DELETE_BUTTON, self)
        self.delete_button.clicked.connect(self._handle_delete)
        selector_row.addWidget(self.delete_button)
        layout.addLayout(selector_row)

        meta_row = QHBoxLayout()
        self.title_input = QLineEdit(self)
        self.title_input.setPlaceholderText(PLACEHOLDER_EVENT_TITLE)
        meta_row.addWidget(self.title_input, stretch=1)
        self.date_input = QDateEdit(QDate.currentDate(), self)
        self.date_input.setCalendarPopup(True)
        meta_row.addWidget(self.date_input)
        layout.addLayout(meta_row)

        picker_row = QHBoxLayout()
        self.available_combo = QComboBox(self)
        picker_row.addWidget(self.available_combo, stretch=1)
        self.add_round_button = QPushButton(EVENT_ADD_ROUND_BUTTON, self)
        self.add_round_button.clicked.connect(self._handle_add_round)
        picker_row.addWidget(self.add_round_button)
        layout.addLayout(picker_row)

        self.round_list = QListWidget(self)
        layout.addWidget(self.round_list, stretch=1)

        order_row = QHBoxLayout()
        for text, handler in (
            (EVENT_MOVE_UP_BUTTON, lambda: self._handle_move("up")),
            (EVENT_MOVE_DOWN_BUTTON, lambda: self._handle_move("down")),
            (EVENT_REMOVE_ROUND_BUTTON, self._handle_remove_round),
        ):
            button = QPushButton(text, self)
            button.clicked.connect(handler)
            order_row.addWidget(button)
        layout.addLayout(order_row)

        self.status_label = QLabel("", self)
        layout.addWidget(self.status_label)

    def reload(self) -> None:
        """Refresh the event and round selectors from the repository."""
        repository = self.presentation_manager.get_repository()
        self.event_combo.clear()
        self.event_combo.addItem("New event", userData=None)
        for event in repository.list_events():
            self.event_combo.addItem(f"{event.title} ({event.date.isoformat()})", userData=event.id)
        self.event_combo.setCurrentIndex(max(self.event_combo.findData(self._event_id), 0))

        self.available_combo.clear()
        for trivia_round in repository.list_rounds():
            self.available_combo.addItem(
                f"{trivia_round.title} ({len(trivia_round.questions)} questions)",
                userData=trivia_round.id,
            )
        known = {trivia_round.id for trivia_round in repository.list_rounds()}
        self._round_ids = [round_id for round_id in self._round_ids if round_id in known]
        self._refresh_round_list()

    def _load_event(self, event_id: str | None) -> None:
        repository = self.presentation_manager.get_repository()
        event = repository.load_event(event_id) if event_id is not None else None
        if event is None:
            self._event_id = None
            self.title_input.clear()
            self.date_input.setDate(QDate.currentDate())
            self._round_ids = []
            self.event_combo.setCurrentIndex(0)
        else:
            self._event_id = event.id
            self.title_input.setText(event.title)
            self.date_input.setDate(QDate(event.date.year, event.date.month, event.date.day))
            self._round_ids = [trivia_round.id for trivia_round in event.rounds]
        self._refresh_round_list()

    def _handle_event_selected(self, index: int) -> None:
        self._load_event(self.event_combo.itemData(index))

    def _handle_add_round(self) -> None:
        round_id = self.available_combo.currentData()
        if round_id is None or round_id in self._round_ids:
            return
        self._round_ids.append(round_id)
        self._refresh_round_list()

    def _handle_remove_round(self) -> None:
        row = self.round_list.currentRow()
        if 0 <= row < len(self._round_ids):
            del self._round_ids[row]
            self._refresh_round_list()

    def _handle_move(self, direction: str) -> None:
        row = self.round_list.currentRow()
        if not 0 <= row < len(self._round_ids):
            return
        self._round_ids = move_item(self._round_ids, row, direction)
        self._refresh_round_list()
        self.round_list.setCurrentRow(max(0, min(len(self._round_ids) - 1, row + (-1 if direction == "up" else 1))))

    def _handle_save(self) -> None:
        try:
            saved = self.presentation_manager.get_repository().save_event(
                self.title_input.text(),
                self.date_input.date().toPython(),
                self._round_ids,
                event_id=self._event_id,
            )
        except (ValueError, KeyError) as exc:
            show_warning(self, "Event not saved", str(exc))
            return
        self._event_id = saved.id
        self.reload()
        self.status_label.setText(f"Saved {saved.title!r} with {len(saved.rounds)} round(s).")
        self.on_events_changed()

    def _handle_delete(self) -> None:
        if self._event_id is None:
            return
        repository = self.presentation_manager.get_repository()
        event = repository.load_event(self._event_id)
        if event is None or not confirm_delete(self, "event", event.title):
            return
        repository.delete_event(event.id)
        self._load_event(None)
        self.reload()
        self.status_label.setText(f"Deleted {event.title!r}.")
        self.on_events_changed()

    def _refresh_round_list(self) -> None:
        repository = self.presentation_manager.get_repository()
        self.round_list.clear()
        for position, round_id in enumerate(self._round_ids, start=1):
            trivia_round = repository.get_round(round_id)
            self.round_list.addItem(f"Round {position}: {trivia_round.title}")
