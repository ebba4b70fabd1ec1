"""Component for authoring rounds as numbered text or as question cards."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from PySide6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QStackedWidget,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.ui_constants import (
    CARD_ADD_BUTTON,
    CARD_COLUMN_HEADERS,
    CARD_MOVE_DOWN_BUTTON,
    CARD_MOVE_UP_BUTTON,
    CARD_REMOVE_BUTTON,
    EDITOR_DELETE_BUTTON,
    EDITOR_EXPORT_BUTTON,
    EDITOR_IMPORT_BUTTON,
    EDITOR_MODE_CARDS,
    EDITOR_MODE_MARKDOWN,
    EDITOR_NEW_BUTTON,
    EDITOR_SAVE_BUTTON,
    FORMAT_HELP_TEXT,
    PLACEHOLDER_ROUND_TEXT,
    PLACEHOLDER_ROUND_TITLE,
    PLACEHOLDER_ROUND_TOPIC,
    ROUND_DIALOG_TITLE,
    ROUND_FILE_FILTER,
)
from trivia_app.core.markdown_question_codec import encode
from trivia_app.core.models import QuestionDraft
from trivia_app.core.presentation_manager import PresentationManager
from trivia_app.core.round_drafts import (
    RoundValidationError,
    add_draft,
    count_questions,
    drafts_for_text,
    move_draft,
    remove_draft,
    update_draft,
)
from trivia_app.core.round_file import load_round_from_file, save_round_to_file
from trivia_app.ui.dialog_helpers import (
    confirm_delete,
    confirm_discard_round,
    show_error,
    show_warning,
)

_CARD_FIELDS = ("text", "answer")


class RoundEditorPanel(QWidget):
    """UI component for writing, importing and saving rounds."""

    def __init__(
        self,
        presentation_manager: PresentationManager,
        on_rounds_changed: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.presentation_manager = presentation_manager
        self.on_rounds_changed = on_rounds_changed
        self._round_id: str | None = None
        self._drafts: list[QuestionDraft] = []
        self._cards_mode: bool = False
        self._has_unsaved_changes: bool = False
        self._filling: bool = False

        self._build_ui()
        self.reload_rounds()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Saved rounds and actions
        action_row = QHBoxLayout()
        self.round_combo = QComboBox(self)
        self.round_combo.activated.connect(self._handle_round_selected)
        action_row.addWidget(self.round_combo, stretch=1)

        for text, handler in (
            (EDITOR_NEW_BUTTON, self._handle_new_round),
            (EDITOR_SAVE_BUTTON, self._handle_save_round),
            (EDITOR_DELETE_BUTTON, self._handle_delete_round),
            (EDITOR_IMPORT_BUTTON, self._handle_import),
            (EDITOR_EXPORT_BUTTON, self._handle_export),
        ):
            button = QPushButton(text, self)
            button.clicked.connect(handler)
            action_row.addWidget(button)
        layout.addLayout(action_row)

        # Round metadata
        meta_row = QHBoxLayout()
        self.title_input = QLineEdit(self)
        self.title_input.setPlaceholderText(PLACEHOLDER_ROUND_TITLE)
        self.title_input.textChanged.connect(self._on_input_changed)
        meta_row.addWidget(self.title_input, stretch=2)
        self.topic_input = QLineEdit(self)
        self.topic_input.setPlaceholderText(PLACEHOLDER_ROUND_TOPIC)
        self.topic_input.textChanged.connect(self._on_input_changed)
        meta_row.addWidget(self.topic_input, stretch=1)
        layout.addLayout(meta_row)

        mode_row = QHBoxLayout()
        self.markdown_mode_button = QPushButton(EDITOR_MODE_MARKDOWN, self)
        self.markdown_mode_button.setCheckable(True)
        self.markdown_mode_button.clicked.connect(self._switch_to_markdown)
        mode_row.addWidget(self.markdown_mode_button)
        self.cards_mode_button = QPushButton(EDITOR_MODE_CARDS, self)
        self.cards_mode_button.setCheckable(True)
        self.cards_mode_button.clicked.connect(self._switch_to_cards)
        mode_row.addWidget(self.cards_mode_button)
        mode_row.addStretch()
        layout.addLayout(mode_row)

        self.editor_stack = QStackedWidget(self)

        markdown_page = QWidget(self)
        markdown_layout = QVBoxLayout(markdown_page)
        markdown_layout.addWidget(QLabel(FORMAT_HELP_TEXT, markdown_page))
        self.text_input = QPlainTextEdit(markdown_page)
        self.text_input.setPlaceholderText(PLACEHOLDER_ROUND_TEXT)
        self.text_input.textChanged.connect(self._on_input_changed)
        markdown_layout.addWidget(self.text_input, stretch=1)
        self.editor_stack.addWidget(markdown_page)

        cards_page = QWidget(self)
        cards_layout = QVBoxLayout(cards_page)
        self.card_table = QTableWidget(0, len(CARD_COLUMN_HEADERS), cards_page)
        self.card_table.setHorizontalHeaderLabels(list(CARD_COLUMN_HEADERS))
        self.card_table.horizontalHeader().setStretchLastSection(True)
        self.card_table.cellChanged.connect(self._on_card_changed)
        cards_layout.addWidget(self.card_table, stretch=1)
        card_buttons = QHBoxLayout()
        for text, handler in (
            (CARD_ADD_BUTTON, self._handle_add_card),
            (CARD_MOVE_UP_BUTTON, lambda: self._handle_move_card("up")),
            (CARD_MOVE_DOWN_BUTTON, lambda: self._handle_move_card("down")),
            (CARD_REMOVE_BUTTON, self._handle_remove_card),
        ):
            button = QPushButton(text, cards_page)
            button.clicked.connect(handler)
            card_buttons.addWidget(button)
        cards_layout.addLayout(card_buttons)
        self.editor_stack.addWidget(cards_page)
        layout.addWidget(self.editor_stack, stretch=1)

        self.status_label = QLabel("0 questions", self)
        layout.addWidget(self.status_label)

        self._show_mode()

    def reload_rounds(self) -> None:
        """Refresh the saved round selector from the repository."""
        self.round_combo.clear()
        self.round_combo.addItem("Unsaved round", userData=None)
        for trivia_round in self.presentation_manager.get_repository().list_rounds():
            self.round_combo.addItem(trivia_round.title, userData=trivia_round.id)
        index = self.round_combo.findData(self._round_id)
        self.round_combo.setCurrentIndex(max(index, 0))

    def has_unsaved_changes(self) -> bool:
        return self._has_unsaved_changes

    # --- Editor state ---

    def _current_drafts(self) -> list[QuestionDraft]:
        if self._cards_mode:
            return list(self._drafts)
        return drafts_for_text(self.text_input.toPlainText(), self._drafts)

    def _fill_editors(self, drafts: list[QuestionDraft]) -> None:
        """Show ``drafts`` in both editors without flagging a change."""
        self._filling = True
        try:
            self._drafts = list(drafts)
            self.text_input.setPlainText(encode(drafts) if drafts else "")
            self.card_table.setRowCount(len(drafts))
            for row, draft in enumerate(drafts):
                self.card_table.setItem(row, 0, QTableWidgetItem(draft.text))
                self.card_table.setItem(row, 1, QTableWidgetItem(draft.answer))
        finally:
            self._filling = False
        self._update_count()

    def _update_count(self) -> None:
        if self._cards_mode:
            count = len(self._drafts)
        else:
            count = count_questions(self.text_input.toPlainText())
        self.status_label.setText(f"{count} question{'s' if count != 1 else ''}")

    def _mark_changed(self) -> None:
        self._has_unsaved_changes = True
        self._update_count()

    def _on_input_changed(self) -> None:
        if not self._filling:
            self._mark_changed()

    def _show_mode(self) -> None:
        self.editor_stack.setCurrentIndex(1 if self._cards_mode else 0)
        self.markdown_mode_button.setChecked(not self._cards_mode)
        self.cards_mode_button.setChecked(self._cards_mode)
        self._update_count()

    def _switch_to_markdown(self) -> None:
        if self._cards_mode:
            self._fill_editors(self._drafts)
            self._cards_mode = False
        self._show_mode()

    def _switch_to_cards(self) -> None:
        if not self._cards_mode:
            self._fill_editors(self._current_drafts())
            self._cards_mode = True
        self._show_mode()

    # --- Cards ---

    def _on_card_changed(self, row: int, column: int) -> None:
        if self._filling:
            return
        item = self.card_table.item(row, column)
        value = item.text() if item is not None else ""
        self._drafts = update_draft(self._drafts, row, _CARD_FIELDS[column], value)
        self._mark_changed()

    def _handle_add_card(self) -> None:
        self._fill_editors(add_draft(self._drafts))
        self.card_table.setCurrentCell(len(self._drafts) - 1, 0)
        self._mark_changed()

    def _handle_remove_card(self) -> None:
        row = self.card_table.currentRow()
        if 0 <= row < len(self._drafts):
            self._fill_editors(remove_draft(self._drafts, row))
            self._mark_changed()

    def _handle_move_card(self, direction: str) -> None:
        row = self.card_table.currentRow()
        if not 0 <= row < len(self._drafts):
            return
        self._fill_editors(move_draft(self._drafts, row, direction))
        new_row = max(0, min(len(self._drafts) - 1, row + (-1 if direction == "up" else 1)))
        self.card_table.setCurrentCell(new_row, 0)
        self._mark_changed()

    # --- Round actions ---

    def _load_round(self, round_id: str | None) -> None:
        repository = self.presentation_manager.get_repository()
        self._filling = True
        try:
            if round_id is None:
                self.title_input.clear()
                self.topic_input.clear()
            else:
                trivia_round = repository.get_round(round_id)
                self.title_input.setText(trivia_round.title)
                self.topic_input.setText(trivia_round.topic or "")
        finally:
            self._filling = False
        self._fill_editors(repository.round_drafts(round_id) if round_id is not None else [])
        self._round_id = round_id
        self._has_unsaved_changes = False

    def _handle_round_selected(self, index: int) -> None:
        round_id = self.round_combo.itemData(index)
        if round_id == self._round_id:
            return
        if self._has_unsaved_changes and not confirm_discard_round(self):
            self.round_combo.setCurrentIndex(max(self.round_combo.findData(self._round_id), 0))
            return
        self._load_round(round_id)

    def _handle_new_round(self) -> None:
        if self._has_unsaved_changes and not confirm_discard_round(self):
            return
        self._load_round(None)
        self.round_combo.setCurrentIndex(0)

    def _handle_save_round(self) -> None:
        repository = self.presentation_manager.get_repository()
        try:
            saved = repository.save_round(
                self.title_input.text(),
                self._current_drafts(),
                topic=self.topic_input.text(),
                round_id=self._round_id,
            )
        except RoundValidationError as exc:
            show_warning(self, "Round not saved", str(exc))
            return
        except KeyError as exc:
            show_error(self, "Save failed", f"Could not save round: {exc}")
            return

        self._round_id = saved.id
        self._fill_editors(repository.round_drafts(saved.id))
        self._has_unsaved_changes = False
        self.reload_rounds()
        self.status_label.setText(f"Saved {saved.title!r} with {len(saved.questions)} question(s).")
        self.on_rounds_changed()

    def _handle_delete_round(self) -> None:
        if self._round_id is None:
            return
        repository = self.presentation_manager.get_repository()
        title = repository.get_round(self._round_id).title
        if not confirm_delete(self, "round", title):
            return
        repository.delete_round(self._round_id)
        self._load_round(None)
        self.reload_rounds()
        self.status_label.setText(f"Deleted {title!r}.")
        self.on_rounds_changed()

    def _handle_import(self) -> None:
        if self._has_unsaved_changes and not confirm_discard_round(self):
            return
        file_name, _ = QFileDialog.getOpenFileName(self, ROUND_DIALOG_TITLE, "", ROUND_FILE_FILTER)
        if not file_name:
            return
        path = Path(file_name)
        try:
            drafts = load_round_from_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            show_error(self, "Import failed", f"Could not read {path.name}: {exc}")
            return
        self._load_round(None)
        self.round_combo.setCurrentIndex(0)
        self.title_input.setText(path.stem)
        self._fill_editors(drafts)
        self._mark_changed()

    def _handle_export(self) -> None:
        drafts = self._current_drafts()
        file_name, _ = QFileDialog.getSaveFileName(self, ROUND_DIALOG_TITLE, "", ROUND_FILE_FILTER)
        if not file_name:
            return
        try:
            save_round_to_file(Path(file_name), drafts)
        except (OSError, ValueError) as exc:
            show_error(self, "Export failed", str(exc))
