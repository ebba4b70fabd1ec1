"""Editing helpers for the question drafts of a round.

All helpers return a new list and leave the input untouched, so the editor can
keep the previous list around until the user confirms a change.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TypeVar

from trivia_app.core.markdown_question_codec import decode, encode
from trivia_app.core.models import QuestionDraft

_EDITABLE_FIELDS = ("text", "answer")

T = TypeVar("T")


class RoundValidationError(ValueError):
    """Raised when a round is not complete enough to be saved."""


def add_draft(drafts: list[QuestionDraft]) -> list[QuestionDraft]:
    return [*drafts, QuestionDraft(text="", answer="", is_new=True)]


def update_draft(
    drafts: list[QuestionDraft], index: int, field: str, value: str
) -> list[QuestionDraft]:
    if field not in _EDITABLE_FIELDS:
        raise ValueError(f"Unknown draft field '{field}'.")
    _check_index(drafts, index)
    updated = list(drafts)
    updated[index] = replace(drafts[index], **{field: value})
    return updated


def remove_draft(drafts: list[QuestionDraft], index: int) -> list[QuestionDraft]:
    _check_index(drafts, index)
    return [draft for position, draft in enumerate(drafts) if position != index]


def move_draft(drafts: list[QuestionDraft], index: int, direction: str) -> list[QuestionDraft]:
    return move_item(drafts, index, direction)


def move_item(items: list[T], index: int, direction: str) -> list[T]:
    """Swap an item with its neighbour; moving past either end does nothing."""
    if direction not in ("up", "down"):
        raise ValueError("Direction must be 'up' or 'down'.")
    _check_index(items, index)
    if (direction == "up" and index == 0) or (direction == "down" and index == len(items) - 1):
        return list(items)

    new_index = index - 1 if direction == "up" else index + 1
    updated = list(items)
    updated[index], updated[new_index] = updated[new_index], updated[index]
    return updated


def drafts_for_text(text: str, loaded: list[QuestionDraft]) -> list[QuestionDraft]:
    """Drafts the editor text stands for.

    Text that is still the encoding of ``loaded`` gives ``loaded`` back, so
    saved ids survive a switch of editor mode or an unchanged save.
    """
    if loaded and text.strip() == encode(loaded):
        return list(loaded)
    return decode(text)


def count_questions(text: str) -> int:
    """Number of questions the editor text currently decodes to."""
    return len(decode(text))


def validate_round(title: str, drafts: list[QuestionDraft]) -> None:
    """Check a round before it is handed to the repository."""
    if not title.strip():
        raise RoundValidationError("Round title is required")
    if not drafts:
        raise RoundValidationError("Add at least one question")
    for draft in drafts:
        if not draft.text.strip() or not draft.answer.strip():
            raise RoundValidationError("All questions must have text and an answer")


def _check_index(items: list, index: int) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"Index {index} out of range")
