"""Domain models for the trivia application."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Union


@dataclass(slots=True)
class QuestionDraft:
    """Authored question before (or after) it is persisted.

    Drafts produced by decoding text never carry an ``id``; drafts loaded
    from a saved round carry the persisted id and ``is_new=False``.
    """

    text: str
    answer: str
    id: str | None = None
    is_new: bool = True


@dataclass(frozen=True, slots=True)
class ParsedQuestionText:
    """Question stem plus the multiple-choice options found in its text."""

    stem: str
    options: list[str]


@dataclass(slots=True)
class Question:
    """Saved question as read back from the repository."""

    id: str
    text: str
    answer: str
    position: int | None = None  # 1-based position inside its round
    topic: str | None = None


@dataclass(slots=True)
class Round:
    """Named, ordered collection of questions."""

    id: str
    title: str
    topic: str | None = None
    questions: list[Question] = field(default_factory=list)
    position: int | None = None  # 1-based position inside an event


EVENT_STATUSES = ("draft", "active", "completed")


@dataclass(slots=True)
class Event:
    """A trivia night: a dated, ordered list of rounds."""

    id: str
    title: str
    date: date
    rounds: list[Round] = field(default_factory=list)
    status: str = "draft"


@dataclass(frozen=True, slots=True)
class CoverSlide:
    title: str
    formatted_date: str

    @property
    def round_number(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class RoundIntroSlide:
    round_number: int
    round_title: str


@dataclass(frozen=True, slots=True)
class QuestionSlide:
    round_number: int
    question_number: int
    question_text: str
    answer: str


Slide = Union[CoverSlide, RoundIntroSlide, QuestionSlide]


@dataclass(frozen=True, slots=True)
class RoundIndexEntry:
    """Where a round starts in the deck, used for round tabs and reviews."""

    round_number: int
    title: str
    start_slide_index: int
    question_count: int


@dataclass(frozen=True, slots=True)
class SlideDeck:
    """Immutable slide sequence built for one presentation session."""

    slides: tuple[Slide, ...]
    round_index: tuple[RoundIndexEntry, ...]

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    def find_round(self, round_number: int) -> RoundIndexEntry | None:
        return next(
            (entry for entry in self.round_index if entry.round_number == round_number),
            None,
        )


@dataclass(frozen=True, slots=True)
class NavigatorState:
    """Position of a presentation session inside its deck."""

    current_index: int = 0
    reviewing_round: int | None = None
    answer_revealed: bool = False
