"""Navigation state machine for a live presentation.

Every transition goes through :func:`reduce`, which takes the deck, the current
:class:`NavigatorState` and an action and returns the next state. The
:class:`PresentationNavigator` wrapper keeps the current state for a session and
derives the read-only view the renderers need.

Review mode is scoped to one round: advancing on one of its question slides
first reveals the answer, and only the next advance moves on. Outside review
mode the answer is never surfaced; the host reads it out loud.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from trivia_app.core.models import (
    NavigatorState,
    QuestionSlide,
    RoundIndexEntry,
    Slide,
    SlideDeck,
)


@dataclass(frozen=True, slots=True)
class Advance:
    pass


@dataclass(frozen=True, slots=True)
class Retreat:
    pass


@dataclass(frozen=True, slots=True)
class JumpToRound:
    round_number: int


@dataclass(frozen=True, slots=True)
class ReviewRound:
    round_number: int


@dataclass(frozen=True, slots=True)
class Exit:
    pass


NavigatorAction = Union[Advance, Retreat, JumpToRound, ReviewRound, Exit]

_ADVANCE_KEYS = frozenset({"ArrowRight", "Right", " ", "Space", "Enter", "Return"})
_RETREAT_KEYS = frozenset({"ArrowLeft", "Left"})
_EXIT_KEYS = frozenset({"Escape"})


def action_for_key(key_name: str) -> NavigatorAction | None:
    """Map a key name to the action it triggers, or ``None`` if unbound."""
    if key_name in _ADVANCE_KEYS:
        return Advance()
    if key_name in _RETREAT_KEYS:
        return Retreat()
    if key_name in _EXIT_KEYS:
        return Exit()
    return None


def reduce(deck: SlideDeck, state: NavigatorState, action: NavigatorAction) -> NavigatorState:
    """Return the state that follows ``state`` after ``action``."""
    if isinstance(action, Advance):
        return _advance(deck, state)
    if isinstance(action, Retreat):
        if state.current_index > 0:
            return replace(state, current_index=state.current_index - 1, answer_revealed=False)
        return state
    if isinstance(action, JumpToRound):
        entry = deck.find_round(action.round_number)
        if entry is None:
            return state
        return NavigatorState(
            current_index=entry.start_slide_index,
            reviewing_round=None,
            answer_revealed=False,
        )
    if isinstance(action, ReviewRound):
        entry = deck.find_round(action.round_number)
        # A round without questions has nothing to review.
        if entry is None or entry.question_count == 0:
            return state
        return NavigatorState(
            current_index=entry.start_slide_index + 1,
            reviewing_round=action.round_number,
            answer_revealed=False,
        )
    if isinstance(action, Exit):
        return state
    raise TypeError(f"Unsupported navigator action: {action!r}")


def _advance(deck: SlideDeck, state: NavigatorState) -> NavigatorState:
    slide = deck.slides[state.current_index]
    if (
        state.reviewing_round is not None
        and isinstance(slide, QuestionSlide)
        and not state.answer_revealed
    ):
        return replace(state, answer_revealed=True)
    if state.current_index < deck.slide_count - 1:
        return replace(state, current_index=state.current_index + 1, answer_revealed=False)
    return state


@dataclass(frozen=True, slots=True)
class RoundButton:
    """A round tab or review button in the navigation bar."""

    round_number: int
    title: str
    is_active: bool


@dataclass(frozen=True, slots=True)
class PresentationView:
    """Everything a renderer needs to draw the current slide."""

    current_slide: Slide
    current_index: int
    slide_count: int
    reviewing_round: int | None
    answer_revealed: bool
    in_review_mode: bool
    should_show_answer: bool
    exit_requested: bool
    round_tabs: tuple[RoundButton, ...]
    review_buttons: tuple[RoundButton, ...]

    @property
    def counter_text(self) -> str:
        return f"{self.current_index + 1} / {self.slide_count}"


class PresentationNavigator:
    """Holds the navigation state of one presentation session."""

    def __init__(self, deck: SlideDeck) -> None:
        if not deck.slides:
            raise ValueError("Cannot present an empty slide deck.")
        self._deck = deck
        self._state = NavigatorState()
        self._exit_requested: bool = False

    @property
    def deck(self) -> SlideDeck:
        return self._deck

    @property
    def state(self) -> NavigatorState:
        return self._state

    def dispatch(self, action: NavigatorAction) -> NavigatorState:
        if isinstance(action, Exit):
            self._exit_requested = True
        self._state = reduce(self._deck, self._state, action)
        return self._state

    def advance(self) -> NavigatorState:
        return self.dispatch(Advance())

    def retreat(self) -> NavigatorState:
        return self.dispatch(Retreat())

    def jump_to_round(self, round_number: int) -> NavigatorState:
        return self.dispatch(JumpToRound(round_number))

    def review_round(self, round_number: int) -> NavigatorState:
        return self.dispatch(ReviewRound(round_number))

    def exit(self) -> NavigatorState:
        return self.dispatch(Exit())

    def current_slide(self) -> Slide:
        return self._deck.slides[self._state.current_index]

    def in_review_mode(self) -> bool:
        reviewing = self._state.reviewing_round
        return reviewing is not None and self.current_slide().round_number == reviewing

    def should_show_answer(self) -> bool:
        return self.in_review_mode() and self._state.answer_revealed

    def get_view(self) -> PresentationView:
        slide = self.current_slide()
        reviewing = self._state.reviewing_round
        return PresentationView(
            current_slide=slide,
            current_index=self._state.current_index,
            slide_count=self._deck.slide_count,
            reviewing_round=reviewing,
            answer_revealed=self._state.answer_revealed,
            in_review_mode=self.in_review_mode(),
            should_show_answer=self.should_show_answer(),
            exit_requested=self._exit_requested,
            round_tabs=tuple(
                _button(entry, slide.round_number == entry.round_number and reviewing is None)
                for entry in self._deck.round_index
            ),
            review_buttons=tuple(
                _button(entry, reviewing == entry.round_number)
                for entry in self._deck.round_index
            ),
        )


def _button(entry: RoundIndexEntry, is_active: bool) -> RoundButton:
    return RoundButton(round_number=entry.round_number, title=entry.title, is_active=is_active)
