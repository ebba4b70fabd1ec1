"""Business logic for the presentation shared between the host UI and the API."""

from __future__ import annotations

import logging
from threading import Lock

from trivia_app.core.models import RoundIndexEntry
from trivia_app.core.services.presentation_navigator import (
    Advance,
    Exit,
    JumpToRound,
    NavigatorAction,
    PresentationNavigator,
    PresentationView,
    Retreat,
    ReviewRound,
    action_for_key,
)
from trivia_app.core.services.slide_deck_builder import build
from trivia_app.core.services.trivia_repository import TriviaRepository

logger = logging.getLogger(__name__)


class EventNotFoundError(LookupError):
    """Raised when an event cannot be loaded for presenting."""


class PresentationManager:
    """Facade over the repository and the navigator of the running session."""

    def __init__(self, repository: TriviaRepository) -> None:
        self._lock = Lock()
        self._repository = repository
        self._navigator: PresentationNavigator | None = None
        self._event_id: str | None = None

    # --- Library ---

    def get_repository(self) -> TriviaRepository:
        return self._repository

    def replace_repository(self, repository: TriviaRepository) -> None:
        with self._lock:
            self._repository = repository
            self._navigator = None
            self._event_id = None

    # --- Session lifecycle ---

    def start_presentation(self, event_id: str) -> PresentationView:
        """Build a fresh deck for ``event_id`` and start at its cover slide."""
        with self._lock:
            event = self._repository.load_event(event_id)
            if event is None:
                raise EventNotFoundError(f"Event {event_id!r} was not found.")
            deck = build(event)
            self._navigator = PresentationNavigator(deck)
            self._event_id = event_id
            logger.info(
                "Presenting %r: %d slide(s) across %d round(s)",
                event.title,
                deck.slide_count,
                len(deck.round_index),
            )
            return self._navigator.get_view()

    def end_presentation(self) -> None:
        with self._lock:
            if self._navigator is not None:
                logger.info("Presentation of event %s ended", self._event_id)
            self._navigator = None
            self._event_id = None

    def has_active_presentation(self) -> bool:
        with self._lock:
            return self._navigator is not None

    def get_view(self) -> PresentationView | None:
        with self._lock:
            if self._navigator is None:
                return None
            return self._navigator.get_view()

    def get_round_index(self) -> tuple[RoundIndexEntry, ...]:
        with self._lock:
            if self._navigator is None:
                return ()
            return self._navigator.deck.round_index

    # --- Navigation ---

    def advance(self) -> PresentationView:
        return self._dispatch(Advance())

    def retreat(self) -> PresentationView:
        return self._dispatch(Retreat())

    def jump_to_round(self, round_number: int) -> PresentationView:
        return self._dispatch(JumpToRound(round_number))

    def review_round(self, round_number: int) -> PresentationView:
        return self._dispatch(ReviewRound(round_number))

    def exit(self) -> PresentationView:
        return self._dispatch(Exit())

    def handle_key(self, key_name: str) -> PresentationView:
        """Apply the action bound to ``key_name``; unbound keys change nothing."""
        action = action_for_key(key_name)
        if action is None:
            with self._lock:
                return self._require_navigator().get_view()
        return self._dispatch(action)

    def handle_click(self) -> PresentationView:
        return self._dispatch(Advance())

    def _dispatch(self, action: NavigatorAction) -> PresentationView:
        with self._lock:
            navigator = self._require_navigator()
            navigator.dispatch(action)
            return navigator.get_view()

    def _require_navigator(self) -> PresentationNavigator:
        if self._navigator is None:
            raise RuntimeError("No presentation is running.")
        return self._navigator
