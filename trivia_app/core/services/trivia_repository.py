"""Service for storing questions, rounds and events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
import logging
from uuid import uuid4

from trivia_app.core.models import (
    EVENT_STATUSES,
    Event,
    Question,
    QuestionDraft,
    Round,
)
from trivia_app.core.round_drafts import validate_round

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StoredQuestion:
    id: str
    text: str
    answer: str
    topic: str | None = None


@dataclass(slots=True)
class StoredRound:
    id: str
    title: str
    topic: str | None = None
    question_ids: list[str] = field(default_factory=list)  # index + 1 is the position


@dataclass(slots=True)
class StoredEvent:
    id: str
    title: str
    date: date
    status: str = "draft"
    round_ids: list[str] = field(default_factory=list)  # index + 1 is the position


class TriviaRepository:
    """Keeps the question library and reads events back for presenting."""

    def __init__(self) -> None:
        self._questions: dict[str, StoredQuestion] = {}
        self._rounds: dict[str, StoredRound] = {}
        self._events: dict[str, StoredEvent] = {}

    # --- Rounds ---

    def save_round(
        self,
        title: str,
        drafts: list[QuestionDraft],
        topic: str | None = None,
        round_id: str | None = None,
    ) -> Round:
        """Validate and store a round together with its question drafts.

        New drafts (or drafts without an id) become new questions; saved drafts
        update their question in place. The round's question order is replaced
        by the order of ``drafts``. Questions the round no longer links are
        dropped unless another round still uses them. Every check runs before
        anything is written, so a rejected save leaves the library untouched.
        """
        validate_round(title, drafts)
        stored_round = self._get_stored_round(round_id) if round_id is not None else None
        unknown = [
            draft.id
            for draft in drafts
            if not draft.is_new and draft.id is not None and draft.id not in self._questions
        ]
        if unknown:
            raise KeyError(f"Unknown question ids {unknown}")

        cleaned_topic = topic.strip() if topic and topic.strip() else None
        if stored_round is None:
            stored_round = StoredRound(id=uuid4().hex, title=title.strip(), topic=cleaned_topic)
            self._rounds[stored_round.id] = stored_round
        else:
            stored_round.title = title.strip()
            stored_round.topic = cleaned_topic

        question_ids: list[str] = []
        for draft in drafts:
            if draft.is_new or draft.id is None:
                question = StoredQuestion(
                    id=uuid4().hex,
                    text=draft.text.strip(),
                    answer=draft.answer.strip(),
                    topic=cleaned_topic,
                )
                self._questions[question.id] = question
            else:
                question = self._questions[draft.id]
                question.text = draft.text.strip()
                question.answer = draft.answer.strip()
            question_ids.append(question.id)

        previous_ids = stored_round.question_ids
        stored_round.question_ids = question_ids
        self._drop_unlinked_questions(previous_ids)
        logger.info("Saved round %r with %d question(s)", stored_round.title, len(question_ids))
        return self._to_round(stored_round)

    def get_round(self, round_id: str) -> Round:
        return self._to_round(self._get_stored_round(round_id))

    def list_rounds(self) -> list[Round]:
        return [self._to_round(stored) for stored in self._rounds.values()]

    def round_drafts(self, round_id: str) -> list[QuestionDraft]:
        """Drafts for editing a saved round, in position order."""
        stored_round = self._get_stored_round(round_id)
        return [
            QuestionDraft(
                text=self._questions[question_id].text,
                answer=self._questions[question_id].answer,
                id=question_id,
                is_new=False,
            )
            for question_id in stored_round.question_ids
        ]

    def delete_round(self, round_id: str) -> None:
        """Remove a round, unlink it from events and drop its unshared questions."""
        stored_round = self._get_stored_round(round_id)
        del self._rounds[round_id]
        for stored_event in self._events.values():
            stored_event.round_ids = [rid for rid in stored_event.round_ids if rid != round_id]
        self._drop_unlinked_questions(stored_round.question_ids)
        logger.info("Deleted round %r", stored_round.title)

    # --- Events ---

    def save_event(
        self,
        title: str,
        event_date: date,
        round_ids: list[str],
        event_id: str | None = None,
        status: str = "draft",
    ) -> Event:
        """Create or update an event with its rounds in presentation order."""
        cleaned_title = title.strip()
        if not cleaned_title:
            raise ValueError("Event title is required")
        if not round_ids:
            raise ValueError("Add at least one round")
        if status not in EVENT_STATUSES:
            raise ValueError(f"Event status must be one of {', '.join(EVENT_STATUSES)}.")
        for round_id in round_ids:
            self._get_stored_round(round_id)

        if event_id is None:
            stored_event = StoredEvent(id=uuid4().hex, title=cleaned_title, date=event_date)
            self._events[stored_event.id] = stored_event
        else:
            stored_event = self._events.get(event_id)
            if stored_event is None:
                raise KeyError(f"Unknown event id {event_id!r}")
            stored_event.title = cleaned_title
            stored_event.date = event_date

        stored_event.status = status
        stored_event.round_ids = list(round_ids)
        logger.info("Saved event %r with %d round(s)", cleaned_title, len(round_ids))
        return self._to_event(stored_event)

    def load_event(self, event_id: str) -> Event | None:
        """Event with rounds and questions in position order, or ``None``."""
        stored_event = self._events.get(event_id)
        if stored_event is None:
            return None
        return self._to_event(stored_event)

    def list_events(self) -> list[Event]:
        """All events, most recent date first."""
        ordered = sorted(self._events.values(), key=lambda stored: stored.date, reverse=True)
        return [self._to_event(stored) for stored in ordered]

    def delete_event(self, event_id: str) -> None:
        if self._events.pop(event_id, None) is None:
            raise KeyError(f"Unknown event id {event_id!r}")

    # --- Snapshot access used by the library file ---

    def stored_questions(self) -> list[StoredQuestion]:
        return list(self._questions.values())

    def stored_rounds(self) -> list[StoredRound]:
        return list(self._rounds.values())

    def stored_events(self) -> list[StoredEvent]:
        return list(self._events.values())

    def restore(
        self,
        questions: list[StoredQuestion],
        rounds: list[StoredRound],
        events: list[StoredEvent],
    ) -> None:
        """Replace the whole library; links must refer to known ids."""
        question_map = {question.id: question for question in questions}
        round_map = {stored.id: stored for stored in rounds}
        for stored_round in rounds:
            missing = [qid for qid in stored_round.question_ids if qid not in question_map]
            if missing:
                raise KeyError(f"Round {stored_round.id!r} refers to unknown questions {missing}")
        for stored_event in events:
            missing = [rid for rid in stored_event.round_ids if rid not in round_map]
            if missing:
                raise KeyError(f"Event {stored_event.id!r} refers to unknown rounds {missing}")

        self._questions = question_map
        self._rounds = round_map
        self._events = {stored.id: stored for stored in events}

    # --- Helpers ---

    def _drop_unlinked_questions(self, question_ids: list[str]) -> None:
        linked = {qid for stored in self._rounds.values() for qid in stored.question_ids}
        for question_id in set(question_ids) - linked:
            self._questions.pop(question_id, None)

    def _get_stored_round(self, round_id: str) -> StoredRound:
        stored_round = self._rounds.get(round_id)
        if stored_round is None:
            raise KeyError(f"Unknown round id {round_id!r}")
        return stored_round

    def _to_round(self, stored_round: StoredRound, position: int | None = None) -> Round:
        questions = []
        for question_position, question_id in enumerate(stored_round.question_ids, start=1):
            stored_question = self._questions[question_id]
            questions.append(
                Question(
                    id=stored_question.id,
                    text=stored_question.text,
                    answer=stored_question.answer,
                    position=question_position,
                    topic=stored_question.topic,
                )
            )
        return Round(
            id=stored_round.id,
            title=stored_round.title,
            topic=stored_round.topic,
            questions=questions,
            position=position,
        )

    def _to_event(self, stored_event: StoredEvent) -> Event:
        return Event(
            id=stored_event.id,
            title=stored_event.title,
            date=stored_event.date,
            rounds=[
                self._to_round(self._rounds[round_id], position=position)
                for position, round_id in enumerate(stored_event.round_ids, start=1)
            ],
            status=stored_event.status,
        )
