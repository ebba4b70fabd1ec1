"""Import and export the whole trivia library as a JSON document.

Document layout:

    {
      "questions": [{"id": "...", "text": "...", "answer": "...", "topic": null}],
      "rounds": [{"id": "...", "title": "...", "topic": null, "question_ids": ["..."]}],
      "events": [{"id": "...", "title": "...", "date": "2026-10-17",
                  "status": "draft", "round_ids": ["..."]}]
    }

Order inside ``question_ids`` and ``round_ids`` defines the 1-based positions.
"""

from __future__ import annotations

import datetime
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ValidationError

from trivia_app.core.services.trivia_repository import (
    StoredEvent,
    StoredQuestion,
    StoredRound,
    TriviaRepository,
)

logger = logging.getLogger(__name__)


class LibraryImportError(Exception):
    """Raised when a library document cannot be read."""


class LibraryQuestion(BaseModel):
    id: str
    text: str
    answer: str
    topic: str | None = None


class LibraryRound(BaseModel):
    id: str
    title: str
    topic: str | None = None
    question_ids: list[str] = []


class LibraryEvent(BaseModel):
    id: str
    title: str
    date: datetime.date
    status: Literal["draft", "active", "completed"] = "draft"
    round_ids: list[str] = []


class LibraryDocument(BaseModel):
    questions: list[LibraryQuestion] = []
    rounds: list[LibraryRound] = []
    events: list[LibraryEvent] = []


def load_library(file_path: Path) -> TriviaRepository:
    """Read a library document into a fresh repository."""
    try:
        document = LibraryDocument.model_validate_json(file_path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        raise LibraryImportError(f"Library file {file_path} is not valid: {exc}") from exc

    repository = TriviaRepository()
    try:
        repository.restore(
            questions=[StoredQuestion(**question.model_dump()) for question in document.questions],
            rounds=[StoredRound(**stored.model_dump()) for stored in document.rounds],
            events=[StoredEvent(**stored.model_dump()) for stored in document.events],
        )
    except KeyError as exc:
        raise LibraryImportError(f"Library file {file_path} has broken links: {exc}") from exc

    logger.info(
        "Loaded library from %s (%d events, %d rounds, %d questions)",
        file_path,
        len(document.events),
        len(document.rounds),
        len(document.questions),
    )
    return repository


def save_library(file_path: Path, repository: TriviaRepository) -> None:
    """Write the repository contents to ``file_path`` as JSON."""
    document = LibraryDocument(
        questions=[
            LibraryQuestion(id=q.id, text=q.text, answer=q.answer, topic=q.topic)
            for q in repository.stored_questions()
        ],
        rounds=[
            LibraryRound(id=r.id, title=r.title, topic=r.topic, question_ids=list(r.question_ids))
            for r in repository.stored_rounds()
        ],
        events=[
            LibraryEvent(
                id=e.id,
                title=e.title,
                date=e.date,
                status=e.status,
                round_ids=list(e.round_ids),
            )
            for e in repository.stored_events()
        ],
    )
    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(document.model_dump_json(indent=2) + "\n", encoding="utf-8")
    logger.info("Saved library to %s", file_path)
