"""Shared fixtures for the trivia application tests."""

from __future__ import annotations

from datetime import date

import pytest

from trivia_app.core.models import Event, Question, QuestionDraft, Round
from trivia_app.core.services.slide_deck_builder import build
from trivia_app.core.services.trivia_repository import TriviaRepository


def make_event(*question_counts: int, title: str = "Pub Quiz") -> Event:
    """Event whose round ``i`` (1-based) holds ``question_counts[i - 1]`` questions."""
    rounds = []
    for round_number, count in enumerate(question_counts, start=1):
        questions = [
            Question(
                id=f"q{round_number}-{number}",
                text=f"Round {round_number} question {number}?",
                answer=f"Answer {round_number}.{number}",
                position=number,
            )
            for number in range(1, count + 1)
        ]
        rounds.append(
            Round(
                id=f"r{round_number}",
                title=f"Round title {round_number}",
                questions=questions,
                position=round_number,
            )
        )
    return Event(id="e1", title=title, date=date(2026, 10, 17), rounds=rounds)


@pytest.fixture
def event_factory():
    return make_event


@pytest.fixture
def two_round_deck():
    """Cover, round 1 (2 questions), round 2 (1 question): 6 slides."""
    return build(make_event(2, 1))


@pytest.fixture
def repository():
    repo = TriviaRepository()
    geography = repo.save_round(
        "Geography",
        [
            QuestionDraft(text="What is the capital of France?", answer="Paris"),
            QuestionDraft(
                text="Which planet is known as the Red Planet? A) Venus B) Mars C) Jupiter D) Saturn",
                answer="B) Mars",
            ),
        ],
        topic="Places",
    )
    history = repo.save_round(
        "History",
        [QuestionDraft(text="In which year did WW2 end?", answer="1945")],
    )
    repo.save_event("Tuesday Quiz", date(2026, 10, 17), [geography.id, history.id])
    return repo
