"""Flatten an event into the ordered slide deck used for presenting it."""

from __future__ import annotations

from datetime import date

from trivia_app.core.models import (
    CoverSlide,
    Event,
    QuestionSlide,
    RoundIndexEntry,
    RoundIntroSlide,
    Slide,
    SlideDeck,
)


def format_event_date(event_date: date) -> str:
    """Long US date, e.g. ``Saturday, October 17, 2026``."""
    return f"{event_date:%A}, {event_date:%B} {event_date.day}, {event_date.year}"


def build(event: Event) -> SlideDeck:
    """Build the cover, round intro and question slides for ``event``.

    Round and question numbers are the positions stored with the event; they
    are displayed as given and not checked for gaps.
    """
    slides: list[Slide] = [
        CoverSlide(title=event.title, formatted_date=format_event_date(event.date))
    ]
    round_index: list[RoundIndexEntry] = []

    for round_ordinal, trivia_round in enumerate(event.rounds, start=1):
        round_number = trivia_round.position if trivia_round.position is not None else round_ordinal
        start_slide_index = len(slides)
        slides.append(RoundIntroSlide(round_number=round_number, round_title=trivia_round.title))

        question_count = 0
        for question_ordinal, question in enumerate(trivia_round.questions, start=1):
            slides.append(
                QuestionSlide(
                    round_number=round_number,
                    question_number=(
                        question.position if question.position is not None else question_ordinal
                    ),
                    question_text=question.text,
                    answer=question.answer,
                )
            )
            question_count += 1

        round_index.append(
            RoundIndexEntry(
                round_number=round_number,
                title=trivia_round.title,
                start_slide_index=start_slide_index,
                question_count=question_count,
            )
        )

    return SlideDeck(slides=tuple(slides), round_index=tuple(round_index))
