"""Tests for trivia_app.core.services.slide_deck_builder."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from trivia_app.core.models import (
    CoverSlide,
    Event,
    Question,
    QuestionSlide,
    Round,
    RoundIndexEntry,
    RoundIntroSlide,
)
from trivia_app.core.services.slide_deck_builder import build, format_event_date


class TestDeckShape:
    @pytest.mark.parametrize("question_counts", [(), (0,), (3,), (2, 1), (1, 0, 4)])
    def test_slide_count(self, event_factory, question_counts):
        deck = build(event_factory(*question_counts))
        assert deck.slide_count == 1 + len(question_counts) + sum(question_counts)
        assert isinstance(deck.slides[0], CoverSlide)

    def test_empty_event_is_a_single_cover_slide(self, event_factory):
        deck = build(event_factory())
        assert deck.slides == (CoverSlide(title="Pub Quiz", formatted_date="Saturday, October 17, 2026"),)
        assert deck.round_index == ()

    def test_intro_precedes_its_questions(self, two_round_deck):
        kinds = [type(slide) for slide in two_round_deck.slides]
        assert kinds == [
            CoverSlide,
            RoundIntroSlide,
            QuestionSlide,
            QuestionSlide,
            RoundIntroSlide,
            QuestionSlide,
        ]

    def test_question_slide_contents(self, two_round_deck):
        assert two_round_deck.slides[3] == QuestionSlide(
            round_number=1,
            question_number=2,
            question_text="Round 1 question 2?",
            answer="Answer 1.2",
        )


class TestRoundIndex:
    def test_entries(self, two_round_deck):
        assert two_round_deck.round_index == (
            RoundIndexEntry(round_number=1, title="Round title 1", start_slide_index=1, question_count=2),
            RoundIndexEntry(round_number=2, title="Round title 2", start_slide_index=4, question_count=1),
        )

    def test_entries_point_at_round_intros(self, event_factory):
        deck = build(event_factory(3, 0, 2))
        for entry in deck.round_index:
            slide = deck.slides[entry.start_slide_index]
            assert isinstance(slide, RoundIntroSlide)
            assert slide.round_number == entry.round_number

    def test_find_round(self, two_round_deck):
        assert two_round_deck.find_round(2).start_slide_index == 4
        assert two_round_deck.find_round(9) is None


class TestPositions:
    def test_external_positions_are_displayed_as_given(self):
        event = Event(
            id="e",
            title="Gaps",
            date=date(2026, 1, 1),
            rounds=[
                Round(
                    id="r",
                    title="Odd",
                    position=5,
                    questions=[Question(id="q", text="Q?", answer="A", position=7)],
                )
            ],
        )
        deck = build(event)
        assert deck.slides[1] == RoundIntroSlide(round_number=5, round_title="Odd")
        assert deck.slides[2].question_number == 7
        assert deck.round_index[0].round_number == 5

    def test_missing_positions_fall_back_to_order(self):
        event = Event(
            id="e",
            title="Unnumbered",
            date=date(2026, 1, 1),
            rounds=[
                Round(id="a", title="A", questions=[Question(id="q1", text="x", answer="y")]),
                Round(id="b", title="B", questions=[
                    Question(id="q2", text="x", answer="y"),
                    Question(id="q3", text="x", answer="y"),
                ]),
            ],
        )
        deck = build(event)
        assert [entry.round_number for entry in deck.round_index] == [1, 2]
        assert [slide.question_number for slide in deck.slides if isinstance(slide, QuestionSlide)] == [1, 1, 2]


def test_slides_are_immutable(two_round_deck):
    with pytest.raises(FrozenInstanceError):
        two_round_deck.slides[1].round_title = "changed"


@pytest.mark.parametrize(
    "event_date, expected",
    [
        (date(2026, 10, 17), "Saturday, October 17, 2026"),
        (date(2025, 1, 5), "Sunday, January 5, 2025"),
    ],
)
def test_format_event_date(event_date, expected):
    assert format_event_date(event_date) == expected
