"""Tests for trivia_app.core.slide_renderer."""

from __future__ import annotations

import pytest

from trivia_app.core.services.presentation_navigator import PresentationNavigator
from trivia_app.core.services.slide_deck_builder import build
from trivia_app.core.slide_renderer import (
    render_slide_document,
    render_slide_fragment,
    slide_type,
)


@pytest.fixture
def navigator(repository):
    event = repository.list_events()[0]
    return PresentationNavigator(build(repository.load_event(event.id)))


def test_cover_slide(navigator):
    view = navigator.get_view()
    html = render_slide_fragment(view)
    assert slide_type(view) == "cover"
    assert "<h1>Tuesday Quiz</h1>" in html
    assert "Saturday, October 17, 2026" in html


def test_round_intro_slide(navigator):
    navigator.jump_to_round(2)
    view = navigator.get_view()
    html = render_slide_fragment(view)
    assert slide_type(view) == "round-intro"
    assert "Round 2" in html
    assert "<h1>History</h1>" in html


def test_question_with_options(navigator):
    navigator.jump_to_round(1)
    navigator.advance()
    navigator.advance()
    view = navigator.get_view()
    html = render_slide_fragment(view)

    assert slide_type(view) == "question"
    assert "Round 1 · Question 2</p>" in html
    assert "Which planet is known as the Red Planet?" in html
    assert [part.split("</div>")[0] for part in html.split('<div class="option">')[1:]] == [
        "A) Venus",
        "B) Mars",
        "C) Jupiter",
        "D) Saturn",
    ]
    assert 'class="answer"' not in html


def test_answer_shown_only_when_revealed_in_review(navigator):
    navigator.review_round(1)
    html = render_slide_fragment(navigator.get_view())
    assert "Round 1 · Question 1 · Review" in html
    assert 'class="answer"' not in html

    navigator.advance()
    html = render_slide_fragment(navigator.get_view())
    assert 'class="answer"' in html
    assert "Paris" in html


def test_question_text_is_escaped(event_factory):
    event = event_factory(1)
    event.rounds[0].questions[0].text = "Is <b>this</b> bold?"
    navigator = PresentationNavigator(build(event))
    navigator.advance()
    navigator.advance()
    html = render_slide_fragment(navigator.get_view())
    assert "<b>" not in html
    assert "&lt;b&gt;" in html


def test_document_wraps_fragment(navigator):
    document = render_slide_document(navigator.get_view(), font_size=40)
    assert document.startswith("<!doctype html>")
    assert "font-size: 40pt" in document
    assert "Tuesday Quiz" in document
