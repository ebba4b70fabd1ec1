"""Render the current presentation view as HTML."""

from __future__ import annotations

from html import escape

from trivia_app.constants.presentation_constants import (
    DEFAULT_SLIDE_FONT_SIZE,
    REVIEW_SUFFIX,
    SLIDE_DOCUMENT_TITLE,
)
from trivia_app.core.markdown_renderer import renderer
from trivia_app.core.models import CoverSlide, QuestionSlide, RoundIntroSlide
from trivia_app.core.question_text_parser import extract
from trivia_app.core.services.presentation_navigator import PresentationView


def slide_type(view: PresentationView) -> str:
    slide = view.current_slide
    if isinstance(slide, CoverSlide):
        return "cover"
    if isinstance(slide, RoundIntroSlide):
        return "round-intro"
    return "question"


def render_slide_fragment(view: PresentationView) -> str:
    """HTML for the slide in ``view``; answers only appear when revealed in review."""
    slide = view.current_slide
    if isinstance(slide, CoverSlide):
        return (
            '<div class="slide slide-cover">'
            f"<h1>{renderer.render_inline(slide.title)}</h1>"
            f'<p class="date">{escape(slide.formatted_date)}</p>'
            "</div>"
        )
    if isinstance(slide, RoundIntroSlide):
        return (
            '<div class="slide slide-round-intro">'
            f'<p class="label">Round {slide.round_number}</p>'
            f"<h1>{renderer.render_inline(slide.round_title)}</h1>"
            "</div>"
        )
    if isinstance(slide, QuestionSlide):
        return _render_question(slide, view)
    raise TypeError(f"Unsupported slide: {slide!r}")


def render_slide_document(
    view: PresentationView, font_size: int = DEFAULT_SLIDE_FONT_SIZE
) -> str:
    return renderer.wrap_document(
        render_slide_fragment(view), title=SLIDE_DOCUMENT_TITLE, font_size=font_size
    )


def _render_question(slide: QuestionSlide, view: PresentationView) -> str:
    parsed = extract(slide.question_text)
    label = f"Round {slide.round_number} · Question {slide.question_number}"
    if view.in_review_mode:
        label += REVIEW_SUFFIX

    parts = [
        '<div class="slide slide-question">',
        f'<p class="label">{escape(label)}</p>',
        f'<div class="question-text">{renderer.render_fragment(parsed.stem)}</div>',
    ]
    if parsed.options:
        parts.append('<div class="question-options">')
        parts.extend(
            f'<div class="option">{renderer.render_inline(option)}</div>'
            for option in parsed.options
        )
        parts.append("</div>")
    if view.should_show_answer:
        parts.append(
            '<div class="answer"><span class="answer-label">Answer:</span> '
            f"{renderer.render_inline(slide.answer)}</div>"
        )
    parts.append("</div>")
    return "".join(parts)
