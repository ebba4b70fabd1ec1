"""Presentation constants shared across the renderer, UI and API."""

DEFAULT_SLIDE_FONT_SIZE: int = 28
SLIDE_DOCUMENT_TITLE: str = "Trivia Night"
REVIEW_SUFFIX: str = " · Review"
NAV_HINT_TEXT: str = "Press → or click to advance · Press ← to go back · Press Esc to exit"
ROUND_TAB_TEMPLATE: str = "Round {number}"
REVIEW_BUTTON_TEMPLATE: str = "Review {number}"
