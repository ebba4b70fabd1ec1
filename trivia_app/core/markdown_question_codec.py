"""Convert between authored round text and question drafts.

Text format (blocks separated by a blank line):

    1. What is the capital of France?
    Answer: Paris

    2. Which planet is known as the Red Planet? A) Venus B) Mars C) Jupiter D) Saturn
    Answer: B) Mars

A question runs from its numbered marker (or the start of the text) until its
``Answer:`` line and may span several lines. Decoding never fails: a question
without an answer line is kept with an empty answer so the editor can flag it,
and an answer line with no question before it is dropped.
"""

from __future__ import annotations

import re

from trivia_app.core.models import QuestionDraft

_ANSWER_PREFIX = "answer:"
_NUMBERED_MARKER_PATTERN = re.compile(r"(\d+)\.\s*(.*)")


def decode(text: str) -> list[QuestionDraft]:
    """Parse authored text into an ordered list of new question drafts."""
    drafts: list[QuestionDraft] = []
    question_lines: list[str] = []

    for raw_line in text.split("\n"):
        line = raw_line.strip()

        if line.lower().startswith(_ANSWER_PREFIX):
            if question_lines:
                _flush(drafts, question_lines, answer=line[len(_ANSWER_PREFIX):].strip())
            question_lines = []
            continue

        marker = _NUMBERED_MARKER_PATTERN.match(line)
        if marker is not None:
            if question_lines:
                _flush(drafts, question_lines, answer="")
            question_lines = [marker.group(2)]
            continue

        if line or question_lines:
            question_lines.append(line)

    if question_lines:
        _flush(drafts, question_lines, answer="")

    return drafts


def encode(drafts: list[QuestionDraft]) -> str:
    """Serialize drafts into the canonical numbered text form."""
    blocks = [
        f"{index + 1}. {draft.text}\nAnswer: {draft.answer}"
        for index, draft in enumerate(drafts)
    ]
    return "\n\n".join(blocks)


def _flush(drafts: list[QuestionDraft], question_lines: list[str], answer: str) -> None:
    question_text = "\n".join(question_lines).strip()
    if question_text:
        drafts.append(QuestionDraft(text=question_text, answer=answer, is_new=True))
