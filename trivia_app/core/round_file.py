"""Read and write a single round as a numbered question text file.

The file uses the same format as the markdown editor (see
``markdown_question_codec``), which makes it easy to author rounds in any text
editor or to paste in generated questions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from trivia_app.core.markdown_question_codec import decode, encode
from trivia_app.core.models import QuestionDraft

logger = logging.getLogger(__name__)


def load_round_from_file(file_path: Path) -> list[QuestionDraft]:
    """Decode the drafts stored in ``file_path``."""
    text = file_path.read_text(encoding="utf-8")
    drafts = decode(text)
    logger.info("Loaded %d question(s) from %s", len(drafts), file_path)
    return drafts


def save_round_to_file(file_path: Path, drafts: list[QuestionDraft]) -> None:
    """Persist the provided drafts to disk in the numbered text format."""

    if not drafts:
        raise ValueError("Cannot export a round without questions.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(encode(drafts) + "\n", encoding="utf-8")
    logger.info("Saved %d question(s) to %s", len(drafts), file_path)
