"""Separate a question stem from the multiple-choice options written inline.

Authors (and generated rounds) write multiple-choice questions on one line:

    Which planet is known as the Red Planet? A) Venus B) Mars C) Jupiter D) Saturn

The options run starts at the first ``A``-``D`` letter followed by ``)`` or
``.`` and extends to the end of the text. Options are kept in the order they
appear; malformed runs are passed through untouched.
"""

from __future__ import annotations

import re

from trivia_app.core.models import ParsedQuestionText

_OPTIONS_RUN_PATTERN = re.compile(r"(.*?)\s*([A-D][).]\s*.*)\Z", re.DOTALL)
_OPTION_MARKER_LOOKAHEAD = re.compile(r"(?=[A-D][).])")


def extract(raw: str) -> ParsedQuestionText:
    """Split ``raw`` into its stem and its ordered option strings."""
    match = _OPTIONS_RUN_PATTERN.match(raw)
    if match is None:
        return ParsedQuestionText(stem=raw, options=[])

    stem, options_run = match.groups()
    fragments = _OPTION_MARKER_LOOKAHEAD.split(options_run)
    options = [fragment.strip() for fragment in fragments if fragment]
    return ParsedQuestionText(stem=stem.strip(), options=options)
