"""Tests for trivia_app.core.markdown_question_codec."""

from __future__ import annotations

import pytest

from trivia_app.core.markdown_question_codec import decode, encode
from trivia_app.core.models import QuestionDraft


def _pairs(drafts):
    return [(draft.text, draft.answer) for draft in drafts]


class TestDecode:
    def test_empty_text(self):
        assert decode("") == []

    def test_whitespace_only(self):
        assert decode("\n   \n\t\n") == []

    def test_two_numbered_questions(self):
        drafts = decode("1. Q1\nAnswer: A1\n\n2. Q2\nAnswer: A2")
        assert _pairs(drafts) == [("Q1", "A1"), ("Q2", "A2")]

    def test_decoded_drafts_are_new(self):
        drafts = decode("1. Q1\nAnswer: A1")
        assert drafts == [QuestionDraft(text="Q1", answer="A1", id=None, is_new=True)]

    def test_dangling_question_keeps_empty_answer(self):
        drafts = decode("1. Dangling question with no answer")
        assert _pairs(drafts) == [("Dangling question with no answer", "")]

    def test_numbered_marker_flushes_unanswered_question(self):
        drafts = decode("1. First\n2. Second\nAnswer: Two")
        assert _pairs(drafts) == [("First", ""), ("Second", "Two")]

    def test_unnumbered_question(self):
        drafts = decode("What is the capital of France?\nAnswer: Paris")
        assert _pairs(drafts) == [("What is the capital of France?", "Paris")]

    def test_multiline_question_body(self):
        drafts = decode("1. Which planet\nis known as the Red Planet?\nAnswer: Mars")
        assert _pairs(drafts) == [("Which planet\nis known as the Red Planet?", "Mars")]

    def test_answer_prefix_is_case_insensitive(self):
        drafts = decode("1. Q\n  ANSWER:   Yes  ")
        assert _pairs(drafts) == [("Q", "Yes")]

    def test_answer_without_question_is_dropped(self):
        drafts = decode("Answer: orphan\n1. Q\nAnswer: A")
        assert _pairs(drafts) == [("Q", "A")]

    def test_leading_blank_lines_ignored(self):
        drafts = decode("\n\n\n1. Q\nAnswer: A")
        assert _pairs(drafts) == [("Q", "A")]

    def test_marker_without_space(self):
        drafts = decode("12.Twelve?\nAnswer: 12")
        assert _pairs(drafts) == [("Twelve?", "12")]

    def test_lines_are_trimmed(self):
        drafts = decode("   1.   Padded question   \n   Answer: padded   ")
        assert _pairs(drafts) == [("Padded question", "padded")]

    def test_windows_line_endings(self):
        drafts = decode("1. Q1\r\nAnswer: A1\r\n\r\n2. Q2\r\nAnswer: A2\r\n")
        assert _pairs(drafts) == [("Q1", "A1"), ("Q2", "A2")]

    def test_multiple_choice_answer_kept_verbatim(self):
        text = (
            "2. Which planet is known as the Red Planet? A) Venus B) Mars C) Jupiter D) Saturn\n"
            "Answer: B) Mars"
        )
        drafts = decode(text)
        assert _pairs(drafts) == [
            ("Which planet is known as the Red Planet? A) Venus B) Mars C) Jupiter D) Saturn", "B) Mars")
        ]


class TestEncode:
    def test_empty(self):
        assert encode([]) == ""

    def test_numbering_and_blank_line_separator(self):
        drafts = [QuestionDraft(text="Q1", answer="A1"), QuestionDraft(text="Q2", answer="A2")]
        assert encode(drafts) == "1. Q1\nAnswer: A1\n\n2. Q2\nAnswer: A2"

    def test_ignores_draft_ids(self):
        drafts = [QuestionDraft(text="Q", answer="A", id="abc", is_new=False)]
        assert encode(drafts) == "1. Q\nAnswer: A"


@pytest.mark.parametrize(
    "pairs",
    [
        [("What is the capital of France?", "Paris")],
        [("Q1", "A1"), ("Q2", "A2"), ("Q3", "A3")],
        [("Which planet? A) Venus B) Mars", "B) Mars"), ("Who wrote Hamlet?", "Shakespeare")],
        [("First line\nsecond line", "answer")],
    ],
)
def test_decode_recovers_encoded_drafts(pairs):
    drafts = [QuestionDraft(text=text, answer=answer) for text, answer in pairs]
    encoded = encode(drafts)
    assert _pairs(decode(encoded)) == pairs
    assert encode(decode(encoded)) == encoded


class TestRoundTripLimits:
    def test_surrounding_whitespace_is_trimmed(self):
        drafts = [QuestionDraft(text="  Spaced question?  ", answer="\tSpaced answer ")]
        decoded = decode(encode(drafts))
        assert _pairs(decoded) == [("Spaced question?", "Spaced answer")]
        assert encode(decoded) != encode(drafts)
        assert encode(decode(encode(decoded))) == encode(decoded)

    def test_body_line_with_numbered_marker_starts_a_new_question(self):
        drafts = [QuestionDraft(text="Famous years:\n1066. Battle of Hastings", answer="Normans")]
        decoded = decode(encode(drafts))
        assert _pairs(decoded) == [("Famous years:", ""), ("Battle of Hastings", "Normans")]
        assert encode(decoded) == "1. Famous years:\nAnswer: \n\n2. Battle of Hastings\nAnswer: Normans"
