"""Tests for trivia_app.core.library_file."""

from __future__ import annotations

import json

import pytest

from trivia_app.core.library_file import LibraryImportError, load_library, save_library


def test_saved_library_loads_back(tmp_path, repository):
    library_path = tmp_path / "library" / "trivia.json"
    save_library(library_path, repository)

    loaded = load_library(library_path)
    original_event = repository.list_events()[0]
    assert loaded.load_event(original_event.id) == original_event
    assert loaded.list_rounds() == repository.list_rounds()


def test_document_layout(tmp_path, repository):
    library_path = tmp_path / "trivia.json"
    save_library(library_path, repository)

    document = json.loads(library_path.read_text(encoding="utf-8"))
    assert set(document) == {"questions", "rounds", "events"}
    assert len(document["questions"]) == 3
    assert document["events"][0]["date"] == "2026-10-17"
    assert document["events"][0]["status"] == "draft"
    assert len(document["events"][0]["round_ids"]) == 2


def test_malformed_json(tmp_path):
    library_path = tmp_path / "broken.json"
    library_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LibraryImportError):
        load_library(library_path)


def test_invalid_status(tmp_path):
    library_path = tmp_path / "status.json"
    library_path.write_text(
        json.dumps(
            {"events": [{"id": "e", "title": "T", "date": "2026-01-01", "status": "cancelled"}]}
        ),
        encoding="utf-8",
    )
    with pytest.raises(LibraryImportError):
        load_library(library_path)


def test_broken_round_link(tmp_path):
    library_path = tmp_path / "links.json"
    library_path.write_text(
        json.dumps(
            {
                "questions": [],
                "rounds": [{"id": "r", "title": "R", "question_ids": ["missing"]}],
                "events": [],
            }
        ),
        encoding="utf-8",
    )
    with pytest.raises(LibraryImportError, match="broken links"):
        load_library(library_path)


def test_empty_document_gives_empty_repository(tmp_path):
    library_path = tmp_path / "empty.json"
    library_path.write_text("{}", encoding="utf-8")
    repository = load_library(library_path)
    assert repository.list_events() == []
    assert repository.list_rounds() == []
