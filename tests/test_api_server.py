"""Tests for trivia_app.server.api_server."""

from __future__ import annotations

from fastapi.testclient import TestClient
import pytest

from trivia_app.core.presentation_manager import PresentationManager
from trivia_app.server.api_server import create_api_app


@pytest.fixture
def manager(repository):
    return PresentationManager(repository)


@pytest.fixture
def client(manager):
    return TestClient(create_api_app(manager))


@pytest.fixture
def event_id(repository):
    return repository.list_events()[0].id


def test_audience_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "refreshSlide" in response.text
    assert "__POLL_INTERVAL_MS__" not in response.text


def test_slide_when_idle(client):
    payload = client.get("/slide").json()
    assert payload["active"] is False
    assert payload["rounds"] == []


def test_navigation_before_start_conflicts(client):
    assert client.post("/advance").status_code == 409
    assert client.post("/rounds/1/review").status_code == 409


def test_start_unknown_event(client):
    response = client.post("/presentation", json={"event_id": "missing"})
    assert response.status_code == 404


def test_presentation_flow(client, event_id):
    response = client.post("/presentation", json={"event_id": event_id})
    assert response.status_code == 201
    payload = response.json()
    assert payload["slide_type"] == "cover"
    assert payload["counter"] == "1 / 6"
    assert [r["title"] for r in payload["rounds"]] == ["Geography", "History"]

    payload = client.post("/advance").json()
    assert payload["slide_type"] == "round-intro"
    assert payload["rounds"][0]["tab_active"] is True

    payload = client.post("/rounds/1/review").json()
    assert payload["in_review_mode"] is True
    assert payload["rounds"][0]["review_active"] is True
    assert payload["should_show_answer"] is False

    payload = client.post("/advance").json()
    assert payload["should_show_answer"] is True
    assert "Paris" in payload["slide_html"]

    payload = client.post("/retreat").json()
    assert payload["current_index"] == 1

    payload = client.post("/rounds/2/jump").json()
    assert payload["current_index"] == 4
    assert payload["reviewing_round"] is None

    assert client.delete("/presentation").status_code == 204
    assert client.get("/slide").json()["active"] is False


def test_codec_decode(client):
    response = client.post(
        "/codec/decode", json={"text": "1. Q1\nAnswer: A1\n\n2. Q2\nAnswer: A2"}
    )
    payload = response.json()
    assert payload["question_count"] == 2
    assert payload["drafts"][1] == {"text": "Q2", "answer": "A2", "id": None, "is_new": True}


def test_codec_encode(client):
    response = client.post(
        "/codec/encode",
        json={"drafts": [{"text": "Q1", "answer": "A1"}, {"text": "Q2", "answer": "A2"}]},
    )
    assert response.json() == {"text": "1. Q1\nAnswer: A1\n\n2. Q2\nAnswer: A2"}


def test_codec_extract(client):
    response = client.post("/codec/extract", json={"text": "Pick one A) x B) y"})
    assert response.json() == {"stem": "Pick one", "options": ["A) x", "B) y"]}


@pytest.mark.parametrize(
    "path, body",
    [
        ("/rounds/two/jump", None),
        ("/presentation", {}),
        ("/codec/decode", {"body": "1. Q"}),
        ("/codec/encode", {"drafts": [{"text": "Q"}]}),
    ],
)
def test_malformed_requests_are_unprocessable(client, path, body):
    response = client.post(path, json=body)
    assert response.status_code == 422
