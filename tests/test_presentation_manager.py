"""Tests for trivia_app.core.presentation_manager."""

from __future__ import annotations

import pytest

from trivia_app.core.models import CoverSlide, QuestionSlide, RoundIntroSlide
from trivia_app.core.presentation_manager import EventNotFoundError, PresentationManager
from trivia_app.core.services.trivia_repository import TriviaRepository


@pytest.fixture
def manager(repository):
    return PresentationManager(repository)


@pytest.fixture
def event_id(repository):
    return repository.list_events()[0].id


class TestLifecycle:
    def test_idle_manager(self, manager):
        assert not manager.has_active_presentation()
        assert manager.get_view() is None
        assert manager.get_round_index() == ()

    def test_start_presentation_shows_cover(self, manager, event_id):
        view = manager.start_presentation(event_id)
        assert isinstance(view.current_slide, CoverSlide)
        assert view.slide_count == 6
        assert [entry.title for entry in manager.get_round_index()] == ["Geography", "History"]

    def test_unknown_event(self, manager):
        with pytest.raises(EventNotFoundError):
            manager.start_presentation("missing")
        assert not manager.has_active_presentation()

    def test_restart_builds_a_fresh_deck(self, manager, event_id):
        manager.start_presentation(event_id)
        manager.advance()
        manager.advance()
        assert manager.start_presentation(event_id).current_index == 0

    def test_end_presentation(self, manager, event_id):
        manager.start_presentation(event_id)
        manager.end_presentation()
        assert manager.get_view() is None

    def test_replace_repository_ends_session(self, manager, event_id):
        manager.start_presentation(event_id)
        replacement = TriviaRepository()
        manager.replace_repository(replacement)
        assert manager.get_repository() is replacement
        assert not manager.has_active_presentation()

    @pytest.mark.parametrize("method", ["advance", "retreat", "exit", "handle_click"])
    def test_navigation_requires_running_presentation(self, manager, method):
        with pytest.raises(RuntimeError):
            getattr(manager, method)()

    def test_handle_key_requires_running_presentation(self, manager):
        with pytest.raises(RuntimeError):
            manager.handle_key("q")


class TestNavigation:
    def test_keys_and_clicks(self, manager, event_id):
        manager.start_presentation(event_id)
        assert isinstance(manager.handle_key("ArrowRight").current_slide, RoundIntroSlide)
        assert isinstance(manager.handle_click().current_slide, QuestionSlide)
        assert manager.handle_key("ArrowLeft").current_index == 1
        assert manager.handle_key("Tab").current_index == 1

    def test_escape_requests_exit(self, manager, event_id):
        manager.start_presentation(event_id)
        view = manager.handle_key("Escape")
        assert view.exit_requested
        assert view.current_index == 0

    def test_review_flow(self, manager, event_id):
        manager.start_presentation(event_id)
        view = manager.review_round(1)
        assert view.current_index == 2
        assert view.in_review_mode
        assert not view.should_show_answer

        view = manager.advance()
        assert view.current_index == 2
        assert view.should_show_answer
        assert view.current_slide.answer == "Paris"

        view = manager.jump_to_round(2)
        assert view.current_index == 4
        assert view.reviewing_round is None
