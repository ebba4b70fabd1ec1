"""FastAPI server that mirrors the presentation to audience browsers."""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from trivia_app.constants.network_constants import (
    AUDIENCE_POLL_INTERVAL_MS,
    DEFAULT_HOST,
    DEFAULT_PORT,
)
from trivia_app.constants.presentation_constants import NAV_HINT_TEXT
from trivia_app.core.markdown_question_codec import decode, encode
from trivia_app.core.models import QuestionDraft
from trivia_app.core.presentation_manager import EventNotFoundError, PresentationManager
from trivia_app.core.question_text_parser import extract
from trivia_app.core.services.presentation_navigator import PresentationView
from trivia_app.core.slide_renderer import render_slide_fragment, slide_type

logger = logging.getLogger(__name__)

_AUDIENCE_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>Trivia Night</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #0b1120; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; gap: 1rem; min-height: 90vh; }
      #slide { flex: 1; display: flex; align-items: center; justify-content: center; text-align: center; font-size: 2rem; }
      .label { color: #94a3b8; }
      .answer { color: #facc15; }
      #counter, #hint { color: #94a3b8; font-size: 0.95rem; text-align: center; }
    </style>
  </head>
  <body>
    <div id=\"counter\"></div>
    <div id=\"slide\">Waiting for the host to start the presentation…</div>
    <div id=\"hint\">__NAV_HINT__</div>
    <script>
      const slideEl = document.getElementById('slide');
      const counterEl = document.getElementById('counter');
      let lastMarkup = null;

      async function refreshSlide() {
        try {
          const response = await fetch('/slide');
          const payload = await response.json();
          if (!payload.active) {
            counterEl.textContent = '';
            slideEl.textContent = 'Waiting for the host to start the presentation…';
            lastMarkup = null;
            return;
          }
          counterEl.textContent = payload.counter;
          if (payload.slide_html !== lastMarkup) {
            slideEl.innerHTML = payload.slide_html;
            lastMarkup = payload.slide_html;
          }
        } catch (error) {
          console.error('Error fetching slide:', error);
        }
      }

      refreshSlide();
      setInterval(refreshSlide, __POLL_INTERVAL_MS__);
    </script>
  </body>
</html>
"""


class TextPayload(BaseModel):
    """Payload schema for codec requests that carry raw text."""

    text: str


class DraftPayload(BaseModel):
    text: str
    answer: str
    id: str | None = None
    is_new: bool = True


class EncodePayload(BaseModel):
    """Payload schema for encoding drafts back into round text."""

    drafts: list[DraftPayload]


class StartPayload(BaseModel):
    event_id: str


def _get_manager_dependency(manager: PresentationManager):
    def dependency() -> PresentationManager:
        return manager

    return dependency


def serialize_view(view: PresentationView | None) -> dict[str, object]:
    """JSON body describing the current slide and navigation chrome."""
    if view is None:
        return {
            "active": False,
            "slide_type": None,
            "slide_html": None,
            "current_index": None,
            "slide_count": 0,
            "counter": None,
            "reviewing_round": None,
            "in_review_mode": False,
            "should_show_answer": False,
            "exit_requested": False,
            "rounds": [],
        }
    return {
        "active": True,
        "slide_type": slide_type(view),
        "slide_html": render_slide_fragment(view),
        "current_index": view.current_index,
        "slide_count": view.slide_count,
        "counter": view.counter_text,
        "reviewing_round": view.reviewing_round,
        "in_review_mode": view.in_review_mode,
        "should_show_answer": view.should_show_answer,
        "exit_requested": view.exit_requested,
        "rounds": [
            {
                "round_number": tab.round_number,
                "title": tab.title,
                "tab_active": tab.is_active,
                "review_active": review.is_active,
            }
            for tab, review in zip(view.round_tabs, view.review_buttons)
        ],
    }


def create_api_app(manager: PresentationManager) -> FastAPI:
    """Create a FastAPI application wired to the provided presentation manager."""
    app = FastAPI(title="Trivia Night API", version="0.1.0")
    manager_dep = _get_manager_dependency(manager)

    def navigate(action) -> dict[str, object]:
        try:
            view = action()
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return serialize_view(view)

    @app.get("/", response_class=HTMLResponse)
    def serve_audience_page() -> str:
        return _AUDIENCE_PAGE_HTML.replace("__NAV_HINT__", NAV_HINT_TEXT).replace(
            "__POLL_INTERVAL_MS__", str(AUDIENCE_POLL_INTERVAL_MS)
        )

    @app.get("/slide")
    def get_slide(presenter: PresentationManager = Depends(manager_dep)) -> dict[str, object]:
        return serialize_view(presenter.get_view())

    @app.post("/presentation", status_code=201)
    def start_presentation(
        payload: StartPayload,
        presenter: PresentationManager = Depends(manager_dep),
    ) -> dict[str, object]:
        try:
            view = presenter.start_presentation(payload.event_id)
        except EventNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return serialize_view(view)

    @app.delete("/presentation", status_code=204)
    def end_presentation(presenter: PresentationManager = Depends(manager_dep)) -> None:
        presenter.end_presentation()

    @app.post("/advance")
    def advance(presenter: PresentationManager = Depends(manager_dep)) -> dict[str, object]:
        return navigate(presenter.advance)

    @app.post("/retreat")
    def retreat(presenter: PresentationManager = Depends(manager_dep)) -> dict[str, object]:
        return navigate(presenter.retreat)

    @app.post("/rounds/{round_number}/jump")
    def jump_to_round(
        round_number: int,
        presenter: PresentationManager = Depends(manager_dep),
    ) -> dict[str, object]:
        return navigate(lambda: presenter.jump_to_round(round_number))

    @app.post("/rounds/{round_number}/review")
    def review_round(
        round_number: int,
        presenter: PresentationManager = Depends(manager_dep),
    ) -> dict[str, object]:
        return navigate(lambda: presenter.review_round(round_number))

    @app.post("/codec/decode")
    def decode_text(payload: TextPayload) -> dict[str, object]:
        drafts = decode(payload.text)
        return {
            "drafts": [
                {"text": draft.text, "answer": draft.answer, "id": draft.id, "is_new": draft.is_new}
                for draft in drafts
            ],
            "question_count": len(drafts),
        }

    @app.post("/codec/encode")
    def encode_drafts(payload: EncodePayload) -> dict[str, object]:
        drafts = [QuestionDraft(**draft.model_dump()) for draft in payload.drafts]
        return {"text": encode(drafts)}

    @app.post("/codec/extract")
    def extract_options(payload: TextPayload) -> dict[str, object]:
        parsed = extract(payload.text)
        return {"stem": parsed.stem, "options": parsed.options}

    return app


def start_api_server(
    manager: PresentationManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="TriviaApiServer", daemon=True)
    thread.start()
    logger.info("Audience server listening on %s:%d", host, port)
    return thread
