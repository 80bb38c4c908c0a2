"""FastAPI server that plays the quiz in a web browser."""

from __future__ import annotations

import html
import json
import logging
from pathlib import Path
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from pydantic import BaseModel
import uvicorn

from kvizoteka.constants.about import APP_NAME, APP_VERSION
from kvizoteka.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT, STATE_POLL_INTERVAL_MS
from kvizoteka.constants.ui_constants import (
    LOAD_ERROR_MESSAGE,
    NO_QUESTIONS_MESSAGE,
    PLACEHOLDER_IMAGE,
    RESTART_BUTTON_TEXT,
    START_BUTTON_TEXT,
    START_COUNT_TEMPLATE,
    START_DESCRIPTION,
)
from kvizoteka.core.errors import (
    EmptyQuestionSet,
    InvalidAnswerIndex,
    NotYetAnswered,
    QuizError,
    SessionNotFinished,
    SessionNotInProgress,
)
from kvizoteka.core.input_mapper import (
    AdvanceRequested,
    AnswerSelected,
    InputMapper,
    KeyPressed,
    RestartRequested,
    StartRequested,
)
from kvizoteka.core.markdown_math_renderer import renderer
from kvizoteka.core.quiz_manager import QuizManager
from kvizoteka.core.services.scorer import tier_content
from kvizoteka.core.view_state import SessionView

logger = logging.getLogger(__name__)

_ERROR_STATUS: dict[type[QuizError], int] = {
    InvalidAnswerIndex: 422,
    NotYetAnswered: 409,
    SessionNotInProgress: 409,
    SessionNotFinished: 409,
    EmptyQuestionSet: 503,
}

_QUIZ_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>__APP_NAME__</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #0b1120; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; align-items: center; }
      .card { width: 100%; max-width: 720px; background: #111a30; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.4); }
      .hidden { display: none; }
      .primary-button { border: none; border-radius: 0.75rem; padding: 0.85rem 1.5rem; font-size: 1rem; background: #1f9aa5; color: #fff; cursor: pointer; }
      .primary-button:disabled { opacity: 0.5; cursor: not-allowed; }
      .progress-track { width: 100%; height: 0.6rem; background: rgba(31, 154, 165, 0.25); border-radius: 999px; overflow: hidden; margin: 0.5rem 0 1rem; }
      #progress-fill { height: 100%; background: #1f9aa5; width: 0%; transition: width 200ms ease; }
      #question-image { display: block; max-width: 100%; max-height: 260px; margin: 0 auto 1rem; border-radius: 0.75rem; }
      #question-text { font-size: 1.1rem; line-height: 1.6; min-height: 3rem; }
      .answers { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 0.75rem; margin: 1rem 0; }
      .answer-btn { border: 2px solid transparent; border-radius: 0.75rem; padding: 1rem; font-size: 1rem; background: #1e293b; color: #fff; cursor: pointer; text-align: left; }
      .answer-btn:disabled { cursor: default; }
      .answer-btn.correct { border-color: #22c55e; background: rgba(34, 197, 94, 0.2); }
      .answer-btn.wrong { border-color: #ef4444; background: rgba(239, 68, 68, 0.2); }
      #result-icon { font-size: 3rem; }
      .stats { display: flex; gap: 1.5rem; margin: 1rem 0; color: #94a3b8; }
      #error { color: #f87171; }
    </style>
    <script>
      window.MathJax = { tex: { inlineMath: [['$','$']], displayMath: [['$$','$$']] }, svg: { fontCache: 'global' } };
    </script>
    <script defer src=\"https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js\"></script>
  </head>
  <body>
    <section class=\"card\" id=\"start-screen\">
      <h1>__APP_NAME__</h1>
      <p>__START_DESCRIPTION__</p>
      <p id=\"question-count\"></p>
      <p id=\"error\"></p>
      <button id=\"start-btn\" class=\"primary-button\">__START_BUTTON_TEXT__</button>
    </section>
    <section class=\"card hidden\" id=\"quiz-screen\">
      <div id=\"progress-label\"></div>
      <div class=\"progress-track\"><div id=\"progress-fill\"></div></div>
      <img id=\"question-image\" alt=\"\" />
      <div id=\"question-text\"></div>
      <div id=\"answers\" class=\"answers\"></div>
      <button id=\"next-btn\" class=\"primary-button\" disabled></button>
    </section>
    <section class=\"card hidden\" id=\"result-screen\">
      <div id=\"result-icon\"></div>
      <h2 id=\"result-title\"></h2>
      <p id=\"result-message\"></p>
      <h3 id=\"score\"></h3>
      <div class=\"stats\">
        <span id=\"correct-count\"></span>
        <span id=\"wrong-count\"></span>
        <span id=\"percentage\"></span>
      </div>
      <button id=\"restart-btn\" class=\"primary-button\">__RESTART_BUTTON_TEXT__</button>
    </section>
    <script>
      const PLACEHOLDER_IMAGE = __PLACEHOLDER_IMAGE__;
      const LOAD_ERROR_MESSAGE = __LOAD_ERROR_MESSAGE__;
      const screens = {
        START: document.getElementById('start-screen'),
        QUIZ: document.getElementById('quiz-screen'),
        RESULT: document.getElementById('result-screen'),
      };
      const answersEl = document.getElementById('answers');
      const nextBtn = document.getElementById('next-btn');
      const POLL_INTERVAL_MS = __POLL_INTERVAL_MS__;
      let renderedQuestionId = null;
      let lastViewJson = null;

      function showScreen(name) {
        Object.entries(screens).forEach(([key, el]) => el.classList.toggle('hidden', key !== name));
      }

      function renderStart(view) {
        document.getElementById('question-count').textContent = view.question_count_text;
        document.getElementById('error').textContent = view.load_error ? LOAD_ERROR_MESSAGE : '';
        document.getElementById('start-btn').disabled = !view.can_start;
      }

      function renderQuiz(view) {
        const q = view.question;
        document.getElementById('progress-label').textContent = `${view.position} / ${view.total}`;
        document.getElementById('progress-fill').style.width = `${view.progress_percentage}%`;
        if (q.id !== renderedQuestionId) {
          renderedQuestionId = q.id;
          const image = document.getElementById('question-image');
          image.src = q.image_url || PLACEHOLDER_IMAGE;
          image.alt = `Image for question ${q.id}`;
          document.getElementById('question-text').innerHTML = q.html;
          if (window.MathJax && window.MathJax.typesetPromise) {
            window.MathJax.typesetPromise([document.getElementById('question-text')]).catch(() => {});
          }
        }
        answersEl.innerHTML = '';
        view.answers.forEach(answer => {
          const button = document.createElement('button');
          button.className = 'answer-btn';
          if (answer.mark === 'CORRECT') button.classList.add('correct');
          if (answer.mark === 'WRONG') button.classList.add('wrong');
          button.innerHTML = `${answer.index + 1}. ${answer.html}`;
          button.disabled = !answer.enabled;
          button.addEventListener('click', () => send('/answer', { selected_index: answer.index, question_id: q.id }));
          answersEl.appendChild(button);
        });
        if (window.MathJax && window.MathJax.typesetPromise) {
          window.MathJax.typesetPromise([answersEl]).catch(() => {});
        }
        nextBtn.disabled = !view.next_enabled;
        nextBtn.textContent = view.next_label;
      }

      function renderResult(view) {
        const s = view.summary;
        renderedQuestionId = null;
        document.getElementById('result-icon').textContent = s.icon;
        document.getElementById('result-title').textContent = s.title;
        document.getElementById('result-message').textContent = s.message;
        document.getElementById('score').textContent = `${s.correct} / ${s.total}`;
        document.getElementById('correct-count').textContent = `Correct: ${s.correct}`;
        document.getElementById('wrong-count').textContent = `Wrong: ${s.wrong}`;
        document.getElementById('percentage').textContent = `${s.percentage}%`;
      }

      function render(view) {
        const viewJson = JSON.stringify(view);
        if (viewJson === lastViewJson) return;
        lastViewJson = viewJson;
        showScreen(view.screen);
        if (view.screen === 'START') renderStart(view);
        if (view.screen === 'QUIZ') renderQuiz(view);
        if (view.screen === 'RESULT') renderResult(view);
      }

      async function send(path, body) {
        try {
          const response = await fetch(path, {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(body || {}),
          });
          const payload = await response.json();
          if (!response.ok) {
            console.warn('Request rejected:', payload.detail);
            await refresh();
            return;
          }
          render(payload.view);
        } catch (error) {
          console.error('Error contacting server:', error);
        }
      }

      async function refresh() {
        const response = await fetch('/state');
        render(await response.json());
      }

      document.getElementById('start-btn').addEventListener('click', () => send('/start'));
      document.getElementById('restart-btn').addEventListener('click', () => send('/restart'));
      nextBtn.addEventListener('click', () => send('/advance', { question_id: renderedQuestionId }));
      document.addEventListener('keydown', event => {
        if (event.key === 'Enter' || event.key === ' ' || (event.key >= '1' && event.key <= '9')) {
          if (!screens.QUIZ.classList.contains('hidden')) {
            event.preventDefault();
            send('/key', { key: event.key, question_id: renderedQuestionId });
          }
        }
      });
      refresh();
      setInterval(() => refresh().catch(() => {}), POLL_INTERVAL_MS);
    </script>
  </body>
</html>
"""


class AnswerPayload(BaseModel):
    """Payload schema for a selected answer."""

    selected_index: int
    question_id: int | str | None = None


class AdvancePayload(BaseModel):
    """Payload schema for moving past the displayed question."""

    question_id: int | str | None = None


class KeyPayload(BaseModel):
    """Payload schema for a forwarded key press."""

    key: str
    question_id: int | str | None = None


def _render_quiz_page() -> str:
    # Markers inside markup are HTML-escaped; markers inside the script become JS literals.
    replacements = {
        "__APP_NAME__": html.escape(APP_NAME),
        "__START_DESCRIPTION__": html.escape(START_DESCRIPTION),
        "__START_BUTTON_TEXT__": html.escape(START_BUTTON_TEXT),
        "__RESTART_BUTTON_TEXT__": html.escape(RESTART_BUTTON_TEXT),
        "__LOAD_ERROR_MESSAGE__": json.dumps(LOAD_ERROR_MESSAGE),
        "__PLACEHOLDER_IMAGE__": json.dumps(PLACEHOLDER_IMAGE),
        "__POLL_INTERVAL_MS__": json.dumps(STATE_POLL_INTERVAL_MS),
    }
    page = _QUIZ_PAGE_HTML
    for marker, value in replacements.items():
        page = page.replace(marker, value)
    return page


def _image_url(image_ref: str | None, source_dir: Path | None) -> str | None:
    if not image_ref:
        return None
    if "://" in image_ref or image_ref.startswith("data:"):
        return image_ref
    if source_dir is None:
        return None
    return f"/media/{image_ref.lstrip('/')}"


def serialize_view(view: SessionView, source_dir: Path | None = None) -> dict[str, object]:
    """Convert a session view into the JSON payload consumed by the page."""
    payload: dict[str, object] = {
        "screen": view.screen.name,
        "question_count": view.question_count,
        "question_count_text": (
            START_COUNT_TEMPLATE.format(count=view.question_count)
            if view.can_start
            else NO_QUESTIONS_MESSAGE
        ),
        "can_start": view.can_start,
        "load_error": view.load_error,
        "position": view.position,
        "total": view.total,
        "progress_percentage": view.progress_percentage,
        "next_enabled": view.next_enabled,
        "next_label": view.next_label,
        "question": None,
        "answers": [
            {
                "index": answer.index,
                "text": answer.text,
                "html": renderer.render_inline(answer.text),
                "mark": answer.mark.name,
                "enabled": answer.enabled,
            }
            for answer in view.answers
        ],
        "summary": None,
    }
    if view.question_text is not None:
        payload["question"] = {
            "id": view.question_id,
            "html": renderer.render_fragment(view.question_text),
            "image_url": _image_url(view.image_ref, source_dir),
        }
    if view.summary is not None:
        content = tier_content(view.summary.tier)
        payload["summary"] = {
            "total": view.summary.total,
            "correct": view.summary.correct,
            "wrong": view.summary.wrong,
            "percentage": view.summary.percentage,
            "tier": view.summary.tier.name,
            "icon": content.icon,
            "title": content.title,
            "message": content.message,
        }
    return payload


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def create_api_app(quiz_manager: QuizManager, input_mapper: InputMapper | None = None) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)
    mapper = input_mapper or InputMapper(quiz_manager)
    quiz_page = _render_quiz_page()

    @app.exception_handler(QuizError)
    async def handle_quiz_error(request: Request, exc: QuizError) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), 400)
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    def respond(handled: bool, manager: QuizManager) -> dict[str, object]:
        return {
            "handled": handled,
            "view": serialize_view(manager.get_view(), manager.get_source_dir()),
        }

    @app.get("/", response_class=HTMLResponse)
    def serve_quiz_page() -> str:
        return quiz_page

    @app.get("/state")
    def get_state(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return serialize_view(manager.get_view(), manager.get_source_dir())

    @app.get("/summary")
    def get_summary(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        summary = manager.get_summary()
        return {
            "total": summary.total,
            "correct": summary.correct,
            "wrong": summary.wrong,
            "percentage": summary.percentage,
            "tier": summary.tier.name,
        }

    @app.post("/start")
    def start_quiz(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return respond(mapper.dispatch(StartRequested()), manager)

    @app.post("/answer")
    def submit_answer(
        payload: AnswerPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        return respond(mapper.dispatch(AnswerSelected(payload.selected_index, payload.question_id)), manager)

    @app.post("/advance")
    def advance(
        payload: AdvancePayload | None = None,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        question_id = payload.question_id if payload is not None else None
        return respond(mapper.dispatch(AdvanceRequested(question_id)), manager)

    @app.post("/restart")
    def restart(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return respond(mapper.dispatch(RestartRequested()), manager)

    @app.post("/key")
    def press_key(
        payload: KeyPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        return respond(mapper.dispatch(KeyPressed(payload.key, payload.question_id)), manager)

    @app.get("/media/{file_path:path}")
    def serve_media(file_path: str, manager: QuizManager = Depends(quiz_manager_dep)) -> FileResponse:
        source_dir = manager.get_source_dir()
        if source_dir is None:
            raise HTTPException(status_code=404, detail="No question file loaded.")
        candidate = (source_dir / file_path).resolve()
        if not candidate.is_relative_to(source_dir) or not candidate.is_file():
            raise HTTPException(status_code=404, detail="Image not found.")
        return FileResponse(candidate)

    return app


def start_api_server(
    quiz_manager: QuizManager,
    input_mapper: InputMapper | None = None,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_manager, input_mapper)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    return thread
