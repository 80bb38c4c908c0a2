"""Routing of raw user input to quiz session transitions.

Every decision is made against the manager's current ``SessionView`` inside
the same lock as the transition, so a stale button state in a renderer can
never trigger a transition the session would not allow. Inputs that do not
apply are ignored.

Renderers that may lag behind the session (the browser page) send the id of
the question they were showing; input aimed at another question is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from kvizoteka.constants.quiz_constants import ADVANCE_KEYS
from kvizoteka.core.models import AnswerOutcome
from kvizoteka.core.quiz_manager import QuizManager
from kvizoteka.core.view_state import Screen, SessionView

logger = logging.getLogger(__name__)

QuestionId = int | str | None


@dataclass(frozen=True, slots=True)
class AnswerSelected:
    index: int
    question_id: QuestionId = None


@dataclass(frozen=True, slots=True)
class AdvanceRequested:
    question_id: QuestionId = None


@dataclass(frozen=True, slots=True)
class RestartRequested:
    pass


@dataclass(frozen=True, slots=True)
class StartRequested:
    pass


@dataclass(frozen=True, slots=True)
class KeyPressed:
    """A key press, named the way browsers report ``KeyboardEvent.key``."""

    key: str
    question_id: QuestionId = None


InputEvent = AnswerSelected | AdvanceRequested | RestartRequested | StartRequested | KeyPressed


class InputMapper:
    """Translates discrete input events into ``QuizManager`` calls."""

    def __init__(self, quiz_manager: QuizManager) -> None:
        self.quiz_manager = quiz_manager

    def dispatch(self, event: InputEvent) -> bool:
        """Handle one input event; returns True when it caused a transition."""
        if isinstance(event, AnswerSelected):
            return self.select_answer(event.index, event.question_id) is not None
        if isinstance(event, AdvanceRequested):
            return self.request_advance(event.question_id)
        if isinstance(event, RestartRequested):
            return self.request_restart()
        if isinstance(event, StartRequested):
            return self.request_start()
        if isinstance(event, KeyPressed):
            return self.handle_key(event.key, event.question_id)
        raise TypeError(f"Unsupported input event: {event!r}")

    def select_answer(self, index: int, question_id: QuestionId = None) -> AnswerOutcome | None:
        def allowed(view: SessionView) -> bool:
            return _on_question(view, question_id) and _answer_enabled(view, index)

        outcome = self.quiz_manager.submit_answer(index, guard=allowed)
        if outcome is None:
            logger.debug("Ignoring answer selection %d", index)
        return outcome

    def request_advance(self, question_id: QuestionId = None) -> bool:
        def allowed(view: SessionView) -> bool:
            return _on_question(view, question_id) and view.next_enabled

        if self.quiz_manager.advance(guard=allowed) is None:
            logger.debug("Ignoring advance request")
            return False
        return True

    def request_start(self) -> bool:
        def allowed(view: SessionView) -> bool:
            return view.screen is Screen.START and view.can_start

        if self.quiz_manager.start_quiz(guard=allowed) is None:
            logger.debug("Ignoring start request")
            return False
        return True

    def request_restart(self) -> bool:
        if self.quiz_manager.restart(guard=lambda view: view.can_start) is None:
            logger.debug("Ignoring restart request without questions")
            return False
        return True

    def handle_key(self, key: str, question_id: QuestionId = None) -> bool:
        """Enter/Space advance; digits 1-9 pick an answer by position."""
        if key in ADVANCE_KEYS:
            return self.request_advance(question_id)
        if len(key) == 1 and "1" <= key <= "9":
            return self.select_answer(int(key) - 1, question_id) is not None
        return False


def _on_question(view: SessionView, question_id: QuestionId) -> bool:
    if view.screen is not Screen.QUIZ:
        return False
    return question_id is None or question_id == view.question_id


def _answer_enabled(view: SessionView, index: int) -> bool:
    if not 0 <= index < len(view.answers):
        return False
    return view.answers[index].enabled
