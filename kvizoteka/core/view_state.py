"""Derived, read-only view of a session for renderers.

Renderers never keep their own enabled/disabled flags; they redraw from the
``SessionView`` built here after every transition.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from kvizoteka.constants.ui_constants import FINISH_BUTTON_TEXT, NEXT_BUTTON_TEXT
from kvizoteka.core.models import ResultSummary, Session, SessionPhase
from kvizoteka.core.services.scorer import round_half_up_percentage, summarize


class Screen(Enum):
    START = auto()
    QUIZ = auto()
    RESULT = auto()


class AnswerMark(Enum):
    NEUTRAL = auto()
    CORRECT = auto()
    WRONG = auto()


@dataclass(frozen=True, slots=True)
class AnswerView:
    index: int
    text: str
    mark: AnswerMark
    enabled: bool


@dataclass(frozen=True, slots=True)
class SessionView:
    """Everything a renderer needs to redraw after a transition."""

    screen: Screen
    question_count: int
    load_error: str | None = None
    question_id: int | str | None = None
    question_text: str | None = None
    image_ref: str | None = None
    answers: tuple[AnswerView, ...] = ()
    position: int = 0
    total: int = 0
    progress_percentage: int = 0
    next_enabled: bool = False
    next_label: str = NEXT_BUTTON_TEXT
    summary: ResultSummary | None = None

    @property
    def can_start(self) -> bool:
        return self.question_count > 0


def build_view(session: Session, question_count: int = 0, load_error: str | None = None) -> SessionView:
    """Project a session onto the state shown by renderers."""
    if session.phase is SessionPhase.NOT_STARTED:
        return SessionView(
            screen=Screen.START,
            question_count=question_count,
            load_error=load_error,
        )

    if session.phase is SessionPhase.FINISHED:
        return SessionView(
            screen=Screen.RESULT,
            question_count=question_count,
            load_error=load_error,
            position=session.total,
            total=session.total,
            progress_percentage=100,
            summary=summarize(session),
        )

    question = session.questions[session.current_index]
    outcome = session.current_outcome
    answers = []
    for index, text in enumerate(question.answers):
        mark = AnswerMark.NEUTRAL
        if outcome is not None:
            if index == outcome.correct_index:
                mark = AnswerMark.CORRECT
            elif index == outcome.selected_index:
                mark = AnswerMark.WRONG
        answers.append(AnswerView(index=index, text=text, mark=mark, enabled=outcome is None))

    position = session.current_index + 1
    return SessionView(
        screen=Screen.QUIZ,
        question_count=question_count,
        load_error=load_error,
        question_id=question.id,
        question_text=question.text,
        image_ref=question.image_ref,
        answers=tuple(answers),
        position=position,
        total=session.total,
        progress_percentage=round_half_up_percentage(position, session.total),
        next_enabled=outcome is not None,
        next_label=FINISH_BUTTON_TEXT if session.is_last_question else NEXT_BUTTON_TEXT,
    )
