"""Pure transitions of the quiz session state machine.

Every function takes a ``Session`` and returns a new one; the input session is
never modified. A rejected transition raises and leaves the caller holding the
unchanged session.
"""

from __future__ import annotations

from dataclasses import replace
import random
from typing import Sequence

from kvizoteka.core.errors import (
    EmptyQuestionSet,
    InvalidAnswerIndex,
    NotYetAnswered,
    SessionNotInProgress,
)
from kvizoteka.core.models import AnswerOutcome, Question, Session, SessionPhase
from kvizoteka.core.shuffler import shuffle


def new_session() -> Session:
    return Session()


def start(questions: Sequence[Question], rng: random.Random | None = None) -> Session:
    """Begin a session over a freshly shuffled copy of ``questions``."""
    if not questions:
        raise EmptyQuestionSet("Cannot start a quiz without questions.")
    return Session(
        questions=tuple(shuffle(questions, rng)),
        current_index=0,
        score=0,
        phase=SessionPhase.IN_PROGRESS,
        current_outcome=None,
    )


def submit_answer(session: Session, selected_index: int) -> tuple[Session, AnswerOutcome]:
    """Record the answer for the current question.

    A second submission for the same question returns the first outcome and
    the session unchanged.
    """
    _require_in_progress(session, "submit an answer")
    if session.current_outcome is not None:
        return session, session.current_outcome

    question = session.questions[session.current_index]
    if not 0 <= selected_index < question.answer_count:
        raise InvalidAnswerIndex(selected_index, question.answer_count)

    is_correct = selected_index == question.correct_answer_index
    outcome = AnswerOutcome(
        selected_index=selected_index,
        correct_index=question.correct_answer_index,
        is_correct=is_correct,
    )
    updated = replace(
        session,
        score=session.score + 1 if is_correct else session.score,
        current_outcome=outcome,
    )
    return updated, outcome


def advance(session: Session) -> Session:
    """Move to the next question, finishing the session after the last one."""
    _require_in_progress(session, "advance")
    if session.current_outcome is None:
        raise NotYetAnswered("The current question must be answered before advancing.")

    next_index = session.current_index + 1
    if next_index == session.total:
        return replace(
            session,
            current_index=next_index,
            phase=SessionPhase.FINISHED,
            current_outcome=None,
        )
    return replace(session, current_index=next_index, current_outcome=None)


def restart(
    session: Session,
    questions: Sequence[Question] | None = None,
    rng: random.Random | None = None,
) -> Session:
    """Start over with the full question set in a new random order.

    ``questions`` defaults to the set already held by ``session``.
    """
    pool = session.questions if questions is None else questions
    return start(pool, rng)


def _require_in_progress(session: Session, action: str) -> None:
    if session.phase is not SessionPhase.IN_PROGRESS:
        raise SessionNotInProgress(
            f"Cannot {action} while the quiz is {session.phase.name.lower().replace('_', ' ')}."
        )
