"""Business logic for the quiz session shared between the Qt window and the API."""

from __future__ import annotations

import logging
from pathlib import Path
import random
from threading import Lock
from typing import Callable, Sequence

from kvizoteka.core.errors import EmptyQuestionSet, QuizError
from kvizoteka.core.models import AnswerOutcome, Question, ResultSummary, Session
from kvizoteka.core.question_loader import load_questions_from_file
from kvizoteka.core.services import session_machine
from kvizoteka.core.services.quiz_repository import QuizRepository
from kvizoteka.core.services.scorer import summarize
from kvizoteka.core.view_state import SessionView, build_view

logger = logging.getLogger(__name__)

ViewListener = Callable[[SessionView], None]
QuestionProvider = Callable[[], Sequence[Question]]
ViewGuard = Callable[[SessionView], bool]


class QuizManager:
    """Facade over the question repository and the single quiz session.

    Transitions are serialized by a lock; subscribers receive a fresh
    ``SessionView`` after every transition, outside the lock.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._repository = QuizRepository()
        self._session: Session = session_machine.new_session()
        self._rng = random.Random()
        self._load_error: str | None = None
        self._source_dir: Path | None = None
        self._listeners: list[ViewListener] = []

    # --- Question loading ---

    def load_questions(self, provider: QuestionProvider, source_dir: Path | None = None) -> bool:
        """Load a question set from ``provider``.

        On failure the error is recorded and reported to subscribers; the
        previously loaded set and session stay as they were.
        """
        try:
            questions = provider()
            with self._lock:
                self._repository.load_questions(questions)
                self._session = session_machine.new_session()
                self._load_error = None
                self._source_dir = source_dir
                count = self._repository.get_question_count()
        except (QuizError, ValueError) as exc:
            logger.error("Failed to load questions: %s", exc)
            return self._record_load_failure(exc)
        except Exception as exc:
            logger.exception("Question provider failed")
            return self._record_load_failure(exc)

        logger.info("Question set ready with %d questions", count)
        self._notify()
        return True

    def _record_load_failure(self, exc: Exception) -> bool:
        with self._lock:
            self._load_error = str(exc) or type(exc).__name__
        self._notify()
        return False

    def load_from_file(self, file_path: Path) -> bool:
        return self.load_questions(
            lambda: load_questions_from_file(file_path).questions,
            source_dir=file_path.resolve().parent,
        )

    def get_source_dir(self) -> Path | None:
        """Directory of the loaded question file, for resolving relative image paths."""
        with self._lock:
            return self._source_dir

    def has_questions(self) -> bool:
        with self._lock:
            return self._repository.has_questions()

    def get_question_count(self) -> int:
        with self._lock:
            return self._repository.get_question_count()

    def get_load_error(self) -> str | None:
        with self._lock:
            return self._load_error

    # --- Session transitions ---
    #
    # ``guard`` is evaluated against the current view under the same lock as
    # the transition; when it returns False nothing happens and None is returned.

    def start_quiz(self, guard: ViewGuard | None = None) -> SessionView | None:
        with self._lock:
            if not self._guard_allows(guard):
                return None
            questions = self._repository.get_questions()
            if not questions:
                raise EmptyQuestionSet("No questions are loaded.")
            self._session = session_machine.start(questions, self._rng)
        logger.info("Quiz started with %d questions", len(questions))
        return self._notify()

    def restart(self, guard: ViewGuard | None = None) -> SessionView | None:
        """Start over with the full question set, reshuffled."""
        with self._lock:
            if not self._guard_allows(guard):
                return None
            questions = self._repository.get_questions()
            if not questions:
                raise EmptyQuestionSet("No questions are loaded.")
            self._session = session_machine.restart(self._session, questions, self._rng)
        logger.info("Quiz restarted")
        return self._notify()

    def submit_answer(self, selected_index: int, guard: ViewGuard | None = None) -> AnswerOutcome | None:
        with self._lock:
            if not self._guard_allows(guard):
                return None
            before = self._session
            self._session, outcome = session_machine.submit_answer(before, selected_index)
            changed = self._session is not before
        if not changed:
            logger.debug("Ignoring repeated answer %d for an answered question", selected_index)
            return outcome

        logger.info(
            "Answer %d submitted (%s)",
            selected_index,
            "correct" if outcome.is_correct else "wrong",
        )
        self._notify()
        return outcome

    def advance(self, guard: ViewGuard | None = None) -> SessionView | None:
        with self._lock:
            if not self._guard_allows(guard):
                return None
            self._session = session_machine.advance(self._session)
            finished = self._session.current_question is None
        if finished:
            logger.info("Quiz finished")
        return self._notify()

    # --- Read access ---

    def get_session(self) -> Session:
        with self._lock:
            return self._session

    def get_view(self) -> SessionView:
        with self._lock:
            return self._build_view_locked()

    def get_summary(self) -> ResultSummary:
        with self._lock:
            return summarize(self._session)

    # --- Settings & subscribers ---

    def set_shuffle_seed(self, seed: int | None) -> None:
        with self._lock:
            self._rng.seed(seed)

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Register ``listener`` for post-transition views; returns an unsubscribe callable."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _guard_allows(self, guard: ViewGuard | None) -> bool:
        return guard is None or guard(self._build_view_locked())

    def _build_view_locked(self) -> SessionView:
        return build_view(
            self._session,
            question_count=self._repository.get_question_count(),
            load_error=self._load_error,
        )

    def _notify(self) -> SessionView:
        with self._lock:
            view = self._build_view_locked()
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(view)
            except Exception:
                logger.exception("View listener %r failed", listener)
        return view
