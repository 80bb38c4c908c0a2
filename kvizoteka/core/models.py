"""Domain models for the quiz runner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class SessionPhase(Enum):
    """Lifecycle phase of a quiz session."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    FINISHED = auto()


class ResultTier(Enum):
    """Score bracket shown on the result screen."""

    PERFECT = auto()
    EXCELLENT = auto()
    GOOD = auto()
    NEEDS_IMPROVEMENT = auto()
    ENCOURAGEMENT = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with at least two answers."""

    id: int | str
    text: str
    answers: tuple[str, ...]
    correct_answer_index: int
    image_ref: str | None = None

    @property
    def answer_count(self) -> int:
        return len(self.answers)


@dataclass(frozen=True, slots=True)
class AnswerOutcome:
    """Result of submitting an answer to the current question."""

    selected_index: int
    correct_index: int
    is_correct: bool


@dataclass(frozen=True, slots=True)
class Session:
    """Immutable snapshot of one run through the question set.

    ``current_outcome`` is the outcome recorded for the question at
    ``current_index``; the question counts as answered exactly when it is set.
    """

    questions: tuple[Question, ...] = ()
    current_index: int = 0
    score: int = 0
    phase: SessionPhase = SessionPhase.NOT_STARTED
    current_outcome: AnswerOutcome | None = None

    @property
    def answered_current(self) -> bool:
        return self.current_outcome is not None

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def current_question(self) -> Question | None:
        if self.phase is not SessionPhase.IN_PROGRESS:
            return None
        return self.questions[self.current_index]

    @property
    def is_last_question(self) -> bool:
        return self.phase is SessionPhase.IN_PROGRESS and self.current_index == self.total - 1


@dataclass(frozen=True, slots=True)
class ResultSummary:
    """Final score snapshot of a finished session."""

    total: int
    correct: int
    wrong: int
    percentage: int
    tier: ResultTier
