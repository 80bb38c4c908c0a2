"""Exceptions raised by the quiz core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for all quiz session and loading errors."""


class EmptyQuestionSet(QuizError):
    """Raised when a session is started without any questions."""


class InvalidAnswerIndex(QuizError):
    """Raised when a selected answer index is outside the current question."""

    def __init__(self, selected_index: int, answer_count: int) -> None:
        super().__init__(
            f"Answer index {selected_index} is out of range for a question with {answer_count} answers."
        )
        self.selected_index = selected_index
        self.answer_count = answer_count


class NotYetAnswered(QuizError):
    """Raised when advancing past a question that has not been answered."""


class SessionNotInProgress(QuizError):
    """Raised when an in-quiz transition is requested outside a running quiz."""


class SessionNotFinished(QuizError):
    """Raised when a result summary is requested before the last question."""


class QuestionLoadError(QuizError):
    """Raised when a question document cannot be read or parsed."""
