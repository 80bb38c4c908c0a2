"""Service holding the loaded question set."""

from __future__ import annotations

from typing import Sequence

from kvizoteka.constants.quiz_constants import MAX_ANSWER_COUNT, MIN_ANSWER_COUNT
from kvizoteka.core.errors import EmptyQuestionSet
from kvizoteka.core.models import Question


class QuizRepository:
    """Stores the full, validated question set that every session starts from."""

    def __init__(self) -> None:
        self._questions: tuple[Question, ...] = ()

    def load_questions(self, questions: Sequence[Question]) -> None:
        """Replace the current set with a new list of questions."""
        if not questions:
            raise EmptyQuestionSet("Question set must contain at least one question.")

        prepared = [self._prepare_question(q) for q in questions]
        seen_ids: set[int | str] = set()
        for question in prepared:
            if question.id in seen_ids:
                raise ValueError(f"Duplicate question id: {question.id!r}")
            seen_ids.add(question.id)
        self._questions = tuple(prepared)

    def get_questions(self) -> tuple[Question, ...]:
        return self._questions

    def has_questions(self) -> bool:
        return bool(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def _prepare_question(self, question: Question) -> Question:
        """Validate and normalize a question before storage."""
        cleaned_text = question.text.strip()
        if not cleaned_text:
            raise ValueError(f"Question {question.id!r} has no text.")

        answers = self._validate_answers(question)
        if not 0 <= question.correct_answer_index < len(answers):
            raise ValueError(
                f"Question {question.id!r}: correct answer index {question.correct_answer_index} "
                f"is not between 0 and {len(answers) - 1}."
            )

        image_ref = question.image_ref.strip() if question.image_ref else None
        return Question(
            id=question.id,
            text=cleaned_text,
            answers=answers,
            correct_answer_index=question.correct_answer_index,
            image_ref=image_ref or None,
        )

    @staticmethod
    def _validate_answers(question: Question) -> tuple[str, ...]:
        count = len(question.answers)
        if not MIN_ANSWER_COUNT <= count <= MAX_ANSWER_COUNT:
            raise ValueError(
                f"Question {question.id!r} must have between {MIN_ANSWER_COUNT} "
                f"and {MAX_ANSWER_COUNT} answers, got {count}."
            )
        cleaned = tuple(answer.strip() for answer in question.answers)
        if any(not answer for answer in cleaned):
            raise ValueError(f"Question {question.id!r} has an empty answer.")
        return cleaned
