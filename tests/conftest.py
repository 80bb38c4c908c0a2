from __future__ import annotations

import random

import pytest

from kvizoteka.core.input_mapper import InputMapper
from kvizoteka.core.models import Question
from kvizoteka.core.quiz_manager import QuizManager


def make_questions(count: int, answer_count: int = 4) -> list[Question]:
    return [
        Question(
            id=number,
            text=f"Question {number}?",
            answers=tuple(f"Answer {number}.{option}" for option in range(answer_count)),
            correct_answer_index=number % answer_count,
        )
        for number in range(1, count + 1)
    ]


@pytest.fixture
def questions() -> list[Question]:
    return make_questions(5)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def manager(questions: list[Question]) -> QuizManager:
    quiz_manager = QuizManager()
    quiz_manager.set_shuffle_seed(42)
    assert quiz_manager.load_questions(lambda: questions)
    return quiz_manager


@pytest.fixture
def mapper(manager: QuizManager) -> InputMapper:
    return InputMapper(manager)
