import pytest

from kvizoteka.core.errors import EmptyQuestionSet
from kvizoteka.core.models import Question
from kvizoteka.core.services.quiz_repository import QuizRepository

from conftest import make_questions


def test_load_normalizes_questions():
    repository = QuizRepository()
    repository.load_questions(
        [Question(id="a", text="  Spaced?  ", answers=(" yes ", "no"), correct_answer_index=1, image_ref="  ")]
    )

    stored = repository.get_questions()[0]
    assert stored.text == "Spaced?"
    assert stored.answers == ("yes", "no")
    assert stored.image_ref is None


def test_load_replaces_previous_set():
    repository = QuizRepository()
    repository.load_questions(make_questions(4))
    repository.load_questions(make_questions(2))

    assert repository.get_question_count() == 2


def test_empty_set_is_rejected():
    with pytest.raises(EmptyQuestionSet):
        QuizRepository().load_questions([])


@pytest.mark.parametrize(
    "question",
    [
        Question(id=1, text=" ", answers=("a", "b"), correct_answer_index=0),
        Question(id=1, text="Q?", answers=("a",), correct_answer_index=0),
        Question(id=1, text="Q?", answers=tuple("abcdefghij"), correct_answer_index=0),
        Question(id=1, text="Q?", answers=("a", "b"), correct_answer_index=2),
        Question(id=1, text="Q?", answers=("a", " "), correct_answer_index=0),
    ],
)
def test_invalid_questions_are_rejected(question):
    repository = QuizRepository()
    with pytest.raises(ValueError):
        repository.load_questions([question])
    assert not repository.has_questions()


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError, match="Duplicate"):
        QuizRepository().load_questions(make_questions(2) + make_questions(1))

