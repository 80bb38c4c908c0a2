import pytest

from kvizoteka.core.errors import (
    EmptyQuestionSet,
    NotYetAnswered,
    QuestionLoadError,
    SessionNotFinished,
)
from kvizoteka.core.models import SessionPhase
from kvizoteka.core.quiz_manager import QuizManager
from kvizoteka.core.view_state import Screen

from conftest import make_questions


def _fail_loading():
    raise QuestionLoadError("questions.json could not be fetched")


def test_fresh_manager_is_inert():
    manager = QuizManager()

    view = manager.get_view()
    assert view.screen is Screen.START
    assert not view.can_start
    assert not manager.has_questions()
    with pytest.raises(EmptyQuestionSet):
        manager.start_quiz()
    assert manager.get_session().phase is SessionPhase.NOT_STARTED


def test_load_failure_records_error_and_stays_not_started():
    manager = QuizManager()
    views = []
    manager.subscribe(views.append)

    assert not manager.load_questions(_fail_loading)

    assert manager.get_load_error() == "questions.json could not be fetched"
    assert manager.get_session().phase is SessionPhase.NOT_STARTED
    assert views[-1].load_error == "questions.json could not be fetched"
    assert not views[-1].can_start


def test_load_failure_keeps_previous_question_set(manager):
    assert not manager.load_questions(_fail_loading)

    assert manager.get_question_count() == 5
    assert manager.get_load_error() is not None


def test_invalid_question_set_is_rejected(manager):
    duplicated = make_questions(2) + make_questions(1)

    assert not manager.load_questions(lambda: duplicated)
    assert "Duplicate" in manager.get_load_error()
    assert manager.get_question_count() == 5


def test_empty_question_set_is_rejected():
    manager = QuizManager()
    assert not manager.load_questions(list)
    assert not manager.has_questions()


def test_successful_load_clears_error_and_resets_session(manager):
    manager.start_quiz()
    manager.load_questions(_fail_loading)

    assert manager.load_questions(lambda: make_questions(3))

    assert manager.get_load_error() is None
    assert manager.get_question_count() == 3
    assert manager.get_session().phase is SessionPhase.NOT_STARTED


def test_start_uses_every_loaded_question(manager, questions):
    manager.start_quiz()

    session = manager.get_session()
    assert sorted(q.id for q in session.questions) == [q.id for q in questions]


def test_shuffle_seed_makes_order_reproducible(questions):
    orders = []
    for _ in range(2):
        manager = QuizManager()
        manager.set_shuffle_seed(7)
        manager.load_questions(lambda: questions)
        manager.start_quiz()
        orders.append([q.id for q in manager.get_session().questions])

    assert orders[0] == orders[1]


def test_subscribers_receive_view_after_each_transition(manager):
    views = []
    manager.subscribe(views.append)

    manager.start_quiz()
    manager.submit_answer(0)
    manager.advance()

    assert [view.screen for view in views] == [Screen.QUIZ] * 3
    assert views[1].next_enabled
    assert views[2].position == 2
    assert not views[2].next_enabled


def test_repeated_answer_does_not_notify(manager):
    manager.start_quiz()
    first = manager.submit_answer(1)
    views = []
    manager.subscribe(views.append)

    second = manager.submit_answer(2)

    assert second == first
    assert views == []
    assert manager.get_session().score == int(first.is_correct)


def test_unsubscribe_stops_notifications(manager):
    views = []
    unsubscribe = manager.subscribe(views.append)
    unsubscribe()
    unsubscribe()

    manager.start_quiz()

    assert views == []


def test_failing_listener_does_not_block_others(manager):
    views = []

    def broken(_view):
        raise RuntimeError("renderer crashed")

    manager.subscribe(broken)
    manager.subscribe(views.append)

    manager.start_quiz()

    assert len(views) == 1


def test_advance_requires_answer(manager):
    manager.start_quiz()
    with pytest.raises(NotYetAnswered):
        manager.advance()


def test_summary_only_after_finish(manager):
    manager.start_quiz()
    with pytest.raises(SessionNotFinished):
        manager.get_summary()

    for _ in range(manager.get_question_count()):
        question = manager.get_session().current_question
        manager.submit_answer(question.correct_answer_index)
        manager.advance()

    summary = manager.get_summary()
    assert summary.correct == 5
    assert summary.percentage == 100
    assert manager.get_view().screen is Screen.RESULT


def test_restart_reshuffles_full_set(manager):
    manager.start_quiz()
    manager.submit_answer(0)
    manager.advance()

    view = manager.restart()

    session = manager.get_session()
    assert view.screen is Screen.QUIZ
    assert view.position == 1
    assert session.score == 0
    assert session.total == 5


def test_load_from_file_sets_source_dir(tmp_path):
    question_file = tmp_path / "questions.txt"
    question_file.write_text("Q: One?\nA: Yes\nB: No\nCORRECT: A\n", encoding="utf-8")
    manager = QuizManager()

    assert manager.load_from_file(question_file)

    assert manager.get_source_dir() == tmp_path.resolve()
    assert manager.get_question_count() == 1


def test_load_from_missing_file_records_error(tmp_path):
    manager = QuizManager()

    assert not manager.load_from_file(tmp_path / "missing.json")

    assert "Could not read" in manager.get_load_error()
    assert manager.get_source_dir() is None


def test_provider_os_error_is_recorded_not_raised():
    manager = QuizManager()
    views = []
    manager.subscribe(views.append)

    def unreachable():
        raise OSError("network down")

    assert not manager.load_questions(unreachable)

    assert manager.get_load_error() == "network down"
    assert manager.get_session().phase is SessionPhase.NOT_STARTED
    assert views[-1].load_error == "network down"


def test_unexpected_provider_error_keeps_previous_set(manager):
    def broken():
        raise RuntimeError()

    assert not manager.load_questions(broken)

    assert manager.get_load_error() == "RuntimeError"
    assert manager.get_question_count() == 5


def test_rejected_guard_leaves_session_untouched(manager):
    views = []
    manager.subscribe(views.append)

    assert manager.start_quiz(guard=lambda view: False) is None
    assert manager.get_session().phase is SessionPhase.NOT_STARTED

    manager.start_quiz()
    assert manager.submit_answer(0, guard=lambda view: False) is None
    assert not manager.get_session().answered_current
    assert len(views) == 1


def test_guard_sees_current_view(manager):
    manager.start_quiz()
    seen = []

    def record(view):
        seen.append(view)
        return True

    manager.submit_answer(0, guard=record)

    assert seen[0].screen is Screen.QUIZ
    assert seen[0].position == 1
    assert not seen[0].next_enabled
