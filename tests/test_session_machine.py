import pytest

from kvizoteka.core.errors import (
    EmptyQuestionSet,
    InvalidAnswerIndex,
    NotYetAnswered,
    SessionNotInProgress,
)
from kvizoteka.core.models import SessionPhase
from kvizoteka.core.services import session_machine

from conftest import make_questions


def _answer_all(session, correct_count):
    """Answer every question, getting the first ``correct_count`` right."""
    for position in range(session.total):
        question = session.current_question
        if position < correct_count:
            selected = question.correct_answer_index
        else:
            selected = (question.correct_answer_index + 1) % question.answer_count
        session, _ = session_machine.submit_answer(session, selected)
        session = session_machine.advance(session)
    return session


def test_new_session_is_not_started():
    session = session_machine.new_session()
    assert session.phase is SessionPhase.NOT_STARTED
    assert session.current_question is None
    assert not session.answered_current


def test_start_shuffles_full_set(questions, rng):
    session = session_machine.start(questions, rng)

    assert session.phase is SessionPhase.IN_PROGRESS
    assert session.current_index == 0
    assert session.score == 0
    assert not session.answered_current
    assert sorted(q.id for q in session.questions) == sorted(q.id for q in questions)


def test_start_with_empty_list_raises_and_keeps_session_not_started():
    session = session_machine.new_session()
    with pytest.raises(EmptyQuestionSet):
        session = session_machine.start([])
    assert session.phase is SessionPhase.NOT_STARTED


def test_submit_correct_answer_scores(questions, rng):
    session = session_machine.start(questions, rng)
    correct = session.current_question.correct_answer_index

    session, outcome = session_machine.submit_answer(session, correct)

    assert outcome.is_correct
    assert outcome.selected_index == correct
    assert outcome.correct_index == correct
    assert session.score == 1
    assert session.answered_current


def test_submit_wrong_answer_does_not_score(questions, rng):
    session = session_machine.start(questions, rng)
    question = session.current_question
    wrong = (question.correct_answer_index + 1) % question.answer_count

    session, outcome = session_machine.submit_answer(session, wrong)

    assert not outcome.is_correct
    assert outcome.correct_index == question.correct_answer_index
    assert session.score == 0
    assert session.answered_current


def test_double_submit_returns_same_outcome_and_scores_once(questions, rng):
    session = session_machine.start(questions, rng)
    correct = session.current_question.correct_answer_index

    session, first = session_machine.submit_answer(session, correct)
    again, second = session_machine.submit_answer(session, correct)
    other, third = session_machine.submit_answer(session, (correct + 1) % 4)

    assert first == second == third
    assert again is session
    assert other is session
    assert session.score == 1


def test_invalid_answer_index_leaves_state_unchanged(questions, rng):
    session = session_machine.start(questions, rng)

    for bad_index in (-1, 4, 99):
        with pytest.raises(InvalidAnswerIndex):
            session_machine.submit_answer(session, bad_index)

    assert not session.answered_current
    assert session.score == 0


def test_advance_before_answer_raises(questions, rng):
    session = session_machine.start(questions, rng)
    with pytest.raises(NotYetAnswered):
        session_machine.advance(session)
    assert session.current_index == 0


def test_advance_moves_to_next_question_and_resets_answered(questions, rng):
    session = session_machine.start(questions, rng)
    session, _ = session_machine.submit_answer(session, 0)

    session = session_machine.advance(session)

    assert session.current_index == 1
    assert not session.answered_current
    assert session.phase is SessionPhase.IN_PROGRESS


def test_transitions_rejected_outside_in_progress(questions, rng):
    not_started = session_machine.new_session()
    with pytest.raises(SessionNotInProgress):
        session_machine.submit_answer(not_started, 0)
    with pytest.raises(SessionNotInProgress):
        session_machine.advance(not_started)

    finished = _answer_all(session_machine.start(questions, rng), 5)
    with pytest.raises(SessionNotInProgress):
        session_machine.submit_answer(finished, 0)
    with pytest.raises(SessionNotInProgress):
        session_machine.advance(finished)


def test_session_finishes_after_one_advance_per_question(rng):
    questions = make_questions(7)
    session = session_machine.start(questions, rng)

    advances = 0
    while session.phase is SessionPhase.IN_PROGRESS:
        session, _ = session_machine.submit_answer(session, 0)
        session = session_machine.advance(session)
        advances += 1

    assert advances == len(questions)
    assert session.phase is SessionPhase.FINISHED
    assert session.current_index == session.total == len(questions)
    assert session.current_question is None


def test_score_stays_within_bounds_and_never_decreases(rng):
    session = session_machine.start(make_questions(12, answer_count=3), rng)
    previous_score = 0
    step = 0

    while session.phase is SessionPhase.IN_PROGRESS:
        session, _ = session_machine.submit_answer(session, step % 3)
        assert previous_score <= session.score <= session.current_index + 1
        previous_score = session.score
        session = session_machine.advance(session)
        assert 0 <= session.score <= session.current_index
        step += 1


def test_is_last_question_only_on_final_position(questions, rng):
    session = session_machine.start(questions, rng)
    flags = []
    while session.phase is SessionPhase.IN_PROGRESS:
        flags.append(session.is_last_question)
        session, _ = session_machine.submit_answer(session, 0)
        session = session_machine.advance(session)
    assert flags == [False, False, False, False, True]


def test_restart_from_finished_starts_over(questions, rng):
    finished = _answer_all(session_machine.start(questions, rng), 3)

    restarted = session_machine.restart(finished, rng=rng)

    assert restarted.phase is SessionPhase.IN_PROGRESS
    assert restarted.current_index == 0
    assert restarted.score == 0
    assert sorted(q.id for q in restarted.questions) == sorted(q.id for q in questions)


def test_restart_without_questions_raises():
    with pytest.raises(EmptyQuestionSet):
        session_machine.restart(session_machine.new_session())


def test_transitions_do_not_mutate_input_session(questions, rng):
    started = session_machine.start(questions, rng)
    answered, _ = session_machine.submit_answer(started, 0)
    session_machine.advance(answered)

    assert started.current_index == 0
    assert not started.answered_current
    assert answered.current_index == 0
    assert answered.answered_current
