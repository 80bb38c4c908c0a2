from kvizoteka.constants.ui_constants import FINISH_BUTTON_TEXT, NEXT_BUTTON_TEXT
from kvizoteka.core.models import ResultTier
from kvizoteka.core.services import session_machine
from kvizoteka.core.view_state import AnswerMark, Screen, build_view

from conftest import make_questions


def test_not_started_view_shows_start_screen():
    view = build_view(session_machine.new_session(), question_count=5)

    assert view.screen is Screen.START
    assert view.can_start
    assert view.answers == ()
    assert view.summary is None


def test_start_screen_without_questions_cannot_start():
    view = build_view(session_machine.new_session(), load_error="broken file")

    assert not view.can_start
    assert view.load_error == "broken file"


def test_unanswered_question_enables_answers_only(questions, rng):
    session = session_machine.start(questions, rng)

    view = build_view(session, question_count=len(questions))

    assert view.screen is Screen.QUIZ
    assert view.question_id == session.current_question.id
    assert view.question_text == session.current_question.text
    assert [answer.text for answer in view.answers] == list(session.current_question.answers)
    assert all(answer.enabled for answer in view.answers)
    assert all(answer.mark is AnswerMark.NEUTRAL for answer in view.answers)
    assert not view.next_enabled
    assert view.position == 1
    assert view.total == 5
    assert view.progress_percentage == 20
    assert view.next_label == NEXT_BUTTON_TEXT


def test_wrong_answer_marks_selection_and_correct_answer(questions, rng):
    session = session_machine.start(questions, rng)
    question = session.current_question
    wrong = (question.correct_answer_index + 1) % question.answer_count
    session, _ = session_machine.submit_answer(session, wrong)

    view = build_view(session, question_count=len(questions))

    marks = [answer.mark for answer in view.answers]
    assert marks[question.correct_answer_index] is AnswerMark.CORRECT
    assert marks[wrong] is AnswerMark.WRONG
    assert marks.count(AnswerMark.NEUTRAL) == question.answer_count - 2
    assert not any(answer.enabled for answer in view.answers)
    assert view.next_enabled


def test_correct_answer_marks_only_the_correct_answer(questions, rng):
    session = session_machine.start(questions, rng)
    correct = session.current_question.correct_answer_index
    session, _ = session_machine.submit_answer(session, correct)

    view = build_view(session, question_count=len(questions))

    marks = [answer.mark for answer in view.answers]
    assert marks[correct] is AnswerMark.CORRECT
    assert AnswerMark.WRONG not in marks


def test_last_question_offers_finish_label(rng):
    session = session_machine.start(make_questions(2), rng)
    session, _ = session_machine.submit_answer(session, 0)
    session = session_machine.advance(session)

    view = build_view(session, question_count=2)

    assert view.position == 2
    assert view.progress_percentage == 100
    assert view.next_label == FINISH_BUTTON_TEXT


def test_progress_percentage_rounds_half_up(rng):
    session = session_machine.start(make_questions(8), rng)

    assert build_view(session, question_count=8).progress_percentage == 13


def test_finished_view_carries_summary(rng):
    session = session_machine.start(make_questions(2), rng)
    while session.current_question is not None:
        session, _ = session_machine.submit_answer(session, session.current_question.correct_answer_index)
        session = session_machine.advance(session)

    view = build_view(session, question_count=2)

    assert view.screen is Screen.RESULT
    assert view.position == view.total == 2
    assert view.progress_percentage == 100
    assert view.summary.percentage == 100
    assert view.summary.tier is ResultTier.PERFECT
    assert view.answers == ()
