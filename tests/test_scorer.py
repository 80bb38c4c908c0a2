import pytest

from kvizoteka.constants.quiz_constants import TIER_CONTENT
from kvizoteka.core.errors import SessionNotFinished
from kvizoteka.core.models import ResultTier, Session, SessionPhase
from kvizoteka.core.services.scorer import (
    round_half_up_percentage,
    summarize,
    tier_content,
    tier_for_percentage,
)

from conftest import make_questions


def _finished_session(total, score):
    return Session(
        questions=tuple(make_questions(total)),
        current_index=total,
        score=score,
        phase=SessionPhase.FINISHED,
    )


@pytest.mark.parametrize(
    ("score", "percentage", "tier"),
    [
        (5, 100, ResultTier.PERFECT),
        (4, 80, ResultTier.EXCELLENT),
        (3, 60, ResultTier.GOOD),
        (2, 40, ResultTier.NEEDS_IMPROVEMENT),
        (1, 20, ResultTier.ENCOURAGEMENT),
        (0, 0, ResultTier.ENCOURAGEMENT),
    ],
)
def test_summary_for_five_questions(score, percentage, tier):
    summary = summarize(_finished_session(5, score))

    assert summary.total == 5
    assert summary.correct == score
    assert summary.wrong == 5 - score
    assert summary.percentage == percentage
    assert summary.tier is tier


def test_percentage_rounds_half_up():
    assert round_half_up_percentage(1, 8) == 13
    assert round_half_up_percentage(1, 3) == 33
    assert round_half_up_percentage(2, 3) == 67
    assert round_half_up_percentage(1, 200) == 1
    assert round_half_up_percentage(7, 7) == 100
    assert round_half_up_percentage(0, 9) == 0


def test_percentage_requires_positive_base():
    with pytest.raises(ValueError):
        round_half_up_percentage(0, 0)


def test_tier_boundaries():
    assert tier_for_percentage(100) is ResultTier.PERFECT
    assert tier_for_percentage(99) is ResultTier.EXCELLENT
    assert tier_for_percentage(80) is ResultTier.EXCELLENT
    assert tier_for_percentage(79) is ResultTier.GOOD
    assert tier_for_percentage(60) is ResultTier.GOOD
    assert tier_for_percentage(59) is ResultTier.NEEDS_IMPROVEMENT
    assert tier_for_percentage(40) is ResultTier.NEEDS_IMPROVEMENT
    assert tier_for_percentage(39) is ResultTier.ENCOURAGEMENT
    assert tier_for_percentage(0) is ResultTier.ENCOURAGEMENT


def test_tier_uses_rounded_percentage():
    # 79.5% rounds to 80
    summary = summarize(_finished_session(200, 159))
    assert summary.percentage == 80
    assert summary.tier is ResultTier.EXCELLENT


def test_every_tier_has_display_content():
    for tier in ResultTier:
        content = tier_content(tier)
        assert content is TIER_CONTENT[tier]
        assert content.icon
        assert content.title
        assert content.message


@pytest.mark.parametrize("phase", [SessionPhase.NOT_STARTED, SessionPhase.IN_PROGRESS])
def test_summary_requires_finished_session(phase):
    session = Session(questions=tuple(make_questions(3)), phase=phase)
    with pytest.raises(SessionNotFinished):
        summarize(session)
