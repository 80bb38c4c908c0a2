"""Score summaries and result tiers for finished sessions."""

from __future__ import annotations

from kvizoteka.constants.quiz_constants import TIER_CONTENT, TierContent
from kvizoteka.core.errors import SessionNotFinished
from kvizoteka.core.models import ResultSummary, ResultTier, Session, SessionPhase

# Evaluated top-down; 100 must be checked before the >= 80 bracket.
_TIER_THRESHOLDS: tuple[tuple[int, ResultTier], ...] = (
    (80, ResultTier.EXCELLENT),
    (60, ResultTier.GOOD),
    (40, ResultTier.NEEDS_IMPROVEMENT),
)


def round_half_up_percentage(part: int, whole: int) -> int:
    """Return ``round(100 * part / whole)`` with halves rounded up, computed exactly."""
    if whole <= 0:
        raise ValueError("Percentage base must be positive.")
    return (200 * part + whole) // (2 * whole)


def tier_for_percentage(percentage: int) -> ResultTier:
    if percentage == 100:
        return ResultTier.PERFECT
    for threshold, tier in _TIER_THRESHOLDS:
        if percentage >= threshold:
            return tier
    return ResultTier.ENCOURAGEMENT


def tier_content(tier: ResultTier) -> TierContent:
    return TIER_CONTENT[tier]


def summarize(session: Session) -> ResultSummary:
    """Build the result summary of a finished session."""
    if session.phase is not SessionPhase.FINISHED:
        raise SessionNotFinished("Results are only available once the quiz is finished.")

    total = session.total
    correct = session.score
    percentage = round_half_up_percentage(correct, total)
    return ResultSummary(
        total=total,
        correct=correct,
        wrong=total - correct,
        percentage=percentage,
        tier=tier_for_percentage(percentage),
    )
