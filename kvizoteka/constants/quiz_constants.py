"""Quiz-related constants shared across UI and core layers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from kvizoteka.core.models import ResultTier

DEFAULT_QUESTIONS_PATH: Path = Path(__file__).resolve().parents[1] / "data" / "questions.json"

MIN_ANSWER_COUNT: int = 2
# Numeric keys 1-9 select answers, so a question cannot offer more than nine.
MAX_ANSWER_COUNT: int = 9

ADVANCE_KEYS: frozenset[str] = frozenset({"Enter", "Return", " ", "Space", "Spacebar"})


@dataclass(frozen=True, slots=True)
class TierContent:
    """Display content attached to a result tier."""

    icon: str
    title: str
    message: str


TIER_CONTENT: dict[ResultTier, TierContent] = {
    ResultTier.PERFECT: TierContent(
        icon="🏆",
        title="Perfect!",
        message="You answered every question correctly!",
    ),
    ResultTier.EXCELLENT: TierContent(
        icon="🌟",
        title="Excellent!",
        message="Outstanding knowledge, you are nearly there!",
    ),
    ResultTier.GOOD: TierContent(
        icon="👍",
        title="Very good!",
        message="Solid knowledge, but there is still room to improve.",
    ),
    ResultTier.NEEDS_IMPROVEMENT: TierContent(
        icon="🤔",
        title="Could be better!",
        message="Try again and improve your result!",
    ),
    ResultTier.ENCOURAGEMENT: TierContent(
        icon="💪",
        title="Don't give up!",
        message="Every attempt teaches you something new.",
    ),
}
