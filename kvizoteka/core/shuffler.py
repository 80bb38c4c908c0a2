"""Randomized ordering of question sets."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")

_default_rng = random.Random()


def shuffle(sequence: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``sequence`` (Fisher-Yates).

    The input is never modified. Pass a seeded ``random.Random`` for a
    reproducible order.
    """
    rng = rng or _default_rng
    shuffled = list(sequence)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
