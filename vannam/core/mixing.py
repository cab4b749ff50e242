"""Ratio-based paint mixing and accuracy scoring.

A placement is scored by counting the pure primaries in it and scaling each
count against the most-placed primary, so the dominant primary always sits at
full intensity. The result is compared with the target by Manhattan distance
over the three channels.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from vannam.core.color import BLACK, BLUE, GREEN, RED, Color

WIN_ACCURACY = 95.0
MAX_DISTANCE = 255 * 3


@dataclass(frozen=True)
class MixResult:
    """Outcome of scoring a placement against a target."""

    mixed: Color
    accuracy: float
    won: bool


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def count_primaries(units: Iterable[Color]) -> tuple[int, int, int]:
    """Count exact red, green and blue units; anything else is ignored."""
    red = green = blue = 0
    for unit in units:
        if unit == RED:
            red += 1
        elif unit == GREEN:
            green += 1
        elif unit == BLUE:
            blue += 1
    return red, green, blue


def mix(units: Sequence[Color]) -> Color:
    if not units:
        return BLACK
    counts = count_primaries(units)
    max_count = max(*counts, 1)
    return Color(*(_round_half_up(count / max_count * 255) for count in counts))


def accuracy(mixed: Color, target: Color) -> float:
    diff = (
        abs(mixed.r - target.r)
        + abs(mixed.g - target.g)
        + abs(mixed.b - target.b)
    )
    return 100 - (diff / MAX_DISTANCE * 100)


def is_win(score: float, threshold: float = WIN_ACCURACY) -> bool:
    return score >= threshold


def evaluate(placement: Sequence[Color], target: Color, threshold: float = WIN_ACCURACY) -> MixResult:
    mixed = mix(placement)
    score = accuracy(mixed, target)
    return MixResult(mixed=mixed, accuracy=score, won=is_win(score, threshold))
