from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from vannam.core.color import BLUE, GREEN, RED, Color
from vannam.core.prng import Mulberry32

logger = logging.getLogger(__name__)

LEVEL_COUNT = 250

_CHANNELS = ("r", "g", "b")

PURE_COLORS: List[Color] = [RED, RED, GREEN, GREEN, BLUE, BLUE]

TWO_COLOR_MIXES: List[Color] = [
    Color(255, 255, 0),  # yellow
    Color(255, 255, 0),
    Color(255, 0, 255),  # magenta
    Color(255, 0, 255),
    Color(0, 255, 255),  # cyan
    Color(0, 255, 255),
]


@dataclass(frozen=True)
class Tier:
    number: int
    first: int
    last: int
    rule: Callable[[int], Color]

    def covers(self, level: int) -> bool:
        return self.first <= level <= self.last


def _build(amounts: dict[str, int]) -> Color:
    return Color(amounts.get("r", 0), amounts.get("g", 0), amounts.get("b", 0))


def _pick_primary(rand: Mulberry32) -> tuple[str, list[str]]:
    primary = _CHANNELS[math.floor(rand.random() * 3)]
    others = [c for c in _CHANNELS if c != primary]
    return primary, others


def _pure_color(level: int) -> Color:
    return PURE_COLORS[level - 1]


def _two_color_mix(level: int) -> Color:
    return TWO_COLOR_MIXES[level - 7]


def _single_tint(base: int, spread: int) -> Callable[[int], Color]:
    """One full channel plus a small amount of one other channel."""

    def rule(level: int) -> Color:
        rand = Mulberry32(level)
        primary, others = _pick_primary(rand)
        amount = math.floor(base + rand.random() * spread)
        secondary = others[math.floor(rand.random() * 2)]
        return _build({primary: 255, secondary: amount})

    return rule


def _dominant_with_two_secondaries(level: int) -> Color:
    rand = Mulberry32(level)
    difficulty = (level - 60) / 40
    primary, others = _pick_primary(rand)
    secondary1 = math.floor(40 + rand.random() * (40 + difficulty * 80))
    secondary2 = math.floor(20 + rand.random() * (30 + difficulty * 60))
    return _build({
        primary: 255,
        others[0]: min(255, secondary1),
        others[1]: min(255, secondary2),
    })


def _balanced_three(level: int) -> Color:
    rand = Mulberry32(level)
    difficulty = (level - 100) / 50
    primary, others = _pick_primary(rand)
    primary_amount = math.floor(200 + rand.random() * 55)
    secondary1 = math.floor(50 + rand.random() * (100 + difficulty * 100))
    secondary2 = math.floor(30 + rand.random() * (70 + difficulty * 100))
    return _build({
        primary: primary_amount,
        others[0]: min(255, secondary1),
        others[1]: min(255, secondary2),
    })


def _all_significant(level: int) -> Color:
    rand = Mulberry32(level)
    difficulty = (level - 150) / 50
    values = [math.floor(80 + rand.random() * (100 + difficulty * 75)) for _ in _CHANNELS]
    if max(values) - min(values) < 50:
        # push one channel forward so the mix is not a flat grey
        dominant = math.floor(rand.random() * 3)
        values[dominant] = min(255, values[dominant] + 50)
    return Color(*values)


def _full_range(level: int) -> Color:
    rand = Mulberry32(level)
    values = [math.floor(rand.random() * 256) for _ in _CHANNELS]
    brightness = sum(values) / 3
    if brightness < 30:
        boost = 30 - brightness
        values = [min(255, math.ceil(v + boost)) for v in values]
    return Color(*values)


TIERS: List[Tier] = [
    Tier(1, 1, 6, _pure_color),
    Tier(2, 7, 12, _two_color_mix),
    Tier(3, 13, 30, _single_tint(10, 20)),
    Tier(4, 31, 60, _single_tint(30, 30)),
    Tier(5, 61, 100, _dominant_with_two_secondaries),
    Tier(6, 101, 150, _balanced_three),
    Tier(7, 151, 200, _all_significant),
    Tier(8, 201, LEVEL_COUNT, _full_range),
]


def _check_level(level: int) -> None:
    if isinstance(level, bool) or not isinstance(level, int):
        raise ValueError(f"level must be an int, got {level!r}")
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")


def tier_for(level: int) -> Tier:
    _check_level(level)
    for tier in TIERS:
        if tier.covers(level):
            return tier
    raise ValueError(f"no tier covers level {level}; the curriculum ends at {LEVEL_COUNT}")


def generate_level(level: int) -> Color:
    """Compute the target color for one level from its own seeded stream."""
    return tier_for(level).rule(level)


def generate_levels(count: int = LEVEL_COUNT) -> List[Color]:
    if not 1 <= count <= LEVEL_COUNT:
        raise ValueError(f"count must be in [1, {LEVEL_COUNT}], got {count}")
    return [generate_level(level) for level in range(1, count + 1)]


class LevelRepository:
    """Target colors for the whole curriculum, built once and read-only afterwards."""

    def __init__(self, count: int = LEVEL_COUNT) -> None:
        self._levels = generate_levels(count)
        logger.debug("Generated %d levels", len(self._levels))

    def __len__(self) -> int:
        return len(self._levels)

    def all(self) -> List[Color]:
        return list(self._levels)

    def get(self, level: int) -> Color:
        """Return the target for ``level``; levels past the end give the last target."""
        _check_level(level)
        return self._levels[min(level, len(self._levels)) - 1]


_default_repository: Optional[LevelRepository] = None


def default_repository() -> LevelRepository:
    global _default_repository
    if _default_repository is None:
        _default_repository = LevelRepository()
    return _default_repository


def target_for(level_index: int) -> Color:
    return default_repository().get(level_index)


def restore_level(saved: Union[str, int, None], level_count: int = LEVEL_COUNT) -> int:
    """Validate a level index read back from storage, falling back to level 1."""
    if saved is None or saved == "":
        return 1
    try:
        level = int(saved)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed saved level %r", saved)
        return 1
    if not 1 <= level <= level_count:
        logger.warning("Saved level %d outside [1, %d]; starting from level 1", level, level_count)
        return 1
    return level
