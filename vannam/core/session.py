from __future__ import annotations

import logging
from typing import List, Optional, Union

from vannam.core.color import PRIMARIES, Color
from vannam.core.levels import LevelRepository, default_repository
from vannam.core.mixing import WIN_ACCURACY, MixResult, evaluate, mix
from vannam.core.settings import GameSettings

logger = logging.getLogger(__name__)


class MixingSession:
    """The units a player has placed in the mixing container for one attempt.

    The container fills in order up to ``capacity``. ``preview`` shows the
    current mix without touching the units; ``lock_in`` paints every filled
    slot with that mix and can only be undone by ``reset``.
    """

    def __init__(self, target: Color, capacity: int = 576) -> None:
        """Start an empty container aimed at ``target``."""
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._target = target
        self._capacity = capacity
        self._units: List[Color] = []

    @property
    def target(self) -> Color:
        return self._target

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def fill_index(self) -> int:
        """Number of filled slots."""
        return len(self._units)

    @property
    def units(self) -> List[Color]:
        return list(self._units)

    def is_empty(self) -> bool:
        return not self._units

    def is_full(self) -> bool:
        return len(self._units) >= self._capacity

    def add(self, unit: Union[Color, str]) -> bool:
        """Place one unit, given as a Color or a primary key ("r", "g", "b").

        Returns False and leaves the container untouched when it is full.
        """
        color = PRIMARIES[unit] if isinstance(unit, str) else unit
        if self.is_full():
            return False
        self._units.append(color)
        return True

    def preview(self) -> Color:
        return mix(self._units)

    def lock_in(self) -> Optional[Color]:
        if not self._units:
            logger.info("Nothing to mix yet; add some colors first")
            return None
        mixed = self.preview()
        self._units = [mixed] * len(self._units)
        return mixed

    def reset(self) -> None:
        self._units = []

    def check(self, threshold: float = WIN_ACCURACY) -> MixResult:
        return evaluate(self._units, self._target, threshold)


class ColorMatchGame:
    """Walks a player through the curriculum one level at a time."""

    def __init__(
        self,
        start_level: int = 1,
        settings: Optional[GameSettings] = None,
        repository: Optional[LevelRepository] = None,
    ) -> None:
        self._settings = settings or GameSettings()
        self._levels = repository if repository is not None else default_repository()
        # get() rejects levels below 1
        self._levels.get(start_level)
        self._level = min(start_level, len(self._levels))
        self._session = self._new_session()

    @property
    def level(self) -> int:
        return self._level

    @property
    def level_count(self) -> int:
        return len(self._levels)

    @property
    def target(self) -> Color:
        return self._levels.get(self._level)

    @property
    def session(self) -> MixingSession:
        return self._session

    @property
    def settings(self) -> GameSettings:
        return self._settings

    def is_last_level(self) -> bool:
        return self._level >= len(self._levels)

    def check(self) -> MixResult:
        result = self._session.check(self._settings.win_accuracy)
        if result.won:
            logger.info("Level %d complete with %.1f%% accuracy", self._level, result.accuracy)
        else:
            logger.debug("Level %d: %.1f%%, keep mixing", self._level, result.accuracy)
        return result

    def next_level(self) -> bool:
        """Advance to the next level; returns False when every level is done."""
        if self.is_last_level():
            logger.info("All %d levels complete", len(self._levels))
            return False
        self._level += 1
        self._session = self._new_session()
        logger.info("Moved to level %d", self._level)
        return True

    def try_again(self) -> None:
        self._session.reset()

    def _new_session(self) -> MixingSession:
        return MixingSession(self.target, capacity=self._settings.capacity)
