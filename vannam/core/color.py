"""Color value type and the primary paint units."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Color:
    """An RGB triple with integer channels in [0, 255]."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"channel {name!r} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name!r} out of range [0, 255]: {value}")

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def channels(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)

# Paint units the player can place, keyed the way the mixing buttons are.
PRIMARIES: Dict[str, Color] = {"r": RED, "g": GREEN, "b": BLUE}
