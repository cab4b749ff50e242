from __future__ import annotations

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


class Mulberry32:
    """Seeded 32-bit counter-based generator.

    Every level owns its own instance seeded with the level index, so the
    curriculum is rebuilt identically on every run without being stored.
    All arithmetic wraps at 32 bits.
    """

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK

    @property
    def state(self) -> int:
        return self._state

    def next_uint32(self) -> int:
        self._state = (self._state + _INCREMENT) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return (t ^ (t >> 14)) & _MASK

    def random(self) -> float:
        """Return a float in [0, 1)."""
        return self.next_uint32() / 4294967296
