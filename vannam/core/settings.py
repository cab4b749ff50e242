from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


@dataclass(frozen=True)
class GameSettings:
    grid_size: int = 24
    win_accuracy: float = 95.0

    @property
    def capacity(self) -> int:
        """Number of units the mixing container holds."""
        return self.grid_size * self.grid_size


def load_settings(path: Optional[Path] = None) -> GameSettings:
    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    if raw is None:
        return GameSettings()
    if not isinstance(raw, dict):
        raise ValueError(f"{settings_path.name}: expected a YAML mapping")

    defaults = GameSettings()
    grid_size = raw.get("grid_size", defaults.grid_size)
    if isinstance(grid_size, bool) or not isinstance(grid_size, int) or grid_size < 1:
        raise ValueError(f"{settings_path.name}: 'grid_size' must be a positive integer")

    win_accuracy = raw.get("win_accuracy", defaults.win_accuracy)
    if isinstance(win_accuracy, bool) or not isinstance(win_accuracy, (int, float)):
        raise ValueError(f"{settings_path.name}: 'win_accuracy' must be a number")
    if not 0 <= win_accuracy <= 100:
        raise ValueError(f"{settings_path.name}: 'win_accuracy' must be within [0, 100]")

    return GameSettings(grid_size=grid_size, win_accuracy=float(win_accuracy))
