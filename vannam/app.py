"""Command-line entry point for inspecting levels and scoring mixes."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from vannam.core.color import PRIMARIES
from vannam.core.levels import LEVEL_COUNT, target_for, tier_for
from vannam.core.session import ColorMatchGame
from vannam.core.settings import load_settings


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _print_levels(start: int, end: int) -> int:
    for level in range(start, end + 1):
        color = target_for(level)
        print(f"{level:>4}  tier {tier_for(level).number}  {color.hex}  {color.r:>3} {color.g:>3} {color.b:>3}")
    return 0


def _check(level: int, units: str) -> int:
    settings = load_settings()
    game = ColorMatchGame(start_level=level, settings=settings)
    for key in units.lower():
        if not game.session.add(key):
            logging.warning("Container is full after %d units", game.session.fill_index)
            break
    result = game.check()
    print(f"target {game.target.hex}  mixed {result.mixed.hex}  accuracy {result.accuracy:.1f}%")
    print("level complete" if result.won else "keep mixing")
    return 0 if result.won else 1


def _unit_string(value: str) -> str:
    bad = sorted({ch for ch in value.lower() if ch not in PRIMARIES})
    if bad:
        raise argparse.ArgumentTypeError(f"units must be made of r, g and b; got {''.join(bad)!r}")
    return value


def run(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    parser = argparse.ArgumentParser(prog="vannam")
    sub = parser.add_subparsers(dest="command", required=True)

    levels_cmd = sub.add_parser("levels", help="print generated target colors")
    levels_cmd.add_argument("--start", type=int, default=1)
    levels_cmd.add_argument("--end", type=int, default=LEVEL_COUNT)

    check_cmd = sub.add_parser("check", help="score a mix of units against a level")
    check_cmd.add_argument("--level", type=int, default=1)
    check_cmd.add_argument("units", type=_unit_string, help="e.g. rrg for two red and one green")

    args = parser.parse_args(argv)

    if args.command == "levels":
        if args.start < 1 or args.end < args.start or args.end > LEVEL_COUNT:
            parser.error(f"levels must satisfy 1 <= --start <= --end <= {LEVEL_COUNT}")
        return _print_levels(args.start, args.end)

    if args.level < 1:
        parser.error("--level must be >= 1")
    return _check(args.level, args.units)


if __name__ == "__main__":
    raise SystemExit(run())
