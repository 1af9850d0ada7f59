from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from . import config
from .game import run


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake with obstacle layouts.")
    parser.add_argument("--difficulty", choices=("easy", "normal", "hard"), help="Obstacle layout for the first game.")
    parser.add_argument("--speed-ms", type=int, help="Tick interval in milliseconds.")
    parser.add_argument("--theme", choices=sorted(config.THEMES), help="Colour theme.")
    parser.add_argument("--grid-size", type=int, help="Board width and height in cells.")
    parser.add_argument("--high-score-file", type=Path, help="Where the best score is kept.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = config.Settings.from_env()
        overrides = {
            "difficulty": args.difficulty,
            "tick_ms": args.speed_ms,
            "theme": args.theme,
            "grid_size": args.grid_size,
            "high_score_file": args.high_score_file,
        }
        settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    run(settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
