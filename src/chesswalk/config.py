"""Command-line configuration of the demo."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_TURNS = 5
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """Settings of a random-play demo run."""

    turns: int = DEFAULT_TURNS
    seed: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    unicode: bool = True

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="chesswalk",
            description="Play random legal moves and print the board after each one.",
        )
        parser.add_argument(
            "--turns", type=int, default=DEFAULT_TURNS,
            help="Number of moves to play (default: %(default)s).",
        )
        parser.add_argument(
            "--seed", type=int, default=None,
            help="Random seed for a reproducible game.",
        )
        parser.add_argument(
            "--log-level", choices=_LOG_LEVELS, default=DEFAULT_LOG_LEVEL,
            help="Logging verbosity (default: %(default)s).",
        )
        parser.add_argument(
            "--ascii", action="store_true",
            help="Draw pieces with letters instead of Unicode glyphs.",
        )
        return parser

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> DemoConfig:
        parser = cls.build_parser()
        args = parser.parse_args(argv)
        if args.turns < 0:
            parser.error(f"--turns must be non-negative: {args.turns}")
        return cls(
            turns=args.turns,
            seed=args.seed,
            log_level=args.log_level,
            unicode=not args.ascii,
        )
