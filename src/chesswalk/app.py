"""Command-line entry point: random legal moves, printed board by board."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from chesswalk.config import DemoConfig
from chesswalk.core.board import Board
from chesswalk.core.enums import Color
from chesswalk.core.errors import ChessError
from chesswalk.core.render import render_board
from chesswalk.game.controller import ActionRecord, GameController
from chesswalk.game.player import RandomPlayer

_LOGGER = logging.getLogger(__name__)


def run_demo(config: DemoConfig) -> GameController:
    """Play ``config.turns`` random moves from the standard layout."""
    # Distinct but reproducible streams for the two sides.
    white_seed = config.seed
    black_seed = None if config.seed is None else config.seed + 1

    ctrl = GameController()

    def _print_after(record: ActionRecord, board: Board) -> None:
        print(f"after move #{record.ply} ({record.color!s}: {record.action}):")
        print(render_board(board, unicode=config.unicode))
        print()

    ctrl.events.on_action.append(_print_after)
    ctrl.new_game(
        RandomPlayer(Color.WHITE, seed=white_seed),
        RandomPlayer(Color.BLACK, seed=black_seed),
    )
    print("starting board:")
    print(render_board(ctrl.board, unicode=config.unicode))
    print()

    ctrl.play(config.turns)
    print(f"game over: {ctrl.end_reason.name.lower()} after {len(ctrl.history)} moves")
    return ctrl


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo. Returns the process exit status."""
    config = DemoConfig.from_args(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run_demo(config)
    except ChessError:
        _LOGGER.exception("Demo aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
