"""Plain-text board dump."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesswalk.core.enums import Color
from chesswalk.core.position import BOARD_SIZE

if TYPE_CHECKING:
    from chesswalk.core.board import Board

FILE_LABELS = "  a b c d e f g h"
EMPTY_SQUARE = "."


def render_board(board: Board, unicode: bool = True) -> str:
    """Board as seen by White: rank 8 on top, file *a* on the left.

    White pieces use the light glyph of their kind and Black pieces the dark
    one, whichever side is about to move.
    """
    cells = [EMPTY_SQUARE] * (BOARD_SIZE * BOARD_SIZE)
    for pieces, color in (
        (board.acting, board.turn),
        (board.waiting, board.turn.opposite),
    ):
        for piece in pieces:
            pos = piece.position
            if board.turn == Color.BLACK:
                pos = pos.mirrored()  # back to White's ranks
            cells[pos.index] = piece.symbol(dark=color == Color.BLACK, unicode=unicode)

    lines = [FILE_LABELS]
    for rank in range(BOARD_SIZE - 1, -1, -1):
        row = cells[rank * BOARD_SIZE:(rank + 1) * BOARD_SIZE]
        lines.append(f"{rank + 1} {' '.join(row)} {rank + 1}")
    lines.append(FILE_LABELS)
    return "\n".join(lines)
