"""Core domain layer - coordinates, piece rules and the board aggregate.

Quick start::

    from chesswalk.core import Board

    board = Board.standard()
    action = board.legal_actions()[0]
    board = board.execute(action).swap_perspective()
"""

from chesswalk.core.action import Action
from chesswalk.core.board import Board
from chesswalk.core.enums import Color, Direction, PieceKind
from chesswalk.core.errors import ChessError, InvalidActionError, OutOfBoundsError
from chesswalk.core.piece import Glyph, Piece
from chesswalk.core.position import Position
from chesswalk.core.ray import Ray, raw_reachable, sliding_captures, sliding_moves, walk
from chesswalk.core.render import render_board

__all__ = [
    # Enums
    "Color",
    "Direction",
    "PieceKind",
    # Errors
    "ChessError",
    "InvalidActionError",
    "OutOfBoundsError",
    # Coordinates / rays
    "Position",
    "Ray",
    "raw_reachable",
    "sliding_captures",
    "sliding_moves",
    "walk",
    # Domain objects
    "Action",
    "Board",
    "Glyph",
    "Piece",
    # Display
    "render_board",
]
