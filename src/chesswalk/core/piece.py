"""Piece value object and the per-kind movement rules."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from chesswalk.core.enums import (
    ALL_DIRECTIONS,
    COMPASS,
    DIAGONALS,
    ORTHOGONALS,
    Direction,
    PieceKind,
)
from chesswalk.core.errors import OutOfBoundsError
from chesswalk.core.position import Position
from chesswalk.core.ray import raw_reachable, sliding_captures, sliding_moves

if TYPE_CHECKING:
    from chesswalk.core.board import Board


class Glyph(NamedTuple):
    """Display characters of a piece kind."""

    light: str
    dark: str
    letter: str


_GLYPHS: dict[PieceKind, Glyph] = {
    PieceKind.PAWN: Glyph("♙", "♟", "P"),
    PieceKind.KNIGHT: Glyph("♘", "♞", "N"),
    PieceKind.BISHOP: Glyph("♗", "♝", "B"),
    PieceKind.ROOK: Glyph("♖", "♜", "R"),
    PieceKind.QUEEN: Glyph("♕", "♛", "Q"),
    PieceKind.KING: Glyph("♔", "♚", "K"),
}

_KIND_BY_LETTER: dict[str, PieceKind] = {g.letter: k for k, g in _GLYPHS.items()}

# Each L-shape is two straight legs; a leg that leaves the board drops the jump.
KNIGHT_JUMPS: tuple[tuple[tuple[Direction, int], tuple[Direction, int]], ...] = (
    ((Direction.UP, 2), (Direction.RIGHT, 1)),
    ((Direction.UP, 1), (Direction.RIGHT, 2)),
    ((Direction.RIGHT, 2), (Direction.DOWN, 1)),
    ((Direction.RIGHT, 1), (Direction.DOWN, 2)),
    ((Direction.DOWN, 2), (Direction.LEFT, 1)),
    ((Direction.DOWN, 1), (Direction.LEFT, 2)),
    ((Direction.LEFT, 2), (Direction.UP, 1)),
    ((Direction.LEFT, 1), (Direction.UP, 2)),
)

PAWN_CAPTURE_DIRECTIONS: tuple[Direction, ...] = (Direction.UP_LEFT, Direction.UP_RIGHT)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece: its kind, where it stands and, for pawns, whether
    the two-square opening advance is still available.
    """

    kind: PieceKind
    position: Position
    first_move: bool = False

    # ── Rules ────────────────────────────────────────────────────────────

    def possible_moves(self, board: Board) -> list[Position]:
        """Non-capturing destinations."""
        return _MOVE_RULES[self.kind](self, board)

    def possible_captures(self, board: Board) -> list[Position]:
        """Squares holding a waiting-side piece this piece can move onto."""
        return _CAPTURE_RULES[self.kind](self, board)

    def possible_actions(self, board: Board) -> list[Position]:
        """Moves first, then captures."""
        return self.possible_moves(board) + self.possible_captures(board)

    def threats(self, board: Board) -> list[Position]:
        """Squares this piece attacks, whether empty or enemy-held."""
        return _THREAT_RULES[self.kind](self, board)

    # ── Transforms ───────────────────────────────────────────────────────

    def relocated(self, position: Position) -> Piece:
        """Copy standing on *position*; a moved piece loses its first move."""
        return dataclasses.replace(self, position=position, first_move=False)

    def mirrored(self) -> Piece:
        return dataclasses.replace(self, position=self.position.mirrored())

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def glyph(self) -> Glyph:
        return _GLYPHS[self.kind]

    def symbol(self, dark: bool, unicode: bool = True) -> str:
        """Display character, e.g. ♞ (dark knight) or ``N`` / ``n`` in ASCII."""
        glyph = _GLYPHS[self.kind]
        if unicode:
            return glyph.dark if dark else glyph.light
        return glyph.letter.lower() if dark else glyph.letter

    @classmethod
    def from_char(cls, char: str, position: Position) -> Piece:
        """Create a piece from its letter, e.g. ``'N'``.

        Pawns standing on rank 1 (their starting rank) keep the first move.
        """
        try:
            kind = _KIND_BY_LETTER[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, position, kind == PieceKind.PAWN and position.y == 1)


# -- Stepping helpers ---------------------------------------------------------


def _step(position: Position, direction: Direction, amount: int = 1) -> Position | None:
    try:
        return position.move_by(direction, amount)
    except OutOfBoundsError:
        return None


def _neighbours(position: Position) -> list[Position]:
    squares: list[Position] = []
    for direction in COMPASS:
        pos = _step(position, direction)
        if pos is not None:
            squares.append(pos)
    return squares


def _knight_targets(position: Position) -> list[Position]:
    targets: list[Position] = []
    for (first_dir, first_len), (second_dir, second_len) in KNIGHT_JUMPS:
        corner = _step(position, first_dir, first_len)
        if corner is None:
            continue
        pos = _step(corner, second_dir, second_len)
        if pos is not None:
            targets.append(pos)
    return targets


def _pawn_diagonals(position: Position) -> list[Position]:
    squares: list[Position] = []
    for direction in PAWN_CAPTURE_DIRECTIONS:
        pos = _step(position, direction)
        if pos is not None:
            squares.append(pos)
    return squares


# -- Pawn ---------------------------------------------------------------------


def _pawn_moves(piece: Piece, board: Board) -> list[Position]:
    moves: list[Position] = []
    one_step = _step(piece.position, Direction.UP)
    if one_step is None or board.collision(one_step) is not None:
        return moves
    moves.append(one_step)

    if piece.first_move:
        two_step = _step(piece.position, Direction.UP, 2)
        if two_step is not None and board.collision(two_step) is None:
            moves.append(two_step)
    return moves


def _pawn_captures(piece: Piece, board: Board) -> list[Position]:
    return [
        pos
        for pos in _pawn_diagonals(piece.position)
        if board.waiting_collision(pos) is not None
    ]


def _pawn_threats(piece: Piece, board: Board) -> list[Position]:
    return [
        pos
        for pos in _pawn_diagonals(piece.position)
        if board.acting_collision(pos) is None
    ]


# -- Knight -------------------------------------------------------------------


def _knight_moves(piece: Piece, board: Board) -> list[Position]:
    return [
        pos
        for pos in _knight_targets(piece.position)
        if board.collision(pos) is None
    ]


def _knight_captures(piece: Piece, board: Board) -> list[Position]:
    return [
        pos
        for pos in _knight_targets(piece.position)
        if board.waiting_collision(pos) is not None
    ]


def _knight_threats(piece: Piece, board: Board) -> list[Position]:
    return [
        pos
        for pos in _knight_targets(piece.position)
        if board.acting_collision(pos) is None
    ]


# -- King ---------------------------------------------------------------------


def _king_moves(piece: Piece, board: Board) -> list[Position]:
    return [pos for pos in _neighbours(piece.position) if board.collision(pos) is None]


def _king_captures(piece: Piece, board: Board) -> list[Position]:
    return []


def _king_threats(piece: Piece, board: Board) -> list[Position]:
    return [
        pos
        for pos in _neighbours(piece.position)
        if board.acting_collision(pos) is None
    ]


# -- Sliders ------------------------------------------------------------------


_Rule = Callable[[Piece, "Board"], list[Position]]


def _slider(
    directions: tuple[Direction, ...],
) -> tuple[_Rule, _Rule, _Rule]:
    def moves(piece: Piece, board: Board) -> list[Position]:
        return sliding_moves(directions, piece.position, board)

    def captures(piece: Piece, board: Board) -> list[Position]:
        return sliding_captures(directions, piece.position, board)

    def threats(piece: Piece, board: Board) -> list[Position]:
        return raw_reachable(directions, piece.position, board)

    return moves, captures, threats


_ROOK_RULES = _slider(ORTHOGONALS)
_BISHOP_RULES = _slider(DIAGONALS)
_QUEEN_RULES = _slider(ALL_DIRECTIONS)

_MOVE_RULES: dict[PieceKind, _Rule] = {
    PieceKind.PAWN: _pawn_moves,
    PieceKind.KNIGHT: _knight_moves,
    PieceKind.BISHOP: _BISHOP_RULES[0],
    PieceKind.ROOK: _ROOK_RULES[0],
    PieceKind.QUEEN: _QUEEN_RULES[0],
    PieceKind.KING: _king_moves,
}

_CAPTURE_RULES: dict[PieceKind, _Rule] = {
    PieceKind.PAWN: _pawn_captures,
    PieceKind.KNIGHT: _knight_captures,
    PieceKind.BISHOP: _BISHOP_RULES[1],
    PieceKind.ROOK: _ROOK_RULES[1],
    PieceKind.QUEEN: _QUEEN_RULES[1],
    PieceKind.KING: _king_captures,
}

_THREAT_RULES: dict[PieceKind, _Rule] = {
    PieceKind.PAWN: _pawn_threats,
    PieceKind.KNIGHT: _knight_threats,
    PieceKind.BISHOP: _BISHOP_RULES[2],
    PieceKind.ROOK: _ROOK_RULES[2],
    PieceKind.QUEEN: _QUEEN_RULES[2],
    PieceKind.KING: _king_threats,
}
