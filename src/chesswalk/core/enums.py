"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Physical side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Direction(Enum):
    """The eight compass directions, valued by their ``(dx, dy)`` step.

    *Up* points away from the acting side's back rank.
    """

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP_RIGHT = (1, 1)
    UP_LEFT = (-1, 1)
    DOWN_RIGHT = (1, -1)
    DOWN_LEFT = (-1, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))


class PieceKind(IntEnum):
    """Piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


# ── Direction sets ───────────────────────────────────────────────────────────

ORTHOGONALS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)
DIAGONALS: tuple[Direction, ...] = (
    Direction.UP_RIGHT,
    Direction.DOWN_RIGHT,
    Direction.DOWN_LEFT,
    Direction.UP_LEFT,
)
ALL_DIRECTIONS: tuple[Direction, ...] = ORTHOGONALS + DIAGONALS
# Clockwise from Up, the order a King scans its neighbours.
COMPASS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.UP_RIGHT,
    Direction.RIGHT,
    Direction.DOWN_RIGHT,
    Direction.DOWN,
    Direction.DOWN_LEFT,
    Direction.LEFT,
    Direction.UP_LEFT,
)
