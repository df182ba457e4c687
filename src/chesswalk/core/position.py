"""Position value type and coordinate algebra.

Coordinates are expressed from the acting side's point of view:
``x`` is the file (0 = a), ``y`` the rank (0 = the acting side's back rank).
The flat index layout matches the usual little-endian rank-file mapping::

    (0, 0)=0, (1, 0)=1, ..., (7, 0)=7
    (0, 1)=8, ...
    ...
    (0, 7)=56, ..., (7, 7)=63
"""

from __future__ import annotations

from dataclasses import dataclass

from chesswalk.core.enums import Direction
from chesswalk.core.errors import OutOfBoundsError

BOARD_SIZE = 8


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable, always-valid board coordinate."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if not _on_board(self.x, self.y):
            raise OutOfBoundsError(f"Position out of bounds: ({self.x}, {self.y})")

    # ── Coordinate algebra ───────────────────────────────────────────────

    def move_by(self, direction: Direction, amount: int = 1) -> Position:
        """Position reached by stepping *amount* squares towards *direction*.

        Raises :class:`OutOfBoundsError` if the destination leaves the board;
        the result is never clamped.
        """
        if amount < 0:
            raise ValueError(f"Step amount must be non-negative: {amount}")
        x = self.x + direction.dx * amount
        y = self.y + direction.dy * amount
        if not _on_board(x, y):
            raise OutOfBoundsError(
                f"Cannot move {self} {direction.name} by {amount}"
            )
        return Position(x, y)

    def mirrored(self) -> Position:
        """Vertical mirror (``y -> 7 - y``), used on perspective swaps."""
        return Position(self.x, BOARD_SIZE - 1 - self.y)

    # ── Flat index ───────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Slot 0-63 in a flat occupancy view."""
        return self.y * BOARD_SIZE + self.x

    @classmethod
    def from_index(cls, index: int) -> Position:
        if not 0 <= index < BOARD_SIZE * BOARD_SIZE:
            raise OutOfBoundsError(f"Index out of bounds: {index}")
        return cls(index % BOARD_SIZE, index // BOARD_SIZE)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
