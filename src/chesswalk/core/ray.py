"""Rays and the walking primitives shared by sliding pieces."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesswalk.core.enums import Direction
from chesswalk.core.errors import OutOfBoundsError
from chesswalk.core.position import Position

if TYPE_CHECKING:
    from chesswalk.core.board import Board


@dataclass(frozen=True, slots=True)
class Ray:
    """Squares met by stepping from *start* towards *direction*.

    The start square itself is not part of the ray. Iteration stops at the
    board edge, or after *limit* squares when a limit is given. Every call to
    ``iter()`` produces a fresh iterator.
    """

    start: Position
    direction: Direction
    limit: int | None = None

    def __iter__(self) -> Iterator[Position]:
        step = 1
        while self.limit is None or step <= self.limit:
            try:
                yield self.start.move_by(self.direction, step)
            except OutOfBoundsError:
                return
            step += 1


def walk(position: Position, direction: Direction) -> Iterator[Position]:
    """Maximal run of squares from *position* towards *direction*."""
    return iter(Ray(position, direction))


def sliding_moves(
    directions: Iterable[Direction], position: Position, board: Board
) -> list[Position]:
    """Empty squares per direction, up to (excluding) the first occupant."""
    moves: list[Position] = []
    for direction in directions:
        for pos in walk(position, direction):
            if board.collision(pos) is not None:
                break
            moves.append(pos)
    return moves


def sliding_captures(
    directions: Iterable[Direction], position: Position, board: Board
) -> list[Position]:
    """The first blocker per direction, when it belongs to the waiting side."""
    captures: list[Position] = []
    for direction in directions:
        for pos in walk(position, direction):
            if board.waiting_collision(pos) is not None:
                captures.append(pos)
                break
            if board.acting_collision(pos) is not None:
                break
    return captures


def raw_reachable(
    directions: Iterable[Direction], position: Position, board: Board
) -> list[Position]:
    """Every square a slider threatens.

    Each direction runs until an allied piece (excluded) or an enemy piece
    (included), or the edge of the board.
    """
    reachable: list[Position] = []
    for direction in directions:
        for pos in walk(position, direction):
            if board.acting_collision(pos) is not None:
                break
            reachable.append(pos)
            if board.waiting_collision(pos) is not None:
                break
    return reachable
