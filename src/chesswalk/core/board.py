"""Board - the two piece collections seen from the side about to move."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chesswalk.core.action import Action
from chesswalk.core.enums import Color, PieceKind
from chesswalk.core.errors import InvalidActionError
from chesswalk.core.piece import Piece
from chesswalk.core.position import BOARD_SIZE, Position
from chesswalk.core.render import render_board

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def _index_by_position(pieces: tuple[Piece, ...]) -> dict[Position, Piece]:
    index: dict[Position, Piece] = {}
    for piece in pieces:
        if piece.position in index:
            raise ValueError(f"Two pieces share square {piece.position}")
        index[piece.position] = piece
    return index


def _space(pieces: Iterable[Piece]) -> list[Piece | None]:
    squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
    for piece in pieces:
        squares[piece.position.index] = piece
    return squares


class Board:
    """Immutable position from the acting side's point of view.

    ``acting`` holds the pieces of the side to move, ``waiting`` those of its
    opponent; rank 0 is always the acting side's back rank. ``turn`` records
    the physical color of the acting side. :meth:`execute` and
    :meth:`swap_perspective` return new boards.
    """

    __slots__ = ("_acting", "_waiting", "_turn", "_acting_index", "_waiting_index")

    def __init__(
        self,
        acting: Iterable[Piece],
        waiting: Iterable[Piece],
        turn: Color = Color.WHITE,
    ) -> None:
        self._acting = tuple(acting)
        self._waiting = tuple(waiting)
        self._turn = turn
        self._acting_index = _index_by_position(self._acting)
        self._waiting_index = _index_by_position(self._waiting)
        shared = self._acting_index.keys() & self._waiting_index.keys()
        if shared:
            squares = ", ".join(str(pos) for pos in sorted(shared, key=lambda p: p.index))
            raise ValueError(f"Both sides occupy {squares}")

    # -- Accessors ----------------------------------------------------------

    @property
    def acting(self) -> tuple[Piece, ...]:
        return self._acting

    @property
    def waiting(self) -> tuple[Piece, ...]:
        return self._waiting

    @property
    def turn(self) -> Color:
        return self._turn

    # -- Collision queries --------------------------------------------------

    def acting_collision(self, position: Position) -> Piece | None:
        """Acting-side piece on *position*, if any."""
        return self._acting_index.get(position)

    def waiting_collision(self, position: Position) -> Piece | None:
        """Waiting-side piece on *position*, if any."""
        return self._waiting_index.get(position)

    def collision(self, position: Position) -> Piece | None:
        """Occupant of *position*, looking at the acting side first."""
        piece = self.acting_collision(position)
        if piece is not None:
            return piece
        return self.waiting_collision(position)

    # -- Actions ------------------------------------------------------------

    def legal_actions(self) -> list[Action]:
        """Every action of the acting side.

        Pieces are visited in collection order; each contributes its moves
        before its captures.
        """
        actions: list[Action] = []
        for piece in self._acting:
            source = piece.position
            for destination in piece.possible_actions(self):
                actions.append(Action(source, destination))
        return actions

    def execute(self, action: Action) -> Board:
        """Board after *action*: the captured piece, if any, is removed and
        the moving piece relocated.

        Raises:
            InvalidActionError: *action* is not in :meth:`legal_actions`.
        """
        if action not in self.legal_actions():
            raise InvalidActionError(f"Action is not legal: {action}")

        captured = self.waiting_collision(action.destination)
        waiting = self._waiting
        if captured is not None:
            waiting = tuple(p for p in waiting if p.position != action.destination)
            _LOGGER.debug("%s captures %s", action, captured.kind.name)

        acting = tuple(
            p.relocated(action.destination) if p.position == action.source else p
            for p in self._acting
        )
        _LOGGER.debug("%s executes %s", self._turn, action)
        return Board(acting, waiting, self._turn)

    def swap_perspective(self) -> Board:
        """Board for the next turn: the sides trade places and every rank
        is mirrored so that rank 0 is the new acting side's back rank.
        """
        return Board(
            (p.mirrored() for p in self._waiting),
            (p.mirrored() for p in self._acting),
            self._turn.opposite,
        )

    # -- Derived views ------------------------------------------------------

    def acting_occupancy(self) -> list[Piece | None]:
        """64 slots indexed by :attr:`Position.index`."""
        return _space(self._acting)

    def waiting_occupancy(self) -> list[Piece | None]:
        return _space(self._waiting)

    def threatened_squares(self) -> set[Position]:
        """Squares attacked by the acting side."""
        squares: set[Position] = set()
        for piece in self._acting:
            squares.update(piece.threats(self))
        return squares

    # -- Factory ------------------------------------------------------------

    @classmethod
    def standard(cls) -> Board:
        """Standard starting layout with White to move."""
        side = [
            Piece(PieceKind.PAWN, Position(x, 1), first_move=True)
            for x in range(BOARD_SIZE)
        ]
        side.extend(Piece(kind, Position(x, 0)) for x, kind in enumerate(_BACK_RANK))
        return cls(side, (p.mirrored() for p in side), Color.WHITE)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._turn == other._turn
            and self._acting == other._acting
            and self._waiting == other._waiting
        )

    def __repr__(self) -> str:
        return render_board(self, unicode=False)
