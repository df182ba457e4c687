"""Tests for Board."""

import pytest

from chesswalk.core.action import Action
from chesswalk.core.board import Board
from chesswalk.core.enums import Color, PieceKind
from chesswalk.core.errors import InvalidActionError
from chesswalk.core.piece import Piece
from chesswalk.core.position import Position


def _p(x: int, y: int) -> Position:
    return Position(x, y)


def _pawn(x: int, y: int, first_move: bool = False) -> Piece:
    return Piece(PieceKind.PAWN, _p(x, y), first_move)


def _act(sx: int, sy: int, dx: int, dy: int) -> Action:
    return Action(_p(sx, sy), _p(dx, dy))


class TestConstruction:
    def test_overlapping_sides_rejected(self) -> None:
        with pytest.raises(ValueError, match="Both sides occupy"):
            Board([_pawn(0, 1)], [_pawn(0, 1)])

    def test_overlap_within_side_rejected(self) -> None:
        with pytest.raises(ValueError, match="share square"):
            Board([_pawn(0, 1), Piece(PieceKind.ROOK, _p(0, 1))], [])

    def test_default_turn_is_white(self, empty_board: Board) -> None:
        assert empty_board.turn == Color.WHITE

    def test_collections_keep_order(self) -> None:
        pieces = [_pawn(5, 1), _pawn(2, 1), _pawn(7, 1)]
        assert list(Board(pieces, []).acting) == pieces


class TestCollision:
    def test_side_lookups(self) -> None:
        mine, theirs = _pawn(0, 1), _pawn(0, 6)
        board = Board([mine], [theirs])
        assert board.acting_collision(_p(0, 1)) == mine
        assert board.acting_collision(_p(0, 6)) is None
        assert board.waiting_collision(_p(0, 6)) == theirs
        assert board.waiting_collision(_p(0, 1)) is None

    def test_collision_either_side(self) -> None:
        mine, theirs = _pawn(0, 1), _pawn(0, 6)
        board = Board([mine], [theirs])
        assert board.collision(_p(0, 1)) == mine
        assert board.collision(_p(0, 6)) == theirs
        assert board.collision(_p(4, 4)) is None


class TestLegalActions:
    def test_moves_then_capture(self) -> None:
        board = Board([_pawn(0, 1, True)], [_pawn(1, 2, True)])
        assert board.legal_actions() == [
            _act(0, 1, 0, 2),
            _act(0, 1, 0, 3),
            _act(0, 1, 1, 2),
        ]

    def test_follows_acting_order(self) -> None:
        board = Board([_pawn(0, 1, True), _pawn(3, 2)], [_pawn(1, 2)])
        assert board.legal_actions() == [
            _act(0, 1, 0, 2),
            _act(0, 1, 0, 3),
            _act(0, 1, 1, 2),
            _act(3, 2, 3, 3),
        ]

    def test_standard_opening_count(self, standard_board: Board) -> None:
        actions = standard_board.legal_actions()
        assert len(actions) == 20
        assert len(set(actions)) == 20

    def test_no_pieces_no_actions(self, empty_board: Board) -> None:
        assert empty_board.legal_actions() == []


class TestExecute:
    def test_capture_removes_and_relocates(self) -> None:
        board = Board([_pawn(0, 1, True)], [_pawn(1, 2, True)])
        after = board.execute(board.legal_actions()[2])
        assert after.acting == (_pawn(1, 2),)
        assert after.waiting == ()
        assert after.turn == Color.WHITE

    def test_quiet_move(self) -> None:
        board = Board([_pawn(0, 1, True), _pawn(4, 1, True)], [_pawn(7, 6)])
        after = board.execute(_act(4, 1, 4, 3))
        assert after.acting == (_pawn(0, 1, True), _pawn(4, 3))
        assert after.waiting == board.waiting

    def test_relocated_pawn_loses_first_move(self) -> None:
        board = Board([_pawn(0, 1, True)], [])
        after = board.execute(_act(0, 1, 0, 2))
        assert after.legal_actions() == [_act(0, 2, 0, 3)]

    def test_receiver_unchanged(self) -> None:
        board = Board([_pawn(0, 1, True)], [_pawn(1, 2)])
        board.execute(_act(0, 1, 1, 2))
        assert board.acting == (_pawn(0, 1, True),)
        assert board.waiting == (_pawn(1, 2),)

    @pytest.mark.parametrize(
        "action",
        [
            _act(0, 1, 0, 4),  # three squares
            _act(0, 1, 1, 1),  # sideways
            _act(5, 5, 5, 6),  # no piece on source
            _act(1, 2, 1, 1),  # enemy piece
        ],
    )
    def test_illegal_action_rejected(self, action: Action) -> None:
        board = Board([_pawn(0, 1, True)], [_pawn(1, 2)])
        with pytest.raises(InvalidActionError, match="not legal"):
            board.execute(action)
        assert len(board.acting) == 1
        assert len(board.waiting) == 1

    def test_stale_action_rejected(self) -> None:
        board = Board([_pawn(0, 1, True)], [])
        action = _act(0, 1, 0, 2)
        after = board.execute(action)
        with pytest.raises(InvalidActionError):
            after.execute(action)


class TestSwapPerspective:
    def test_swap_sides(self) -> None:
        board = Board([_pawn(0, 1, True), _pawn(1, 1, True)], [_pawn(0, 6, True)])
        swapped = board.swap_perspective()
        assert swapped.acting == (_pawn(0, 1, True),)
        assert swapped.waiting == (_pawn(0, 6, True), _pawn(1, 6, True))
        assert swapped.turn == Color.BLACK

    def test_involution(self, standard_board: Board) -> None:
        after = standard_board.execute(standard_board.legal_actions()[3])
        assert after.swap_perspective().swap_perspective() == after

    def test_standard_layout_is_symmetric(self, standard_board: Board) -> None:
        swapped = standard_board.swap_perspective()
        assert swapped.acting == standard_board.acting
        assert swapped.waiting == standard_board.waiting
        assert swapped != standard_board  # turn differs


class TestViews:
    def test_occupancy(self) -> None:
        mine, theirs = _pawn(4, 2), _pawn(7, 7)
        board = Board([mine], [theirs])
        acting = board.acting_occupancy()
        waiting = board.waiting_occupancy()
        assert len(acting) == len(waiting) == 64
        assert acting[20] == mine
        assert waiting[63] == theirs
        assert sum(slot is not None for slot in acting) == 1

    def test_threatened_squares_at_start(self, standard_board: Board) -> None:
        assert standard_board.threatened_squares() == {_p(x, 2) for x in range(8)}

    def test_standard_piece_counts(self, standard_board: Board) -> None:
        assert len(standard_board.acting) == 16
        assert len(standard_board.waiting) == 16
        kings = [p for p in standard_board.waiting if p.kind == PieceKind.KING]
        assert kings == [Piece(PieceKind.KING, _p(4, 7))]

    def test_repr_is_ascii_dump(self, standard_board: Board) -> None:
        text = repr(standard_board)
        assert "K" in text
        assert "a b c d e f g h" in text
