"""Tests for the text board dump."""

from chesswalk.core.board import Board
from chesswalk.core.enums import Color, PieceKind
from chesswalk.core.piece import Piece
from chesswalk.core.position import Position
from chesswalk.core.render import FILE_LABELS, render_board


class TestRenderBoard:
    def test_standard_ascii(self, standard_board: Board) -> None:
        lines = render_board(standard_board, unicode=False).splitlines()
        assert len(lines) == 10
        assert lines[0] == FILE_LABELS
        assert lines[1] == "8 r n b q k b n r 8"
        assert lines[2] == "7 p p p p p p p p 7"
        assert lines[5] == "4 . . . . . . . . 4"
        assert lines[7] == "2 P P P P P P P P 2"
        assert lines[8] == "1 R N B Q K B N R 1"
        assert lines[9] == FILE_LABELS

    def test_standard_unicode(self, standard_board: Board) -> None:
        lines = render_board(standard_board).splitlines()
        assert lines[1] == "8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜ 8"
        assert lines[8] == "1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖ 1"

    def test_orientation_is_stable_across_turns(self, standard_board: Board) -> None:
        after = standard_board.execute(
            standard_board.legal_actions()[1]  # a2-a4
        ).swap_perspective()
        text = render_board(after, unicode=False)
        assert "4 P . . . . . . . 4" in text
        assert render_board(after.swap_perspective(), unicode=False) == text

    def test_black_piece_drawn_dark(self) -> None:
        # Black to move: its knight on its own rank 0 is White's rank 8.
        board = Board([Piece(PieceKind.KNIGHT, Position(6, 0))], [], Color.BLACK)
        lines = render_board(board, unicode=False).splitlines()
        assert lines[1] == "8 . . . . . . n . 8"
        assert lines[8] == "1 . . . . . . . . 1"
        assert "♞" in render_board(board)

    def test_rendering_does_not_mutate(self, standard_board: Board) -> None:
        before = standard_board.legal_actions()
        render_board(standard_board)
        assert standard_board.legal_actions() == before
