"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesswalk.core.board import Board


@pytest.fixture
def standard_board() -> Board:
    """Fresh standard layout, White to move."""
    return Board.standard()


@pytest.fixture
def empty_board() -> Board:
    return Board([], [])
