"""Concrete player implementations."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from chesswalk.core.enums import Color
from chesswalk.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chesswalk.core.action import Action
    from chesswalk.core.board import Board


class RandomPlayer(IPlayer):
    """Plays a uniformly random legal action.

    Args:
        color: Side played.
        name: Display name.
        seed: Seed of the private random generator, for reproducible games.
    """

    __slots__ = ("_color", "_name", "_rng")

    def __init__(self, color: Color, name: str = "", seed: int | None = None) -> None:
        self._color = color
        self._name = name or f"Random ({color!s})"
        self._rng = random.Random(seed)

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def choose_action(self, board: Board, actions: list[Action]) -> Action:
        return self._rng.choice(actions)


class FirstActionPlayer(IPlayer):
    """Always plays the first legal action in enumeration order."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"First ({color!s})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def choose_action(self, board: Board, actions: list[Action]) -> Action:
        return actions[0]
