"""Abstract interfaces for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesswalk.core.enums import Color

if TYPE_CHECKING:
    from chesswalk.core.action import Action
    from chesswalk.core.board import Board


class GamePhase(IntEnum):
    """States of a game as seen by the driver."""

    NOT_STARTED = auto()
    AWAITING_ACTION = auto()
    GAME_OVER = auto()


class GameEndReason(IntEnum):
    """Why a game reached :attr:`GamePhase.GAME_OVER`."""

    NONE = 0
    NO_LEGAL_ACTIONS = auto()
    TURN_LIMIT = auto()
    STOPPED = auto()


class IPlayer(ABC):
    """Interface for a participant that picks one of the legal actions."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def choose_action(self, board: Board, actions: list[Action]) -> Action:
        """Pick one of *actions*, the legal set of *board*.

        *actions* is never empty.
        """
