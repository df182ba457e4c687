"""Game driver layer - controller, players and phases.

Quick start::

    from chesswalk.core import Color
    from chesswalk.game import GameController, RandomPlayer

    ctrl = GameController()
    ctrl.new_game(RandomPlayer(Color.WHITE, seed=1), RandomPlayer(Color.BLACK, seed=2))
    ctrl.play(10)
"""

from chesswalk.game.controller import ActionRecord, GameController, GameEvents
from chesswalk.game.interfaces import GameEndReason, GamePhase, IPlayer
from chesswalk.game.player import FirstActionPlayer, RandomPlayer

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    "IPlayer",
    # Concrete
    "ActionRecord",
    "FirstActionPlayer",
    "GameController",
    "GameEvents",
    "RandomPlayer",
]
