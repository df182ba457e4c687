"""GameController - drives a game by asking players for actions.

The controller owns the current :class:`Board`, executes the chosen action,
swaps perspective and notifies listeners through simple callbacks. It never
detects checkmate or stalemate: a game ends when the acting side has no
legal action, when a turn limit is reached, or when the caller stops it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesswalk.core.action import Action
from chesswalk.core.board import Board
from chesswalk.core.enums import Color, PieceKind
from chesswalk.core.errors import InvalidActionError
from chesswalk.game.interfaces import GameEndReason, GamePhase, IPlayer

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ActionRecord:
    """One executed action, in the mover's coordinates."""

    ply: int
    color: Color
    action: Action
    captured: PieceKind | None = None


# ── Event definitions ────────────────────────────────────────────────────────

ActionCallback = Callable[[ActionRecord, Board], None]  # record, board after
GameOverCallback = Callable[[GameEndReason], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_action: list[ActionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Turn loop over a :class:`Board` and two players.

    Single-threaded: the board is replaced, never shared for mutation.
    """

    __slots__ = ("_board", "_players", "_history", "_phase", "_end_reason", "events")

    def __init__(self) -> None:
        self._board = Board.standard()
        self._players: dict[Color, IPlayer] = {}
        self._history: list[ActionRecord] = []
        self._phase = GamePhase.NOT_STARTED
        self._end_reason = GameEndReason.NONE
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def end_reason(self) -> GameEndReason:
        return self._end_reason

    @property
    def history(self) -> list[ActionRecord]:
        return list(self._history)

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._board.turn)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self, white: IPlayer, black: IPlayer, board: Board | None = None) -> None:
        """Set up a game, from the standard layout unless *board* is given."""
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._board = board if board is not None else Board.standard()
        self._history = []
        self._end_reason = GameEndReason.NONE
        _LOGGER.info("New game: %s vs %s", white.name, black.name)
        self._set_phase(GamePhase.AWAITING_ACTION)

    def play_turn(self) -> ActionRecord | None:
        """Let the acting player move once.

        Returns the executed record, or ``None`` if the game is over.

        Raises:
            InvalidActionError: the player returned an action outside the
                legal set it was offered.
        """
        if self._phase != GamePhase.AWAITING_ACTION:
            return None

        player = self.current_player
        if player is None:
            raise RuntimeError(f"No player for {self._board.turn!s}")

        actions = self._board.legal_actions()
        if not actions:
            _LOGGER.info("%s has no legal action", self._board.turn)
            self._finish(GameEndReason.NO_LEGAL_ACTIONS)
            return None

        action = player.choose_action(self._board, actions)
        captured = self._board.waiting_collision(action.destination)
        try:
            after = self._board.execute(action)
        except InvalidActionError:
            _LOGGER.error("%s chose an illegal action %s", player.name, action)
            raise

        record = ActionRecord(
            ply=len(self._history) + 1,
            color=self._board.turn,
            action=action,
            captured=captured.kind if captured is not None else None,
        )
        self._history.append(record)
        _LOGGER.info("Ply %d: %s plays %s", record.ply, player.name, action)

        for cb in self.events.on_action:
            cb(record, after)
        self._board = after.swap_perspective()
        return record

    def play(self, max_turns: int) -> int:
        """Play up to *max_turns* turns and return how many were played.

        Reaching the limit ends the game.
        """
        played = 0
        while played < max_turns and self.play_turn() is not None:
            played += 1
        if not self.is_game_over:
            self._finish(GameEndReason.TURN_LIMIT)
        return played

    def stop(self) -> None:
        """End the game on the caller's decision."""
        if not self.is_game_over:
            self._finish(GameEndReason.STOPPED)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish(self, reason: GameEndReason) -> None:
        self._end_reason = reason
        _LOGGER.info("Game over: %s", reason.name)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(reason)

    def _set_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
