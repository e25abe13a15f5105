"""GameController: drives a single game ply by ply.

Coordinates: the current board, the side to move and the rules core.
Emits events via simple callbacks so callers / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from damas.core.board import Board
from damas.core.enums import Player
from damas.core.move import Move
from damas.core.rules import Rules
from damas.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Player, Board], None]  # move, mover, board after
GameOverCallback = Callable[[Board], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates moves, applies them, switches turns and notifies listeners.

    Only the current board is kept; earlier positions are not stored.
    """

    __slots__ = (
        "_board",
        "_side_to_move",
        "_phase",
        "_ply",
        "events",
    )

    def __init__(self) -> None:
        self._board = Board()
        self._side_to_move = Player.WHITE
        self._phase = GamePhase.NOT_STARTED
        self._ply = 0
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Player:
        return self._side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def ply(self) -> int:
        return self._ply

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(
        self,
        board: Board | None = None,
        side_to_move: Player = Player.WHITE,
    ) -> None:
        """Set up a new game from *board* (default: the starting layout)."""
        self._board = board.clone() if board is not None else Board.initial()
        self._ply = 0
        _LOGGER.info("New game, %s to move", side_to_move)
        self._hand_turn_to(side_to_move)

    def legal_moves(self) -> list[Move]:
        if self._phase != GamePhase.AWAITING_MOVE:
            return []
        return Rules.legal_moves(self._board, self._side_to_move)

    def submit_move(self, move: Move) -> bool:
        """Play *move* for the side to move. Returns True if legal and applied."""
        if self._phase != GamePhase.AWAITING_MOVE:
            return False

        mover = self._side_to_move
        if move not in Rules.legal_moves(self._board, mover):
            _LOGGER.warning("Rejected illegal move %s for %s", move, mover)
            return False

        self._board = Rules.apply_move(self._board, move)
        self._ply += 1
        self._emit_move(move, mover)
        self._hand_turn_to(mover.opposite)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _hand_turn_to(self, player: Player) -> None:
        """Give the move to *player*, or end the game if nobody can move."""
        if Rules.is_game_over(self._board):
            self._side_to_move = player
            self._set_phase(GamePhase.GAME_OVER)
            _LOGGER.info("Game over after %d plies", self._ply)
            self._emit_game_over()
            return

        if not Rules.has_legal_moves(self._board, player):
            _LOGGER.info(
                "%s has no legal move; turn passes to %s", player, player.opposite
            )
            player = player.opposite

        self._side_to_move = player
        self._set_phase(GamePhase.AWAITING_MOVE)

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, move: Move, mover: Player) -> None:
        for cb in self.events.on_move:
            cb(move, mover, self._board)

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self._board)
