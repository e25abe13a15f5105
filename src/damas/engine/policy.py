"""Random move-selection policies.

Both policies own their random source. Pass a seeded ``random.Random`` to get
reproducible games; nothing here touches the module-level ``random`` state.
"""

from __future__ import annotations

import logging
import random

from damas.core.board import Board
from damas.core.enums import Player
from damas.core.move import Move
from damas.core.rules import Rules
from damas.engine.search import IMovePolicy

_LOGGER = logging.getLogger(__name__)


class RandomPolicy(IMovePolicy):
    """Uniform choice among all legal moves."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def select_move(self, board: Board, player: Player) -> Move | None:
        moves = Rules.legal_moves(board, player)
        if not moves:
            return None
        return self._rng.choice(moves)


class CapturePreferringPolicy(IMovePolicy):
    """Takes the longest capture chain available, otherwise any legal move.

    Ties are broken uniformly at random.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def select_move(self, board: Board, player: Player) -> Move | None:
        moves = Rules.legal_moves(board, player)
        if not moves:
            _LOGGER.debug("%s has no legal move", player)
            return None

        captures = [m for m in moves if m.is_capture]
        if not captures:
            return self._rng.choice(moves)

        longest = max(len(m.captured) for m in captures)
        best = [m for m in captures if len(m.captured) == longest]
        move = self._rng.choice(best)
        _LOGGER.debug(
            "%s captures %d piece(s) with %s (%d candidate(s))",
            player,
            longest,
            move,
            len(best),
        )
        return move
