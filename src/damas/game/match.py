"""Automated matches between two move-selection policies."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from damas.core.board import Board
from damas.core.enums import Player
from damas.core.move import Move
from damas.engine.search import IMovePolicy
from damas.game.controller import GameController
from damas.game.interfaces import MatchSettings

_LOGGER = logging.getLogger(__name__)

PlyCallback = Callable[[Move, Player, Board], None]


@dataclass(slots=True, frozen=True)
class MatchOutcome:
    """Where an automated match stopped."""

    board: Board
    plies: int
    finished: bool  # False when the ply limit was reached first
    side_to_move: Player


def play_match(
    white: IMovePolicy,
    black: IMovePolicy,
    settings: MatchSettings | None = None,
    board: Board | None = None,
    on_ply: PlyCallback | None = None,
) -> MatchOutcome:
    """Let *white* and *black* play from *board* until the game ends.

    Stops early after ``settings.max_plies`` plies.
    """
    settings = settings or MatchSettings()
    policies: dict[Player, IMovePolicy] = {Player.WHITE: white, Player.BLACK: black}

    ctrl = GameController()
    if on_ply is not None:
        ctrl.events.on_move.append(on_ply)
    ctrl.new_game(board, settings.first_player)

    while not ctrl.is_game_over and ctrl.ply < settings.max_plies:
        side = ctrl.side_to_move
        move = policies[side].select_move(ctrl.board, side)
        if move is None or not ctrl.submit_move(move):
            raise RuntimeError(f"{side} policy produced no legal move: {move}")

    if not ctrl.is_game_over:
        _LOGGER.info("Ply limit %d reached", settings.max_plies)
    return MatchOutcome(
        board=ctrl.board,
        plies=ctrl.ply,
        finished=ctrl.is_game_over,
        side_to_move=ctrl.side_to_move,
    )
