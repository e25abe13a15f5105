"""Shared move-selection protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from damas.core.board import Board
    from damas.core.enums import Player
    from damas.core.move import Move


class IMovePolicy(Protocol):
    """Protocol for anything that picks one move out of the legal set."""

    def select_move(self, board: Board, player: Player) -> Move | None: ...
