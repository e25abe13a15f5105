"""Game-layer enums and settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from damas.core.enums import Player

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a draughts game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Match configuration ──────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class MatchSettings:
    """Constraints for an automated match.

    Args:
        max_plies: Stop after this many plies even if the game is not over.
        seed: Seed for the policies' random source (``None`` = unseeded).
        first_player: Side that moves first.
    """

    max_plies: int = 200
    seed: int | None = None
    first_player: Player = Player.WHITE

    def __post_init__(self) -> None:
        if self.max_plies < 0:
            raise ValueError(f"max_plies must be >= 0, got {self.max_plies!r}")
