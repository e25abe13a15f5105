"""Game management layer: controller and automated matches.

Quick start::

    import random

    from damas.engine import CapturePreferringPolicy
    from damas.game import MatchSettings, play_match

    rng = random.Random(7)
    outcome = play_match(
        CapturePreferringPolicy(rng),
        CapturePreferringPolicy(rng),
        MatchSettings(max_plies=120),
    )
"""

from damas.game.controller import GameController, GameEvents
from damas.game.interfaces import GamePhase, MatchSettings
from damas.game.match import MatchOutcome, play_match

__all__ = [
    "GameController",
    "GameEvents",
    "GamePhase",
    "MatchOutcome",
    "MatchSettings",
    "play_match",
]
