"""Move-selection package: policies that pick one legal move."""

from damas.engine.policy import CapturePreferringPolicy, RandomPolicy
from damas.engine.search import IMovePolicy

__all__ = [
    "CapturePreferringPolicy",
    "IMovePolicy",
    "RandomPolicy",
]
