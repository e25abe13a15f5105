"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side to move. White advances toward row 0, Black toward row 7."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a forward step for this side's men."""
        return -1 if self is Player.WHITE else 1

    @property
    def promotion_row(self) -> int:
        """Row on which this side's men are crowned."""
        return 0 if self is Player.WHITE else 7

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class PieceRank(IntEnum):
    """Piece rank: a plain man or a flying king."""

    MAN = 1
    KING = 2

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)
