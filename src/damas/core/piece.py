"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from damas.core.enums import PieceRank, Player

# Placement character ↔ (Player, PieceRank)
_CHAR_MAP: dict[str, tuple[Player, PieceRank]] = {
    "w": (Player.WHITE, PieceRank.MAN),
    "W": (Player.WHITE, PieceRank.KING),
    "b": (Player.BLACK, PieceRank.MAN),
    "B": (Player.BLACK, PieceRank.KING),
}

_UNICODE: dict[tuple[Player, PieceRank], str] = {
    (Player.WHITE, PieceRank.MAN): "⛀",
    (Player.WHITE, PieceRank.KING): "⛁",
    (Player.BLACK, PieceRank.MAN): "⛂",
    (Player.BLACK, PieceRank.KING): "⛃",
}

_CHARS: dict[tuple[Player, PieceRank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: owner plus rank."""

    owner: Player
    rank: PieceRank = PieceRank.MAN

    @property
    def is_man(self) -> bool:
        return self.rank == PieceRank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank == PieceRank.KING

    def promoted(self) -> Piece:
        """The crowned version of this piece (a new object)."""
        return Piece(self.owner, PieceRank.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Placement character (lowercase = man, uppercase = king)."""
        return _CHARS[(self.owner, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from placement character, e.g. 'B' → black king."""
        try:
            owner, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(owner, rank)

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛀."""
        return _UNICODE[(self.owner, self.rank)]
