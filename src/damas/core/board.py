"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from damas.core.enums import Player
from damas.core.piece import Piece
from damas.core.types import (
    BOARD_SIZE,
    Square,
    check_square,
    is_dark_square,
    square_name,
)

_START_ROWS: dict[Player, range] = {
    Player.BLACK: range(0, 3),
    Player.WHITE: range(5, 8),
}


class Board:
    """8x8 grid of optional pieces with bounds-checked accessors.

    The rules layer never edits a board it was handed; it works on
    :meth:`clone` copies instead.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def get(self, row: int, col: int) -> Piece | None:
        check_square(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, piece: Piece | None) -> None:
        check_square(row, col)
        self._cells[row][col] = piece

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get(*sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self.set(*sq, piece)

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> list[tuple[Square, Piece]]:
        """All occupied squares, row-major."""
        return [
            ((row, col), piece)
            for row, cells in enumerate(self._cells)
            for col, piece in enumerate(cells)
            if piece is not None
        ]

    def pieces(self, player: Player) -> list[tuple[Square, Piece]]:
        """Squares and pieces owned by *player*, row-major."""
        return [(sq, piece) for sq, piece in self.occupied() if piece.owner == player]

    def count(self, player: Player) -> int:
        return len(self.pieces(player))

    # -- Copying ------------------------------------------------------------

    def clone(self) -> Board:
        b = Board()
        b._cells = [row.copy() for row in self._cells]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_pieces(
        cls, pieces: Mapping[Square, Piece] | Iterable[tuple[Square, Piece]]
    ) -> Board:
        """Build a board from a ``{square: piece}`` snapshot."""
        b = cls()
        items = pieces.items() if isinstance(pieces, Mapping) else pieces
        for sq, piece in items:
            b[sq] = piece
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: twelve men a side on the dark squares."""
        b = cls()
        for player, rows in _START_ROWS.items():
            for row in rows:
                for col in range(BOARD_SIZE):
                    if is_dark_square((row, col)):
                        b._cells[row][col] = Piece(player)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._cells):
            marks = [str(p) if p else "." for p in cells]
            rank = square_name((row, 0))[1]
            rows.append(f"{rank} {' '.join(marks)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
