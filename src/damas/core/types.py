"""Square type alias and coordinate helpers.

Board layout (row, col), row 0 at the top:
    row 0 = rank 8 (White promotes here)
    row 7 = rank 1 (Black promotes here)
    col 0..7 = files a..h
"""

from __future__ import annotations

from typing import TypeAlias

BOARD_SIZE = 8

Square: TypeAlias = tuple[int, int]  # (row, col)
Direction: TypeAlias = tuple[int, int]  # (row delta, col delta)

DIAGONALS: tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

_FILES = "abcdefgh"


class OutOfBoardError(IndexError):
    """Raised when a row or column falls outside ``[0, 7]``."""


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def check_square(row: int, col: int) -> None:
    """Raise :class:`OutOfBoardError` unless ``(row, col)`` is on the board."""
    if not 0 <= row < BOARD_SIZE:
        raise OutOfBoardError(f"Row out of range: {row!r}")
    if not 0 <= col < BOARD_SIZE:
        raise OutOfBoardError(f"Column out of range: {col!r}")


def is_dark_square(sq: Square) -> bool:
    """Playing squares of the standard layout."""
    row, col = sq
    return (row + col) % 2 == 1


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 0) → 'a1', (0, 7) → 'h8'."""
    row, col = sq
    return _FILES[col] + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'c3' → (5, 2)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[1]), _FILES.index(name[0]))
