"""Placement strings and move text.

A placement lists the eight rows from row 0 (rank 8) down to row 7 (rank 1),
separated by ``/``. Pieces use ``w``/``W``/``b``/``B`` (lowercase = man,
uppercase = king) and digits stand for runs of empty squares, as in FEN.
"""

from __future__ import annotations

import re

from damas.core.board import Board
from damas.core.enums import Player
from damas.core.move import Move
from damas.core.piece import Piece
from damas.core.rules import Rules
from damas.core.types import BOARD_SIZE, parse_square, square_name

STARTING_PLACEMENT = "1b1b1b1b/b1b1b1b1/1b1b1b1b/8/8/w1w1w1w1/1w1w1w1w/w1w1w1w1"

_MOVE_RE = re.compile(
    r"^(?P<from>[a-h][1-8])(?P<sep>[-x])(?P<to>[a-h][1-8])"
    r"(?:\((?P<captured>[a-h][1-8](?:,[a-h][1-8])*)\))?$"
)


# ── Placement ────────────────────────────────────────────────────────────────


def board_from_placement(text: str) -> Board:
    """Parse a placement string into a :class:`Board`."""
    rows = text.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Placement must have 8 rows: {text!r}")

    board = Board()
    for row, row_str in enumerate(rows):
        col = 0
        for ch in row_str:
            if ch.isdigit():
                col += int(ch)
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement row width: {text!r}")
                board.set(row, col, Piece.from_char(ch))
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement row width: {text!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement row width: {text!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise a :class:`Board` to a placement string."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        row_str = ""
        for col in range(BOARD_SIZE):
            piece = board.get(row, col)
            if piece is None:
                empty += 1
            else:
                if empty:
                    row_str += str(empty)
                    empty = 0
                row_str += str(piece)
        if empty:
            row_str += str(empty)
        rows.append(row_str)
    return "/".join(rows)


# ── Move text ────────────────────────────────────────────────────────────────


def move_to_text(move: Move) -> str:
    """Long form: ``c3-d4`` or ``c3xg7(d4,f6)`` with captures in chain order."""
    if not move.is_capture:
        return str(move)
    captured = ",".join(square_name(sq) for sq in move.captured)
    return f"{move}({captured})"


def parse_move(board: Board, player: Player, text: str) -> Move:
    """Resolve *text* to one of *player*'s legal moves on *board*.

    Accepts the short form (``c3xg7``) and the long form written by
    :func:`move_to_text`. The short form must match exactly one legal move.
    """
    m = _MOVE_RE.match(text.strip())
    if not m:
        raise ValueError(f"Invalid move text: {text!r}")

    from_sq = parse_square(m.group("from"))
    to_sq = parse_square(m.group("to"))
    is_capture = m.group("sep") == "x"
    captured_text = m.group("captured")
    if captured_text and not is_capture:
        raise ValueError(f"Captured squares on a non-capture move: {text!r}")

    candidates = [
        move
        for move in Rules.legal_moves(board, player)
        if move.from_sq == from_sq
        and move.to_sq == to_sq
        and move.is_capture == is_capture
    ]
    if captured_text:
        captured = tuple(parse_square(name) for name in captured_text.split(","))
        candidates = [move for move in candidates if move.captured == captured]

    if not candidates:
        raise ValueError(f"Illegal move for {player}: {text!r}")
    if len(candidates) > 1:
        raise ValueError(f"Ambiguous move {text!r}; list the captured squares")
    return candidates[0]
