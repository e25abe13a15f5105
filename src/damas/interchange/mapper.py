"""Translation between interchange records and core value types."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from damas.core.board import Board
from damas.core.enums import PieceRank, Player
from damas.core.move import Move
from damas.core.piece import Piece
from damas.interchange.schemas import BoardState, MoveRecord, PieceRecord, SquareRecord

_LOGGER = logging.getLogger(__name__)

_PLAYERS: dict[str, Player] = {str(p).lower(): p for p in Player}
_RANKS: dict[str, PieceRank] = {str(r).lower(): r for r in PieceRank}


class InterchangeError(ValueError):
    """An interchange record names a player or rank the core does not know."""


def parse_player(text: str) -> Player:
    """Case-insensitive ``"White"`` / ``"Black"``."""
    try:
        return _PLAYERS[text.strip().lower()]
    except KeyError:
        raise InterchangeError(f"Unknown player: {text!r}") from None


def parse_rank(text: str) -> PieceRank:
    """Case-insensitive ``"Man"`` / ``"King"``."""
    try:
        return _RANKS[text.strip().lower()]
    except KeyError:
        raise InterchangeError(f"Unknown piece rank: {text!r}") from None


# ── Boards ───────────────────────────────────────────────────────────────────


def board_from_state(state: BoardState, *, strict: bool = False) -> Board:
    """Build a :class:`Board` from a snapshot.

    Records with an unknown owner or rank are skipped with a warning, or
    rejected with :class:`InterchangeError` when *strict* is set. A later
    record for an already-filled square replaces the earlier one.
    """
    board = Board()
    for record in state.pieces:
        try:
            piece = Piece(parse_player(record.owner), parse_rank(record.rank))
        except InterchangeError:
            if strict:
                raise
            _LOGGER.warning(
                "Skipping piece at (%d, %d): owner=%r rank=%r",
                record.row,
                record.col,
                record.owner,
                record.rank,
            )
            continue

        if board.get(record.row, record.col) is not None:
            _LOGGER.warning(
                "Duplicate piece at (%d, %d); keeping the later record",
                record.row,
                record.col,
            )
        board.set(record.row, record.col, piece)
    return board


def board_to_state(board: Board) -> BoardState:
    return BoardState(
        pieces=[
            PieceRecord(
                row=row,
                col=col,
                owner=str(piece.owner),
                rank=str(piece.rank),
            )
            for (row, col), piece in board.occupied()
        ]
    )


# ── Moves ────────────────────────────────────────────────────────────────────


def move_to_record(move: Move) -> MoveRecord:
    captured = [SquareRecord(row=r, col=c) for r, c in move.captured]
    return MoveRecord(
        from_row=move.from_sq[0],
        from_col=move.from_sq[1],
        to_row=move.to_sq[0],
        to_col=move.to_sq[1],
        captured_squares=captured or None,
    )


def move_from_record(record: MoveRecord) -> Move:
    captured = tuple((sq.row, sq.col) for sq in record.captured_squares or ())
    return Move(
        (record.from_row, record.from_col),
        (record.to_row, record.to_col),
        captured,
    )


def moves_to_records(moves: Iterable[Move]) -> list[MoveRecord]:
    return [move_to_record(move) for move in moves]
