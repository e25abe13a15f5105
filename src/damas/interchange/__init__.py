"""
Interchange - record shapes used by transport layers.

Converts between the JSON-friendly records an embedding system exchanges
(board snapshots, moves) and the core's value types.
"""

from .mapper import (
    InterchangeError,
    board_from_state,
    board_to_state,
    move_from_record,
    move_to_record,
    moves_to_records,
    parse_player,
    parse_rank,
)
from .schemas import BoardState, MoveRecord, PieceRecord, SquareRecord

__all__ = [
    "BoardState",
    "MoveRecord",
    "PieceRecord",
    "SquareRecord",
    "InterchangeError",
    "board_from_state",
    "board_to_state",
    "move_from_record",
    "move_to_record",
    "moves_to_records",
    "parse_player",
    "parse_rank",
]
