"""Core domain layer: pure draughts rules with zero external dependencies.

Quick start::

    from damas.core import Board, Player, apply_move, is_game_over, legal_moves

    board = Board.initial()
    moves = legal_moves(board, Player.WHITE)
    board = apply_move(board, moves[0])
    print(is_game_over(board))
"""

from damas.core.board import Board
from damas.core.enums import PieceRank, Player
from damas.core.move import Move
from damas.core.move_generator import MoveGenerator
from damas.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
    move_to_text,
    parse_move,
)
from damas.core.piece import Piece
from damas.core.rules import Rules, apply_move, is_game_over, legal_moves
from damas.core.types import (
    BOARD_SIZE,
    DIAGONALS,
    OutOfBoardError,
    Square,
    is_dark_square,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "PieceRank",
    "Player",
    # Types / helpers
    "BOARD_SIZE",
    "DIAGONALS",
    "OutOfBoardError",
    "Square",
    "is_dark_square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Operations
    "apply_move",
    "is_game_over",
    "legal_moves",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
    "move_to_text",
    "parse_move",
]
