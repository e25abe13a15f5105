"""High-level draughts rules: move application and game-over detection."""

from __future__ import annotations

from damas.core.board import Board
from damas.core.enums import Player
from damas.core.move import Move
from damas.core.move_generator import MoveGenerator
from damas.core.piece import Piece
from damas.core.types import Square


class Rules:
    """Static rule-checker operating on a :class:`Board`.

    Every method is a pure function of its arguments; boards handed in are
    never modified.
    """

    # Product policy:
    # - The game ends only when *neither* side has a legal move. A side that
    #   is blocked while its opponent can still move simply passes.

    @staticmethod
    def legal_moves(board: Board, player: Player) -> list[Move]:
        return MoveGenerator(board).generate_legal_moves(player)

    @staticmethod
    def has_legal_moves(board: Board, player: Player) -> bool:
        return MoveGenerator(board).has_legal_moves(player)

    @staticmethod
    def piece_after_move(piece: Piece, to_sq: Square) -> Piece:
        """A man reaching its promotion row is crowned; anything else is unchanged."""
        if piece.is_man and to_sq[0] == piece.owner.promotion_row:
            return piece.promoted()
        return piece

    @staticmethod
    def apply_move(board: Board, move: Move) -> Board:
        """Return the board that results from playing *move*.

        *move* must come from :meth:`legal_moves` for this board. It is not
        re-validated: an empty origin yields an unmodified copy, and any
        other illegal move gives an unspecified (but in-bounds) result.
        """
        result = board.clone()

        piece = result[move.from_sq]
        if piece is None:
            return result

        for sq in move.captured:
            result[sq] = None

        result[move.to_sq] = Rules.piece_after_move(piece, move.to_sq)
        if move.from_sq != move.to_sq:
            result[move.from_sq] = None
        return result

    @staticmethod
    def is_game_over(board: Board) -> bool:
        """True when both White and Black are without a legal move."""
        return not Rules.has_legal_moves(
            board, Player.WHITE
        ) and not Rules.has_legal_moves(board, Player.BLACK)


legal_moves = Rules.legal_moves
apply_move = Rules.apply_move
is_game_over = Rules.is_game_over
