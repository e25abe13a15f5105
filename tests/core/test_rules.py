"""Tests for Rules: move application, promotion, game-over detection."""

import pytest

from damas.core.board import Board
from damas.core.enums import PieceRank, Player
from damas.core.move import Move
from damas.core.piece import Piece
from damas.core.rules import Rules, apply_move, is_game_over, legal_moves
from damas.core.types import OutOfBoardError

W = Piece(Player.WHITE)
WK = Piece(Player.WHITE, PieceRank.KING)
B = Piece(Player.BLACK)


class TestApplyMove:
    def test_simple_move_relocates(self) -> None:
        board = Board.from_pieces({(5, 2): W})
        after = apply_move(board, Move.simple(5, 2, 4, 3))
        assert after.get(5, 2) is None
        assert after.get(4, 3) == W

    def test_single_capture_removes_piece(self) -> None:
        board = Board.from_pieces({(5, 2): W, (4, 3): B})
        after = apply_move(board, Move.capture(5, 2, 3, 4, (4, 3)))
        assert after.get(5, 2) is None
        assert after.get(4, 3) is None
        assert after.get(3, 4) == W

    def test_multi_capture_removes_all(self) -> None:
        board = Board.from_pieces({(6, 1): W, (5, 2): B, (3, 4): B})
        after = apply_move(board, Move.capture(6, 1, 2, 5, (5, 2), (3, 4)))
        assert after.occupied() == [((2, 5), W)]

    def test_input_board_untouched(self) -> None:
        board = Board.from_pieces({(5, 2): W, (4, 3): B})
        before = board.clone()
        apply_move(board, Move.capture(5, 2, 3, 4, (4, 3)))
        assert board == before

    def test_empty_origin_is_noop_copy(self) -> None:
        board = Board.from_pieces({(4, 3): B})
        after = apply_move(board, Move.simple(5, 2, 4, 1))
        assert after == board
        assert after is not board

    def test_out_of_range_move_raises(self) -> None:
        with pytest.raises(OutOfBoardError):
            apply_move(Board(), Move((8, 0), (7, 1)))


class TestPromotion:
    def test_white_man_crowned_on_row_0(self) -> None:
        board = Board.from_pieces({(1, 2): W})
        after = apply_move(board, Move.simple(1, 2, 0, 1))
        assert after.get(0, 1) == WK
        assert after.get(1, 2) is None

    def test_black_man_crowned_on_row_7(self) -> None:
        board = Board.from_pieces({(6, 3): B})
        after = apply_move(board, Move.simple(6, 3, 7, 4))
        assert after.get(7, 4) == Piece(Player.BLACK, PieceRank.KING)

    def test_capture_onto_promotion_row(self) -> None:
        board = Board.from_pieces({(2, 1): W, (1, 2): B})
        (move,) = legal_moves(board, Player.WHITE)
        after = apply_move(board, move)
        assert after.get(0, 3) == WK

    def test_white_man_not_crowned_on_black_home_row(self) -> None:
        assert Rules.piece_after_move(W, (7, 0)) == W

    def test_king_stays_king(self) -> None:
        board = Board.from_pieces({(3, 3): WK})
        after = apply_move(board, Move.simple(3, 3, 6, 6))
        assert after.get(6, 6) == WK

    def test_no_promotion_elsewhere(self) -> None:
        board = Board.from_pieces({(5, 2): W})
        after = apply_move(board, Move.simple(5, 2, 4, 1))
        assert after.get(4, 1) == W


class TestGameOver:
    def test_both_sides_mobile(self) -> None:
        board = Board.from_pieces({(5, 2): W, (2, 3): B})
        assert not is_game_over(board)

    def test_initial_not_over(self) -> None:
        assert not is_game_over(Board.initial())

    def test_empty_board_is_over(self) -> None:
        assert is_game_over(Board())

    def test_one_side_without_pieces_is_not_enough(self) -> None:
        # Only Black can move; the game continues under the both-sides rule.
        board = Board.from_pieces({(3, 3): B})
        assert legal_moves(board, Player.WHITE) == []
        assert not is_game_over(board)

    def test_one_side_blocked_is_not_enough(self) -> None:
        board = Board.from_pieces({(0, 0): W, (3, 3): B})
        assert legal_moves(board, Player.WHITE) == []
        assert not is_game_over(board)

    def test_both_sides_stuck(self) -> None:
        # Each man sits on its own promotion row.
        board = Board.from_pieces({(0, 1): W, (7, 2): B})
        assert is_game_over(board)

    def test_has_legal_moves_matches_generator(self) -> None:
        board = Board.initial()
        for player in Player:
            assert Rules.has_legal_moves(board, player) == bool(
                legal_moves(board, player)
            )
