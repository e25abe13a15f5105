"""Tests for translating interchange records to and from core values."""

import logging

import pytest

from damas.core.board import Board
from damas.core.enums import PieceRank, Player
from damas.core.move import Move
from damas.core.piece import Piece
from damas.core.rules import legal_moves
from damas.interchange.mapper import (
    InterchangeError,
    board_from_state,
    board_to_state,
    move_from_record,
    move_to_record,
    moves_to_records,
    parse_player,
    parse_rank,
)
from damas.interchange.schemas import BoardState, MoveRecord, PieceRecord, SquareRecord


class TestNames:
    @pytest.mark.parametrize("text", ["White", "white", "WHITE", " white "])
    def test_player_case_insensitive(self, text: str) -> None:
        assert parse_player(text) == Player.WHITE

    def test_rank(self) -> None:
        assert parse_rank("king") == PieceRank.KING
        assert parse_rank("Man") == PieceRank.MAN

    def test_unknown(self) -> None:
        with pytest.raises(InterchangeError, match="Unknown player"):
            parse_player("Red")
        with pytest.raises(InterchangeError, match="Unknown piece rank"):
            parse_rank("Queen")


class TestBoardState:
    def test_from_state(self) -> None:
        state = BoardState(
            pieces=[
                PieceRecord(row=5, col=2, owner="white", rank="man"),
                PieceRecord(row=3, col=3, owner="Black", rank="King"),
            ]
        )
        board = board_from_state(state)
        assert board.get(5, 2) == Piece(Player.WHITE)
        assert board.get(3, 3) == Piece(Player.BLACK, PieceRank.KING)
        assert len(board.occupied()) == 2

    def test_unknown_values_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        state = BoardState(
            pieces=[
                PieceRecord(row=5, col=2, owner="Green", rank="Man"),
                PieceRecord(row=4, col=1, owner="White", rank="Queen"),
                PieceRecord(row=2, col=1, owner="Black", rank="Man"),
            ]
        )
        with caplog.at_level(logging.WARNING, logger="damas.interchange.mapper"):
            board = board_from_state(state)
        assert board.occupied() == [((2, 1), Piece(Player.BLACK))]
        assert caplog.text.count("Skipping piece") == 2

    def test_strict_rejects_unknown(self) -> None:
        state = BoardState(pieces=[PieceRecord(row=5, col=2, owner="Green", rank="Man")])
        with pytest.raises(InterchangeError):
            board_from_state(state, strict=True)

    def test_duplicate_square_keeps_later(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        state = BoardState(
            pieces=[
                PieceRecord(row=5, col=2, owner="White", rank="Man"),
                PieceRecord(row=5, col=2, owner="Black", rank="King"),
            ]
        )
        with caplog.at_level(logging.WARNING, logger="damas.interchange.mapper"):
            board = board_from_state(state)
        assert board.get(5, 2) == Piece(Player.BLACK, PieceRank.KING)
        assert "Duplicate piece" in caplog.text

    def test_round_trip_initial(self) -> None:
        board = Board.initial()
        assert board_from_state(board_to_state(board)) == board

    def test_to_state_uses_display_names(self) -> None:
        state = board_to_state(Board.from_pieces({(0, 1): Piece(Player.WHITE, PieceRank.KING)}))
        assert state.pieces == [PieceRecord(row=0, col=1, owner="White", rank="King")]


class TestMoves:
    def test_simple_move_record(self) -> None:
        record = move_to_record(Move.simple(5, 2, 4, 3))
        assert record.captured_squares is None
        assert record.to_wire() == {"fromRow": 5, "fromCol": 2, "toRow": 4, "toCol": 3}

    def test_capture_record_keeps_chain_order(self) -> None:
        record = move_to_record(Move.capture(6, 1, 2, 5, (5, 2), (3, 4)))
        assert record.captured_squares == [
            SquareRecord(row=5, col=2),
            SquareRecord(row=3, col=4),
        ]

    def test_from_record(self) -> None:
        record = MoveRecord.model_validate(
            {"fromRow": 5, "fromCol": 2, "toRow": 3, "toCol": 4,
             "capturedSquares": [{"row": 4, "col": 3}]}
        )
        assert move_from_record(record) == Move.capture(5, 2, 3, 4, (4, 3))

    def test_legal_moves_survive_the_wire(self) -> None:
        board = Board.from_pieces(
            {(6, 1): Piece(Player.WHITE), (5, 2): Piece(Player.BLACK), (3, 4): Piece(Player.BLACK)}
        )
        moves = legal_moves(board, Player.WHITE)
        records = moves_to_records(moves)
        assert [move_from_record(r) for r in records] == moves
