"""Tests for Board."""

import pytest

from rookie.core.board import Board
from rookie.core.enums import Color, PieceType
from rookie.core.errors import MissingKingError
from rookie.core.piece import Piece
from rookie.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
    SQUARES,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_white_pawns(self) -> None:
        board = Board.initial()
        pawns = board.pieces(Color.WHITE, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(sq.row == 6 for sq in pawns)  # rank 2

    def test_black_pawns(self) -> None:
        board = Board.initial()
        pawns = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(pawns) == 8
        assert all(sq.row == 1 for sq in pawns)  # rank 7

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in SQUARES[16:48]:
            assert board[sq] is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_pop(self) -> None:
        board = Board.initial()
        assert board.pop(E2) == Piece(Color.WHITE, PieceType.PAWN)
        assert board.is_empty(E2)
        assert board.pop(E4) is None

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board.king_square(Color.WHITE) == E1

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_follows_king(self) -> None:
        board = Board.initial()
        board[E2] = board.pop(E1)
        assert board.king_square(Color.WHITE) == E2

    def test_king_square_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(MissingKingError, match="No WHITE king"):
            board.king_square(Color.WHITE)

    def test_promoted_flag_ignored_by_equality(self) -> None:
        assert Piece(Color.WHITE, PieceType.ROOK, promoted=True) == Piece(
            Color.WHITE, PieceType.ROOK
        )

    def test_rows_rank_eight_first(self) -> None:
        rows = list(Board.initial().rows())
        assert len(rows) == 8
        assert str(rows[0][4]) == "k"
        assert str(rows[7][4]) == "K"

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert text.startswith("8 r n b q k b n r")
        assert "a b c d e f g h" in text
