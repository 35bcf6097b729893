"""Legal and pattern-legal move generation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rookie.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    is_in_check,
    is_square_attacked,
    pawn_direction,
)
from rookie.core.enums import CastlingRights, Color, PieceType
from rookie.core.move import PROMOTION_TYPES, Move
from rookie.core.types import SQUARES, Square

if TYPE_CHECKING:
    from rookie.core.position import Position

_HOME_ROW: tuple[int, int] = (6, 1)  # [color] -> pawn start row
_LAST_ROW: tuple[int, int] = (0, 7)  # [color] -> promotion row
_BACK_ROW: tuple[int, int] = (7, 0)  # [color] -> king/rook row


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    Candidates are checked by simulating each one on a copy of the position,
    so the position handed in is never mutated.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> list[Move]:
        """Strictly legal moves of the piece on *sq*.

        Empty when *sq* is vacant or holds a piece of the side not to move.
        """
        return self.filter_legal(self.pseudo_legal_moves(sq))

    def generate_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move, in board order."""
        legal: list[Move] = []
        for sq, piece in self._board.occupied():
            if piece.color == self._pos.side_to_move:
                legal.extend(self.legal_moves(sq))
        return legal

    def pseudo_legal_moves(self, sq: Square) -> list[Move]:
        """Pattern-legal moves of the piece on *sq* (may leave own king in check)."""
        piece = self._board[sq]
        if piece is None or piece.color != self._pos.side_to_move:
            return []

        moves: list[Move] = []
        color = piece.color
        idx = sq.index
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            self._gen_pawn(sq, color, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_steps(sq, color, KNIGHT_TARGETS[idx], moves)
        elif pt == PieceType.BISHOP:
            self._gen_sliding(sq, color, BISHOP_RAYS[idx], moves)
        elif pt == PieceType.ROOK:
            self._gen_sliding(sq, color, ROOK_RAYS[idx], moves)
        elif pt == PieceType.QUEEN:
            self._gen_sliding(sq, color, QUEEN_RAYS[idx], moves)
        else:
            self._gen_steps(sq, color, KING_TARGETS[idx], moves)
            self._gen_castling(sq, color, moves)
        return moves

    def filter_legal(self, candidates: Iterable[Move]) -> list[Move]:
        """Drop candidates that would leave the mover's king attacked."""
        legal: list[Move] = []
        for move in candidates:
            mover = self._board[move.from_sq]
            if mover is None:
                continue
            scratch = self._pos.copy()
            scratch.apply_unchecked(move)
            if not is_in_check(scratch.board, mover.color):
                legal.append(move)
        return legal

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_in_check(self._board, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_square_attacked(self._board, sq, by_color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        step = pawn_direction(color)

        one_step = sq.offset(step, 0)
        if one_step is None:
            return

        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, color, moves)
            if sq.row == _HOME_ROW[int(color)]:
                two_step = Square(sq.row + 2 * step, sq.col)
                if board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    self._add_pawn_move(sq, cap_sq, color, moves)
            elif cap_sq == self._pos.en_passant:
                victim = board[Square(sq.row, cap_sq.col)]
                if (
                    victim is not None
                    and victim.color != color
                    and victim.piece_type == PieceType.PAWN
                ):
                    moves.append(Move(sq, cap_sq))

    @staticmethod
    def _add_pawn_move(
        from_sq: Square, to_sq: Square, color: Color, moves: list[Move]
    ) -> None:
        if to_sq.row == _LAST_ROW[int(color)]:
            for pt in PROMOTION_TYPES:
                moves.append(Move(from_sq, to_sq, pt))
        else:
            moves.append(Move(from_sq, to_sq))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        row = _BACK_ROW[int(color)]
        if king_sq.row != row or king_sq.col != 4:
            return
        if self.is_in_check(color):
            return

        opponent = color.opposite
        squares = SQUARES[row * 8 : row * 8 + 8]

        if self._pos.has_castling_right(CastlingRights.kingside(color)):
            if (
                self._holds_own_rook(squares[7], color)
                and self._all_empty(squares[5:7])
                and not self._any_attacked(squares[5:7], opponent)
            ):
                moves.append(Move(king_sq, squares[6]))

        if self._pos.has_castling_right(CastlingRights.queenside(color)):
            if (
                self._holds_own_rook(squares[0], color)
                and self._all_empty(squares[1:4])
                and not self._any_attacked(squares[2:4], opponent)
            ):
                moves.append(Move(king_sq, squares[2]))

    def _holds_own_rook(self, sq: Square, color: Color) -> bool:
        piece = self._board[sq]
        return (
            piece is not None
            and piece.color == color
            and piece.piece_type == PieceType.ROOK
        )

    def _all_empty(self, squares: tuple[Square, ...]) -> bool:
        return all(self._board.is_empty(s) for s in squares)

    def _any_attacked(self, squares: tuple[Square, ...], by_color: Color) -> bool:
        return any(is_square_attacked(self._board, s, by_color) for s in squares)
