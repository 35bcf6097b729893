"""Position: complete game state (board + metadata + move log)."""

from __future__ import annotations

from rookie.core.board import Board
from rookie.core.enums import CastlingRights, Color, PieceType
from rookie.core.errors import IllegalMoveError
from rookie.core.move import PROMOTION_TYPES, Move
from rookie.core.move_generator import MoveGenerator
from rookie.core.piece import Piece
from rookie.core.types import A1, A8, H1, H8, Square


class Position:
    """Full chess position: board + side to move + castling + en passant.

    The only ways to change a position are :meth:`make_move`, which validates
    against the legal-move list, and :meth:`apply_unchecked`, which trusts its
    input and is used by the legality filter on scratch copies.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "move_log",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        move_log: list[str] | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.move_log: list[str] = move_log if move_log is not None else []

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> Move:
        """Validate and apply *move*; return the move actually played.

        Raises :class:`IllegalMoveError` without touching the position when no
        legal move from ``move.from_sq`` reaches ``move.to_sq``. For promotions
        a missing choice means a queen.
        """
        matching = [
            m for m in MoveGenerator(self).legal_moves(move.from_sq) if m == move
        ]
        if not matching:
            raise IllegalMoveError(move)

        applied = matching[0]
        if applied.promotion is not None:
            choice = move.promotion if move.promotion is not None else PieceType.QUEEN
            if choice not in PROMOTION_TYPES:
                raise IllegalMoveError(move, "invalid promotion choice")
            applied = applied.with_promotion(choice)

        self.move_log.append(applied.notation)
        self.apply_unchecked(applied)
        return applied

    def apply_unchecked(self, move: Move) -> None:
        """Apply *move* and update all derived state. No legality checks."""
        board = self.board
        from_sq, to_sq = move.from_sq, move.to_sq

        piece = board.pop(from_sq)
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        # Castling: the king's two-file step drags the rook along
        if piece.piece_type == PieceType.KING:
            if abs(to_sq.col - from_sq.col) == 2:
                rook_from, rook_to = (7, 5) if to_sq.col > from_sq.col else (0, 3)
                rook = board.pop(Square(from_sq.row, rook_from))
                board[Square(from_sq.row, rook_to)] = rook
            self._clear_castling(CastlingRights.both(piece.color))

        for sq in (from_sq, to_sq):
            right = self._ROOK_CORNERS.get(sq)
            if right is not None:
                self._clear_castling(right)

        next_en_passant: Square | None = None
        if piece.piece_type == PieceType.PAWN:
            # En passant: the captured pawn sits beside the mover, not on to_sq
            if to_sq == self.en_passant:
                board[Square(from_sq.row, to_sq.col)] = None
            if abs(to_sq.row - from_sq.row) == 2:
                next_en_passant = Square((from_sq.row + to_sq.row) // 2, from_sq.col)
            if move.promotion is not None:
                piece = Piece(piece.color, move.promotion, promoted=True)
        self.en_passant = next_en_passant

        board[to_sq] = piece
        self.side_to_move = self.side_to_move.opposite

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        A1: CastlingRights.WHITE_QUEENSIDE,
        H1: CastlingRights.WHITE_KINGSIDE,
        A8: CastlingRights.BLACK_QUEENSIDE,
        H8: CastlingRights.BLACK_KINGSIDE,
    }

    def _clear_castling(self, rights: CastlingRights) -> None:
        self.castling &= ~rights

    def has_castling_right(self, right: CastlingRights) -> bool:
        return bool(self.castling & right)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy, move log included."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            move_log=self.move_log.copy(),
        )

    def __repr__(self) -> str:
        return f"Position(side_to_move={self.side_to_move}, castling={self.castling!r})"
