"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from rookie.core.enums import Color, PieceType
from rookie.core.errors import MissingKingError
from rookie.core.piece import Piece
from rookie.core.types import SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-cell grid (row-major, rank 8 first) with a king-square cache."""

    __slots__ = ("_cells", "_king_squares")

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        idx = sq.index
        old_piece = self._cells[idx]
        if (
            old_piece is not None
            and old_piece.piece_type == PieceType.KING
            and self._king_squares[int(old_piece.color)] == sq
        ):
            self._king_squares[int(old_piece.color)] = None

        self._cells[idx] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = sq

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq.index] is None

    def pop(self, sq: Square) -> Piece | None:
        """Remove and return whatever stands on *sq*."""
        piece = self[sq]
        if piece is not None:
            self[sq] = None
        return piece

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied cell in board order."""
        for sq, piece in zip(SQUARES, self._cells):
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color and piece.piece_type == piece_type
        ]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise MissingKingError(color)
        return sq

    def rows(self) -> Iterator[list[Piece | None]]:
        """Yield the eight rows, rank 8 first."""
        for row in range(8):
            yield self._cells[row * 8 : row * 8 + 8]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        b._king_squares = self._king_squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[SQUARES[col]] = Piece(Color.BLACK, pt)
            b[SQUARES[8 + col]] = Piece(Color.BLACK, PieceType.PAWN)
            b[SQUARES[48 + col]] = Piece(Color.WHITE, PieceType.PAWN)
            b[SQUARES[56 + col]] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        lines: list[str] = []
        for row, cells in enumerate(self.rows()):
            text = " ".join(str(p) if p else "." for p in cells)
            lines.append(f"{8 - row} {text}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
