"""Attack detection and the offset / ray tables shared with move generation.

Everything here is a pure query over a :class:`Board`; nothing consults the
legality filter, so move generation can call it freely.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.enums import Color, PieceType
from rookie.core.types import SQUARES, Square

if TYPE_CHECKING:
    from rookie.core.board import Board

# (d_row, d_col); white pawns advance towards row 0.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


def pawn_direction(color: Color) -> int:
    """Row step of a *color* pawn advance."""
    return -1 if color == Color.WHITE else 1


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in SQUARES:
        moves: list[Square] = []
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if to_sq is not None:
                moves.append(to_sq)
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for d_row, d_col in directions:
            ray: list[Square] = []
            to_sq = sq.offset(d_row, d_col)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(d_row, d_col)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_attackers() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    # [color][square] -> squares a *color* pawn would have to stand on to hit it.
    per_color: list[tuple[tuple[Square, ...], ...]] = []
    for color in (Color.WHITE, Color.BLACK):
        behind = -pawn_direction(color)
        per_color.append(
            tuple(
                tuple(
                    s
                    for s in (sq.offset(behind, -1), sq.offset(behind, 1))
                    if s is not None
                )
                for sq in SQUARES
            )
        )
    return tuple(per_color)


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)
_PAWN_ATTACKERS = _build_pawn_attackers()

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Queries ----------------------------------------------------------------


def _first_piece_hits(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    kinds: tuple[PieceType, ...],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in kinds:
                return True
            break
    return False


def _any_piece_on(
    board: Board,
    squares: tuple[Square, ...],
    by_color: Color,
    kind: PieceType,
) -> bool:
    for from_sq in squares:
        piece = board[from_sq]
        if piece is not None and piece.color == by_color and piece.piece_type == kind:
            return True
    return False


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    idx = sq.index
    return (
        _any_piece_on(board, KNIGHT_TARGETS[idx], by_color, PieceType.KNIGHT)
        or _any_piece_on(
            board, _PAWN_ATTACKERS[int(by_color)][idx], by_color, PieceType.PAWN
        )
        or _first_piece_hits(board, BISHOP_RAYS[idx], by_color, _DIAGONAL_SLIDERS)
        or _first_piece_hits(board, ROOK_RAYS[idx], by_color, _ORTHOGONAL_SLIDERS)
        or _any_piece_on(board, KING_TARGETS[idx], by_color, PieceType.KING)
    )


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    return is_square_attacked(board, board.king_square(color), color.opposite)
