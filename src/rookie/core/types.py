"""Square value type and coordinate helpers.

Board layout (row-major, rank 8 first):
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """A board coordinate; ``row`` 0 is rank 8 and ``col`` 0 is file a.

    Build squares through :meth:`at` or :func:`parse_square`, which refuse
    out-of-range input instead of producing a malformed square.
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < 8 and 0 <= self.col < 8):
            raise ValueError(f"Square out of range: ({self.row}, {self.col})")

    @classmethod
    def at(cls, row: int, col: int) -> Square | None:
        """Square for (*row*, *col*), or ``None`` when off the board."""
        if 0 <= row < 8 and 0 <= col < 8:
            return SQUARES[row * 8 + col]
        return None

    @property
    def index(self) -> int:
        """Row-major index 0–63 (a8=0, h1=63)."""
        return self.row * 8 + self.col

    @property
    def name(self) -> str:
        return square_name(self)

    def offset(self, d_row: int, d_col: int) -> Square | None:
        """Square shifted by (*d_row*, *d_col*), or ``None`` off the board."""
        return Square.at(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return square_name(self)


SQUARES: tuple[Square, ...] = tuple(Square(r, c) for r in range(8) for c in range(8))


def square_name(sq: Square) -> str:
    """Algebraic name, e.g. ``Square(6, 4)`` → ``'e2'``."""
    return _FILES[sq.col] + str(8 - sq.row)


def parse_square(name: str) -> Square | None:
    """Parse algebraic notation (``'a1'``..``'h8'``); ``None`` if malformed."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        return None
    return SQUARES[(8 - int(name[1])) * 8 + _FILES.index(name[0])]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[56:64]
