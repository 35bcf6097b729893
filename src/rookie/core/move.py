"""Move value object (plain square-pair representation)."""

from __future__ import annotations

from dataclasses import dataclass, field

from rookie.core.enums import PieceType
from rookie.core.types import Square, parse_square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
}
_PROMO_FROM_CHAR: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    Two moves are equal when they share source and destination; the promotion
    choice is carried alongside but resolved separately.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = field(default=None, compare=False)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Log notation, e.g. ``'e2 e4'`` or ``'e7 e8Q'``."""
        base = f"{self.from_sq} {self.to_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def notation(self) -> str:
        return str(self)

    def with_promotion(self, promotion: PieceType | None) -> Move:
        return Move(self.from_sq, self.to_sq, promotion)


def parse_move(text: str) -> Move | None:
    """Parse ``'e2 e4'``, ``'e2e4'`` or either form with a promotion letter.

    Accepted promotion suffixes are ``q r b n`` in either case, attached
    (``'e7e8q'``) or space separated (``'e7 e8 Q'``). Returns ``None`` for
    anything else.
    """
    compact = "".join(text.split())
    if len(compact) not in (4, 5):
        return None

    from_sq = parse_square(compact[0:2])
    to_sq = parse_square(compact[2:4])
    if from_sq is None or to_sq is None:
        return None

    promotion: PieceType | None = None
    if len(compact) == 5:
        promotion = _PROMO_FROM_CHAR.get(compact[4].upper())
        if promotion is None:
            return None
    return Move(from_sq, to_sq, promotion)
