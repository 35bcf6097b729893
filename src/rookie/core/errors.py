"""Exceptions raised by the rules engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rookie.core.enums import Color
    from rookie.core.move import Move


class ChessError(Exception):
    """Base class for rules-engine errors."""


class IllegalMoveError(ChessError, ValueError):
    """A submitted move is not in the legal-move list of its source square."""

    def __init__(self, move: Move, reason: str = "illegal move") -> None:
        super().__init__(f"{reason}: {move}")
        self.move = move


class MissingKingError(ChessError, RuntimeError):
    """A color has no king on the board.

    The legality rules never let a king be captured, so this signals a bug in
    move generation or application rather than a recoverable condition.
    """

    def __init__(self, color: Color) -> None:
        super().__init__(f"No {color.name} king on board")
        self.color = color
