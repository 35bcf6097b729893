"""High-level chess rules: check, checkmate, stalemate, random fallback."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from rookie.core.enums import Color, GameResult
from rookie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from rookie.core.move import Move
    from rookie.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`.

    None of these methods mutate the position.
    """

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        """Is *color* (default: side to move) in check?"""
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move if color is None else color)

    @staticmethod
    def has_legal_move(position: Position) -> bool:
        gen = MoveGenerator(position)
        for sq, piece in position.board.occupied():
            if piece.color == position.side_to_move and gen.legal_moves(sq):
                return True
        return False

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not Rules.has_legal_move(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not Rules.has_legal_move(position)

    @staticmethod
    def random_legal_move(
        position: Position, rng: random.Random | None = None
    ) -> Move | None:
        """A uniformly drawn legal move, or ``None`` in a terminal position."""
        legal = MoveGenerator(position).generate_legal_moves()
        if not legal:
            return None
        return (rng or random).choice(legal)

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        if Rules.has_legal_move(position):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(position):
            return (
                GameResult.BLACK_WINS
                if position.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
