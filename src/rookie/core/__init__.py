"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from rookie.core import Position, Rules, parse_move, position_to_fen

    pos = Position()
    pos.make_move(parse_move("e2 e4"))
    print(position_to_fen(pos), Rules.is_checkmate(pos))
"""

from rookie.core.attacks import is_in_check, is_square_attacked
from rookie.core.board import Board
from rookie.core.enums import CastlingRights, Color, GameResult, PieceType
from rookie.core.errors import ChessError, IllegalMoveError, MissingKingError
from rookie.core.move import PROMOTION_TYPES, Move, parse_move
from rookie.core.move_generator import MoveGenerator
from rookie.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from rookie.core.piece import Piece
from rookie.core.position import Position
from rookie.core.rules import Rules
from rookie.core.types import SQUARES, Square, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "SQUARES",
    "Square",
    "parse_square",
    "square_name",
    "PROMOTION_TYPES",
    "parse_move",
    # Errors
    "ChessError",
    "IllegalMoveError",
    "MissingKingError",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "is_in_check",
    "is_square_attacked",
    # Position text
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
