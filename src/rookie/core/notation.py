"""Position text (FEN-compatible) parsing and serialisation."""

from __future__ import annotations

from rookie.core.attacks import is_in_check, pawn_direction
from rookie.core.board import Board
from rookie.core.enums import CastlingRights, Color, PieceType
from rookie.core.piece import Piece
from rookie.core.position import Position
from rookie.core.types import Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Halfmove clock and fullmove number are not tracked; these are emitted as-is.
_COUNTERS = "0 1"

_CASTLING_ORDER: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def position_from_fen(fen: str) -> Position:
    """Parse position text into a :class:`Position`.

    The counter fields are optional; when present they are validated and
    then dropped.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[Square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    for color in (Color.WHITE, Color.BLACK):
        if len(board.pieces(color, PieceType.KING)) != 1:
            raise ValueError(f"Invalid FEN: need exactly one {color} king: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    if is_in_check(board, side.opposite):
        raise ValueError(f"Invalid FEN: {side.opposite} king is capturable: {fen!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        rights = dict(_CASTLING_ORDER)
        seen: set[str] = set()
        for ch in castling_part:
            right = rights.get(ch)
            if right is None or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        if ep is None:
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")
        expected_row = 2 if side == Color.WHITE else 5
        if ep.row != expected_row:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        # The target must sit between an empty origin and the pushed pawn.
        step = pawn_direction(side.opposite)
        pushed = board[Square(ep.row + step, ep.col)]
        if (
            not board.is_empty(ep)
            or not board.is_empty(Square(ep.row - step, ep.col))
            or pushed != Piece(side.opposite, PieceType.PAWN)
        ):
            raise ValueError(
                f"Invalid FEN en-passant square without a double push: {ep_part!r}"
            )

    # 5–6. Counters (optional, not tracked)
    for text in parts[4:]:
        if not text.isdigit():
            raise ValueError(f"Invalid FEN counter field: {text!r}")

    return Position(board, side, castling, ep)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to position text."""
    # 1. Board
    rows: list[str] = []
    for cells in pos.board.rows():
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(ch for ch, right in _CASTLING_ORDER if pos.castling & right)
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = str(pos.en_passant) if pos.en_passant is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {_COUNTERS}"
