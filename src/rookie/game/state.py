"""Game state machine: tracks phase transitions and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rookie.core.enums import Color, GameResult, PieceType
from rookie.core.move import Move
from rookie.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from rookie.core.position import Position
from rookie.core.rules import Rules
from rookie.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    notation: str
    fen_after: str
    was_check: bool = False
    was_capture: bool = False


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Check / termination flags for the side to move."""

    in_check: bool
    checkmate: bool
    stalemate: bool

    @property
    def is_terminal(self) -> bool:
        return self.checkmate or self.stalemate


@dataclass
class GameState:
    """Manages game lifecycle: phase, result and move history.

    Pure data and logic; no threading or presentation.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_fen = fen or STARTING_FEN
        self.position = position_from_fen(self.start_fen)
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Validate and apply *move*, returning the history record.

        Raises :class:`~rookie.core.errors.IllegalMoveError` (state untouched)
        if the move is not legal.
        """
        position = self.position
        mover = position.board[move.from_sq]
        was_capture = position.board[move.to_sq] is not None or (
            mover is not None
            and mover.piece_type == PieceType.PAWN
            and move.to_sq == position.en_passant
        )

        applied = position.make_move(move)

        record = MoveRecord(
            move=applied,
            notation=applied.notation,
            fen_after=position_to_fen(position),
            was_check=Rules.is_in_check(position),
            was_capture=was_capture,
        )
        self.move_history.append(record)

        self._check_game_over()
        return record

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self.result = (
            GameResult.BLACK_WINS if color == Color.WHITE else GameResult.WHITE_WINS
        )
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def move_log(self) -> list[str]:
        return self.position.move_log

    def status(self) -> GameStatus:
        in_check = Rules.is_in_check(self.position)
        no_moves = not Rules.has_legal_move(self.position)
        return GameStatus(
            in_check=in_check,
            checkmate=in_check and no_moves,
            stalemate=not in_check and no_moves,
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.position)
        if result != GameResult.IN_PROGRESS:
            _LOGGER.info("Game over after %d plies: %s", self.ply_count, result.name)
            self.result = result
            self.phase = GamePhase.GAME_OVER
