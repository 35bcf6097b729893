"""Turn-taking driver for a game between humans and the move advisor.

The controller owns a :class:`GameState`, prompts whichever player is to
move, and notifies subscribers through plain callback lists.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from rookie.advisor.fallback import resolve_advisor_move
from rookie.core.enums import Color, GameResult
from rookie.core.errors import IllegalMoveError
from rookie.core.move import Move
from rookie.game.interfaces import GamePhase, IGameController, IPlayer
from rookie.game.state import GameState

_LOGGER = logging.getLogger(__name__)

MoveCallback = Callable[[Move, str, GameState], None]  # move, log entry, state
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Subscriber lists; handlers run in registration order."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


class GameController(IGameController):
    """Validates submitted moves, alternates players and reports outcomes.

    All methods run on the owner thread. An advisor reply produced on a
    worker thread has to be marshalled back (a queued Qt signal does this)
    before :meth:`submit_advisor_reply` is called.

    Args:
        rng: Source for the random fallback move; module ``random`` if omitted.
    """

    __slots__ = ("_state", "_players", "_rng", "events")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._rng = rng
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, white: IPlayer, black: IPlayer, fen: str | None = None) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(fen)
        if self._state.is_game_over:
            self._finish()
        else:
            self._hand_turn_over()

    def submit_move(self, move: Move) -> bool:
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False
        try:
            record = self._state.apply_move(move)
        except IllegalMoveError as exc:
            _LOGGER.debug("Rejected %s", exc)
            return False

        for on_move in self.events.on_move:
            on_move(record.move, record.notation, self._state)

        if self._state.is_game_over:
            self._finish()
        else:
            self._hand_turn_over()
        return True

    def submit_advisor_reply(self, reply: str | None) -> Move | None:
        """Play *reply* for the side to move.

        A missing, malformed or illegal reply is replaced by a random legal
        move. Returns the move played, or ``None`` when no advisor-backed
        player is waiting for a reply.
        """
        to_move = self.current_player
        if (
            self._state.phase != GamePhase.THINKING
            or to_move is None
            or to_move.is_human
        ):
            _LOGGER.debug("Ignored advisor reply %r: no advisor to move", reply)
            return None
        move = resolve_advisor_move(self._state.position, reply, self._rng)
        if move is None or not self.submit_move(move):
            return None
        return move

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        waiting_on = self.current_player
        if waiting_on is not None and not waiting_on.is_human:
            waiting_on.cancel()
        self._state.resign(color)
        self._finish()

    # ── Internal ─────────────────────────────────────────────────────────

    def _hand_turn_over(self) -> None:
        to_move = self.current_player
        if to_move is None:
            return
        phase = GamePhase.AWAITING_MOVE if to_move.is_human else GamePhase.THINKING
        self._set_phase(phase)
        if not to_move.is_human:
            to_move.request_move(self._state.position)

    def _finish(self) -> None:
        self._set_phase(GamePhase.GAME_OVER)
        for on_game_over in self.events.on_game_over:
            on_game_over(self._state.result)

    def _set_phase(self, phase: GamePhase) -> None:
        self._state.phase = phase
        for on_phase_changed in self.events.on_phase_changed:
            on_phase_changed(phase)
