"""Abstract seams of the game layer.

``GameController`` only talks to players through :class:`IPlayer`, so a
front end can plug in its own human or advisor-backed participants.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from rookie.core.enums import Color

if TYPE_CHECKING:
    from rookie.core.move import Move
    from rookie.core.position import Position


class GamePhase(IntEnum):
    """Where a game currently stands."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()  # a human is to move
    THINKING = auto()  # an advisor request is pending
    GAME_OVER = auto()


class IPlayer(ABC):
    """A participant seated at one color."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, position: Position) -> None:
        """Called by the controller when it is this player's turn.

        *position* must not be mutated; advisor players serialise it.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Abandon any pending move request."""


class IGameController(ABC):
    """Drives one game between two :class:`IPlayer` instances."""

    @abstractmethod
    def new_game(self, white: IPlayer, black: IPlayer, fen: str | None = None) -> None:
        """Start from *fen*, or from the initial layout."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Apply *move* if legal; ``False`` leaves the game untouched."""

    @abstractmethod
    def submit_advisor_reply(self, reply: str | None) -> Move | None:
        """Play an advisor reply, substituting a random legal move if unusable."""

    @abstractmethod
    def resign(self, color: Color) -> None:
        """End the game in favour of *color*'s opponent."""
