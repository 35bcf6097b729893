"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from rookie.core.enums import Color
from rookie.core.notation import position_to_fen
from rookie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from rookie.core.position import Position


class _NamedPlayer(IPlayer):
    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str) -> None:
        self._color = color
        self._name = name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._color}, {self._name!r})"


class HumanPlayer(_NamedPlayer):
    """Moves arrive through ``GameController.submit_move``; nothing to request."""

    __slots__ = ()

    def __init__(self, color: Color, name: str = "") -> None:
        super().__init__(color, name or f"Player ({color})")

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, position: Position) -> None:
        pass

    def cancel(self) -> None:
        pass


class AIPlayer(_NamedPlayer):
    """The advisor-backed side.

    When prompted it serialises the position and passes the text to
    *on_request_move*, typically a slot that forwards it to an
    :class:`~rookie.advisor.qt_bridge.AdvisorWorker`. The reply comes back
    through ``GameController.submit_advisor_reply``.

    Args:
        color: Side the advisor plays.
        name: Display name.
        on_request_move: Receives the position text to analyse.
        on_cancel: Drops a pending advisor request.
    """

    __slots__ = ("_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: Color,
        name: str = "Advisor",
        on_request_move: Callable[[str], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(color, name)
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, position: Position) -> None:
        if self._on_request_move is not None:
            self._on_request_move(position_to_fen(position))

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
