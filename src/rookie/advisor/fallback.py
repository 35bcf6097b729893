"""Turning advisor replies into legal moves, with random substitution."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from rookie.advisor.client import AdvisorClient, AdvisorError
from rookie.core.enums import PieceType
from rookie.core.move import Move, parse_move
from rookie.core.move_generator import MoveGenerator
from rookie.core.notation import position_to_fen
from rookie.core.rules import Rules

if TYPE_CHECKING:
    from rookie.core.position import Position

_LOGGER = logging.getLogger(__name__)


def resolve_advisor_move(
    position: Position,
    reply: str | None,
    rng: random.Random | None = None,
) -> Move | None:
    """Map an advisor *reply* onto a legal move of *position*.

    ``None``, malformed text and moves outside the current legal set are all
    replaced by :meth:`Rules.random_legal_move`. Returns ``None`` only when the
    side to move has no legal move at all.
    """
    if reply is not None:
        suggested = parse_move(reply)
        if suggested is None:
            _LOGGER.warning("Malformed advisor reply %r, using random move", reply)
        else:
            legal = MoveGenerator(position).legal_moves(suggested.from_sq)
            choice = suggested.promotion or PieceType.QUEEN
            for move in legal:
                if move == suggested and move.promotion in (None, choice):
                    return move
            _LOGGER.warning("Advisor move %s is not legal, using random move", reply)

    return Rules.random_legal_move(position, rng)


def suggest_move(
    client: AdvisorClient,
    position: Position,
    rng: random.Random | None = None,
) -> Move | None:
    """Ask *client* for a move; fall back to a random legal move on failure."""
    try:
        reply: str | None = client.best_move(position_to_fen(position))
    except AdvisorError as exc:
        _LOGGER.warning("Advisor unavailable (%s), using random move", exc)
        reply = None
    return resolve_advisor_move(position, reply, rng)
