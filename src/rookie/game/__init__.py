"""Game management layer: controller, players, state machine.

Quick start::

    from rookie.core import Color
    from rookie.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
"""

from rookie.game.controller import GameController, GameEvents
from rookie.game.interfaces import GamePhase, IGameController, IPlayer
from rookie.game.player import AIPlayer, HumanPlayer
from rookie.game.state import GameState, GameStatus, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "GameStatus",
    "HumanPlayer",
    "MoveRecord",
]
