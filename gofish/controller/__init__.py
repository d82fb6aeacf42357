"""
Controller layer for the Go Fish game.

This package provides the application controller that bridges
the core game logic with the user interface layer.
"""

from .game_controller import GoFishController, TurnResult
from .dto import GameConfiguration, GameResult, PlayerStanding
from .decorators import atomic, logged_action

__all__ = [
    'GoFishController', 'TurnResult',
    'GameConfiguration', 'GameResult', 'PlayerStanding',
    'atomic', 'logged_action'
]
