"""
Base AI strategy interface for the Go Fish game.

This module defines the protocol that all AI strategies must implement.
"""

from typing import Protocol, runtime_checkable
from ..core import GameSnapshot, Rank


@runtime_checkable
class AIStrategy(Protocol):
    """AI strategy interface protocol.

    Defines the standard interface for computer rank selection.
    """

    def choose_rank(self, game_snapshot: GameSnapshot, player_id: int) -> Rank:
        """Pick the rank to ask the opponent for.

        Args:
            game_snapshot: Snapshot of the current game state
            player_id: ID of the player that needs to make a decision

        Returns:
            The rank to request

        Raises:
            ValueError: If player_id is invalid or the player holds no cards
        """
        ...
