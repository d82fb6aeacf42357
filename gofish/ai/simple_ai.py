"""
Simple AI strategy implementation for the Go Fish game.

The computer only ever asks for ranks it holds. Which one it picks depends
on the configured strategy; none of them model the opponent.
"""

import random
from typing import Optional
from dataclasses import dataclass

from ..core import GameSnapshot, GameConfigError, Rank

STRATEGIES = ("random", "most_held", "first")


@dataclass
class SimpleAIConfig:
    """Configuration for Simple AI strategy.

    Attributes:
        name: Name of the AI strategy
        strategy: ``random`` picks any held rank, ``most_held`` the rank
            with most cards, ``first`` the lowest held rank
    """
    name: str = "SimpleAI"
    strategy: str = "random"

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise GameConfigError(f"Unknown AI strategy: {self.strategy}")


class SimpleAI:
    """Naive computer opponent.

    Args:
        config: Optional configuration parameters
        rng: Random source for the ``random`` strategy; seed it for
            deterministic games
    """

    def __init__(self, config: Optional[SimpleAIConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or SimpleAIConfig()
        self.rng = rng or random.Random()
        self.decision_count = 0

    def choose_rank(self, game_snapshot: GameSnapshot, player_id: int) -> Rank:
        """Pick the rank to request.

        Args:
            game_snapshot: Current game state snapshot
            player_id: ID of the player making the decision

        Returns:
            A rank held by the player

        Raises:
            ValueError: If player_id is invalid or the hand is empty
        """
        player = game_snapshot.get_player_by_seat(player_id)
        if player is None:
            raise ValueError(f"Player {player_id} not found in game state")

        counts = player.hand.rank_counts()
        if not counts:
            raise ValueError(f"Player {player_id} has no cards to ask for")

        self.decision_count += 1
        held = sorted(counts)

        if self.config.strategy == "first":
            return held[0]
        if self.config.strategy == "most_held":
            # ties go to the lowest rank
            return max(held, key=lambda rank: (counts[rank], -rank.value))
        return self.rng.choice(held)
