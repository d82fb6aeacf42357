"""
Core game logic for Go Fish.

This package contains the fundamental game components including cards, hands,
players, game state management and request validation.
"""

import random
from typing import Optional

from .enums import Suit, Rank, TurnOutcome, GamePhase, ValidationResultData, get_all_suits, get_all_ranks
from .exceptions import (
    GoFishError,
    InvalidRankError,
    RankNotHeldError,
    GameStateError,
    CardConservationError,
    GameConfigError,
)
from .cards import Card, Deck, parse_rank, rank_label, rank_name
from .hand import Hand, Book, BOOK_SIZE
from .player import Player
from .state import GameState, GameSnapshot, TOTAL_CARDS
from .validator import RequestValidator
from .events import EventBus, EventType, GameEvent
from .health_checker import (
    GameStateHealthChecker,
    HealthIssue,
    HealthCheckResult,
    HealthIssueType,
    HealthIssueSeverity
)


def new_deck(shuffle: bool = True, rng: Optional[random.Random] = None) -> Deck:
    """Create a new deck of cards.

    Args:
        shuffle: Whether to shuffle the deck after creation.
        rng: Optional random source used for shuffling.

    Returns:
        A new deck of cards.
    """
    deck = Deck(rng)
    if shuffle:
        deck.shuffle()
    return deck


def create_player(seat_id: int, name: str, is_human: bool = False) -> Player:
    """Create a new player with an empty hand."""
    return Player(seat_id=seat_id, name=name, is_human=is_human)


__all__ = [
    # Enums
    'Suit', 'Rank', 'TurnOutcome', 'GamePhase', 'ValidationResultData',

    # Exceptions
    'GoFishError', 'InvalidRankError', 'RankNotHeldError', 'GameStateError',
    'CardConservationError', 'GameConfigError',

    # Core classes
    'Card', 'Deck', 'Hand', 'Book', 'Player', 'GameState', 'GameSnapshot',
    'BOOK_SIZE', 'TOTAL_CARDS',

    # Validation
    'RequestValidator',

    # Events
    'EventBus', 'EventType', 'GameEvent',

    # Health checking
    'GameStateHealthChecker', 'HealthIssue', 'HealthCheckResult', 'HealthIssueType', 'HealthIssueSeverity',

    # Convenience functions
    'new_deck', 'create_player', 'parse_rank', 'rank_label', 'rank_name',
    'get_all_suits', 'get_all_ranks'
]
