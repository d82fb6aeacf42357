"""
Game state management for the Go Fish game.

This module provides the core game state data and snapshot capabilities.
Turn rules live in the controller; this module only stores and queries state.
"""

import copy
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .cards import Card, Deck
from .enums import GamePhase
from .player import Player

TOTAL_CARDS = 52


@dataclass
class GameSnapshot:
    """
    Read-only snapshot of game state for external consumption.

    Players are deep copies, so the snapshot can be handed to the UI and
    the AI without exposing live state. Deck order is never included.
    """

    phase: GamePhase
    players: List[Player]
    current_player: Optional[int]
    deck_size: int
    turn_number: int
    events: List[str]

    def get_player_by_seat(self, seat_id: int) -> Optional[Player]:
        """Get player by seat number.

        Args:
            seat_id: The seat number to look up.

        Returns:
            The player at the specified seat, or None if not found.
        """
        for player in self.players:
            if player.seat_id == seat_id:
                return player
        return None

    def get_opponent(self, seat_id: int) -> Optional[Player]:
        """Get the player sitting opposite ``seat_id``."""
        for player in self.players:
            if player.seat_id != seat_id:
                return player
        return None

    def get_current_player(self) -> Optional[Player]:
        if self.current_player is None:
            return None
        return self.get_player_by_seat(self.current_player)

    def to_dict(self, viewer_seat: Optional[int] = None) -> Dict[str, Any]:
        """Convert snapshot to dictionary format.

        Args:
            viewer_seat: Seat number of the viewer, used to hide other players' cards.

        Returns:
            Dictionary representation of the game state.
        """
        players_data = []
        for player in self.players:
            hide_cards = viewer_seat is not None and player.seat_id != viewer_seat
            players_data.append({
                'seat_id': player.seat_id,
                'name': player.name,
                'is_human': player.is_human,
                'hand': player.get_hand_str(hidden=hide_cards),
                'card_count': player.card_count,
                'books': [book.rank.name for book in player.books],
            })

        return {
            'phase': self.phase.name,
            'current_player': self.current_player,
            'deck_size': self.deck_size,
            'turn_number': self.turn_number,
            'players': players_data,
        }


@dataclass
class GameState:
    """
    Mutable game state for Go Fish.

    Holds the deck, the players and turn bookkeeping. Every card of the
    52-card deck lives in exactly one place: the deck, a player's hand,
    or a player's books.
    """

    players: List[Player] = field(default_factory=list)
    deck: Optional[Deck] = None
    phase: GamePhase = GamePhase.NOT_STARTED
    current_player: Optional[int] = None
    turn_number: int = 0
    rng: random.Random = field(default_factory=random.Random)
    events: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate state after initialization."""
        if self.turn_number < 0:
            raise ValueError(f"Turn number cannot be negative: {self.turn_number}")

        seats = [p.seat_id for p in self.players]
        if len(seats) != len(set(seats)):
            raise ValueError(f"Duplicate seats: {seats}")

    def create_snapshot(self) -> GameSnapshot:
        """Create a snapshot of the current game state.

        Returns:
            A GameSnapshot containing deep copies of the players.
        """
        return GameSnapshot(
            phase=self.phase,
            players=[copy.deepcopy(player) for player in self.players],
            current_player=self.current_player,
            deck_size=self.deck.cards_remaining if self.deck is not None else 0,
            turn_number=self.turn_number,
            events=list(self.events),
        )

    def clone(self) -> 'GameState':
        """Create a deep copy of the game state, deck included."""
        return copy.deepcopy(self)

    def restore_from(self, other: 'GameState') -> None:
        """Restore every field from another state, typically a clone.

        Args:
            other: The state to copy from.
        """
        self.players = copy.deepcopy(other.players)
        self.phase = other.phase
        self.current_player = other.current_player
        self.turn_number = other.turn_number
        self.deck, self.rng = copy.deepcopy((other.deck, other.rng))
        self.events = list(other.events)

    def get_player_by_seat(self, seat_id: int) -> Optional[Player]:
        for player in self.players:
            if player.seat_id == seat_id:
                return player
        return None

    def get_opponent(self, seat_id: int) -> Optional[Player]:
        """Get the other player in a two-player game."""
        for player in self.players:
            if player.seat_id != seat_id:
                return player
        return None

    def get_current_player(self) -> Optional[Player]:
        if self.current_player is None:
            return None
        return self.get_player_by_seat(self.current_player)

    def add_player(self, player: Player) -> None:
        """Add a player to the game.

        Args:
            player: The player to add.

        Raises:
            ValueError: If seat is already occupied.
        """
        if self.get_player_by_seat(player.seat_id) is not None:
            raise ValueError(f"Seat {player.seat_id} is already occupied")

        self.players.append(player)
        self.add_event(f"Player {player.name} joined at seat {player.seat_id}")

    def initialize_deck(self, seed: Optional[int] = None) -> None:
        """Initialize and shuffle the deck.

        Args:
            seed: Optional seed for deterministic shuffling.
        """
        if seed is not None:
            self.rng.seed(seed)
        self.deck = Deck(self.rng)
        self.deck.shuffle()
        self.add_event("Deck initialized and shuffled")

    def deal_hands(self, hand_size: int) -> None:
        """Deal ``hand_size`` cards to every player, one at a time in seat order.

        Raises:
            ValueError: If deck is not initialized or insufficient cards.
        """
        if self.deck is None:
            raise ValueError("Deck not initialized")

        seats = len(self.players)
        dealt = self.deck.deal_cards(hand_size * seats)
        for index, player in enumerate(self.players):
            player.hand.add_cards(dealt[index::seats])

        self.add_event(f"Dealt {hand_size} cards to {len(self.players)} players")

    def cards_in_play(self) -> List[Card]:
        """Every card in the deck, in hands and in books."""
        cards: List[Card] = self.deck.cards if self.deck is not None else []
        for player in self.players:
            cards.extend(player.hand.cards)
            for book in player.books:
                cards.extend(book.cards)
        return cards

    def total_books(self) -> int:
        return sum(player.book_count for player in self.players)

    def is_exhausted(self) -> bool:
        """Whether the deck and every hand are empty."""
        deck_empty = self.deck is None or self.deck.is_empty
        return deck_empty and all(not player.has_cards() for player in self.players)

    def add_event(self, event: str) -> None:
        self.events.append(event)

    def to_dict(self, viewer_seat: Optional[int] = None) -> Dict[str, Any]:
        return self.create_snapshot().to_dict(viewer_seat)

    def __str__(self) -> str:
        players_str = ", ".join(
            f"{p.name}: {p.card_count} cards/{p.book_count} books" for p in self.players
        )
        deck_size = self.deck.cards_remaining if self.deck is not None else 0
        return (f"Phase: {self.phase.name}, "
                f"Deck: {deck_size}, "
                f"Turn: {self.turn_number}, "
                f"Players: [{players_str}]")
