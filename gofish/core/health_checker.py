"""
Game state health checker for Go Fish.

This module validates a game state against the card conservation rules:
every card of the deck is in exactly one place, no card is duplicated
and no rank has more than four instances.
"""

from collections import Counter
from typing import List, Dict, Any, Optional
from dataclasses import dataclass
from enum import Enum

from .enums import GamePhase
from .hand import BOOK_SIZE
from .state import GameState, TOTAL_CARDS


class HealthIssueType(Enum):
    """Types of health issues that can be detected."""
    CARD_CONSERVATION_VIOLATION = "card_conservation_violation"
    DUPLICATE_CARDS = "duplicate_cards"
    RANK_OVERFLOW = "rank_overflow"
    INVALID_BOOK = "invalid_book"
    UNCLAIMED_BOOK = "unclaimed_book"
    INVALID_PLAYER_COUNT = "invalid_player_count"
    INVALID_CURRENT_PLAYER = "invalid_current_player"


class HealthIssueSeverity(Enum):
    """Severity levels for health issues."""
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


@dataclass
class HealthIssue:
    """Represents a health issue found during validation.

    Attributes:
        issue_type: The type of issue detected.
        severity: The severity level of the issue.
        message: Human-readable description of the issue.
        details: Additional details about the issue.
    """
    issue_type: HealthIssueType
    severity: HealthIssueSeverity
    message: str
    details: Dict[str, Any]


@dataclass
class HealthCheckResult:
    """Result of a health check operation.

    Attributes:
        is_healthy: Whether the game state is considered healthy.
        issues: List of issues found during the check.
        summary: Summary of the health check results.
    """
    is_healthy: bool
    issues: List[HealthIssue]
    summary: Dict[str, Any]

    @property
    def critical_issues(self) -> List[HealthIssue]:
        return [i for i in self.issues if i.severity == HealthIssueSeverity.CRITICAL]


class GameStateHealthChecker:
    """Health checker for Go Fish game states.

    Args:
        expected_total_cards: Number of cards that must be accounted for.
            None disables the conservation check.
    """

    def __init__(self, expected_total_cards: Optional[int] = TOTAL_CARDS):
        self.expected_total_cards = expected_total_cards

    def check_health(self, game_state: GameState) -> HealthCheckResult:
        """Perform a full health check on a game state.

        Args:
            game_state: The game state to check.

        Returns:
            Health check result with any issues found.
        """
        issues = []

        issues.extend(self._check_card_conservation(game_state))
        issues.extend(self._check_duplicate_cards(game_state))
        issues.extend(self._check_rank_counts(game_state))
        issues.extend(self._check_books(game_state))
        issues.extend(self._check_player_count(game_state))
        issues.extend(self._check_current_player(game_state))

        critical_issues = [i for i in issues if i.severity == HealthIssueSeverity.CRITICAL]

        summary = {
            "total_issues": len(issues),
            "critical_issues": len(critical_issues),
            "warning_issues": len([i for i in issues if i.severity == HealthIssueSeverity.WARNING]),
            "checked_at_phase": game_state.phase.value,
            "turn_number": game_state.turn_number,
            "total_cards": len(game_state.cards_in_play()),
            "total_books": game_state.total_books(),
        }

        return HealthCheckResult(
            is_healthy=len(critical_issues) == 0,
            issues=issues,
            summary=summary
        )

    def _check_card_conservation(self, game_state: GameState) -> List[HealthIssue]:
        """deck + hands + books * 4 must equal the expected total."""
        if self.expected_total_cards is None:
            return []

        deck_cards = game_state.deck.cards_remaining if game_state.deck is not None else 0
        hand_cards = sum(p.card_count for p in game_state.players)
        book_cards = sum(p.book_count for p in game_state.players) * BOOK_SIZE
        actual_total = deck_cards + hand_cards + book_cards

        if actual_total == self.expected_total_cards:
            return []

        return [HealthIssue(
            issue_type=HealthIssueType.CARD_CONSERVATION_VIOLATION,
            severity=HealthIssueSeverity.CRITICAL,
            message=f"Card conservation violated: expected {self.expected_total_cards}, got {actual_total}",
            details={
                "expected_total": self.expected_total_cards,
                "actual_total": actual_total,
                "difference": actual_total - self.expected_total_cards,
                "deck_cards": deck_cards,
                "hand_cards": hand_cards,
                "book_cards": book_cards,
            }
        )]

    def _check_duplicate_cards(self, game_state: GameState) -> List[HealthIssue]:
        counts = Counter(game_state.cards_in_play())
        duplicates = sorted(str(card) for card, count in counts.items() if count > 1)

        if not duplicates:
            return []

        return [HealthIssue(
            issue_type=HealthIssueType.DUPLICATE_CARDS,
            severity=HealthIssueSeverity.CRITICAL,
            message=f"Duplicate cards detected: {', '.join(duplicates)}",
            details={"duplicate_cards": duplicates}
        )]

    def _check_rank_counts(self, game_state: GameState) -> List[HealthIssue]:
        counts = Counter(card.rank for card in game_state.cards_in_play())
        overflow = {rank.name: count for rank, count in counts.items() if count > BOOK_SIZE}

        if not overflow:
            return []

        return [HealthIssue(
            issue_type=HealthIssueType.RANK_OVERFLOW,
            severity=HealthIssueSeverity.CRITICAL,
            message=f"Ranks with more than {BOOK_SIZE} cards: {overflow}",
            details={"overflow": overflow}
        )]

    def _check_books(self, game_state: GameState) -> List[HealthIssue]:
        """Books must be distinct ranks, and no hand may still hold a complete book."""
        issues = []

        book_ranks = [book.rank for p in game_state.players for book in p.books]
        repeated = sorted(rank.name for rank, count in Counter(book_ranks).items() if count > 1)
        if repeated:
            issues.append(HealthIssue(
                issue_type=HealthIssueType.INVALID_BOOK,
                severity=HealthIssueSeverity.CRITICAL,
                message=f"Rank booked more than once: {', '.join(repeated)}",
                details={"ranks": repeated}
            ))

        for player in game_state.players:
            full = sorted(rank.name for rank, count in player.hand.rank_counts().items()
                          if count >= BOOK_SIZE)
            if full:
                issues.append(HealthIssue(
                    issue_type=HealthIssueType.UNCLAIMED_BOOK,
                    severity=HealthIssueSeverity.WARNING,
                    message=f"Player {player.name} holds uncollected books: {', '.join(full)}",
                    details={"player_name": player.name, "ranks": full}
                ))

        return issues

    def _check_player_count(self, game_state: GameState) -> List[HealthIssue]:
        player_count = len(game_state.players)
        if game_state.phase == GamePhase.NOT_STARTED or player_count == 2:
            return []

        return [HealthIssue(
            issue_type=HealthIssueType.INVALID_PLAYER_COUNT,
            severity=HealthIssueSeverity.CRITICAL,
            message=f"Go Fish needs exactly 2 players, got {player_count}",
            details={"player_count": player_count}
        )]

    def _check_current_player(self, game_state: GameState) -> List[HealthIssue]:
        if game_state.phase != GamePhase.IN_PROGRESS:
            return []

        if game_state.get_current_player() is not None:
            return []

        return [HealthIssue(
            issue_type=HealthIssueType.INVALID_CURRENT_PLAYER,
            severity=HealthIssueSeverity.CRITICAL,
            message=f"Invalid current player: {game_state.current_player}",
            details={"current_player": game_state.current_player}
        )]

    def get_health_summary(self, game_state: GameState) -> str:
        """Get a human-readable health summary."""
        result = self.check_health(game_state)

        if result.is_healthy:
            return "Game state is healthy"

        lines = ["Game state has issues:"]
        for issue in result.issues:
            lines.append(f"  [{issue.severity.value}] {issue.message}")
        return "\n".join(lines)
