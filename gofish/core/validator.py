"""
Request validator for the Go Fish game.

Checks that a rank request is legal before the controller applies it.
"""

from .enums import GamePhase, Rank, ValidationResultData
from .exceptions import GameStateError, RankNotHeldError
from .state import GameState


class RequestValidator:
    """Validator for rank requests.

    Args:
        require_held_rank: Reject requests for a rank the requester does
            not hold. Standard rules require it; the naive variant allows
            asking for anything.
    """

    def __init__(self, require_held_rank: bool = True):
        self.require_held_rank = require_held_rank

    def validate(self, game_state: GameState, player_id: int, rank: Rank) -> None:
        """Validate a rank request.

        Args:
            game_state: The current game state.
            player_id: Seat of the player making the request.
            rank: The requested rank.

        Raises:
            GameStateError: When the game is not running, the seat is
                unknown or it is not the player's turn.
            RankNotHeldError: When held ranks are required and the
                requester holds none of ``rank``.
        """
        if game_state.phase != GamePhase.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress: {game_state.phase.value}")

        player = game_state.get_player_by_seat(player_id)
        if player is None:
            raise GameStateError(f"Unknown player seat: {player_id}")

        if game_state.get_opponent(player_id) is None:
            raise GameStateError("No opponent to ask")

        if game_state.current_player != player_id:
            raise GameStateError(
                f"Not player {player_id}'s turn, current player: {game_state.current_player}"
            )

        if not isinstance(rank, Rank):
            raise TypeError(f"rank must be a Rank, got {type(rank).__name__}")

        if self.require_held_rank and not player.hand.has_rank(rank):
            raise RankNotHeldError(f"{player.name} does not hold any {rank.name}")

    def check(self, game_state: GameState, player_id: int, rank: Rank) -> ValidationResultData:
        """Non-raising variant of :meth:`validate`."""
        try:
            self.validate(game_state, player_id, rank)
        except (GameStateError, RankNotHeldError) as e:
            return ValidationResultData(is_valid=False, error_message=str(e))
        return ValidationResultData(is_valid=True)
