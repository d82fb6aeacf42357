"""DTO单元测试.

测试pydantic数据传输对象的校验。
"""

import pytest
from pydantic import ValidationError

from gofish.controller import GameConfiguration, GameResult, PlayerStanding
from gofish.core import Rank


@pytest.mark.unit
@pytest.mark.fast
class TestGameConfiguration:
    """游戏配置测试."""

    def test_defaults(self):
        config = GameConfiguration()
        assert config.hand_size == 7
        assert config.seed is None
        assert config.require_held_rank
        assert config.max_turns is None
        assert config.ai_strategy == "random"
        assert config.human_seat == 0

    def test_name_is_stripped(self):
        assert GameConfiguration(player_name="  Alice ").player_name == "Alice"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            GameConfiguration(player_name="   ")

    @pytest.mark.parametrize("hand_size", [0, 27, -1])
    def test_hand_size_bounds(self, hand_size):
        with pytest.raises(ValidationError):
            GameConfiguration(hand_size=hand_size)

    def test_unknown_strategy(self):
        with pytest.raises(ValidationError):
            GameConfiguration(ai_strategy="psychic")

    def test_max_turns_positive(self):
        with pytest.raises(ValidationError):
            GameConfiguration(max_turns=0)
        assert GameConfiguration(max_turns=10).max_turns == 10

    def test_human_seat_bounds(self):
        with pytest.raises(ValidationError):
            GameConfiguration(human_seat=2)


@pytest.mark.unit
@pytest.mark.fast
class TestGameResult:
    """结果对象测试."""

    def test_standing(self):
        standing = PlayerStanding(seat_id=0, name="Alice", books=2, book_ranks=[Rank.TWO, Rank.ACE])
        result = GameResult(standings=[standing], winner_ids=[0], is_tie=False, total_turns=12)
        assert result.standings[0].book_ranks == [Rank.TWO, Rank.ACE]

    def test_books_bounds(self):
        with pytest.raises(ValidationError):
            PlayerStanding(seat_id=0, name="Alice", books=14)
