"""
SimpleAI电脑选点策略的单元测试
"""

import random

import pytest

from gofish.ai import AIStrategy, STRATEGIES, SimpleAI, SimpleAIConfig
from gofish.core import Card, GameConfigError, Rank, Suit
from tests.common.helpers import build_state, cards


@pytest.mark.unit
@pytest.mark.fast
class TestSimpleAI:
    """测试电脑选点"""

    def setup_method(self):
        computer_hand = (
            cards(Rank.KING, Suit.HEARTS)
            + cards(Rank.FOUR, Suit.HEARTS, Suit.CLUBS)
            + cards(Rank.NINE, Suit.HEARTS, Suit.CLUBS)
        )
        self.snapshot = build_state([Card(Rank.TWO, Suit.HEARTS)], computer_hand, current_player=1).create_snapshot()

    def test_implements_protocol(self):
        assert isinstance(SimpleAI(), AIStrategy)

    def test_first_strategy(self):
        ai = SimpleAI(SimpleAIConfig(strategy="first"))
        assert ai.choose_rank(self.snapshot, 1) == Rank.FOUR

    def test_most_held_prefers_lowest_on_tie(self):
        """张数相同时选点数小的"""
        ai = SimpleAI(SimpleAIConfig(strategy="most_held"))
        assert ai.choose_rank(self.snapshot, 1) == Rank.FOUR

    def test_random_only_picks_held_ranks(self):
        ai = SimpleAI(rng=random.Random(0))
        picks = {ai.choose_rank(self.snapshot, 1) for _ in range(50)}
        assert picks <= {Rank.FOUR, Rank.NINE, Rank.KING}
        assert ai.decision_count == 50

    def test_random_is_reproducible_with_seed(self):
        a = SimpleAI(rng=random.Random(11))
        b = SimpleAI(rng=random.Random(11))
        assert [a.choose_rank(self.snapshot, 1) for _ in range(10)] == \
               [b.choose_rank(self.snapshot, 1) for _ in range(10)]

    def test_empty_hand(self):
        snapshot = build_state([Card(Rank.TWO, Suit.HEARTS)], []).create_snapshot()
        with pytest.raises(ValueError):
            SimpleAI().choose_rank(snapshot, 1)

    def test_unknown_player(self):
        with pytest.raises(ValueError):
            SimpleAI().choose_rank(self.snapshot, 4)

    def test_unknown_strategy(self):
        with pytest.raises(GameConfigError):
            SimpleAIConfig(strategy="cheat")

    def test_strategy_names(self):
        for name in STRATEGIES:
            assert SimpleAIConfig(strategy=name).strategy == name
