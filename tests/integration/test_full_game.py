"""
完整对局集成测试

两个座位都由SimpleAI选点，通过控制器从发牌打到结束
"""

import random

import pytest

from gofish.ai import SimpleAI, SimpleAIConfig
from gofish.controller import GameConfiguration, GoFishController
from gofish.core import EventType, GamePhase, TurnOutcome
from tests.common.helpers import total_cards

MAX_REQUESTS = 500


def play_out(controller: GoFishController, strategy: str = "random", seed: int = 0):
    """用SimpleAI替人类选点，打完整局，返回每次要牌的结果"""
    chooser = SimpleAI(SimpleAIConfig(strategy=strategy), rng=random.Random(seed))
    results = []
    while not controller.is_game_over():
        assert len(results) < MAX_REQUESTS, "game did not terminate"
        player_id = controller.get_current_player_id()
        if player_id == controller.human_seat:
            rank = chooser.choose_rank(controller.get_snapshot(), player_id)
            results.append(controller.request_cards(player_id, rank))
        else:
            results.append(controller.process_ai_turn())
    return results


@pytest.mark.integration
class TestFullGame:
    """完整对局测试"""

    @pytest.mark.parametrize("strategy", ["random", "most_held", "first"])
    def test_game_runs_to_completion(self, strategy):
        controller = GoFishController(config=GameConfiguration(seed=8, ai_strategy=strategy))
        controller.start_game()

        results = play_out(controller, strategy=strategy, seed=8)
        snapshot = controller.get_snapshot()

        assert snapshot.phase == GamePhase.FINISHED
        assert snapshot.deck_size == 0
        assert all(p.card_count == 0 for p in snapshot.players)
        assert sum(p.book_count for p in snapshot.players) == 13
        assert total_cards(controller) == 52
        assert results[-1].game_over

    def test_same_seed_same_game(self):
        outcomes = []
        for _ in range(2):
            controller = GoFishController(config=GameConfiguration(seed=99))
            controller.start_game()
            outcomes.append([(r.requester_id, r.rank, r.outcome) for r in play_out(controller, seed=99)])
        assert outcomes[0] == outcomes[1]

    def test_held_rank_rule_never_hits_empty_deck_miss(self):
        """只能要手中有的点数时，牌堆空后每次要牌都能要到"""
        controller = GoFishController(config=GameConfiguration(seed=5))
        controller.start_game()

        results = play_out(controller, seed=5)

        assert all(r.outcome != TurnOutcome.DECK_EMPTY for r in results)

    def test_event_stream(self):
        controller = GoFishController(config=GameConfiguration(seed=12))
        controller.start_game()
        play_out(controller, seed=12)

        bus = controller.event_bus
        assert len(bus.get_event_history(EventType.GAME_ENDED)) == 1
        assert len(bus.get_event_history(EventType.BOOK_COMPLETED)) == 13
        ended = bus.get_event_history(EventType.GAME_ENDED)[0]
        assert ended.data["winner_ids"] == controller.get_result().winner_ids
        assert not ended.data["turn_limit_hit"]

    def test_turn_limit(self):
        controller = GoFishController(config=GameConfiguration(seed=12, max_turns=5))
        controller.start_game()

        results = play_out(controller, seed=12)

        assert len(results) == 5
        assert controller.get_result().total_turns == 5
        assert total_cards(controller) == 52
