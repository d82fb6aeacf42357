"""
GameState和GameSnapshot的单元测试
"""

import random

import pytest

from gofish.core import Card, GamePhase, GameState, Player, Rank, Suit
from tests.common.helpers import book, build_state, cards


@pytest.mark.unit
@pytest.mark.fast
class TestGameState:
    """测试游戏状态"""

    def test_add_player_duplicate_seat(self):
        state = GameState()
        state.add_player(Player(seat_id=0, name="A"))
        with pytest.raises(ValueError):
            state.add_player(Player(seat_id=0, name="B"))

    def test_duplicate_seats_rejected(self):
        with pytest.raises(ValueError):
            GameState(players=[Player(seat_id=0, name="A"), Player(seat_id=0, name="B")])

    def test_negative_turn_number(self):
        with pytest.raises(ValueError):
            GameState(turn_number=-1)

    def test_initialize_and_deal(self):
        state = GameState(rng=random.Random(1))
        state.add_player(Player(seat_id=0, name="A"))
        state.add_player(Player(seat_id=1, name="B"))
        state.initialize_deck(seed=5)
        state.deal_hands(7)

        assert state.deck.cards_remaining == 38
        assert all(p.card_count == 7 for p in state.players)
        assert len(set(state.cards_in_play())) == 52

    def test_deal_without_deck(self):
        state = GameState(players=[Player(seat_id=0, name="A")])
        with pytest.raises(ValueError):
            state.deal_hands(7)

    def test_deal_too_many(self):
        state = GameState(players=[Player(seat_id=0, name="A"), Player(seat_id=1, name="B")])
        state.initialize_deck(seed=1)
        with pytest.raises(ValueError):
            state.deal_hands(27)

    def test_seeded_deal_is_reproducible(self):
        hands = []
        for _ in range(2):
            state = GameState(players=[Player(seat_id=0, name="A"), Player(seat_id=1, name="B")])
            state.initialize_deck(seed=99)
            state.deal_hands(7)
            hands.append([p.hand.cards for p in state.players])
        assert hands[0] == hands[1]

    def test_deal_alternates_between_players(self):
        """发牌轮流进行，第一张给座位0"""
        deck_cards = cards(Rank.TWO) + cards(Rank.THREE)
        state = build_state([], [], deck_cards=deck_cards)
        state.deal_hands(3)

        assert state.players[0].hand.cards == [deck_cards[0], deck_cards[2], deck_cards[4]]
        assert state.players[1].hand.cards == [deck_cards[1], deck_cards[3], deck_cards[5]]
        assert state.deck.cards_remaining == 2

    def test_restore_keeps_deck_sharing_state_rng(self):
        """回滚后牌堆和状态仍使用同一个随机数生成器"""
        state = GameState(players=[Player(seat_id=0, name="A"), Player(seat_id=1, name="B")])
        state.initialize_deck(seed=8)
        saved = state.clone()
        assert saved.deck._rng is saved.rng

        state.deck.shuffle()
        state.restore_from(saved)

        assert state.deck._rng is state.rng
        assert state.deck.cards == saved.deck.cards

    def test_opponent_lookup(self):
        state = build_state([Card(Rank.TWO, Suit.HEARTS)], [Card(Rank.THREE, Suit.HEARTS)])
        assert state.get_opponent(0).seat_id == 1
        assert state.get_opponent(1).seat_id == 0
        assert state.get_current_player().seat_id == 0
        assert state.get_player_by_seat(5) is None

    def test_is_exhausted(self):
        state = build_state([], [])
        assert state.is_exhausted()

        state = build_state([], [], deck_cards=[Card(Rank.TWO, Suit.HEARTS)])
        assert not state.is_exhausted()

        state = build_state([], [Card(Rank.TWO, Suit.HEARTS)])
        assert not state.is_exhausted()

    def test_total_books(self):
        state = build_state([], [], human_books=[book(Rank.ACE)], computer_books=[book(Rank.TWO), book(Rank.SIX)])
        assert state.total_books() == 3
        assert len(state.cards_in_play()) == 12

    def test_clone_and_restore(self):
        """restore_from恢复所有字段"""
        state = build_state(cards(Rank.FIVE, Suit.HEARTS), cards(Rank.SIX, Suit.HEARTS),
                            deck_cards=[Card(Rank.NINE, Suit.CLUBS)])
        saved = state.clone()

        state.players[0].hand.add(state.deck.draw())
        state.turn_number = 3
        state.current_player = 1
        state.add_event("changed")

        state.restore_from(saved)

        assert state.players[0].card_count == 1
        assert state.deck.cards_remaining == 1
        assert state.turn_number == 0
        assert state.current_player == 0
        assert "changed" not in state.events


@pytest.mark.unit
@pytest.mark.fast
class TestGameSnapshot:
    """测试状态快照"""

    def test_snapshot_is_detached(self):
        """修改快照不影响实际状态"""
        state = build_state(cards(Rank.FIVE, Suit.HEARTS), cards(Rank.SIX, Suit.HEARTS),
                            deck_cards=[Card(Rank.NINE, Suit.CLUBS)])
        snapshot = state.create_snapshot()
        snapshot.players[0].hand.add(Card(Rank.ACE, Suit.SPADES))

        assert state.players[0].card_count == 1
        assert snapshot.deck_size == 1
        assert snapshot.phase == GamePhase.IN_PROGRESS

    def test_to_dict_hides_opponent(self):
        state = build_state(cards(Rank.FIVE, Suit.HEARTS), cards(Rank.SIX, Suit.HEARTS, Suit.CLUBS))
        data = state.to_dict(viewer_seat=0)

        assert data["players"][0]["hand"] == "5♥"
        assert data["players"][1]["hand"] == "XX XX"
        assert data["players"][1]["card_count"] == 2
        assert data["phase"] == "IN_PROGRESS"
