"""
测试辅助函数
用指定的手牌和牌堆直接构造局面，避免依赖洗牌结果
"""

from typing import Iterable, List, Optional, Sequence

from gofish.controller import GameConfiguration, GoFishController
from gofish.core import (
    Book, Card, Deck, GamePhase, GameState, GameStateHealthChecker,
    Hand, Player, Rank, Suit
)

SUITS = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)


def cards(rank: Rank, *suits: Suit) -> List[Card]:
    """同一点数的若干张牌，不指定花色时返回全部四张"""
    return [Card(rank, suit) for suit in (suits or SUITS)]


def book(rank: Rank) -> Book:
    return Book(rank=rank, cards=tuple(cards(rank)))


def build_state(human_cards: Iterable[Card],
                computer_cards: Iterable[Card],
                deck_cards: Sequence[Card] = (),
                current_player: int = 0,
                human_books: Optional[List[Book]] = None,
                computer_books: Optional[List[Book]] = None) -> GameState:
    """构造进行中的两人局面

    Args:
        human_cards: 座位0(人类)的手牌
        computer_cards: 座位1(电脑)的手牌
        deck_cards: 牌堆，第一张最先被摸到
        current_player: 当前行动的座位
    """
    players = [
        Player(seat_id=0, name="玩家", is_human=True, hand=Hand(human_cards),
               books=list(human_books or [])),
        Player(seat_id=1, name="电脑", hand=Hand(computer_cards),
               books=list(computer_books or [])),
    ]
    return GameState(
        players=players,
        deck=Deck.from_cards(deck_cards),
        phase=GamePhase.IN_PROGRESS,
        current_player=current_player,
    )


def build_controller(state: GameState, check_conservation: bool = False, **config) -> GoFishController:
    """用构造的局面创建控制器

    局面通常不足52张牌，默认关闭牌数守恒检查，其余检查照常运行
    """
    checker = GameStateHealthChecker() if check_conservation else GameStateHealthChecker(expected_total_cards=None)
    return GoFishController(
        config=GameConfiguration(**config),
        game_state=state,
        health_checker=checker,
    )


def total_cards(controller: GoFishController) -> int:
    """牌堆 + 手牌 + book中的牌"""
    snapshot = controller.get_snapshot()
    in_hands = sum(p.card_count for p in snapshot.players)
    in_books = sum(p.book_count for p in snapshot.players) * 4
    return snapshot.deck_size + in_hands + in_books
