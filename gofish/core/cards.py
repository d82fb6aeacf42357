"""
扑克牌相关的核心数据结构.

包含Card和Deck类，以及点数的解析和显示函数.
"""

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .enums import Suit, Rank, get_all_suits, get_all_ranks
from .exceptions import InvalidRankError


RANK_LABELS = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K", Rank.ACE: "A"
}

RANK_NAMES = {
    Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King", Rank.ACE: "Ace"
}

# 大小写无关的输入别名
_RANK_ALIASES = {
    "j": Rank.JACK, "jack": Rank.JACK,
    "q": Rank.QUEEN, "queen": Rank.QUEEN,
    "k": Rank.KING, "king": Rank.KING,
    "a": Rank.ACE, "ace": Rank.ACE,
}

SUIT_ORDER = {suit: index for index, suit in enumerate(Suit)}


def parse_rank(text: str) -> Rank:
    """
    从用户输入解析点数.

    Args:
        text: 点数字符串，如"7"、"10"、"J"、"Jack"

    Returns:
        Rank: 对应的点数

    Raises:
        InvalidRankError: 当输入无法识别或不在2-A范围内时
    """
    token = text.strip().lower()
    if not token:
        raise InvalidRankError("点数不能为空")

    if token in _RANK_ALIASES:
        return _RANK_ALIASES[token]

    if token.isascii() and token.isdigit():
        value = int(token)
        if Rank.TWO <= value <= Rank.TEN:
            return Rank(value)
        raise InvalidRankError(f"点数超出范围(2-10, J, Q, K, A): {text.strip()}")

    raise InvalidRankError(f"无法识别的点数: {text.strip()}")


def rank_label(rank: Rank) -> str:
    """返回点数的简短显示，如"10"、"Q"."""
    return RANK_LABELS[rank]


def rank_name(rank: Rank) -> str:
    """返回点数的完整名称，如"7"、"Queen"."""
    return RANK_NAMES.get(rank, RANK_LABELS[rank])


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    点数决定配对，花色只用于显示.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """
        返回扑克牌的字符串表示.

        Returns:
            str: 格式为"点数花色"的字符串，如"Q♠"
        """
        return f"{RANK_LABELS[self.rank]}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def sort_key(self) -> tuple:
        """手牌排序键：先按点数，再按花色."""
        return (self.rank.value, SUIT_ORDER[self.suit])


class Deck:
    """
    表示一副扑克牌.

    包含52张标准扑克牌，支持洗牌和摸牌. 列表最后一张为牌顶.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        初始化牌组.

        Args:
            rng: 随机数生成器，用于洗牌操作
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self._reset_deck()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Optional[random.Random] = None) -> 'Deck':
        """
        用指定的牌创建牌组.

        Args:
            cards: 按摸牌顺序排列的牌，第一张最先被摸到
            rng: 随机数生成器

        Returns:
            Deck: 新牌组
        """
        deck = cls(rng)
        deck._cards = list(reversed(list(cards)))
        return deck

    def _reset_deck(self) -> None:
        """重置牌组为完整的52张牌."""
        self._cards = [
            Card(rank, suit)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]

    def shuffle(self) -> None:
        """洗牌."""
        self._rng.shuffle(self._cards)

    def draw(self) -> Optional[Card]:
        """
        摸一张牌.

        Returns:
            Optional[Card]: 牌顶的牌，牌组为空时返回None
        """
        if not self._cards:
            return None
        return self._cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 发出的牌列表

        Raises:
            ValueError: 当数量为负或牌组中的牌不足时
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        if count > len(self._cards):
            raise ValueError(f"Cannot deal {count} cards, only {len(self._cards)} remaining")

        return [self._cards.pop() for _ in range(count)]

    @property
    def cards_remaining(self) -> int:
        """牌组中剩余的牌数."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """牌组是否为空."""
        return len(self._cards) == 0

    @property
    def cards(self) -> List[Card]:
        """剩余牌的副本，按牌底到牌顶排列."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)}, rng={self._rng})"
