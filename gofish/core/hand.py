"""
手牌和牌组(book)管理.

Hand是一个玩家持有的牌的多重集合，支持摸牌、按点数交出和凑齐四张时提取book.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .cards import Card
from .enums import Rank

BOOK_SIZE = 4


@dataclass(frozen=True)
class Book:
    """
    四张同点数的牌，从手牌中移出并计一分.

    Attributes:
        rank: 点数
        cards: 组成book的四张牌
    """

    rank: Rank
    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        if len(self.cards) != BOOK_SIZE:
            raise ValueError(f"book必须正好{BOOK_SIZE}张牌: {len(self.cards)}")
        if any(card.rank != self.rank for card in self.cards):
            raise ValueError(f"book中的牌点数必须都是{self.rank.name}")

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)


class Hand:
    """
    玩家手牌.

    牌的顺序按加入顺序保存，显示时使用sorted_cards()排序.
    """

    def __init__(self, cards: Iterable[Card] = ()):
        self._cards: List[Card] = list(cards)

    def add(self, card: Card) -> None:
        """加入一张牌."""
        self._cards.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        """加入多张牌."""
        self._cards.extend(cards)

    def remove_rank(self, rank: Rank) -> List[Card]:
        """
        交出所有指定点数的牌.

        Args:
            rank: 被要的点数

        Returns:
            List[Card]: 交出的牌，没有时为空列表
        """
        taken = [card for card in self._cards if card.rank == rank]
        if taken:
            self._cards = [card for card in self._cards if card.rank != rank]
        return taken

    def count_rank(self, rank: Rank) -> int:
        return sum(1 for card in self._cards if card.rank == rank)

    def has_rank(self, rank: Rank) -> bool:
        return any(card.rank == rank for card in self._cards)

    def rank_counts(self) -> Counter:
        """各点数的张数."""
        return Counter(card.rank for card in self._cards)

    def ranks(self) -> List[Rank]:
        """手中持有的点数，升序排列，不重复."""
        return sorted(set(card.rank for card in self._cards))

    def extract_books(self) -> List[Book]:
        """
        提取所有凑齐四张的点数.

        一次可能同时凑齐多个点数，全部移出手牌.

        Returns:
            List[Book]: 新凑齐的book，按点数升序
        """
        complete = sorted(rank for rank, count in self.rank_counts().items() if count >= BOOK_SIZE)
        books = []
        for rank in complete:
            cards = sorted(self.remove_rank(rank), key=Card.sort_key)
            books.append(Book(rank=rank, cards=tuple(cards)))
        return books

    def sorted_cards(self) -> List[Card]:
        """按点数、花色排序的手牌副本."""
        return sorted(self._cards, key=Card.sort_key)

    @property
    def cards(self) -> List[Card]:
        return list(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.sorted_cards())

    def __repr__(self) -> str:
        return f"Hand({len(self._cards)} cards)"
