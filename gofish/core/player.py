"""
钓鱼游戏玩家状态管理.

包含玩家的基本信息、手牌和已完成的book.
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from .cards import Card
from .enums import Rank
from .hand import Book, Hand


@dataclass
class Player:
    """
    钓鱼游戏玩家类.

    管理玩家的基本信息、手牌和得分(book).
    """

    seat_id: int
    name: str
    is_human: bool = False
    hand: Hand = field(default_factory=Hand)
    books: List[Book] = field(default_factory=list)

    def __post_init__(self) -> None:
        """
        验证玩家数据的有效性.

        Raises:
            ValueError: 当玩家数据无效时
        """
        if self.seat_id < 0:
            raise ValueError(f"座位号不能为负数: {self.seat_id}")

        if not self.name or not self.name.strip():
            raise ValueError("玩家名称不能为空")

    def __hash__(self) -> int:
        return hash(self.seat_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return False
        return self.seat_id == other.seat_id

    def receive_cards(self, cards: Iterable[Card]) -> None:
        """
        把牌加入手牌.

        Args:
            cards: 收到的牌
        """
        self.hand.add_cards(cards)

    def collect_books(self) -> List[Book]:
        """
        从手牌中提取凑齐的book并计入得分.

        Returns:
            List[Book]: 本次新凑齐的book
        """
        new_books = self.hand.extract_books()
        self.books.extend(new_books)
        return new_books

    @property
    def book_count(self) -> int:
        return len(self.books)

    @property
    def book_ranks(self) -> List[Rank]:
        return [book.rank for book in self.books]

    @property
    def card_count(self) -> int:
        return len(self.hand)

    def has_cards(self) -> bool:
        return not self.hand.is_empty

    def get_hand_str(self, hidden: bool = False) -> str:
        """
        获取手牌的字符串表示.

        Args:
            hidden: 是否隐藏牌面

        Returns:
            str: 手牌的字符串表示，如"2♥ 2♠ K♦"
        """
        if hidden:
            return " ".join("XX" for _ in range(len(self.hand)))

        return str(self.hand)

    def __str__(self) -> str:
        return f"{self.name}: 手牌{len(self.hand)}张, book {self.book_count}个"

    def __repr__(self) -> str:
        return f"Player(seat={self.seat_id}, name='{self.name}', cards={len(self.hand)}, books={self.book_count})"
