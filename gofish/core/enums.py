"""
游戏相关枚举定义模块.

包含钓鱼游戏(Go Fish)中使用的枚举类型，如花色、点数、回合结果和游戏阶段.
"""

from enum import Enum, IntEnum
from typing import List
from dataclasses import dataclass
from typing import Optional


class Suit(Enum):
    """
    扑克牌花色枚举.

    定义四种标准扑克牌花色，使用Unicode符号表示.
    花色只用于显示，不参与配对.
    """

    HEARTS = "♥"      # 红桃
    DIAMONDS = "♦"    # 方块
    CLUBS = "♣"       # 梅花
    SPADES = "♠"      # 黑桃


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    定义13种扑克牌点数. 钓鱼游戏只按点数配对，
    数值仅用于排序和显示.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class TurnOutcome(Enum):
    """
    要牌回合结果枚举.

    描述一次要牌请求的结果.
    """

    CARDS_TAKEN = "cards_taken"    # 对手交出了该点数的牌
    LUCKY_DRAW = "lucky_draw"      # 钓鱼摸到了所要的点数
    GO_FISH = "go_fish"            # 钓鱼摸到其他点数，轮到对手
    DECK_EMPTY = "deck_empty"      # 牌堆已空，直接轮到对手

    @property
    def goes_again(self) -> bool:
        """要牌的玩家是否继续行动."""
        return self in (TurnOutcome.CARDS_TAKEN, TurnOutcome.LUCKY_DRAW)


class GamePhase(Enum):
    """
    游戏阶段枚举.
    """

    NOT_STARTED = "not_started"  # 尚未发牌
    IN_PROGRESS = "in_progress"  # 进行中
    FINISHED = "finished"        # 已结束


@dataclass(frozen=True)
class ValidationResultData:
    """
    要牌请求验证结果数据.

    包含验证是否通过和错误信息.
    """

    is_valid: bool
    error_message: Optional[str] = None


# Utility functions for enums
def get_all_suits() -> List[Suit]:
    """Get all card suits.

    Returns:
        List of all Suit enum values.
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """Get all card ranks.

    Returns:
        List of all Rank enum values.
    """
    return list(Rank)
