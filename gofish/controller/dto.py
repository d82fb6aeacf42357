"""数据传输对象定义.

这个模块定义了控制器与UI层之间传输数据的标准格式。
使用Pydantic dataclass确保数据验证的一致性。
"""

from typing import Optional, List

from pydantic.dataclasses import dataclass as pydantic_dataclass
from pydantic import Field, field_validator

from gofish.core import Rank
from gofish.ai import STRATEGIES


@pydantic_dataclass
class GameConfiguration:
    """游戏配置.

    包含一局钓鱼游戏的全部配置参数。
    """
    player_name: str = Field("玩家", min_length=1, description="人类玩家名称")
    computer_name: str = Field("电脑", min_length=1, description="电脑玩家名称")
    hand_size: int = Field(7, ge=1, le=26, description="初始手牌数")
    seed: Optional[int] = Field(None, description="随机种子，用于可重现的游戏")
    require_held_rank: bool = Field(True, description="是否只能要自己手中有的点数")
    max_turns: Optional[int] = Field(None, gt=0, description="回合上限，None表示打到牌尽为止")
    ai_strategy: str = Field("random", description="电脑选点策略")
    human_seat: int = Field(0, ge=0, le=1, description="人类玩家座位")

    @field_validator('player_name', 'computer_name')
    @classmethod
    def validate_name(cls, v):
        """名称去掉首尾空白后不能为空."""
        v = v.strip()
        if not v:
            raise ValueError("名称不能为空")
        return v

    @field_validator('ai_strategy')
    @classmethod
    def validate_ai_strategy(cls, v):
        """验证电脑策略名称."""
        if v not in STRATEGIES:
            raise ValueError(f"未知的电脑策略: {v}，可选: {', '.join(STRATEGIES)}")
        return v


@pydantic_dataclass
class PlayerStanding:
    """单个玩家的最终成绩."""
    seat_id: int = Field(..., ge=0, description="座位ID")
    name: str = Field(..., min_length=1, description="玩家名称")
    books: int = Field(..., ge=0, le=13, description="book数量")
    book_ranks: List[Rank] = Field(default_factory=list, description="已完成的点数")


@pydantic_dataclass
class GameResult:
    """游戏结束结果.

    standings按book数降序排列，同分时按座位号升序。
    """
    standings: List[PlayerStanding] = Field(..., description="排名")
    winner_ids: List[int] = Field(..., description="获胜玩家ID列表，平局时有多个")
    is_tie: bool = Field(..., description="是否平局")
    total_turns: int = Field(0, ge=0, description="总回合数")
