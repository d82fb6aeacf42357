"""
钓鱼游戏业务异常定义
区分输入错误(提示后重新输入)和状态错误(控制器回滚后向上抛)
"""


class GoFishError(Exception):
    """钓鱼游戏基础异常类"""
    pass


class InvalidRankError(GoFishError, ValueError):
    """无法识别或超出范围的点数"""
    pass


class RankNotHeldError(GoFishError):
    """要牌者手中没有所要的点数"""
    pass


class GameStateError(GoFishError):
    """游戏状态错误异常"""
    pass


class CardConservationError(GameStateError):
    """牌数守恒被破坏"""
    pass


class GameConfigError(GoFishError):
    """游戏配置错误异常"""
    pass
