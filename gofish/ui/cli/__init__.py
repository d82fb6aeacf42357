"""钓鱼游戏CLI用户界面模块.

这个包提供命令行界面的钓鱼游戏实现，包括：
- CLI游戏主类和click命令
- 渲染器（显示逻辑）
- 输入处理器（用户交互）
"""

from .cli_game import GoFishCLI, main
from .render import CLIRenderer
from .input_handler import CLIInputHandler, InputValidationError

__all__ = [
    'GoFishCLI',
    'main',
    'CLIRenderer',
    'CLIInputHandler',
    'InputValidationError'
]
