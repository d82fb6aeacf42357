"""钓鱼游戏CLI输入处理模块.

这个模块负责读取用户输入，把点数文本解析为Rank，
处理查询命令，无效输入时提示并重新输入。
"""

from typing import Optional

import click

from gofish.core import GameSnapshot, InvalidRankError, Rank, parse_rank
from .render import CLIRenderer

QUERY_COMMANDS = ("?hand", "?deck", "?books", "?help")


class InputValidationError(Exception):
    """输入验证错误."""

    pass


class CLIInputHandler:
    """CLI输入处理器.

    使用click读取输入。查询命令不消耗回合，
    无法识别的输入只提示错误，不会中断游戏。
    """

    @staticmethod
    def get_player_name(default: str) -> str:
        """询问玩家名字.

        Raises:
            click.Abort: 用户取消输入
        """
        name = click.prompt("请输入你的名字", default=default, show_default=True)
        return name.strip() or default

    @staticmethod
    def get_rank_request(snapshot: GameSnapshot, player_id: int) -> Rank:
        """读取一次要牌的点数.

        Args:
            snapshot: 当前游戏状态快照，查询命令使用
            player_id: 人类玩家ID

        Returns:
            解析后的点数

        Raises:
            click.Abort: 用户取消输入或输入结束
        """
        while True:
            text = click.prompt("请输入要的点数 (2-10, J, Q, K, A)", type=str)
            try:
                command = CLIInputHandler.parse_command(text)
                if command is not None:
                    click.echo(CLIInputHandler._run_query(command, snapshot, player_id))
                    continue
                return parse_rank(text)
            except (InvalidRankError, InputValidationError) as e:
                click.echo(CLIRenderer.render_error_message(str(e)))

    @staticmethod
    def parse_command(text: str) -> Optional[str]:
        """解析查询命令.

        Args:
            text: 用户输入

        Returns:
            规范化后的命令，不是命令时返回None

        Raises:
            InputValidationError: 以"?"开头但不是已知命令
        """
        token = text.strip().lower()
        if not token.startswith("?"):
            return None
        if token == "?deck_len":
            return "?deck"
        if token not in QUERY_COMMANDS:
            raise InputValidationError(f"未知命令: {text.strip()}，输入 ?help 查看命令")
        return token

    @staticmethod
    def _run_query(command: str, snapshot: GameSnapshot, player_id: int) -> str:
        if command == "?hand":
            return CLIRenderer.render_hand(snapshot.get_player_by_seat(player_id))
        if command == "?deck":
            return f"牌堆剩余: {snapshot.deck_size} 张"
        if command == "?books":
            return CLIRenderer.render_books(snapshot)
        return CLIRenderer.render_help()
