"""钓鱼游戏CLI界面.

这个模块提供命令行界面的钓鱼游戏，人类玩家对战电脑。
"""

import logging
from typing import Optional

import click
from pydantic import ValidationError

from gofish.ai import STRATEGIES
from gofish.controller import GameConfiguration, GameResult, GoFishController
from gofish.core import EventType, GameEvent, RankNotHeldError, rank_name
from .input_handler import CLIInputHandler
from .render import CLIRenderer

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class GoFishCLI:
    """钓鱼游戏CLI界面.

    游戏输出通过click.echo显示，诊断信息通过logging记录。
    """

    def __init__(self, config: Optional[GameConfiguration] = None,
                 controller: Optional[GoFishController] = None):
        """初始化CLI游戏.

        Args:
            config: 游戏配置
            controller: 游戏控制器，如果为None则按配置创建
        """
        self.config = config or GameConfiguration()
        self.logger = logging.getLogger(__name__)
        self.controller = controller or GoFishController(config=self.config)
        self.human_seat = self.controller.human_seat

        bus = self.controller.event_bus
        bus.subscribe(EventType.BOOK_COMPLETED, self._on_book_completed)
        bus.subscribe(EventType.GAME_ENDED, self._on_game_ended)

    def run(self) -> GameResult:
        """运行游戏主循环，直到牌堆和双方手牌都用完.

        Returns:
            最终的游戏结果
        """
        click.echo(CLIRenderer.render_welcome(
            self.config.player_name, self.config.computer_name, self.config.hand_size
        ))

        self.controller.start_game()
        self._announce_opening_books()

        while not self.controller.is_game_over():
            if self.controller.get_current_player_id() == self.human_seat:
                self._handle_human_turn()
            else:
                self._handle_ai_turn()

        result = self.controller.get_result()
        click.echo(CLIRenderer.render_game_result(result))
        return result

    def _on_book_completed(self, event: GameEvent) -> None:
        self.logger.info(
            f"座位{event.data['player_id']} 凑齐 {rank_name(event.data['rank'])}，"
            f"共{event.data['total_books']}个book"
        )

    def _on_game_ended(self, event: GameEvent) -> None:
        reason = "达到回合上限" if event.data["turn_limit_hit"] else "牌已用完"
        self.logger.info(
            f"游戏结束({reason}): 获胜者 {event.data['winner_ids']}, 平局={event.data['is_tie']}"
        )

    def _announce_opening_books(self) -> None:
        """发牌时就凑齐的book."""
        for player in self.controller.get_snapshot().players:
            for book in player.books:
                click.echo(f"{player.name} 发牌时就凑齐了一组 {rank_name(book.rank)}!")

    def _handle_human_turn(self) -> None:
        """处理人类玩家的回合，不合规则的点数提示后重新输入."""
        snapshot = self.controller.get_snapshot()
        click.echo(CLIRenderer.render_game_state(snapshot, self.human_seat))

        while True:
            rank = CLIInputHandler.get_rank_request(snapshot, self.human_seat)
            try:
                result = self.controller.request_cards(self.human_seat, rank)
                break
            except RankNotHeldError:
                held = ", ".join(rank_name(r) for r in snapshot.get_player_by_seat(self.human_seat).hand.ranks())
                click.echo(CLIRenderer.render_error_message(
                    f"你手里没有 {rank_name(rank)}，只能要你有的点数: {held}"
                ))

        click.echo(CLIRenderer.render_turn_result(result, self.controller.get_snapshot(), self.human_seat))

    def _handle_ai_turn(self) -> None:
        """处理电脑的回合."""
        result = self.controller.process_ai_turn()
        click.echo("")
        click.echo(CLIRenderer.render_turn_result(result, self.controller.get_snapshot(), self.human_seat))


@click.command(context_settings={"auto_envvar_prefix": "GOFISH"})
@click.option("--name", default=None, help="玩家名字，不提供时会询问")
@click.option("--seed", type=int, default=None, help="随机种子，用于可重现的游戏")
@click.option("--hand-size", type=click.IntRange(1, 26), default=7, show_default=True, help="初始手牌数")
@click.option("--ai-strategy", type=click.Choice(STRATEGIES), default="random", show_default=True,
              help="电脑选点策略")
@click.option("--allow-unheld-ranks", is_flag=True, default=False,
              help="允许要自己手中没有的点数")
@click.option("--max-turns", type=click.IntRange(min=1), default=None, help="回合上限")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              default="WARNING", show_default=True, help="日志级别")
def main(name, seed, hand_size, ai_strategy, allow_unheld_ranks, max_turns, log_level):
    """钓鱼(Go Fish)：命令行人机对战."""
    logging.basicConfig(level=getattr(logging, log_level.upper()), format=LOG_FORMAT)

    if name is None:
        name = CLIInputHandler.get_player_name(default="玩家")

    try:
        config = GameConfiguration(
            player_name=name,
            seed=seed,
            hand_size=hand_size,
            ai_strategy=ai_strategy,
            require_held_rank=not allow_unheld_ranks,
            max_turns=max_turns,
        )
    except ValidationError as e:
        raise click.BadParameter(str(e))

    GoFishCLI(config=config).run()


if __name__ == "__main__":
    main()
