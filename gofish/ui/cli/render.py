"""钓鱼游戏CLI渲染模块.

这个模块负责将游戏状态快照和回合结果渲染为命令行文本，
实现显示逻辑与核心游戏逻辑的分离。
"""

from typing import List

from gofish.core import Book, Card, GameSnapshot, Player, TurnOutcome, rank_name
from gofish.controller import GameResult, TurnResult


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的数据，返回字符串。
    """

    @staticmethod
    def render_welcome(player_name: str, computer_name: str, hand_size: int) -> str:
        """渲染开场信息."""
        lines = [
            "=== 钓鱼 Go Fish ===",
            f"{player_name} 对战 {computer_name}，每人 {hand_size} 张牌",
            "轮到你时输入要的点数 (2-10, J, Q, K, A)，输入 ?help 查看命令",
        ]
        return "\n".join(lines)

    @staticmethod
    def render_game_state(snapshot: GameSnapshot, human_seat: int) -> str:
        """渲染人类玩家看到的局面.

        Args:
            snapshot: 游戏状态快照
            human_seat: 人类玩家座位号

        Returns:
            格式化的游戏状态字符串
        """
        human = snapshot.get_player_by_seat(human_seat)
        opponent = snapshot.get_opponent(human_seat)

        lines = [
            "",
            f"--- 第 {snapshot.turn_number + 1} 回合 ---",
            CLIRenderer.render_hand(human),
            f"你的book: {CLIRenderer._format_books(human.books)}",
        ]
        if opponent is not None:
            lines.append(
                f"{opponent.name}: 手牌 {opponent.card_count} 张, book {opponent.book_count} 个"
            )
        lines.append(f"牌堆剩余: {snapshot.deck_size} 张")
        return "\n".join(lines)

    @staticmethod
    def render_hand(player: Player) -> str:
        """渲染玩家手牌，按点数排序."""
        if not player.has_cards():
            return "你的手牌: (没有牌)"
        cards = " ".join(CLIRenderer._format_card(card) for card in player.hand.sorted_cards())
        return f"你的手牌: {cards}"

    @staticmethod
    def render_books(snapshot: GameSnapshot) -> str:
        """渲染所有玩家的book."""
        lines = ["已完成的book:"]
        for player in snapshot.players:
            lines.append(f"  {player.name}: {CLIRenderer._format_books(player.books)}")
        return "\n".join(lines)

    @staticmethod
    def render_turn_result(result: TurnResult, snapshot: GameSnapshot, human_seat: int) -> str:
        """渲染一次要牌的结果.

        电脑钓鱼摸到的牌不显示牌面。

        Args:
            result: 要牌结果
            snapshot: 要牌之后的游戏状态快照
            human_seat: 人类玩家座位号

        Returns:
            格式化的回合结果字符串
        """
        requester = snapshot.get_player_by_seat(result.requester_id)
        target = snapshot.get_player_by_seat(result.target_id)
        is_human = result.requester_id == human_seat
        wanted = rank_name(result.rank)

        lines = [f"{requester.name} 向 {target.name} 要 {wanted}"]

        if result.outcome == TurnOutcome.CARDS_TAKEN:
            cards = " ".join(CLIRenderer._format_card(card) for card in result.cards_received)
            lines.append(f"{target.name} 交出了 {len(result.cards_received)} 张: {cards}")
        elif result.outcome == TurnOutcome.DECK_EMPTY:
            lines.append("去钓鱼! 但牌堆已经空了")
        elif is_human:
            drawn = CLIRenderer._format_card(result.drawn_card)
            suffix = "，正是你要的!" if result.outcome == TurnOutcome.LUCKY_DRAW else ""
            lines.append(f"去钓鱼! 你摸到了 {drawn}{suffix}")
        elif result.outcome == TurnOutcome.LUCKY_DRAW:
            lines.append(f"去钓鱼! {requester.name} 摸到了想要的 {wanted}")
        else:
            lines.append(f"去钓鱼! {requester.name} 从牌堆摸了一张牌")

        for seat_id, rank in result.books_completed:
            owner = snapshot.get_player_by_seat(seat_id)
            lines.append(f"{owner.name} 凑齐了一组 {rank_name(rank)}! (共 {owner.book_count} 个book)")

        for seat_id in result.refilled:
            lines.append(f"{snapshot.get_player_by_seat(seat_id).name} 手牌已空，从牌堆补摸一张")

        if result.game_over:
            return "\n".join(lines)

        # 手牌和牌堆都空时，即使要到牌也要让给对手
        if result.next_player == result.requester_id:
            lines.append(f"{requester.name} 继续行动")
        elif result.next_player is not None:
            lines.append(f"轮到 {snapshot.get_player_by_seat(result.next_player).name}")

        return "\n".join(lines)

    @staticmethod
    def render_game_result(result: GameResult) -> str:
        """渲染最终排名.

        Args:
            result: 游戏结果

        Returns:
            格式化的结果字符串
        """
        lines = ["", "=== 游戏结束 ===", f"共 {result.total_turns} 回合"]

        for place, standing in enumerate(result.standings, start=1):
            ranks = ", ".join(rank_name(rank) for rank in standing.book_ranks) or "-"
            lines.append(f"  {place}. {standing.name}: {standing.books} 个book ({ranks})")

        if result.is_tie:
            lines.append(f"平局! 双方各 {result.standings[0].books} 个book")
        else:
            lines.append(f"获胜者: {result.standings[0].name}")

        return "\n".join(lines)

    @staticmethod
    def render_help() -> str:
        """渲染命令帮助."""
        lines = [
            "可用输入:",
            "  2-10, J/Jack, Q/Queen, K/King, A/Ace  向对手要这个点数",
            "  ?hand   查看手牌",
            "  ?deck   查看牌堆剩余张数",
            "  ?books  查看双方的book",
            "  ?help   显示本帮助",
        ]
        return "\n".join(lines)

    @staticmethod
    def render_error_message(error: str) -> str:
        return f"错误: {error}"

    @staticmethod
    def _format_books(books: List[Book]) -> str:
        if not books:
            return "无"
        return ", ".join(rank_name(book.rank) for book in books)

    @staticmethod
    def _format_card(card: Card) -> str:
        return str(card)
