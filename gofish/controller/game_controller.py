"""
钓鱼游戏控制器.

这个模块提供了钓鱼游戏的主要控制逻辑，作为核心逻辑层和UI层之间的桥梁。
控制器负责发牌、要牌回合、钓鱼摸牌、book结算和胜负判定。
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core import (
    GameState, GameSnapshot, Player, Card, Rank, GamePhase, TurnOutcome,
    RequestValidator, EventBus, EventType, GameStateHealthChecker,
    GameStateError, CardConservationError, rank_name
)
from ..ai import AIStrategy, SimpleAI, SimpleAIConfig
from .decorators import atomic, logged_action
from .dto import GameConfiguration, GameResult, PlayerStanding


@dataclass(frozen=True)
class TurnResult:
    """一次要牌的结果.

    Attributes:
        requester_id: 要牌玩家ID
        target_id: 被要牌的玩家ID
        rank: 所要的点数
        outcome: 回合结果
        cards_received: 从对手处得到的牌
        drawn_card: 钓鱼摸到的牌，没有摸牌时为None
        books_completed: 本回合完成的book，(玩家ID, 点数)
        refilled: 因手牌为空而补摸一张牌的玩家ID
        goes_again: 要牌玩家是否赢得继续行动的机会
        next_player: 下一个行动的玩家ID，游戏结束时为None；
            赢得继续行动但手牌和牌堆都空时为对手
        game_over: 游戏是否已经结束
    """

    requester_id: int
    target_id: int
    rank: Rank
    outcome: TurnOutcome
    cards_received: Tuple[Card, ...] = ()
    drawn_card: Optional[Card] = None
    books_completed: Tuple[Tuple[int, Rank], ...] = ()
    refilled: Tuple[int, ...] = ()
    goes_again: bool = False
    next_player: Optional[int] = None
    game_over: bool = False


class GoFishController:
    """钓鱼游戏控制器.

    这个类负责：
    - 创建玩家、洗牌和发初始手牌
    - 处理要牌请求、对手交牌和钓鱼摸牌
    - 每次牌变动后结算book
    - 判断游戏结束并给出排名

    控制器采用依赖注入设计，游戏状态、AI策略、日志记录器、
    事件总线和健康检查器都可以替换。
    """

    def __init__(
        self,
        config: Optional[GameConfiguration] = None,
        ai_strategy: Optional[AIStrategy] = None,
        game_state: Optional[GameState] = None,
        logger: Optional[logging.Logger] = None,
        event_bus: Optional[EventBus] = None,
        health_checker: Optional[GameStateHealthChecker] = None
    ):
        """初始化控制器.

        Args:
            config: 游戏配置，如果为None则使用默认配置
            ai_strategy: 电脑选点策略，如果为None则按配置创建SimpleAI
            game_state: 游戏状态对象，如果为None则创建空状态
            logger: 日志记录器
            event_bus: 事件总线，如果为None则创建新的事件总线
            health_checker: 每回合后运行的牌数守恒检查器
        """
        self._config = config or GameConfiguration()
        self._game_state = game_state or GameState(rng=random.Random(self._config.seed))
        self._ai_strategy = ai_strategy or SimpleAI(
            SimpleAIConfig(strategy=self._config.ai_strategy),
            rng=random.Random(self._config.seed)
        )
        self._logger = logger or logging.getLogger(__name__)
        self._event_bus = event_bus or EventBus()
        self._health_checker = health_checker or GameStateHealthChecker()
        self._validator = RequestValidator(require_held_rank=self._config.require_held_rank)

    @property
    def config(self) -> GameConfiguration:
        return self._config

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def human_seat(self) -> int:
        return self._config.human_seat

    @atomic
    @logged_action("start_game")
    def start_game(self) -> None:
        """开始新游戏.

        创建两名玩家，洗牌并各发初始手牌，结算发牌时凑齐的book，
        人类玩家先行动。

        Raises:
            GameStateError: 如果游戏已经开始
        """
        state = self._game_state
        if state.phase != GamePhase.NOT_STARTED:
            raise GameStateError("游戏已经开始，无法重新发牌")

        if not state.players:
            computer_seat = 1 - self._config.human_seat
            seats = sorted([
                Player(seat_id=self._config.human_seat, name=self._config.player_name, is_human=True),
                Player(seat_id=computer_seat, name=self._config.computer_name),
            ], key=lambda p: p.seat_id)
            for player in seats:
                state.add_player(player)

        state.initialize_deck(seed=self._config.seed)
        state.deal_hands(self._config.hand_size)
        self._event_bus.emit_simple(
            EventType.CARDS_DEALT,
            hand_size=self._config.hand_size,
            deck_size=state.deck.cards_remaining
        )

        state.phase = GamePhase.IN_PROGRESS
        state.current_player = self._config.human_seat
        self._collect_books(state.players)

        self._event_bus.emit_simple(
            EventType.GAME_STARTED,
            players=[p.name for p in state.players],
            first_player=state.current_player
        )
        self._logger.info(f"游戏开始，每人{self._config.hand_size}张牌，牌堆剩余{state.deck.cards_remaining}张")

        self._settle_turn()
        self._verify_integrity()

    @atomic
    def request_cards(self, player_id: int, rank: Rank) -> TurnResult:
        """向对手要牌.

        对手有该点数的牌时全部交给要牌者，要牌者继续行动；
        否则要牌者从牌堆摸一张（钓鱼），摸到所要点数则继续行动，
        否则轮到对手。牌堆已空时不摸牌，直接轮到对手。

        Args:
            player_id: 要牌玩家ID
            rank: 所要的点数

        Returns:
            本次要牌的结果

        Raises:
            GameStateError: 游戏未在进行中或不是该玩家的回合
            RankNotHeldError: 要求持有点数时，要牌者手中没有该点数
        """
        state = self._game_state
        self._validator.validate(state, player_id, rank)

        requester = state.get_player_by_seat(player_id)
        target = state.get_opponent(player_id)
        state.turn_number += 1

        self._event_bus.emit_simple(
            EventType.CARDS_REQUESTED,
            requester_id=requester.seat_id,
            target_id=target.seat_id,
            rank=rank
        )
        self._logger.info(f"{requester.name} 向 {target.name} 要 {rank_name(rank)}")

        taken = target.hand.remove_rank(rank)
        drawn = None

        if taken:
            requester.receive_cards(taken)
            outcome = TurnOutcome.CARDS_TAKEN
            self._event_bus.emit_simple(
                EventType.CARDS_TRANSFERRED,
                from_id=target.seat_id,
                to_id=requester.seat_id,
                cards=list(taken)
            )
            state.add_event(f"{target.name} gave {len(taken)} {rank.name} to {requester.name}")
        else:
            drawn = state.deck.draw()
            if drawn is None:
                outcome = TurnOutcome.DECK_EMPTY
                state.add_event(f"{requester.name} went fishing but the deck is empty")
            else:
                requester.hand.add(drawn)
                outcome = TurnOutcome.LUCKY_DRAW if drawn.rank == rank else TurnOutcome.GO_FISH
                state.add_event(f"{requester.name} went fishing")
            self._event_bus.emit_simple(
                EventType.WENT_FISHING,
                player_id=requester.seat_id,
                rank=rank,
                lucky=outcome == TurnOutcome.LUCKY_DRAW,
                deck_empty=drawn is None
            )

        self._logger.debug(f"要牌结果: {outcome.value}")
        books_completed = self._collect_books([requester, target])

        if outcome.goes_again:
            state.current_player = requester.seat_id
        else:
            self._change_turn(target.seat_id)

        refilled = self._settle_turn()
        self._verify_integrity()

        return TurnResult(
            requester_id=requester.seat_id,
            target_id=target.seat_id,
            rank=rank,
            outcome=outcome,
            cards_received=tuple(taken),
            drawn_card=drawn,
            books_completed=books_completed,
            refilled=refilled,
            goes_again=outcome.goes_again,
            next_player=state.current_player,
            game_over=self.is_game_over()
        )

    def process_ai_turn(self) -> TurnResult:
        """让电脑选择点数并要牌.

        Returns:
            电脑这次要牌的结果

        Raises:
            GameStateError: 游戏未在进行中，或当前是人类玩家的回合
        """
        player_id = self.get_current_player_id()
        if player_id is None:
            raise GameStateError("游戏未在进行中")

        player = self._game_state.get_player_by_seat(player_id)
        if player.is_human:
            raise GameStateError(f"当前是人类玩家 {player.name} 的回合")

        rank = self._ai_strategy.choose_rank(self.get_snapshot(), player_id)
        self._logger.debug(f"{player.name} 选择了 {rank_name(rank)}")
        return self.request_cards(player_id, rank)

    def get_snapshot(self) -> GameSnapshot:
        """获取当前游戏状态的快照，可以安全地传递给UI层和AI."""
        return self._game_state.create_snapshot()

    def is_game_over(self) -> bool:
        return self._game_state.phase == GamePhase.FINISHED

    def get_current_player_id(self) -> Optional[int]:
        """获取当前需要行动的玩家ID，游戏未在进行中时返回None."""
        if self._game_state.phase != GamePhase.IN_PROGRESS:
            return None
        return self._game_state.current_player

    def get_result(self) -> GameResult:
        """计算排名.

        book多者获胜，book数相同时为平局；排名同分时按座位号排序。

        Returns:
            游戏结果
        """
        players = sorted(self._game_state.players, key=lambda p: (-p.book_count, p.seat_id))
        standings = [
            PlayerStanding(
                seat_id=p.seat_id,
                name=p.name,
                books=p.book_count,
                book_ranks=sorted(p.book_ranks)
            )
            for p in players
        ]

        best = max((p.book_count for p in players), default=0)
        winner_ids = [p.seat_id for p in players if p.book_count == best]

        return GameResult(
            standings=standings,
            winner_ids=winner_ids,
            is_tie=len(winner_ids) > 1,
            total_turns=self._game_state.turn_number
        )

    def _collect_books(self, players: List[Player]) -> Tuple[Tuple[int, Rank], ...]:
        """结算所有玩家手中凑齐的book."""
        completed = []
        for player in players:
            for book in player.collect_books():
                completed.append((player.seat_id, book.rank))
                self._event_bus.emit_simple(
                    EventType.BOOK_COMPLETED,
                    player_id=player.seat_id,
                    rank=book.rank,
                    total_books=player.book_count
                )
                self._game_state.add_event(f"{player.name} completed a book of {book.rank.name}")
                self._logger.info(f"{player.name} 凑齐了 {rank_name(book.rank)}: {book}")
        return tuple(completed)

    def _change_turn(self, seat_id: int) -> None:
        previous = self._game_state.current_player
        self._game_state.current_player = seat_id
        if previous != seat_id:
            self._event_bus.emit_simple(EventType.TURN_CHANGED, previous=previous, current=seat_id)

    def _settle_turn(self) -> Tuple[int, ...]:
        """整理即将行动的玩家.

        手牌为空的玩家从牌堆补摸一张；牌堆也空时跳过该玩家。
        牌堆和所有手牌都空时结束游戏。

        Returns:
            补摸了一张牌的玩家ID
        """
        state = self._game_state
        refilled = []

        for _ in range(len(state.players)):
            if self._finish_if_over():
                break

            player = state.get_current_player()
            if player.has_cards():
                break

            card = state.deck.draw()
            if card is not None:
                player.hand.add(card)
                refilled.append(player.seat_id)
                state.add_event(f"{player.name} had no cards and drew one")
                self._logger.info(f"{player.name} 手牌已空，从牌堆补摸一张")
                break

            self._logger.info(f"{player.name} 手牌已空且牌堆已空，跳过回合")
            self._change_turn(state.get_opponent(player.seat_id).seat_id)

        return tuple(refilled)

    def _finish_if_over(self) -> bool:
        """牌堆和手牌都空，或达到回合上限时结束游戏."""
        state = self._game_state
        if state.phase == GamePhase.FINISHED:
            return True

        turn_limit_hit = (
            self._config.max_turns is not None and state.turn_number >= self._config.max_turns
        )
        if not state.is_exhausted() and not turn_limit_hit:
            return False

        state.phase = GamePhase.FINISHED
        state.current_player = None
        result = self.get_result()
        state.add_event("Game over")

        self._event_bus.emit_simple(
            EventType.GAME_ENDED,
            winner_ids=result.winner_ids,
            is_tie=result.is_tie,
            turn_limit_hit=turn_limit_hit
        )
        self._logger.info(f"游戏结束，共{state.turn_number}回合，获胜者: {result.winner_ids}")
        return True

    def _verify_integrity(self) -> None:
        """检查牌数守恒，发现严重问题时抛出异常以触发回滚."""
        result = self._health_checker.check_health(self._game_state)

        for issue in result.issues:
            if issue not in result.critical_issues:
                self._logger.warning(issue.message)

        if not result.is_healthy:
            messages = "; ".join(issue.message for issue in result.critical_issues)
            self._logger.error(f"游戏状态检查失败: {messages}")
            self._event_bus.emit_simple(EventType.ERROR_OCCURRED, message=messages)
            raise CardConservationError(messages)
