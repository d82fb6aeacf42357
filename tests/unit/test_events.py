"""
EventBus事件系统的单元测试
"""

from unittest.mock import Mock

import pytest

from gofish.core import EventBus, EventType, GameEvent


@pytest.mark.unit
@pytest.mark.fast
class TestEventBus:
    """测试事件总线"""

    def test_subscribe_and_emit(self, event_bus):
        listener = Mock()
        event_bus.subscribe(EventType.BOOK_COMPLETED, listener)

        event_bus.emit_simple(EventType.BOOK_COMPLETED, player_id=0)
        event_bus.emit_simple(EventType.TURN_CHANGED, previous=0, current=1)

        listener.assert_called_once()
        event = listener.call_args[0][0]
        assert isinstance(event, GameEvent)
        assert event.data == {"player_id": 0}
        assert event.timestamp is not None

    def test_unsubscribe(self, event_bus):
        listener = Mock()
        event_bus.subscribe(EventType.GAME_STARTED, listener)

        assert event_bus.unsubscribe(EventType.GAME_STARTED, listener)
        assert not event_bus.unsubscribe(EventType.GAME_STARTED, listener)
        assert not event_bus.unsubscribe(EventType.GAME_ENDED, listener)
        assert event_bus.get_listeners_count(EventType.GAME_STARTED) == 0

    def test_failing_listener_does_not_block_others(self, event_bus):
        """一个监听器出错不影响其他监听器"""
        broken = Mock(side_effect=RuntimeError("listener failed"))
        healthy = Mock()
        event_bus.subscribe(EventType.WENT_FISHING, broken)
        event_bus.subscribe(EventType.WENT_FISHING, healthy)

        event_bus.emit_simple(EventType.WENT_FISHING, player_id=1)

        healthy.assert_called_once()

    def test_history_filter_and_limit(self, event_bus):
        for i in range(3):
            event_bus.emit_simple(EventType.CARDS_REQUESTED, index=i)
        event_bus.emit_simple(EventType.GAME_ENDED)

        requested = event_bus.get_event_history(EventType.CARDS_REQUESTED)
        assert [e.data["index"] for e in requested] == [0, 1, 2]
        assert len(event_bus.get_event_history(limit=2)) == 2

        event_bus.clear_history()
        assert event_bus.get_event_history() == []

    def test_history_is_bounded(self):
        bus = EventBus(max_history=2)
        for i in range(5):
            bus.emit_simple(EventType.TURN_CHANGED, index=i)
        assert [e.data["index"] for e in bus.get_event_history()] == [3, 4]

    def test_clear_listeners(self, event_bus):
        event_bus.subscribe(EventType.GAME_STARTED, Mock())
        event_bus.subscribe(EventType.GAME_ENDED, Mock())

        event_bus.clear_listeners(EventType.GAME_STARTED)
        assert event_bus.get_listeners_count(EventType.GAME_STARTED) == 0
        assert event_bus.get_listeners_count(EventType.GAME_ENDED) == 1

        event_bus.clear_listeners()
        assert event_bus.get_listeners_count(EventType.GAME_ENDED) == 0
