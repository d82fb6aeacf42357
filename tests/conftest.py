"""
pytest配置文件

提供钓鱼游戏测试共用的fixture
"""

import logging

import pytest

from gofish.controller import GameConfiguration, GoFishController
from gofish.core import EventBus


@pytest.fixture
def event_bus():
    """独立的事件总线"""
    return EventBus(logger=logging.getLogger("tests.events"))


@pytest.fixture
def seeded_controller(event_bus):
    """已发牌、种子固定的控制器"""
    controller = GoFishController(
        config=GameConfiguration(seed=42, ai_strategy="first"),
        event_bus=event_bus,
    )
    controller.start_game()
    return controller
