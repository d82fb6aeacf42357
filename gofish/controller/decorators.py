"""
Decorators for controller layer functionality.

This module provides decorators for transaction management and logging
of controller operations.
"""

import functools
from typing import Any, Callable, Optional, TypeVar

from ..core import GameState

F = TypeVar('F', bound=Callable[..., Any])


def atomic(func: F) -> F:
    """
    Decorator to ensure atomic operations on game state.

    The state is cloned before the decorated method runs. If the method
    raises, every field of the state is restored from the clone and the
    exception is re-raised.

    Args:
        func: The method to decorate. Must be a method of a class that has
              a _game_state attribute of type GameState.

    Returns:
        The decorated function with atomic behavior.
    """
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        if not hasattr(self, '_game_state'):
            raise AttributeError(
                f"@atomic decorator requires the class to have a '_game_state' attribute. "
                f"Class {self.__class__.__name__} does not have this attribute."
            )

        game_state = getattr(self, '_game_state')
        if not isinstance(game_state, GameState):
            raise TypeError(
                f"@atomic decorator requires '_game_state' to be of type GameState. "
                f"Got {type(game_state).__name__} instead."
            )

        original = game_state.clone()

        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            game_state.restore_from(original)
            game_state.add_event(f"Transaction rolled back due to error: {str(e)}")
            raise

    return wrapper


def logged_action(action_name: Optional[str] = None):
    """
    Decorator to automatically log controller actions.

    Args:
        action_name: Optional custom name for the action. If not provided,
                    the function name will be used.
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, '_logger', None)
            name = action_name or func.__name__

            if logger:
                logger.debug(f"Starting {name}")

            try:
                result = func(self, *args, **kwargs)
                if logger:
                    logger.debug(f"Completed {name} successfully")
                return result
            except Exception as e:
                if logger:
                    logger.warning(f"Failed {name}: {str(e)}")
                raise

        return wrapper
    return decorator
