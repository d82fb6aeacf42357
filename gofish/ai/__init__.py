"""
AI strategies for the Go Fish game.

This package provides the computer opponent's rank selection strategies.
"""

from .base import AIStrategy
from .simple_ai import SimpleAI, SimpleAIConfig, STRATEGIES

__all__ = ['AIStrategy', 'SimpleAI', 'SimpleAIConfig', 'STRATEGIES']
