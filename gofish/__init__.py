"""
Go Fish card game.

This package contains a single-player command-line Go Fish game played
against a computer opponent, split into core game logic, AI strategies,
the controller layer and the CLI front end.
"""

__version__ = "0.1.0"
__author__ = "Go Fish Development Team"
