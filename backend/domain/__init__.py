"""
Domain entities for the snake bots.

This module contains the game entities the decision engine reads. They are
independent of the game loop, transport and rendering.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, DIRECTIONS, OPPOSITES, DELTAS,
    HUMAN, NPC, EASY, MEDIUM, HARD, Position,
)
from .snake import Snake
from .player import Player
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'DIRECTIONS', 'OPPOSITES', 'DELTAS',
    'HUMAN', 'NPC', 'EASY', 'MEDIUM', 'HARD', 'Position',
    'Snake',
    'Player',
    'GameState',
]
