"""
Game constants for the snake bots.
"""

from typing import Tuple

Position = Tuple[int, int]

# Movement directions (screen coordinates: "up" decreases y)
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)  # fixed traversal order

OPPOSITES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Control types
HUMAN = "human"
NPC = "npc"

# Difficulty tiers
EASY = "easy"
MEDIUM = "medium"
HARD = "hard"

# Board defaults used by the match harness
DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 30
