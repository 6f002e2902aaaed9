"""
Decision engine for computer-controlled snakes.

This package turns a GameState into one proposed direction per bot per
tick, using difficulty-tiered strategies from greedy steering to BFS
pathfinding guarded by flood fill.
"""

from .base import BotAgent, create_bot
from .difficulty import (
    DifficultySettings,
    AVAILABLE_DIFFICULTIES,
    get_difficulty_settings,
    effective_difficulty,
    list_difficulties,
)
from .policy import DecisionPolicy
from .dispatcher import process_bot_inputs

__all__ = [
    'BotAgent',
    'create_bot',
    'DifficultySettings',
    'AVAILABLE_DIFFICULTIES',
    'get_difficulty_settings',
    'effective_difficulty',
    'list_difficulties',
    'DecisionPolicy',
    'process_bot_inputs',
]
