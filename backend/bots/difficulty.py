"""
Difficulty tiers for bot players.

Maps tier keys ('easy', 'medium', 'hard') to the behaviour parameters the
decision policy reads. Unknown keys resolve to 'medium'. A bot's effective
tier can rise with its length during a match; the stored tier never changes.
"""

import logging
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from domain.constants import EASY, HARD, MEDIUM

logger = logging.getLogger(__name__)

DEFAULT_DIFFICULTY = MEDIUM

# Length past which a tier is promoted for the current decision.
EASY_PROMOTION_LENGTH = 20
MEDIUM_PROMOTION_LENGTH = 30


@dataclass(frozen=True)
class DifficultySettings:
    reaction_delay_frames: int  # ticks to hold a decision before recomputing
    error_chance: float         # probability of a random safe move instead of the best one
    use_pathfinding: bool       # BFS to food, otherwise greedy hot/cold steering
    safety_check: bool          # flood fill before committing + survival mode
    description: str = ""


DIFFICULTY_SETTINGS: Mapping[str, DifficultySettings] = MappingProxyType({
    EASY: DifficultySettings(
        reaction_delay_frames=10,
        error_chance=0.25,
        use_pathfinding=False,
        safety_check=False,
        description="Wanders, chases food greedily and crashes often",
    ),
    MEDIUM: DifficultySettings(
        reaction_delay_frames=4,
        error_chance=0.05,
        use_pathfinding=True,
        safety_check=False,
        description="Finds food with BFS but can be cornered",
    ),
    HARD: DifficultySettings(
        reaction_delay_frames=0,
        error_chance=0.0,
        use_pathfinding=True,
        safety_check=True,
        description="Instant reactions, no mistakes, refuses dead ends",
    ),
})

AVAILABLE_DIFFICULTIES = list(DIFFICULTY_SETTINGS.keys())


def get_difficulty_settings(difficulty: Optional[str]) -> DifficultySettings:
    """
    Get the settings for a tier key, falling back to the default tier.
    """
    settings = DIFFICULTY_SETTINGS.get(difficulty)
    if settings is None:
        logger.debug("Unknown difficulty %r, using %s", difficulty, DEFAULT_DIFFICULTY)
        return DIFFICULTY_SETTINGS[DEFAULT_DIFFICULTY]
    return settings


def effective_difficulty(difficulty: str, snake_length: int) -> str:
    """
    Tier to use for this decision given the snake's current length.

    Easy bots play as medium past EASY_PROMOTION_LENGTH and medium bots
    play as hard past MEDIUM_PROMOTION_LENGTH. Promotion is one step only.
    Unknown tiers are treated as the default tier before promotion.
    """
    if difficulty not in DIFFICULTY_SETTINGS:
        difficulty = DEFAULT_DIFFICULTY
    if difficulty == EASY and snake_length > EASY_PROMOTION_LENGTH:
        return MEDIUM
    if difficulty == MEDIUM and snake_length > MEDIUM_PROMOTION_LENGTH:
        return HARD
    return difficulty


def list_difficulties() -> List[Dict]:
    """
    Return metadata about every tier, for UIs that describe bot behaviour.

    Returns:
        List of dicts with 'key' plus every DifficultySettings field.
    """
    return [
        {"key": key, **asdict(settings)}
        for key, settings in DIFFICULTY_SETTINGS.items()
    ]
