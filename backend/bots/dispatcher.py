"""
Per-tick entry point: ask every living bot for a move and queue it.
"""

import logging
import random
from typing import Dict, Mapping, Optional

from domain.constants import OPPOSITES
from domain.game_state import GameState

from .base import BotAgent
from .policy import DecisionPolicy

logger = logging.getLogger(__name__)


def process_bot_inputs(
    game_state: GameState,
    agents: Mapping[str, BotAgent],
    policy: Optional[DecisionPolicy] = None,
    rng: Optional[random.Random] = None,
) -> Dict[str, str]:
    """
    Decide and commit one move for every living bot player.

    Bots are processed in player order against the same state; a bot's
    proposed move is written to its player's next_direction unless it
    would reverse the current heading.

    Args:
        game_state: Current state of the game
        agents: player_id -> BotAgent
        policy: Decision policy to use; built from rng if omitted
        rng: Random source for a policy built here

    Returns:
        player_id -> direction for every move that was committed
    """
    if policy is None:
        policy = DecisionPolicy(rng)

    committed: Dict[str, str] = {}
    for player in game_state.players.values():
        if not player.is_bot or not player.is_alive:
            continue

        agent = agents.get(player.player_id)
        if agent is None:
            continue

        direction = agent.get_move(game_state, policy)
        if direction is None:
            continue

        if OPPOSITES.get(direction) == player.direction:
            logger.debug("Bot %s tried to reverse from %s", player.player_id, player.direction)
            continue

        player.next_direction = direction
        committed[player.player_id] = direction

    return committed
