"""
Bot agent - the per-bot state the decision policy works on.
"""

from typing import Optional, TYPE_CHECKING

from domain.constants import MEDIUM, NPC
from domain.game_state import GameState

if TYPE_CHECKING:
    from .policy import DecisionPolicy


class BotAgent:
    """
    One computer-controlled player.

    Identity, name and difficulty are fixed at creation. decision_delay
    counts the ticks left before the bot reconsiders its heading; while it
    is positive the bot keeps its last direction.
    """

    type = NPC

    def __init__(self, player_id: str, name: str, difficulty: str = MEDIUM):
        self.player_id = player_id
        self.name = name
        self.difficulty = difficulty
        self.decision_delay = 0

    def get_move(self, game_state: GameState, policy: "DecisionPolicy") -> Optional[str]:
        """
        Return a proposed direction for this bot, or None to keep the current heading.

        Args:
            game_state: Current state of the game
            policy: Decision policy carrying the tick's random source

        Returns:
            One of "up", "down", "left", "right", or None
        """
        player = game_state.get_player(self.player_id)
        if player is None:
            return None
        return policy.decide(self, game_state, player)

    def __repr__(self):
        return (
            f"<BotAgent id={self.player_id} name={self.name!r} "
            f"difficulty={self.difficulty} delay={self.decision_delay}>"
        )


def create_bot(player_id: str, name: str, difficulty: str = MEDIUM) -> BotAgent:
    return BotAgent(player_id, name, difficulty)
