"""
Player record - the per-player slice of the game state.
"""

from typing import Iterable, Optional

from .constants import HUMAN, NPC, RIGHT, Position
from .snake import Snake


class Player:
    """
    A participant in the game, human or bot controlled.

    Attributes:
        player_id: unique id within the game
        name: display name
        snake: the player's Snake (head first)
        is_alive: whether the player is still in play
        direction: heading used on the last applied move
        next_direction: pending heading for the next move
        control: HUMAN or NPC
        score: food eaten so far
    """

    def __init__(
        self,
        player_id: str,
        positions: Iterable[Position],
        direction: str = RIGHT,
        control: str = HUMAN,
        name: Optional[str] = None,
    ):
        self.player_id = player_id
        self.name = name or player_id
        self.snake = Snake(positions)
        self.is_alive = True
        self.direction = direction
        self.next_direction = direction
        self.control = control
        self.score = 0
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    @property
    def is_bot(self) -> bool:
        return self.control == NPC

    def __repr__(self):
        return (
            f"<Player id={self.player_id} control={self.control} alive={self.is_alive} "
            f"length={len(self.snake)} direction={self.direction}>"
        )
