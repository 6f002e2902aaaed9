"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Dict, List, Optional

from .constants import Position
from .player import Player


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        width, height: board dimensions
        wall_mode: True if the border is a lethal wall, False if the board wraps
        food: list of (x, y) positions of all food on the board
        players: dict of player_id -> Player
        round_number: which round we are in (0-based)
    """

    def __init__(
        self,
        width: int,
        height: int,
        wall_mode: bool,
        food: List[Position],
        players: Dict[str, Player],
        round_number: int = 0,
    ):
        self.width = width
        self.height = height
        self.wall_mode = wall_mode
        self.food = food
        self.players = players
        self.round_number = round_number

    def get_player(self, player_id: str) -> Optional[Player]:
        return self.players.get(player_id)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        * = food
        o = snake body
        0,1,2... = snake head (showing player number)
        Rows are printed top to bottom, (0,0) at the top left.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for fx, fy in self.food:
            board[fy][fx] = '*'

        for i, player in enumerate(self.players.values()):
            if not player.is_alive:
                continue
            for pos_idx, (x, y) in enumerate(player.snake):
                if not (0 <= x < self.width and 0 <= y < self.height):
                    continue
                board[y][x] = str(i % 10) if pos_idx == 0 else 'o'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, {self.width}x{self.height}, "
            f"wall_mode={self.wall_mode}, food={self.food}, players={len(self.players)}>"
        )
