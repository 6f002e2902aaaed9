"""
Tests for the domain entities the bots read: Snake, Player and GameState.
"""

import os
import sys
from collections import deque

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (  # noqa: E402
    Snake,
    Player,
    GameState,
    UP, DOWN, LEFT, RIGHT,
    DIRECTIONS,
    OPPOSITES,
    HUMAN, NPC,
)


class TestConstants:
    def test_directions_have_fixed_order(self):
        """Directions are listed in traversal order."""
        assert DIRECTIONS == (UP, DOWN, LEFT, RIGHT)

    def test_every_direction_has_one_opposite(self):
        """Opposites pair each direction with exactly one other."""
        for direction in DIRECTIONS:
            assert OPPOSITES[OPPOSITES[direction]] == direction
            assert OPPOSITES[direction] != direction


class TestSnake:
    def test_snake_head_and_tail(self):
        """Snake exposes head and tail."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)
        assert len(snake) == 3

    def test_single_segment_head_is_tail(self):
        """A one-segment snake has the same head and tail."""
        snake = Snake([(2, 2)])
        assert snake.head == snake.tail == (2, 2)

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_snake_membership_and_iteration(self):
        """Snake supports membership tests and iteration."""
        snake = Snake([(1, 1), (1, 2)])
        assert (1, 2) in snake
        assert (2, 2) not in snake
        assert list(snake) == [(1, 1), (1, 2)]


class TestPlayer:
    def test_player_defaults(self):
        """Player starts alive, heading right, human controlled."""
        player = Player("0", [(3, 3)])
        assert player.is_alive is True
        assert player.direction == RIGHT
        assert player.next_direction == RIGHT
        assert player.control == HUMAN
        assert player.is_bot is False
        assert player.name == "0"
        assert player.score == 0

    def test_bot_player(self):
        """Players with npc control report as bots."""
        player = Player("1", [(3, 3)], direction=UP, control=NPC, name="Viper")
        assert player.is_bot is True
        assert player.name == "Viper"
        assert player.next_direction == UP


class TestGameState:
    def _state(self, alive=True):
        player = Player("0", [(5, 5), (5, 6)])
        player.is_alive = alive
        return GameState(
            width=10,
            height=10,
            wall_mode=True,
            food=[(3, 3)],
            players={"0": player},
        )

    def test_gamestate_initialization(self):
        """GameState initializes with all required attributes."""
        state = self._state()
        assert state.width == 10
        assert state.height == 10
        assert state.wall_mode is True
        assert state.food == [(3, 3)]
        assert state.round_number == 0
        assert state.get_player("0") is state.players["0"]
        assert state.get_player("missing") is None

    def test_print_board_marks_head_body_and_food(self):
        """print_board draws heads, bodies and food."""
        rows = self._state().print_board().split("\n")
        # Row label is the first token, cells follow
        assert rows[5].split()[1:][5] == "0"
        assert rows[6].split()[1:][5] == "o"
        assert rows[3].split()[1:][3] == "*"

    def test_print_board_dead_snake_not_shown(self):
        """Dead snakes are not shown on the board."""
        rows = self._state(alive=False).print_board().split("\n")
        assert rows[5].split()[1:][5] == "."
        assert rows[6].split()[1:][5] == "."

    def test_gamestate_repr(self):
        """GameState has a useful string representation."""
        text = repr(self._state())
        assert "GameState" in text
        assert "10x10" in text
