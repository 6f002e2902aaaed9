#!/usr/bin/env python3
"""Run a headless bot-vs-bot snake match.

This is a development harness around the bot decision engine. Each round it:
- asks every living bot for a move via bots.process_bot_inputs
- applies all queued directions simultaneously
- resolves wall, head-to-head and body collisions
- grows snakes that reach food and refills the food supply
- ends on the round limit or when at most one snake is left

Defaults come from the environment (a .env file is loaded if present) and can
be overridden on the command line. Prints a JSON summary of the match.
"""

import argparse
import json
import logging
import os
import random
import sys
import uuid
from collections import deque
from pathlib import Path
from typing import Dict, List, Optional, Set

from dotenv import load_dotenv

# Ensure we can import the domain and bots packages from the backend root
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from bots import AVAILABLE_DIFFICULTIES, BotAgent, DecisionPolicy, create_bot, process_bot_inputs  # noqa: E402
from bots.grid import in_bounds, next_coord  # noqa: E402
from domain.constants import (  # noqa: E402
    DEFAULT_HEIGHT, DEFAULT_WIDTH, HUMAN, MEDIUM, NPC, RIGHT, Position,
)
from domain.game_state import GameState  # noqa: E402
from domain.player import Player  # noqa: E402


logger = logging.getLogger(__name__)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", name, raw)
        return default


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


class SnakeGame:
    """
    Manages:
      - Board (width, height, wall or wrap)
      - Players and their bot agents
      - Food
      - Rounds
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        wall_mode: bool = True,
        max_rounds: int = 200,
        num_food: int = 3,
        game_id: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ):
        if width < 2 or height < 2:
            raise ValueError(f"Board must be at least 2x2, got {width}x{height}.")

        self.width = width
        self.height = height
        self.wall_mode = wall_mode
        self.max_rounds = max_rounds
        self.num_food = num_food
        self.game_id = game_id or str(uuid.uuid4())
        self.rng = rng if rng is not None else random.Random()
        self.policy = DecisionPolicy(self.rng)

        self.players: Dict[str, Player] = {}
        self.agents: Dict[str, BotAgent] = {}
        self.food: List[Position] = []
        self.round_number = 0
        self.game_over = False
        self.game_result: Optional[Dict[str, str]] = None
        self.move_history: List[Dict[str, str]] = []

        self._refill_food()
        logger.debug("Game %s: %dx%d wall_mode=%s", self.game_id, width, height, wall_mode)

    def add_bot(self, player_id: str, name: Optional[str] = None, difficulty: str = MEDIUM) -> BotAgent:
        """Place a one-segment bot snake on a random free cell, heading right."""
        if player_id in self.players:
            raise ValueError(f"Player with id {player_id} already exists.")

        cell = self._random_free_cell()
        if cell is None:
            raise ValueError("No free cell left for a new snake.")

        name = name or f"{difficulty}-bot-{player_id}"
        self.players[player_id] = Player(player_id, [cell], direction=RIGHT, control=NPC, name=name)
        agent = create_bot(player_id, name, difficulty)
        self.agents[player_id] = agent
        logger.info("Added bot '%s' (%s, %s) at %s.", player_id, name, difficulty, cell)
        return agent

    def add_player(
        self,
        player_id: str,
        positions: List[Position],
        direction: str = RIGHT,
        name: Optional[str] = None,
        control: str = HUMAN,
    ) -> Player:
        """Add a player at fixed positions; its next_direction is steered by the caller."""
        if player_id in self.players:
            raise ValueError(f"Player with id {player_id} already exists.")
        for pos in positions:
            if not in_bounds(pos, self.get_current_state()):
                raise ValueError(f"Snake segment out of bounds at {pos}.")

        player = Player(player_id, positions, direction=direction, control=control, name=name)
        self.players[player_id] = player
        return player

    def set_food(self, food_positions: List[Position]):
        """Replace the food on the board with the given positions."""
        for (fx, fy) in food_positions:
            if not (0 <= fx < self.width and 0 <= fy < self.height):
                raise ValueError(f"Food out of bounds at {(fx, fy)}.")
        self.food = list(food_positions)

    def _occupied_cells(self) -> Set[Position]:
        cells: Set[Position] = set(self.food)
        for player in self.players.values():
            if player.is_alive:
                cells.update(player.snake)
        return cells

    def _random_free_cell(self) -> Optional[Position]:
        """
        Return a random cell (x, y) not occupied by any snake or food,
        or None if the board is full.
        """
        taken = self._occupied_cells()
        free = [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if (x, y) not in taken
        ]
        if not free:
            return None
        return self.rng.choice(free)

    def _refill_food(self):
        while len(self.food) < self.num_food:
            cell = self._random_free_cell()
            if cell is None:
                break
            self.food.append(cell)

    def get_current_state(self) -> GameState:
        """
        Return the GameState over the live players. Bots write their
        next_direction straight onto these Player records.
        """
        return GameState(
            width=self.width,
            height=self.height,
            wall_mode=self.wall_mode,
            food=self.food,
            players=self.players,
            round_number=self.round_number,
        )

    def run_round(self):
        """
        Execute one round:
          1) If game is over, do nothing
          2) Ask every living bot for its move
          3) Apply all queued directions simultaneously
          4) Check collisions on the proposed board
          5) Grow snakes that ate, refill food
          6) Possibly end the game
        """
        if self.game_over:
            logger.info("Game is already over. No more rounds.")
            return

        state = self.get_current_state()
        committed = process_bot_inputs(state, self.agents, self.policy)
        self.move_history.append(committed)

        # 1) Intended new head for every living snake
        new_heads: Dict[str, Position] = {}
        for pid, player in self.players.items():
            if not player.is_alive:
                continue
            player.direction = player.next_direction
            new_heads[pid] = next_coord(player.snake.head, player.direction, state)

        # 2) Proposed bodies after every snake moves
        eats_food: Dict[str, bool] = {}
        proposed_bodies: Dict[str, List[Position]] = {}
        for pid, head in new_heads.items():
            body = list(self.players[pid].snake)
            eats_food[pid] = head in self.food
            if eats_food[pid]:
                proposed_bodies[pid] = [head] + body
            else:
                proposed_bodies[pid] = [head] + body[:-1]

        # 3) Collision detection
        # a) wall collisions
        if self.wall_mode:
            for pid, head in new_heads.items():
                if not in_bounds(head, state):
                    self._kill(pid, "wall")

        # b) head-to-head collisions
        head_counts: Dict[Position, List[str]] = {}
        for pid, head in new_heads.items():
            if self.players[pid].is_alive:
                head_counts.setdefault(head, []).append(pid)
        for same_cell in head_counts.values():
            if len(same_cell) > 1:
                for pid in same_cell:
                    self._kill(pid, "head_collision")

        # c) head-into-body collisions
        body_cells: Set[Position] = set()
        for pid, body in proposed_bodies.items():
            if self.players[pid].is_alive:
                body_cells.update(body[1:])
        for pid, head in new_heads.items():
            if self.players[pid].is_alive and head in body_cells:
                self._kill(pid, "body_collision")

        # 4) Commit moves and food for the survivors
        for pid, head in new_heads.items():
            player = self.players[pid]
            if not player.is_alive:
                continue
            player.snake.positions = deque(proposed_bodies[pid])
            if eats_food[pid]:
                player.score += 1
                self.food.remove(head)

        self._refill_food()

        # 5) End-of-round bookkeeping
        self.round_number += 1
        alive = [pid for pid, p in self.players.items() if p.is_alive]
        logger.debug("Finished round %d. Alive: %s, moves: %s", self.round_number, alive, committed)

        if not alive:
            self.end_game("All snakes are dead.")
        elif len(self.players) > 1 and len(alive) == 1:
            self.end_game("All but one snake are dead.")
        elif self.round_number >= self.max_rounds:
            self.end_game("Reached max rounds.")

    def _kill(self, player_id: str, reason: str):
        player = self.players[player_id]
        if not player.is_alive:
            return
        player.is_alive = False
        player.death_reason = reason
        player.death_round = self.round_number
        logger.debug("Player %s died (%s) in round %d", player_id, reason, self.round_number)

    def end_game(self, reason: str):
        self.game_over = True
        logger.info("Game Over: %s", reason)

        scores = {pid: p.score for pid, p in self.players.items()}
        top_score = max(scores.values()) if scores else 0
        winners = [pid for pid, sc in scores.items() if sc == top_score]

        self.game_result = {}
        for pid in scores:
            if pid in winners:
                self.game_result[pid] = "tied" if len(winners) > 1 else "won"
            else:
                self.game_result[pid] = "lost"

        if len(winners) == 1:
            logger.info("The winner is %s with score %d.", winners[0], top_score)
        else:
            logger.info("Tie! Winners: %s with score %d.", winners, top_score)

    def summary(self) -> Dict:
        return {
            "game_id": self.game_id,
            "rounds": self.round_number,
            "final_scores": {pid: p.score for pid, p in self.players.items()},
            "lengths": {pid: len(p.snake) for pid, p in self.players.items()},
            "difficulties": {pid: a.difficulty for pid, a in self.agents.items()},
            "game_result": self.game_result,
            "death_info": {
                pid: {"reason": p.death_reason, "round": p.death_round}
                for pid, p in self.players.items()
                if not p.is_alive
            },
        }


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(difficulties: List[str], game_params: argparse.Namespace) -> Dict:
    """
    Runs a single match between bots of the given difficulties.

    Args:
        difficulties: One tier key per bot.
        game_params: An object (like argparse.Namespace) containing game settings
                     (width, height, max_rounds, num_food, wrap, seed).

    Returns:
        A dictionary summarizing the game results.
    """
    seed = getattr(game_params, "seed", None)
    game = SnakeGame(
        width=game_params.width,
        height=game_params.height,
        wall_mode=not getattr(game_params, "wrap", False),
        max_rounds=game_params.max_rounds,
        num_food=game_params.num_food,
        game_id=getattr(game_params, "game_id", None),
        rng=random.Random(seed),
    )

    for i, difficulty in enumerate(difficulties):
        game.add_bot(str(i), difficulty=difficulty)

    while not game.game_over:
        game.run_round()

    logger.debug("Final board:\n%s", game.get_current_state().print_board())
    return game.summary()


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Run a headless snake match between bot players."
    )
    parser.add_argument("--bots", type=str, nargs='+', default=[MEDIUM, MEDIUM],
                        help=f"Difficulty per bot, one of {', '.join(AVAILABLE_DIFFICULTIES)}")
    parser.add_argument("--width", type=int, default=_env_int("SNAKEBOT_WIDTH", DEFAULT_WIDTH),
                        help="Width of the board")
    parser.add_argument("--height", type=int, default=_env_int("SNAKEBOT_HEIGHT", DEFAULT_HEIGHT),
                        help="Height of the board")
    parser.add_argument("--max_rounds", type=int, default=_env_int("SNAKEBOT_MAX_ROUNDS", 200),
                        help="Maximum number of rounds")
    parser.add_argument("--num_food", type=int, default=_env_int("SNAKEBOT_NUM_FOOD", 3),
                        help="Number of food items kept on the board")
    parser.add_argument("--wrap", action="store_true", default=_env_flag("SNAKEBOT_WRAP"),
                        help="Wrap around the board edges instead of walls")
    parser.add_argument("--seed", type=int, default=_env_int("SNAKEBOT_SEED", None),
                        help="Seed for a reproducible match")

    args = parser.parse_args()

    logging.basicConfig(
        level=os.getenv("SNAKEBOT_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    result = run_simulation(args.bots, args)

    print("\nMatch Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
