"""
Decision policy for bot players.

Each tick a bot either holds its heading (reaction delay), gives up (no safe
move), slips (random safe move), follows a BFS path to food, stalls in
survival mode, or falls back to greedy steering toward the nearest food.
Which of these are available depends on the bot's effective difficulty.
"""

import logging
import random
from typing import List, Optional, Set, TYPE_CHECKING

from domain.constants import Position
from domain.game_state import GameState
from domain.player import Player

from .difficulty import DifficultySettings, effective_difficulty, get_difficulty_settings
from .grid import build_obstacles, next_coord, safe_moves, wrapped_distance
from .search import count_accessible_tiles, find_path_to_closest_food

if TYPE_CHECKING:
    from .base import BotAgent

logger = logging.getLogger(__name__)

# Flood-fill cap for the medium tier's partial trap check.
MEDIUM_SPACE_CAP = 20
# Flood-fill cap when comparing survival moves.
SURVIVAL_SPACE_CAP = 100
# How often a non-pathfinding bot keeps going straight when it safely can.
STRAIGHT_BIAS = 0.6


def greedy_food_move(
    head: Position,
    moves: List[str],
    game_state: GameState,
) -> str:
    """
    Hot/cold steering: pick the move that ends closest to the nearest food.

    No obstacle avoidance beyond the given moves. With no food on the board
    the first move is returned.
    """
    best_move = moves[0]
    if not game_state.food:
        return best_move

    target = min(game_state.food, key=lambda f: wrapped_distance(head, f, game_state))

    shortest = None
    for move in moves:
        dist = wrapped_distance(next_coord(head, move, game_state), target, game_state)
        if shortest is None or dist < shortest:
            shortest = dist
            best_move = move
    return best_move


def tail_chase_move(
    head: Position,
    tail: Position,
    moves: List[str],
    game_state: GameState,
) -> Optional[str]:
    """Move whose next cell is closest to our own tail, or None without moves."""
    closest = None
    min_dist = None
    for move in moves:
        dist = wrapped_distance(next_coord(head, move, game_state), tail, game_state)
        if min_dist is None or dist < min_dist:
            min_dist = dist
            closest = move
    return closest


class DecisionPolicy:
    """
    Turns a game state into one proposed direction for one bot.

    The random source is injected so tests can seed it; the policy itself
    holds no other state between calls.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def decide(self, agent: "BotAgent", game_state: GameState, player: Player) -> Optional[str]:
        """
        Return the direction the bot should take, or None to keep its heading.

        None covers both "still reacting" and "no safe move left".
        """
        if not player.is_alive or len(player.snake) == 0:
            return None

        length = len(player.snake)
        difficulty = effective_difficulty(agent.difficulty, length)
        if difficulty != agent.difficulty:
            logger.debug("Bot %s plays as %s at length %d", agent.player_id, difficulty, length)
        settings = get_difficulty_settings(difficulty)

        if agent.decision_delay > 0:
            agent.decision_delay -= 1
            return None
        agent.decision_delay = settings.reaction_delay_frames

        head = player.snake.head
        obstacles = build_obstacles(game_state)
        moves = safe_moves(head, game_state, player.player_id, obstacles)
        if not moves:
            logger.debug("Bot %s has no safe move at %s", agent.player_id, head)
            return None

        if self.rng.random() < settings.error_chance:
            return self.rng.choice(moves)

        if settings.use_pathfinding:
            move = self._follow_food_path(player, game_state, settings, moves, obstacles)
            if move is not None:
                return move

            if settings.safety_check:
                return self._survive(player, game_state, moves, obstacles)

        if not settings.use_pathfinding and player.direction in moves:
            if self.rng.random() < STRAIGHT_BIAS:
                return player.direction

        return greedy_food_move(head, moves, game_state)

    def _follow_food_path(
        self,
        player: Player,
        game_state: GameState,
        settings: DifficultySettings,
        moves: List[str],
        obstacles: Set[Position],
    ) -> Optional[str]:
        """First step toward the closest food, if it passes the tier's trap check."""
        head = player.snake.head
        length = len(player.snake)
        path = find_path_to_closest_food(head, game_state, player.player_id, obstacles)
        if path is None or path.first_move not in moves:
            return None

        nxt = next_coord(head, path.first_move, game_state)
        if settings.safety_check:
            space = count_accessible_tiles(nxt, game_state, player.player_id, length, obstacles)
            if space >= length:
                return path.first_move
        else:
            # Capped regardless of length: long medium bots can still be trapped.
            space = count_accessible_tiles(nxt, game_state, player.player_id, MEDIUM_SPACE_CAP, obstacles)
            if space >= length / 2:
                return path.first_move

        logger.debug(
            "Bot %s rejects path %s to food (space %d, length %d)",
            player.player_id, path.first_move, space, length,
        )
        return None

    def _survive(
        self,
        player: Player,
        game_state: GameState,
        moves: List[str],
        obstacles: Set[Position],
    ) -> Optional[str]:
        """Stall: take the roomiest move, or circle toward our own tail if all are tight."""
        head = player.snake.head
        length = len(player.snake)

        best_move = None
        max_space = -1
        for move in moves:
            nxt = next_coord(head, move, game_state)
            space = count_accessible_tiles(nxt, game_state, player.player_id, SURVIVAL_SPACE_CAP, obstacles)
            if space > max_space:
                max_space = space
                best_move = move

        if max_space >= length:
            return best_move

        logger.debug("Bot %s is boxed in (space %d, length %d), chasing tail", player.player_id, max_space, length)
        chase = tail_chase_move(head, player.snake.tail, moves, game_state)
        if chase is not None:
            return chase
        return best_move
