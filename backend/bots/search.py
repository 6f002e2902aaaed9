"""
Bounded graph searches over the board.

find_path_to_closest_food is a breadth-first search that only reports the
first step of the shortest route; count_accessible_tiles is a capped flood
fill used to spot dead ends before committing to a move.
"""

from collections import deque
from dataclasses import dataclass
from typing import Optional, Set

from domain.constants import DIRECTIONS, Position
from domain.game_state import GameState

from .grid import build_obstacles, is_occupied, next_coord

# Nodes further than this from the head are not expanded.
MAX_PATH_DEPTH = 50
DEFAULT_FLOOD_LIMIT = 50


@dataclass(frozen=True)
class PathResult:
    first_move: str
    distance: int


def find_path_to_closest_food(
    start: Position,
    game_state: GameState,
    player_id: Optional[str] = None,
    obstacles: Optional[Set[Position]] = None,
    max_depth: int = MAX_PATH_DEPTH,
) -> Optional[PathResult]:
    """
    Breadth-first search from start to the nearest food cell.

    Each queued cell carries the direction of the first step that reached
    it. Neighbours are visited in DIRECTIONS order, so among equally short
    routes the first one discovered wins.

    Returns:
        PathResult with the first move and path length, or None if no
        food is reachable within max_depth steps.
    """
    if not game_state.food:
        return None
    if obstacles is None:
        obstacles = build_obstacles(game_state)

    food = set(game_state.food)
    queue = deque()
    visited: Set[Position] = set()

    for move in DIRECTIONS:
        nxt = next_coord(start, move, game_state)
        if nxt in visited or is_occupied(nxt, game_state, player_id, obstacles):
            continue
        visited.add(nxt)
        queue.append((nxt, move, 1))

    while queue:
        pos, first_move, dist = queue.popleft()

        if pos in food:
            return PathResult(first_move, dist)

        if dist > max_depth:
            continue

        for move in DIRECTIONS:
            nxt = next_coord(pos, move, game_state)
            if nxt in visited or is_occupied(nxt, game_state, player_id, obstacles):
                continue
            visited.add(nxt)
            queue.append((nxt, first_move, dist + 1))

    return None


def count_accessible_tiles(
    start: Position,
    game_state: GameState,
    player_id: Optional[str] = None,
    limit: int = DEFAULT_FLOOD_LIMIT,
    obstacles: Optional[Set[Position]] = None,
) -> int:
    """
    Count the free cells reachable from start, start included.

    Stops as soon as the count reaches limit and returns limit, so a
    result equal to limit means "at least limit cells".
    """
    if obstacles is None:
        obstacles = build_obstacles(game_state)

    stack = [start]
    visited: Set[Position] = {start}
    count = 0

    while stack:
        current = stack.pop()
        count += 1
        if count >= limit:
            return limit

        for move in DIRECTIONS:
            nxt = next_coord(current, move, game_state)
            if nxt in visited or is_occupied(nxt, game_state, player_id, obstacles):
                continue
            visited.add(nxt)
            stack.append(nxt)

    return count
