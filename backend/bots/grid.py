"""
Grid helpers shared by every bot tier: stepping across the board,
occupancy checks and the immediate safe-move filter.
"""

from typing import List, Optional, Set

from domain.constants import DELTAS, DIRECTIONS, Position
from domain.game_state import GameState


def next_coord(pos: Position, direction: str, game_state: GameState) -> Position:
    """
    Return the cell one step from pos in the given direction.

    Walled boards return the raw coordinate, which may be out of range;
    wrapping boards reduce it modulo the board size.
    """
    try:
        dx, dy = DELTAS[direction]
    except KeyError:
        raise ValueError(f"Unknown direction '{direction}'")

    x, y = pos[0] + dx, pos[1] + dy
    if game_state.wall_mode:
        return (x, y)
    return (x % game_state.width, y % game_state.height)


def in_bounds(pos: Position, game_state: GameState) -> bool:
    x, y = pos
    return 0 <= x < game_state.width and 0 <= y < game_state.height


def build_obstacles(game_state: GameState) -> Set[Position]:
    """Every cell covered by a living snake, tails included."""
    cells: Set[Position] = set()
    for player in game_state.players.values():
        if player.is_alive:
            cells.update(player.snake)
    return cells


def is_occupied(
    pos: Position,
    game_state: GameState,
    player_id: Optional[str] = None,
    obstacles: Optional[Set[Position]] = None,
) -> bool:
    """
    True if pos is off the board (walled) or covered by any living snake.

    Tails count as solid even though they usually move away next tick:
    a snake that just ate keeps its tail in place. player_id is accepted
    for callers that identify themselves; no snake is exempt, the caller's
    own body included.
    """
    if game_state.wall_mode and not in_bounds(pos, game_state):
        return True

    if obstacles is not None:
        return pos in obstacles

    for player in game_state.players.values():
        if player.is_alive and pos in player.snake:
            return True
    return False


def is_move_immediately_safe(
    head: Position,
    direction: str,
    game_state: GameState,
    player_id: Optional[str] = None,
    obstacles: Optional[Set[Position]] = None,
) -> bool:
    nxt = next_coord(head, direction, game_state)
    if game_state.wall_mode and not in_bounds(nxt, game_state):
        return False
    return not is_occupied(nxt, game_state, player_id, obstacles)


def safe_moves(
    head: Position,
    game_state: GameState,
    player_id: Optional[str] = None,
    obstacles: Optional[Set[Position]] = None,
) -> List[str]:
    """Directions from head that do not die on the next step, in traversal order."""
    return [
        move for move in DIRECTIONS
        if is_move_immediately_safe(head, move, game_state, player_id, obstacles)
    ]


def wrapped_distance(a: Position, b: Position, game_state: GameState) -> int:
    """Manhattan distance, taking the short way round on wrapping boards."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    if not game_state.wall_mode:
        dx = min(dx, game_state.width - dx)
        dy = min(dy, game_state.height - dy)
    return dx + dy
