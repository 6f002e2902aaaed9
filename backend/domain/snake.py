"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator

from .constants import Position


class Snake:
    """
    Represents a snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Position]):
        self.positions = deque(positions)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        """Return the tail tip (last element)."""
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __contains__(self, pos) -> bool:
        return pos in self.positions

    def __repr__(self):
        return f"<Snake length={len(self.positions)} head={self.head if self.positions else None}>"
