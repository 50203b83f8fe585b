"""
Shared type definitions for the maze system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal direction between neighbouring cells."""

    N = "N"  # Up (decreasing y)
    S = "S"  # Down (increasing y)
    E = "E"  # Right (increasing x)
    W = "W"  # Left (decreasing x)

    @property
    def offset(self) -> tuple[int, int]:
        """The (dx, dy) step taken when moving in this direction."""
        return _OFFSETS[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.N: (0, -1),
    Direction.S: (0, 1),
    Direction.E: (1, 0),
    Direction.W: (-1, 0),
}


# =============================================================================
# Cell
# =============================================================================


@dataclass(frozen=True)
class Cell:
    """A grid position. Cells have no identity beyond their coordinates."""

    x: int
    y: int

    def step(self, direction: Direction) -> Cell:
        """Return the position one step away in the given direction (unbounded)."""
        dx, dy = direction.offset
        return Cell(self.x + dx, self.y + dy)
