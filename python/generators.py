"""
Perfect maze generators.

Each generator takes ownership of a freshly built ``Maze``, links it into a
spanning tree and returns it. Randomness comes from a ``random.Random`` that the
caller passes in (or that is created for the single call), so a fixed seed
always reproduces the same maze.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Sequence, TypeVar

from maze import Maze
from maze_types import Cell, Direction

logger = logging.getLogger(__name__)

T = TypeVar("T")

MazeGenerator = Callable[[Maze, "random.Random | None"], Maze]

__all__ = [
    "ALGORITHMS",
    "MazeGenerator",
    "binary_tree",
    "generate",
    "get_algorithm",
    "sample",
    "sidewinder",
]


def sample(rng: random.Random, items: Sequence[T]) -> T | None:
    """Pick one item uniformly at random, or None when there is nothing to pick."""
    if not items:
        return None
    return items[rng.randrange(len(items))]


# =============================================================================
# Binary Tree
# =============================================================================


def binary_tree(maze: Maze, rng: random.Random | None = None) -> Maze:
    """
    Link every cell to either its North or its East neighbour.

    The top row and the rightmost column can only link East and North
    respectively, so both end up as unbroken corridors. The top-right cell has
    neither neighbour and is skipped.
    """
    rng = rng if rng is not None else random.Random()

    for cell in maze.cells():
        neighbours = maze.neighbours(cell)
        candidates = [neighbours[d] for d in (Direction.N, Direction.E) if d in neighbours]

        neighbour = sample(rng, candidates)
        if neighbour is not None:
            maze.link(cell, neighbour)

    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "binary_tree: %dx%d maze, %d links", maze.width, maze.height, maze.link_count()
        )
    return maze


# =============================================================================
# Sidewinder
# =============================================================================


def sidewinder(maze: Maze, rng: random.Random | None = None) -> Maze:
    """
    Carve each row into runs of East links, closing every run with one North link.

    A run is closed at the eastern boundary, or on a coin flip anywhere below the
    top row. Closing picks one member of the run at random and links it North;
    the top row never closes early, so it becomes a single corridor.
    """
    rng = rng if rng is not None else random.Random()

    for row in maze.rows():
        run: list[Cell] = []
        for cell in row:
            run.append(cell)

            neighbours = maze.neighbours(cell)
            at_eastern_boundary = Direction.E not in neighbours
            at_northern_boundary = Direction.N not in neighbours

            should_close_out = at_eastern_boundary or (
                not at_northern_boundary and rng.random() < 0.5
            )

            if should_close_out:
                member = sample(rng, run)
                if member is not None:
                    north = maze.neighbours(member).get(Direction.N)
                    if north is not None:
                        maze.link(member, north)
                logger.debug("sidewinder: closed run of %d at y=%d", len(run), cell.y)
                run = []
            else:
                maze.link(cell, neighbours[Direction.E])

    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "sidewinder: %dx%d maze, %d links", maze.width, maze.height, maze.link_count()
        )
    return maze


# =============================================================================
# Algorithm Selection
# =============================================================================


ALGORITHMS: dict[str, MazeGenerator] = {
    "binary_tree": binary_tree,
    "sidewinder": sidewinder,
}


def get_algorithm(name: str) -> MazeGenerator:
    """
    Look up a generator by name.

    Names are case-insensitive and treat spaces and hyphens as underscores, so
    "binary tree", "Binary-Tree" and "binary_tree" are the same algorithm.
    """
    key = name.strip().lower().replace(" ", "_").replace("-", "_")
    try:
        return ALGORITHMS[key]
    except KeyError:
        raise ValueError(
            f"Unknown maze algorithm: '{name}'\n"
            f"  Valid algorithms: {', '.join(sorted(ALGORITHMS))}"
        ) from None


def generate(
    width: int,
    height: int,
    algorithm: str = "binary_tree",
    seed: int | None = None,
    rng: random.Random | None = None,
) -> Maze:
    """
    Build a width x height maze and carve it with the named algorithm.

    Args:
        width: Number of columns (zero gives an empty maze)
        height: Number of rows (zero gives an empty maze)
        algorithm: Generator name, see ``ALGORITHMS``
        seed: Seed for a fresh random source; ignored when ``rng`` is given
        rng: Random source to use for this generation

    Returns:
        The generated maze
    """
    generator = get_algorithm(algorithm)
    if rng is None:
        rng = random.Random(seed)
    return generator(Maze(width, height), rng)
