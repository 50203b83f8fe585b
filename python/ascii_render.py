"""
ASCII rendering for mazes.

Each cell is drawn three characters wide:

    +---+---+
    |       |
    +   +---+
    |   |   |
    +---+---+

A cell's top segment is open when it is linked North and its left wall is open
when it is linked West; the right and bottom borders are always closed.
"""

from __future__ import annotations

from typing import Callable

from maze import Maze
from maze_types import Direction

CELL_WIDTH = 3

CORNER = "+"
WALL_H = "-" * CELL_WIDTH
WALL_V = "|"
OPEN_H = " " * CELL_WIDTH
OPEN_V = " "
INTERIOR = " " * CELL_WIDTH


def render_lines(maze: Maze, colorize: Callable[[str], str] | None = None) -> list[str]:
    """
    Render a maze as a list of text lines.

    Args:
        maze: The maze to render
        colorize: Optional function applied to every wall piece (corners and
            walls), e.g. ``simple_chalk.cyan``. Passages are never coloured.

    Returns:
        List of strings, two per maze row plus the bottom border
    """
    if colorize is None:
        colorize = lambda s: s

    corner = colorize(CORNER)
    wall_h = colorize(WALL_H)
    wall_v = colorize(WALL_V)

    lines: list[str] = []

    for row in maze.rows():
        top = []
        body = []
        for cell in row:
            top.append(corner)
            top.append(OPEN_H if maze.is_linked(cell, Direction.N) else wall_h)
            body.append(OPEN_V if maze.is_linked(cell, Direction.W) else wall_v)
            body.append(INTERIOR)
        top.append(corner)
        body.append(wall_v)
        lines.append("".join(top))
        lines.append("".join(body))

    # Bottom border
    lines.append((corner + wall_h) * maze.width + corner)

    return lines


def render(maze: Maze, colorize: Callable[[str], str] | None = None) -> str:
    """Render a maze to a multi-line string (no trailing newline)."""
    return "\n".join(render_lines(maze, colorize))
