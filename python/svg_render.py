"""
Vector (SVG) rendering for mazes.

Every wall is emitted exactly once as a straight segment of one stroke-only
path. A cell owns its East and South walls; North and West walls are only drawn
along the outer boundary, where no neighbouring cell owns them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import svgwrite

from maze import Maze
from maze_types import Direction

logger = logging.getLogger(__name__)

Segment = tuple[int, int, int, int]  # x1, y1, x2, y2


@dataclass(frozen=True)
class SvgStyle:
    """Drawing parameters for SVG output."""

    cell_size: int = 20
    stroke: str = "black"
    stroke_width: float = 2

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be > 0, got {self.cell_size}")
        if self.stroke_width < 0:
            raise ValueError(f"stroke_width must be >= 0, got {self.stroke_width}")


def wall_segments(maze: Maze, cell_size: int) -> list[Segment]:
    """Collect the wall segments of a maze, scaled by ``cell_size``."""
    segments: list[Segment] = []

    for cell in maze.cells():
        x1 = cell.x * cell_size
        y1 = cell.y * cell_size
        x2 = x1 + cell_size
        y2 = y1 + cell_size
        neighbours = maze.neighbours(cell)

        if Direction.N not in neighbours:
            segments.append((x1, y1, x2, y1))
        if Direction.W not in neighbours:
            segments.append((x1, y1, x1, y2))
        if not maze.is_linked(cell, Direction.E):
            segments.append((x2, y1, x2, y2))
        if not maze.is_linked(cell, Direction.S):
            segments.append((x1, y2, x2, y2))

    return segments


def render_svg(maze: Maze, style: SvgStyle = SvgStyle()) -> svgwrite.Drawing:
    """
    Build an SVG drawing of the maze.

    The drawing is ``cell_size * width`` by ``cell_size * height`` user units and
    holds a single path with one move/line pair per wall.
    """
    width = maze.width * style.cell_size
    height = maze.height * style.cell_size

    dwg = svgwrite.Drawing(size=(width, height))
    dwg.viewbox(0, 0, width, height)

    segments = wall_segments(maze, style.cell_size)
    if segments:
        path = dwg.path(
            fill="none",
            stroke=style.stroke,
            stroke_width=style.stroke_width,
            stroke_linecap="square",
        )
        for x1, y1, x2, y2 in segments:
            path.push("M", x1, y1, "L", x2, y2)
        dwg.add(path)

    logger.info(
        "render_svg: %dx%d maze, %d segments, %dx%d units",
        maze.width,
        maze.height,
        len(segments),
        width,
        height,
    )
    return dwg


def to_svg_string(maze: Maze, style: SvgStyle = SvgStyle()) -> str:
    return render_svg(maze, style).tostring()


def save_svg(maze: Maze, path: str | Path, style: SvgStyle = SvgStyle()) -> None:
    """Write the SVG rendering of a maze to ``path``."""
    render_svg(maze, style).saveas(str(path))
    logger.info("save_svg: wrote %s", path)
