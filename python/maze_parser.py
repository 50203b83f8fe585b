"""
Parse the ASCII rendering of a maze back into a Maze.

The accepted format is exactly what ``ascii_render.render`` produces:

    +---+---+
    |       |
    +   +---+
    |   |   |
    +---+---+

An open top segment links a cell North and an open left wall links it West.
"""

from __future__ import annotations

from ascii_render import CELL_WIDTH, CORNER, INTERIOR, OPEN_H, OPEN_V, WALL_H, WALL_V
from maze import Maze
from maze_types import Cell, Direction

__all__ = ["parse_maze"]

_UNIT = CELL_WIDTH + 1


def parse_maze(text: str) -> Maze:
    """
    Parse a maze from its text rendering.

    Leading and trailing blank lines are ignored, so triple-quoted literals can
    be used directly.

    Args:
        text: Rendered maze

    Returns:
        Maze with the links the rendering shows

    Raises:
        ValueError: If the text is not a well-formed maze rendering
    """
    lines = text.strip("\n").split("\n")

    if len(lines) % 2 == 0:
        raise ValueError(
            f"Invalid maze text: expected an odd number of lines, got {len(lines)}\n"
            f"  Each maze row takes two lines, plus one line for the bottom border"
        )

    line_length = len(lines[0])
    if (line_length - 1) % _UNIT != 0:
        raise ValueError(
            f"Invalid maze text: line 0 has length {line_length}\n"
            f"  Expected a length of {_UNIT} * width + 1"
        )

    mismatched = [(i, len(line)) for i, line in enumerate(lines) if len(line) != line_length]
    if mismatched:
        error_msg = (
            f"Inconsistent line lengths in maze text\n"
            f"  Expected: {line_length} characters (from line 0)\n"
            f"  Mismatched lines:\n"
        )
        for line_idx, actual in mismatched:
            error_msg += f"    Line {line_idx}: {actual} characters - \"{lines[line_idx]}\"\n"
        raise ValueError(error_msg)

    width = (line_length - 1) // _UNIT
    height = len(lines) // 2
    maze = Maze(width, height)

    for y in range(height):
        top = lines[2 * y]
        body = lines[2 * y + 1]

        for x in range(width):
            col = x * _UNIT
            _expect(top, 2 * y, col, (CORNER,))
            segment = top[col + 1:col + _UNIT]
            _expect(top, 2 * y, col + 1, (WALL_H,) if y == 0 else (WALL_H, OPEN_H), segment)
            _expect(body, 2 * y + 1, col, (WALL_V,) if x == 0 else (WALL_V, OPEN_V))
            _expect(body, 2 * y + 1, col + 1, (INTERIOR,))

            cell = Cell(x, y)
            if segment == OPEN_H:
                maze.link(cell, cell.step(Direction.N))
            if body[col] == OPEN_V:
                maze.link(cell, cell.step(Direction.W))

        _expect(top, 2 * y, width * _UNIT, (CORNER,))
        _expect(body, 2 * y + 1, width * _UNIT, (WALL_V,))

    bottom_line = len(lines) - 1
    expected_bottom = (CORNER + WALL_H) * width + CORNER
    if lines[bottom_line] != expected_bottom:
        raise ValueError(
            f"Invalid bottom border on line {bottom_line}: \"{lines[bottom_line]}\"\n"
            f"  Expected: \"{expected_bottom}\""
        )

    return maze


def _expect(
    line: str, line_idx: int, col: int, allowed: tuple[str, ...], found: str | None = None
) -> None:
    """Check that ``line`` holds one of ``allowed`` at ``col``."""
    if found is None:
        found = line[col:col + len(allowed[0])]
    if found not in allowed:
        options = " or ".join(f"'{a}'" for a in allowed)
        raise ValueError(
            f"Invalid maze text at line {line_idx}, column {col}: '{found}'\n"
            f"  Line: \"{line}\"\n"
            f"  Expected: {options}"
        )
