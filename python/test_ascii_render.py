"""Tests for ascii_render module."""

import random
import re

import simple_chalk as chalk  # type: ignore[import-untyped]

from ascii_render import render, render_lines
from generators import sidewinder
from maze import Maze
from maze_types import Cell


class TestRender:
    """Tests for plain text rendering."""

    def test_singleton_maze(self) -> None:
        assert render(Maze(1, 1)) == "+---+\n|   |\n+---+"

    def test_empty_maze(self) -> None:
        assert render(Maze(0, 0)) == "+"

    def test_maze_without_links(self) -> None:
        assert render(Maze(3, 3)) == (
            "+---+---+---+\n"
            "|   |   |   |\n"
            "+---+---+---+\n"
            "|   |   |   |\n"
            "+---+---+---+\n"
            "|   |   |   |\n"
            "+---+---+---+"
        )

    def test_maze_with_links(self) -> None:
        maze = Maze(3, 3)
        maze.link(Cell(0, 0), Cell(1, 0))
        maze.link(Cell(0, 0), Cell(0, 1))
        maze.link(Cell(2, 2), Cell(1, 2))
        maze.link(Cell(2, 2), Cell(2, 1))

        assert render(maze) == (
            "+---+---+---+\n"
            "|       |   |\n"
            "+   +---+---+\n"
            "|   |   |   |\n"
            "+---+---+   +\n"
            "|   |       |\n"
            "+---+---+---+"
        )

    def test_non_square_dimensions(self) -> None:
        lines = render_lines(Maze(4, 2))
        assert len(lines) == 5
        assert all(len(line) == 17 for line in lines)

    def test_outer_border_always_closed(self) -> None:
        lines = render_lines(sidewinder(Maze(6, 4), random.Random(2)))
        assert lines[0] == "+---" * 6 + "+"
        assert lines[-1] == "+---" * 6 + "+"
        for body in lines[1::2]:
            assert body[0] == "|"
            assert body[-1] == "|"


class TestColorizedRender:
    """Tests for coloured wall output."""

    def test_colorize_applies_to_walls_only(self) -> None:
        maze = Maze(2, 1)
        maze.link(Cell(0, 0), Cell(1, 0))
        wrap = lambda s: f"<{s}>"
        lines = render_lines(maze, colorize=wrap)
        assert lines[0] == "<+><--->" * 2 + "<+>"
        assert lines[1] == "<|>       <|>"

    def test_chalk_colorize_keeps_plain_text(self) -> None:
        """Stripping ANSI codes from coloured output gives the plain rendering."""
        maze = sidewinder(Maze(5, 3), random.Random(4))
        colored = render(maze, colorize=chalk.cyan)
        plain = re.sub(r"\x1b\[[0-9;]*m", "", colored)
        assert plain == render(maze)
