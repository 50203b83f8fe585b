"""Tests for svg_render module."""

import random
import re
import xml.etree.ElementTree as ET

import pytest

from generators import binary_tree, sidewinder
from maze import Maze
from maze_types import Cell
from svg_render import SvgStyle, render_svg, save_svg, to_svg_string, wall_segments

SVG_NS = "{http://www.w3.org/2000/svg}"


def numbers(value: str) -> list[float]:
    return [float(v) for v in re.split(r"[ ,]+", value.strip()) if v]


def path_tokens(svg: str) -> list[str]:
    root = ET.fromstring(svg)
    paths = root.findall(f"{SVG_NS}path")
    assert len(paths) == 1
    return [t for t in re.split(r"[ ,]+", paths[0].get("d", "").strip()) if t]


def expected_wall_count(width: int, height: int) -> int:
    """Outer border plus interior walls left standing in a perfect maze."""
    interior_edges = width * (height - 1) + height * (width - 1)
    return 2 * width + 2 * height + interior_edges - (width * height - 1)


# =============================================================================
# Test Wall Segments
# =============================================================================


class TestWallSegments:
    """Tests for wall segment computation."""

    def test_singleton_is_a_box(self) -> None:
        segments = wall_segments(Maze(1, 1), 10)
        assert sorted(segments) == sorted([
            (0, 0, 10, 0),
            (0, 0, 0, 10),
            (10, 0, 10, 10),
            (0, 10, 10, 10),
        ])

    def test_empty_maze_has_no_walls(self) -> None:
        assert wall_segments(Maze(0, 0), 10) == []

    def test_linked_walls_are_omitted(self) -> None:
        maze = Maze(2, 1)
        maze.link(Cell(0, 0), Cell(1, 0))
        segments = wall_segments(maze, 10)
        assert (10, 0, 10, 10) not in segments
        assert len(segments) == 6

    def test_no_doubled_segments(self) -> None:
        segments = wall_segments(Maze(4, 3), 5)
        assert len(segments) == len(set(segments))
        # Unlinked grid: every edge of every cell, shared ones counted once
        assert len(segments) == 4 * 4 + 3 * 5

    @pytest.mark.parametrize("generator", [binary_tree, sidewinder])
    @pytest.mark.parametrize("width,height", [(1, 1), (3, 2), (8, 5)])
    def test_perfect_maze_wall_count(self, generator, width: int, height: int) -> None:
        maze = generator(Maze(width, height), random.Random(13))
        assert len(wall_segments(maze, 10)) == expected_wall_count(width, height)


# =============================================================================
# Test SVG Output
# =============================================================================


class TestRenderSvg:
    """Tests for the SVG document."""

    def test_bounding_box(self) -> None:
        svg = to_svg_string(Maze(4, 3), SvgStyle(cell_size=15))
        root = ET.fromstring(svg)
        assert numbers(root.get("viewBox", "")) == [0, 0, 60, 45]
        assert float(root.get("width")) == 60
        assert float(root.get("height")) == 45

    def test_single_stroke_only_path(self) -> None:
        maze = sidewinder(Maze(5, 5), random.Random(1))
        svg = to_svg_string(maze, SvgStyle(stroke="red"))
        path = ET.fromstring(svg).find(f"{SVG_NS}path")
        assert path is not None
        assert path.get("fill") == "none"
        assert path.get("stroke") == "red"

    def test_one_move_per_segment(self) -> None:
        maze = binary_tree(Maze(6, 4), random.Random(8))
        tokens = path_tokens(to_svg_string(maze))
        assert tokens.count("M") == expected_wall_count(6, 4)
        assert tokens.count("L") == expected_wall_count(6, 4)

    def test_empty_maze_has_no_path(self) -> None:
        root = ET.fromstring(to_svg_string(Maze(0, 0)))
        assert root.findall(f"{SVG_NS}path") == []

    def test_render_svg_returns_drawing(self) -> None:
        dwg = render_svg(Maze(2, 2))
        assert "<svg" in dwg.tostring()

    def test_save_svg(self, tmp_path) -> None:
        target = tmp_path / "maze.svg"
        save_svg(binary_tree(Maze(3, 3), random.Random(0)), target)
        root = ET.parse(target).getroot()
        assert root.tag == f"{SVG_NS}svg"


class TestSvgStyle:
    """Tests for style validation."""

    def test_defaults(self) -> None:
        style = SvgStyle()
        assert style.cell_size == 20
        assert style.stroke == "black"

    @pytest.mark.parametrize("cell_size", [0, -5])
    def test_rejects_bad_cell_size(self, cell_size: int) -> None:
        with pytest.raises(ValueError, match="cell_size"):
            SvgStyle(cell_size=cell_size)

    def test_rejects_negative_stroke_width(self) -> None:
        with pytest.raises(ValueError, match="stroke_width"):
            SvgStyle(stroke_width=-1)
