"""
Rectangular grid graph that holds maze connectivity.

Cells are addressed by ``index = y * width + x``. Each index owns an
insertion-ordered set of linked indices, and every link is recorded on both
ends so adjacency is always symmetric.
"""

from __future__ import annotations

import logging

from maze_types import Cell, Direction

logger = logging.getLogger(__name__)


class Maze:
    """A width x height grid of cells with explicit, symmetric links.

    Dimensions are fixed at construction; ``width`` and ``height`` are read-only.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(
                f"Maze dimensions must be non-negative\n"
                f"  Got: width={width}, height={height}"
            )
        self._width = width
        self._height = height
        # dict keys act as an ordered set: first-link order, no duplicates
        self._links: list[dict[int, None]] = [{} for _ in range(width * height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._links == other._links
        )

    def __repr__(self) -> str:
        return f"Maze(width={self._width}, height={self._height})"

    @property
    def size(self) -> int:
        return self.width * self.height

    # =========================================================================
    # Addressing
    # =========================================================================

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def index_of(self, cell: Cell) -> int:
        """Map a cell to its storage index, rejecting cells outside the maze."""
        if not self.contains(cell):
            raise ValueError(
                f"Cell ({cell.x}, {cell.y}) is outside the maze\n"
                f"  Valid x: 0..{self.width - 1}\n"
                f"  Valid y: 0..{self.height - 1}"
            )
        return cell.y * self.width + cell.x

    def cell_at(self, index: int) -> Cell:
        if not 0 <= index < self.size:
            raise ValueError(f"Cell index {index} is outside 0..{self.size - 1}")
        return Cell(index % self.width, index // self.width)

    # =========================================================================
    # Traversal
    # =========================================================================

    def cells(self) -> list[Cell]:
        """All cells in row-major order (y outer, x inner)."""
        return [Cell(x, y) for y in range(self.height) for x in range(self.width)]

    def rows(self) -> list[list[Cell]]:
        """All cells grouped by row, top row first, each row left to right."""
        return [[Cell(x, y) for x in range(self.width)] for y in range(self.height)]

    def neighbours(self, cell: Cell) -> dict[Direction, Cell]:
        """
        Directional neighbours of a cell that lie inside the maze.

        A corner has 2 entries, a non-corner edge cell 3, an interior cell 4,
        and the only cell of a 1x1 maze has none.
        """
        self.index_of(cell)  # bounds check
        result: dict[Direction, Cell] = {}
        for direction in Direction:
            neighbour = cell.step(direction)
            if self.contains(neighbour):
                result[direction] = neighbour
        return result

    # =========================================================================
    # Links
    # =========================================================================

    def link(self, cell: Cell, other: Cell) -> None:
        """
        Connect two cells in both directions.

        Geometric adjacency is not checked; generators only ever link
        neighbours. Linking an already linked pair changes nothing.
        """
        a = self.index_of(cell)
        b = self.index_of(other)
        self._links[a][b] = None
        self._links[b][a] = None
        logger.debug("link: (%d, %d) <-> (%d, %d)", cell.x, cell.y, other.x, other.y)

    def links(self, cell: Cell) -> list[Cell]:
        """Cells linked to ``cell``, in the order the links were made."""
        return [self.cell_at(index) for index in self._links[self.index_of(cell)]]

    def is_linked(self, cell: Cell, direction: Direction) -> bool:
        neighbour = self.neighbours(cell).get(direction)
        if neighbour is None:
            return False
        return self.index_of(neighbour) in self._links[self.index_of(cell)]

    def link_count(self) -> int:
        """Number of distinct undirected links in the maze."""
        return sum(len(linked) for linked in self._links) // 2
