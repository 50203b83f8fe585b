"""
Demonstration script for the maze generators.

Usage:
    python demo.py [algorithm] [width] [height] [seed] [svg_path]
    python demo.py all

With no arguments, prints a 20x8 binary tree maze.
"""

import logging
import sys

import simple_chalk as chalk  # type: ignore[import-untyped]

from ascii_render import render
from generators import ALGORITHMS, generate
from svg_render import SvgStyle, save_svg

PRESETS = dict(
    small=dict(width=6, height=4),
    classic=dict(width=20, height=8),
    square=dict(width=12, height=12),
)


def demo_all(seed: int | None = None) -> None:
    """Print every algorithm on every preset size."""
    for algorithm in sorted(ALGORITHMS):
        for preset, dims in PRESETS.items():
            print("=" * 40)
            print(f"{algorithm} ({preset}, {dims['width']}x{dims['height']}):")
            print("=" * 40)
            maze = generate(dims["width"], dims["height"], algorithm, seed=seed)
            print(render(maze, colorize=chalk.cyan))
            print()


def main(argv: list[str]) -> None:
    if "-v" in argv:
        argv = [a for a in argv if a != "-v"]
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    if argv and argv[0] == "all":
        demo_all(int(argv[1]) if len(argv) > 1 else None)
        return

    algorithm = argv[0] if len(argv) > 0 else "binary_tree"
    width = int(argv[1]) if len(argv) > 1 else PRESETS["classic"]["width"]
    height = int(argv[2]) if len(argv) > 2 else PRESETS["classic"]["height"]
    seed = int(argv[3]) if len(argv) > 3 else None

    maze = generate(width, height, algorithm, seed=seed)
    print(render(maze))

    if len(argv) > 4:
        save_svg(maze, argv[4], SvgStyle())
        print(f"Wrote {argv[4]}")


if __name__ == "__main__":
    main(sys.argv[1:])
