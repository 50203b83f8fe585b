"""
Interactive maze viewer.
Display a generated maze and regenerate it with keyboard commands.
"""

import logging
import random
import sys

import readchar
import simple_chalk as chalk  # type: ignore[import-untyped]
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render
from generators import generate
from maze import Maze

MIN_SIZE = 1
MAX_SIZE = 30


class InteractiveDemo:
    """Interactive viewer that regenerates mazes on key presses."""

    def __init__(self, width: int = 12, height: int = 8, algorithm: str = "binary_tree") -> None:
        self.width = width
        self.height = height
        self.algorithm = algorithm
        self.seed = random.randrange(1_000_000)
        self.console = Console()
        self.status_message = "Ready"
        self.maze = self.regenerate()

    def regenerate(self) -> Maze:
        """Rebuild the maze from the current settings."""
        self.maze = generate(self.width, self.height, self.algorithm, seed=self.seed)
        return self.maze

    def generate_display(self) -> Panel:
        """Generate the current display with maze and status."""
        status = Text()
        status.append("Algorithm: ", style="bold")
        status.append(f"{self.algorithm}\n")
        status.append("Size: ", style="bold")
        status.append(f"{self.width}x{self.height}   ")
        status.append("Seed: ", style="bold")
        status.append(f"{self.seed}\n\n")

        # Convert ANSI-colored maze text to Rich Text
        status.append(Text.from_ansi(render(self.maze, colorize=chalk.cyan)))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  B - Binary tree\n")
        status.append("  S - Sidewinder\n")
        status.append("  + - Grow maze\n")
        status.append("  - - Shrink maze\n")
        status.append("  R - New seed\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Maze Viewer", border_style="green")

    def select_algorithm(self, algorithm: str) -> None:
        self.algorithm = algorithm
        self.regenerate()
        self.status_message = f"✓ Generated with {algorithm}"

    def resize(self, delta: int) -> None:
        """Grow or shrink both dimensions, staying within MIN_SIZE..MAX_SIZE."""
        width = min(max(self.width + delta, MIN_SIZE), MAX_SIZE)
        height = min(max(self.height + delta, MIN_SIZE), MAX_SIZE)
        if (width, height) == (self.width, self.height):
            self.status_message = f"✗ Size limit reached ({width}x{height})"
            return
        self.width, self.height = width, height
        self.regenerate()
        self.status_message = f"✓ Resized to {width}x{height}"

    def reseed(self) -> None:
        self.seed = random.randrange(1_000_000)
        self.regenerate()
        self.status_message = f"✓ New seed {self.seed}"

    def handle_key(self, key: str) -> bool:
        """Apply a key press. Returns False when the viewer should stop."""
        key = key.lower()
        if key == 'q':
            self.status_message = "Quitting..."
            return False
        elif key == 'b':
            self.select_algorithm("binary_tree")
        elif key == 's':
            self.select_algorithm("sidewinder")
        elif key in ('+', '='):
            self.resize(1)
        elif key in ('-', '_'):
            self.resize(-1)
        elif key == 'r':
            self.reseed()
        else:
            self.status_message = f"Unknown key: {repr(key)}"
        return True

    def run(self) -> None:
        """Run the interactive viewer."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    key = readchar.readkey()
                    if not self.handle_key(key):
                        live.update(self.generate_display())
                        break
            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render the initial state
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        print('Running from IDE - rendering initial state')
        print()
        print(render(InteractiveDemo().maze))
    else:
        InteractiveDemo(algorithm=sys.argv[1] if len(sys.argv) > 1 else "binary_tree").run()
