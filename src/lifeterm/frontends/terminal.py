"""Curses frontend that animates the Game of Life in the terminal."""

import argparse
import curses
import locale
import logging
import sys
import time
from typing import Iterable, List, Optional, Tuple

from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.patterns import DEFAULT_SEED, PatternLibrary
from ..logging_config import setup_logging

logger = logging.getLogger(__name__)

LIVE_GLYPH = "█"
TITLE = " World "
LIVE_COLOR_PAIR = 1
MIN_ROWS = 4
MIN_COLS = 3


class TerminalGameOfLife:
    """Draws each generation inside a bordered box and steps on a fixed tick."""

    def __init__(
        self,
        window,
        tick_rate: float = 0.15,
        seed: Optional[Iterable[Tuple[int, int]]] = None,
        pattern_library: Optional[PatternLibrary] = None,
    ) -> None:
        """Initialize the view.

        Args:
            window: curses window to draw on (normally stdscr)
            tick_rate: Seconds between generations
            seed: Live coordinates to start from (defaults to DEFAULT_SEED)
            pattern_library: Library used to build the default seed
        """
        self.window = window
        self.tick_rate = tick_rate
        self.pattern_library = pattern_library or PatternLibrary()
        self.live_attr = curses.A_NORMAL

        rows, cols = window.getmaxyx()
        if rows < MIN_ROWS or cols < MIN_COLS:
            raise ValueError(f"Terminal too small: {cols}x{rows}, need at least {MIN_COLS}x{MIN_ROWS}")

        # Border on every side plus one status line
        self.rows = rows
        self.cols = cols
        width = cols - 2
        height = rows - 3

        if seed is None:
            seed = self.pattern_library.compose(DEFAULT_SEED)
        live = [(x, y) for x, y in seed if 0 <= x < width and 0 <= y < height]

        self.game = GameOfLife(Grid(width, height, live))
        self.world = window.derwin(height + 2, width + 2, 0, 0)
        logger.info("Started %dx%d world with %d live cells", width, height, len(live))

    def setup_screen(self) -> None:
        """Configure cursor, input and colours. Needs an initialized screen."""
        curses.curs_set(0)
        self.window.keypad(True)
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(LIVE_COLOR_PAIR, curses.COLOR_RED, -1)
            self.live_attr = curses.color_pair(LIVE_COLOR_PAIR)

    def status_line(self) -> str:
        text = f" generation {self.game.generation}  population {self.game.population}  q: quit "
        return text[: max(0, self.cols - 1)]

    def draw(self) -> None:
        """Render the current generation.

        Cells and the status line that fall outside the current terminal
        size are skipped, so a shrunken terminal shows a cropped world.
        """
        self.window.erase()

        grid = self.game.grid
        visible_rows = min(grid.height + 2, self.rows)
        visible_cols = min(grid.width + 2, self.cols)

        self.world.box()
        self.world.addstr(0, 1, TITLE[: max(0, visible_cols - 2)])

        for cell in self.game.live_cells():
            row, col = cell.y + 1, cell.x + 1
            # Stay inside the border, which also keeps clear of the last cell
            if row < visible_rows - 1 and col < visible_cols - 1:
                self.world.addstr(row, col, LIVE_GLYPH, self.live_attr)

        if grid.height + 2 < self.rows:
            self.window.addstr(grid.height + 2, 0, self.status_line())
        self.window.refresh()

    def handle_key(self, key: int) -> bool:
        """Process a key press.

        Returns:
            False when the user asked to quit
        """
        if key in (ord("q"), ord("Q")):
            return False
        if key == curses.KEY_RESIZE:
            self.rows, self.cols = self.window.getmaxyx()
            logger.debug(
                "Terminal resized to %dx%d, world keeps its %dx%d size",
                self.cols,
                self.rows,
                *self.game.grid.shape,
            )
        return True

    def run(self) -> None:
        """Draw, poll for keys and advance on every tick until 'q' is pressed."""
        last_tick = time.monotonic()
        while True:
            self.draw()

            timeout = max(0.0, self.tick_rate - (time.monotonic() - last_tick))
            self.window.timeout(int(timeout * 1000))
            key = self.window.getch()
            if key != -1 and not self.handle_key(key):
                logger.info("Quit at generation %d", self.game.generation)
                return

            if time.monotonic() - last_tick >= self.tick_rate:
                self.game.step()
                last_tick = time.monotonic()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Watch Conway's Game of Life in the terminal (press q to quit)")
    parser.add_argument("--tick-ms", type=int, default=150, help="Milliseconds between generations (default: 150)")
    parser.add_argument("--pattern", type=str, help="Start from a single named pattern instead of the default board")
    parser.add_argument("--log-file", type=str, help="Write log messages to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages (needs --log-file)")
    return parser


def _seed_for(pattern_name: Optional[str], library: PatternLibrary) -> Optional[List[Tuple[int, int]]]:
    if pattern_name is None:
        return None
    return library.compose([(pattern_name, 1, 1)])


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the terminal view.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = create_parser().parse_args(argv)

    if args.tick_ms <= 0:
        print("Error: --tick-ms must be positive")
        return 1

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file, console=False)

    library = PatternLibrary()
    if args.pattern and library.get_pattern(args.pattern) is None:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(library.list_patterns())}")
        return 1

    def _run(stdscr) -> None:
        app = TerminalGameOfLife(
            stdscr,
            tick_rate=args.tick_ms / 1000,
            seed=_seed_for(args.pattern, library),
            pattern_library=library,
        )
        app.setup_screen()
        app.run()

    locale.setlocale(locale.LC_ALL, "")
    try:
        curses.wrapper(_run)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
