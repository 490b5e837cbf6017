"""Command-line interface for running Game of Life simulations headless."""

import argparse
import logging
import sys
import time
from typing import Optional, Tuple

from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.patterns import DEFAULT_SEED, PatternLibrary
from ..logging_config import setup_logging

logger = logging.getLogger(__name__)


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def build_grid(
        self,
        width: int,
        height: int,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
    ) -> Grid:
        """Create the starting grid.

        Args:
            width: Grid width
            height: Grid height
            pattern: Pattern name, or None for the default board
            pattern_x: X offset for pattern placement
            pattern_y: Y offset for pattern placement

        Returns:
            Seeded Grid; cells falling outside the grid are dropped

        Raises:
            KeyError: If the pattern name is unknown
        """
        if pattern is None:
            seed = self.pattern_library.compose(DEFAULT_SEED)
        else:
            seed = self.pattern_library.compose([(pattern, pattern_x, pattern_y)])

        live = [(x, y) for x, y in seed if 0 <= x < width and 0 <= y < height]
        if len(live) < len(seed):
            logger.warning("Dropped %d seed cells outside the %dx%d grid", len(seed) - len(live), width, height)

        return Grid(width, height, live)

    def run_simulation(
        self,
        width: int,
        height: int,
        max_generations: int,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
        verbose: bool = False,
        show_grid: bool = False,
        show_every: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a Game of Life simulation.

        Args:
            width: Grid width
            height: Grid height
            max_generations: Maximum generations to run
            pattern: Optional pattern name (default board when None)
            pattern_x: X offset for pattern placement
            pattern_y: Y offset for pattern placement
            verbose: Print progress updates
            show_grid: Show initial and final grid states
            show_every: Print the grid after every generation

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        grid = self.build_grid(width, height, pattern, pattern_x, pattern_y)
        game = GameOfLife(grid)

        if verbose:
            source = f"pattern '{pattern}' at ({pattern_x}, {pattern_y})" if pattern else "default board"
            print(f"Initializing {width}x{height} grid with {source}")

        initial_population = game.population

        if verbose:
            print(f"Initial population: {initial_population} cells")

        if show_grid or show_every:
            print("\nInitial grid:")
            print(self._format_grid(game.grid))

        start_time = time.time()

        if show_every:
            reason = "max_generations"
            for _ in range(max_generations):
                previous = game.grid
                game.step()
                print(f"\nGeneration {game.generation}:")
                print(self._format_grid(game.grid))
                if game.population == 0:
                    reason = "extinction"
                    break
                if game.grid == previous:
                    reason = "still_life"
                    break
            final_generation = game.generation
        else:
            if verbose:
                print(f"\nRunning simulation (max {max_generations} generations)...")
            final_generation, reason = game.run(max_generations)

        duration = time.time() - start_time

        stats = {
            "generation": final_generation,
            "population": game.population,
            "initial_population": initial_population,
            "grid_size": game.grid.shape,
            "bounding_box": game.grid.get_bounding_box(),
            "duration_seconds": duration,
            "generations_per_second": final_generation / duration if duration > 0 else 0,
        }

        if show_grid and not show_every and reason != "extinction":
            print(f"\nFinal grid (generation {final_generation}):")
            print(self._format_grid(game.grid))

        return final_generation, reason, stats

    def _format_grid(self, grid: Grid, max_size: int = 200) -> str:
        """Format grid for display, truncating if too large."""
        if grid.width > max_size or grid.height > max_size:
            return f"Grid too large to display ({grid.width}x{grid.height})"

        return str(grid)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                size = pattern.get_size()
                print(f"  {pattern_name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life simulations from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the default board (blinker, glider, pulsar) on a 50x25 grid
  lifeterm-cli --width 50 --height 25

  # Watch a glider generation by generation
  lifeterm-cli -W 10 -H 10 --pattern Glider --pattern-x 1 --pattern-y 1 -m 8 --show-every

  # Run R-pentomino with verbose output
  lifeterm-cli --pattern "R-pentomino" --verbose --show-grid

  # List available patterns
  lifeterm-cli --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=50, help="Grid width (default: 50)")
    parser.add_argument("-H", "--height", type=int, default=25, help="Grid height (default: 25)")

    # Pattern configuration
    parser.add_argument("--pattern", type=str, help="Start from a single named pattern instead of the default board")
    parser.add_argument("--pattern-x", type=int, help="X offset for pattern placement (default: centered)")
    parser.add_argument("--pattern-y", type=int, help="Y offset for pattern placement (default: centered)")

    # Simulation configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=1000,
        help="Maximum generations to simulate (default: 1000)",
    )

    # Output configuration
    parser.add_argument("-v", "--verbose", action="store_true", help="Print detailed progress information")
    parser.add_argument("-g", "--show-grid", action="store_true", help="Display initial and final grid states")
    parser.add_argument("--show-every", action="store_true", help="Display the grid after every generation")
    parser.add_argument("--list-patterns", action="store_true", help="List all available patterns and exit")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    return parser


def format_finish_reason(reason: str) -> str:
    """Format the simulation finish reason for display."""
    if reason == "extinction":
        return "Population died out"
    if reason == "still_life":
        return "Reached a still life"
    if reason == "max_generations":
        return "Reached maximum generations"
    return reason


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Reason simulation ended
        stats: Simulation statistics
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation finished after {final_generation} generations")
    print(f"Reason: {format_finish_reason(reason)}")
    print(f"Population: {stats['initial_population']} -> {stats['population']}")

    if verbose:
        print(f"Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        if stats["bounding_box"] is not None:
            print(f"Bounding box: {stats['bounding_box']}")
        print(f"Duration: {stats['duration_seconds']:.3f}s ({stats['generations_per_second']:.0f} gen/s)")


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if args.pattern_x is not None and args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if args.pattern_y is not None and args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv=None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern:
        pattern = cli.pattern_library.get_pattern(args.pattern)
        if not pattern:
            available = cli.pattern_library.list_patterns()
            print(f"Error: Pattern '{args.pattern}' not found")
            print(f"Available patterns: {', '.join(available)}")
            print("Use --list-patterns to see detailed information")
            return 1

        # Auto-center pattern on any axis without an explicit offset
        width, height = pattern.get_size()
        if args.pattern_x is None:
            args.pattern_x = max(0, (args.width - width) // 2)
        if args.pattern_y is None:
            args.pattern_y = max(0, (args.height - height) // 2)
        if args.verbose:
            print(f"Placing pattern at ({args.pattern_x}, {args.pattern_y})")

    try:
        final_generation, reason, stats = cli.run_simulation(
            width=args.width,
            height=args.height,
            max_generations=args.max_generations,
            pattern=args.pattern,
            pattern_x=args.pattern_x or 0,
            pattern_y=args.pattern_y or 0,
            verbose=args.verbose,
            show_grid=args.show_grid,
            show_every=args.show_every,
        )

        print_results(final_generation, reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
