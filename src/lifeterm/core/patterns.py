"""Common Conway's Game of Life patterns used to seed a grid."""

from typing import Dict, Iterable, List, Optional, Tuple

from .grid import Coordinate, Grid


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (width, height)
        """
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_x, min_y, _, _ = self.get_bounding_box()
        return Pattern(self.name, [(x - min_x, y - min_y) for x, y in self.cells], self.description)

    def translate(self, offset_x: int = 0, offset_y: int = 0) -> List[Coordinate]:
        """Get the pattern's cells shifted by an offset."""
        return [Coordinate(x + offset_x, y + offset_y) for x, y in self.cells]

    def cells_within(self, width: int, height: int, offset_x: int = 0, offset_y: int = 0) -> List[Coordinate]:
        """Get the shifted cells that fall inside a width x height grid.

        Cells outside the grid are dropped, so a pattern can be placed
        partly off-screen on a small terminal.
        """
        return [
            coord for coord in self.translate(offset_x, offset_y) if 0 <= coord.x < width and 0 <= coord.y < height
        ]

    def to_grid(self, width: int, height: int, offset_x: int = 0, offset_y: int = 0) -> Grid:
        """Build a grid containing only this pattern (clipped to the grid)."""
        return Grid(width, height, self.cells_within(width, height, offset_x, offset_y))

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Manages a collection of named patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Beehive still life"))
        self.add_pattern(
            Pattern("Loaf", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)], "Loaf still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))
        self.add_pattern(Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))
        self.add_pattern(Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator"))
        self.add_pattern(Pattern("Pulsar", _pulsar_cells(), "Period-3 oscillator"))

        # Spaceships
        self.add_pattern(Pattern("Glider", [(2, 0), (2, 1), (2, 2), (1, 2), (0, 1)], "Smallest spaceship, period-4"))
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Diehard",
                [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)],
                "Dies after exactly 130 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Acorn",
                [(1, 0), (3, 1), (0, 2), (1, 2), (4, 2), (5, 2), (6, 2)],
                "Takes 5206 generations to stabilize",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any pattern with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, or None if not found."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories = {
            "Still Life": ["Block", "Beehive", "Loaf"],
            "Oscillators": ["Blinker", "Toad", "Beacon", "Pulsar"],
            "Spaceships": ["Glider", "Lightweight Spaceship"],
            "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
            "Custom": [],
        }

        all_builtin = set()
        for cat_patterns in categories.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        return {cat: patterns for cat, patterns in categories.items() if patterns}

    def compose(self, placements: Iterable[Tuple[str, int, int]]) -> List[Coordinate]:
        """Combine several patterns into one list of live coordinates.

        Args:
            placements: (pattern_name, offset_x, offset_y) entries

        Returns:
            Coordinates of all placed cells, duplicates removed, in placement order

        Raises:
            KeyError: If a pattern name is unknown
        """
        seen = set()
        cells = []
        for name, offset_x, offset_y in placements:
            pattern = self._patterns.get(name)
            if pattern is None:
                raise KeyError(f"Unknown pattern '{name}'")
            for coord in pattern.translate(offset_x, offset_y):
                if coord not in seen:
                    seen.add(coord)
                    cells.append(coord)
        return cells


def _pulsar_cells() -> List[Tuple[int, int]]:
    # One quadrant mirrored across both axes of the 13x13 box
    quadrant = [(2, 0), (3, 0), (4, 0), (0, 2), (0, 3), (0, 4), (5, 2), (5, 3), (5, 4), (2, 5), (3, 5), (4, 5)]
    cells = set()
    for x, y in quadrant:
        cells.update({(x, y), (12 - x, y), (x, 12 - y), (12 - x, 12 - y)})
    return sorted(cells, key=lambda c: (c[1], c[0]))


# Blinker, glider and pulsar: the board the terminal view starts with
DEFAULT_SEED: Tuple[Tuple[str, int, int], ...] = (
    ("Blinker", 0, 0),
    ("Glider", 4, 0),
    ("Pulsar", 5, 11),
)
