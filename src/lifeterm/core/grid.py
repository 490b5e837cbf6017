"""Grid data structure for the Game of Life."""

from enum import Enum
from numbers import Integral
from typing import Iterable, List, NamedTuple, Optional, Tuple
import numpy as np


class Cell(Enum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1

    def __bool__(self) -> bool:
        return self is Cell.ALIVE


class Coordinate(NamedTuple):
    """Cell address: x is the column, y is the row."""

    x: int
    y: int


class Grid:
    """A fixed-size, bounded 2D grid of cells for one generation.

    Cells are stored row-major in a numpy array of shape (height, width).
    The array is write-protected: every generation is a new Grid, the
    previous one is never modified.
    """

    def __init__(self, width: int, height: int, live_coordinates: Iterable[Tuple[int, int]] = ()) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)
            live_coordinates: (x, y) coordinates of the cells that start alive

        Raises:
            ValueError: If a dimension is < 1 or a coordinate is not an in-bounds integer pair
        """
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be at least 1x1, got {width}x{height}")

        cells = np.zeros((height, width), dtype=np.int8)
        for x, y in live_coordinates:
            if not (isinstance(x, Integral) and isinstance(y, Integral)):
                raise ValueError(f"Coordinates ({x!r}, {y!r}) must be integers")
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(f"Coordinates ({x}, {y}) out of bounds for {width}x{height} grid")
            cells[y, x] = 1

        self._init_from_array(cells)

    def _init_from_array(self, cells: np.ndarray) -> None:
        # Backed by immutable bytes, so the writeable flag can never be turned back on
        frozen = np.frombuffer(cells.astype(np.int8).tobytes(), dtype=np.int8).reshape(cells.shape)
        self._cells = frozen
        self._height, self._width = frozen.shape

    @classmethod
    def from_array(cls, data) -> "Grid":
        """Create a grid from a row-major 2D array of 0/1 values.

        Args:
            data: Array-like of shape (height, width); non-zero means alive

        Returns:
            New Grid instance

        Raises:
            ValueError: If the data is not a non-empty 2D array
        """
        arr = np.asarray(data)
        if arr.ndim != 2 or arr.shape[0] < 1 or arr.shape[1] < 1:
            raise ValueError(f"Expected a non-empty 2D array, got shape {arr.shape}")

        grid = cls.__new__(cls)
        grid._init_from_array((arr != 0).astype(np.int8))
        return grid

    @classmethod
    def from_text(cls, text: str, alive: str = "o", dead: str = ".") -> "Grid":
        """Parse a text dump produced by to_text().

        Args:
            text: One line per row, one glyph per cell
            alive: Glyph used for live cells
            dead: Glyph used for dead cells

        Returns:
            New Grid instance

        Raises:
            ValueError: On ragged rows, unknown glyphs or empty input
        """
        rows = text.strip("\n").splitlines()
        if not rows or not rows[0]:
            raise ValueError("Cannot build a grid from empty text")

        width = len(rows[0])
        live = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has length {len(row)}, expected {width}")
            for x, glyph in enumerate(row):
                if glyph == alive:
                    live.append((x, y))
                elif glyph != dead:
                    raise ValueError(f"Unknown glyph {glyph!r} at ({x}, {y})")

        return cls(width, len(rows), live)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Read-only row-major cell array of shape (height, width)."""
        return self._cells.view()

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def contains(self, coordinate: Tuple[int, int]) -> bool:
        """Check whether (x, y) lies inside the grid."""
        x, y = coordinate
        return 0 <= x < self._width and 0 <= y < self._height

    def cell_at(self, coordinate: Tuple[int, int]) -> Cell:
        """Get the state of a cell.

        Args:
            coordinate: (x, y) of the cell

        Returns:
            Cell.ALIVE or Cell.DEAD

        Raises:
            IndexError: If the coordinate is out of bounds
        """
        x, y = coordinate
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")

        return Cell.ALIVE if self._cells[y, x] else Cell.DEAD

    def live_cells(self) -> List[Coordinate]:
        """Get coordinates of all living cells in row-major order.

        Returns:
            List of Coordinates, y ascending then x ascending
        """
        ys, xs = np.nonzero(self._cells)
        return [Coordinate(int(x), int(y)) for y, x in zip(ys, xs)]

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        ys, xs = np.nonzero(self._cells)
        if len(xs) == 0:
            return None

        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def to_text(self, alive: str = "o", dead: str = ".") -> str:
        """Render the grid as text, one line per row."""
        return "\n".join("".join(alive if value else dead for value in row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid({self._width}, {self._height}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as 'o' and dead as '.'."""
        return self.to_text()
