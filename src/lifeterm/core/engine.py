"""Transition engine for Conway's Game of Life (rule B3/S23)."""

import logging
from typing import Iterator, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .grid import Cell, Coordinate, Grid

logger = logging.getLogger(__name__)

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

BIRTH_COUNTS = frozenset({3})
SURVIVAL_COUNTS = frozenset({2, 3})


def neighbor_coordinates(grid: Grid, coordinate: Tuple[int, int]) -> Iterator[Coordinate]:
    """Yield the in-bounds neighbors of a cell.

    Edges do not wrap: corner cells have 3 neighbors, edge cells 5.

    Args:
        grid: Grid the cell belongs to
        coordinate: (x, y) of the cell

    Yields:
        Coordinates of the neighboring cells
    """
    x, y = coordinate
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < grid.width and 0 <= ny < grid.height:
            yield Coordinate(nx, ny)


def count_live_neighbors(grid: Grid, coordinate: Tuple[int, int]) -> int:
    """Count living neighbors of a single cell (0-8)."""
    return sum(1 for neighbor in neighbor_coordinates(grid, coordinate) if grid.cell_at(neighbor))


def next_cell_state(cell: Cell, alive_count: int) -> Cell:
    """Apply the B3/S23 rule to one cell.

    Args:
        cell: Current state of the cell
        alive_count: Number of living neighbors

    Returns:
        State of the cell in the next generation
    """
    if cell is Cell.ALIVE:
        return Cell.ALIVE if alive_count in SURVIVAL_COUNTS else Cell.DEAD
    return Cell.ALIVE if alive_count in BIRTH_COUNTS else Cell.DEAD


class TransitionEngine:
    """Computes the next generation of a Grid.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    The source grid is only read; the result is always a new Grid.
    """

    def __init__(self) -> None:
        self._kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    def count_all_neighbors(self, grid: Grid) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding makes cells outside the grid count as dead, which
        matches neighbor_coordinates() at the edges.

        Returns:
            Row-major int8 array of shape (height, width) with neighbor counts
        """
        source = torch.from_numpy(grid.cells.astype(np.float32)).reshape(1, 1, grid.height, grid.width)
        neighbors = F.conv2d(source, self._kernel, padding=1)
        counts = neighbors[0, 0].numpy().astype(np.int8)

        assert counts.shape == (grid.height, grid.width), f"neighbor counts {counts.shape} do not match grid"
        return counts

    def next_cell(self, grid: Grid, coordinate: Tuple[int, int]) -> Cell:
        """Compute the next state of a single cell from its neighborhood."""
        return next_cell_state(grid.cell_at(coordinate), count_live_neighbors(grid, coordinate))

    def advance(self, grid: Grid) -> Grid:
        """Compute the next generation.

        Args:
            grid: Current generation, left unmodified

        Returns:
            New Grid with the same dimensions
        """
        counts = self.count_all_neighbors(grid)
        assert counts.min() >= 0 and counts.max() <= 8, "neighbor count out of range"

        alive = grid.cells > 0
        birth = ~alive & np.isin(counts, tuple(BIRTH_COUNTS))
        survive = alive & np.isin(counts, tuple(SURVIVAL_COUNTS))

        next_grid = Grid.from_array(birth | survive)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Advanced %dx%d grid: population %d -> %d",
                grid.width,
                grid.height,
                grid.population,
                next_grid.population,
            )
        return next_grid
