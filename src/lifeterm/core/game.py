"""Simulation driver that steps a grid through generations."""

import logging
from typing import List, Optional, Tuple

from .engine import TransitionEngine
from .grid import Coordinate, Grid

logger = logging.getLogger(__name__)


class GameOfLife:
    """Conway's Game of Life simulation.

    Owns the current Grid and replaces it with the engine's output on every
    step. Only the current generation is kept.
    """

    def __init__(self, grid: Grid, engine: Optional[TransitionEngine] = None) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The starting generation
            engine: Transition engine to use (a new one by default)
        """
        self._grid = grid
        self.engine = engine or TransitionEngine()
        self._generation = 0

    @property
    def grid(self) -> Grid:
        """Current generation."""
        return self._grid

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    def live_cells(self) -> List[Coordinate]:
        return self._grid.live_cells()

    def step(self) -> Grid:
        """Advance the simulation by one generation.

        Returns:
            The new current grid
        """
        self._grid = self.engine.advance(self._grid)
        self._generation += 1
        return self._grid

    def run(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it dies out, stops changing, or hits the limit.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'extinction', 'still_life', 'max_generations'
        """
        for _ in range(max_generations):
            previous = self._grid
            self.step()

            if self.population == 0:
                logger.info("Extinction at generation %d", self._generation)
                return self._generation, "extinction"

            if self._grid == previous:
                logger.info("Still life reached at generation %d", self._generation)
                return self._generation, "still_life"

        return self._generation, "max_generations"

    def reset(self, grid: Grid) -> None:
        """Start over from a new grid.

        Args:
            grid: The new starting generation
        """
        self._grid = grid
        self._generation = 0
