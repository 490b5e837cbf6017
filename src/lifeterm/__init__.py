"""Conway's Game of Life on a bounded grid, rendered in the terminal."""

__version__ = "0.1.0"

from .core.grid import Cell, Coordinate, Grid
from .core.engine import TransitionEngine
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Coordinate", "Grid", "TransitionEngine", "GameOfLife", "Pattern", "PatternLibrary"]
