"""Core simulation logic."""

from .grid import Cell, Coordinate, Grid
from .engine import TransitionEngine
from .game import GameOfLife
from .patterns import DEFAULT_SEED, Pattern, PatternLibrary

__all__ = ["Cell", "Coordinate", "Grid", "TransitionEngine", "GameOfLife", "Pattern", "PatternLibrary", "DEFAULT_SEED"]
