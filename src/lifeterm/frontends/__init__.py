"""Frontend interfaces for the Game of Life."""

from .terminal import TerminalGameOfLife
from .cli import CLIGameOfLife

__all__ = ["TerminalGameOfLife", "CLIGameOfLife"]
