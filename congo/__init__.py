"""Congo board game engine: board, move generation, evaluation, search and a line-protocol command."""

__version__ = "0.1.0"