"""Score persistence and ranking for Tetraj."""

__version__ = "0.1.0"
