"""Fit tetrominoes into the smallest possible square."""

__version__ = "1.0.0"