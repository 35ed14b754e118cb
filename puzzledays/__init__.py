"""Solvers for a series of daily programming puzzles, one module per day."""

__version__ = "0.1.0"