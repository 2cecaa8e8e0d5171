"""Mancala (Kalah 6x4) rules engine and heuristic player."""

__version__ = "0.1.0"
