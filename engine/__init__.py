"""Simulation core of the Snakes game."""

__all__ = [
    "apple",
    "collision",
    "constants",
    "frame",
    "game",
    "main",
    "size",
    "snake",
    "utils",
    "world",
]
