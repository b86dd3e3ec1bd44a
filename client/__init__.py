"""Pygame client package for the Snakes game."""

__all__ = [
    "input",
    "main",
    "render",
]
