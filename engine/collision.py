"""Collision helpers for the simulation core."""

from __future__ import annotations

from . import constants, size
from .apple import Apple
from .snake import Snake
from .utils import Vec2


def collides(a_center: Vec2, a_radius: float, b_center: Vec2, b_radius: float) -> bool:
    """Return ``True`` if two circles overlap.

    Touching circles do not overlap: the distance between the centres has to be
    strictly below the sum of the radii.
    """

    return a_center.distance_to(b_center) < a_radius + b_radius


def does_apple_collide_with_snake(apple: Apple, snake: Snake) -> bool:
    """Return ``True`` if ``apple`` overlaps any vertebra of ``snake``."""

    return any(
        collides(apple.position, apple.size, vertebra, radius)
        for vertebra, radius in snake.body_circles()
    )


def is_apple_eaten_by_snake(apple: Apple, snake: Snake) -> bool:
    """Return ``True`` if the snake's head reaches ``apple``.

    The mouth is sized like the mid-body vertebra rather than the thin vertebra
    right behind the head.
    """

    return collides(apple.position, apple.size, snake.head, size.reference_size(snake.length))


def does_snake_bite_itself(snake: Snake) -> bool:
    """Return ``True`` if the head overlaps a vertebra beyond the dead zone."""

    head, head_radius = snake.head_circle()
    for index, (vertebra, radius) in enumerate(snake.body_circles()):
        if index <= constants.BITE_DEAD_ZONE:
            continue
        if collides(head, head_radius, vertebra, radius):
            return True
    return False
