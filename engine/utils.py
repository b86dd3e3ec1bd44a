"""Utility primitives used by the simulation core."""

from __future__ import annotations

from dataclasses import dataclass
import math
import random

from scipy import stats


@dataclass
class Vec2:
    """A light-weight two dimensional vector used for geometry operations.

    Every operation returns a new vector, so instances can be shared freely
    between the spine, the head and the draw requests.
    """

    x: float
    y: float

    def copy(self) -> "Vec2":
        """Return a shallow copy of the vector."""

        return Vec2(self.x, self.y)

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def length(self) -> float:
        """Return the Euclidean length of the vector."""

        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Vec2") -> float:
        """Return the distance between this vector and ``other``."""

        return (self - other).length()

    def rotated(self, angle: float) -> "Vec2":
        """Return the vector rotated counter-clockwise by ``angle`` radians."""

        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vec2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def to_tuple(self) -> tuple[float, float]:
        """Return the vector as an ``(x, y)`` tuple."""

        return self.x, self.y


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into the closed interval ``[low, high]``."""

    return max(low, min(high, value))


_STANDARD_NORMAL = stats.norm(0.0, 1.0)


def normal_pdf(x: float) -> float:
    """Density of the standard normal distribution at ``x``."""

    return float(_STANDARD_NORMAL.pdf(x))


def beta_distribution(alpha: float, beta: float):
    """Return a frozen beta distribution with validated shape parameters.

    SciPy answers ``nan`` for invalid shapes instead of raising, so the check
    happens here, once, when the distribution is built.
    """

    if not (alpha > 0 and beta > 0):
        raise ValueError(f"Beta shape parameters must be positive, got ({alpha}, {beta})")
    return stats.beta(alpha, beta)


def has_room_for(width: float, height: float) -> bool:
    """Return ``True`` if the play area is large enough to place things in."""

    return width > 1 and height > 1


def random_point_in_area(rng: random.Random, width: float, height: float) -> Vec2:
    """Return a uniformly random point inside the ``width`` x ``height`` play area."""

    if not has_room_for(width, height):
        raise ValueError(f"Play area too small: {width}x{height}")
    return Vec2(rng.uniform(1.0, width), rng.uniform(1.0, height))
