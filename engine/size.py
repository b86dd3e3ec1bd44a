"""Thickness profile of the snake body.

The radius of a vertebra follows a bell curve along the body: thin at the head
and at the tail, thickest in the middle. The curve is scaled by the body length
and compressed with a cube root so that long snakes stay reasonably slim. Both
the renderer and the collision tests use :func:`size_of_vertebra`, so hit boxes
are exactly the drawn circles.
"""

from __future__ import annotations

from . import constants, utils


def size_of_vertebra(index: int, total: int) -> float:
    """Return the radius of the vertebra at ``index`` in a body of ``total`` vertebrae."""

    if total < 1:
        raise ValueError("A snake body always has at least one vertebra")
    if not 0 <= index < total:
        raise ValueError(f"Vertebra index {index} outside body of length {total}")
    half_width = constants.SIZE_PROFILE_HALF_WIDTH
    argument = (index + 1) / total * 2 * half_width - half_width
    return (utils.normal_pdf(argument) * total) ** (1.0 / 3.0) * constants.SIZE_OF_VERTEBRA_COEFFICIENT


def reference_size(total: int) -> float:
    """Radius of the mid-body vertebra, used as the snake's mouth when eating."""

    return size_of_vertebra(total // 2, total)
