"""Apple entity definition."""

from __future__ import annotations

from dataclasses import dataclass
import random

from . import constants, utils

_SIZE_DISTRIBUTION = utils.beta_distribution(constants.APPLE_SIZE_ALPHA, constants.APPLE_SIZE_BETA)


def sample_apple_size(rng: random.Random) -> int:
    """Draw an apple size: mostly 1 or 2, occasionally much larger."""

    density = float(_SIZE_DISTRIBUTION.pdf(rng.random()))
    return max(1, round(density * constants.APPLE_SIZE_SCALE))


def spawn_probability(frame_time: float, width: float, height: float) -> float:
    """Probability that an apple spawn is attempted during a frame.

    The rate is expressed per megapixel of play area so the apple density does
    not depend on the window resolution.
    """

    megapixels = width * height / 1_000_000
    rate = constants.APPLES_PER_SECOND_PER_MEGAPIXEL * megapixels
    return utils.clamp(frame_time * rate, 0.0, 1.0)


@dataclass
class Apple:
    """A piece of food that feeds its size to the snake as glucose."""

    time_of_creation: float
    size: int
    position: utils.Vec2

    @classmethod
    def spawn(cls, rng: random.Random, current_time: float, width: float, height: float) -> "Apple":
        """Create an apple at a random position of the play area with a random size."""

        return cls(
            time_of_creation=current_time,
            size=sample_apple_size(rng),
            position=utils.random_point_in_area(rng, width, height),
        )

    def age(self, current_time: float) -> float:
        return current_time - self.time_of_creation

    def is_expired(self, current_time: float) -> bool:
        """Return ``True`` once the apple has lived for its whole life time."""

        return self.age(current_time) >= constants.APPLE_LIFE_TIME

    def is_fresh(self, current_time: float) -> bool:
        """Return ``True`` during the first half of the apple's life."""

        return self.age(current_time) < constants.APPLE_LIFE_TIME / 2
