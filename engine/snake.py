"""Snake entity implementation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
import math
from typing import Deque, List

from . import constants, size, utils

FALLBACK_HEADING = utils.Vec2(1.0, 0.0)


def compute_steering(position: utils.Vec2, velocity: utils.Vec2, target: utils.Vec2) -> float:
    """Return the turn rate that steers a snake at ``position`` toward ``target``.

    The target is expressed in the snake's own frame of reference, where the
    heading is the forward axis. The turn rate is the negated signed angle of
    the target in that frame, clamped to the maximum turn rate, so the snake
    turns at full rate toward any clearly off-axis target and goes straight when
    the target is dead ahead. A positive rate turns counter-clockwise.
    """

    heading = velocity if velocity.length() > 0 else FALLBACK_HEADING
    to_target = target - position
    # Rotate so that the heading lies on the +y axis.
    target_in_first_person = to_target.rotated(math.atan2(heading.x, heading.y))
    angle_to_target = -math.atan2(target_in_first_person.x, target_in_first_person.y)
    return utils.clamp(angle_to_target, -constants.MAX_TURN_RATE, constants.MAX_TURN_RATE)


@dataclass
class Snake:
    """A snake steered toward a target, growing one vertebra per growth tick."""

    head: utils.Vec2
    velocity: utils.Vec2 = field(default_factory=lambda: utils.Vec2(constants.INITIAL_SPEED, 0.0))
    glucose_level: int = constants.GLUCOSE_LEVEL_AT_START
    time_of_last_redraw: float = 0.0

    def __post_init__(self) -> None:
        self.spine: Deque[utils.Vec2] = deque([self.head.copy()])

    @property
    def length(self) -> int:
        """Number of vertebrae in the spine."""

        return len(self.spine)

    @property
    def growth_period(self) -> float:
        return 1.0 / constants.VERTEBRAE_PER_SECOND

    def steer(self, target: utils.Vec2, frame_time: float) -> None:
        """Rotate the velocity toward ``target``; the speed is left untouched."""

        turn_rate = compute_steering(self.head, self.velocity, target)
        self.velocity = self.velocity.rotated(turn_rate * frame_time)

    def move(self, frame_time: float) -> None:
        self.head = self.head + self.velocity * frame_time

    def feed(self, amount: int) -> None:
        """Store ``amount`` of glucose to be spent on future growth ticks."""

        self.glucose_level += amount

    def is_growth_due(self, current_time: float) -> bool:
        return current_time > self.time_of_last_redraw + self.growth_period

    def grow(self) -> None:
        """Lay down a vertebra at the head, spending glucose or dropping the tail."""

        self.spine.appendleft(self.head.copy())
        if self.glucose_level > 0:
            self.glucose_level -= 1
        else:
            self.spine.pop()

    def update(self, target: utils.Vec2, frame_time: float, current_time: float) -> bool:
        """Advance the snake by one frame.

        Returns ``True`` if a growth tick happened during the frame.
        """

        self.steer(target, frame_time)
        self.move(frame_time)
        if not self.is_growth_due(current_time):
            return False
        self.grow()
        # Stay on the growth time grid; missed ticks are dropped, not replayed.
        elapsed_periods = math.floor((current_time - self.time_of_last_redraw) / self.growth_period)
        self.time_of_last_redraw += elapsed_periods * self.growth_period
        return True

    def head_circle(self) -> tuple[utils.Vec2, float]:
        """Return the head circle used for bite detection."""

        return self.head, constants.HEAD_RADIUS

    def body_circles(self) -> List[tuple[utils.Vec2, float]]:
        """Return all vertebrae as circles, front to back."""

        total = self.length
        return [(point, size.size_of_vertebra(index, total)) for index, point in enumerate(self.spine)]
