"""A single round of play: the snake, the live apples and their updates."""

from __future__ import annotations

import logging
import random
from typing import List

from . import collision, constants, size, utils
from .apple import Apple, spawn_probability
from .frame import AppleSprite, FrameOutput, HeadingLine, HeadMarker, VertebraSprite
from .snake import Snake
from .utils import Vec2


class World:
    """Holds the entities of one round and advances them on every frame."""

    def __init__(self, rng: random.Random, width: float, height: float, start_time: float = 0.0) -> None:
        self.rng = rng
        self.width = width
        self.height = height
        self.snake = Snake(head=Vec2(width / 2.0, height / 2.0), time_of_last_redraw=start_time)
        self.apples: List[Apple] = []
        if utils.has_room_for(width, height):
            self.apples.append(Apple.spawn(rng, start_time, width, height))

    def resize(self, width: float, height: float) -> None:
        """Follow the play area when the host window changes size."""

        self.width = width
        self.height = height

    def spawn_apples(self, current_time: float, frame_time: float) -> None:
        """Possibly add one apple, unless it would land on the snake."""

        if not utils.has_room_for(self.width, self.height):
            return
        probability = spawn_probability(frame_time, self.width, self.height)
        if self.rng.random() >= probability:
            return
        apple = Apple.spawn(self.rng, current_time, self.width, self.height)
        if collision.does_apple_collide_with_snake(apple, self.snake):
            logging.debug("Discarded apple spawned on the snake at %s", apple.position.to_tuple())
            return
        logging.debug("Spawned apple of size %d at %s", apple.size, apple.position.to_tuple())
        self.apples.append(apple)

    def consume_apples(self, current_time: float) -> None:
        """Remove eaten and expired apples in a single pass."""

        kept: List[Apple] = []
        for apple in self.apples:
            if collision.is_apple_eaten_by_snake(apple, self.snake):
                self.snake.feed(apple.size)
                logging.debug("Apple of size %d eaten, glucose %d", apple.size, self.snake.glucose_level)
            elif apple.is_expired(current_time):
                logging.debug("Apple of size %d expired", apple.size)
            else:
                kept.append(apple)
        self.apples = kept

    def update(self, target: Vec2, frame_time: float, current_time: float) -> bool:
        """Advance the round by one frame.

        Returns ``True`` if the snake bit itself during the frame.
        """

        self.snake.update(target, frame_time, current_time)
        self.spawn_apples(current_time, frame_time)
        self.consume_apples(current_time)
        return collision.does_snake_bite_itself(self.snake)

    def render(self, target: Vec2, current_time: float) -> FrameOutput:
        """Return the draw requests describing the current state of the round."""

        snake = self.snake
        return FrameOutput(
            target=target,
            apples=[
                AppleSprite(apple.position, float(apple.size), apple.is_fresh(current_time))
                for apple in self.apples
            ],
            vertebrae=[
                VertebraSprite(vertebra, size.size_of_vertebra(index, snake.length))
                for index, vertebra in enumerate(snake.spine)
            ],
            head=HeadMarker(snake.head, constants.HEAD_RADIUS),
            heading=HeadingLine(snake.head, snake.head + snake.velocity),
        )
