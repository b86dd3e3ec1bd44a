"""Play / game-over state machine wrapped around the world simulation."""

from __future__ import annotations

import enum
import logging
import random
from typing import Optional

from . import constants
from .frame import FrameInput, FrameOutput, GameOverScreen
from .world import World


class Mode(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class ScoreCarryOver(enum.Enum):
    """What happens to the score when a new round starts."""

    KEEP_LAST = "keep-last"
    KEEP_BEST = "keep-best"
    RESET = "reset"


class Game:
    """Composes the world, the score and the mode into a restartable game.

    :meth:`advance` is the only entry point the host frame driver needs: it
    takes the inputs of one frame, runs the update that belongs to the current
    mode and returns the draw requests for that frame.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        width: float = 800.0,
        height: float = 600.0,
        carry_over: ScoreCarryOver = ScoreCarryOver.KEEP_LAST,
        start_time: float = 0.0,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.carry_over = carry_over
        self.mode = Mode.PLAYING
        self.score = 0
        self.rounds = 0
        self.world = self._new_world(width, height, start_time)

    @property
    def over(self) -> bool:
        return self.mode is Mode.GAME_OVER

    def _new_world(self, width: float, height: float, start_time: float) -> World:
        self.rounds += 1
        logging.info("Round %d started on a %gx%g play area", self.rounds, width, height)
        return World(self.rng, width, height, start_time)

    def restart(self, frame: FrameInput) -> None:
        """Start a fresh round with a new snake and a new set of apples."""

        if self.carry_over is ScoreCarryOver.RESET:
            self.score = 0
        self.world = self._new_world(frame.width, frame.height, frame.time)
        self.mode = Mode.PLAYING

    def end_round(self) -> None:
        length = self.world.snake.length
        if self.carry_over is ScoreCarryOver.KEEP_BEST:
            self.score = max(self.score, length)
        else:
            self.score = length
        self.mode = Mode.GAME_OVER
        logging.info("Game over after round %d: snake length %d, score %d", self.rounds, length, self.score)

    def game_over_screen(self) -> GameOverScreen:
        return GameOverScreen(self.score, constants.GAME_OVER_TITLE, constants.GAME_OVER_PROMPT)

    def advance(self, frame: FrameInput) -> FrameOutput:
        """Run one frame and return its draw requests."""

        if self.mode is Mode.GAME_OVER:
            if not frame.restart:
                return FrameOutput(target=frame.target, game_over=self.game_over_screen())
            self.restart(frame)

        self.world.resize(frame.width, frame.height)
        if self.world.update(frame.target, frame.frame_time, frame.time):
            self.end_round()
            return FrameOutput(target=frame.target, game_over=self.game_over_screen())
        return self.world.render(frame.target, frame.time)
