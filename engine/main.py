"""Headless runner that drives the simulation with a scripted target."""

from __future__ import annotations

import argparse
import logging
import math
import random
from typing import Optional

from .frame import FrameInput
from .game import Game, ScoreCarryOver
from .utils import Vec2


def circling_target(time: float, width: float, height: float) -> Vec2:
    """A pointer that slowly sweeps a Lissajous curve across the play area."""

    return Vec2(
        width / 2.0 + width / 3.0 * math.cos(time * 0.3),
        height / 2.0 + height / 3.0 * math.sin(time * 0.7),
    )


def run_headless(
    frames: int,
    fps: float = 60.0,
    width: float = 800.0,
    height: float = 600.0,
    seed: Optional[int] = None,
    carry_over: ScoreCarryOver = ScoreCarryOver.KEEP_LAST,
) -> Game:
    """Advance a game for ``frames`` frames of ``1 / fps`` seconds each.

    The game is restarted on the frame after every game over, so long runs keep
    playing rounds back to back.
    """

    if fps <= 0:
        raise ValueError("fps must be positive")
    frame_time = 1.0 / fps
    game = Game(random.Random(seed), width, height, carry_over)
    for index in range(1, frames + 1):
        now = index * frame_time
        frame = FrameInput(
            time=now,
            frame_time=frame_time,
            target=circling_target(now, width, height),
            width=width,
            height=height,
            restart=game.over,
        )
        game.advance(frame)
    return game


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the snake simulation without a window")
    parser.add_argument("--frames", type=int, default=36_000, help="Number of frames to simulate")
    parser.add_argument("--fps", type=float, default=60.0, help="Simulated frame rate")
    parser.add_argument("--width", type=float, default=800.0, help="Play area width")
    parser.add_argument("--height", type=float, default=600.0, help="Play area height")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the random stream")
    parser.add_argument(
        "--carry-over",
        choices=[rule.value for rule in ScoreCarryOver],
        default=ScoreCarryOver.KEEP_LAST.value,
        help="Score rule applied when a new round starts",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    game = run_headless(
        args.frames,
        fps=args.fps,
        width=args.width,
        height=args.height,
        seed=args.seed,
        carry_over=ScoreCarryOver(args.carry_over),
    )
    snake = game.world.snake
    logging.info(
        "Simulated %d frames over %d rounds: score %d, snake length %d, %d apples alive",
        args.frames,
        game.rounds,
        game.score,
        snake.length,
        len(game.world.apples),
    )


if __name__ == "__main__":
    main()
