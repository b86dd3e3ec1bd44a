"""Entry point for the pygame based client."""

from __future__ import annotations

import argparse
import asyncio
import logging
import random

import pygame

from engine.frame import FrameInput
from engine.game import Game, ScoreCarryOver

from .input import InputManager
from .render import Renderer

RESTART_KEYS = (pygame.K_r, pygame.K_SPACE, pygame.K_RETURN)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snakes")
    parser.add_argument("--width", type=int, default=800, help="Window width")
    parser.add_argument("--height", type=int, default=600, help="Window height")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the random stream")
    parser.add_argument(
        "--carry-over",
        choices=[rule.value for rule in ScoreCarryOver],
        default=ScoreCarryOver.KEEP_LAST.value,
        help="Score rule applied when a new round starts",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args()


def restart_held() -> bool:
    keys = pygame.key.get_pressed()
    return any(keys[key] for key in RESTART_KEYS) or pygame.mouse.get_pressed(num_buttons=3)[0]


async def run_client(args: argparse.Namespace) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption("Snakes")
        pygame.mouse.set_visible(False)
        renderer = Renderer(screen)
        clock = pygame.time.Clock()
        input_manager = InputManager()

        game = Game(
            random.Random(args.seed),
            screen.get_width(),
            screen.get_height(),
            ScoreCarryOver(args.carry_over),
            start_time=pygame.time.get_ticks() / 1000.0,
        )
        running = True

        while running:
            frame_time = clock.tick(args.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            input_state = input_manager.update(pygame.mouse.get_pos(), restart_held())
            frame = FrameInput(
                time=pygame.time.get_ticks() / 1000.0,
                frame_time=frame_time,
                target=input_state.target,
                width=screen.get_width(),
                height=screen.get_height(),
                restart=input_state.restart,
            )
            output = game.advance(frame)

            renderer.draw(output)
            renderer.present()
            await asyncio.sleep(0)
    finally:
        pygame.quit()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    asyncio.run(run_client(args))


if __name__ == "__main__":
    main()
