"""Pygame based renderer for the draw requests of a frame."""

from __future__ import annotations

from typing import Iterable

import pygame

from engine import constants
from engine.frame import AppleSprite, FrameOutput, GameOverScreen

BLACK = (0, 0, 0)
GREEN = (0, 228, 48)
RED = (230, 41, 55)
BROWN = (127, 106, 79)
WHITE = (255, 255, 255)


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.title_font = pygame.font.SysFont("arial", 48, bold=True)
        self.font = pygame.font.SysFont("arial", 24)
        self.background_color = BLACK

    def clear(self) -> None:
        self.screen.fill(self.background_color)

    def draw(self, output: FrameOutput) -> None:
        self.clear()
        if output.game_over is not None:
            self.draw_game_over(output.game_over)
        else:
            self.draw_apples(output.apples)
            self.draw_snake(output)
        self.draw_target(output)

    def draw_apples(self, apples: Iterable[AppleSprite]) -> None:
        for apple in apples:
            color = RED if apple.fresh else BROWN
            pygame.draw.circle(self.screen, color, apple.position.to_tuple(), apple.radius)

    def draw_snake(self, output: FrameOutput) -> None:
        for vertebra in output.vertebrae:
            pygame.draw.circle(self.screen, GREEN, vertebra.position.to_tuple(), vertebra.radius)
        if output.head is not None:
            pygame.draw.circle(self.screen, GREEN, output.head.position.to_tuple(), output.head.radius, width=1)
        if output.heading is not None:
            pygame.draw.line(self.screen, RED, output.heading.start.to_tuple(), output.heading.end.to_tuple(), 1)

    def draw_target(self, output: FrameOutput) -> None:
        pygame.draw.circle(
            self.screen, GREEN, output.target.to_tuple(), constants.TARGET_MARKER_RADIUS, width=1
        )

    def draw_game_over(self, screen: GameOverScreen) -> None:
        center_x = self.screen.get_width() / 2
        center_y = self.screen.get_height() / 2
        lines = [
            (self.title_font, screen.title, RED),
            (self.font, screen.score_text, WHITE),
            (self.font, screen.prompt, WHITE),
        ]
        y = center_y - 60
        for font, text, color in lines:
            surface = font.render(text, True, color)
            rect = surface.get_rect(center=(center_x, y))
            self.screen.blit(surface, rect)
            y += rect.height + 12

    def present(self) -> None:
        pygame.display.flip()
