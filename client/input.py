"""Translate local input into the per-frame target and restart edge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from engine.utils import Vec2


@dataclass
class InputState:
    """Represents the control state handed to the simulation."""

    target: Vec2
    restart: bool


class InputManager:
    """Track the pointer and turn a held restart control into a one-frame edge."""

    def __init__(self) -> None:
        self._restart_held = False
        self._last_state = InputState(Vec2(0.0, 0.0), False)

    def update(self, mouse_pos: Tuple[float, float], restart_held: bool) -> InputState:
        restart = restart_held and not self._restart_held
        self._restart_held = restart_held
        self._last_state = InputState(Vec2(float(mouse_pos[0]), float(mouse_pos[1])), restart)
        return self._last_state
