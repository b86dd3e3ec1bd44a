"""Data exchanged with the host frame driver once per frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .utils import Vec2


@dataclass
class FrameInput:
    """Everything the simulation needs from the host for one frame."""

    time: float
    frame_time: float
    target: Vec2
    width: float
    height: float
    restart: bool = False

    def __post_init__(self) -> None:
        self.frame_time = max(0.0, self.frame_time)


@dataclass
class AppleSprite:
    position: Vec2
    radius: float
    fresh: bool


@dataclass
class VertebraSprite:
    position: Vec2
    radius: float


@dataclass
class HeadMarker:
    position: Vec2
    radius: float


@dataclass
class HeadingLine:
    """Line from the head to where the head will be one second from now."""

    start: Vec2
    end: Vec2


@dataclass
class GameOverScreen:
    score: int
    title: str
    prompt: str

    @property
    def score_text(self) -> str:
        return f"Score: {self.score}"


@dataclass
class FrameOutput:
    """Draw requests produced by one frame of the simulation."""

    target: Vec2
    apples: List[AppleSprite] = field(default_factory=list)
    vertebrae: List[VertebraSprite] = field(default_factory=list)
    head: Optional[HeadMarker] = None
    heading: Optional[HeadingLine] = None
    game_over: Optional[GameOverScreen] = None
