"""Gameplay constants shared across the engine modules."""

VERTEBRAE_PER_SECOND: float = 1.0
GLUCOSE_LEVEL_AT_START: int = 10
INITIAL_SPEED: float = 20.0
MAX_TURN_RATE: float = 1.0

APPLES_PER_SECOND_PER_MEGAPIXEL: float = 0.8
APPLE_LIFE_TIME: float = 40.0
APPLE_SIZE_ALPHA: float = 2.0
APPLE_SIZE_BETA: float = 10.0
APPLE_SIZE_SCALE: float = 2.0

SIZE_OF_VERTEBRA_COEFFICIENT: float = 0.8
SIZE_PROFILE_HALF_WIDTH: float = 2.0

HEAD_RADIUS: float = 3.0
# Fresh vertebrae near the head are never counted as a bite.
BITE_DEAD_ZONE: int = int(VERTEBRAE_PER_SECOND + HEAD_RADIUS)

TARGET_MARKER_RADIUS: float = 10.0

GAME_OVER_TITLE: str = "GAME OVER"
GAME_OVER_PROMPT: str = "Press R or click to play again"
