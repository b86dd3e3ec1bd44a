import random

import pytest

from engine import constants
from engine.apple import Apple
from engine.utils import Vec2
from engine.world import World


@pytest.fixture
def world():
    world = World(random.Random(1), 800, 600)
    world.apples = []
    return world


def test_new_world_starts_with_one_apple_and_centred_snake():
    world = World(random.Random(1), 800, 600, start_time=3.0)

    assert len(world.apples) == 1
    assert world.apples[0].time_of_creation == 3.0
    assert world.snake.head.to_tuple() == (400.0, 300.0)
    assert world.snake.time_of_last_redraw == 3.0


def test_uneaten_apple_expires_exactly_at_its_life_time(world):
    world.apples = [Apple(time_of_creation=0.0, size=1, position=Vec2(10.0, 10.0))]

    world.consume_apples(constants.APPLE_LIFE_TIME - 0.001)
    assert len(world.apples) == 1

    world.consume_apples(constants.APPLE_LIFE_TIME)
    assert world.apples == []
    assert world.snake.glucose_level == constants.GLUCOSE_LEVEL_AT_START


def test_eaten_apple_feeds_the_snake(world):
    world.apples = [
        Apple(time_of_creation=0.0, size=3, position=Vec2(401.0, 300.0)),
        Apple(time_of_creation=0.0, size=1, position=Vec2(10.0, 10.0)),
        Apple(time_of_creation=-100.0, size=2, position=Vec2(700.0, 500.0)),
    ]

    world.consume_apples(1.0)

    assert [apple.size for apple in world.apples] == [1]
    assert world.snake.glucose_level == constants.GLUCOSE_LEVEL_AT_START + 3


def test_apple_eaten_even_when_expired(world):
    world.apples = [Apple(time_of_creation=-100.0, size=2, position=Vec2(400.0, 300.0))]

    world.consume_apples(0.0)

    assert world.apples == []
    assert world.snake.glucose_level == constants.GLUCOSE_LEVEL_AT_START + 2


def test_no_spawn_without_elapsed_time(world):
    world.spawn_apples(1.0, 0.0)

    assert world.apples == []


def test_spawned_apple_off_the_snake_is_kept(world, monkeypatch):
    apple = Apple(time_of_creation=1.0, size=2, position=Vec2(100.0, 100.0))
    monkeypatch.setattr(Apple, "spawn", staticmethod(lambda rng, now, width, height: apple))

    world.spawn_apples(1.0, 1_000.0)

    assert world.apples == [apple]


def test_apple_spawned_on_the_snake_is_discarded(world, monkeypatch):
    apple = Apple(time_of_creation=1.0, size=2, position=Vec2(401.0, 301.0))
    monkeypatch.setattr(Apple, "spawn", staticmethod(lambda rng, now, width, height: apple))

    world.spawn_apples(1.0, 1_000.0)

    assert world.apples == []


def test_render_describes_the_round(world):
    world.apples = [
        Apple(time_of_creation=0.0, size=2, position=Vec2(10.0, 10.0)),
        Apple(time_of_creation=-30.0, size=1, position=Vec2(20.0, 20.0)),
    ]
    target = Vec2(5.0, 5.0)

    output = world.render(target, 1.0)

    assert output.target is target
    assert [(sprite.radius, sprite.fresh) for sprite in output.apples] == [(2.0, True), (1.0, False)]
    assert len(output.vertebrae) == world.snake.length
    assert output.head.radius == constants.HEAD_RADIUS
    assert output.heading.end.to_tuple() == (400.0 + constants.INITIAL_SPEED, 300.0)
    assert output.game_over is None


def test_update_runs_a_whole_frame(world):
    bitten = world.update(Vec2(800.0, 300.0), 1.5, 1.5)

    assert bitten is False
    assert world.snake.head.x == pytest.approx(400.0 + constants.INITIAL_SPEED * 1.5)
    assert world.snake.length == 2


def test_sliver_play_area_places_no_apples():
    world = World(random.Random(1), 1, 600)

    assert world.apples == []

    world.spawn_apples(1.0, 1_000.0)

    assert world.apples == []
    assert world.update(Vec2(0.0, 0.0), 0.5, 0.5) is False
