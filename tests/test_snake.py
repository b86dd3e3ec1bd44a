import math

import pytest

from engine import constants
from engine.snake import Snake, compute_steering
from engine.utils import Vec2


def test_dead_ahead_target_goes_straight():
    snake = Snake(head=Vec2(100.0, 100.0), velocity=Vec2(1.0, 0.0))

    assert compute_steering(snake.head, snake.velocity, Vec2(200.0, 100.0)) == pytest.approx(0.0)

    snake.steer(Vec2(200.0, 100.0), 0.1)
    snake.move(0.1)

    assert snake.velocity.x == pytest.approx(1.0)
    assert snake.velocity.y == pytest.approx(0.0)
    assert snake.head.x == pytest.approx(100.1)
    assert snake.head.y == pytest.approx(100.0)


def test_positive_turn_is_counter_clockwise():
    position = Vec2(0.0, 0.0)
    heading = Vec2(1.0, 0.0)

    assert compute_steering(position, heading, Vec2(0.0, 100.0)) == pytest.approx(1.0)
    assert compute_steering(position, heading, Vec2(0.0, -100.0)) == pytest.approx(-1.0)


def test_small_angles_are_not_clamped():
    angle = 0.3
    target = Vec2(math.cos(angle), math.sin(angle)) * 50

    assert compute_steering(Vec2(0.0, 0.0), Vec2(5.0, 0.0), target) == pytest.approx(angle)


@pytest.mark.parametrize(
    "velocity, target",
    [
        (Vec2(20.0, 0.0), Vec2(-100.0, 0.0)),
        (Vec2(-3.0, 4.0), Vec2(7.0, -2.0)),
        (Vec2(0.0, 0.0), Vec2(0.0, 100.0)),
        (Vec2(0.0, 0.0), Vec2(0.0, 0.0)),
        (Vec2(1e-9, 0.0), Vec2(1e9, -1e9)),
    ],
)
def test_steering_stays_inside_clamp_range(velocity, target):
    turn_rate = compute_steering(Vec2(0.0, 0.0), velocity, target)

    assert not math.isnan(turn_rate)
    assert -constants.MAX_TURN_RATE <= turn_rate <= constants.MAX_TURN_RATE


def test_zero_velocity_falls_back_to_default_heading():
    assert compute_steering(Vec2(0.0, 0.0), Vec2(0.0, 0.0), Vec2(0.0, 100.0)) == pytest.approx(1.0)
    assert compute_steering(Vec2(0.0, 0.0), Vec2(0.0, 0.0), Vec2(100.0, 0.0)) == pytest.approx(0.0)


def test_steering_conserves_speed():
    snake = Snake(head=Vec2(0.0, 0.0))
    speed = snake.velocity.length()
    for step in range(200):
        target = Vec2(math.cos(step) * 300, math.sin(step * 0.5) * 300)
        snake.steer(target, 1 / 60)

    assert snake.velocity.length() == pytest.approx(speed)


def test_new_snake_has_one_vertebra_at_the_head():
    snake = Snake(head=Vec2(400.0, 300.0))

    assert snake.length == 1
    assert snake.spine[0].to_tuple() == (400.0, 300.0)
    assert snake.glucose_level == constants.GLUCOSE_LEVEL_AT_START
    assert snake.velocity.to_tuple() == (constants.INITIAL_SPEED, 0.0)


def test_growth_spends_glucose_then_holds_length():
    snake = Snake(head=Vec2(0.0, 0.0), glucose_level=10)
    for _ in range(10):
        snake.grow()

    assert snake.length == 11
    assert snake.glucose_level == 0

    snake.grow()

    assert snake.length == 11


def test_grow_pushes_head_to_front_and_drops_tail():
    snake = Snake(head=Vec2(0.0, 0.0), glucose_level=0)
    snake.head = Vec2(5.0, 0.0)
    snake.grow()

    assert snake.length == 1
    assert snake.spine[0].to_tuple() == (5.0, 0.0)


def test_feed_adds_glucose():
    snake = Snake(head=Vec2(0.0, 0.0), glucose_level=0)
    snake.feed(3)
    for _ in range(3):
        snake.grow()

    assert snake.length == 4
    assert snake.glucose_level == 0


def test_growth_ticks_follow_wall_clock_not_frames():
    snake = Snake(head=Vec2(0.0, 0.0))
    target = Vec2(1000.0, 0.0)
    ticks = 0
    # 11.5 seconds at 100 frames per second.
    for frame in range(1, 1151):
        if snake.update(target, 0.01, frame * 0.01):
            ticks += 1

    assert ticks == 11
    assert snake.length == 11


def test_at_most_one_growth_tick_per_frame():
    snake = Snake(head=Vec2(0.0, 0.0))

    assert snake.update(Vec2(1.0, 0.0), 5.5, 5.5) is True
    assert snake.length == 2
    assert snake.time_of_last_redraw == pytest.approx(5.0)
    assert snake.update(Vec2(1.0, 0.0), 0.4, 5.9) is False
    assert snake.update(Vec2(1.0, 0.0), 0.2, 6.1) is True
    assert snake.time_of_last_redraw == pytest.approx(6.0)
