from __future__ import annotations

import math
import random

import pytest

from retropong.ball import Ball
from retropong.controls import HumanControl
from retropong.paddle import Paddle


def _ball(rng: random.Random, x: float = 400, y: float = 200) -> Ball:
    return Ball(x=x, y=y, canvas_width=800, canvas_height=400, rng=rng)


def _paddle() -> Paddle:
    return Paddle(x=20, y=100, width=8, height=80, control=HumanControl())


def test_random_velocity_is_diagonal_at_serve_speed(rng: random.Random) -> None:
    ball = _ball(rng)
    quadrants = set()
    for _ in range(200):
        ball.set_random_velocity()
        off_axis = math.atan2(abs(ball.vy), abs(ball.vx))
        assert math.pi / 6 - 1e-9 <= off_axis <= math.pi / 3 + 1e-9
        assert math.hypot(ball.vx, ball.vy) == pytest.approx(ball.speed)
        quadrants.add((ball.vx > 0, ball.vy > 0))
    assert len(quadrants) == 4


def test_random_velocity_is_reproducible_with_seed() -> None:
    first = _ball(random.Random(7))
    second = _ball(random.Random(7))
    assert (first.vx, first.vy) == (second.vx, second.vy)


def test_update_integrates_velocity(rng: random.Random) -> None:
    ball = _ball(rng)
    ball.vx, ball.vy = 100.0, -50.0
    ball.update(0.1)
    assert ball.x == pytest.approx(410.0)
    assert ball.y == pytest.approx(195.0)


def test_top_wall_bounce(rng: random.Random) -> None:
    ball = _ball(rng, y=5)
    ball.vy = -100.0
    assert ball.check_wall_collision()
    assert ball.y == 10
    assert ball.vy == 100.0


def test_bottom_wall_bounce(rng: random.Random) -> None:
    ball = _ball(rng, y=398)
    ball.vy = 50.0
    assert ball.check_wall_collision()
    assert ball.y == 390
    assert ball.vy == -50.0


def test_no_wall_hit_in_open_field(rng: random.Random) -> None:
    ball = _ball(rng, y=200)
    ball.vy = -80.0
    assert not ball.check_wall_collision()
    assert ball.y == 200
    assert ball.vy == -80.0


@pytest.mark.parametrize("y", [-50.0, 0.0, 3.0, 10.0, 200.0, 390.0, 395.0, 450.0])
@pytest.mark.parametrize("vy", [-120.0, 120.0])
def test_wall_check_keeps_ball_inside_and_heading_inward(rng: random.Random, y: float, vy: float) -> None:
    ball = _ball(rng, y=y)
    ball.vy = vy
    hit = ball.check_wall_collision()
    assert ball.radius <= ball.y <= 400 - ball.radius
    if hit and ball.y == ball.radius:
        assert ball.vy > 0
    if hit and ball.y == 400 - ball.radius:
        assert ball.vy < 0


@pytest.mark.parametrize(
    ("y", "expected"),
    [(140.0, 0.0), (100.0, -1.0), (180.0, 1.0), (120.0, -0.5), (185.0, 1.0), (95.0, -1.0)],
)
def test_paddle_hit_point(rng: random.Random, y: float, expected: float) -> None:
    ball = _ball(rng, x=25, y=y)
    assert ball.check_paddle_collision(_paddle()) == pytest.approx(expected)


def test_paddle_miss_returns_none(rng: random.Random) -> None:
    ball = _ball(rng, x=100, y=140)
    assert ball.check_paddle_collision(_paddle()) is None


def test_touching_edges_count_as_contact(rng: random.Random) -> None:
    ball = _ball(rng, x=10, y=140)
    assert ball.check_paddle_collision(_paddle()) == pytest.approx(0.0)


def test_paddle_collision_is_a_pure_query(rng: random.Random) -> None:
    ball = _ball(rng, x=25, y=130)
    before = (ball.x, ball.y, ball.vx, ball.vy, ball.speed)
    ball.check_paddle_collision(_paddle())
    assert (ball.x, ball.y, ball.vx, ball.vy, ball.speed) == before


def test_hit_point_always_in_range(rng: random.Random) -> None:
    paddle = _paddle()
    for _ in range(500):
        ball = _ball(rng, x=rng.uniform(0, 60), y=rng.uniform(60, 220))
        hit_point = ball.check_paddle_collision(paddle)
        if hit_point is not None:
            assert -1.0 <= hit_point <= 1.0


def test_centre_hit_rebounds_straight(rng: random.Random) -> None:
    ball = _ball(rng, x=30)
    ball.vx, ball.vy = -300.0, 120.0
    ball.apply_paddle_hit(0.0)
    assert ball.vy == pytest.approx(0.0)
    assert ball.vx > 0
    assert ball.vx == pytest.approx(315.0)
    assert ball.x == pytest.approx(32.0)


def test_edge_hit_uses_max_bounce_angle(rng: random.Random) -> None:
    ball = _ball(rng, x=770)
    ball.vx, ball.vy = 300.0, 0.0
    ball.speed = 300.0
    ball.apply_paddle_hit(1.0)
    assert ball.vx < 0
    assert math.hypot(ball.vx, ball.vy) == pytest.approx(315.0)
    assert math.atan2(ball.vy, -ball.vx) == pytest.approx(math.pi / 3)
    assert ball.x == pytest.approx(768.0)


def test_speed_ramps_up_to_cap(rng: random.Random) -> None:
    ball = _ball(rng)
    expected = ball.speed
    for _ in range(30):
        before = ball.speed
        ball.apply_paddle_hit(rng.uniform(-1, 1))
        expected = min(expected * 1.05, 600.0)
        assert ball.speed == pytest.approx(expected)
        assert ball.speed >= before
        assert ball.speed <= ball.max_speed
        assert math.hypot(ball.vx, ball.vy) == pytest.approx(ball.speed)
    assert ball.speed == 600.0


def test_increase_speed_keeps_direction(rng: random.Random) -> None:
    ball = _ball(rng)
    ball.vx, ball.vy = -240.0, 180.0
    heading = math.atan2(ball.vy, ball.vx)
    ball.increase_speed()
    assert ball.speed == pytest.approx(315.0)
    assert math.atan2(ball.vy, ball.vx) == pytest.approx(heading)
    assert math.hypot(ball.vx, ball.vy) == pytest.approx(315.0)


def test_reset_restores_position_and_serve_speed(rng: random.Random) -> None:
    ball = _ball(rng)
    for _ in range(5):
        ball.apply_paddle_hit(0.3)
    ball.update(0.05)
    ball.reset(123.5, 77.25)
    assert (ball.x, ball.y) == (123.5, 77.25)
    assert ball.speed == ball.initial_speed
    assert math.hypot(ball.vx, ball.vy) == pytest.approx(ball.initial_speed)


def test_bounds(rng: random.Random) -> None:
    bounds = _ball(rng, x=50, y=60).bounds
    assert (bounds.left, bounds.right, bounds.top, bounds.bottom) == (40, 60, 50, 70)
