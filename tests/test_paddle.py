from __future__ import annotations

import pytest

from retropong.controls import ControlContext, HumanControl
from retropong.paddle import Paddle


def _paddle(y: float = 100) -> Paddle:
    return Paddle(x=20, y=y, width=8, height=80, control=HumanControl(), speed=300)


def test_paddle_moves_down_by_speed_times_dt() -> None:
    paddle = _paddle()
    paddle.update(0.5, 1, canvas_height=400)
    assert paddle.y == 250
    assert paddle.velocity == 1


def test_paddle_stops_at_bottom_edge() -> None:
    paddle = _paddle(y=300)
    paddle.update(0.5, 1, canvas_height=400)
    assert paddle.y == 320


def test_paddle_stops_at_top_edge() -> None:
    paddle = _paddle(y=30)
    paddle.update(0.5, -1, canvas_height=400)
    assert paddle.y == 0
    assert paddle.velocity == -1


@pytest.mark.parametrize("direction", [-1, 0, 1])
@pytest.mark.parametrize("dt", [0.0, 0.016, 0.1, 5.0])
@pytest.mark.parametrize("start_y", [-20.0, 0.0, 150.0, 320.0, 400.0])
def test_paddle_always_clamped(direction: int, dt: float, start_y: float) -> None:
    paddle = _paddle(y=start_y)
    paddle.update(dt, direction, canvas_height=400)
    assert 0 <= paddle.y <= 320


def test_human_control_drives_from_input() -> None:
    paddle = _paddle()
    context = paddle.context(400, ball_x=400, ball_y=200, ball_vx=-100, input_direction=1)
    paddle.drive(context, 0.5)
    assert paddle.y == 250


def test_human_control_normalises_direction() -> None:
    control = HumanControl()
    context = ControlContext(
        paddle_y=0, paddle_height=80, canvas_height=400, ball_x=0, ball_y=0, ball_vx=0, input_direction=-7
    )
    assert control.decide_velocity(context) == -1.0


def test_reset_zeroes_velocity() -> None:
    paddle = _paddle()
    paddle.update(0.1, 1, canvas_height=400)
    paddle.reset(20, 160)
    assert (paddle.x, paddle.y, paddle.velocity) == (20, 160, 0)


def test_bounds_and_snapshot() -> None:
    paddle = _paddle()
    bounds = paddle.bounds
    assert (bounds.left, bounds.right, bounds.top, bounds.bottom) == (20, 28, 100, 180)
    assert paddle.snapshot().height == 80
    assert paddle.centre_y == 140
