"""Paddle control strategies and the data they decide from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .utils import sign


@dataclass(slots=True)
class ControlContext:
    """Small, testable snapshot of what a paddle controller may look at."""

    paddle_y: float
    paddle_height: float
    canvas_height: float
    ball_x: float
    ball_y: float
    ball_vx: float
    input_direction: int = 0

    @property
    def paddle_centre(self) -> float:
        return self.paddle_y + self.paddle_height / 2


class PaddleControl(Protocol):
    """Anything that can steer a paddle.

    ``decide_velocity`` returns a signed speed factor: its sign is the
    direction (-1 up, +1 down) and its magnitude scales the paddle speed.
    """

    def decide_velocity(self, context: ControlContext) -> float:
        ...


class HumanControl:
    """Passes the normalised input direction straight through."""

    def decide_velocity(self, context: ControlContext) -> float:
        return float(sign(context.input_direction))
