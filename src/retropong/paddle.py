"""Paddle entity shared by the human and AI sides."""

from __future__ import annotations

from dataclasses import dataclass, field

from .controls import ControlContext, PaddleControl
from .utils import Bounds, clamp, sign


@dataclass(slots=True, frozen=True)
class PaddleSnapshot:
    """Read-only view of a paddle for renderers."""

    x: float
    y: float
    width: float
    height: float


@dataclass(slots=True, eq=False)
class Paddle:
    """A vertical paddle moved by whichever control strategy it was built with."""

    x: float
    y: float
    width: float
    height: float
    control: PaddleControl
    speed: float = 300.0

    velocity: int = field(default=0, init=False)

    def context(
        self,
        canvas_height: float,
        ball_x: float,
        ball_y: float,
        ball_vx: float,
        input_direction: int = 0,
    ) -> ControlContext:
        """Build the snapshot handed to this paddle's control strategy."""
        return ControlContext(
            paddle_y=self.y,
            paddle_height=self.height,
            canvas_height=canvas_height,
            ball_x=ball_x,
            ball_y=ball_y,
            ball_vx=ball_vx,
            input_direction=input_direction,
        )

    def drive(self, context: ControlContext, dt: float) -> None:
        """Ask the control strategy for a command and apply it."""
        command = self.control.decide_velocity(context)
        self.update(dt, command, context.canvas_height)

    def update(self, dt: float, command: float, canvas_height: float) -> None:
        """Move by command * speed * dt and keep the paddle fully on screen."""
        self.velocity = sign(command)
        self.y += command * self.speed * dt
        self.clamp_to(canvas_height)

    def clamp_to(self, canvas_height: float) -> None:
        self.y = clamp(self.y, 0.0, max(0.0, canvas_height - self.height))

    @property
    def centre_y(self) -> float:
        return self.y + self.height / 2

    @property
    def bounds(self) -> Bounds:
        return Bounds(
            left=self.x,
            right=self.x + self.width,
            top=self.y,
            bottom=self.y + self.height,
        )

    def reset(self, x: float, y: float) -> None:
        """Move to (x, y) and stop."""
        self.x = x
        self.y = y
        self.velocity = 0

    def snapshot(self) -> PaddleSnapshot:
        return PaddleSnapshot(self.x, self.y, self.width, self.height)
