"""Ball entity: kinematics, collision queries and bounce response."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
import math
import random

from .settings import BallSettings
from .utils import Bounds, clamp, sign

if TYPE_CHECKING:
    from .paddle import Paddle


@dataclass(slots=True, frozen=True)
class BallSnapshot:
    """Read-only view of the ball for renderers."""

    x: float
    y: float
    radius: float


@dataclass(slots=True, eq=False)
class Ball:
    """State and behavior for the ball.

    ``speed`` is tracked separately from ``(vx, vy)`` so that a paddle hit can
    rebuild the direction from the hit point without losing the ramp-up.
    """

    x: float
    y: float
    canvas_width: float
    canvas_height: float
    settings: BallSettings = field(default_factory=BallSettings)
    rng: random.Random = field(default_factory=random.Random)

    radius: float = field(init=False)
    speed: float = field(init=False)
    vx: float = field(default=0.0, init=False)
    vy: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.radius = self.settings.radius
        self.speed = self.settings.initial_speed
        self.set_random_velocity()

    @property
    def initial_speed(self) -> float:
        return self.settings.initial_speed

    @property
    def max_speed(self) -> float:
        return self.settings.max_speed

    def set_random_velocity(self) -> None:
        """Serve diagonally: 30-60 degrees off the x axis, in a random quadrant."""
        angle = self.rng.random() * math.pi / 6 + math.pi / 6
        quadrant = self.rng.randrange(4)
        if quadrant == 0:
            final_angle = angle
        elif quadrant == 1:
            final_angle = math.pi - angle
        elif quadrant == 2:
            final_angle = math.pi + angle
        else:
            final_angle = 2 * math.pi - angle

        self.vx = math.cos(final_angle) * self.speed
        self.vy = math.sin(final_angle) * self.speed

    def update(self, dt: float) -> None:
        """Advance position by one explicit Euler step."""
        self.x += self.vx * dt
        self.y += self.vy * dt

    def check_wall_collision(self) -> bool:
        """Bounce off the top and bottom walls; return whether either was hit."""
        hit = False

        if self.y - self.radius <= 0:
            self.y = self.radius
            self.vy = abs(self.vy)
            hit = True

        if self.y + self.radius >= self.canvas_height:
            self.y = self.canvas_height - self.radius
            self.vy = -abs(self.vy)
            hit = True

        return hit

    def check_paddle_collision(self, paddle: Paddle) -> float | None:
        """Return the hit point in [-1, 1] (top to bottom) or None on a miss."""
        if not self.bounds.overlaps(paddle.bounds):
            return None
        half_height = paddle.height / 2
        hit_point = (self.y - (paddle.y + half_height)) / half_height
        return clamp(hit_point, -1.0, 1.0)

    def apply_paddle_hit(self, hit_point: float) -> None:
        """Send the ball back with an angle chosen by where it struck the paddle."""
        self.vx = -self.vx

        angle = clamp(hit_point, -1.0, 1.0) * self.settings.max_bounce_angle
        current_speed = math.hypot(self.vx, self.vy)
        x_sign = sign(self.vx)

        # The incoming vy is discarded; only the hit point decides the rebound.
        self.vx = x_sign * current_speed * math.cos(angle)
        self.vy = current_speed * math.sin(angle)

        # Reads the velocity written above, so this must stay second.
        self.increase_speed()

        self.x += x_sign * self.settings.separation

    def increase_speed(self) -> None:
        """Grow speed by the configured factor, keeping the travel direction."""
        self.speed = min(self.speed * self.settings.speed_increment, self.settings.max_speed)
        current_angle = math.atan2(self.vy, self.vx)
        self.vx = math.cos(current_angle) * self.speed
        self.vy = math.sin(current_angle) * self.speed

    @property
    def bounds(self) -> Bounds:
        return Bounds(
            left=self.x - self.radius,
            right=self.x + self.radius,
            top=self.y - self.radius,
            bottom=self.y + self.radius,
        )

    def reset(self, x: float, y: float) -> None:
        """Re-serve from (x, y) at the initial speed."""
        self.x = x
        self.y = y
        self.speed = self.settings.initial_speed
        self.set_random_velocity()

    def snapshot(self) -> BallSnapshot:
        return BallSnapshot(self.x, self.y, self.radius)
