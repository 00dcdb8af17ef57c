"""Runtime configuration and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
import math

from .utils import PADDLE_HEIGHT, PADDLE_OFFSET, PADDLE_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH


class ConfigurationError(ValueError):
    """Raised when a match is built from settings that break its invariants."""


@dataclass(slots=True)
class BallSettings:
    """Ball size and speed ramp."""

    radius: float = 10.0
    initial_speed: float = 300.0
    max_speed: float = 600.0
    speed_increment: float = 1.05
    max_bounce_angle: float = math.pi / 3
    separation: float = 2.0


@dataclass(slots=True)
class PaddleSettings:
    """Paddle geometry and movement speed."""

    width: float = PADDLE_WIDTH
    height: float = PADDLE_HEIGHT
    offset: float = PADDLE_OFFSET
    speed: float = 300.0


@dataclass(slots=True)
class AISettings:
    """Tuning for the computer-controlled paddle."""

    tolerance: float = 15.0
    return_speed: float = 0.6
    centre_dead_zone: float = 10.0


@dataclass(slots=True)
class GameSettings:
    """Everything needed to build a match."""

    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    target_score: int = 10
    ball: BallSettings = field(default_factory=BallSettings)
    paddle: PaddleSettings = field(default_factory=PaddleSettings)
    ai: AISettings = field(default_factory=AISettings)


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigurationError(message)


def _positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def validate_canvas(width: float, height: float) -> None:
    """Reject canvas dimensions the simulation cannot use as bounds."""
    _require(_positive(width), f"canvas width must be positive, got {width!r}")
    _require(_positive(height), f"canvas height must be positive, got {height!r}")


def validate(settings: GameSettings) -> GameSettings:
    """Check settings for invariant violations and return them unchanged."""
    validate_canvas(settings.width, settings.height)
    _require(
        isinstance(settings.target_score, int) and settings.target_score > 0,
        f"target_score must be a positive integer, got {settings.target_score!r}",
    )

    ball = settings.ball
    _require(_positive(ball.radius), f"ball radius must be positive, got {ball.radius!r}")
    _require(_positive(ball.initial_speed), "ball initial_speed must be positive")
    _require(
        math.isfinite(ball.max_speed) and ball.max_speed >= ball.initial_speed,
        "ball max_speed must be at least initial_speed",
    )
    _require(
        math.isfinite(ball.speed_increment) and ball.speed_increment >= 1.0,
        "ball speed_increment must be >= 1",
    )
    _require(
        0 < ball.max_bounce_angle < math.pi / 2,
        "ball max_bounce_angle must lie in (0, pi/2)",
    )
    _require(math.isfinite(ball.separation) and ball.separation >= 0, "ball separation must be >= 0")

    paddle = settings.paddle
    _require(_positive(paddle.width), f"paddle width must be positive, got {paddle.width!r}")
    _require(_positive(paddle.height), f"paddle height must be positive, got {paddle.height!r}")
    _require(_positive(paddle.speed), "paddle speed must be positive")
    _require(math.isfinite(paddle.offset) and paddle.offset >= 0, "paddle offset must be >= 0")
    _require(paddle.height <= settings.height, "paddle is taller than the canvas")
    _require(
        2 * (paddle.offset + paddle.width) <= settings.width,
        "canvas is too narrow for both paddles",
    )

    ai = settings.ai
    _require(math.isfinite(ai.tolerance) and ai.tolerance >= 0, "ai tolerance must be >= 0")
    _require(
        math.isfinite(ai.centre_dead_zone) and ai.centre_dead_zone >= 0,
        "ai centre_dead_zone must be >= 0",
    )
    _require(0 < ai.return_speed <= 1, "ai return_speed must lie in (0, 1]")
    return settings
