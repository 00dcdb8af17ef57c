"""Shared constants and small numeric helpers for Retro Pong."""

from __future__ import annotations

from dataclasses import dataclass
import math

SCREEN_WIDTH = 900
SCREEN_HEIGHT = 600
FPS = 60

# Upper bound on a single simulation step in seconds.
MAX_FRAME_TIME = 0.1

PADDLE_OFFSET = 20
PADDLE_WIDTH = 8
PADDLE_HEIGHT = 80

BG_COLOR = (0, 0, 0)
FG_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 178)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value into a closed interval."""
    return max(minimum, min(maximum, value))


def sign(value: float) -> int:
    """Return -1, 0 or 1 following the sign of value."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def clamp_frame_time(elapsed: float, cap: float = MAX_FRAME_TIME) -> float:
    """Bound a wall-clock frame delta to [0, cap]; NaN and negatives become 0."""
    if math.isnan(elapsed) or elapsed < 0:
        return 0.0
    return min(elapsed, cap)


@dataclass(slots=True, frozen=True)
class Bounds:
    """Axis-aligned rectangle edges in canvas space."""

    left: float
    right: float
    top: float
    bottom: float

    def overlaps(self, other: Bounds) -> bool:
        """Inclusive overlap test; touching edges count as contact."""
        return (
            self.right >= other.left
            and self.left <= other.right
            and self.bottom >= other.top
            and self.top <= other.bottom
        )
