"""AI decision logic for the right-hand paddle."""

from __future__ import annotations

from .controls import ControlContext
from .settings import AISettings


class AIControl:
    """Ball-tracking opponent with dead zones and a slow return to centre.

    Assumes the paddle sits on the right, so a positive ball ``vx`` means the
    ball is incoming.
    """

    def __init__(self, settings: AISettings | None = None) -> None:
        self.settings = settings or AISettings()

    def decide_velocity(self, context: ControlContext) -> float:
        """Track the ball while it approaches, otherwise drift to centre."""
        if context.ball_vx > 0:
            return self._track(context)
        return self._recentre(context)

    def _track(self, context: ControlContext) -> float:
        centre = context.paddle_centre
        tolerance = self.settings.tolerance
        if context.ball_y < centre - tolerance:
            return -1.0
        if context.ball_y > centre + tolerance:
            return 1.0
        return 0.0

    def _recentre(self, context: ControlContext) -> float:
        centre = context.paddle_centre
        target = context.canvas_height / 2
        dead_zone = self.settings.centre_dead_zone
        if centre < target - dead_zone:
            return self.settings.return_speed
        if centre > target + dead_zone:
            return -self.settings.return_speed
        return 0.0
