"""Match orchestration: tick order, scoring and the match state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging
import math
import random

from .ai import AIControl
from .ball import Ball, BallSnapshot
from .controls import HumanControl
from .paddle import Paddle, PaddleSnapshot
from .settings import GameSettings, validate
from .utils import clamp_frame_time

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Finite states of a match."""

    PLAYING = auto()
    GAME_OVER = auto()


class MatchEvent(Enum):
    """Discrete things that happened during a tick, for audio and telemetry."""

    WALL_HIT = auto()
    PADDLE_HIT = auto()
    SCORED = auto()
    GAME_OVER = auto()


class Side(str, Enum):
    """Which side of the table."""

    PLAYER = "player"
    AI = "ai"


@dataclass(slots=True, frozen=True)
class FrameInput:
    """Normalised host input for one tick."""

    direction: int = 0
    restart: bool = False
    pointer_active: bool = False

    @property
    def wants_restart(self) -> bool:
        return self.restart or self.pointer_active


@dataclass(slots=True, frozen=True)
class MatchSnapshot:
    """Everything a renderer needs to draw one frame."""

    width: float
    height: float
    ball: BallSnapshot
    player_paddle: PaddleSnapshot
    ai_paddle: PaddleSnapshot
    player_score: int
    ai_score: int
    target_score: int
    state: GameState
    winner: Side | None


@dataclass(slots=True, frozen=True)
class TickResult:
    """Events emitted by a tick and the state it left behind."""

    events: tuple[MatchEvent, ...]
    snapshot: MatchSnapshot


class Match:
    """One human-vs-AI match: a ball, two paddles and a score line.

    The host calls :meth:`tick` once per frame with the wall-clock delta and
    the latest input, then hands the returned events to audio and the
    snapshot to a renderer. Nothing here blocks or reads a clock.
    """

    def __init__(self, settings: GameSettings | None = None, rng: random.Random | None = None) -> None:
        self.settings = validate(settings or GameSettings())
        self.rng = rng or random.Random()

        self.width = float(self.settings.width)
        self.height = float(self.settings.height)
        self.target_score = self.settings.target_score

        self.state = GameState.PLAYING
        self.player_score = 0
        self.ai_score = 0

        paddle = self.settings.paddle
        player_x, ai_x = self._home_xs()
        home_y = self._home_y()
        self.player_paddle = Paddle(player_x, home_y, paddle.width, paddle.height, HumanControl(), paddle.speed)
        self.ai_paddle = Paddle(ai_x, home_y, paddle.width, paddle.height, AIControl(self.settings.ai), paddle.speed)
        self.ball = Ball(
            self.width / 2,
            self.height / 2,
            self.width,
            self.height,
            settings=self.settings.ball,
            rng=self.rng,
        )

    def _home_xs(self) -> tuple[float, float]:
        paddle = self.settings.paddle
        return paddle.offset, self.width - paddle.offset - paddle.width

    def _home_y(self) -> float:
        return self.height / 2 - self.settings.paddle.height / 2

    @property
    def winner(self) -> Side | None:
        if self.player_score >= self.target_score:
            return Side.PLAYER
        if self.ai_score >= self.target_score:
            return Side.AI
        return None

    def tick(self, elapsed: float, frame_input: FrameInput | None = None) -> TickResult:
        """Advance the match by one frame."""
        dt = clamp_frame_time(elapsed)
        frame_input = frame_input or FrameInput()
        events: list[MatchEvent] = []

        if self.state == GameState.PLAYING:
            self._update_playing(dt, frame_input, events)

        # A held restart also applies on the tick that ends the match.
        if self.state == GameState.GAME_OVER and frame_input.wants_restart:
            self.reset()

        return TickResult(tuple(events), self.snapshot())

    def _update_playing(self, dt: float, frame_input: FrameInput, events: list[MatchEvent]) -> None:
        ball = self.ball

        # Paddles move first so the ball is tested against where they are now.
        self.player_paddle.drive(
            self.player_paddle.context(self.height, ball.x, ball.y, ball.vx, frame_input.direction),
            dt,
        )
        self.ai_paddle.drive(self.ai_paddle.context(self.height, ball.x, ball.y, ball.vx), dt)

        ball.update(dt)

        events.extend(self.check_collisions())
        events.extend(self.check_scoring())

    def check_collisions(self) -> list[MatchEvent]:
        """Resolve wall and paddle contacts for the current ball position."""
        events: list[MatchEvent] = []
        if self.ball.check_wall_collision():
            events.append(MatchEvent.WALL_HIT)

        # Both paddles are tested every tick; a second hit is not suppressed.
        for paddle in (self.player_paddle, self.ai_paddle):
            hit_point = self.ball.check_paddle_collision(paddle)
            if hit_point is not None:
                self.ball.apply_paddle_hit(hit_point)
                events.append(MatchEvent.PADDLE_HIT)
        return events

    def check_scoring(self) -> list[MatchEvent]:
        """Award a point if the ball left the field, then check for a winner."""
        ball = self.ball
        if ball.x + ball.radius < 0:
            return self._score(Side.AI)
        if ball.x - ball.radius > self.width:
            return self._score(Side.PLAYER)
        return []

    def _score(self, side: Side) -> list[MatchEvent]:
        if side == Side.AI:
            self.ai_score += 1
        else:
            self.player_score += 1
        logger.info("%s scores: %d - %d", side.value, self.player_score, self.ai_score)

        events = [MatchEvent.SCORED]
        self.ball.reset(self.width / 2, self.height / 2)
        if self.check_win_condition():
            events.append(MatchEvent.GAME_OVER)
        return events

    def check_win_condition(self) -> bool:
        """Move to GAME_OVER once either side reaches the target score."""
        winner = self.winner
        if winner is None:
            return False
        self.state = GameState.GAME_OVER
        logger.info("match over, %s wins %d - %d", winner.value, self.player_score, self.ai_score)
        return True

    def reset(self) -> None:
        """Start a fresh match on the current canvas."""
        self.state = GameState.PLAYING
        self.player_score = 0
        self.ai_score = 0

        player_x, ai_x = self._home_xs()
        home_y = self._home_y()
        self.player_paddle.reset(player_x, home_y)
        self.ai_paddle.reset(ai_x, home_y)
        self.ball.reset(self.width / 2, self.height / 2)
        logger.debug("match restarted")

    def resize(self, width: float, height: float) -> None:
        """Adopt new canvas bounds, keeping scores, velocities and y positions."""
        if not (math.isfinite(width) and math.isfinite(height)):
            logger.warning("ignoring resize to %rx%r", width, height)
            return
        self.width = max(1.0, float(width))
        self.height = max(1.0, float(height))
        self.ball.canvas_width = self.width
        self.ball.canvas_height = self.height

        player_x, ai_x = self._home_xs()
        self.player_paddle.x = player_x
        self.ai_paddle.x = ai_x
        logger.debug("canvas resized to %.0fx%.0f", self.width, self.height)

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot(
            width=self.width,
            height=self.height,
            ball=self.ball.snapshot(),
            player_paddle=self.player_paddle.snapshot(),
            ai_paddle=self.ai_paddle.snapshot(),
            player_score=self.player_score,
            ai_score=self.ai_score,
            target_score=self.target_score,
            state=self.state,
            winner=self.winner,
        )
