"""Drawing a match snapshot onto a pygame surface."""

from __future__ import annotations

import pygame

from .game import GameState, MatchSnapshot, Side
from .utils import BG_COLOR, FG_COLOR, OVERLAY_COLOR

DASH_LENGTH = 10
DASH_GAP = 15
FONT_NAME = "couriernew"


class Renderer:
    """Classic black-and-white table: centre line, paddles, ball and scores."""

    def __init__(self) -> None:
        pygame.font.init()
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        size = max(8, size)
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.SysFont(FONT_NAME, size)
            self._fonts[size] = font
        return font

    def draw(self, surface: pygame.Surface, snapshot: MatchSnapshot) -> None:
        """Draw one full frame."""
        surface.fill(BG_COLOR)
        self._draw_centre_line(surface, snapshot)

        for paddle in (snapshot.player_paddle, snapshot.ai_paddle):
            rect = pygame.Rect(round(paddle.x), round(paddle.y), round(paddle.width), round(paddle.height))
            pygame.draw.rect(surface, FG_COLOR, rect)

        ball = snapshot.ball
        pygame.draw.circle(surface, FG_COLOR, (round(ball.x), round(ball.y)), max(1, round(ball.radius)))

        self._draw_scores(surface, snapshot)
        if snapshot.state == GameState.GAME_OVER:
            self._draw_game_over(surface, snapshot)

    @staticmethod
    def _draw_centre_line(surface: pygame.Surface, snapshot: MatchSnapshot) -> None:
        x = round(snapshot.width / 2)
        y = 0
        while y < snapshot.height:
            end = min(y + DASH_LENGTH, snapshot.height)
            pygame.draw.line(surface, FG_COLOR, (x, y), (x, end), 2)
            y += DASH_LENGTH + DASH_GAP

    def _draw_scores(self, surface: pygame.Surface, snapshot: MatchSnapshot) -> None:
        font = self._font(int(snapshot.width // 15))
        for score, x in ((snapshot.player_score, snapshot.width / 4), (snapshot.ai_score, snapshot.width * 3 / 4)):
            text = font.render(str(score), True, FG_COLOR)
            surface.blit(text, (round(x - text.get_width() / 2), 20))

    def _draw_game_over(self, surface: pygame.Surface, snapshot: MatchSnapshot) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        surface.blit(overlay, (0, 0))

        winner = "Player" if snapshot.winner == Side.PLAYER else "AI"
        centre_x = snapshot.width / 2
        centre_y = snapshot.height / 2

        headline = self._font(int(snapshot.width // 20)).render(f"Game Over - {winner} Wins!", True, FG_COLOR)
        prompt = self._font(int(snapshot.width // 30)).render("Press SPACE or Touch to Restart", True, FG_COLOR)
        surface.blit(headline, headline.get_rect(center=(round(centre_x), round(centre_y - 30))))
        surface.blit(prompt, prompt.get_rect(center=(round(centre_x), round(centre_y + 30))))
