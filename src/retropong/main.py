"""Executable entrypoint for Retro Pong."""

from __future__ import annotations

from dataclasses import replace
import logging
import random

import pygame

from .audio import AudioManager
from .game import Match
from .input import InputHandler
from .render import Renderer
from .settings import GameSettings
from .utils import BG_COLOR, FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .viewport import centred_origin, fit_canvas

logger = logging.getLogger(__name__)

RESIZE_DEBOUNCE_MS = 250


def canvas_layout(window_size: tuple[int, int]) -> pygame.Rect:
    """Centred canvas rect for a window, never larger than the window itself."""
    width, height = fit_canvas(*window_size)
    size = (max(1, min(width, window_size[0])), max(1, min(height, window_size[1])))
    return pygame.Rect(centred_origin(window_size, size), size)


class PongApp:
    """Window, frame clock and the glue between pygame and a Match."""

    def __init__(self, settings: GameSettings | None = None, seed: int | None = None) -> None:
        pygame.init()
        pygame.display.set_caption("Retro Pong")
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        window_size = self.screen.get_size()
        self.canvas_rect = canvas_layout(window_size)
        canvas_size = self.canvas_rect.size

        settings = replace(settings or GameSettings(), width=canvas_size[0], height=canvas_size[1])
        self.match = Match(settings, rng=random.Random(seed))

        self.input = InputHandler(self.canvas_rect, window_size)
        self.renderer = Renderer()
        self.audio = AudioManager()
        self.audio.load_assets()

        self.resize_pending = False
        self.resize_due_ms = 0

    def run(self) -> None:
        """Main event/update/render loop."""
        running = True
        while running:
            dt_ms = self.clock.tick(FPS)
            running = self._handle_events()
            if not running:
                break
            self._apply_pending_resize()

            result = self.match.tick(dt_ms / 1000, self.input.frame())
            self.audio.play_events(result.events)

            self.screen.fill(BG_COLOR)
            canvas = self.screen.subsurface(self.canvas_rect.clip(self.screen.get_rect()))
            self.renderer.draw(canvas, result.snapshot)
            pygame.display.flip()

        pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.VIDEORESIZE:
                self.resize_pending = True
                self.resize_due_ms = pygame.time.get_ticks() + RESIZE_DEBOUNCE_MS
                continue
            self.input.handle_event(event)
        return True

    def _apply_pending_resize(self) -> None:
        if not self.resize_pending or pygame.time.get_ticks() < self.resize_due_ms:
            return
        self.screen = pygame.display.get_surface()
        window_size = self.screen.get_size()
        self.canvas_rect = canvas_layout(window_size)
        self.input.set_canvas_rect(self.canvas_rect, window_size)
        self.match.resize(*self.canvas_rect.size)
        self.resize_pending = False


def main() -> None:
    """Launch the game."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("starting Retro Pong")
    PongApp().run()


if __name__ == "__main__":
    main()
