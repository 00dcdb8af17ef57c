"""Keyboard, mouse and touch handling reduced to one FrameInput per tick."""

from __future__ import annotations

import pygame

from .game import FrameInput

UP_KEYS = frozenset({pygame.K_w, pygame.K_UP})
DOWN_KEYS = frozenset({pygame.K_s, pygame.K_DOWN})
RESTART_KEY = pygame.K_SPACE


class InputHandler:
    """Tracks held keys and the pointer so the match sees a single direction.

    Pointer control mirrors a touch screen: pressing on the left half of the
    canvas moves the player's paddle up (upper half) or down (lower half).
    The right half is neutral.
    """

    def __init__(self, canvas_rect: pygame.Rect, window_size: tuple[int, int]) -> None:
        self.canvas_rect = pygame.Rect(canvas_rect)
        self.window_size = window_size
        self.keys: set[int] = set()
        self.pointer_direction = 0
        self.pointer_active = False

    def set_canvas_rect(self, canvas_rect: pygame.Rect, window_size: tuple[int, int]) -> None:
        self.canvas_rect = pygame.Rect(canvas_rect)
        self.window_size = window_size

    def handle_event(self, event: pygame.event.Event) -> None:
        """Update held state from a single pygame event."""
        if event.type == pygame.KEYDOWN:
            self.keys.add(event.key)
        elif event.type == pygame.KEYUP:
            self.keys.discard(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._press(event.pos)
        elif event.type == pygame.MOUSEMOTION and self.pointer_active:
            self._process_pointer(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._release()
        elif event.type == pygame.FINGERDOWN:
            self._press(self._finger_pos(event))
        elif event.type == pygame.FINGERMOTION:
            self._process_pointer(self._finger_pos(event))
        elif event.type == pygame.FINGERUP:
            self._release()
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.keys.clear()
            self._release()

    def _finger_pos(self, event: pygame.event.Event) -> tuple[float, float]:
        # Finger coordinates are normalised to the window.
        return event.x * self.window_size[0], event.y * self.window_size[1]

    def _press(self, pos: tuple[float, float]) -> None:
        self._process_pointer(pos)
        self.pointer_active = True

    def _release(self) -> None:
        self.pointer_direction = 0
        self.pointer_active = False

    def _process_pointer(self, pos: tuple[float, float]) -> None:
        x = pos[0] - self.canvas_rect.left
        y = pos[1] - self.canvas_rect.top
        if x < self.canvas_rect.width / 2:
            self.pointer_direction = -1 if y < self.canvas_rect.height / 2 else 1
        else:
            self.pointer_direction = 0

    def direction(self) -> int:
        """Keyboard wins over the pointer; up is checked before down."""
        if self.keys & UP_KEYS:
            return -1
        if self.keys & DOWN_KEYS:
            return 1
        return self.pointer_direction

    def frame(self) -> FrameInput:
        return FrameInput(
            direction=self.direction(),
            restart=RESTART_KEY in self.keys,
            pointer_active=self.pointer_active,
        )
