"""Synthesised retro beeps played in response to match events."""

from __future__ import annotations

from array import array
from dataclasses import dataclass
from typing import Iterable
import logging

import pygame

from .game import MatchEvent
from .utils import clamp

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
FADE_FLOOR = 0.01


@dataclass(slots=True, frozen=True)
class Beep:
    """A square-wave tone."""

    frequency: float
    duration_ms: int


BEEPS: dict[MatchEvent, Beep] = {
    MatchEvent.WALL_HIT: Beep(220, 50),
    MatchEvent.PADDLE_HIT: Beep(440, 50),
    MatchEvent.SCORED: Beep(330, 100),
    MatchEvent.GAME_OVER: Beep(110, 200),
}


def square_wave(beep: Beep, sample_rate: int = SAMPLE_RATE, channels: int = 1) -> array:
    """Render a beep as signed 16-bit samples with an exponential fade-out."""
    count = max(1, int(sample_rate * beep.duration_ms / 1000))
    samples = array("h")
    for i in range(count):
        phase = (i * beep.frequency / sample_rate) % 1.0
        level = 1.0 if phase < 0.5 else -1.0
        gain = FADE_FLOOR ** (i / count)
        value = int(level * gain * 32767)
        samples.extend([value] * channels)
    return samples


class AudioManager:
    """Plays one beep per match event, silently doing nothing without a mixer."""

    def __init__(self, master_volume: float = 0.3) -> None:
        self.master_volume = clamp(master_volume, 0.0, 1.0)
        self.sound_enabled = False
        self.sounds: dict[MatchEvent, pygame.mixer.Sound] = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            self.sound_enabled = True
        except pygame.error as exc:
            logger.warning("audio disabled: %s", exc)
            self.sound_enabled = False

    def load_assets(self) -> None:
        """Synthesise the beep for every event."""
        if not self.sound_enabled:
            return
        init = pygame.mixer.get_init()
        if init is None:
            self.sound_enabled = False
            return
        frequency, size, channels = init
        if size != -16:
            logger.warning("audio disabled: unsupported mixer sample size %s", size)
            self.sound_enabled = False
            return
        for event, beep in BEEPS.items():
            try:
                sound = pygame.mixer.Sound(buffer=square_wave(beep, frequency, channels).tobytes())
            except pygame.error as exc:
                logger.warning("could not build %s beep: %s", event.name, exc)
                continue
            sound.set_volume(self.master_volume)
            self.sounds[event] = sound

    def set_volume(self, volume: float) -> None:
        """Set master volume, clamped to [0, 1]."""
        self.master_volume = clamp(volume, 0.0, 1.0)
        for sound in self.sounds.values():
            sound.set_volume(self.master_volume)

    def play(self, event: MatchEvent) -> None:
        """Play the beep for a match event."""
        if not self.sound_enabled:
            return
        sound = self.sounds.get(event)
        if sound:
            sound.play()

    def play_events(self, events: Iterable[MatchEvent]) -> None:
        for event in events:
            self.play(event)
