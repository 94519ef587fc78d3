"""Horizontal slider panel for one HSL channel."""

from __future__ import annotations

from typing import Callable

import pygame

from chromacle.renderer.colors import FOCUS, HUD_TEXT, SLIDER_KNOB, SLIDER_TRACK

KNOB_RADIUS = 10
TRACK_HEIGHT = 14


class Slider:
    """Integer slider over [minimum, maximum], draggable with mouse or arrow keys."""

    def __init__(
        self,
        label: str,
        minimum: int,
        maximum: int,
        value: int,
        unit: str = "",
        gradient: Callable[[int], tuple[int, int, int]] | None = None,
    ) -> None:
        self.label = label
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        self.unit = unit
        self.focused = False
        self._gradient = gradient
        self._rect = pygame.Rect(0, 0, 0, 0)
        self._dragging = False
        self._font: pygame.font.Font | None = None

    def layout(self, rect: pygame.Rect) -> None:
        self._rect = rect
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 18)

    @property
    def _track(self) -> pygame.Rect:
        r = self._rect
        return pygame.Rect(r.x + 110, r.centery - TRACK_HEIGHT // 2, r.w - 130, TRACK_HEIGHT)

    def _value_at(self, x: int) -> int:
        track = self._track
        frac = (x - track.x) / max(1, track.w)
        frac = min(1.0, max(0.0, frac))
        return round(self.minimum + frac * (self.maximum - self.minimum))

    def nudge(self, delta: int) -> None:
        self.value = min(self.maximum, max(self.minimum, self.value + delta))

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._rect.collidepoint(event.pos):
                self._dragging = True
                self.value = self._value_at(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._dragging = False
        elif event.type == pygame.MOUSEMOTION and self._dragging:
            self.value = self._value_at(event.pos[0])

    def update(self, dt: float) -> None:
        pass

    def draw(self, surface: pygame.Surface) -> None:
        track = self._track
        if self._gradient:
            for i in range(track.w):
                v = self.minimum + (self.maximum - self.minimum) * i // max(1, track.w - 1)
                pygame.draw.line(surface, self._gradient(v), (track.x + i, track.y), (track.x + i, track.bottom))
        else:
            pygame.draw.rect(surface, SLIDER_TRACK, track, border_radius=4)
        if self.focused:
            pygame.draw.rect(surface, FOCUS, track.inflate(6, 6), width=2, border_radius=6)

        span = max(1, self.maximum - self.minimum)
        knob_x = track.x + int((self.value - self.minimum) / span * track.w)
        pygame.draw.circle(surface, SLIDER_KNOB, (knob_x, track.centery), KNOB_RADIUS)

        if self._font:
            text = self._font.render(f"{self.label} {self.value}{self.unit}", True, HUD_TEXT)
            surface.blit(text, (self._rect.x, self._rect.centery - text.get_height() // 2))
