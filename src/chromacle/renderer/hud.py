"""Heads-up display: streak and win count."""

from __future__ import annotations

import pygame

from chromacle.models import Stats
from chromacle.renderer.colors import HUD_TEXT


def render_hud(surface: pygame.Surface, stats: Stats, font: pygame.font.Font) -> None:
    w = surface.get_width()
    text = font.render(f"Streak: {stats.streak}   Won: {stats.won}/{stats.played}", True, HUD_TEXT)
    surface.blit(text, (w // 2 - text.get_width() // 2, 70))
