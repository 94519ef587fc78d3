"""Statistics overlay."""

from __future__ import annotations

import pygame

from chromacle.renderer import colors as colors_mod
from chromacle.views.base import ViewAction, ViewContext


class StatsView:
    name = "stats"
    display_name = "Statistics"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._font = pygame.font.SysFont("monospace", 18)
        self._big_font = pygame.font.SysFont("monospace", 44, bold=True)

    def on_exit(self) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_s, pygame.K_RETURN):
            return ViewAction(kind="pop")
        if event.type == pygame.MOUSEBUTTONDOWN:
            return ViewAction(kind="pop")
        return None

    def update(self, dt: float) -> ViewAction | None:
        return None

    def draw(self, surface: pygame.Surface) -> None:
        if self._context is None or not self._font or not self._big_font:
            return
        stats = self._context.game.stats

        surface.fill(colors_mod.BG)
        w, h = surface.get_size()

        title = self._font.render("STATISTICS", True, colors_mod.ACCENT)
        surface.blit(title, (w // 2 - title.get_width() // 2, 120))

        cells = [
            (str(stats.played), "Played"),
            (str(stats.win_pct), "Win %"),
            (str(stats.streak), "Streak"),
            (str(stats.max_streak), "Max Streak"),
        ]
        cell_w = w // len(cells)
        for i, (value, label) in enumerate(cells):
            cx = i * cell_w + cell_w // 2
            v = self._big_font.render(value, True, colors_mod.HUD_TEXT)
            surface.blit(v, (cx - v.get_width() // 2, 200))
            t = self._font.render(label, True, colors_mod.DIM_TEXT)
            surface.blit(t, (cx - t.get_width() // 2, 260))

        hint = self._font.render("Esc: back", True, colors_mod.DIM_TEXT)
        surface.blit(hint, (w // 2 - hint.get_width() // 2, h - 40))
