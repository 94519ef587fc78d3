"""Main puzzle view: sliders, guess history, result and share."""

from __future__ import annotations

import pygame

from chromacle.clipboard import copy_to_clipboard
from chromacle.codec import hex_to_rgb, hsl_to_rgb
from chromacle.config import (
    COPIED_FLASH_S,
    DEFAULT_HUE,
    DEFAULT_LIGHTNESS,
    DEFAULT_SATURATION,
    MAX_GUESSES,
)
from chromacle.models import Color, GameState, Guess
from chromacle.renderer import colors as colors_mod
from chromacle.renderer.hud import render_hud
from chromacle.renderer.slider import Slider
from chromacle.scoring import HIT, HUE_ADVANCE, HUE_RETREAT, LIT_DOWN, LIT_UP, SAT_DOWN, SAT_UP
from chromacle.share import format_share
from chromacle.views.base import ViewAction, ViewContext, layout_regions

# SysFont cannot draw emoji; show hints as short labels
_HINT_LABELS = {
    HIT: "HIT",
    HUE_ADVANCE: "H+",
    HUE_RETREAT: "H-",
    SAT_UP: "S+",
    SAT_DOWN: "S-",
    LIT_UP: "L+",
    LIT_DOWN: "L-",
}


class GameView:
    name = "game"
    display_name = "Daily Color"

    def __init__(self) -> None:
        self._context: ViewContext | None = None
        self._sliders: list[Slider] = []
        self._focus = 0
        self._copied_timer = 0.0
        self._copy_failed = False
        self._button = pygame.Rect(0, 0, 0, 0)
        self._font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

    def on_enter(self, context: ViewContext) -> None:
        self._context = context
        self._font = pygame.font.SysFont("monospace", 20)
        self._title_font = pygame.font.SysFont("monospace", 40, bold=True)
        if not self._sliders:
            self._sliders = [
                Slider("H", 0, 359, DEFAULT_HUE, "°", gradient=lambda v: hsl_to_rgb(Color(v, 100, 50))),
                Slider("S", 0, 100, DEFAULT_SATURATION, "%"),
                Slider("L", 0, 100, DEFAULT_LIGHTNESS, "%"),
            ]
        self._set_focus(self._focus)

    def on_exit(self) -> None:
        pass

    def _set_focus(self, idx: int) -> None:
        self._focus = idx % len(self._sliders)
        for i, slider in enumerate(self._sliders):
            slider.focused = i == self._focus

    def _current_color(self) -> Color:
        h, s, l = (slider.value for slider in self._sliders)
        return Color.from_sliders(h, s, l)

    def handle_event(self, event: pygame.event.Event) -> ViewAction | None:
        if self._context is None:
            return None
        game = self._context.game

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._button.collidepoint(event.pos):
                self._press_button()
                return None

        if game.state == GameState.IN_PROGRESS:
            for slider in self._sliders:
                slider.handle_event(event)

        if event.type != pygame.KEYDOWN:
            return None

        if event.key == pygame.K_ESCAPE:
            return ViewAction(kind="quit")
        elif event.key == pygame.K_TAB:
            self._set_focus(self._focus + 1)
        elif event.key in (pygame.K_LEFT, pygame.K_RIGHT):
            step = 10 if pygame.key.get_mods() & pygame.KMOD_SHIFT else 1
            self._sliders[self._focus].nudge(step if event.key == pygame.K_RIGHT else -step)
        elif event.key in (pygame.K_UP, pygame.K_DOWN):
            self._set_focus(self._focus + (1 if event.key == pygame.K_DOWN else -1))
        elif event.key == pygame.K_RETURN:
            self._press_button()
        elif event.key == pygame.K_s:
            return ViewAction(kind="push", target="stats")

        return None

    def _press_button(self) -> None:
        game = self._context.game
        if game.state == GameState.IN_PROGRESS:
            game.submit_guess(self._current_color())
        else:
            self._copy_failed = not copy_to_clipboard(format_share(game.session, game.day))
            self._copied_timer = COPIED_FLASH_S

    def update(self, dt: float) -> ViewAction | None:
        if self._copied_timer > 0:
            self._copied_timer = max(0.0, self._copied_timer - dt)
        return None

    def draw(self, surface: pygame.Surface) -> None:
        if self._context is None or not self._font or not self._title_font:
            return
        game = self._context.game

        surface.fill(colors_mod.BG)
        w, h = surface.get_size()
        regions = layout_regions(
            pygame.Rect(0, 0, w, h),
            [
                ("header", "top", 110),
                ("footer", "bottom", 40),
                ("controls", "bottom", 300),
            ],
        )

        title = self._title_font.render("CHROMACLE", True, colors_mod.ACCENT)
        surface.blit(title, (w // 2 - title.get_width() // 2, 15))
        render_hud(surface, game.stats, self._font)

        self._draw_guesses(surface, regions["center"], game.guesses)

        if game.state == GameState.IN_PROGRESS:
            self._draw_controls(surface, regions["controls"], game.next_attempt)
        else:
            self._draw_result(surface, regions["controls"])

        footer = self._font.render("New color every day at midnight  |  S: stats  Esc: quit", True, colors_mod.DIM_TEXT)
        surface.blit(footer, (w // 2 - footer.get_width() // 2, regions["footer"].y + 8))

    def _draw_guesses(self, surface: pygame.Surface, rect: pygame.Rect, guesses: list[Guess]) -> None:
        row_h = min(48, rect.h // MAX_GUESSES)
        for i, guess in enumerate(guesses):
            y = rect.y + i * row_h
            swatch = pygame.Rect(rect.x + 60, y + 4, row_h - 8, row_h - 8)
            pygame.draw.rect(surface, hex_to_rgb(guess.hex), swatch, border_radius=4)
            hints = "  ".join(_HINT_LABELS.get(hint, hint) for hint in (guess.h_hint, guess.s_hint, guess.l_hint))
            text = self._font.render(f"{guess.hex}   {hints}", True, colors_mod.HUD_TEXT)
            surface.blit(text, (swatch.right + 20, y + row_h // 2 - text.get_height() // 2))

    def _draw_controls(self, surface: pygame.Surface, rect: pygame.Rect, attempt: int) -> None:
        preview = pygame.Rect(rect.centerx - 60, rect.y, 120, 70)
        pygame.draw.rect(surface, hsl_to_rgb(self._current_color()), preview, border_radius=8)

        for i, slider in enumerate(self._sliders):
            slider.layout(pygame.Rect(rect.x + 40, rect.y + 90 + i * 50, rect.w - 80, 40))
            slider.draw(surface)

        self._button = pygame.Rect(rect.centerx - 110, rect.bottom - 55, 220, 45)
        self._draw_button(surface, f"GUESS ({attempt}/{MAX_GUESSES})")

    def _draw_result(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        game = self._context.game
        swatches = [game.secret_hex]
        last = game.last_guess
        if game.state == GameState.WON and last is not None:
            swatches.append(last.hex)

        x = rect.centerx - (len(swatches) * 140 - 20) // 2
        for hex_str in swatches:
            swatch = pygame.Rect(x, rect.y, 120, 100)
            pygame.draw.rect(surface, hex_to_rgb(hex_str), swatch, border_radius=8)
            label = self._font.render(hex_str, True, colors_mod.HUD_TEXT)
            surface.blit(label, (swatch.centerx - label.get_width() // 2, swatch.bottom + 6))
            x += 140

        if game.state == GameState.WON:
            message = f"Nailed it in {len(game.guesses)}!"
        else:
            message = f"The color was {game.secret_hex}"
        text = self._font.render(message, True, colors_mod.HUD_TEXT)
        surface.blit(text, (rect.centerx - text.get_width() // 2, rect.y + 150))

        self._button = pygame.Rect(rect.centerx - 110, rect.bottom - 55, 220, 45)
        if self._copied_timer > 0:
            self._draw_button(surface, "No clipboard" if self._copy_failed else "Copied!")
        else:
            self._draw_button(surface, "Share")

    def _draw_button(self, surface: pygame.Surface, label: str) -> None:
        pygame.draw.rect(surface, colors_mod.BUTTON, self._button, border_radius=8)
        text = self._font.render(label, True, colors_mod.BUTTON_TEXT)
        surface.blit(text, text.get_rect(center=self._button.center))
