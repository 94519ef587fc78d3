"""View protocol, ViewContext, ViewAction, and ViewManager."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Protocol, runtime_checkable

import pygame

if TYPE_CHECKING:
    from chromacle.game import Game


@dataclass
class ViewContext:
    """Shared state passed to views on entry."""

    game: Game


@dataclass
class ViewAction:
    """Navigation command returned by views."""

    kind: Literal["push", "pop", "quit"]
    target: str | None = None


@runtime_checkable
class View(Protocol):
    """A full-screen game state."""

    name: str
    display_name: str

    def on_enter(self, context: ViewContext) -> None: ...
    def on_exit(self) -> None: ...
    def handle_event(self, event: pygame.event.Event) -> ViewAction | None: ...
    def update(self, dt: float) -> ViewAction | None: ...
    def draw(self, surface: pygame.Surface) -> None: ...


class ViewManager:
    """Owns the view stack and dispatches the game loop to the active view."""

    def __init__(self, context: ViewContext) -> None:
        self._registry: dict[str, type] = {}
        self._stack: list[View] = []
        self._context = context

    def register(self, view_cls: type) -> None:
        self._registry[view_cls.name] = view_cls

    def push(self, view_name: str) -> None:
        if self._stack:
            self._stack[-1].on_exit()
        view = self._registry[view_name]()
        view.on_enter(self._context)
        self._stack.append(view)

    def pop(self) -> None:
        if self._stack:
            self._stack.pop().on_exit()
        if self._stack:
            self._stack[-1].on_enter(self._context)

    @property
    def active_view(self) -> View | None:
        return self._stack[-1] if self._stack else None

    def handle_event(self, event: pygame.event.Event) -> bool:
        if (view := self.active_view) is None:
            return False
        return self._process_action(view.handle_event(event))

    def update(self, dt: float) -> bool:
        if (view := self.active_view) is None:
            return False
        return self._process_action(view.update(dt))

    def draw(self, surface: pygame.Surface) -> None:
        if (view := self.active_view) is not None:
            view.draw(surface)

    def _process_action(self, action: ViewAction | None) -> bool:
        if action is None:
            return True
        if action.kind == "quit":
            return False
        elif action.kind == "push":
            self.push(action.target)
        elif action.kind == "pop":
            self.pop()
        return True


def layout_regions(
    total: pygame.Rect,
    specs: list[tuple[str, Literal["top", "bottom"], int]],
) -> dict[str, pygame.Rect]:
    """Stack named bands from the top or bottom of a rect. Remainder is 'center'."""
    remaining = total.copy()
    regions: dict[str, pygame.Rect] = {}

    for name, anchor, size in specs:
        if anchor == "top":
            regions[name] = pygame.Rect(remaining.x, remaining.y, remaining.w, size)
            remaining = pygame.Rect(remaining.x, remaining.y + size, remaining.w, remaining.h - size)
        elif anchor == "bottom":
            regions[name] = pygame.Rect(remaining.x, remaining.bottom - size, remaining.w, size)
            remaining = pygame.Rect(remaining.x, remaining.y, remaining.w, remaining.h - size)

    regions["center"] = remaining
    return regions
