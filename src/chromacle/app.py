"""Top-level application: initializes pygame, loads today's game, and runs the loop."""

from __future__ import annotations

import datetime
import logging
import sqlite3
from pathlib import Path

import pygame

from chromacle.config import DEFAULT_DB_PATH, FPS, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from chromacle.game import Game
from chromacle.storage import KeyValueStore, MemoryStore, SqliteStore
from chromacle.views.base import ViewContext, ViewManager
from chromacle.views.game_view import GameView
from chromacle.views.stats_view import StatsView

logger = logging.getLogger(__name__)


def open_store(db_path: Path = DEFAULT_DB_PATH) -> KeyValueStore:
    """Open the durable store, falling back to memory if it cannot be opened."""
    try:
        return SqliteStore(db_path)
    except (OSError, sqlite3.Error) as exc:
        logger.warning("Progress will not be saved (%s): %s", db_path, exc)
        return MemoryStore()


class App:
    def __init__(self, day: datetime.date, db_path: Path = DEFAULT_DB_PATH) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        self.store = open_store(db_path)
        self.game = Game.load(self.store, day)

        self.views = ViewManager(ViewContext(game=self.game))
        self.views.register(GameView)
        self.views.register(StatsView)
        self.views.push("game")

    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif not self.views.handle_event(event):
                    running = False
            if running:
                if not self.views.update(dt):
                    running = False
            self.views.draw(self.screen)
            pygame.display.flip()

        self._cleanup()
        pygame.quit()

    def _cleanup(self) -> None:
        while self.views.active_view:
            self.views.pop()
        close = getattr(self.store, "close", None)
        if close:
            close()
