"""Daily game state machine: sequences guesses and settles the result."""

from __future__ import annotations

import datetime
import logging

from chromacle.codec import to_hex
from chromacle.config import MAX_GUESSES
from chromacle.daily import daily_color, day_key
from chromacle.models import Color, GameState, Guess, Session, Stats
from chromacle.scoring import is_win, score_guess
from chromacle.storage import KeyValueStore, load_session, load_stats, save_session, save_stats

logger = logging.getLogger(__name__)


def record_result(stats: Stats, won: bool) -> None:
    """Apply one finished game to the aggregate stats."""
    stats.played += 1
    if won:
        stats.won += 1
        stats.streak += 1
        stats.max_streak = max(stats.max_streak, stats.streak)
    else:
        stats.streak = 0


class Game:
    """One player's game for one calendar day."""

    def __init__(
        self,
        store: KeyValueStore,
        day: datetime.date,
        session: Session | None = None,
        stats: Stats | None = None,
    ) -> None:
        self._store = store
        self.day = day
        self.secret = daily_color(day)
        self.session = session or Session(date=day_key(day))
        self.stats = stats if stats is not None else Stats()

    @classmethod
    def load(cls, store: KeyValueStore, day: datetime.date) -> Game:
        """Restore today's session from the store, or start a fresh one."""
        session = load_session(store, day_key(day))
        if session is None:
            logger.debug("Starting a new session for %s", day_key(day))
        return cls(store, day, session=session, stats=load_stats(store))

    @property
    def state(self) -> GameState:
        if self.session.won:
            return GameState.WON
        if self.session.game_over:
            return GameState.LOST
        return GameState.IN_PROGRESS

    @property
    def guesses(self) -> list[Guess]:
        return list(self.session.guesses)

    @property
    def last_guess(self) -> Guess | None:
        return self.session.guesses[-1] if self.session.guesses else None

    @property
    def attempts_left(self) -> int:
        return MAX_GUESSES - len(self.session.guesses)

    @property
    def next_attempt(self) -> int:
        return len(self.session.guesses) + 1

    @property
    def secret_hex(self) -> str:
        return to_hex(self.secret)

    def submit_guess(self, color: Color) -> Guess | None:
        """Score a guess and advance the game.

        Returns the new Guess, or None if the game had already ended.
        """
        if self.state != GameState.IN_PROGRESS:
            logger.debug("Ignoring guess %s: game already over", color)
            return None

        guess = score_guess(color, self.secret)
        self.session.guesses.append(guess)
        logger.info(
            "Guess %d/%d %s closeness=%d",
            len(self.session.guesses), MAX_GUESSES, guess.hex, guess.closeness,
        )

        if is_win(guess.closeness):
            self._finish(won=True)
        elif len(self.session.guesses) >= MAX_GUESSES:
            self._finish(won=False)

        save_session(self._store, self.session)
        return guess

    def _finish(self, won: bool) -> None:
        self.session.won = won
        self.session.game_over = True
        record_result(self.stats, won)
        save_stats(self._store, self.stats)
        logger.info("Game over for %s: %s", self.session.date, "won" if won else "lost")
