"""Tests for the daily game state machine."""

import datetime

from chromacle.config import MAX_GUESSES
from chromacle.daily import daily_color
from chromacle.game import Game, record_result
from chromacle.models import Color, GameState, Session, Stats
from chromacle.scoring import score_guess
from chromacle.storage import load_session, load_stats, save_session


def _miss(secret: Color) -> Color:
    # Opposite hue, 10 points of saturation off: closeness 200
    return Color((secret.h + 180) % 360, secret.s + 10, secret.l)


def test_new_game_starts_in_progress(store, day):
    game = Game.load(store, day)
    assert game.state == GameState.IN_PROGRESS
    assert game.guesses == []
    assert game.attempts_left == MAX_GUESSES
    assert game.next_attempt == 1


def test_exact_guess_wins_immediately(store, day):
    game = Game.load(store, day)
    guess = game.submit_guess(game.secret)
    assert guess is not None
    assert guess.closeness == 0
    assert game.state == GameState.WON
    assert game.session.game_over and game.session.won
    assert game.stats == Stats(played=1, won=1, streak=1, max_streak=1)


def test_win_on_later_attempt(store, day):
    game = Game.load(store, day)
    game.submit_guess(_miss(game.secret))
    game.submit_guess(_miss(game.secret))
    near = Color(game.secret.h, game.secret.s, game.secret.l + 5)
    game.submit_guess(near)
    assert game.state == GameState.WON
    assert len(game.guesses) == 3


def test_six_misses_lose(store, day):
    game = Game.load(store, day)
    for _ in range(MAX_GUESSES):
        guess = game.submit_guess(_miss(game.secret))
        assert guess.closeness == 200
    assert game.state == GameState.LOST
    assert game.session.game_over
    assert not game.session.won
    assert game.stats.played == 1
    assert game.stats.won == 0
    assert game.stats.streak == 0


def test_stats_untouched_while_in_progress(store, day):
    game = Game.load(store, day)
    for _ in range(MAX_GUESSES - 1):
        game.submit_guess(_miss(game.secret))
        assert game.stats.played == 0
    assert load_stats(store).played == 0


def test_submit_after_game_over_is_noop(store, day):
    game = Game.load(store, day)
    game.submit_guess(game.secret)
    stored = store.get("chromacle-state")
    before = (list(game.guesses), game.session.won, game.stats.played)

    assert game.submit_guess(_miss(game.secret)) is None
    assert (list(game.guesses), game.session.won, game.stats.played) == before
    assert store.get("chromacle-state") == stored


def test_every_guess_is_persisted(store, day):
    game = Game.load(store, day)
    game.submit_guess(_miss(game.secret))
    restored = load_session(store, day.isoformat())
    assert restored is not None
    assert len(restored.guesses) == 1
    assert not restored.game_over


def test_reload_resumes_session(store, day):
    game = Game.load(store, day)
    game.submit_guess(_miss(game.secret))
    game.submit_guess(_miss(game.secret))

    resumed = Game.load(store, day)
    assert len(resumed.guesses) == 2
    assert resumed.guesses == game.guesses
    assert resumed.next_attempt == 3


def test_finished_game_stays_finished_after_reload(store, day):
    game = Game.load(store, day)
    game.submit_guess(game.secret)

    resumed = Game.load(store, day)
    assert resumed.state == GameState.WON
    assert resumed.submit_guess(game.secret) is None
    assert resumed.stats.played == 1


def test_next_day_starts_fresh(store, day):
    game = Game.load(store, day)
    game.submit_guess(game.secret)

    tomorrow = Game.load(store, day + datetime.timedelta(days=1))
    assert tomorrow.state == GameState.IN_PROGRESS
    assert tomorrow.guesses == []
    assert tomorrow.stats.played == 1


def test_streak_across_days(store, day):
    for offset in range(3):
        game = Game.load(store, day + datetime.timedelta(days=offset))
        game.submit_guess(game.secret)
    assert load_stats(store) == Stats(played=3, won=3, streak=3, max_streak=3)

    lost = Game.load(store, day + datetime.timedelta(days=3))
    for _ in range(MAX_GUESSES):
        lost.submit_guess(_miss(lost.secret))
    assert load_stats(store) == Stats(played=4, won=3, streak=0, max_streak=3)


def test_record_result():
    stats = Stats(played=5, won=4, streak=2, max_streak=4)
    record_result(stats, won=True)
    assert stats == Stats(played=6, won=5, streak=3, max_streak=4)
    record_result(stats, won=False)
    assert stats == Stats(played=7, won=5, streak=0, max_streak=4)


def test_secret_hex(store, day):
    game = Game.load(store, day)
    assert game.secret_hex.startswith("#")
    assert len(game.secret_hex) == 7


def test_inconsistent_stored_session_starts_fresh(store, day):
    secret = daily_color(day)
    misses = [score_guess(_miss(secret), secret)] * MAX_GUESSES
    save_session(store, Session(date=day.isoformat(), guesses=misses))

    game = Game.load(store, day)
    assert game.state == GameState.IN_PROGRESS
    assert game.guesses == []
    game.submit_guess(_miss(game.secret))
    assert len(game.guesses) == 1
    assert game.stats.played == 0
