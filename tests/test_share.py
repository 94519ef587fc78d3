"""Tests for share text formatting."""

import datetime

from chromacle.models import Color, Guess, Session
from chromacle.share import closeness_glyph, format_share


def _guess(closeness: int) -> Guess:
    return Guess(Color(0, 0, 0), "#000000", "🎯", "🎯", "🎯", closeness)


def test_glyph_thresholds():
    assert closeness_glyph(0) == "🟩"
    assert closeness_glyph(10) == "🟩"
    assert closeness_glyph(11) == "🟨"
    assert closeness_glyph(30) == "🟨"
    assert closeness_glyph(60) == "🟧"
    assert closeness_glyph(61) == "🟥"


def test_won_share():
    session = Session(date="2026-03-07", guesses=[_guess(25), _guess(5)], game_over=True, won=True)
    text = format_share(session, datetime.date(2026, 3, 7))
    assert text == "🎨 Chromacle 3/7/2026\n🟨🟩⬛⬛⬛⬛ 2/6\n\nchromacle.app"


def test_lost_share():
    session = Session(date="2026-03-07", guesses=[_guess(200)] * 6, game_over=True, won=False)
    text = format_share(session, datetime.date(2026, 3, 7))
    lines = text.split("\n")
    assert lines[1] == "🟥" * 6 + " X/6"
    assert lines[-1] == "chromacle.app"
