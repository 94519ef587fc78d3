"""Shareable result text."""

from __future__ import annotations

import datetime

from chromacle.config import MAX_GUESSES, SHARE_BEST, SHARE_FAIR, SHARE_FOOTER, SHARE_GOOD
from chromacle.daily import share_date, today
from chromacle.models import Session

BEST = "🟩"
GOOD = "🟨"
FAIR = "🟧"
POOR = "🟥"
EMPTY = "⬛"
FAILED = "X"


def closeness_glyph(closeness: float) -> str:
    if closeness <= SHARE_BEST:
        return BEST
    if closeness <= SHARE_GOOD:
        return GOOD
    if closeness <= SHARE_FAIR:
        return FAIR
    return POOR


def format_share(session: Session, day: datetime.date | None = None) -> str:
    """Render a finished (or partial) session as a compact glyph grid."""
    day = day or today()
    glyphs = [closeness_glyph(g.closeness) for g in session.guesses]
    glyphs += [EMPTY] * (MAX_GUESSES - len(glyphs))
    result = len(session.guesses) if session.won else FAILED
    return (
        f"🎨 Chromacle {share_date(day)}\n"
        f"{''.join(glyphs)} {result}/{MAX_GUESSES}\n"
        f"\n"
        f"{SHARE_FOOTER}"
    )
