"""Deterministic secret color for each calendar day.

Every installation must derive the same color for the same date, so the
transform below is part of the puzzle definition: changing it changes the
answer for every player.
"""

from __future__ import annotations

import datetime
import math

from chromacle.config import SECRET_LIT_MIN, SECRET_LIT_SPAN, SECRET_SAT_MIN, SECRET_SAT_SPAN
from chromacle.models import Color


def seeded_random(seed: int) -> float:
    """Map an integer seed to a fraction in [0, 1)."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def daily_seed(day: datetime.date) -> int:
    return day.year * 10000 + day.month * 100 + day.day


def daily_color(day: datetime.date) -> Color:
    seed = daily_seed(day)
    return Color(
        h=math.floor(seeded_random(seed) * 360),
        s=math.floor(seeded_random(seed + 1) * SECRET_SAT_SPAN) + SECRET_SAT_MIN,
        l=math.floor(seeded_random(seed + 2) * SECRET_LIT_SPAN) + SECRET_LIT_MIN,
    )


def day_key(day: datetime.date) -> str:
    """Date stamp stored with a session; equal strings mean the same day."""
    return day.isoformat()


def share_date(day: datetime.date) -> str:
    return f"{day.month}/{day.day}/{day.year}"


def today() -> datetime.date:
    """Current calendar date in the local time zone."""
    return datetime.date.today()
