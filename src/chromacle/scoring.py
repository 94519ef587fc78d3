"""Guess scoring — compare a guessed color to the day's secret."""

from __future__ import annotations

from chromacle.codec import to_hex
from chromacle.config import CHANNEL_HIT_TOLERANCE, HUE_HIT_TOLERANCE, WIN_THRESHOLD
from chromacle.models import Color, Distance, Guess

HIT = "🎯"
HUE_ADVANCE = "🔴→"
HUE_RETREAT = "←🔵"
SAT_UP = "⬆️"
SAT_DOWN = "⬇️"
LIT_UP = "☀️"
LIT_DOWN = "🌑"


def hue_difference(h1: int, h2: int) -> int:
    """Shortest distance around the color wheel, 0-180."""
    diff = abs(h1 - h2)
    return min(diff, 360 - diff)


def distance(guess: Color, secret: Color) -> Distance:
    h_diff = hue_difference(guess.h, secret.h)
    s_diff = abs(guess.s - secret.s)
    l_diff = abs(guess.l - secret.l)
    return Distance(
        h_diff=h_diff,
        s_diff=s_diff,
        l_diff=l_diff,
        total=h_diff + 2 * s_diff + 2 * l_diff,
    )


def hue_hint(guess: int, target: int) -> str:
    if hue_difference(guess, target) <= HUE_HIT_TOLERANCE:
        return HIT
    return HUE_ADVANCE if (target - guess + 360) % 360 < 180 else HUE_RETREAT


def channel_hint(guess: int, target: int, up: str, down: str) -> str:
    diff = target - guess
    if abs(diff) <= CHANNEL_HIT_TOLERANCE:
        return HIT
    return up if diff > 0 else down


def is_win(closeness: int) -> bool:
    return closeness <= WIN_THRESHOLD


def score_guess(color: Color, secret: Color) -> Guess:
    """Build the immutable Guess record for one attempt."""
    dist = distance(color, secret)
    return Guess(
        color=color,
        hex=to_hex(color),
        h_hint=hue_hint(color.h, secret.h),
        s_hint=channel_hint(color.s, secret.s, SAT_UP, SAT_DOWN),
        l_hint=channel_hint(color.l, secret.l, LIT_UP, LIT_DOWN),
        closeness=dist.total,
    )
