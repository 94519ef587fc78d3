"""Core data models shared across the engine."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


_HEX_RE = re.compile(r"^#[0-9a-f]{6}\Z")


class GameState(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class Color:
    """An HSL color as the sliders produce it."""

    h: int  # degrees 0-359
    s: int  # percent 0-100
    l: int  # percent 0-100

    @classmethod
    def from_sliders(cls, h: float, s: float, l: float) -> Color:
        """Wrap hue and clamp saturation/lightness into range."""
        return cls(
            h=int(h) % 360,
            s=min(100, max(0, int(s))),
            l=min(100, max(0, int(l))),
        )


@dataclass(frozen=True)
class Distance:
    h_diff: int
    s_diff: int
    l_diff: int
    total: int


@dataclass(frozen=True)
class Guess:
    color: Color
    hex: str
    h_hint: str
    s_hint: str
    l_hint: str
    closeness: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "h": self.color.h,
            "s": self.color.s,
            "l": self.color.l,
            "hex": self.hex,
            "hHint": self.h_hint,
            "sHint": self.s_hint,
            "lHint": self.l_hint,
            "closeness": self.closeness,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Guess:
        return cls(
            color=Color(
                h=_in_range(data["h"], 0, 359),
                s=_in_range(data["s"], 0, 100),
                l=_in_range(data["l"], 0, 100),
            ),
            hex=_as_hex(data["hex"]),
            h_hint=_as_str(data["hHint"]),
            s_hint=_as_str(data["sHint"]),
            l_hint=_as_str(data["lHint"]),
            closeness=_in_range(data["closeness"], 0, 580),
        )


@dataclass
class Session:
    """One calendar day's game."""

    date: str
    guesses: list[Guess] = field(default_factory=list)
    game_over: bool = False
    won: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "guesses": [g.to_dict() for g in self.guesses],
            "gameOver": self.game_over,
            "won": self.won,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Session:
        raw_guesses = data["guesses"]
        if not isinstance(raw_guesses, list):
            raise TypeError("guesses must be a list")
        return cls(
            date=_as_str(data["date"]),
            guesses=[Guess.from_dict(g) for g in raw_guesses],
            game_over=_as_bool(data["gameOver"]),
            won=_as_bool(data["won"]),
        )


@dataclass
class Stats:
    """Aggregate results across every completed day."""

    played: int = 0
    won: int = 0
    streak: int = 0
    max_streak: int = 0

    @property
    def win_pct(self) -> int:
        return round(self.won / self.played * 100) if self.played else 0

    def to_dict(self) -> dict[str, int]:
        return {
            "played": self.played,
            "won": self.won,
            "streak": self.streak,
            "maxStreak": self.max_streak,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Stats:
        return cls(
            played=_as_int(data["played"]),
            won=_as_int(data["won"]),
            streak=_as_int(data["streak"]),
            max_streak=_as_int(data["maxStreak"]),
        )


def _as_int(value: Any) -> int:
    # bool is an int subclass; a stored true/false is never a valid count
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return int(value)


def _in_range(value: Any, low: int, high: int) -> int:
    number = _as_int(value)
    if not low <= number <= high:
        raise ValueError(f"{number} outside {low}-{high}")
    return number


def _as_hex(value: Any) -> str:
    if not isinstance(value, str) or not _HEX_RE.match(value):
        raise ValueError(f"expected #rrggbb, got {value!r}")
    return value


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {value!r}")
    return value


def _as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a bool, got {value!r}")
    return value
