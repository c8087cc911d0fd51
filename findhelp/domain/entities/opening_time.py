from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class PackedTime:
    """24-hour time packed into digits, e.g. 930 for 09:30 and 1700 for 17:00."""

    value: int

    def _digits(self) -> str:
        return str(self.value).zfill(4)

    def to_minutes(self) -> int:
        digits = self._digits()
        return int(digits[:2]) * 60 + int(digits[2:])

    def label(self) -> str:
        digits = self._digits()
        return f"{digits[:2]}:{digits[2:]}"


@dataclass(frozen=True)
class ClockTime:
    """24-hour "HH:MM" string as stored. Malformed text yields no minutes."""

    text: str

    def to_minutes(self) -> int | None:
        parts = self.text.split(":")
        if len(parts) < 2:
            return None
        try:
            return int(parts[0]) * 60 + int(parts[1])
        except ValueError:
            return None

    def label(self) -> str:
        return self.text


TimeValue = Union[PackedTime, ClockTime]


@dataclass(frozen=True)
class OpeningTimeSlot:
    """One weekly opening interval as received, values not yet validated."""

    day: Any = None
    start: Any = None
    end: Any = None


@dataclass(frozen=True)
class NormalizedSlot:
    day: int | None
    start: TimeValue | None
    end: TimeValue | None


def parse_time_value(raw: Any) -> TimeValue | None:
    if isinstance(raw, (PackedTime, ClockTime)):
        return raw
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return PackedTime(raw)
    if isinstance(raw, float) and raw.is_integer():
        return PackedTime(int(raw))
    if isinstance(raw, str):
        return ClockTime(raw)
    return None


def parse_day(raw: Any) -> int | None:
    # Monday-origin: 0=Monday .. 6=Sunday
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, float) and not raw.is_integer():
        return None
    try:
        day = int(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if 0 <= day <= 6:
        return day
    return None


def normalize_opening_time(slot: OpeningTimeSlot) -> NormalizedSlot:
    return NormalizedSlot(
        day=parse_day(slot.day),
        start=parse_time_value(slot.start),
        end=parse_time_value(slot.end),
    )
