from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NextOpening:
    day_label: str  # "Tuesday"
    time_label: str  # "09:00"


@dataclass(frozen=True)
class OpeningStatus:
    is_open: bool
    is_appointment_only: bool
    next_open: NextOpening | None = None
