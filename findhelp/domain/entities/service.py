from __future__ import annotations

from dataclasses import dataclass, field

from findhelp.domain.entities.opening_time import OpeningTimeSlot


@dataclass(frozen=True)
class Service:
    id: str | None
    open_times: tuple[OpeningTimeSlot, ...] = field(default_factory=tuple)
    is_appointment_only: bool | None = None
    category: str | None = None
    sub_category: str | None = None
    description: str | None = None
    distance: float | None = None  # kilometres from the searched location

    @property
    def cache_identity(self) -> str:
        return self.id or "unknown"
