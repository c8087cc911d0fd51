from __future__ import annotations

import logging
from datetime import datetime

from findhelp.application.utils.time_format import (
    day_label,
    format_time,
    minutes_since_midnight,
    schedule_day,
    time_to_minutes,
)
from findhelp.domain.entities.opening_status import NextOpening, OpeningStatus
from findhelp.domain.entities.opening_time import NormalizedSlot, normalize_opening_time
from findhelp.domain.entities.service import Service

logger = logging.getLogger(__name__)

APPOINTMENT_KEYWORDS = (
    "appointment",
    "referral",
    "call ahead",
    "contact us first",
    "by arrangement",
    "booking required",
    "pre-arranged",
)

APPOINTMENT_CATEGORIES = {"medical"}
APPOINTMENT_SUB_CATEGORIES = {"gp", "counselling", "mental-health", "dentist"}


def evaluate_opening_status(service: Service, now: datetime) -> OpeningStatus:
    """Open/closed state of a service at `now` (local wall-clock time)."""
    is_appointment_only = is_appointment_only_service(service)

    if not service.open_times:
        return OpeningStatus(is_open=False, is_appointment_only=is_appointment_only)

    slots = [normalize_opening_time(slot) for slot in service.open_times]
    current_day = schedule_day(now)
    current_minutes = minutes_since_midnight(now)

    if is_open_at(slots, current_day, current_minutes, service_id=service.id):
        return OpeningStatus(is_open=True, is_appointment_only=is_appointment_only)

    return OpeningStatus(
        is_open=False,
        is_appointment_only=is_appointment_only,
        next_open=find_next_opening(slots, current_day, current_minutes),
    )


def is_open_at(
    slots: list[NormalizedSlot],
    current_day: int,
    current_minutes: int,
    service_id: str | None = None,
) -> bool:
    for slot in slots:
        if slot.day != current_day:
            continue
        start_minutes = time_to_minutes(slot.start)
        end_minutes = time_to_minutes(slot.end)
        if start_minutes is None or end_minutes is None:
            logger.debug(
                "Skipping opening slot with unparseable time",
                extra={"service_id": service_id, "reason": "bad_time"},
            )
            continue
        if start_minutes <= current_minutes < end_minutes:
            return True
    return False


def find_next_opening(
    slots: list[NormalizedSlot],
    current_day: int,
    current_minutes: int,
) -> NextOpening | None:
    candidates = [
        slot
        for slot in slots
        if slot.day is not None and slot.start is not None and time_to_minutes(slot.start) is not None
    ]
    if not candidates:
        return None

    def rotated_day(slot: NormalizedSlot) -> int:
        return slot.day if slot.day >= current_day else slot.day + 7

    candidates.sort(key=lambda slot: (rotated_day(slot), time_to_minutes(slot.start)))

    for slot in candidates:
        slot_day = rotated_day(slot)
        if slot_day > current_day or (slot_day == current_day and time_to_minutes(slot.start) > current_minutes):
            return _next_opening(slot)

    # Wraps round to the first slot of next week.
    return _next_opening(candidates[0])


def _next_opening(slot: NormalizedSlot) -> NextOpening:
    return NextOpening(day_label=day_label(slot.day), time_label=format_time(slot.start))


def is_appointment_only_service(service: Service) -> bool:
    if service.is_appointment_only:
        return True

    if service.sub_category == "telephone":
        return True

    description = (service.description or "").lower()
    if any(keyword in description for keyword in APPOINTMENT_KEYWORDS):
        return True

    return service.category in APPOINTMENT_CATEGORIES and service.sub_category in APPOINTMENT_SUB_CATEGORIES
