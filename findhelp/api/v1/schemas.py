from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from findhelp.domain.entities.opening_status import OpeningStatus
from findhelp.domain.entities.opening_time import OpeningTimeSlot
from findhelp.domain.entities.service import Service


class OpeningTimeSlotSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Raw values; the evaluator decides what is usable.
    day: Any = None
    start: Any = None
    end: Any = None

    @model_validator(mode="before")
    @classmethod
    def _prefer_legacy_names(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            for legacy, name in (("Day", "day"), ("StartTime", "start"), ("EndTime", "end")):
                if data.get(legacy) is not None:
                    data[name] = data[legacy]
        return data

    def to_entity(self) -> OpeningTimeSlot:
        return OpeningTimeSlot(day=self.day, start=self.start, end=self.end)


class ServiceSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    id: str | None = None
    mongo_id: str | None = Field(None, alias="_id")
    open_times: list[OpeningTimeSlotSchema] | None = Field(None, alias="openTimes")
    is_appointment_only: bool | None = Field(None, alias="isAppointmentOnly")
    category: str | None = None
    sub_category: str | None = Field(None, alias="subCategory")
    description: str | None = None
    distance: float | None = None

    def to_entity(self) -> Service:
        return Service(
            id=self.id or self.mongo_id,
            open_times=tuple(slot.to_entity() for slot in self.open_times or []),
            is_appointment_only=self.is_appointment_only,
            category=self.category,
            sub_category=self.sub_category,
            description=self.description,
            distance=self.distance,
        )


class OpeningStatusRequestSchema(BaseModel):
    services: list[ServiceSchema] = Field(default_factory=list)


class NextOpenSchema(BaseModel):
    day: str
    time: str


class OpeningStatusResultSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    is_open: bool = Field(alias="isOpen")
    is_appointment_only: bool = Field(alias="isAppointmentOnly")
    next_open: NextOpenSchema | None = Field(None, alias="nextOpen")
    distance_text: str = Field("", alias="distanceText")

    @classmethod
    def from_status(cls, service: Service, status: OpeningStatus, distance_text: str) -> "OpeningStatusResultSchema":
        next_open = None
        if status.next_open is not None:
            next_open = NextOpenSchema(day=status.next_open.day_label, time=status.next_open.time_label)
        return cls(
            id=service.id,
            is_open=status.is_open,
            is_appointment_only=status.is_appointment_only,
            next_open=next_open,
            distance_text=distance_text,
        )


class OpeningStatusResponseSchema(BaseModel):
    results: list[OpeningStatusResultSchema]


class CacheStatsSchema(BaseModel):
    size: int
    max_size: int
    cache_duration_ms: int
