from collections.abc import Mapping
from typing import Any, List, Literal, Optional
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from app.services.business import WEEKDAYS, TIME_FIELDS, is_valid_time


TIME_PATTERN = "^([01][0-9]|2[0-3]):[0-5][0-9]$"
# an empty value clears the last order time
OPTIONAL_TIME_PATTERN = "^(([01][0-9]|2[0-3]):[0-5][0-9])?$"

Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
TimeField = Literal["open_time", "close_time", "last_order_time"]


def check_slot_times(value: Any) -> Any:
    """
    Reject time slots whose times are not H:MM or HH:MM.

    Only well-shaped slots are inspected; other shapes are left to the sanitizer.
    Legacy free-text values are passed through unchanged.
    """
    if not isinstance(value, Mapping):
        return value
    for day in WEEKDAYS:
        schedule = value.get(day)
        if not isinstance(schedule, Mapping) or not isinstance(schedule.get("time_slots"), list):
            continue
        for index, slot in enumerate(schedule["time_slots"]):
            if not isinstance(slot, Mapping):
                continue
            for name in TIME_FIELDS:
                time_value = slot.get(name)
                if isinstance(time_value, str) and time_value and not is_valid_time(time_value):
                    raise ValueError(f"{day} slot {index}: invalid {name} {time_value!r}, expected HH:MM")
    return value


class TimeSlotOut(BaseModel):
    open_time: str
    close_time: str
    last_order_time: str


class DayScheduleOut(BaseModel):
    is_closed: bool
    time_slots: List[TimeSlotOut] = []


class BusinessHoursOut(BaseModel):
    """full weekly schedule, always holding all 7 days."""
    monday: DayScheduleOut
    tuesday: DayScheduleOut
    wednesday: DayScheduleOut
    thursday: DayScheduleOut
    friday: DayScheduleOut
    saturday: DayScheduleOut
    sunday: DayScheduleOut


class CommonHoursOut(BaseModel):
    open_time: str
    close_time: str
    last_order_time: str
    closed_days: List[str] = []


class ScheduleRequest(BaseModel):
    """
    schema for editor requests carrying the current schedule.
    the schedule is sanitized server side, so partial or stale shapes are accepted,
    but any time a slot does carry must be a real time.
    """
    business_hours: Any = Field(None, description="Current weekly schedule")

    @field_validator('business_hours')
    @classmethod
    def validate_slot_times(cls, v):
        return check_slot_times(v)


class _TimeChange(ScheduleRequest):
    field: TimeField = Field(..., description="Which time field to change")
    value: str = Field(..., description="New time in HH:MM format, or empty to clear the last order time",
                       pattern=OPTIONAL_TIME_PATTERN)

    @field_validator('value')
    @classmethod
    def validate_empty_value(cls, v, info: ValidationInfo):
        if not v and info.data.get('field') != 'last_order_time':
            raise ValueError('Only last_order_time can be cleared')
        return v


class CommonHoursApply(_TimeChange):
    """change one time on the first slot of every open day."""


class TimeSlotUpdate(_TimeChange):
    pass


class LegacyTextIn(BaseModel):
    text: Optional[str] = Field(None, description="Legacy free-text business hours")


class LegacyTextOut(BaseModel):
    text: str


class ScheduleDisplayOut(BaseModel):
    lines: List[str]


class OpenCheckRequest(ScheduleRequest):
    day: Weekday
    time: Optional[str] = Field(None, description="Time in HH:MM format", pattern=TIME_PATTERN)


class OpenCheckOut(BaseModel):
    is_open: bool
    day: str
    time: Optional[str] = None


class TimeOption(BaseModel):
    value: str
    label: str
