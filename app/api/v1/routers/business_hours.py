from typing import Dict, Any, List

from fastapi import APIRouter, HTTPException, Path
from pydantic import BaseModel

from app.schemas.business_hours import (
    Weekday,
    BusinessHoursOut,
    CommonHoursOut,
    ScheduleRequest,
    CommonHoursApply,
    TimeSlotUpdate,
    LegacyTextIn,
    LegacyTextOut,
    ScheduleDisplayOut,
    OpenCheckRequest,
    OpenCheckOut,
    TimeOption,
)
from app.services.business import (
    default_business_hours,
    sanitize_business_hours,
    get_common_hours,
    toggle_closed_day,
    apply_common_hours,
    update_time_slot,
    add_time_slot,
    remove_time_slot,
    clear_time_slots,
    is_open_on,
    is_open_at,
    format_schedule_lines,
    time_options,
    parse_legacy_text,
    generate_legacy_text,
    to_dict,
)

router = APIRouter(prefix="/business-hours", tags=["business hours"])


class ScheduleResponse(BaseModel):
    """schedule after an edit, plus the common hours the simple view shows."""
    business_hours: BusinessHoursOut
    common_hours: CommonHoursOut


def _respond(data) -> Dict[str, Any]:
    return {
        "business_hours": to_dict(data),
        "common_hours": get_common_hours(data).to_dict(),
    }


@router.get("/defaults", response_model=BusinessHoursOut)
def get_defaults():
    """schedule used when a store form is opened for a new store."""
    return to_dict(default_business_hours())


@router.get("/time-options", response_model=List[TimeOption])
def get_time_options():
    """selectable times in 30 minute steps."""
    return time_options()


@router.post("/sanitize", response_model=ScheduleResponse)
def sanitize(payload: ScheduleRequest):
    return _respond(sanitize_business_hours(payload.business_hours))


@router.post("/common-hours", response_model=CommonHoursOut)
def get_common(payload: ScheduleRequest):
    """common hours projection for the simple editing view."""
    data = sanitize_business_hours(payload.business_hours)
    return get_common_hours(data).to_dict()


@router.post("/closed-days/{day}/toggle", response_model=ScheduleResponse)
def toggle_closed(payload: ScheduleRequest, day: Weekday = Path(...)):
    data = sanitize_business_hours(payload.business_hours)
    return _respond(toggle_closed_day(data, day))


@router.post("/common-hours/apply", response_model=ScheduleResponse)
def apply_common(payload: CommonHoursApply):
    """set one time on the first slot of every open day."""
    data = sanitize_business_hours(payload.business_hours)
    return _respond(apply_common_hours(data, payload.field, payload.value))


@router.post("/days/{day}/slots", response_model=ScheduleResponse)
def add_slot(payload: ScheduleRequest, day: Weekday = Path(...)):
    """add a split-hours slot; days already holding 3 slots are returned unchanged."""
    data = sanitize_business_hours(payload.business_hours)
    return _respond(add_time_slot(data, day))


@router.put("/days/{day}/slots/{index}", response_model=ScheduleResponse)
def update_slot(payload: TimeSlotUpdate, day: Weekday = Path(...), index: int = Path(..., ge=0)):
    data = sanitize_business_hours(payload.business_hours)
    try:
        updated = update_time_slot(data, day, index, payload.field, payload.value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(updated)


@router.delete("/days/{day}/slots/{index}", response_model=ScheduleResponse)
def remove_slot(payload: ScheduleRequest, day: Weekday = Path(...), index: int = Path(..., ge=0)):
    data = sanitize_business_hours(payload.business_hours)
    try:
        updated = remove_time_slot(data, day, index)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _respond(updated)


@router.delete("/days/{day}/slots", response_model=ScheduleResponse)
def clear_slots(payload: ScheduleRequest, day: Weekday = Path(...)):
    """empty a day's slots; the day stays open with unspecified hours."""
    data = sanitize_business_hours(payload.business_hours)
    return _respond(clear_time_slots(data, day))


@router.post("/legacy/parse", response_model=ScheduleResponse)
def parse_legacy(payload: LegacyTextIn):
    """best-effort conversion of old free-text hours."""
    return _respond(parse_legacy_text(payload.text))


@router.post("/legacy/generate", response_model=LegacyTextOut)
def generate_legacy(payload: ScheduleRequest):
    data = sanitize_business_hours(payload.business_hours)
    return {"text": generate_legacy_text(data)}


@router.post("/display", response_model=ScheduleDisplayOut)
def display(payload: ScheduleRequest):
    data = sanitize_business_hours(payload.business_hours)
    return {"lines": format_schedule_lines(data)}


@router.post("/open-check", response_model=OpenCheckOut)
def open_check(payload: OpenCheckRequest):
    """check whether the schedule takes orders on a day, optionally at a given time."""
    data = sanitize_business_hours(payload.business_hours)
    if payload.time:
        is_open = is_open_at(data, payload.day, payload.time)
    else:
        is_open = is_open_on(data, payload.day)
    return {"is_open": is_open, "day": payload.day, "time": payload.time}
