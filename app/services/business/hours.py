"""
Business hours data model.
Owns the weekly schedule, the common-hours projection and every edit applied to it.
"""
import copy
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Any, Dict, List, Optional, Set

logger = logging.getLogger(__name__)


WEEKDAYS = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday']

# literal labels used by the legacy text format and the display lines
DAY_LABELS = {
    'monday': '月',
    'tuesday': '火',
    'wednesday': '水',
    'thursday': '木',
    'friday': '金',
    'saturday': '土',
    'sunday': '日',
}
DAY_FULL_LABELS = {
    'monday': '月曜日',
    'tuesday': '火曜日',
    'wednesday': '水曜日',
    'thursday': '木曜日',
    'friday': '金曜日',
    'saturday': '土曜日',
    'sunday': '日曜日',
}

TIME_FIELDS = ('open_time', 'close_time', 'last_order_time')
MAX_TIME_SLOTS = 3

DEFAULT_OPEN_TIME = '11:00'
DEFAULT_CLOSE_TIME = '22:00'
DEFAULT_LAST_ORDER_TIME = '21:30'


@dataclass
class TimeSlot:
    """one continuous service period within a day."""
    open_time: str = DEFAULT_OPEN_TIME
    close_time: str = DEFAULT_CLOSE_TIME
    last_order_time: str = DEFAULT_LAST_ORDER_TIME

    def to_dict(self) -> Dict[str, str]:
        return {
            'open_time': self.open_time,
            'close_time': self.close_time,
            'last_order_time': self.last_order_time,
        }


@dataclass
class DaySchedule:
    """schedule for a single weekday."""
    is_closed: bool = False
    time_slots: List[TimeSlot] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_closed': self.is_closed,
            'time_slots': [slot.to_dict() for slot in self.time_slots],
        }


@dataclass
class CommonHours:
    """simple-mode projection: one triple shared by every open day."""
    open_time: str = DEFAULT_OPEN_TIME
    close_time: str = DEFAULT_CLOSE_TIME
    last_order_time: str = DEFAULT_LAST_ORDER_TIME
    closed_days: Set[str] = field(default_factory=set)

    def to_slot(self) -> TimeSlot:
        return TimeSlot(self.open_time, self.close_time, self.last_order_time)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'open_time': self.open_time,
            'close_time': self.close_time,
            'last_order_time': self.last_order_time,
            # keep weekday order so the payload is stable
            'closed_days': [day for day in WEEKDAYS if day in self.closed_days],
        }


# weekday key -> DaySchedule, always holding all 7 keys
BusinessHoursData = Dict[str, DaySchedule]


def default_business_hours() -> BusinessHoursData:
    """every day open with no hours specified."""
    return {day: DaySchedule() for day in WEEKDAYS}


def to_dict(data: BusinessHoursData) -> Dict[str, Dict[str, Any]]:
    """JSON shape stored on the store record and returned by the API."""
    return {day: data[day].to_dict() for day in WEEKDAYS}


def _get(obj: Any, key: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, default)
    return getattr(obj, key, default)


def parse_time(value: Any) -> Optional[time]:
    """parse an H:MM or HH:MM string; None for empty or malformed values."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.strptime(value.strip(), '%H:%M').time()
    except ValueError:
        return None


def is_valid_time(value: Any) -> bool:
    return parse_time(value) is not None


def normalize_time(value: Any) -> str:
    """zero-pad a time to HH:MM; anything that is not a time becomes ''."""
    parsed = parse_time(value)
    if parsed is None:
        if isinstance(value, str) and value:
            logger.warning(f"Discarding malformed time value {value!r}")
        return ''
    return parsed.strftime('%H:%M')


def _sanitize_slot(raw: Any) -> Optional[TimeSlot]:
    if isinstance(raw, TimeSlot):
        raw = raw.to_dict()
    if not isinstance(raw, Mapping):
        return None
    return TimeSlot(*(normalize_time(raw.get(name)) for name in TIME_FIELDS))


def _sanitize_day(raw: Any) -> DaySchedule:
    if not isinstance(raw, (Mapping, DaySchedule)):
        return DaySchedule()

    is_closed = _get(raw, 'is_closed', False) is True
    raw_slots = _get(raw, 'time_slots')
    # strings and mappings are not an ordered list of slots
    if not isinstance(raw_slots, Sequence) or isinstance(raw_slots, (str, bytes)):
        return DaySchedule(is_closed=is_closed)

    slots = []
    for raw_slot in raw_slots:
        slot = _sanitize_slot(raw_slot)
        if slot is not None:
            slots.append(slot)
    return DaySchedule(is_closed=is_closed, time_slots=slots)


def sanitize_business_hours(raw: Any) -> BusinessHoursData:
    """
    Turn whatever was stored or posted into a total, well-typed schedule.

    Missing days become open days with no slots, a malformed time_slots value
    becomes an empty list and non-mapping slot entries are dropped. Never raises.
    """
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning(f"Discarding business hours of unexpected type {type(raw).__name__}")
        return default_business_hours()

    return {day: _sanitize_day(raw.get(day)) for day in WEEKDAYS}


def _check_day(day: str) -> None:
    if day not in WEEKDAYS:
        raise ValueError(f"Invalid day name. Use: {', '.join(WEEKDAYS)}")


def _check_field(field_name: str) -> None:
    if field_name not in TIME_FIELDS:
        raise ValueError(f"Invalid time field. Use: {', '.join(TIME_FIELDS)}")


def validate_business_day(day: str) -> None:
    """business day filters are optional, but when given must be a weekday key."""
    if not day:
        return
    _check_day(day)


def get_common_hours(data: BusinessHoursData) -> CommonHours:
    """derive the common hours from the authoritative schedule."""
    closed_days = {day for day in WEEKDAYS if data[day].is_closed}
    for day in WEEKDAYS:
        schedule = data[day]
        if not schedule.is_closed and schedule.time_slots:
            slot = schedule.time_slots[0]
            return CommonHours(slot.open_time, slot.close_time, slot.last_order_time, closed_days)
    return CommonHours(closed_days=closed_days)


def toggle_closed_day(data: BusinessHoursData, day: str) -> BusinessHoursData:
    """flip a day between closed and open; reopened days get one slot of the common hours."""
    _check_day(day)
    result = copy.deepcopy(data)
    schedule = result[day]
    if schedule.is_closed:
        schedule.is_closed = False
        schedule.time_slots = [get_common_hours(data).to_slot()]
    else:
        schedule.is_closed = True
        schedule.time_slots = []
    return result


def apply_common_hours(data: BusinessHoursData, field_name: str, value: str) -> BusinessHoursData:
    """
    Set one time field on the first slot of every open day.

    Days without slots get a fresh slot seeded from the current common hours.
    Closed days and any slot after the first are left untouched.
    """
    _check_field(field_name)
    common = get_common_hours(data)
    result = copy.deepcopy(data)
    for day in WEEKDAYS:
        schedule = result[day]
        if schedule.is_closed:
            continue
        if not schedule.time_slots:
            schedule.time_slots.append(common.to_slot())
        setattr(schedule.time_slots[0], field_name, value)
    return result


def update_time_slot(data: BusinessHoursData, day: str, index: int, field_name: str, value: str) -> BusinessHoursData:
    _check_day(day)
    _check_field(field_name)
    slots = data[day].time_slots
    if not 0 <= index < len(slots):
        raise ValueError(f"Time slot {index} does not exist for {day}")

    result = copy.deepcopy(data)
    setattr(result[day].time_slots[index], field_name, value)
    return result


def add_time_slot(data: BusinessHoursData, day: str) -> BusinessHoursData:
    """append a slot seeded from the common hours; no-op once the day holds MAX_TIME_SLOTS."""
    _check_day(day)
    result = copy.deepcopy(data)
    slots = result[day].time_slots
    if len(slots) >= MAX_TIME_SLOTS:
        logger.debug(f"{day} already has {MAX_TIME_SLOTS} time slots, not adding another")
        return result
    slots.append(get_common_hours(data).to_slot())
    return result


def remove_time_slot(data: BusinessHoursData, day: str, index: int) -> BusinessHoursData:
    _check_day(day)
    if not 0 <= index < len(data[day].time_slots):
        raise ValueError(f"Time slot {index} does not exist for {day}")

    result = copy.deepcopy(data)
    del result[day].time_slots[index]
    return result


def clear_time_slots(data: BusinessHoursData, day: str) -> BusinessHoursData:
    """empty a day's slots without touching is_closed (open with no slots means unspecified)."""
    _check_day(day)
    result = copy.deepcopy(data)
    result[day].time_slots = []
    return result


def is_open_on(data: BusinessHoursData, day: str) -> bool:
    _check_day(day)
    return not data[day].is_closed


def is_open_at(data: BusinessHoursData, day: str, at: str) -> bool:
    """
    Check whether orders are taken on `day` at `at` (HH:MM).

    A slot counts until its last order time, falling back to the close time
    when no last order is recorded. Slots with unparseable times never match.
    """
    _check_day(day)
    check_time = parse_time(at)
    if check_time is None:
        raise ValueError(f"Invalid time {at!r}, expected HH:MM")

    schedule = data[day]
    if schedule.is_closed:
        return False
    for slot in schedule.time_slots:
        open_time = parse_time(slot.open_time)
        until = parse_time(slot.last_order_time) or parse_time(slot.close_time)
        if open_time is None or until is None:
            continue
        if open_time <= check_time <= until:
            return True
    return False


def format_business_day(day: str) -> str:
    return DAY_LABELS.get(day, day)


def format_schedule_lines(data: BusinessHoursData) -> List[str]:
    """one human-readable line per weekday."""
    lines = []
    for day in WEEKDAYS:
        schedule = data[day]
        label = DAY_FULL_LABELS[day]
        if schedule.is_closed:
            lines.append(f"{label}: 定休日")
            continue
        if not schedule.time_slots:
            lines.append(f"{label}: 営業時間未設定")
            continue

        parts = []
        for slot in schedule.time_slots:
            text = f"{slot.open_time}-{slot.close_time}"
            if slot.last_order_time and slot.last_order_time != slot.close_time:
                text += f"(L.O.{slot.last_order_time})"
            parts.append(text)
        lines.append(f"{label}: {', '.join(parts)}")
    return lines


def time_options() -> List[Dict[str, str]]:
    """selectable times in 30 minute steps, e.g. {'value': '09:30', 'label': '9:30'}."""
    options = []
    for hour in range(24):
        for minute in (0, 30):
            options.append({
                'value': f"{hour:02d}:{minute:02d}",
                'label': f"{hour}:{minute:02d}",
            })
    return options
