"""
Legacy free-text business hours codec.

Older store records kept their hours as a single string such as::

    営業時間: 11:00-22:00
    ラストオーダー: 21:30
    定休日: 月曜日、火曜日

Parsing is best-effort and lossy: split slots and per-day differences cannot
be expressed in this format. It exists only to migrate old records; new
records are always stored in the structured form.
"""
import re
from typing import Optional

from .hours import (
    WEEKDAYS,
    DAY_LABELS,
    DAY_FULL_LABELS,
    DEFAULT_OPEN_TIME,
    DEFAULT_CLOSE_TIME,
    DEFAULT_LAST_ORDER_TIME,
    BusinessHoursData,
    CommonHours,
    DaySchedule,
    get_common_hours,
)


CLOSED_DAYS_LABEL = '定休日'
OPEN_HOURS_LABEL = '営業時間'
LAST_ORDER_LABEL = 'ラストオーダー'
OPEN_ALL_YEAR = '年中無休'
CLOSED_DAYS_SEPARATOR = '、'

_CLOSED_DAYS_RE = re.compile(r'定休日[：:]\s*(.+?)(?:\n|$)', re.IGNORECASE)
_TIME_RANGE_RE = re.compile(r'([0-9]{1,2}):([0-9]{2})[-～〜]([0-9]{1,2}):([0-9]{2})')
_LAST_ORDER_RE = re.compile(r'(?:ラストオーダー|L\.O\.?|LO)[：:\s]*([0-9]{1,2}):([0-9]{2})', re.IGNORECASE)

# the short label for sunday also appears inside every full label (月曜日 etc.)
_AMBIGUOUS_LABEL = DAY_LABELS['sunday']


def _format_time(hour: str, minute: str) -> str:
    return f"{hour.zfill(2)}:{minute}"


def _parse_closed_days(text: str) -> set:
    match = _CLOSED_DAYS_RE.search(text)
    if not match:
        return set()

    closed_text = match.group(1)
    closed_days = set()
    for day in WEEKDAYS:
        label = DAY_LABELS[day]
        # full label first, then the single character
        if DAY_FULL_LABELS[day] in closed_text:
            closed_days.add(day)
        elif label in closed_text and label != _AMBIGUOUS_LABEL:
            closed_days.add(day)
        elif label == _AMBIGUOUS_LABEL and ('日曜' in closed_text or closed_text == label):
            closed_days.add(day)
    return closed_days


def parse_legacy_common_hours(text: Optional[str]) -> CommonHours:
    """
    Extract closed days, the first open-close range and the first last order time.

    Anything not found falls back to 11:00-22:00 with last order 21:30. When a
    range is present without a last order marker, last order is the close time.
    """
    if not text:
        return CommonHours()

    open_time = DEFAULT_OPEN_TIME
    close_time = DEFAULT_CLOSE_TIME
    last_order_time = DEFAULT_LAST_ORDER_TIME

    range_match = _TIME_RANGE_RE.search(text)
    if range_match:
        open_time = _format_time(range_match.group(1), range_match.group(2))
        close_time = _format_time(range_match.group(3), range_match.group(4))
        # the old form used a fixed 21:30 here; the close time keeps a generated
        # text without a last order line stable when it is parsed back
        last_order_time = close_time

    last_order_match = _LAST_ORDER_RE.search(text)
    if last_order_match:
        last_order_time = _format_time(last_order_match.group(1), last_order_match.group(2))

    return CommonHours(open_time, close_time, last_order_time, _parse_closed_days(text))


def parse_legacy_text(text: Optional[str]) -> BusinessHoursData:
    """expand legacy text into a schedule: closed days empty, every other day one identical slot."""
    common = parse_legacy_common_hours(text)
    data = {}
    for day in WEEKDAYS:
        if day in common.closed_days:
            data[day] = DaySchedule(is_closed=True)
        else:
            data[day] = DaySchedule(time_slots=[common.to_slot()])
    return data


def generate_legacy_text(data: BusinessHoursData) -> str:
    """render the common hours of a schedule in the legacy text format."""
    common = get_common_hours(data)
    lines = [f"{OPEN_HOURS_LABEL}: {common.open_time}-{common.close_time}"]

    if common.last_order_time and common.last_order_time != common.close_time:
        lines.append(f"{LAST_ORDER_LABEL}: {common.last_order_time}")

    closed_labels = [DAY_FULL_LABELS[day] for day in WEEKDAYS if day in common.closed_days]
    if closed_labels:
        lines.append(f"{CLOSED_DAYS_LABEL}: {CLOSED_DAYS_SEPARATOR.join(closed_labels)}")
    else:
        lines.append(f"{CLOSED_DAYS_LABEL}: {OPEN_ALL_YEAR}")

    return '\n'.join(lines)
