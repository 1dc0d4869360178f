"""
Business logic services package.

This package contains the store business hours model:
- Weekly schedule sanitizing and the common hours projection
- Simple and detailed edit operations
- The legacy free-text codec used to migrate old records
"""

from .hours import (
    WEEKDAYS,
    TIME_FIELDS,
    MAX_TIME_SLOTS,
    TimeSlot,
    DaySchedule,
    CommonHours,
    BusinessHoursData,
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
    validate_business_day,
    parse_time,
    is_valid_time,
    normalize_time,
    format_business_day,
    format_schedule_lines,
    time_options,
    to_dict,
)
from .legacy import parse_legacy_text, parse_legacy_common_hours, generate_legacy_text
from .editor import BusinessHoursEditor, MODE_SIMPLE, MODE_DETAILED

__all__ = [
    'WEEKDAYS',
    'TIME_FIELDS',
    'MAX_TIME_SLOTS',
    'TimeSlot',
    'DaySchedule',
    'CommonHours',
    'BusinessHoursData',
    'default_business_hours',
    'sanitize_business_hours',
    'get_common_hours',
    'toggle_closed_day',
    'apply_common_hours',
    'update_time_slot',
    'add_time_slot',
    'remove_time_slot',
    'clear_time_slots',
    'is_open_on',
    'is_open_at',
    'validate_business_day',
    'parse_time',
    'is_valid_time',
    'normalize_time',
    'format_business_day',
    'format_schedule_lines',
    'time_options',
    'to_dict',
    'parse_legacy_text',
    'parse_legacy_common_hours',
    'generate_legacy_text',
    'BusinessHoursEditor',
    'MODE_SIMPLE',
    'MODE_DETAILED',
]
