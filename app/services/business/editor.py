"""
Simple/detailed editing views over one business hours schedule.

Both views read and write the same authoritative schedule. Switching modes
never transforms data: the simple view re-derives its common hours from the
schedule every time it is read, and every write lands on the schedule
immediately.
"""
import logging
from typing import Any

from .hours import (
    BusinessHoursData,
    CommonHours,
    sanitize_business_hours,
    get_common_hours,
    toggle_closed_day,
    apply_common_hours,
    update_time_slot,
    add_time_slot,
    remove_time_slot,
    clear_time_slots,
    to_dict,
)

logger = logging.getLogger(__name__)

MODE_SIMPLE = 'simple'
MODE_DETAILED = 'detailed'
EDIT_MODES = (MODE_SIMPLE, MODE_DETAILED)


class BusinessHoursEditor:
    """edit session for the hours of one store form."""

    def __init__(self, raw: Any = None, mode: str = MODE_SIMPLE):
        if mode not in EDIT_MODES:
            raise ValueError(f"Invalid edit mode. Use: {', '.join(EDIT_MODES)}")
        self.data: BusinessHoursData = sanitize_business_hours(raw)
        self.mode = mode

    @property
    def common_hours(self) -> CommonHours:
        return get_common_hours(self.data)

    def switch_mode(self, mode: str) -> None:
        if mode not in EDIT_MODES:
            raise ValueError(f"Invalid edit mode. Use: {', '.join(EDIT_MODES)}")
        if mode != self.mode:
            logger.debug(f"Business hours editor switching from {self.mode} to {mode}")
        self.mode = mode

    def _require(self, mode: str) -> None:
        if self.mode != mode:
            raise ValueError(f"Operation is only available in {mode} mode")

    # shared by both views

    def toggle_closed_day(self, day: str) -> BusinessHoursData:
        self.data = toggle_closed_day(self.data, day)
        return self.data

    # simple view

    def set_common_time(self, field_name: str, value: str) -> BusinessHoursData:
        self._require(MODE_SIMPLE)
        self.data = apply_common_hours(self.data, field_name, value)
        return self.data

    # detailed view

    def update_time_slot(self, day: str, index: int, field_name: str, value: str) -> BusinessHoursData:
        self._require(MODE_DETAILED)
        self.data = update_time_slot(self.data, day, index, field_name, value)
        return self.data

    def add_time_slot(self, day: str) -> BusinessHoursData:
        self._require(MODE_DETAILED)
        self.data = add_time_slot(self.data, day)
        return self.data

    def remove_time_slot(self, day: str, index: int) -> BusinessHoursData:
        self._require(MODE_DETAILED)
        self.data = remove_time_slot(self.data, day, index)
        return self.data

    def clear_time_slots(self, day: str) -> BusinessHoursData:
        self._require(MODE_DETAILED)
        self.data = clear_time_slots(self.data, day)
        return self.data

    def to_payload(self) -> dict:
        """what the store form submits as business_hours."""
        return to_dict(self.data)
