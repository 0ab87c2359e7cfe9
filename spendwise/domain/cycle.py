"""Billing cycle boundaries computed from a fixed cycle-start day of the month"""

import logging
from datetime import date, datetime, timedelta
from typing import Union

from spendwise.domain.exceptions import InvalidInputError
from spendwise.domain.models import DateRange
from spendwise.utils.date_utils import add_months_clamped, clamped_date, to_day

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


class CycleCalculator:
    """
    Computes the current and next billing cycle for a configured start day.

    A cycle starts on `cycle_start_day` of a month and ends the day before
    `cycle_start_day` of the following month. Start days past the end of a
    short month clamp to that month's last day (31 in February -> Feb 28/29).

    Calendar overflow never raises: the calculator returns the degenerate
    range {now, now} and callers treat it as "unknown cycle".
    """

    def __init__(self, cycle_start_day: int):
        if not 1 <= cycle_start_day <= 31:
            raise InvalidInputError(f"cycle_start_day must be within 1..31, got {cycle_start_day}")
        self.cycle_start_day = cycle_start_day

    def current_cycle(self, now: Union[date, datetime]) -> DateRange:
        """Cycle containing `now`"""
        today = to_day(now)
        try:
            return self._cycle_containing(today)
        except (ValueError, OverflowError) as e:
            logger.warning("Could not compute current cycle for %s: %s", today, e)
            return DateRange(today, today)

    def next_cycle(self, now: Union[date, datetime]) -> DateRange:
        """Cycle immediately following the one containing `now`"""
        today = to_day(now)
        current = self.current_cycle(today)
        if current.is_degenerate:
            return current

        try:
            start = current.end + ONE_DAY
            return DateRange(start, self._end_for_start(start))
        except (ValueError, OverflowError) as e:
            logger.warning("Could not compute next cycle for %s: %s", today, e)
            return DateRange(today, today)

    def _cycle_containing(self, today: date) -> DateRange:
        candidate = clamped_date(today.year, today.month, self.cycle_start_day)

        # Before this month's start day: the cycle began last month
        if today < candidate:
            start = add_months_clamped(candidate, -1, self.cycle_start_day)
            return DateRange(start, candidate - ONE_DAY)

        return DateRange(candidate, self._end_for_start(candidate))

    def _end_for_start(self, start: date) -> date:
        return add_months_clamped(start, 1, self.cycle_start_day) - ONE_DAY


def days_in_range(date_range: DateRange) -> int:
    """Inclusive number of days in range; 0 for a degenerate range"""
    if date_range.is_degenerate:
        return 0
    return (date_range.end - date_range.start).days + 1
