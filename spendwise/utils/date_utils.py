"""Date manipulation utilities"""

import calendar
from datetime import date, datetime, timedelta
from typing import List, Union


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def to_day(moment: Union[date, datetime]) -> date:
    """Truncate an instant to its calendar day (local midnight)"""
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    """
    Move (year, month) by a signed number of months.

    Raises ValueError when the result leaves the supported year range.
    """
    index = year * 12 + (month - 1) + months
    new_year, new_month = divmod(index, 12)
    if not 1 <= new_year <= 9999:
        raise ValueError(f"year {new_year} is out of range")
    return new_year, new_month + 1


def clamped_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping day to the last valid day of the month (31 in Feb -> 28/29)"""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def add_months_clamped(anchor: date, months: int, day: int) -> date:
    """Date `months` after anchor's month with the given day-of-month, clamped"""
    year, month = shift_month(anchor.year, anchor.month, months)
    return clamped_date(year, month, day)


def month_start(day: date) -> date:
    return day.replace(day=1)


def week_start(day: date) -> date:
    """ISO week start (Monday) of the week containing day"""
    return day - timedelta(days=day.weekday())
