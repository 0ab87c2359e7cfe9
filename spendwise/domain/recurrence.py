"""Recurring bill scheduling - next due date, overdue state and reminder timing"""

import logging
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Iterable, List, Union

from spendwise.domain.models import Bill, BillSchedule, RecurrenceDescriptor, ScheduleFacts
from spendwise.utils.date_utils import add_months_clamped, to_day

logger = logging.getLogger(__name__)


def compute_schedule(descriptor: RecurrenceDescriptor, now: Union[date, datetime]) -> ScheduleFacts:
    """
    Derive a bill's schedule at `now` from its recurrence rule.

    Steps:
    1. Anchor on the due day one period after the last payment, or on the
       due day of now's month when the bill was never paid
    2. Advance one period at a time while the anchor is before today, so
       skipped payments need no stored history beyond last_paid_at
    3. Days until due is the signed day difference from today
    4. Reminder is lead days before the due date, even if already past

    The due day is re-clamped from the descriptor for every period, so a
    bill due on the 31st falls on Feb 28 and returns to Mar 31.

    When the due date would fall after year 9999 the schedule degenerates
    to today: due in 0 days with the reminder on the same day.
    """
    today = to_day(now)
    period = descriptor.frequency.months
    due_day = descriptor.due_day_of_month

    if descriptor.last_paid_at is not None:
        base = to_day(descriptor.last_paid_at)
        step = 1
    else:
        base = today
        step = 0

    missed = 0
    try:
        next_due = add_months_clamped(base, step * period, due_day)
        while next_due < today:
            if descriptor.last_paid_at is not None:
                missed += 1
            step += 1
            next_due = add_months_clamped(base, step * period, due_day)
    except (ValueError, OverflowError) as e:
        logger.warning("Could not compute next due date for %s: %s", today, e)
        return ScheduleFacts(
            next_due_at=today,
            days_until_due=0,
            is_overdue=False,
            reminder_at=today,
            missed_occurrences=missed,
        )

    days_until_due = (next_due - today).days

    return ScheduleFacts(
        next_due_at=next_due,
        days_until_due=days_until_due,
        is_overdue=days_until_due < 0,
        reminder_at=_days_before(next_due, descriptor.reminder_lead_days),
        missed_occurrences=missed,
    )


def _days_before(day: date, days: int) -> date:
    """day minus a number of days, stopping at the earliest representable date"""
    if (day - date.min).days < days:
        return date.min
    return day - timedelta(days=days)


def is_reminder_due(facts: ScheduleFacts, now: Union[date, datetime]) -> bool:
    """Reminder date has arrived and the bill is not yet past due"""
    today = to_day(now)
    return facts.reminder_at <= today <= facts.next_due_at


def bills_by_due_date(bills: Iterable[Bill], now: Union[date, datetime]) -> List[BillSchedule]:
    """Schedules for all bills, soonest due first"""
    schedules = [BillSchedule(bill=bill, facts=compute_schedule(bill.recurrence, now)) for bill in bills]
    return sorted(schedules, key=lambda s: s.facts.days_until_due)


def upcoming_bills_total(schedules: Iterable[BillSchedule]) -> Decimal:
    return sum((s.bill.amount for s in schedules), Decimal("0"))
