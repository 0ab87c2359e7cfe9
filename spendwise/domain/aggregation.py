"""Aggregation of transactions into time buckets and categorical breakdowns"""

from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Dict, Hashable, Iterable, List, Union

from spendwise.domain.exceptions import InvalidInputError
from spendwise.domain.models import Bucket, DateRange, Transaction
from spendwise.utils.date_utils import (
    add_months_clamped,
    generate_date_range,
    month_start,
    to_day,
    week_start,
)

ZERO = Decimal("0")


def by_category(txn: Transaction) -> str:
    return txn.category_id


def by_card(txn: Transaction) -> str:
    return txn.card_id


def sum_by_key(
    transactions: Iterable[Transaction],
    key_of: Callable[[Transaction], Hashable],
) -> List[Bucket]:
    """
    Sum amounts per key and return buckets sorted by total, largest first.

    Ties keep the order in which keys were first seen. Shared by the
    category and card breakdowns.
    """
    totals: Dict[Hashable, Decimal] = {}
    for txn in transactions:
        key = key_of(txn)
        totals[key] = totals.get(key, ZERO) + txn.amount

    # sorted() is stable, so equal totals stay in first-seen order
    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [Bucket(key=key, total=total) for key, total in ordered]


def bucket_by_day(transactions: Iterable[Transaction], date_range: DateRange) -> List[Bucket]:
    """
    One bucket per calendar day of the range, including days with no spend.

    Transactions outside the range are ignored. A degenerate range carries
    no data, so it yields a single zero bucket for its one day.
    """
    if date_range.is_degenerate:
        return [Bucket(key=date_range.start, total=ZERO)]

    totals: Dict[date, Decimal] = {
        day: ZERO for day in generate_date_range(date_range.start, date_range.end)
    }
    for txn in transactions:
        day = to_day(txn.occurred_at)
        if day in totals:
            totals[day] += txn.amount

    return [Bucket(key=day, total=total) for day, total in totals.items()]


def bucket_by_week(transactions: Iterable[Transaction], date_range: DateRange) -> List[Bucket]:
    """
    Buckets keyed by the Monday starting each ISO week touched by the range.

    Every day of the range establishes its week key, so quiet weeks still
    appear with a zero total. The first key may precede range.start.
    """
    totals: Dict[date, Decimal] = {}
    for day_bucket in bucket_by_day(transactions, date_range):
        key = week_start(day_bucket.key)
        totals[key] = totals.get(key, ZERO) + day_bucket.total

    return [Bucket(key=key, total=total) for key, total in sorted(totals.items())]


def monthly_trend(
    transactions: Iterable[Transaction],
    now: Union[date, datetime],
    months_back: int = 5,
) -> List[Bucket]:
    """
    Calendar-month totals from `months_back` months ago through now's month.

    Returns months_back + 1 buckets keyed by each month's first day, oldest
    first. Ignores the billing cycle. Months before year 1 are left out.
    """
    if months_back < 0:
        raise InvalidInputError(f"months_back must be >= 0, got {months_back}")

    today = to_day(now)
    month_starts: List[date] = []
    for offset in range(-months_back, 1):
        try:
            month_starts.append(add_months_clamped(today, offset, 1))
        except ValueError:
            continue
    totals: Dict[date, Decimal] = {start: ZERO for start in month_starts}

    for txn in transactions:
        key = month_start(to_day(txn.occurred_at))
        if key in totals:
            totals[key] += txn.amount

    return [Bucket(key=start, total=totals[start]) for start in month_starts]


def total_amount(transactions: Iterable[Transaction]) -> Decimal:
    return sum((txn.amount for txn in transactions), ZERO)
