"""Scalar spending analytics derived from aggregated data"""

from decimal import Decimal
from typing import Iterable, List, Mapping, Optional, Sequence

from spendwise.domain.cycle import days_in_range
from spendwise.domain.exceptions import InvalidInputError
from spendwise.domain.models import Bucket, BudgetLine, DateRange

PROJECTION_MONTH_DAYS = 30


def average_daily_spend(total: Decimal, date_range: DateRange) -> Decimal:
    """Total spread over the days of the range; the raw total for a degenerate range"""
    return total / max(1, days_in_range(date_range))


def projected_monthly_spend(avg_daily: Decimal) -> Decimal:
    """
    Fixed 30-day projection of the daily average.

    Not calendar-accurate; will not match monthly_trend totals.
    """
    return avg_daily * PROJECTION_MONTH_DAYS


def savings_rate(total_spent: Decimal, income: Decimal) -> Optional[Decimal]:
    """
    Share of income left after spending, in percent.

    Returns None (rate undefined) when income is not positive.
    """
    if income <= 0:
        return None
    return (income - total_spent) / income * 100


def top_n(buckets: Sequence[Bucket], n: int) -> List[Bucket]:
    """First n buckets of an already descending-sorted sequence"""
    if n < 0:
        raise InvalidInputError(f"n must be >= 0, got {n}")
    return list(buckets[:n])


def budget_status(
    category_buckets: Sequence[Bucket],
    budgets: Mapping[str, Decimal],
    default_budget: Decimal,
    category_ids: Iterable[str] = (),
) -> List[BudgetLine]:
    """
    Spend against budget for every known category.

    Categories with spend come first, in bucket order. Categories from
    `category_ids` or `budgets` without spend follow with a zero line, in
    first-seen order. Categories without an explicit budget use
    default_budget. Utilization is None when the budget is zero or negative.
    """
    spent = {bucket.key: bucket.total for bucket in category_buckets}
    for category_id in [*category_ids, *budgets]:
        spent.setdefault(category_id, Decimal("0"))

    lines = []
    for category_id, total in spent.items():
        budget = budgets.get(category_id, default_budget)
        utilization = total / budget * 100 if budget > 0 else None
        lines.append(
            BudgetLine(
                category_id=category_id,
                spent=total,
                budget=budget,
                remaining=budget - total,
                utilization=utilization,
            )
        )
    return lines
