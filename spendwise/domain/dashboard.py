"""Dashboard composition - runs the cycle, aggregation, projection and bill logic over one snapshot"""

from datetime import date, datetime
from decimal import Decimal
from typing import Mapping, Optional, Union

from spendwise.domain.aggregation import (
    bucket_by_day,
    bucket_by_week,
    by_card,
    by_category,
    monthly_trend,
    sum_by_key,
    total_amount,
)
from spendwise.domain.cycle import CycleCalculator
from spendwise.domain.models import DashboardSummary, DateRange, LedgerSnapshot
from spendwise.domain.projections import (
    average_daily_spend,
    budget_status,
    projected_monthly_spend,
    savings_rate,
    top_n,
)
from spendwise.domain.recurrence import bills_by_due_date, upcoming_bills_total
from spendwise.utils.date_utils import add_months_clamped, to_day


def trend_window(now: Union[date, datetime], months_back: int) -> DateRange:
    """
    Calendar range covering the monthly trend: first day of the oldest month through today.

    Starts at the earliest representable day when the oldest month falls before year 1.
    """
    today = to_day(now)
    try:
        start = add_months_clamped(today, -months_back, 1)
    except ValueError:
        start = date.min
    return DateRange(start, today)


def build_dashboard(
    snapshot: LedgerSnapshot,
    now: Union[date, datetime],
    calculator: CycleCalculator,
    income: Decimal,
    budgets: Optional[Mapping[str, Decimal]] = None,
    default_budget: Decimal = Decimal("1000"),
    trend_months: int = 5,
    top_count: int = 3,
) -> DashboardSummary:
    """
    Compute the dashboard for the billing cycle containing `now`.

    Cycle figures only use snapshot transactions inside the current cycle;
    the monthly trend uses every transaction in the snapshot. A degenerate
    cycle has no data attributed to it.
    """
    cycle = calculator.current_cycle(now)
    next_cycle = calculator.next_cycle(now)

    if cycle.is_degenerate:
        cycle_transactions = []
    else:
        cycle_transactions = [t for t in snapshot.transactions if cycle.contains(t.occurred_at)]

    total_spent = total_amount(cycle_transactions)
    by_category_buckets = sum_by_key(cycle_transactions, by_category)
    average = average_daily_spend(total_spent, cycle)
    schedules = bills_by_due_date(snapshot.bills, now)

    return DashboardSummary(
        as_of=to_day(now),
        cycle=cycle,
        next_cycle=next_cycle,
        total_spent=total_spent,
        by_category=tuple(by_category_buckets),
        by_card=tuple(sum_by_key(cycle_transactions, by_card)),
        daily=tuple(bucket_by_day(cycle_transactions, cycle)),
        weekly=tuple(bucket_by_week(cycle_transactions, cycle)),
        monthly_trend=tuple(monthly_trend(snapshot.transactions, now, trend_months)),
        average_daily_spend=average,
        projected_monthly_spend=projected_monthly_spend(average),
        savings_rate=savings_rate(total_spent, income),
        top_categories=tuple(top_n(by_category_buckets, top_count)),
        budget_lines=tuple(
            budget_status(by_category_buckets, budgets or {}, default_budget, snapshot.category_names)
        ),
        bills=tuple(schedules),
        upcoming_bills_total=upcoming_bills_total(schedules),
    )
