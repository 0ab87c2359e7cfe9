"""Unit tests for spending projections"""

import pytest
from datetime import date
from decimal import Decimal
from spendwise.domain.exceptions import InvalidInputError
from spendwise.domain.models import Bucket, BudgetLine, DateRange
from spendwise.domain.projections import (
    average_daily_spend,
    budget_status,
    projected_monthly_spend,
    savings_rate,
    top_n,
)


def test_average_and_projection_over_15_days():
    """450 spent over a 15-day range -> 30/day -> 900 projected"""
    date_range = DateRange(date(2024, 1, 1), date(2024, 1, 15))

    average = average_daily_spend(Decimal("450"), date_range)

    assert average == Decimal("30")
    assert projected_monthly_spend(average) == Decimal("900")


def test_average_daily_spend_degenerate_range_returns_total():
    degenerate = DateRange(date(2024, 1, 1), date(2024, 1, 1))

    assert average_daily_spend(Decimal("123.45"), degenerate) == Decimal("123.45")


def test_projection_is_fixed_30_days():
    assert projected_monthly_spend(Decimal("10.5")) == Decimal("315.0")


def test_savings_rate():
    assert savings_rate(Decimal("3000"), Decimal("5000")) == Decimal("40")


def test_savings_rate_overspending_is_negative():
    assert savings_rate(Decimal("6000"), Decimal("5000")) == Decimal("-20")


@pytest.mark.parametrize("income", [Decimal("0"), Decimal("-100")])
def test_savings_rate_undefined_without_income(income: Decimal):
    """Non-positive income yields None instead of dividing by zero"""
    assert savings_rate(Decimal("3000"), income) is None


def test_top_n():
    buckets = [Bucket("a", Decimal("30")), Bucket("b", Decimal("20")), Bucket("c", Decimal("10"))]

    assert top_n(buckets, 2) == buckets[:2]
    assert top_n(buckets, 0) == []


def test_top_n_clamps_to_length():
    buckets = [Bucket("a", Decimal("30"))]

    assert top_n(buckets, 3) == buckets


def test_top_n_rejects_negative():
    with pytest.raises(InvalidInputError):
        top_n([], -1)


def test_budget_status_uses_explicit_and_default_budgets():
    buckets = [Bucket("groceries", Decimal("370")), Bucket("dining", Decimal("80"))]

    lines = budget_status(buckets, {"dining": Decimal("50")}, Decimal("1000"))

    assert lines == [
        BudgetLine("groceries", Decimal("370"), Decimal("1000"), Decimal("630"), Decimal("37")),
        BudgetLine("dining", Decimal("80"), Decimal("50"), Decimal("-30"), Decimal("160")),
    ]


def test_budget_status_zero_budget_has_no_utilization():
    lines = budget_status([Bucket("fun", Decimal("10"))], {"fun": Decimal("0")}, Decimal("1000"))

    assert lines[0].utilization is None
    assert lines[0].remaining == Decimal("-10")


def test_budget_status_includes_categories_without_spend():
    buckets = [Bucket("groceries", Decimal("370"))]

    lines = budget_status(
        buckets,
        {"rent": Decimal("1200")},
        Decimal("1000"),
        category_ids=["dining", "groceries"],
    )

    assert lines == [
        BudgetLine("groceries", Decimal("370"), Decimal("1000"), Decimal("630"), Decimal("37")),
        BudgetLine("dining", Decimal("0"), Decimal("1000"), Decimal("1000"), Decimal("0")),
        BudgetLine("rent", Decimal("0"), Decimal("1200"), Decimal("1200"), Decimal("0")),
    ]


def test_budget_status_unspent_category_with_zero_budget():
    lines = budget_status([], {"fun": Decimal("0")}, Decimal("1000"))

    assert lines == [BudgetLine("fun", Decimal("0"), Decimal("0"), Decimal("0"), None)]
