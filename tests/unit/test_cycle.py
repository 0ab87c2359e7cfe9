"""Unit tests for billing cycle boundaries"""

import pytest
from datetime import date, datetime, timedelta
from spendwise.domain.cycle import CycleCalculator, days_in_range
from spendwise.domain.exceptions import InvalidInputError
from spendwise.domain.models import DateRange
from spendwise.utils.date_utils import generate_date_range


def test_current_cycle_after_start_day():
    """On or after the start day, the cycle runs to the day before next month's start"""
    cycle = CycleCalculator(17).current_cycle(datetime(2024, 3, 20, 10, 30))

    assert cycle == DateRange(date(2024, 3, 17), date(2024, 4, 16))


def test_current_cycle_before_start_day():
    """Before the start day, the cycle began last month"""
    cycle = CycleCalculator(17).current_cycle(datetime(2024, 3, 5, 23, 59))

    assert cycle == DateRange(date(2024, 2, 17), date(2024, 3, 16))


def test_current_cycle_on_start_day_midnight():
    """The start day itself opens a new cycle"""
    cycle = CycleCalculator(17).current_cycle(datetime(2024, 3, 17, 0, 0))

    assert cycle.start == date(2024, 3, 17)


def test_current_cycle_last_day_of_cycle():
    """The day before the start day still belongs to the previous cycle"""
    cycle = CycleCalculator(17).current_cycle(datetime(2024, 3, 16, 23, 59))

    assert cycle == DateRange(date(2024, 2, 17), date(2024, 3, 16))


def test_year_rollover():
    """December cycles end in January of the next year"""
    calculator = CycleCalculator(17)

    assert calculator.current_cycle(date(2023, 12, 20)) == DateRange(date(2023, 12, 17), date(2024, 1, 16))
    assert calculator.next_cycle(date(2023, 12, 20)) == DateRange(date(2024, 1, 17), date(2024, 2, 16))
    assert calculator.current_cycle(date(2024, 1, 5)) == DateRange(date(2023, 12, 17), date(2024, 1, 16))


def test_next_cycle_follows_current():
    calculator = CycleCalculator(17)
    now = datetime(2024, 3, 5)

    assert calculator.next_cycle(now) == DateRange(date(2024, 3, 17), date(2024, 4, 16))


def test_start_day_31_clamps_in_february():
    """Day 31 in a non-leap February clamps to Feb 28"""
    calculator = CycleCalculator(31)

    cycle = calculator.current_cycle(date(2023, 2, 28))
    assert cycle == DateRange(date(2023, 2, 28), date(2023, 3, 30))

    # Mid-February is still in the cycle that started Jan 31
    assert calculator.current_cycle(date(2023, 2, 10)) == DateRange(date(2023, 1, 31), date(2023, 2, 27))


def test_start_day_31_clamps_in_leap_february():
    cycle = CycleCalculator(31).current_cycle(date(2024, 2, 29))

    assert cycle == DateRange(date(2024, 2, 29), date(2024, 3, 30))


def test_start_day_returns_to_31_after_short_month():
    """Clamping is per month; March starts on the 31st again"""
    calculator = CycleCalculator(31)

    assert calculator.next_cycle(date(2023, 2, 28)) == DateRange(date(2023, 3, 31), date(2023, 4, 29))


def test_start_day_one_matches_calendar_month():
    cycle = CycleCalculator(1).current_cycle(date(2024, 2, 14))

    assert cycle == DateRange(date(2024, 2, 1), date(2024, 2, 29))


@pytest.mark.parametrize("cycle_start_day", range(1, 32))
def test_cycle_invariants_over_two_years(cycle_start_day: int):
    """Current cycle contains now; next cycle starts the day after it ends"""
    calculator = CycleCalculator(cycle_start_day)

    for day in generate_date_range(date(2023, 1, 1), date(2024, 12, 31)):
        current = calculator.current_cycle(day)
        following = calculator.next_cycle(day)

        assert not current.is_degenerate
        assert current.start <= day <= current.end
        assert following.start == current.end + timedelta(days=1)
        assert following.start <= following.end


def test_calendar_overflow_returns_degenerate_range():
    """Rolling past year 9999 cannot be represented"""
    calculator = CycleCalculator(17)
    now = datetime(9999, 12, 20, 12, 0)

    current = calculator.current_cycle(now)
    assert current == DateRange(date(9999, 12, 20), date(9999, 12, 20))
    assert current.is_degenerate
    assert calculator.next_cycle(now).is_degenerate


def test_calendar_underflow_returns_degenerate_range():
    cycle = CycleCalculator(17).current_cycle(date(1, 1, 5))

    assert cycle.is_degenerate


def test_next_cycle_overflow_returns_degenerate_range():
    """Current cycle fits in year 9999 but the next one does not"""
    calculator = CycleCalculator(17)

    assert calculator.current_cycle(date(9999, 12, 5)) == DateRange(date(9999, 11, 17), date(9999, 12, 16))
    assert calculator.next_cycle(date(9999, 12, 5)) == DateRange(date(9999, 12, 5), date(9999, 12, 5))


@pytest.mark.parametrize("cycle_start_day", [0, 32, -1])
def test_invalid_cycle_start_day(cycle_start_day: int):
    with pytest.raises(InvalidInputError):
        CycleCalculator(cycle_start_day)


def test_days_in_range_inclusive():
    assert days_in_range(DateRange(date(2024, 1, 1), date(2024, 1, 15))) == 15
    assert days_in_range(DateRange(date(2024, 3, 17), date(2024, 4, 16))) == 31


def test_days_in_range_degenerate_is_zero():
    assert days_in_range(DateRange(date(2024, 1, 1), date(2024, 1, 1))) == 0
