"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Dict, Hashable, Optional, Tuple, Union

from spendwise.domain.exceptions import (
    InvalidInputError,
    InvalidRecurrenceError,
    InvalidTransactionDataError,
)
from spendwise.utils.date_utils import to_day


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days"""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidInputError(f"Range start {self.start} is after end {self.end}")

    @property
    def is_degenerate(self) -> bool:
        """Zero-length range: the cycle boundary could not be computed"""
        return self.start == self.end

    def contains(self, moment: Union[date, datetime]) -> bool:
        return self.start <= to_day(moment) <= self.end


@dataclass(frozen=True)
class Transaction:
    """Expense recorded by the user, as supplied by storage"""

    amount: Decimal
    occurred_at: datetime
    category_id: str
    card_id: str

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise InvalidTransactionDataError(f"Transaction amount must be >= 0, got {self.amount}")


@dataclass(frozen=True)
class Bucket:
    """Aggregated total keyed by a day, week start, month start, category id or card id"""

    key: Hashable
    total: Decimal


class Frequency(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @property
    def months(self) -> int:
        return {"monthly": 1, "quarterly": 3, "yearly": 12}[self.value]


@dataclass(frozen=True)
class RecurrenceDescriptor:
    """Schedule rule of a recurring bill"""

    due_day_of_month: int
    frequency: Frequency = Frequency.MONTHLY
    last_paid_at: Optional[datetime] = None
    reminder_lead_days: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.due_day_of_month <= 31:
            raise InvalidRecurrenceError(
                f"due_day_of_month must be within 1..31, got {self.due_day_of_month}"
            )
        if self.reminder_lead_days < 0:
            raise InvalidRecurrenceError(
                f"reminder_lead_days must be >= 0, got {self.reminder_lead_days}"
            )


@dataclass(frozen=True)
class ScheduleFacts:
    """Derived schedule of a bill at a given instant"""

    next_due_at: date
    days_until_due: int  # negative means overdue
    is_overdue: bool
    reminder_at: date
    missed_occurrences: int = 0


@dataclass(frozen=True)
class Bill:
    """Recurring bill as supplied by storage"""

    bill_id: str
    name: str
    amount: Decimal
    recurrence: RecurrenceDescriptor


@dataclass(frozen=True)
class BillSchedule:
    bill: Bill
    facts: ScheduleFacts


@dataclass(frozen=True)
class BudgetLine:
    """Spend against budget for one category"""

    category_id: str
    spent: Decimal
    budget: Decimal
    remaining: Decimal
    utilization: Optional[Decimal]  # percent; None when budget is not positive


@dataclass(frozen=True)
class LedgerSnapshot:
    """Immutable view of a user's data, fetched once before any computation"""

    transactions: Tuple[Transaction, ...] = ()
    bills: Tuple[Bill, ...] = ()
    card_names: Dict[str, str] = field(default_factory=dict)
    category_names: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class DashboardSummary:
    """Everything the dashboard shows for one billing cycle"""

    as_of: date  # day of the "now" the summary was computed for
    cycle: DateRange
    next_cycle: DateRange
    total_spent: Decimal
    by_category: Tuple[Bucket, ...]
    by_card: Tuple[Bucket, ...]
    daily: Tuple[Bucket, ...]
    weekly: Tuple[Bucket, ...]
    monthly_trend: Tuple[Bucket, ...]
    average_daily_spend: Decimal
    projected_monthly_spend: Decimal
    savings_rate: Optional[Decimal]
    top_categories: Tuple[Bucket, ...]
    budget_lines: Tuple[BudgetLine, ...]
    bills: Tuple[BillSchedule, ...]
    upcoming_bills_total: Decimal
