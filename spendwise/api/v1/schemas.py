"""Pydantic schemas for API responses"""

from pydantic import BaseModel
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from spendwise.domain.models import BillSchedule, Bucket, BudgetLine, DateRange


class CycleSchema(BaseModel):
    """Inclusive billing cycle range"""

    start: date
    end: date
    is_degenerate: bool

    @classmethod
    def from_range(cls, date_range: DateRange) -> "CycleSchema":
        return cls(start=date_range.start, end=date_range.end, is_degenerate=date_range.is_degenerate)


class CycleResponse(BaseModel):
    """Response for GET /v1/cycle"""

    cycle_start_day: int
    current: CycleSchema
    next: CycleSchema


class TimeBucketSchema(BaseModel):
    """Total for a day, week start or month start"""

    period_start: date
    total: Decimal

    @classmethod
    def from_bucket(cls, bucket: Bucket) -> "TimeBucketSchema":
        return cls(period_start=bucket.key, total=bucket.total)


class GroupBucketSchema(BaseModel):
    """Total for a category or card"""

    id: str
    label: str
    total: Decimal

    @classmethod
    def from_bucket(cls, bucket: Bucket, names: Dict[str, str]) -> "GroupBucketSchema":
        # Unknown ids (deleted card/category) fall back to the raw id
        return cls(id=bucket.key, label=names.get(bucket.key, bucket.key), total=bucket.total)


class BudgetLineSchema(BaseModel):
    category_id: str
    label: str
    spent: Decimal
    budget: Decimal
    remaining: Decimal
    utilization: Optional[Decimal] = None

    @classmethod
    def from_line(cls, line: BudgetLine, names: Dict[str, str]) -> "BudgetLineSchema":
        return cls(
            category_id=line.category_id,
            label=names.get(line.category_id, line.category_id),
            spent=line.spent,
            budget=line.budget,
            remaining=line.remaining,
            utilization=line.utilization,
        )


class BillScheduleSchema(BaseModel):
    """Bill with its derived schedule facts"""

    bill_id: str
    name: str
    amount: Decimal
    frequency: str
    next_due_at: date
    days_until_due: int
    is_overdue: bool
    reminder_at: date
    missed_occurrences: int

    @classmethod
    def from_schedule(cls, schedule: BillSchedule) -> "BillScheduleSchema":
        bill, facts = schedule.bill, schedule.facts
        return cls(
            bill_id=bill.bill_id,
            name=bill.name,
            amount=bill.amount,
            frequency=bill.recurrence.frequency.value,
            next_due_at=facts.next_due_at,
            days_until_due=facts.days_until_due,
            is_overdue=facts.is_overdue,
            reminder_at=facts.reminder_at,
            missed_occurrences=facts.missed_occurrences,
        )


class DashboardResponse(BaseModel):
    """Response for GET /v1/dashboard"""

    user_id: str
    as_of: date
    cycle: CycleSchema
    next_cycle: CycleSchema
    total_spent: Decimal
    average_daily_spend: Decimal
    projected_monthly_spend: Decimal
    savings_rate: Optional[Decimal] = None
    by_category: List[GroupBucketSchema]
    by_card: List[GroupBucketSchema]
    top_categories: List[GroupBucketSchema]
    daily: List[TimeBucketSchema]
    weekly: List[TimeBucketSchema]
    monthly_trend: List[TimeBucketSchema]
    budgets: List[BudgetLineSchema]
    bills: List[BillScheduleSchema]
    upcoming_bills_total: Decimal


class BillScheduleResponse(BaseModel):
    """Response for GET /v1/bills/schedule"""

    user_id: str
    bills: List[BillScheduleSchema]
    upcoming_bills_total: Decimal
