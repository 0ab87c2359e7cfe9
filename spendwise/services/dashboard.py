"""Dashboard orchestration - fetches one ledger snapshot and runs the engine over it"""

import logging
from decimal import Decimal
from typing import List, Mapping, Optional

from spendwise.domain.cycle import CycleCalculator
from spendwise.domain.dashboard import build_dashboard, trend_window
from spendwise.domain.models import BillSchedule, DashboardSummary, DateRange, LedgerSnapshot
from spendwise.domain.ports import Clock, LedgerStore
from spendwise.domain.recurrence import bills_by_due_date

logger = logging.getLogger(__name__)


class DashboardService:
    """
    Combines the storage collaborator, a clock and the cycle calculator.

    All collaborators are passed in; the service reads "now" once per call
    and hands the engine an immutable snapshot.
    """

    def __init__(
        self,
        store: LedgerStore,
        clock: Clock,
        calculator: CycleCalculator,
        income: Decimal,
        default_budget: Decimal = Decimal("1000"),
        budgets: Optional[Mapping[str, Decimal]] = None,
        trend_months: int = 5,
        top_count: int = 3,
    ):
        self.store = store
        self.clock = clock
        self.calculator = calculator
        self.income = income
        self.default_budget = default_budget
        self.budgets = dict(budgets or {})
        self.trend_months = trend_months
        self.top_count = top_count

    def fetch_window(self, cycle: DateRange, trend: DateRange) -> DateRange:
        """Smallest range covering both the cycle and the trend months"""
        if cycle.is_degenerate:
            return trend
        return DateRange(min(cycle.start, trend.start), max(cycle.end, trend.end))

    def load_snapshot(self, user_id: str, window: DateRange) -> LedgerSnapshot:
        return LedgerSnapshot(
            transactions=tuple(self.store.get_transactions(user_id, window)),
            bills=tuple(self.store.get_bills(user_id)),
            card_names=self.store.get_card_names(user_id),
            category_names=self.store.get_category_names(user_id),
        )

    def dashboard(self, user_id: str) -> tuple[DashboardSummary, LedgerSnapshot]:
        """Dashboard for the user's current billing cycle, with the snapshot it was computed from"""
        now = self.clock.now()
        cycle = self.calculator.current_cycle(now)
        if cycle.is_degenerate:
            logger.warning("Degenerate billing cycle", extra={"user_id": user_id, "now": now.isoformat()})

        window = self.fetch_window(cycle, trend_window(now, self.trend_months))
        snapshot = self.load_snapshot(user_id, window)

        summary = build_dashboard(
            snapshot,
            now,
            self.calculator,
            income=self.income,
            budgets=self.budgets,
            default_budget=self.default_budget,
            trend_months=self.trend_months,
            top_count=self.top_count,
        )
        return summary, snapshot

    def bill_schedules(self, user_id: str) -> List[BillSchedule]:
        """User's bills with schedule facts, soonest due first"""
        return bills_by_due_date(self.store.get_bills(user_id), self.clock.now())
