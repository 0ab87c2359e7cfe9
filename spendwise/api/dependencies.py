"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from spendwise.config import settings
from spendwise.domain.cycle import CycleCalculator
from spendwise.domain.ports import Clock
from spendwise.infrastructure.clock import SystemClock
from spendwise.infrastructure.database.repositories import SqlLedgerStore
from spendwise.infrastructure.database.session import get_db
from spendwise.services.dashboard import DashboardService


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_clock() -> Clock:
    """Provide the clock that supplies "now" to the engine"""
    return SystemClock()


def get_cycle_calculator() -> CycleCalculator:
    """Provide cycle calculator for the configured cycle start day"""
    return CycleCalculator(settings.cycle_start_day)


def get_dashboard_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    calculator: CycleCalculator = Depends(get_cycle_calculator),
) -> DashboardService:
    """Provide dashboard service wired to the request's database session"""
    return DashboardService(
        store=SqlLedgerStore(db),
        clock=clock,
        calculator=calculator,
        income=settings.monthly_income,
        default_budget=settings.default_category_budget,
        trend_months=settings.monthly_trend_months,
        top_count=settings.top_categories_count,
    )
