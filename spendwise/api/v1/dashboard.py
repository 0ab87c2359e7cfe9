"""GET /v1/dashboard - Spending analytics for the current billing cycle"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from spendwise.api.v1.schemas import (
    BillScheduleSchema,
    BudgetLineSchema,
    CycleSchema,
    DashboardResponse,
    GroupBucketSchema,
    TimeBucketSchema,
)
from spendwise.api.dependencies import get_dashboard_service, get_request_id
from spendwise.domain.exceptions import InvalidInputError, StorageError
from spendwise.domain.recurrence import is_reminder_due
from spendwise.infrastructure.observability.logging import log_dashboard
from spendwise.infrastructure.observability.metrics import record_active_reminders, record_dashboard
from spendwise.services.dashboard import DashboardService

router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    service: DashboardService = Depends(get_dashboard_service),
):
    """
    Compute the spending dashboard for the user's current billing cycle.

    Flow:
    1. Resolve the current cycle and the trend window from now
    2. Fetch one snapshot of expenses, bills, cards and categories
    3. Aggregate by day, week, month, category and card
    4. Derive averages, projection, savings rate, budgets and bill schedules
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        summary, snapshot = service.dashboard(user_id)

    except StorageError as e:
        record_dashboard("storage_error")
        logging.error(f"Storage error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Storage unavailable")

    except InvalidInputError as e:
        record_dashboard("invalid_input")
        logging.warning(f"Invalid input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        record_dashboard("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_dashboard("ok", degenerate_cycle=summary.cycle.is_degenerate)
    record_active_reminders(sum(1 for s in summary.bills if is_reminder_due(s.facts, summary.as_of)))
    log_dashboard(
        request_id,
        user_id,
        summary.cycle.start.isoformat(),
        summary.cycle.end.isoformat(),
        len(snapshot.transactions),
        len(snapshot.bills),
        duration_ms,
    )

    categories = snapshot.category_names
    cards = snapshot.card_names
    return DashboardResponse(
        user_id=user_id,
        as_of=summary.as_of,
        cycle=CycleSchema.from_range(summary.cycle),
        next_cycle=CycleSchema.from_range(summary.next_cycle),
        total_spent=summary.total_spent,
        average_daily_spend=summary.average_daily_spend,
        projected_monthly_spend=summary.projected_monthly_spend,
        savings_rate=summary.savings_rate,
        by_category=[GroupBucketSchema.from_bucket(b, categories) for b in summary.by_category],
        by_card=[GroupBucketSchema.from_bucket(b, cards) for b in summary.by_card],
        top_categories=[GroupBucketSchema.from_bucket(b, categories) for b in summary.top_categories],
        daily=[TimeBucketSchema.from_bucket(b) for b in summary.daily],
        weekly=[TimeBucketSchema.from_bucket(b) for b in summary.weekly],
        monthly_trend=[TimeBucketSchema.from_bucket(b) for b in summary.monthly_trend],
        budgets=[BudgetLineSchema.from_line(line, categories) for line in summary.budget_lines],
        bills=[BillScheduleSchema.from_schedule(s) for s in summary.bills],
        upcoming_bills_total=summary.upcoming_bills_total,
    )
