"""GET /v1/bills/schedule - User's recurring bills ordered by due date"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from spendwise.api.v1.schemas import BillScheduleResponse, BillScheduleSchema
from spendwise.api.dependencies import get_dashboard_service, get_request_id
from spendwise.domain.exceptions import InvalidInputError, StorageError
from spendwise.domain.recurrence import upcoming_bills_total
from spendwise.services.dashboard import DashboardService

router = APIRouter()


@router.get("/bills/schedule", response_model=BillScheduleResponse)
def get_bill_schedule(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    service: DashboardService = Depends(get_dashboard_service),
):
    """
    Retrieve bills with next due date, days until due and reminder date.

    Past reminders are returned as computed; delivery decides whether to send them.
    """
    request_id = get_request_id(request)

    try:
        schedules = service.bill_schedules(user_id)
    except StorageError as e:
        logging.error(f"Storage error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Storage unavailable")
    except InvalidInputError as e:
        logging.warning(f"Invalid bill data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    return BillScheduleResponse(
        user_id=user_id,
        bills=[BillScheduleSchema.from_schedule(s) for s in schedules],
        upcoming_bills_total=upcoming_bills_total(schedules),
    )
