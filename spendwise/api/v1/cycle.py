"""GET /v1/cycle - Current and next billing cycle"""

from fastapi import APIRouter, Depends

from spendwise.api.v1.schemas import CycleResponse, CycleSchema
from spendwise.api.dependencies import get_clock, get_cycle_calculator
from spendwise.domain.cycle import CycleCalculator
from spendwise.domain.ports import Clock

router = APIRouter()


@router.get("/cycle", response_model=CycleResponse)
def get_cycle(
    clock: Clock = Depends(get_clock),
    calculator: CycleCalculator = Depends(get_cycle_calculator),
):
    """
    Return the billing cycle containing now and the one after it.

    A degenerate cycle (start == end) means the boundary could not be computed.
    """
    now = clock.now()
    return CycleResponse(
        cycle_start_day=calculator.cycle_start_day,
        current=CycleSchema.from_range(calculator.current_cycle(now)),
        next=CycleSchema.from_range(calculator.next_cycle(now)),
    )
