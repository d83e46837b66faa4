"""POST /v1/recurrence/* - Recurring transaction scheduling"""

from fastapi import APIRouter

from cardcycle_gateway.api.v1.schemas import (
    NextOccurrenceRequest,
    NextOccurrenceResponse,
    OccurrenceSchema,
    RecurrenceSeriesRequest,
    RecurrenceSeriesResponse,
)
from cardcycle_gateway.config import settings
from cardcycle_gateway.domain.recurrence import generate_recurrence_series, next_occurrence
from cardcycle_gateway.infrastructure.observability.metrics import record_recurrence

router = APIRouter()


@router.post("/recurrence/next", response_model=NextOccurrenceResponse)
def get_next_occurrence(request_body: NextOccurrenceRequest):
    """Advance a date by one weekly/monthly/yearly period"""
    pattern = request_body.pattern.value if request_body.pattern else None
    record_recurrence(pattern)

    return NextOccurrenceResponse(
        next_date=next_occurrence(request_body.current_date, pattern, request_body.recurrence_day)
    )


@router.post("/recurrence/series", response_model=RecurrenceSeriesResponse)
def get_recurrence_series(request_body: RecurrenceSeriesRequest):
    """
    Expand a recurring transaction into dated occurrences.

    Returns:
        Occurrences starting with start_date itself, capped by
        max_recurring_instances
    """
    pattern = request_body.pattern.value if request_body.pattern else None
    record_recurrence(pattern)

    occurrences = generate_recurrence_series(
        start=request_body.start_date,
        pattern=pattern,
        recurrence_day=request_body.recurrence_day,
        count=request_body.count,
        end_date=request_body.end_date,
        max_instances=settings.max_recurring_instances,
    )

    return RecurrenceSeriesResponse(
        occurrences=[
            OccurrenceSchema(
                installment_number=occ.installment_number,
                total_installments=occ.total_installments,
                occurrence_date=occ.date,
            )
            for occ in occurrences
        ]
    )
