"""POST /v1/billing-cycle - Resolve the statement a purchase belongs to"""

import logging
from fastapi import APIRouter, Depends, Request

from cardcycle_gateway.api.v1.schemas import BillingCycleRequest, BillingCycleResponse
from cardcycle_gateway.api.dependencies import get_due_date_rule, get_request_id
from cardcycle_gateway.domain.billing import resolve_billing_cycle
from cardcycle_gateway.domain.models import DueDateRule
from cardcycle_gateway.infrastructure.observability.metrics import record_billing_cycle
from cardcycle_gateway.utils.date_utils import parse_calendar_date

router = APIRouter()


@router.post("/billing-cycle", response_model=BillingCycleResponse)
def create_billing_cycle(
    request_body: BillingCycleRequest,
    request: Request,
    due_date_rule: DueDateRule = Depends(get_due_date_rule),
):
    """
    Resolve statement month/year and due date for a purchase.

    Months in the response are 0-based (0 = January).
    """
    cycle = resolve_billing_cycle(
        request_body.purchase_date,
        request_body.closing_day,
        request_body.due_day,
        due_date_rule,
    )

    _, purchase_month, _ = parse_calendar_date(request_body.purchase_date)
    record_billing_cycle(purchase_month, cycle.statement_month)
    logging.debug(
        "Billing cycle resolved",
        extra={"request_id": get_request_id(request), "due_date": cycle.due_date},
    )

    return BillingCycleResponse(
        statement_month=cycle.statement_month,
        statement_year=cycle.statement_year,
        due_date=cycle.due_date,
    )
