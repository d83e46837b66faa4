"""POST /v1/installments - Split a card purchase into installments"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from cardcycle_gateway.api.v1.schemas import (
    InstallmentPlanResponse,
    InstallmentRequest,
    InstallmentSchema,
)
from cardcycle_gateway.api.dependencies import get_due_date_rule, get_request_id
from cardcycle_gateway.domain.exceptions import InvalidInstallmentCountError
from cardcycle_gateway.domain.installments import generate_installments
from cardcycle_gateway.domain.models import DueDateRule
from cardcycle_gateway.infrastructure.observability.metrics import (
    domain_error_counter,
    record_installment_plan,
)
from cardcycle_gateway.infrastructure.observability.logging import log_installment_plan

router = APIRouter()


@router.post("/installments", response_model=InstallmentPlanResponse)
def create_installments(
    request_body: InstallmentRequest,
    request: Request,
    due_date_rule: DueDateRule = Depends(get_due_date_rule),
):
    """
    Generate the installment schedule for a purchase.

    Flow:
    1. Resolve first statement from purchase date and closing day
    2. Advance one statement per installment, clamping each due date
    3. Split the amount in cents, remainder on the first installment
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        installments = generate_installments(
            purchase_date=request_body.purchase_date,
            amount=request_body.amount,
            installment_count=request_body.installment_count,
            closing_day=request_body.closing_day,
            due_day=request_body.due_day,
            due_date_rule=due_date_rule,
        )
    except InvalidInstallmentCountError as e:
        domain_error_counter.labels(error="invalid_installment_count").inc()
        logging.warning(f"Invalid installment count: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    total_cents = sum(inst.amount_cents for inst in installments)

    duration_ms = (time.time() - start_time) * 1000
    record_installment_plan(len(installments))
    log_installment_plan(request_id, request_body.purchase_date, len(installments), total_cents, duration_ms)

    return InstallmentPlanResponse(
        purchase_date=request_body.purchase_date,
        total_cents=total_cents,
        installments=[
            InstallmentSchema(
                index=inst.index,
                amount=inst.amount,
                amount_cents=inst.amount_cents,
                statement_month=inst.statement_month,
                statement_year=inst.statement_year,
                due_date=inst.due_date,
                installment_id=inst.installment_id,
            )
            for inst in installments
        ],
    )
