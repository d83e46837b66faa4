"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, field_validator
from datetime import date
from decimal import Decimal
from typing import List, Optional

from cardcycle_gateway.domain.models import RecurrencePattern
from cardcycle_gateway.utils.date_utils import last_day_of_month, parse_calendar_date

CALENDAR_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
MAX_INSTALLMENT_COUNT = 60


def check_calendar_date(value: str) -> str:
    """Reject YYYY-MM-DD strings that name no real day, keeping the original text"""
    year, month, day = parse_calendar_date(value)
    if not 0 <= month <= 11 or not 1 <= day <= last_day_of_month(year, month):
        raise ValueError(f"{value} is not a valid calendar date")
    return value


class BillingCycleRequest(BaseModel):
    """Request body for POST /v1/billing-cycle"""

    purchase_date: str = Field(..., pattern=CALENDAR_DATE_PATTERN, description="Purchase date as YYYY-MM-DD")
    closing_day: int = Field(..., ge=1, le=31, description="Statement closing day")
    due_day: int = Field(..., ge=1, le=31, description="Payment due day")

    @field_validator("purchase_date")
    @classmethod
    def purchase_date_is_real(cls, value: str) -> str:
        return check_calendar_date(value)


class BillingCycleResponse(BaseModel):
    """Response for POST /v1/billing-cycle"""

    statement_month: int = Field(..., description="0-based statement month")
    statement_year: int
    due_date: str


class InstallmentRequest(BaseModel):
    """Request body for POST /v1/installments"""

    purchase_date: str = Field(..., pattern=CALENDAR_DATE_PATTERN, description="Purchase date as YYYY-MM-DD")
    amount: Decimal = Field(..., ge=0, description="Purchase total in major currency units")
    # Lower bound is checked by the domain layer so the error surfaces as InvalidInstallmentCountError
    installment_count: int = Field(..., le=MAX_INSTALLMENT_COUNT, description="Number of installments")
    closing_day: int = Field(..., ge=1, le=31)
    due_day: int = Field(..., ge=1, le=31)

    @field_validator("purchase_date")
    @classmethod
    def purchase_date_is_real(cls, value: str) -> str:
        return check_calendar_date(value)


class InstallmentSchema(BaseModel):
    """Single installment in a purchase schedule"""

    index: int
    amount: Decimal
    amount_cents: int
    statement_month: int
    statement_year: int
    due_date: str
    installment_id: str


class InstallmentPlanResponse(BaseModel):
    """Response for POST /v1/installments"""

    purchase_date: str
    total_cents: int
    installments: List[InstallmentSchema]


class NextOccurrenceRequest(BaseModel):
    """Request body for POST /v1/recurrence/next"""

    current_date: date
    pattern: Optional[RecurrencePattern] = None
    recurrence_day: Optional[int] = Field(None, ge=1, le=31)


class NextOccurrenceResponse(BaseModel):
    """Response for POST /v1/recurrence/next"""

    next_date: date


class RecurrenceSeriesRequest(BaseModel):
    """Request body for POST /v1/recurrence/series"""

    start_date: date
    pattern: Optional[RecurrencePattern] = None
    recurrence_day: Optional[int] = Field(None, ge=1, le=31)
    count: Optional[int] = Field(None, ge=1, le=60, description="Total occurrences including the first")
    end_date: Optional[date] = None


class OccurrenceSchema(BaseModel):
    """Single occurrence in a recurring series"""

    installment_number: int
    total_installments: int
    occurrence_date: date


class RecurrenceSeriesResponse(BaseModel):
    """Response for POST /v1/recurrence/series"""

    occurrences: List[OccurrenceSchema]
