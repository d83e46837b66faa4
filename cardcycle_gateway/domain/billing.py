"""Billing cycle resolution for credit card purchases"""

from cardcycle_gateway.domain.models import BillingCycle, DueDateRule
from cardcycle_gateway.utils.date_utils import (
    due_date_for,
    parse_calendar_date,
    statement_cycle_for,
)


def resolve_billing_cycle(
    purchase_date: str,
    closing_day: int,
    due_day: int,
    due_date_rule: DueDateRule = DueDateRule.NEXT_MONTH_IF_BEFORE_CLOSING,
) -> BillingCycle:
    """
    Determine which statement a purchase lands on and when it is due.

    Rules:
    - day >= closing_day moves the purchase to the next month's statement
    - December rolls over to January of the following year
    - due_day < closing_day means the statement is paid the following month
      (under the default rule)
    - due_day is clamped to the last day of the due month

    Args:
        purchase_date: Purchase date as YYYY-MM-DD
        closing_day: Card's statement closing day (1-31)
        due_day: Card's payment due day (1-31)
        due_date_rule: Which month the due date falls in

    Returns:
        BillingCycle with 0-based statement month

    Example:
        resolve_billing_cycle("2025-12-20", 10, 15)
        → BillingCycle(statement_month=0, statement_year=2026, due_date="2026-01-15")
    """
    year, month, day = parse_calendar_date(purchase_date)
    cycle = statement_cycle_for(year, month, day, closing_day)

    return BillingCycle(
        statement_month=cycle.month,
        statement_year=cycle.year,
        due_date=due_date_for(cycle, closing_day, due_day, due_date_rule),
    )
