"""Installment schedule generation for credit card purchases"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List

from cardcycle_gateway.domain.exceptions import InvalidInstallmentCountError
from cardcycle_gateway.domain.models import DueDateRule, Installment
from cardcycle_gateway.utils.date_utils import (
    due_date_for,
    parse_calendar_date,
    statement_cycle_for,
)

CENT = Decimal("0.01")


def to_cents(amount: Decimal | int | float | str) -> int:
    """Convert a major-unit amount to integer cents, rounding half up"""
    return int((Decimal(str(amount)) / CENT).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def generate_installments(
    purchase_date: str,
    amount: Decimal | int | float | str,
    installment_count: int,
    closing_day: int,
    due_day: int,
    due_date_rule: DueDateRule = DueDateRule.NEXT_MONTH_IF_BEFORE_CLOSING,
) -> List[Installment]:
    """
    Split a card purchase into one installment per consecutive statement.

    Requirements:
    - First statement follows the same closing-day rule as resolve_billing_cycle
    - Installment k lands on the first statement advanced by k-1 months
    - Each due date is clamped to its own month (Feb 28 vs Mar 31)
    - First installment absorbs the rounding remainder, so the sum is exact

    Args:
        purchase_date: Purchase date as YYYY-MM-DD
        amount: Purchase total in major currency units
        installment_count: Number of installments (>= 1)
        closing_day: Card's statement closing day (1-31)
        due_day: Card's payment due day (1-31)
        due_date_rule: Which month each due date falls in

    Returns:
        Installments ordered by index

    Raises:
        InvalidInstallmentCountError: installment_count < 1

    Example:
        $100.00 in 3 → [$33.34, $33.33, $33.33]
        10000 cents / 3 = 3333 base, remainder 1
        First installment: 3333 + 1 = 3334
    """
    if installment_count < 1:
        raise InvalidInstallmentCountError(installment_count)

    year, month, day = parse_calendar_date(purchase_date)
    first_cycle = statement_cycle_for(year, month, day, closing_day)

    # Work in integer cents to avoid floating-point drift
    total_cents = to_cents(amount)
    base_cents = total_cents // installment_count
    remainder_cents = total_cents - base_cents * installment_count

    installments = []
    for index in range(1, installment_count + 1):
        cycle = first_cycle.advance(index - 1)
        cents = base_cents + (remainder_cents if index == 1 else 0)

        installments.append(
            Installment(
                index=index,
                amount_cents=cents,
                statement_month=cycle.month,
                statement_year=cycle.year,
                due_date=due_date_for(cycle, closing_day, due_day, due_date_rule),
                installment_id=f"{purchase_date}-i{index}",
            )
        )

    return installments
