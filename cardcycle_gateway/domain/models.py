"""Domain models - pure Python dataclasses representing billing entities"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class DueDateRule(str, Enum):
    """Which month a statement's due date falls in"""

    # due_day < closing_day pushes payment into the month after the statement
    NEXT_MONTH_IF_BEFORE_CLOSING = "next_month_if_before_closing"
    # due date always inside the statement month
    STATEMENT_MONTH = "statement_month"


class RecurrencePattern(str, Enum):
    """Supported recurrence periods. Unknown values are treated as monthly."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True, order=True)
class StatementCycle:
    """One monthly billing statement. Month is 0-based (0 = January)."""

    year: int
    month: int

    def advance(self, months: int = 1) -> "StatementCycle":
        """Move forward by whole months, wrapping the year past December"""
        total = self.year * 12 + self.month + months
        return StatementCycle(year=total // 12, month=total % 12)


@dataclass(frozen=True)
class BillingCycle:
    """Statement a purchase belongs to and when that statement is due"""

    statement_month: int
    statement_year: int
    due_date: str


@dataclass(frozen=True)
class Installment:
    """Single installment of a card purchase"""

    index: int
    amount_cents: int
    statement_month: int
    statement_year: int
    due_date: str
    installment_id: str

    @property
    def amount(self) -> Decimal:
        """Amount in major currency units"""
        return (Decimal(self.amount_cents) / 100).quantize(Decimal("0.01"))


@dataclass(frozen=True)
class RecurrenceOccurrence:
    """One dated instance of a recurring transaction"""

    installment_number: int
    total_installments: int
    date: date
