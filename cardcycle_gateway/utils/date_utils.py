"""Calendar date helpers working on explicit (year, month, day) integers.

Dates cross the service boundary as zone-less ``YYYY-MM-DD`` strings. They are
split into integers and rebuilt from integers so no timezone conversion can
shift the day.
"""

from calendar import monthrange
from typing import Tuple

from cardcycle_gateway.domain.models import DueDateRule, StatementCycle


def parse_calendar_date(value: str) -> Tuple[int, int, int]:
    """Split ``YYYY-MM-DD`` into (year, 0-based month, day)"""
    year_str, month_str, day_str = value.split("-")
    return int(year_str), int(month_str) - 1, int(day_str)


def format_calendar_date(year: int, month: int, day: int) -> str:
    """Build a zero-padded ``YYYY-MM-DD`` from a 0-based month"""
    return f"{year:04d}-{month + 1:02d}-{day:02d}"


def last_day_of_month(year: int, month: int) -> int:
    """Number of days in a 0-based month, leap years included"""
    return monthrange(year, month + 1)[1]


def statement_cycle_for(year: int, month: int, day: int, closing_day: int) -> StatementCycle:
    """
    Statement a purchase on (year, month, day) belongs to.

    The closing day itself already belongs to the next statement.
    """
    cycle = StatementCycle(year=year, month=month)
    if day >= closing_day:
        cycle = cycle.advance(1)
    return cycle


def due_date_for(
    cycle: StatementCycle,
    closing_day: int,
    due_day: int,
    rule: DueDateRule = DueDateRule.NEXT_MONTH_IF_BEFORE_CLOSING,
) -> str:
    """Due date of a statement, with due_day clamped to the due month's length"""
    due_cycle = cycle
    if rule == DueDateRule.NEXT_MONTH_IF_BEFORE_CLOSING and due_day < closing_day:
        due_cycle = cycle.advance(1)

    day = min(due_day, last_day_of_month(due_cycle.year, due_cycle.month))
    return format_calendar_date(due_cycle.year, due_cycle.month, day)
