"""Next-occurrence arithmetic for recurring transactions"""

from datetime import date, timedelta
from typing import List, Optional

from cardcycle_gateway.domain.models import RecurrenceOccurrence, RecurrencePattern
from cardcycle_gateway.utils.date_utils import last_day_of_month

WEEKLY_DAYS = 7
MAX_INSTANCES_PER_REQUEST = 24


def next_occurrence(
    current: date,
    pattern: Optional[str],
    recurrence_day: Optional[int] = None,
) -> date:
    """
    Advance a date by one recurrence period.

    Monthly and yearly keep recurrence_day (or the current day) clamped to the
    target month, so Jan 31 → Feb 28 and Feb 29 → Feb 28 in a non-leap year.
    Unknown or missing patterns behave as monthly.
    """
    if pattern == RecurrencePattern.WEEKLY:
        return current + timedelta(days=WEEKLY_DAYS)

    target_day = recurrence_day if recurrence_day is not None else current.day

    # Reset to day 1 before moving month/year so day 31 can never overflow
    anchor = current.replace(day=1)
    if pattern == RecurrencePattern.YEARLY:
        anchor = anchor.replace(year=anchor.year + 1)
    elif anchor.month == 12:
        anchor = anchor.replace(year=anchor.year + 1, month=1)
    else:
        anchor = anchor.replace(month=anchor.month + 1)

    last_day = last_day_of_month(anchor.year, anchor.month - 1)
    return anchor.replace(day=min(target_day, last_day))


def generate_recurrence_series(
    start: date,
    pattern: Optional[str],
    recurrence_day: Optional[int] = None,
    count: Optional[int] = None,
    end_date: Optional[date] = None,
    max_instances: int = MAX_INSTANCES_PER_REQUEST,
) -> List[RecurrenceOccurrence]:
    """
    Expand a recurring transaction into its dated occurrences.

    The start date is occurrence 1. With count, exactly count occurrences are
    produced; otherwise occurrences continue while on or before end_date
    (default: Dec 31 of the current year). Either way no more than
    max_instances are generated after the first.

    Raises:
        ValueError: count < 1
    """
    if count is not None and count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    if count is None and end_date is None:
        end_date = date(date.today().year, 12, 31)

    dates = [start]
    current = start
    while len(dates) - 1 < max_instances:
        if count is not None and len(dates) >= count:
            break
        current = next_occurrence(current, pattern, recurrence_day)
        if count is None and current > end_date:
            break
        dates.append(current)

    total = len(dates)
    return [
        RecurrenceOccurrence(installment_number=i + 1, total_installments=total, date=d)
        for i, d in enumerate(dates)
    ]
