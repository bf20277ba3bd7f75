"""Calendar helpers for monthly due dates.

A payment day of 29-31 is clamped to the last day of shorter months.
"""

import calendar
from datetime import date


def normalize_due_date(year: int, month: int, day: int) -> date:
    """Clamp day into the given month, e.g. (2025, 2, 31) -> 2025-02-28."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if day < 1:
        raise ValueError(f"day must be >= 1, got {day}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def add_months(d: date, months: int) -> date:
    """Shift d by whole months, clamping the day into the target month."""
    index = d.year * 12 + (d.month - 1) + months
    return normalize_due_date(index // 12, index % 12 + 1, d.day)


def compute_first_due_date(start_date: date, payment_day: int) -> date:
    """First due date on or after start_date.

    The start month counts when the start date is on or before that month's
    clamped payment day; otherwise the first cycle falls in the next month.
    """
    start_month_due = normalize_due_date(start_date.year, start_date.month, payment_day)
    if start_date <= start_month_due:
        return start_month_due
    following = add_months(start_date.replace(day=1), 1)
    return normalize_due_date(following.year, following.month, payment_day)


def next_due_date(payment_day: int, as_of: date) -> date:
    """This month's due date, or next month's if it has already passed."""
    due = normalize_due_date(as_of.year, as_of.month, payment_day)
    if due < as_of:
        following = add_months(as_of.replace(day=1), 1)
        due = normalize_due_date(following.year, following.month, payment_day)
    return due
