"""Household monthly totals across every kind of obligation.

Pure computation. No I/O.
"""

from datetime import date, timedelta
from typing import Iterable, Sequence

from homebills.config import settings
from homebills.engine.splits import resolve_splits
from homebills.models.obligations import (
    Bill,
    FinancedExpense,
    Frequency,
    Mortgage,
    RecurringBill,
    Splittable,
)
from homebills.models.people import Person
from homebills.models.results import HouseholdSummary


def _add_splits(per_person: dict[str, int], items: Iterable[Splittable], people: Sequence[Person]) -> None:
    for item in items:
        for share in resolve_splits(item, people):
            if share.person_id in per_person:
                per_person[share.person_id] += share.amount


def summarize_month(
    people: Sequence[Person],
    bills: Sequence[Bill] = (),
    recurring_bills: Sequence[RecurringBill] = (),
    mortgages: Sequence[Mortgage] = (),
    financed_expenses: Sequence[FinancedExpense] = (),
    as_of: date | None = None,
) -> HouseholdSummary:
    """Planned monthly spend and each member's share of it.

    Counts active mortgages, monthly recurring templates, one-off bills and
    active financed expenses. Every roster member appears in per_person.
    """
    active_mortgages = [m for m in mortgages if m.active]
    monthly_recurring = [rb for rb in recurring_bills if rb.frequency is Frequency.MONTHLY]
    active_financed = [fe for fe in financed_expenses if fe.is_active]

    per_person = {p.id: 0 for p in people}
    for group in (active_mortgages, monthly_recurring, bills, active_financed):
        _add_splits(per_person, group, people)

    due_soon: list[str] = []
    if as_of is not None:
        horizon = as_of + timedelta(days=settings.upcoming_window_days)
        due_soon = [b.id for b in sorted(bills, key=lambda b: b.due_date) if as_of <= b.due_date <= horizon]

    return HouseholdSummary(
        mortgages_total=sum(m.scheduled_payment for m in active_mortgages),
        recurring_bills_total=sum(rb.amount for rb in monthly_recurring),
        bills_total=sum(b.amount for b in bills),
        financed_expenses_total=sum(fe.amount for fe in active_financed),
        per_person=per_person,
        due_soon=due_soon,
    )
