"""Billing cycle resolution for bills and mortgages.

Status is recomputed from payment history on every call; nothing is cached.
The reference date is always supplied by the caller.

Pure functions: dataclasses in, ItemCycle out. No I/O. Tracing happens only
through a logger the caller passes in.
"""

import logging
from datetime import date, timedelta
from typing import Sequence

from homebills.engine.dates import compute_first_due_date, normalize_due_date, add_months
from homebills.engine.splits import payment_allocations, resolve_splits
from homebills.models.obligations import Bill, Mortgage, Splittable
from homebills.models.payments import MortgagePayment, Payment
from homebills.models.people import Person
from homebills.models.results import BillStatus, ItemCycle, PersonCycleStatus

TRACE_LOGGER_NAME = __name__

ONE_DAY = timedelta(days=1)


def derive_status(total_paid: int, total_remaining: int, cycle_end: date, today: date) -> BillStatus:
    """Paid, then Overdue, then Partially Paid, then Unpaid."""
    if total_remaining <= 0:
        return BillStatus.PAID
    if today > cycle_end:
        return BillStatus.OVERDUE
    if total_paid > 0:
        return BillStatus.PARTIALLY_PAID
    return BillStatus.UNPAID


def _per_person(
    splittable: Splittable,
    payments: Sequence[Payment | MortgagePayment],
    people: Sequence[Person],
) -> tuple[PersonCycleStatus, ...]:
    owed = {s.person_id: s.amount for s in resolve_splits(splittable, people)}
    paid = dict.fromkeys(owed, 0)

    for payment in payments:
        for alloc in payment_allocations(payment, splittable, people):
            if alloc.person_id in paid:
                paid[alloc.person_id] += alloc.amount

    return tuple(
        PersonCycleStatus(
            person_id=pid,
            owed=owed[pid],
            paid=paid[pid],
            remaining=max(0, owed[pid] - paid[pid]),
        )
        for pid in owed
    )


def _resolve_cycle_from_window(
    splittable: Splittable,
    payments_in_window: Sequence[Payment | MortgagePayment],
    people: Sequence[Person],
    cycle_start: date,
    cycle_end: date,
    due_date: date,
    today: date,
    first_due_date: date | None = None,
) -> ItemCycle:
    total_paid = sum(p.amount for p in payments_in_window)
    total_remaining = max(0, splittable.amount - total_paid)
    return ItemCycle(
        status=derive_status(total_paid, total_remaining, cycle_end, today),
        total_paid=total_paid,
        total_remaining=total_remaining,
        per_person=_per_person(splittable, payments_in_window, people),
        cycle_start=cycle_start,
        cycle_end=cycle_end,
        due_date=due_date,
        first_due_date=first_due_date,
    )


def resolve_bill_cycle(
    bill: Bill,
    payments: Sequence[Payment],
    people: Sequence[Person],
    today: date,
) -> ItemCycle:
    """A one-off bill has a single cycle: the month of its due date."""
    for_bill = [p for p in payments if isinstance(p, Payment) and p.bill_id == bill.id]
    return _resolve_cycle_from_window(
        bill,
        for_bill,
        people,
        cycle_start=bill.due_date.replace(day=1),
        cycle_end=bill.due_date,
        due_date=bill.due_date,
        today=today,
    )


def resolve_mortgage_cycle(
    mortgage: Mortgage,
    payments: Sequence[MortgagePayment],
    people: Sequence[Person],
    today: date,
    tracer: logging.Logger | None = None,
) -> ItemCycle | None:
    """Resolve the mortgage cycle whose due date falls in today's month.

    Before the first due date the mortgage is Upcoming with the whole
    scheduled payment owed. Returns None if this month's due date would
    precede the first due date.
    """
    first_due = compute_first_due_date(mortgage.start_date, mortgage.payment_day)
    _trace(tracer, "mortgage cycle start", mortgage_id=mortgage.id,
           start_date=mortgage.start_date, payment_day=mortgage.payment_day,
           first_due_date=first_due, today=today)

    if today < first_due:
        owed = resolve_splits(mortgage, people)
        _trace(tracer, "mortgage cycle upcoming", mortgage_id=mortgage.id, status=BillStatus.UPCOMING.value)
        return ItemCycle(
            status=BillStatus.UPCOMING,
            total_paid=0,
            total_remaining=mortgage.scheduled_payment,
            per_person=tuple(
                PersonCycleStatus(person_id=s.person_id, owed=s.amount, paid=0, remaining=s.amount)
                for s in owed
            ),
            cycle_start=mortgage.start_date,
            cycle_end=first_due,
            due_date=first_due,
            first_due_date=first_due,
            is_upcoming=True,
        )

    due = normalize_due_date(today.year, today.month, mortgage.payment_day)
    if due < first_due:
        _trace(tracer, "mortgage cycle precedes first due date", mortgage_id=mortgage.id, due_date=due)
        return None

    if due == first_due:
        cycle_start = mortgage.start_date
    else:
        prev_month = add_months(due.replace(day=1), -1)
        prev_due = normalize_due_date(prev_month.year, prev_month.month, mortgage.payment_day)
        cycle_start = prev_due + ONE_DAY

    in_window = [
        p for p in payments
        if isinstance(p, MortgagePayment)
        and p.mortgage_id == mortgage.id
        and cycle_start <= p.paid_date <= due
    ]
    cycle = _resolve_cycle_from_window(
        mortgage,
        in_window,
        people,
        cycle_start=cycle_start,
        cycle_end=due,
        due_date=due,
        today=today,
        first_due_date=first_due,
    )
    _trace(tracer, "mortgage cycle resolved", mortgage_id=mortgage.id,
           cycle_start=cycle.cycle_start, cycle_end=cycle.cycle_end,
           total_paid=cycle.total_paid, total_remaining=cycle.total_remaining,
           status=cycle.status.value)
    return cycle


def resolve_item_cycle(
    item: Bill | Mortgage,
    payments: Sequence[Payment | MortgagePayment],
    people: Sequence[Person],
    today: date,
    tracer: logging.Logger | None = None,
) -> ItemCycle | None:
    """Resolve the active cycle and status of a bill or mortgage.

    Args:
        item: The obligation
        payments: Payment history for the obligation
        people: Household roster
        today: Reference date
        tracer: Optional logger that receives debug records for each step

    A None result means there is no applicable cycle; callers leave the
    item out of due lists.
    """
    if isinstance(item, Mortgage):
        return resolve_mortgage_cycle(item, payments, people, today, tracer)
    if isinstance(item, Bill):
        cycle = resolve_bill_cycle(item, payments, people, today)
        _trace(tracer, "bill cycle resolved", bill_id=item.id, due_date=item.due_date,
               total_paid=cycle.total_paid, status=cycle.status.value)
        return cycle
    raise TypeError(f"Cannot resolve a cycle for {type(item).__name__}")


def _trace(tracer: logging.Logger | None, message: str, **fields) -> None:
    if tracer is not None:
        tracer.debug(message, extra={"cycle": fields})
