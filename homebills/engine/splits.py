"""Split resolution and proportional payment allocation.

Pure functions: obligations in, per-person cents out. No I/O.
"""

from decimal import Decimal
from typing import Sequence

from homebills.engine.money import distribute_pennies
from homebills.models.obligations import SplitEntry, SplitMode, Splittable
from homebills.models.payments import MortgagePayment, Payment, PaymentAllocation
from homebills.models.people import Person
from homebills.models.results import SplitAmount


def _active_entries(obligation: Splittable, people: Sequence[Person]) -> list[SplitEntry]:
    """Entries for people on the roster with a positive value."""
    roster = {p.id for p in people}
    return [s for s in obligation.splits if s.person_id in roster and s.value > 0]


def _zero_for_everyone(people: Sequence[Person]) -> list[SplitAmount]:
    return [SplitAmount(person_id=p.id, amount=0) for p in people]


def _ratio_split(total: int, entries: list[SplitEntry], weights: list[Decimal]) -> list[SplitAmount]:
    weight_sum = sum(weights, Decimal("0"))
    raw = [(e.person_id, Decimal(total) * w / weight_sum) for e, w in zip(entries, weights)]
    return [SplitAmount(person_id=k, amount=v) for k, v in distribute_pennies(total, raw)]


def resolve_splits(obligation: Splittable, people: Sequence[Person]) -> list[SplitAmount]:
    """Per-person share of an obligation's amount, in cents.

    Only roster members with a positive split value take part. When the
    amount is not positive or nobody takes part, every roster member gets a
    zero entry so callers can always look a person up.

    FIXED_AMOUNT values are taken as-is. PERCENT values are rescaled to
    total 100 first. PERCENT and SHARES results always sum to the amount.
    """
    if obligation.amount <= 0:
        return _zero_for_everyone(people)

    active = _active_entries(obligation, people)
    if not active:
        return _zero_for_everyone(people)

    mode = obligation.split_mode
    if mode is SplitMode.FIXED_AMOUNT:
        return [SplitAmount(person_id=s.person_id, amount=int(s.value)) for s in active]

    if mode is SplitMode.PERCENT:
        total_percent = sum((s.value for s in active), Decimal("0"))
        scale = Decimal("100") / total_percent
        return _ratio_split(obligation.amount, active, [s.value * scale for s in active])

    if mode is SplitMode.SHARES:
        return _ratio_split(obligation.amount, active, [s.value for s in active])

    raise ValueError(f"Unknown split mode: {mode!r}")


def allocate_proportionally(
    payment_amount: int,
    obligation: Splittable,
    people: Sequence[Person],
) -> list[PaymentAllocation]:
    """Split a payment in the same proportion as the obligation itself.

    A partial payment is divided by each person's owed share of the full
    obligation. Returns no allocations when nobody owes anything.
    """
    owed = resolve_splits(obligation, people)
    total_owed = sum(s.amount for s in owed)
    if total_owed == 0:
        return []

    raw = [
        (s.person_id, Decimal(s.amount) * Decimal(payment_amount) / total_owed)
        for s in owed
    ]
    return [
        PaymentAllocation(person_id=k, amount=v)
        for k, v in distribute_pennies(payment_amount, raw)
    ]


def payment_allocations(
    payment: Payment | MortgagePayment,
    obligation: Splittable,
    people: Sequence[Person],
) -> list[PaymentAllocation]:
    """Explicit allocations of a payment, or a proportional split when it has none."""
    if payment.allocations is not None:
        return list(payment.allocations)
    return allocate_proportionally(payment.amount, obligation, people)
