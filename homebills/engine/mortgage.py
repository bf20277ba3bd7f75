"""Mortgage snapshot: year-to-date totals, lifetime progress, payoff
projections and per-member contributions.

Pure functions: dataclasses in, MortgageStats out. No I/O.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from homebills.engine.dates import add_months, next_due_date
from homebills.engine.debt import monthly_rate, months_remaining
from homebills.engine.splits import payment_allocations
from homebills.models.obligations import Mortgage
from homebills.models.payments import MortgagePayment, MortgagePaymentBreakdown
from homebills.models.people import Person
from homebills.models.results import (
    MemberContribution,
    MortgageProgress,
    MortgageProjections,
    MortgageStats,
    MortgageSummary,
    PayoffProjection,
)

TWO_PLACES = Decimal("0.01")
ONE_CENT = Decimal("1")

# Number of largest monthly principal totals averaged for the extra-principal estimate
EXTRA_PRINCIPAL_MONTHS = 3


def average_extra_principal(
    mortgage: Mortgage,
    payments: Sequence[MortgagePayment],
    breakdowns: Sequence[MortgagePaymentBreakdown],
) -> int:
    """Average principal paid above the scheduled P&I in the top three months.

    Principal is summed per calendar month of the payment date; the three
    largest months are compared to the scheduled principal-and-interest
    amount, floored at zero and averaged.
    """
    paid_on = {p.id: p.paid_date for p in payments}
    by_month: dict[tuple[int, int], int] = defaultdict(int)
    for bd in breakdowns:
        paid = paid_on.get(bd.payment_id)
        if paid is None:
            continue
        by_month[(paid.year, paid.month)] += bd.principal

    top = sorted(by_month.values(), reverse=True)[:EXTRA_PRINCIPAL_MONTHS]
    if not top:
        return 0
    scheduled_pi = mortgage.scheduled_principal_and_interest
    extras = [max(0, month_total - scheduled_pi) for month_total in top]
    return int((Decimal(sum(extras)) / len(extras)).quantize(ONE_CENT, ROUND_HALF_UP))


def project_payoff(principal: int, payment: int, rate: Decimal, as_of: date) -> PayoffProjection:
    """Months remaining and payoff month (first of month) at a given P&I payment."""
    months = months_remaining(principal, payment, rate)
    if months is None:
        return PayoffProjection(
            monthly_payment=payment,
            months_remaining=None,
            payoff_date=None,
            insufficient_payment=True,
        )
    return PayoffProjection(
        monthly_payment=payment,
        months_remaining=months,
        payoff_date=add_months(as_of.replace(day=1), months),
    )


def member_contributions(
    mortgage: Mortgage,
    payments: Sequence[MortgagePayment],
    people: Sequence[Person],
) -> tuple[MemberContribution, ...]:
    """Each roster member's share of the given payments, largest first."""
    totals = {p.id: 0 for p in people}
    for payment in payments:
        for alloc in payment_allocations(payment, mortgage, people):
            if alloc.person_id in totals:
                totals[alloc.person_id] += alloc.amount

    ranked = [MemberContribution(person_id=p.id, name=p.name, total=totals[p.id]) for p in people]
    # Stable: equal totals keep roster order
    ranked.sort(key=lambda c: c.total, reverse=True)
    return tuple(ranked)


def compute_mortgage_stats(
    mortgage: Mortgage,
    payments: Sequence[MortgagePayment],
    breakdowns: Sequence[MortgagePaymentBreakdown],
    people: Sequence[Person],
    as_of: date,
) -> MortgageStats:
    """Build the mortgage snapshot as of a reference date.

    Args:
        mortgage: Loan terms and split configuration
        payments: All recorded payments for the mortgage
        breakdowns: Principal/interest/escrow split for those payments
        people: Household roster
        as_of: Reference date; year-to-date means as_of's calendar year
    """
    ytd_payments = [p for p in payments if p.paid_date.year == as_of.year]
    ytd_ids = {p.id for p in ytd_payments}
    ytd_breakdowns = [bd for bd in breakdowns if bd.payment_id in ytd_ids]

    principal_lifetime = sum(bd.principal for bd in breakdowns)
    if mortgage.original_principal > 0:
        percent_paid = (
            Decimal(principal_lifetime) / mortgage.original_principal * 100
        ).quantize(TWO_PLACES, ROUND_HALF_UP)
    else:
        percent_paid = Decimal("0")

    extra = average_extra_principal(mortgage, payments, breakdowns)

    rate = monthly_rate(mortgage.interest_rate_apy)
    scheduled_pi = mortgage.scheduled_principal_and_interest

    return MortgageStats(
        mortgage=MortgageSummary(
            id=mortgage.id,
            name=mortgage.name,
            interest_rate_apy=mortgage.interest_rate_apy,
            term_months=mortgage.term_months,
            original_principal=mortgage.original_principal,
            current_principal=mortgage.current_principal,
            scheduled_payment=mortgage.scheduled_payment,
            escrow_monthly=mortgage.escrow_monthly,
            next_due_date=next_due_date(mortgage.payment_day, as_of),
        ),
        progress=MortgageProgress(
            principal_paid_lifetime=principal_lifetime,
            percent_principal_paid=percent_paid,
            ytd_principal=sum(bd.principal for bd in ytd_breakdowns),
            ytd_interest=sum(bd.interest for bd in ytd_breakdowns),
            ytd_escrow=sum(bd.escrow for bd in ytd_breakdowns),
            last_3mo_avg_extra_principal=extra,
        ),
        projections=MortgageProjections(
            baseline=project_payoff(mortgage.current_principal, scheduled_pi, rate, as_of),
            with_extra=project_payoff(mortgage.current_principal, scheduled_pi + extra, rate, as_of),
        ),
        per_member_ytd=member_contributions(mortgage, ytd_payments, people),
        per_member_lifetime=member_contributions(mortgage, payments, people),
    )
