"""Approximate principal/interest/escrow split of a single mortgage payment.

The balance at the time of a payment is estimated by adding every later
payment back onto the current principal. This is a heuristic, not a ledger:
out-of-order entry or a recast will shift interest and principal between
payments.
"""

from decimal import Decimal, ROUND_FLOOR
from typing import Sequence

from homebills.engine.debt import monthly_rate
from homebills.models.obligations import Mortgage
from homebills.models.payments import MortgagePayment, MortgagePaymentBreakdown


def balance_at_payment(
    payment: MortgagePayment,
    mortgage: Mortgage,
    all_payments: Sequence[MortgagePayment],
) -> int:
    later = sum(
        p.amount for p in all_payments
        if p.mortgage_id == mortgage.id and p.paid_date > payment.paid_date
    )
    return mortgage.current_principal + later


def estimate_breakdown(
    payment: MortgagePayment,
    mortgage: Mortgage,
    all_payments: Sequence[MortgagePayment],
) -> MortgagePaymentBreakdown:
    """Consume the payment as interest, then escrow, then principal."""
    balance = balance_at_payment(payment, mortgage, all_payments)
    interest_due = int(
        (Decimal(balance) * monthly_rate(mortgage.interest_rate_apy)).to_integral_value(ROUND_FLOOR)
    )

    remaining = payment.amount
    interest = min(remaining, interest_due)
    remaining -= interest
    escrow = min(remaining, mortgage.escrow_monthly)
    remaining -= escrow

    return MortgagePaymentBreakdown(
        payment_id=payment.id,
        mortgage_id=mortgage.id,
        principal=remaining,
        interest=interest,
        escrow=escrow,
    )
