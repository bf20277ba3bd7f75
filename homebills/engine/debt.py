"""Fixed-rate amortization math.

Pure functions: cents and Decimal in, cents out. No I/O.
"""

from decimal import Decimal, ROUND_CEILING, ROUND_HALF_UP

ONE_CENT = Decimal("1")


def monthly_rate(apy_percent: Decimal) -> Decimal:
    """Periodic rate from an annual percent, e.g. 6.0 -> 0.005."""
    return Decimal(apy_percent) / 100 / 12


def monthly_payment(principal: int, apy_percent: Decimal, term_months: int) -> int:
    """Calculate the fixed monthly installment for an amortizing loan, in cents."""
    if principal <= 0 or term_months <= 0:
        return 0
    r = monthly_rate(apy_percent)
    if r <= 0:
        return int((Decimal(principal) / term_months).quantize(ONE_CENT, ROUND_HALF_UP))

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** term_months
    payment = Decimal(principal) * (r * factor) / (factor - 1)
    return int(payment.quantize(ONE_CENT, ROUND_HALF_UP))


def months_remaining(principal: int, payment: int, rate: Decimal) -> int | None:
    """Months left to retire principal at a fixed monthly payment.

    Solves n = ln(M / (M - P*r)) / ln(1 + r), rounded up to whole months.
    Returns None when the payment never amortizes the loan (M <= P*r).
    """
    if principal <= 0:
        return 0
    if payment <= 0:
        return None
    if rate <= 0:
        return int((Decimal(principal) / payment).to_integral_value(ROUND_CEILING))

    accrued = Decimal(principal) * rate
    if payment <= accrued:
        return None

    m = Decimal(payment)
    n = (m / (m - accrued)).ln() / (1 + rate).ln()
    return int(n.to_integral_value(ROUND_CEILING))
