"""Splittable obligations: one-off bills, recurring bill templates, mortgages,
and financed expenses.

All money fields are integer cents. Rates are Decimal percents (6.25 = 6.25%).
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Protocol

from homebills.engine import debt


class SplitMode(Enum):
    FIXED_AMOUNT = "amount"
    PERCENT = "percent"
    SHARES = "shares"


class Frequency(Enum):
    MONTHLY = "monthly"
    BI_MONTHLY = "bi-monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUALLY = "semi-annually"
    YEARLY = "yearly"


@dataclass(frozen=True)
class SplitEntry:
    person_id: str
    # Cents for FIXED_AMOUNT, a percentage for PERCENT, a share count for SHARES
    value: Decimal


class Splittable(Protocol):
    @property
    def amount(self) -> int: ...

    @property
    def split_mode(self) -> SplitMode: ...

    @property
    def splits(self) -> tuple[SplitEntry, ...]: ...


@dataclass(frozen=True)
class ScheduledAmount:
    """A bare splittable: an amount with the split configuration of its owner."""
    amount: int
    split_mode: SplitMode
    splits: tuple[SplitEntry, ...] = ()


@dataclass(frozen=True)
class Bill:
    id: str
    name: str
    amount: int
    due_date: date
    split_mode: SplitMode = SplitMode.SHARES
    splits: tuple[SplitEntry, ...] = ()
    recurring_bill_id: str | None = None
    period: str | None = None  # "YYYY-MM" when generated from a template


@dataclass(frozen=True)
class RecurringBill:
    id: str
    name: str
    amount: int
    day_of_month: int
    frequency: Frequency = Frequency.MONTHLY
    last_generated_period: str = ""
    split_mode: SplitMode = SplitMode.SHARES
    splits: tuple[SplitEntry, ...] = ()


@dataclass(frozen=True)
class EscrowComponents:
    """Monthly escrow charges bundled into the scheduled payment."""
    taxes: int | None = None
    insurance: int | None = None
    mortgage_insurance: int | None = None  # PMI / MIP
    hoa: int | None = None

    @property
    def total(self) -> int:
        return sum(c or 0 for c in (self.taxes, self.insurance, self.mortgage_insurance, self.hoa))


@dataclass(frozen=True)
class Mortgage:
    id: str
    name: str
    original_principal: int
    current_principal: int
    interest_rate_apy: Decimal  # e.g. Decimal("6.25")
    term_months: int
    start_date: date
    payment_day: int  # 1-31, clamped per month
    scheduled_payment: int  # Full PITI
    escrow_enabled: bool = False
    escrow: EscrowComponents = field(default_factory=EscrowComponents)
    split_mode: SplitMode = SplitMode.SHARES
    splits: tuple[SplitEntry, ...] = ()
    lender: str | None = None
    is_primary: bool = False
    active: bool = True

    @property
    def escrow_monthly(self) -> int:
        return self.escrow.total if self.escrow_enabled else 0

    @property
    def scheduled_principal_and_interest(self) -> int:
        return self.scheduled_payment - self.escrow_monthly

    @property
    def amount(self) -> int:
        """The splittable amount of a mortgage is one scheduled payment."""
        return self.scheduled_payment


@dataclass(frozen=True)
class FinancedExpense:
    id: str
    title: str
    total_amount: int
    interest_rate_percent: Decimal
    financing_term_months: int
    purchase_date: date
    first_payment_date: date
    monthly_payment: int | None = None  # Stored installment; derived when None
    is_active: bool = True
    split_mode: SplitMode = SplitMode.SHARES
    splits: tuple[SplitEntry, ...] = ()
    description: str | None = None

    @property
    def amount(self) -> int:
        """Monthly installment, the amount split between members each month."""
        if self.monthly_payment is not None:
            return self.monthly_payment
        return debt.monthly_payment(
            self.total_amount, self.interest_rate_percent, self.financing_term_months
        )
