"""Pydantic models for raw persistence records.

The store speaks camelCase JSON with money in integer cents (amountCents,
memberId, dueDate, ...). Each record validates its payload and converts to
the engine's frozen dataclasses with to_domain(). Fixed-amount split
values are stored in dollars and converted to cents here.
"""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from homebills.models.obligations import (
    Bill,
    EscrowComponents,
    FinancedExpense,
    Frequency,
    Mortgage,
    RecurringBill,
    SplitEntry,
    SplitMode,
)
from homebills.models.payments import (
    MortgagePayment,
    MortgagePaymentBreakdown,
    Payment,
    PaymentAllocation,
    PaymentMethod,
)
from homebills.models.people import Person

logger = logging.getLogger(__name__)

ONE_CENT = Decimal("1")


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


def _date_part(value):
    """Accept both "YYYY-MM-DD" and full ISO timestamps."""
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    return value


def _allocations(records: list["AllocationRecord"], payment_id: str) -> tuple[PaymentAllocation, ...] | None:
    if not records:
        if records is not None:
            logger.debug("Payment %s has no allocations, splitting proportionally", payment_id)
        return None
    return tuple(a.to_domain() for a in records)


def _splits(records: list["SplitRecord"], mode: SplitMode) -> tuple[SplitEntry, ...]:
    return tuple(s.to_domain(mode) for s in records)


# ---- People ----

class MemberRecord(_Record):
    id: str
    name: str
    color: str = ""

    def to_domain(self) -> Person:
        return Person(id=self.id, name=self.name, color=self.color)


# ---- Splits and allocations ----

class SplitRecord(_Record):
    member_id: str
    value: Decimal = Field(ge=0)

    def to_domain(self, mode: SplitMode) -> SplitEntry:
        value = self.value
        if mode is SplitMode.FIXED_AMOUNT:
            # Stored in dollars; the engine splits in cents
            value = (value * 100).quantize(ONE_CENT, ROUND_HALF_UP)
        return SplitEntry(person_id=self.member_id, value=value)


class AllocationRecord(_Record):
    member_id: str
    amount_cents: int

    def to_domain(self) -> PaymentAllocation:
        return PaymentAllocation(person_id=self.member_id, amount=self.amount_cents)


# ---- Bills ----

class BillRecord(_Record):
    id: str
    name: str
    amount_cents: int
    due_date: date
    split_mode: SplitMode = SplitMode.SHARES
    splits: list[SplitRecord] = []
    recurring_bill_id: str | None = None
    period: str | None = None

    @field_validator("due_date", mode="before")
    @classmethod
    def strip_time(cls, value):
        return _date_part(value)

    def to_domain(self) -> Bill:
        return Bill(
            id=self.id,
            name=self.name,
            amount=self.amount_cents,
            due_date=self.due_date,
            split_mode=self.split_mode,
            splits=_splits(self.splits, self.split_mode),
            recurring_bill_id=self.recurring_bill_id,
            period=self.period,
        )


class RecurringBillRecord(_Record):
    id: str
    name: str
    amount_cents: int
    day_of_month: int = Field(ge=1, le=31)
    frequency: Frequency = Frequency.MONTHLY
    last_generated_period: str = ""
    split_mode: SplitMode = SplitMode.SHARES
    splits: list[SplitRecord] = []

    def to_domain(self) -> RecurringBill:
        return RecurringBill(
            id=self.id,
            name=self.name,
            amount=self.amount_cents,
            day_of_month=self.day_of_month,
            frequency=self.frequency,
            last_generated_period=self.last_generated_period,
            split_mode=self.split_mode,
            splits=_splits(self.splits, self.split_mode),
        )


class PaymentRecord(_Record):
    id: str
    bill_id: str
    paid_date: date
    amount_cents: int
    method: PaymentMethod = PaymentMethod.OTHER
    payer_member_id: str | None = None
    note: str | None = None
    allocations: list[AllocationRecord] | None = None

    @field_validator("paid_date", mode="before")
    @classmethod
    def strip_time(cls, value):
        return _date_part(value)

    def to_domain(self) -> Payment:
        return Payment(
            id=self.id,
            bill_id=self.bill_id,
            paid_date=self.paid_date,
            amount=self.amount_cents,
            method=self.method,
            payer_person_id=self.payer_member_id,
            note=self.note,
            allocations=_allocations(self.allocations, self.id),
        )


# ---- Mortgages ----

class MortgageRecord(_Record):
    id: str
    name: str
    lender: str | None = None
    is_primary: bool = False
    original_principal_cents: int
    current_principal_cents: int
    interest_rate_apy: Decimal
    term_months: int
    start_date: date
    scheduled_payment_cents: int
    payment_day: int = Field(ge=1, le=31)
    escrow_enabled: bool = False
    escrow_taxes_cents: int | None = None
    escrow_insurance_cents: int | None = None
    escrow_mip_cents: int | None = None
    escrow_hoa_cents: int | None = None
    active: bool = True
    split_mode: SplitMode = SplitMode.SHARES
    splits: list[SplitRecord] = []

    @field_validator("start_date", mode="before")
    @classmethod
    def strip_time(cls, value):
        return _date_part(value)

    def to_domain(self) -> Mortgage:
        return Mortgage(
            id=self.id,
            name=self.name,
            original_principal=self.original_principal_cents,
            current_principal=self.current_principal_cents,
            interest_rate_apy=self.interest_rate_apy,
            term_months=self.term_months,
            start_date=self.start_date,
            payment_day=self.payment_day,
            scheduled_payment=self.scheduled_payment_cents,
            escrow_enabled=self.escrow_enabled,
            escrow=EscrowComponents(
                taxes=self.escrow_taxes_cents,
                insurance=self.escrow_insurance_cents,
                mortgage_insurance=self.escrow_mip_cents,
                hoa=self.escrow_hoa_cents,
            ),
            split_mode=self.split_mode,
            splits=_splits(self.splits, self.split_mode),
            lender=self.lender,
            is_primary=self.is_primary,
            active=self.active,
        )


class MortgagePaymentRecord(_Record):
    id: str
    mortgage_id: str
    paid_date: date
    amount_cents: int
    method: PaymentMethod = PaymentMethod.OTHER
    payer_member_id: str | None = None
    note: str | None = None
    allocations: list[AllocationRecord] | None = None

    @field_validator("paid_date", mode="before")
    @classmethod
    def strip_time(cls, value):
        return _date_part(value)

    def to_domain(self) -> MortgagePayment:
        return MortgagePayment(
            id=self.id,
            mortgage_id=self.mortgage_id,
            paid_date=self.paid_date,
            amount=self.amount_cents,
            method=self.method,
            payer_person_id=self.payer_member_id,
            note=self.note,
            allocations=_allocations(self.allocations, self.id),
        )


class MortgagePaymentBreakdownRecord(_Record):
    payment_id: str
    mortgage_id: str
    principal_cents: int
    interest_cents: int
    escrow_cents: int

    def to_domain(self) -> MortgagePaymentBreakdown:
        return MortgagePaymentBreakdown(
            payment_id=self.payment_id,
            mortgage_id=self.mortgage_id,
            principal=self.principal_cents,
            interest=self.interest_cents,
            escrow=self.escrow_cents,
        )


# ---- Financed expenses ----

class FinancedExpenseRecord(_Record):
    id: str
    title: str
    description: str | None = None
    total_amount_cents: int
    monthly_payment_cents: int | None = None
    interest_rate_percent: Decimal = Decimal("0")
    financing_term_months: int
    purchase_date: date
    first_payment_date: date
    is_active: bool = True
    split_mode: SplitMode = SplitMode.SHARES
    splits: list[SplitRecord] = []

    @field_validator("purchase_date", "first_payment_date", mode="before")
    @classmethod
    def strip_time(cls, value):
        return _date_part(value)

    def to_domain(self) -> FinancedExpense:
        return FinancedExpense(
            id=self.id,
            title=self.title,
            total_amount=self.total_amount_cents,
            interest_rate_percent=self.interest_rate_percent,
            financing_term_months=self.financing_term_months,
            purchase_date=self.purchase_date,
            first_payment_date=self.first_payment_date,
            monthly_payment=self.monthly_payment_cents,
            is_active=self.is_active,
            split_mode=self.split_mode,
            splits=_splits(self.splits, self.split_mode),
            description=self.description,
        )
