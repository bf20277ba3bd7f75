from dataclasses import dataclass
from datetime import date
from enum import Enum


class PaymentMethod(Enum):
    ACH = "ach"
    CARD = "card"
    CASH = "cash"
    CHECK = "check"
    ZELLE = "zelle"
    VENMO = "venmo"
    OTHER = "other"


@dataclass(frozen=True)
class PaymentAllocation:
    person_id: str
    amount: int  # Cents


@dataclass(frozen=True)
class Payment:
    """A payment against a one-off bill.

    When allocations is None the payment is split in proportion to the
    bill's own split. When present, allocation amounts must sum to amount.
    """
    id: str
    bill_id: str
    paid_date: date
    amount: int
    method: PaymentMethod = PaymentMethod.OTHER
    payer_person_id: str | None = None
    note: str | None = None
    allocations: tuple[PaymentAllocation, ...] | None = None


@dataclass(frozen=True)
class MortgagePayment:
    id: str
    mortgage_id: str
    paid_date: date
    amount: int
    method: PaymentMethod = PaymentMethod.OTHER
    payer_person_id: str | None = None
    note: str | None = None
    allocations: tuple[PaymentAllocation, ...] | None = None


@dataclass(frozen=True)
class MortgagePaymentBreakdown:
    payment_id: str
    mortgage_id: str
    principal: int
    interest: int
    escrow: int

    @property
    def total(self) -> int:
        return self.principal + self.interest + self.escrow
