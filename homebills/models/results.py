from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class BillStatus(Enum):
    PAID = "Paid"
    PARTIALLY_PAID = "Partially Paid"
    UNPAID = "Unpaid"
    OVERDUE = "Overdue"
    UPCOMING = "Upcoming"


@dataclass(frozen=True)
class SplitAmount:
    person_id: str
    amount: int  # Cents


@dataclass(frozen=True)
class PersonCycleStatus:
    person_id: str
    owed: int
    paid: int
    remaining: int


@dataclass(frozen=True)
class ItemCycle:
    """Resolved billing cycle for one bill or mortgage as of a reference date.

    cycle_start and cycle_end are inclusive calendar dates.
    """
    status: BillStatus
    total_paid: int
    total_remaining: int
    per_person: tuple[PersonCycleStatus, ...]
    cycle_start: date
    cycle_end: date
    due_date: date
    first_due_date: date | None = None  # Mortgages only
    is_upcoming: bool = False

    def for_person(self, person_id: str) -> PersonCycleStatus | None:
        for p in self.per_person:
            if p.person_id == person_id:
                return p
        return None


@dataclass(frozen=True)
class MortgageSummary:
    id: str
    name: str
    interest_rate_apy: Decimal
    term_months: int
    original_principal: int
    current_principal: int
    scheduled_payment: int
    escrow_monthly: int
    next_due_date: date


@dataclass(frozen=True)
class MortgageProgress:
    principal_paid_lifetime: int
    percent_principal_paid: Decimal
    ytd_principal: int
    ytd_interest: int
    ytd_escrow: int
    last_3mo_avg_extra_principal: int


@dataclass(frozen=True)
class PayoffProjection:
    """Remaining term at a given monthly principal-and-interest payment.

    months_remaining and payoff_date are None when the payment does not
    cover the interest accrued in a period.
    """
    monthly_payment: int
    months_remaining: int | None
    payoff_date: date | None
    insufficient_payment: bool = False


@dataclass(frozen=True)
class MortgageProjections:
    baseline: PayoffProjection
    with_extra: PayoffProjection

    @property
    def insufficient_payment(self) -> bool:
        return self.baseline.insufficient_payment


@dataclass(frozen=True)
class MemberContribution:
    person_id: str
    name: str
    total: int


@dataclass(frozen=True)
class MortgageStats:
    mortgage: MortgageSummary
    progress: MortgageProgress
    projections: MortgageProjections
    per_member_ytd: tuple[MemberContribution, ...] = ()
    per_member_lifetime: tuple[MemberContribution, ...] = ()


@dataclass
class HouseholdSummary:
    mortgages_total: int = 0
    recurring_bills_total: int = 0
    bills_total: int = 0
    financed_expenses_total: int = 0
    per_person: dict[str, int] = field(default_factory=dict)
    due_soon: list[str] = field(default_factory=list)  # Bill ids

    @property
    def total_monthly(self) -> int:
        return (
            self.mortgages_total
            + self.recurring_bills_total
            + self.bills_total
            + self.financed_expenses_total
        )
