from dataclasses import replace
from datetime import date
from decimal import Decimal

from homebills.engine.summary import summarize_month
from homebills.models.obligations import (
    FinancedExpense,
    Frequency,
    RecurringBill,
    SplitEntry,
    SplitMode,
)

BETH_ONLY = (SplitEntry(person_id="p2", value=Decimal("1")),)


def _internet(frequency=Frequency.MONTHLY, amount=5000):
    return RecurringBill(
        id=f"rb-{frequency.value}",
        name="Internet",
        amount=amount,
        day_of_month=5,
        frequency=frequency,
        split_mode=SplitMode.FIXED_AMOUNT,
        splits=(SplitEntry(person_id="p1", value=Decimal(amount)),),
    )


def _laptop(**overrides):
    fields = dict(
        id="fe-1",
        title="Laptop",
        total_amount=120000,
        interest_rate_percent=Decimal("0"),
        financing_term_months=12,
        purchase_date=date(2025, 1, 5),
        first_payment_date=date(2025, 2, 5),
        splits=BETH_ONLY,
    )
    fields.update(overrides)
    return FinancedExpense(**fields)


class TestFinancedExpenseAmount:
    def test_derived_from_terms(self):
        assert _laptop().amount == 10000

    def test_with_interest(self):
        """$1,200 at 12% APR over 12 months."""
        assert _laptop(interest_rate_percent=Decimal("12")).amount == 10662

    def test_stored_installment_wins(self):
        assert _laptop(monthly_payment=9999).amount == 9999


class TestSummarizeMonth:
    def test_category_totals(self, people, electric_bill, canonical_mortgage):
        summary = summarize_month(
            people,
            bills=[electric_bill],
            recurring_bills=[_internet()],
            mortgages=[canonical_mortgage],
            financed_expenses=[_laptop()],
        )
        assert summary.mortgages_total == 250000
        assert summary.recurring_bills_total == 5000
        assert summary.bills_total == 10000
        assert summary.financed_expenses_total == 10000
        assert summary.total_monthly == 275000

    def test_per_person_totals(self, people, electric_bill, canonical_mortgage):
        summary = summarize_month(
            people,
            bills=[electric_bill],
            recurring_bills=[_internet()],
            mortgages=[canonical_mortgage],
            financed_expenses=[_laptop()],
        )
        assert summary.per_person == {"p1": 135000, "p2": 140000, "p3": 0}
        assert sum(summary.per_person.values()) == summary.total_monthly

    def test_excludes_inactive_and_non_monthly(self, people, canonical_mortgage):
        summary = summarize_month(
            people,
            recurring_bills=[_internet(Frequency.YEARLY, amount=120000)],
            mortgages=[replace(canonical_mortgage, active=False)],
            financed_expenses=[_laptop(is_active=False)],
        )
        assert summary.total_monthly == 0
        assert summary.per_person == {"p1": 0, "p2": 0, "p3": 0}

    def test_due_soon(self, people, electric_bill):
        bills = [
            replace(electric_bill, id="late", due_date=date(2025, 3, 30)),
            replace(electric_bill, id="soon", due_date=date(2025, 3, 12)),
            replace(electric_bill, id="past", due_date=date(2025, 3, 1)),
            replace(electric_bill, id="today", due_date=date(2025, 3, 10)),
        ]
        summary = summarize_month(people, bills=bills, as_of=date(2025, 3, 10))
        assert summary.due_soon == ["today", "soon"]

    def test_no_due_soon_without_reference_date(self, people, electric_bill):
        assert summarize_month(people, bills=[electric_bill]).due_soon == []
