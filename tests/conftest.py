"""Canonical test fixtures used across all engine tests.

Household: three members, two of whom split the mortgage evenly.
Mortgage: $320K original, $300K current, 6% APY, $2,500 PITI with $400 escrow,
due on the 1st, started 2024-11-20.
"""

import pytest
from datetime import date
from decimal import Decimal

from homebills.models.obligations import (
    Bill,
    EscrowComponents,
    Mortgage,
    SplitEntry,
    SplitMode,
)
from homebills.models.people import Person


@pytest.fixture
def people() -> list[Person]:
    return [
        Person(id="p1", name="Alex", color="bg-blue-500"),
        Person(id="p2", name="Beth", color="bg-pink-500"),
        Person(id="p3", name="Casey", color="bg-green-500"),
    ]


@pytest.fixture
def even_split() -> tuple[SplitEntry, ...]:
    return (
        SplitEntry(person_id="p1", value=Decimal("1")),
        SplitEntry(person_id="p2", value=Decimal("1")),
    )


@pytest.fixture
def electric_bill(even_split) -> Bill:
    """$100.00 bill due 2025-03-15, split evenly between Alex and Beth."""
    return Bill(
        id="bill-1",
        name="Electric",
        amount=10000,
        due_date=date(2025, 3, 15),
        split_mode=SplitMode.SHARES,
        splits=even_split,
    )


@pytest.fixture
def canonical_mortgage(even_split) -> Mortgage:
    return Mortgage(
        id="mtg-1",
        name="Home",
        original_principal=32000000,
        current_principal=30000000,
        interest_rate_apy=Decimal("6"),
        term_months=360,
        start_date=date(2024, 11, 20),
        payment_day=1,
        scheduled_payment=250000,
        escrow_enabled=True,
        escrow=EscrowComponents(taxes=30000, insurance=10000),
        split_mode=SplitMode.SHARES,
        splits=even_split,
    )


@pytest.fixture
def zero_rate_mortgage(even_split) -> Mortgage:
    """Interest-free family loan: $1,100 payment including $100 escrow."""
    return Mortgage(
        id="mtg-0",
        name="Family loan",
        original_principal=12000000,
        current_principal=10000000,
        interest_rate_apy=Decimal("0"),
        term_months=120,
        start_date=date(2020, 1, 1),
        payment_day=1,
        scheduled_payment=110000,
        escrow_enabled=True,
        escrow=EscrowComponents(taxes=10000),
        split_mode=SplitMode.SHARES,
        splits=even_split,
    )
