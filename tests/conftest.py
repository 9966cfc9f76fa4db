"""Canonical test fixtures used across engine and API tests.

Fixture: $1M ten-unit building, $200K down, 6.5% rate, 30yr fixed.
Rents: $1,200 in place, $1,400 market. 8% of rent for management.
"""

import pytest
from decimal import Decimal

from dealmetrics.models.property import (
    ExpenseLine,
    IncomeLine,
    PercentageBasis,
    PropertyInputs,
    UnitMixEntry,
)


@pytest.fixture
def canonical_property() -> PropertyInputs:
    return PropertyInputs(
        purchase_price=Decimal("1000000"),
        down_payment=Decimal("200000"),
        loan_term_years=30,
        interest_rate=Decimal("6.5"),
        is_cash_purchase=False,
        total_units=10,
        property_size_sqft=8000,
    )


@pytest.fixture
def cash_property() -> PropertyInputs:
    """Same building bought outright; financing fields deliberately left stale."""
    return PropertyInputs(
        purchase_price=Decimal("1000000"),
        down_payment=Decimal("200000"),
        loan_term_years=30,
        interest_rate=Decimal("6.5"),
        is_cash_purchase=True,
        total_units=10,
    )


@pytest.fixture
def canonical_unit_mix() -> list[UnitMixEntry]:
    return [
        UnitMixEntry(
            unit_type="1bd1bth",
            count=10,
            current_rent=Decimal("1200"),
            market_rent=Decimal("1400"),
        ),
    ]


@pytest.fixture
def canonical_expenses() -> list[ExpenseLine]:
    return [
        ExpenseLine(
            name="Property Management",
            amount=Decimal("8"),
            is_percentage=True,
            percentage_of=PercentageBasis.RENT,
        ),
    ]


@pytest.fixture
def mixed_income() -> list[IncomeLine]:
    """A rental roll-up line (must be ignored) plus flat other income."""
    return [
        IncomeLine("Rental Income", Decimal("12000"), is_calculated=True),
        IncomeLine("Parking Income", Decimal("300")),
        IncomeLine("Laundry Income", Decimal("200")),
    ]


@pytest.fixture
def mixed_expenses() -> list[ExpenseLine]:
    """One of each expense flavor."""
    return [
        ExpenseLine("Insurance", Decimal("500")),
        ExpenseLine("Property Management", Decimal("8"), True, PercentageBasis.RENT),
        ExpenseLine("Repairs & Maintenance", Decimal("5"), True, PercentageBasis.INCOME),
        ExpenseLine("Property Taxes", Decimal("1.2"), True, PercentageBasis.PROPERTY_VALUE),
    ]
