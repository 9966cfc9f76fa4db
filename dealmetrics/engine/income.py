"""Monthly income aggregation from the unit mix and other income lines.

Pure functions: Decimal in, Decimal out. No I/O. Annualization happens in
the metrics composer.
"""

from decimal import Decimal

from dealmetrics.models.property import IncomeLine, RentScenario, UnitMixEntry
from dealmetrics.models.results import UnitTypeIncome


def gross_rental_income(
    unit_mix: list[UnitMixEntry], scenario: RentScenario = RentScenario.CURRENT
) -> Decimal:
    """Monthly rent roll for the given scenario: sum of rent * unit count."""
    return sum(
        (unit.rent(scenario) * unit.count for unit in unit_mix),
        Decimal("0"),
    )


def other_income(income: list[IncomeLine]) -> Decimal:
    """Flat monthly income, excluding calculated rental roll-up lines."""
    return sum(
        (line.amount for line in income if not line.is_calculated),
        Decimal("0"),
    )


def total_gross_income(
    unit_mix: list[UnitMixEntry],
    income: list[IncomeLine],
    scenario: RentScenario = RentScenario.CURRENT,
) -> Decimal:
    return gross_rental_income(unit_mix, scenario) + other_income(income)


def rental_income_by_unit_type(unit_mix: list[UnitMixEntry]) -> list[UnitTypeIncome]:
    """Group unit mix entries sharing a label, in first-seen order."""
    grouped: dict[str, UnitTypeIncome] = {}
    for unit in unit_mix:
        row = grouped.setdefault(unit.unit_type, UnitTypeIncome(unit_type=unit.unit_type))
        row.units += unit.count
        row.monthly_current += unit.current_rent * unit.count
        row.monthly_market += unit.market_rent * unit.count
    return list(grouped.values())
