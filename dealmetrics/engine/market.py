"""Market rent analysis: how far in-place rents sit below market."""

from decimal import Decimal

from dealmetrics.models.property import IncomeLine, RentScenario, UnitMixEntry
from dealmetrics.models.results import MarketAnalysis, UnitRentGap
from dealmetrics.engine.income import total_gross_income


def unit_rent_gap(unit: UnitMixEntry) -> UnitRentGap:
    gap = unit.market_rent - unit.current_rent
    return UnitRentGap(
        unit_type=unit.unit_type,
        count=unit.count,
        current_rent=unit.current_rent,
        market_rent=unit.market_rent,
        gap_per_unit=gap,
        gap_pct=gap / unit.current_rent if unit.current_rent != 0 else Decimal("0"),
        total_gap=gap * unit.count,
    )


def market_analysis(unit_mix: list[UnitMixEntry], income: list[IncomeLine]) -> MarketAnalysis:
    """Monthly income upside from moving every unit to market rent."""
    current = total_gross_income(unit_mix, income, RentScenario.CURRENT)
    market = total_gross_income(unit_mix, income, RentScenario.MARKET)
    increase = market - current

    return MarketAnalysis(
        current_gross_income=current,
        market_gross_income=market,
        potential_increase=increase,
        upside_pct=increase / current if current != 0 else Decimal("0"),
        current_to_market_ratio=current / market if market != 0 else Decimal("0"),
        unit_gaps=[unit_rent_gap(u) for u in unit_mix],
    )
