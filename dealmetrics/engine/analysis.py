"""Analysis orchestrator: composes the engine sub-modules.

Pure computation. No I/O. Dataclasses in, ScenarioComparison / AnalysisReport out.
"""

import logging
from decimal import Decimal

from dealmetrics.models.property import (
    ExpenseLine,
    IncomeLine,
    PropertyInputs,
    RentScenario,
    UnitMixEntry,
)
from dealmetrics.models.results import AnalysisReport, MetricsResult, ScenarioComparison

from dealmetrics.engine.normalize import normalize_property
from dealmetrics.engine.income import (
    gross_rental_income,
    other_income,
    rental_income_by_unit_type,
)
from dealmetrics.engine.expenses import expense_breakdown, total_expenses
from dealmetrics.engine.debt import financing_summary, monthly_payment
from dealmetrics.engine.metrics import compose_metrics, upside
from dealmetrics.engine.market import market_analysis
from dealmetrics.engine.returns import return_projection

logger = logging.getLogger(__name__)


def _scenario_metrics(
    prop: PropertyInputs,
    unit_mix: list[UnitMixEntry],
    income: list[IncomeLine],
    expenses: list[ExpenseLine],
    debt_service: Decimal,
    scenario: RentScenario,
) -> MetricsResult:
    rental = gross_rental_income(unit_mix, scenario)
    gross = rental + other_income(income)
    opex = total_expenses(expenses, prop.purchase_price, rental, gross)
    return compose_metrics(
        gross_income=gross,
        total_expenses=opex,
        debt_service=debt_service,
        purchase_price=prop.purchase_price,
        total_investment=prop.total_investment,
        is_cash_purchase=prop.is_cash_purchase,
    )


def compute_metrics(
    prop: PropertyInputs,
    unit_mix: list[UnitMixEntry],
    income: list[IncomeLine],
    expenses: list[ExpenseLine],
) -> ScenarioComparison:
    """Current-rent and market-rent metrics plus the upside between them.

    Financing does not depend on rents, so both scenarios share one
    debt service figure.
    """
    prop = normalize_property(prop)
    debt_service = monthly_payment(prop.loan_amount, prop.interest_rate, prop.loan_term_years)

    current = _scenario_metrics(
        prop, unit_mix, income, expenses, debt_service, RentScenario.CURRENT
    )
    market = _scenario_metrics(
        prop, unit_mix, income, expenses, debt_service, RentScenario.MARKET
    )
    return ScenarioComparison(current=current, market=market, upside=upside(market, current))


def price_per_unit(purchase_price: Decimal, total_units: int) -> Decimal:
    if total_units <= 0:
        return Decimal("0")
    return purchase_price / total_units


def price_per_sqft(purchase_price: Decimal, sqft: int) -> Decimal:
    if sqft <= 0:
        return Decimal("0")
    return purchase_price / sqft


def allocated_units(unit_mix: list[UnitMixEntry]) -> int:
    return sum(u.count for u in unit_mix)


def unallocated_units(total_units: int, unit_mix: list[UnitMixEntry]) -> int:
    """Units still available for the unit mix. Negative when over-allocated."""
    return total_units - allocated_units(unit_mix)


def run_analysis(
    prop: PropertyInputs,
    unit_mix: list[UnitMixEntry],
    income: list[IncomeLine],
    expenses: list[ExpenseLine],
    projection_years: int = 5,
) -> AnalysisReport:
    """Run the full deal analysis behind the results view and PDF report.

    Takes raw form input; compute_metrics and financing_summary normalize
    cash purchases themselves.
    """
    scenarios = compute_metrics(prop, unit_mix, income, expenses)

    logger.debug(
        "Analysis: price=%s units=%d cash=%s current_noi=%s market_noi=%s",
        prop.purchase_price,
        allocated_units(unit_mix),
        prop.is_cash_purchase,
        scenarios.current.key_metrics.net_operating_income,
        scenarios.market.key_metrics.net_operating_income,
    )

    return AnalysisReport(
        scenarios=scenarios,
        financing=financing_summary(prop),
        expense_breakdown=expense_breakdown(expenses, prop, unit_mix, income),
        income_by_unit_type=rental_income_by_unit_type(unit_mix),
        market_analysis=market_analysis(unit_mix, income),
        current_returns=return_projection(scenarios.current, projection_years),
        market_returns=return_projection(scenarios.market, projection_years),
        other_income=other_income(income),
        price_per_unit=price_per_unit(prop.purchase_price, prop.total_units),
        price_per_sqft=price_per_sqft(prop.purchase_price, prop.property_size_sqft),
        allocated_units=allocated_units(unit_mix),
    )
