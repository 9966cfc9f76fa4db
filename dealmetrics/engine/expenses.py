"""Operating expense resolution.

Pure functions: Decimal in, Decimal out. No I/O.

Percentage expenses are resolved against one of three bases. The rent and
income bases follow whichever rent scenario is being computed, so callers
run the resolver once per scenario. Debt service is never an expense.
"""

from decimal import Decimal

from dealmetrics.models.property import (
    ExpenseLine,
    IncomeLine,
    PercentageBasis,
    PropertyInputs,
    RentScenario,
    UnitMixEntry,
)
from dealmetrics.models.results import ExpenseBreakdownLine
from dealmetrics.engine.income import gross_rental_income, total_gross_income

HUNDRED = Decimal("100")


def resolve_expense(
    expense: ExpenseLine,
    purchase_price: Decimal,
    rental_income: Decimal,
    gross_income: Decimal,
) -> Decimal:
    """Monthly dollar amount of a single expense line.

    Args:
        expense: The line item
        purchase_price: Basis for propertyValue percentages (annual, spread over 12 months)
        rental_income: Monthly rent roll, basis for rent percentages
        gross_income: Monthly rent roll plus other income, basis for income percentages
    """
    if not expense.is_percentage:
        return expense.amount

    pct = expense.amount / HUNDRED
    if expense.percentage_of is PercentageBasis.PROPERTY_VALUE:
        return purchase_price * pct / 12
    if expense.percentage_of is PercentageBasis.RENT:
        return rental_income * pct
    return gross_income * pct


def total_expenses(
    expenses: list[ExpenseLine],
    purchase_price: Decimal,
    rental_income: Decimal,
    gross_income: Decimal,
) -> Decimal:
    """Sum of monthly expense amounts for one scenario."""
    return sum(
        (resolve_expense(e, purchase_price, rental_income, gross_income) for e in expenses),
        Decimal("0"),
    )


def expense_breakdown(
    expenses: list[ExpenseLine],
    prop: PropertyInputs,
    unit_mix: list[UnitMixEntry],
    income: list[IncomeLine],
) -> list[ExpenseBreakdownLine]:
    """Per-line monthly amounts under current and market rents."""
    current_rent = gross_rental_income(unit_mix, RentScenario.CURRENT)
    market_rent = gross_rental_income(unit_mix, RentScenario.MARKET)
    current_gross = total_gross_income(unit_mix, income, RentScenario.CURRENT)
    market_gross = total_gross_income(unit_mix, income, RentScenario.MARKET)

    return [
        ExpenseBreakdownLine(
            name=e.name,
            current_amount=resolve_expense(e, prop.purchase_price, current_rent, current_gross),
            market_amount=resolve_expense(e, prop.purchase_price, market_rent, market_gross),
        )
        for e in expenses
    ]
