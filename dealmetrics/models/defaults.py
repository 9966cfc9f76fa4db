"""Default values offered by the analysis form.

These are form defaults, not calculator inputs: the engine only ever sees
what the caller passes it.
"""

from dataclasses import dataclass
from decimal import Decimal

from dealmetrics.models.property import ExpenseLine, IncomeLine, PercentageBasis

DEFAULT_EXPENSES: tuple[ExpenseLine, ...] = (
    ExpenseLine("Property Taxes", Decimal("0")),
    ExpenseLine("Insurance", Decimal("0")),
    ExpenseLine("Utilities", Decimal("0")),
    ExpenseLine("Repairs & Maintenance", Decimal("5"), True, PercentageBasis.INCOME),
    ExpenseLine("Property Management", Decimal("8"), True, PercentageBasis.INCOME),
    ExpenseLine("Vacancy Reserve", Decimal("5"), True, PercentageBasis.INCOME),
    ExpenseLine("Capital Expenditures", Decimal("5"), True, PercentageBasis.INCOME),
)

DEFAULT_INCOME: tuple[IncomeLine, ...] = (
    IncomeLine("Rental Income", Decimal("0"), is_calculated=True),
    IncomeLine("Parking Income", Decimal("0")),
    IncomeLine("Laundry Income", Decimal("0")),
    IncomeLine("Storage Income", Decimal("0")),
    IncomeLine("Other Income", Decimal("0")),
)


@dataclass(frozen=True)
class FinancingTerms:
    down_payment: Decimal
    loan_term_years: int
    interest_rate: Decimal


@dataclass(frozen=True)
class FormDefaults:
    expenses: tuple[ExpenseLine, ...] = DEFAULT_EXPENSES
    income: tuple[IncomeLine, ...] = DEFAULT_INCOME
    down_payment_pct: Decimal = Decimal("0.20")
    loan_term_years: int = 30
    interest_rate: Decimal = Decimal("6.5")

    def financing_terms(self, purchase_price: Decimal, is_cash_purchase: bool) -> FinancingTerms:
        """Terms the form switches to when the cash/financed toggle changes."""
        if is_cash_purchase:
            return FinancingTerms(
                down_payment=purchase_price,
                loan_term_years=0,
                interest_rate=Decimal("0"),
            )
        return FinancingTerms(
            down_payment=purchase_price * self.down_payment_pct,
            loan_term_years=self.loan_term_years,
            interest_rate=self.interest_rate,
        )


FORM_DEFAULTS = FormDefaults()
