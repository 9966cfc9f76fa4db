from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PercentageBasis(Enum):
    RENT = "rent"
    INCOME = "income"
    PROPERTY_VALUE = "propertyValue"


class RentScenario(Enum):
    CURRENT = "current"
    MARKET = "market"


@dataclass(frozen=True)
class PropertyInputs:
    purchase_price: Decimal
    down_payment: Decimal = Decimal("0")
    loan_term_years: int = 0
    interest_rate: Decimal = Decimal("0")  # Annual, in percent (6.5 = 6.5%)
    is_cash_purchase: bool = False

    # Descriptive, used for per-unit / per-sqft figures only
    total_units: int = 0
    property_size_sqft: int = 0

    @property
    def loan_amount(self) -> Decimal:
        return self.purchase_price - self.down_payment

    @property
    def total_investment(self) -> Decimal:
        """Cash actually invested: full price for cash deals, else the down payment."""
        if self.is_cash_purchase:
            return self.purchase_price
        return self.down_payment


@dataclass(frozen=True)
class UnitMixEntry:
    unit_type: str
    count: int
    current_rent: Decimal  # Monthly, per unit
    market_rent: Decimal  # Monthly, per unit
    square_footage: int = 0

    def rent(self, scenario: RentScenario) -> Decimal:
        if scenario is RentScenario.MARKET:
            return self.market_rent
        return self.current_rent


@dataclass(frozen=True)
class IncomeLine:
    name: str
    amount: Decimal  # Monthly
    is_calculated: bool = False  # Rental roll-up line derived from the unit mix


@dataclass(frozen=True)
class ExpenseLine:
    name: str
    amount: Decimal  # Monthly dollars, or a percent when is_percentage
    is_percentage: bool = False
    percentage_of: PercentageBasis = PercentageBasis.INCOME
