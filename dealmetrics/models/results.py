from dataclasses import dataclass, field
from decimal import Decimal


@dataclass
class KeyMetrics:
    cap_rate: Decimal = Decimal("0")
    cash_on_cash_return: Decimal = Decimal("0")
    net_operating_income: Decimal = Decimal("0")  # Annual
    gross_rent_multiplier: Decimal = Decimal("0")
    debt_service_coverage_ratio: Decimal = Decimal("0")  # Infinity when there is no debt
    total_investment: Decimal = Decimal("0")
    annual_cash_flow: Decimal = Decimal("0")


@dataclass
class MonthlyBreakdown:
    gross_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    net_operating_income: Decimal = Decimal("0")
    mortgage_payment: Decimal = Decimal("0")
    cash_flow: Decimal = Decimal("0")


@dataclass
class AnnualBreakdown:
    gross_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    net_operating_income: Decimal = Decimal("0")
    debt_service: Decimal = Decimal("0")
    cash_flow: Decimal = Decimal("0")


@dataclass
class MetricsResult:
    key_metrics: KeyMetrics = field(default_factory=KeyMetrics)
    monthly_breakdown: MonthlyBreakdown = field(default_factory=MonthlyBreakdown)
    annual_breakdown: AnnualBreakdown = field(default_factory=AnnualBreakdown)


@dataclass
class ScenarioComparison:
    """Current-rent vs market-rent metrics and their difference."""

    current: MetricsResult = field(default_factory=MetricsResult)
    market: MetricsResult = field(default_factory=MetricsResult)
    upside: MetricsResult = field(default_factory=MetricsResult)


@dataclass
class ExpenseBreakdownLine:
    name: str
    current_amount: Decimal = Decimal("0")  # Monthly
    market_amount: Decimal = Decimal("0")  # Monthly


@dataclass
class UnitTypeIncome:
    unit_type: str
    units: int = 0
    monthly_current: Decimal = Decimal("0")
    monthly_market: Decimal = Decimal("0")


@dataclass
class UnitRentGap:
    unit_type: str
    count: int
    current_rent: Decimal
    market_rent: Decimal
    gap_per_unit: Decimal = Decimal("0")
    gap_pct: Decimal = Decimal("0")
    total_gap: Decimal = Decimal("0")  # Monthly, all units of the entry


@dataclass
class MarketAnalysis:
    current_gross_income: Decimal = Decimal("0")  # Monthly
    market_gross_income: Decimal = Decimal("0")  # Monthly
    potential_increase: Decimal = Decimal("0")  # Monthly
    upside_pct: Decimal = Decimal("0")
    current_to_market_ratio: Decimal = Decimal("0")
    unit_gaps: list[UnitRentGap] = field(default_factory=list)


@dataclass
class FinancingSummary:
    loan_amount: Decimal = Decimal("0")
    down_payment: Decimal = Decimal("0")
    down_payment_pct: Decimal = Decimal("0")
    loan_to_value: Decimal = Decimal("0")
    interest_rate: Decimal = Decimal("0")  # Percent, as entered
    loan_term_years: int = 0
    monthly_payment: Decimal = Decimal("0")
    total_payments: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")
    first_year_principal: Decimal = Decimal("0")
    first_year_interest: Decimal = Decimal("0")


@dataclass
class ReturnProjection:
    roi: Decimal = Decimal("0")  # Year-1 ROI, same as cash-on-cash
    payback_period_years: Decimal = Decimal("0")
    years: int = 5
    projected_cash_flow: Decimal = Decimal("0")
    projected_roi: Decimal = Decimal("0")


@dataclass
class AnalysisReport:
    scenarios: ScenarioComparison = field(default_factory=ScenarioComparison)
    financing: FinancingSummary = field(default_factory=FinancingSummary)
    expense_breakdown: list[ExpenseBreakdownLine] = field(default_factory=list)
    income_by_unit_type: list[UnitTypeIncome] = field(default_factory=list)
    market_analysis: MarketAnalysis = field(default_factory=MarketAnalysis)
    current_returns: ReturnProjection = field(default_factory=ReturnProjection)
    market_returns: ReturnProjection = field(default_factory=ReturnProjection)

    # Property summary
    other_income: Decimal = Decimal("0")  # Monthly
    price_per_unit: Decimal = Decimal("0")
    price_per_sqft: Decimal = Decimal("0")
    allocated_units: int = 0
