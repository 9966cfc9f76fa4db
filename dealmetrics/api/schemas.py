"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, model_validator


# ---- Request schemas ----

class PropertyRequest(BaseModel):
    purchase_price: Decimal = Field(..., ge=0)
    down_payment: Decimal = Field(Decimal("0"), ge=0)
    loan_term_years: int = Field(0, ge=0, le=50)
    interest_rate: Decimal = Field(Decimal("0"), ge=0, le=100, description="Annual rate in percent")
    is_cash_purchase: bool = False

    total_units: int = Field(0, ge=0)
    property_size_sqft: int = Field(0, ge=0)


class UnitMixRequest(BaseModel):
    unit_type: str
    count: int = Field(..., ge=1)
    current_rent: Decimal = Field(..., ge=0)
    market_rent: Decimal = Field(..., ge=0)
    square_footage: int = Field(0, ge=0)


class IncomeLineRequest(BaseModel):
    name: str
    amount: Decimal = Field(..., ge=0)
    is_calculated: bool = False


class ExpenseLineRequest(BaseModel):
    name: str
    amount: Decimal = Field(..., ge=0)
    is_percentage: bool = False
    percentage_of: Literal["rent", "income", "propertyValue"] = "income"

    @model_validator(mode="after")
    def check_percentage_range(self):
        if self.is_percentage and self.amount > 100:
            raise ValueError(f"{self.name}: percentage must be between 0 and 100")
        return self


class AnalyzeRequest(BaseModel):
    property: PropertyRequest
    unit_mix: list[UnitMixRequest] = []
    income: list[IncomeLineRequest] = []
    expenses: list[ExpenseLineRequest] = []
    projection_years: int | None = Field(None, ge=1, le=30)


class AmortizationRequest(BaseModel):
    principal: Decimal = Field(..., ge=0)
    interest_rate: Decimal = Field(..., ge=0, le=100, description="Annual rate in percent")
    loan_term_years: int = Field(..., ge=1, le=50)
    hold_years: int | None = Field(None, ge=1, le=50)
    yearly: bool = False


class CommissionRequest(BaseModel):
    price: Decimal = Field(..., ge=0)
    commission_percent: Decimal | None = Field(None, ge=0, le=100)
    commission_amount: Decimal | None = Field(None, ge=0)


# ---- Response schemas ----

class KeyMetricsResponse(BaseModel):
    cap_rate: Decimal
    cash_on_cash_return: Decimal
    net_operating_income: Decimal
    gross_rent_multiplier: Decimal
    debt_service_coverage_ratio: Decimal | None = Field(
        None, description="Null when there is no debt service (infinite coverage)"
    )
    total_investment: Decimal
    annual_cash_flow: Decimal


class MonthlyBreakdownResponse(BaseModel):
    gross_income: Decimal
    total_expenses: Decimal
    net_operating_income: Decimal
    mortgage_payment: Decimal
    cash_flow: Decimal


class AnnualBreakdownResponse(BaseModel):
    gross_income: Decimal
    total_expenses: Decimal
    net_operating_income: Decimal
    debt_service: Decimal
    cash_flow: Decimal


class MetricsResponse(BaseModel):
    key_metrics: KeyMetricsResponse
    monthly_breakdown: MonthlyBreakdownResponse
    annual_breakdown: AnnualBreakdownResponse


class ScenarioComparisonResponse(BaseModel):
    current: MetricsResponse
    market: MetricsResponse
    upside: MetricsResponse


class FinancingResponse(BaseModel):
    loan_amount: Decimal
    down_payment: Decimal
    down_payment_pct: Decimal
    loan_to_value: Decimal
    interest_rate: Decimal
    loan_term_years: int
    monthly_payment: Decimal
    total_payments: Decimal
    total_interest: Decimal
    first_year_principal: Decimal
    first_year_interest: Decimal


class ExpenseBreakdownResponse(BaseModel):
    name: str
    current_amount: Decimal
    market_amount: Decimal


class UnitTypeIncomeResponse(BaseModel):
    unit_type: str
    units: int
    monthly_current: Decimal
    monthly_market: Decimal


class UnitRentGapResponse(BaseModel):
    unit_type: str
    count: int
    current_rent: Decimal
    market_rent: Decimal
    gap_per_unit: Decimal
    gap_pct: Decimal
    total_gap: Decimal


class MarketAnalysisResponse(BaseModel):
    current_gross_income: Decimal
    market_gross_income: Decimal
    potential_increase: Decimal
    upside_pct: Decimal
    current_to_market_ratio: Decimal
    unit_gaps: list[UnitRentGapResponse] = []


class ReturnProjectionResponse(BaseModel):
    roi: Decimal
    payback_period_years: Decimal
    years: int
    projected_cash_flow: Decimal
    projected_roi: Decimal


class AnalysisResponse(BaseModel):
    scenarios: ScenarioComparisonResponse
    financing: FinancingResponse
    expense_breakdown: list[ExpenseBreakdownResponse] = []
    income_by_unit_type: list[UnitTypeIncomeResponse] = []
    market_analysis: MarketAnalysisResponse
    current_returns: ReturnProjectionResponse
    market_returns: ReturnProjectionResponse
    other_income: Decimal
    price_per_unit: Decimal
    price_per_sqft: Decimal
    allocated_units: int


class AmortizationPaymentResponse(BaseModel):
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


class YearlyDebtResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


class AmortizationResponse(BaseModel):
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal
    payments: list[AmortizationPaymentResponse] = []
    yearly: list[YearlyDebtResponse] = []


class ExpenseDefaultResponse(BaseModel):
    name: str
    amount: Decimal
    is_percentage: bool
    percentage_of: str


class IncomeDefaultResponse(BaseModel):
    name: str
    amount: Decimal
    is_calculated: bool


class DefaultsResponse(BaseModel):
    expenses: list[ExpenseDefaultResponse]
    income: list[IncomeDefaultResponse]
    down_payment_pct: Decimal
    loan_term_years: int
    interest_rate: Decimal


class CommissionResponse(BaseModel):
    amount: Decimal
    source: str
