"""Analysis routes: the primary API entry point."""

import logging

from fastapi import APIRouter, HTTPException

from dealmetrics.api.formatting import money, ratio
from dealmetrics.api.schemas import (
    AnalyzeRequest,
    AnalysisResponse,
    AnnualBreakdownResponse,
    DefaultsResponse,
    ExpenseBreakdownResponse,
    ExpenseDefaultResponse,
    FinancingResponse,
    IncomeDefaultResponse,
    KeyMetricsResponse,
    MarketAnalysisResponse,
    MetricsResponse,
    MonthlyBreakdownResponse,
    ReturnProjectionResponse,
    ScenarioComparisonResponse,
    UnitRentGapResponse,
    UnitTypeIncomeResponse,
)
from dealmetrics.config import settings
from dealmetrics.models.defaults import FORM_DEFAULTS
from dealmetrics.models.property import (
    ExpenseLine,
    IncomeLine,
    PercentageBasis,
    PropertyInputs,
    UnitMixEntry,
)
from dealmetrics.models.results import (
    AnalysisReport,
    MetricsResult,
    ReturnProjection,
    ScenarioComparison,
)
from dealmetrics.engine.analysis import compute_metrics, run_analysis, unallocated_units

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analysis"])


def _build_inputs(
    req: AnalyzeRequest,
) -> tuple[PropertyInputs, list[UnitMixEntry], list[IncomeLine], list[ExpenseLine]]:
    """Validate the request and convert it to engine inputs.

    The engine computes whatever it is given; rejecting economically
    meaningless combinations is this layer's job.
    """
    p = req.property
    if not p.is_cash_purchase and p.down_payment > p.purchase_price:
        logger.info(
            "Rejected analysis: down payment %s exceeds price %s", p.down_payment, p.purchase_price
        )
        raise HTTPException(
            status_code=400,
            detail="Down payment cannot exceed the purchase price on a financed deal.",
        )

    unit_mix = [
        UnitMixEntry(
            unit_type=u.unit_type,
            count=u.count,
            current_rent=u.current_rent,
            market_rent=u.market_rent,
            square_footage=u.square_footage,
        )
        for u in req.unit_mix
    ]
    if p.total_units and unallocated_units(p.total_units, unit_mix) < 0:
        logger.info("Rejected analysis: unit mix exceeds %d total units", p.total_units)
        raise HTTPException(
            status_code=400,
            detail=f"Unit mix allocates more than the property's {p.total_units} units.",
        )

    prop = PropertyInputs(
        purchase_price=p.purchase_price,
        down_payment=p.down_payment,
        loan_term_years=p.loan_term_years,
        interest_rate=p.interest_rate,
        is_cash_purchase=p.is_cash_purchase,
        total_units=p.total_units,
        property_size_sqft=p.property_size_sqft,
    )
    income = [
        IncomeLine(name=i.name, amount=i.amount, is_calculated=i.is_calculated)
        for i in req.income
    ]
    expenses = [
        ExpenseLine(
            name=e.name,
            amount=e.amount,
            is_percentage=e.is_percentage,
            percentage_of=PercentageBasis(e.percentage_of),
        )
        for e in req.expenses
    ]
    return prop, unit_mix, income, expenses


def _metrics_to_response(m: MetricsResult) -> MetricsResponse:
    k, mo, yr = m.key_metrics, m.monthly_breakdown, m.annual_breakdown
    return MetricsResponse(
        key_metrics=KeyMetricsResponse(
            cap_rate=ratio(k.cap_rate),
            cash_on_cash_return=ratio(k.cash_on_cash_return),
            net_operating_income=money(k.net_operating_income),
            gross_rent_multiplier=ratio(k.gross_rent_multiplier),
            debt_service_coverage_ratio=ratio(k.debt_service_coverage_ratio),
            total_investment=money(k.total_investment),
            annual_cash_flow=money(k.annual_cash_flow),
        ),
        monthly_breakdown=MonthlyBreakdownResponse(
            gross_income=money(mo.gross_income),
            total_expenses=money(mo.total_expenses),
            net_operating_income=money(mo.net_operating_income),
            mortgage_payment=money(mo.mortgage_payment),
            cash_flow=money(mo.cash_flow),
        ),
        annual_breakdown=AnnualBreakdownResponse(
            gross_income=money(yr.gross_income),
            total_expenses=money(yr.total_expenses),
            net_operating_income=money(yr.net_operating_income),
            debt_service=money(yr.debt_service),
            cash_flow=money(yr.cash_flow),
        ),
    )


def _scenarios_to_response(s: ScenarioComparison) -> ScenarioComparisonResponse:
    return ScenarioComparisonResponse(
        current=_metrics_to_response(s.current),
        market=_metrics_to_response(s.market),
        upside=_metrics_to_response(s.upside),
    )


def _returns_to_response(r: ReturnProjection) -> ReturnProjectionResponse:
    return ReturnProjectionResponse(
        roi=ratio(r.roi),
        payback_period_years=ratio(r.payback_period_years),
        years=r.years,
        projected_cash_flow=money(r.projected_cash_flow),
        projected_roi=ratio(r.projected_roi),
    )


def _report_to_response(report: AnalysisReport) -> AnalysisResponse:
    """Convert engine AnalysisReport to API response, rounding for display."""
    f = report.financing
    financing = FinancingResponse(
        loan_amount=money(f.loan_amount),
        down_payment=money(f.down_payment),
        down_payment_pct=ratio(f.down_payment_pct),
        loan_to_value=ratio(f.loan_to_value),
        interest_rate=f.interest_rate,
        loan_term_years=f.loan_term_years,
        monthly_payment=money(f.monthly_payment),
        total_payments=money(f.total_payments),
        total_interest=money(f.total_interest),
        first_year_principal=money(f.first_year_principal),
        first_year_interest=money(f.first_year_interest),
    )

    ma = report.market_analysis
    market = MarketAnalysisResponse(
        current_gross_income=money(ma.current_gross_income),
        market_gross_income=money(ma.market_gross_income),
        potential_increase=money(ma.potential_increase),
        upside_pct=ratio(ma.upside_pct),
        current_to_market_ratio=ratio(ma.current_to_market_ratio),
        unit_gaps=[
            UnitRentGapResponse(
                unit_type=g.unit_type,
                count=g.count,
                current_rent=money(g.current_rent),
                market_rent=money(g.market_rent),
                gap_per_unit=money(g.gap_per_unit),
                gap_pct=ratio(g.gap_pct),
                total_gap=money(g.total_gap),
            )
            for g in ma.unit_gaps
        ],
    )

    return AnalysisResponse(
        scenarios=_scenarios_to_response(report.scenarios),
        financing=financing,
        expense_breakdown=[
            ExpenseBreakdownResponse(
                name=e.name,
                current_amount=money(e.current_amount),
                market_amount=money(e.market_amount),
            )
            for e in report.expense_breakdown
        ],
        income_by_unit_type=[
            UnitTypeIncomeResponse(
                unit_type=u.unit_type,
                units=u.units,
                monthly_current=money(u.monthly_current),
                monthly_market=money(u.monthly_market),
            )
            for u in report.income_by_unit_type
        ],
        market_analysis=market,
        current_returns=_returns_to_response(report.current_returns),
        market_returns=_returns_to_response(report.market_returns),
        other_income=money(report.other_income),
        price_per_unit=money(report.price_per_unit),
        price_per_sqft=money(report.price_per_sqft),
        allocated_units=report.allocated_units,
    )


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(req: AnalyzeRequest):
    """Full deal analysis: current vs market metrics, financing, breakdowns, returns."""
    prop, unit_mix, income, expenses = _build_inputs(req)
    years = req.projection_years or settings.projection_years
    report = run_analysis(prop, unit_mix, income, expenses, projection_years=years)
    return _report_to_response(report)


@router.post("/metrics", response_model=ScenarioComparisonResponse)
async def metrics(req: AnalyzeRequest):
    """Current, market and upside metrics only."""
    prop, unit_mix, income, expenses = _build_inputs(req)
    return _scenarios_to_response(compute_metrics(prop, unit_mix, income, expenses))


@router.get("/defaults", response_model=DefaultsResponse)
async def defaults():
    """Default expense/income lines and financing terms for a new analysis."""
    return DefaultsResponse(
        expenses=[
            ExpenseDefaultResponse(
                name=e.name,
                amount=e.amount,
                is_percentage=e.is_percentage,
                percentage_of=e.percentage_of.value,
            )
            for e in FORM_DEFAULTS.expenses
        ],
        income=[
            IncomeDefaultResponse(name=i.name, amount=i.amount, is_calculated=i.is_calculated)
            for i in FORM_DEFAULTS.income
        ],
        down_payment_pct=FORM_DEFAULTS.down_payment_pct,
        loan_term_years=FORM_DEFAULTS.loan_term_years,
        interest_rate=FORM_DEFAULTS.interest_rate,
    )
