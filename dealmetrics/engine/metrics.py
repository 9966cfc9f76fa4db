"""Investment metrics: NOI, cap rate, CoC return, GRM, DSCR.

Pure functions: Decimal in, Decimal out. No I/O.

Every ratio is guarded against a zero denominator and falls back to 0,
except DSCR which is infinite when there is no debt service.
"""

from decimal import Decimal

from dealmetrics.models.results import (
    AnnualBreakdown,
    KeyMetrics,
    MetricsResult,
    MonthlyBreakdown,
)

ZERO = Decimal("0")
INFINITY = Decimal("Infinity")


def cap_rate(annual_noi: Decimal, purchase_price: Decimal) -> Decimal:
    """Cap rate = annual NOI / purchase price."""
    if purchase_price == 0:
        return ZERO
    return annual_noi / purchase_price


def cash_on_cash(annual_cash_flow: Decimal, total_investment: Decimal) -> Decimal:
    """Cash-on-cash return = annual cash flow / cash invested."""
    if total_investment == 0:
        return ZERO
    return annual_cash_flow / total_investment


def gross_rent_multiplier(purchase_price: Decimal, annual_gross_income: Decimal) -> Decimal:
    """GRM = purchase price / annual gross income."""
    if annual_gross_income == 0:
        return ZERO
    return purchase_price / annual_gross_income


def dscr(
    monthly_noi: Decimal, monthly_debt_service: Decimal, is_cash_purchase: bool = False
) -> Decimal:
    """Debt Service Coverage Ratio = NOI / debt service."""
    if is_cash_purchase or monthly_debt_service == 0:
        return INFINITY
    return monthly_noi / monthly_debt_service


def compose_metrics(
    gross_income: Decimal,
    total_expenses: Decimal,
    debt_service: Decimal,
    purchase_price: Decimal,
    total_investment: Decimal,
    is_cash_purchase: bool = False,
) -> MetricsResult:
    """Build the metric set for one rent scenario from monthly figures."""
    monthly_noi = gross_income - total_expenses
    monthly_cash_flow = monthly_noi - debt_service

    annual = AnnualBreakdown(
        gross_income=gross_income * 12,
        total_expenses=total_expenses * 12,
        net_operating_income=monthly_noi * 12,
        debt_service=debt_service * 12,
        cash_flow=monthly_cash_flow * 12,
    )

    return MetricsResult(
        key_metrics=KeyMetrics(
            cap_rate=cap_rate(annual.net_operating_income, purchase_price),
            cash_on_cash_return=cash_on_cash(annual.cash_flow, total_investment),
            net_operating_income=annual.net_operating_income,
            gross_rent_multiplier=gross_rent_multiplier(purchase_price, annual.gross_income),
            debt_service_coverage_ratio=dscr(monthly_noi, debt_service, is_cash_purchase),
            total_investment=total_investment,
            annual_cash_flow=annual.cash_flow,
        ),
        monthly_breakdown=MonthlyBreakdown(
            gross_income=gross_income,
            total_expenses=total_expenses,
            net_operating_income=monthly_noi,
            mortgage_payment=debt_service,
            cash_flow=monthly_cash_flow,
        ),
        annual_breakdown=annual,
    )


def _delta(market: Decimal, current: Decimal) -> Decimal:
    # Infinity - Infinity is undefined; equal values mean no change
    if market == current:
        return ZERO
    return market - current


def upside(market: MetricsResult, current: MetricsResult) -> MetricsResult:
    """Element-wise market - current across every metric."""
    mk, ck = market.key_metrics, current.key_metrics
    mm, cm = market.monthly_breakdown, current.monthly_breakdown
    ma, ca = market.annual_breakdown, current.annual_breakdown

    return MetricsResult(
        key_metrics=KeyMetrics(
            cap_rate=_delta(mk.cap_rate, ck.cap_rate),
            cash_on_cash_return=_delta(mk.cash_on_cash_return, ck.cash_on_cash_return),
            net_operating_income=_delta(mk.net_operating_income, ck.net_operating_income),
            gross_rent_multiplier=_delta(mk.gross_rent_multiplier, ck.gross_rent_multiplier),
            debt_service_coverage_ratio=_delta(
                mk.debt_service_coverage_ratio, ck.debt_service_coverage_ratio
            ),
            total_investment=_delta(mk.total_investment, ck.total_investment),
            annual_cash_flow=_delta(mk.annual_cash_flow, ck.annual_cash_flow),
        ),
        monthly_breakdown=MonthlyBreakdown(
            gross_income=_delta(mm.gross_income, cm.gross_income),
            total_expenses=_delta(mm.total_expenses, cm.total_expenses),
            net_operating_income=_delta(mm.net_operating_income, cm.net_operating_income),
            mortgage_payment=_delta(mm.mortgage_payment, cm.mortgage_payment),
            cash_flow=_delta(mm.cash_flow, cm.cash_flow),
        ),
        annual_breakdown=AnnualBreakdown(
            gross_income=_delta(ma.gross_income, ca.gross_income),
            total_expenses=_delta(ma.total_expenses, ca.total_expenses),
            net_operating_income=_delta(ma.net_operating_income, ca.net_operating_income),
            debt_service=_delta(ma.debt_service, ca.debt_service),
            cash_flow=_delta(ma.cash_flow, ca.cash_flow),
        ),
    )
