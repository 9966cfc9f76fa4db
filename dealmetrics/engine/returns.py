"""Simple return projections built on top of year-1 metrics.

No appreciation, tax or rent growth: year-1 cash flow held flat.
"""

from decimal import Decimal

from dealmetrics.models.results import MetricsResult, ReturnProjection


def payback_period_years(total_investment: Decimal, annual_cash_flow: Decimal) -> Decimal:
    """Years of flat cash flow needed to recoup the investment.

    Zero when the deal does not cash flow.
    """
    if annual_cash_flow <= 0:
        return Decimal("0")
    return total_investment / annual_cash_flow


def return_projection(metrics: MetricsResult, years: int = 5) -> ReturnProjection:
    key = metrics.key_metrics
    projected_cash_flow = key.annual_cash_flow * years
    if key.total_investment == 0:
        projected_roi = Decimal("0")
    else:
        projected_roi = projected_cash_flow / key.total_investment

    return ReturnProjection(
        roi=key.cash_on_cash_return,
        payback_period_years=payback_period_years(key.total_investment, key.annual_cash_flow),
        years=years,
        projected_cash_flow=projected_cash_flow,
        projected_roi=projected_roi,
    )
