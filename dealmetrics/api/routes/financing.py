"""Financing routes: loan amortization."""

from fastapi import APIRouter

from dealmetrics.api.formatting import money
from dealmetrics.api.schemas import (
    AmortizationPaymentResponse,
    AmortizationRequest,
    AmortizationResponse,
    YearlyDebtResponse,
)
from dealmetrics.engine.debt import amortization_schedule, yearly_debt_summary

router = APIRouter(prefix="/api/v1", tags=["financing"])


@router.post("/amortization", response_model=AmortizationResponse)
async def amortization(req: AmortizationRequest):
    """Monthly amortization schedule, optionally summarized by loan year."""
    schedule = amortization_schedule(
        principal=req.principal,
        annual_rate_pct=req.interest_rate,
        term_years=req.loan_term_years,
        hold_years=req.hold_years,
    )

    yearly = []
    if req.yearly:
        yearly = [
            YearlyDebtResponse(
                year=y.year,
                principal=money(y.principal),
                interest=money(y.interest),
                debt_service=money(y.debt_service),
                ending_balance=money(y.ending_balance),
            )
            for y in yearly_debt_summary(schedule)
        ]

    return AmortizationResponse(
        monthly_payment=money(schedule.monthly_payment),
        total_interest=money(schedule.total_interest),
        total_principal=money(schedule.total_principal),
        payments=[
            AmortizationPaymentResponse(
                period=p.period,
                payment=money(p.payment),
                principal=money(p.principal),
                interest=money(p.interest),
                balance=money(p.balance),
            )
            for p in schedule.payments
        ],
        yearly=yearly,
    )
