"""Debt service and amortization schedule computation.

Pure functions: Decimal in, dataclass out. No I/O. Amounts are left
unrounded; presentation layers quantize.
"""

from dataclasses import dataclass
from decimal import Decimal

from dealmetrics.models.property import PropertyInputs
from dealmetrics.models.results import FinancingSummary
from dealmetrics.engine.normalize import normalize_property

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class AmortizationPayment:
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AmortizationSchedule:
    payments: list[AmortizationPayment]
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal

    @property
    def total_paid(self) -> Decimal:
        return self.total_interest + self.total_principal


@dataclass(frozen=True)
class YearlyDebt:
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


def monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    return annual_rate_pct / HUNDRED / 12


def monthly_payment(principal: Decimal, annual_rate_pct: Decimal, term_years: int) -> Decimal:
    """Fixed-rate fully amortizing monthly payment.

    Zero when there is no loan, no rate or no term. A negative principal
    (down payment above price) is not rejected and yields a negative payment.
    """
    r = monthly_rate(annual_rate_pct)
    n = term_years * 12
    if principal == 0 or r == 0 or n == 0:
        return Decimal("0")

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return principal * (r * factor) / (factor - 1)


def amortization_schedule(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_years: int,
    hold_years: int | None = None,
) -> AmortizationSchedule:
    """Generate full or partial amortization schedule.

    Args:
        principal: Loan amount
        annual_rate_pct: Annual interest rate in percent (e.g. 6.5 for 6.5%)
        term_years: Loan term in years
        hold_years: If provided, only generate schedule for this many years
    """
    pmt = monthly_payment(principal, annual_rate_pct, term_years)
    if principal <= 0 or pmt <= 0:
        return AmortizationSchedule(
            payments=[],
            monthly_payment=pmt,
            total_interest=Decimal("0"),
            total_principal=Decimal("0"),
        )

    r = monthly_rate(annual_rate_pct)
    years = term_years if hold_years is None else min(hold_years, term_years)
    n_periods = years * 12

    payments: list[AmortizationPayment] = []
    balance = principal
    total_interest = Decimal("0")
    total_principal = Decimal("0")

    for period in range(1, n_periods + 1):
        interest = balance * r
        principal_paid = pmt - interest

        # Final payment adjustment
        if principal_paid > balance or period == term_years * 12:
            principal_paid = balance
            actual_payment = interest + principal_paid
        else:
            actual_payment = pmt

        balance -= principal_paid
        total_interest += interest
        total_principal += principal_paid

        payments.append(AmortizationPayment(
            period=period,
            payment=actual_payment,
            principal=principal_paid,
            interest=interest,
            balance=balance,
        ))

    return AmortizationSchedule(
        payments=payments,
        monthly_payment=pmt,
        total_interest=total_interest,
        total_principal=total_principal,
    )


def yearly_debt_summary(schedule: AmortizationSchedule) -> list[YearlyDebt]:
    """Roll a monthly schedule up into loan years. A trailing partial year is kept."""
    yearly: list[YearlyDebt] = []
    year_principal = Decimal("0")
    year_interest = Decimal("0")
    year_debt_service = Decimal("0")

    for p in schedule.payments:
        year_principal += p.principal
        year_interest += p.interest
        year_debt_service += p.payment

        if p.period % 12 == 0 or p.period == len(schedule.payments):
            yearly.append(YearlyDebt(
                year=(p.period - 1) // 12 + 1,
                principal=year_principal,
                interest=year_interest,
                debt_service=year_debt_service,
                ending_balance=p.balance,
            ))
            year_principal = Decimal("0")
            year_interest = Decimal("0")
            year_debt_service = Decimal("0")

    return yearly


def financing_summary(prop: PropertyInputs) -> FinancingSummary:
    """Loan overview for the financing section of a report.

    Accepts raw form input; cash purchases are normalized here.
    """
    prop = normalize_property(prop)
    loan = prop.loan_amount
    schedule = amortization_schedule(loan, prop.interest_rate, prop.loan_term_years)
    yearly = yearly_debt_summary(schedule)
    first_year = yearly[0] if yearly else None

    if prop.purchase_price == 0:
        down_pct = Decimal("0")
        ltv = Decimal("0")
    else:
        down_pct = prop.down_payment / prop.purchase_price
        ltv = loan / prop.purchase_price

    return FinancingSummary(
        loan_amount=loan,
        down_payment=prop.down_payment,
        down_payment_pct=down_pct,
        loan_to_value=ltv,
        interest_rate=prop.interest_rate,
        loan_term_years=prop.loan_term_years,
        monthly_payment=schedule.monthly_payment,
        total_payments=schedule.total_paid,
        total_interest=schedule.total_interest,
        first_year_principal=first_year.principal if first_year else Decimal("0"),
        first_year_interest=first_year.interest if first_year else Decimal("0"),
    )
