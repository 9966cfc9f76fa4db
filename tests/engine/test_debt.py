from dataclasses import replace
from decimal import Decimal

from dealmetrics.engine.debt import (
    monthly_payment,
    amortization_schedule,
    yearly_debt_summary,
    financing_summary,
)

PENNY = Decimal("0.01")


class TestMonthlyPayment:
    def test_standard_mortgage(self):
        """$800K loan at 6.5% for 30 years."""
        pmt = monthly_payment(Decimal("800000"), Decimal("6.5"), 30)
        # Expected: ~$5,056.54
        assert abs(pmt - Decimal("5056.54")) < PENNY

    def test_smaller_loan_scales_linearly(self):
        pmt = monthly_payment(Decimal("200000"), Decimal("6.5"), 30)
        assert abs(pmt - Decimal("1264.14")) < PENNY

    def test_not_rounded(self):
        pmt = monthly_payment(Decimal("800000"), Decimal("6.5"), 30)
        assert pmt != pmt.quantize(PENNY)

    def test_zero_rate(self):
        pmt = monthly_payment(Decimal("360000"), Decimal("0"), 30)
        assert pmt == Decimal("0")

    def test_zero_principal(self):
        pmt = monthly_payment(Decimal("0"), Decimal("6.5"), 30)
        assert pmt == Decimal("0")

    def test_zero_term(self):
        pmt = monthly_payment(Decimal("800000"), Decimal("6.5"), 0)
        assert pmt == Decimal("0")

    def test_negative_principal_not_rejected(self):
        pmt = monthly_payment(Decimal("-200000"), Decimal("6.5"), 30)
        assert abs(pmt + Decimal("1264.14")) < PENNY


class TestAmortizationSchedule:
    def test_payment_count(self):
        schedule = amortization_schedule(Decimal("800000"), Decimal("6.5"), 30)
        assert len(schedule.payments) == 360

    def test_partial_schedule(self):
        schedule = amortization_schedule(
            Decimal("800000"), Decimal("6.5"), 30, hold_years=7
        )
        assert len(schedule.payments) == 84

    def test_first_payment_mostly_interest(self):
        schedule = amortization_schedule(Decimal("800000"), Decimal("6.5"), 30)
        first = schedule.payments[0]
        # At 6.5%, first month interest = 800000 * 0.065/12 = $4,333.33
        assert first.interest.quantize(PENNY) == Decimal("4333.33")
        assert abs(first.principal - Decimal("723.21")) < PENNY

    def test_balance_decreases(self):
        schedule = amortization_schedule(Decimal("800000"), Decimal("6.5"), 30)
        for i in range(1, len(schedule.payments)):
            assert schedule.payments[i].balance < schedule.payments[i - 1].balance

    def test_final_balance_zero(self):
        schedule = amortization_schedule(Decimal("800000"), Decimal("6.5"), 30)
        assert schedule.payments[-1].balance == Decimal("0")
        assert abs(schedule.total_principal - Decimal("800000")) < PENNY

    def test_cash_deal_has_no_schedule(self):
        schedule = amortization_schedule(Decimal("0"), Decimal("0"), 0)
        assert schedule.payments == []
        assert schedule.total_interest == Decimal("0")

    def test_zero_hold_years_is_empty(self):
        schedule = amortization_schedule(Decimal("800000"), Decimal("6.5"), 30, hold_years=0)
        assert schedule.payments == []
        assert schedule.total_principal == Decimal("0")

    def test_hold_years_beyond_term_is_capped(self):
        schedule = amortization_schedule(Decimal("200000"), Decimal("6.5"), 30, hold_years=40)
        assert len(schedule.payments) == 360


class TestYearlyDebtSummary:
    def test_seven_year_summary(self):
        schedule = amortization_schedule(
            Decimal("800000"), Decimal("6.5"), 30, hold_years=7
        )
        yearly = yearly_debt_summary(schedule)
        assert len(yearly) == 7
        assert [y.year for y in yearly] == list(range(1, 8))
        assert yearly[-1].ending_balance == schedule.payments[-1].balance

    def test_yearly_totals_match(self):
        schedule = amortization_schedule(
            Decimal("800000"), Decimal("6.5"), 30, hold_years=7
        )
        yearly = yearly_debt_summary(schedule)
        total_interest = sum(y.interest for y in yearly)
        total_principal = sum(y.principal for y in yearly)
        assert abs(total_interest - schedule.total_interest) < PENNY
        assert abs(total_principal - schedule.total_principal) < PENNY

    def test_debt_service_equals_12_payments(self):
        schedule = amortization_schedule(
            Decimal("800000"), Decimal("6.5"), 30, hold_years=7
        )
        yearly = yearly_debt_summary(schedule)
        for y in yearly:
            assert abs(y.debt_service - schedule.monthly_payment * 12) < PENNY


class TestFinancingSummary:
    def test_financed_deal(self, canonical_property):
        f = financing_summary(canonical_property)
        assert f.loan_amount == Decimal("800000")
        assert f.down_payment_pct == Decimal("0.2")
        assert f.loan_to_value == Decimal("0.8")
        assert abs(f.monthly_payment - Decimal("5056.54")) < PENNY
        # Total interest over 30 years is roughly 360 payments less principal
        assert abs(f.total_interest - (f.monthly_payment * 360 - f.loan_amount)) < Decimal("1")
        assert abs(f.first_year_principal + f.first_year_interest - f.monthly_payment * 12) < PENNY
        assert f.first_year_interest > f.first_year_principal

    def test_cash_deal(self, cash_property):
        f = financing_summary(cash_property)
        assert f.loan_amount == Decimal("0")
        assert f.down_payment == Decimal("1000000")
        assert f.down_payment_pct == Decimal("1")
        assert f.monthly_payment == Decimal("0")
        assert f.total_interest == Decimal("0")
        assert f.loan_term_years == 0

    def test_zero_price(self, canonical_property):
        free = replace(canonical_property, purchase_price=Decimal("0"), down_payment=Decimal("0"))
        f = financing_summary(free)
        assert f.down_payment_pct == Decimal("0")
        assert f.loan_to_value == Decimal("0")
