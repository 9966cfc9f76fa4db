"""Input normalization for the metrics pipeline.

Pure function: dataclass in, dataclass out. No validation; out-of-range
values pass through untouched.
"""

from dataclasses import replace
from decimal import Decimal

from dealmetrics.models.property import PropertyInputs


def normalize_property(prop: PropertyInputs) -> PropertyInputs:
    """Enforce the cash-purchase invariant: no loan, full price down."""
    if not prop.is_cash_purchase:
        return prop
    return replace(
        prop,
        down_payment=prop.purchase_price,
        loan_term_years=0,
        interest_rate=Decimal("0"),
    )
