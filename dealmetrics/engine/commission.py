"""Expected broker commission for pipeline deals.

A deal may carry a commission percent, a flat commission amount, both, or
neither. Resolution order:
    1. commission_percent, when set and non-zero: price * percent / 100
    2. commission_amount, when set
    3. zero
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class CommissionSource(Enum):
    PERCENT = "percent"
    AMOUNT = "amount"
    NONE = "none"


@dataclass(frozen=True)
class DealCommissionInputs:
    price: Decimal
    commission_percent: Decimal | None = None
    commission_amount: Decimal | None = None
    name: str = ""


@dataclass(frozen=True)
class ResolvedCommission:
    amount: Decimal
    source: CommissionSource


def resolve_commission(deal: DealCommissionInputs) -> ResolvedCommission:
    if deal.commission_percent:
        return ResolvedCommission(
            amount=deal.price * deal.commission_percent / Decimal("100"),
            source=CommissionSource.PERCENT,
        )
    if deal.commission_amount is not None:
        return ResolvedCommission(amount=deal.commission_amount, source=CommissionSource.AMOUNT)
    return ResolvedCommission(amount=Decimal("0"), source=CommissionSource.NONE)


def rank_deals_by_commission(
    deals: list[DealCommissionInputs], descending: bool = True
) -> list[DealCommissionInputs]:
    """Order deals by expected commission. Stable for ties."""
    return sorted(
        deals,
        key=lambda d: resolve_commission(d).amount,
        reverse=descending,
    )
