"""Presentation rounding for API responses."""

from decimal import Decimal, ROUND_HALF_UP, localcontext

from dealmetrics.config import settings


def _places(n: int) -> Decimal:
    return Decimal(1).scaleb(-n)


def _quantize(value: Decimal, places: int) -> Decimal:
    # quantize fails once the result needs more digits than the context
    # precision, which extreme ratios (near-zero denominators) can exceed.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(_places(places), ROUND_HALF_UP)


def money(value: Decimal) -> Decimal:
    return _quantize(value, settings.money_places)


def ratio(value: Decimal) -> Decimal | None:
    """Round a ratio; non-finite ratios (no-debt DSCR) become None."""
    if not value.is_finite():
        return None
    return _quantize(value, settings.ratio_places)
