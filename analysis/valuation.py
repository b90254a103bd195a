# File: analysis/valuation.py
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

from analysis.models import FieldSet, StockValuation

GRAHAM_MULTIPLIER = 22.5


def round_half_up(value: float, digits: int) -> float:
    """Round half away from zero, based on the shortest repr of the float."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # room for every integer digit plus the requested decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def intrinsic_value(eps: Optional[float], bvps: Optional[float]) -> float:
    """Benjamin Graham's formula: sqrt(22.5 * EPS * BVPS), 0.0 when it does not apply."""
    if bvps is None or eps is None or eps <= 0 or bvps <= 0:
        return 0.0
    iv = round_half_up(math.sqrt(GRAHAM_MULTIPLIER * eps * bvps), 2)
    # overflow on absurd inputs is treated like unusable inputs
    return iv if math.isfinite(iv) else 0.0


def safety_margin(price: Optional[float], iv: float) -> float:
    """How far the price sits below the intrinsic value, in percent."""
    if iv <= 0 or price is None:
        return 0.0
    sm = round_half_up(-((price - iv) / iv), 4) * 100
    return sm if math.isfinite(sm) else 0.0


def value_stock(stock_code: str, fields: FieldSet) -> StockValuation:
    iv = intrinsic_value(fields.eps, fields.bvps)
    sm = safety_margin(fields.price, iv)

    def or_zero(v: Optional[float]) -> float:
        return 0.0 if v is None else v

    return StockValuation(
        stock=stock_code,
        price=or_zero(fields.price),
        iv=iv,
        sm=sm,
        eps=or_zero(fields.eps),
        bvps=or_zero(fields.bvps),
        roe=or_zero(fields.roe),
        pe=or_zero(fields.pe),
        pbv=or_zero(fields.pbv),
        dy=or_zero(fields.dy),
    )
