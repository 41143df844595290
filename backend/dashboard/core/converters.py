"""Permissive coercion of form input into item fields.

Malformed numbers are not an error: anything unparsable becomes 0. Negative
values are clamped to 0 so price and stock stay non-negative.
"""

import math
import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_DECIMAL = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CENTS = Decimal("0.01")


def coerce_stock(value: Any) -> int:
    """Parse stock the way a browser's parseInt would, falling back to 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(int(value), 0)
    if isinstance(value, Decimal):
        if not value.is_finite():
            return 0
        return max(int(value), 0)
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return max(int(match.group(1)), 0)


def to_cents(value: Decimal) -> Decimal:
    """Round to 2 places with enough precision that large amounts survive."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(_CENTS)


def coerce_price(value: Any) -> Decimal:
    """Parse a price the way a browser's parseFloat would, as a 2-place Decimal, falling back to 0.00."""
    if value is None or isinstance(value, bool):
        return Decimal("0.00")
    if isinstance(value, float) and not math.isfinite(value):
        return Decimal("0.00")
    if isinstance(value, Decimal):
        price = value
    else:
        match = _LEADING_DECIMAL.match(str(value))
        if not match:
            return Decimal("0.00")
        price = Decimal(match.group(1))
    if not price.is_finite() or price < 0:
        return Decimal("0.00")
    try:
        return to_cents(price)
    except InvalidOperation:
        # beyond the Decimal exponent range
        return Decimal("0.00")
