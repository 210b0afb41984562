"""Numeric-to-string policy for the status line."""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional


def to_fixed(value: float, digits: int) -> str:
    """Format value with a fixed number of decimals, rounding ties away from zero.

    Rounds the exact binary value of the float, so 1.25 → "1.3" but
    1.15 (stored as 1.1499...) → "1.1".
    """
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # Default 28-digit precision is too small for huge values like 1e30
        ctx.prec = max(exact.adjusted(), 0) + digits + 2
        return str(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(value + 0.5)


def format_tokens(n: int) -> str:
    """Humanize a token count.

    999 → 999, 1500 → 1.5k, 2_300_000 → 2.3M
    """
    if n < 1000:
        return str(n)
    if n < 1_000_000:
        return f"{to_fixed(n / 1000, 1)}k"
    return f"{to_fixed(n / 1_000_000, 1)}M"


def format_cost(cost: Optional[float]) -> str:
    """Format a USD amount with two decimals, "$0.00" when unknown."""
    if cost is None:
        return "$0.00"
    return f"${to_fixed(cost, 2)}"
