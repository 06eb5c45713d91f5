"""Currency-unit <-> minor-unit conversion.

Amounts enter and leave the engine as decimal currency units (floats). The
amortization loop itself only ever sees integer cents.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from debtplan.errors import InvalidAmortizationInput

_CENT = Decimal("0.01")


def round_half_up(value: Decimal) -> int:
    """Round a Decimal to the nearest integer, ties away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def to_cents(amount: float | int) -> int:
    """Convert a currency amount to integer cents (half-up)."""
    if not math.isfinite(amount):
        raise InvalidAmortizationInput(f"Amount must be finite, got {amount!r}")
    # str() first so 0.1 becomes Decimal("0.1"), not its binary expansion
    return int(Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP) * 100)


def from_cents(cents: int | float) -> float:
    """Convert integer cents back to currency units. Infinity passes through."""
    if isinstance(cents, float) and math.isinf(cents):
        return cents
    return float(Decimal(int(cents)) / 100)
