"""Decimal helpers for monetary amounts."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

from staycalc.errors import InvalidRateError

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")


def to_money(value: Number, name: str = "monthly_price") -> Decimal:
    """Coerce ``value`` to a finite, non-negative Decimal."""
    if isinstance(value, bool):
        raise InvalidRateError(f"{name} must be a number, got bool")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        # floats go through str so 0.1 stays 0.1
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidRateError(f"{name} is not a number: {value!r}") from exc
    else:
        raise InvalidRateError(f"Unsupported type for {name}: {type(value)}")

    if not amount.is_finite():
        raise InvalidRateError(f"{name} must be finite, got {value!r}")
    if amount < 0:
        raise InvalidRateError(f"{name} must be non-negative, got {value!r}")
    # normalise -0 to 0
    return amount.copy_abs() if amount.is_zero() else amount


def round_cents(amount: Decimal) -> Decimal:
    """Round half-up to two decimal places."""
    with localcontext() as ctx:
        # enough digits for the integer part plus cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
