"""Decimal precision inference and locale-independent number formatting."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def _to_decimal(number: float) -> Decimal:
    if not math.isfinite(number):
        raise ValueError(f"Cannot format non-finite number {number!r}")
    # repr gives the shortest string that round-trips the float
    return Decimal(repr(float(number)))


def _clean(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"", "-0"}:
        return "0"
    return text


def decimal_places(number: float) -> int:
    exponent = _to_decimal(number).normalize().as_tuple().exponent
    return max(0, -exponent)


def to_precision(number: float, places: int) -> str:
    """Round half-up to `places` decimals and drop trailing zeros."""
    step = Decimal(1).scaleb(-places)
    quantized = _to_decimal(number).quantize(step, rounding=ROUND_HALF_UP)
    return _clean(format(quantized, "f"))


def format_number(number: float) -> str:
    """Shortest plain (non-exponent) decimal text for `number`."""
    return _clean(format(_to_decimal(number).normalize(), "f"))


def multiply(a: float, b: float) -> float:
    """Exact decimal product of two floats."""
    return float(_to_decimal(a) * _to_decimal(b))
