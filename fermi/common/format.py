"""Number formatting for display, English conventions with scale suffixes."""

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Optional

MINUS = "−"
INFINITY = "∞"

# Wide enough to hold any finite float exactly
_EXACT = Context(prec=400)

# Fixed-point output gives way to exponent notation from here on
FIXED_LIMIT = 1e21


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _half_up(value: Decimal, digits: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP, context=_EXACT)


def to_fixed(value: float, digits: int) -> str:
    """
    Fixed-point string, rounding the exact binary value half up.

    A negative value that rounds to zero keeps its sign, e.g. "-0.0".
    Non-finite values give "NaN" or "Infinity", and magnitudes of 1e21 and
    above fall back to the shortest exponent form.
    """
    if not math.isfinite(value):
        return _non_finite(value)
    if abs(value) >= FIXED_LIMIT:
        return repr(value)
    sign = "-" if value < 0 else ""
    return sign + f"{_half_up(Decimal(abs(value)), digits):.{digits}f}"


def to_exponential(value: float, digits: int) -> str:
    """Exponential notation with a bare exponent, e.g. 1.2e-3 or 4.56e+15.

    The mantissa is rounded half up, so 1.125e15 gives 1.13e+15.
    """
    if not math.isfinite(value):
        return _non_finite(value)
    sign = "-" if value < 0 else ""
    exact = Decimal(abs(value))
    exponent = exact.adjusted() if exact else 0
    mantissa = _half_up(exact.scaleb(-exponent, context=_EXACT), digits)
    if mantissa >= 10:
        exponent += 1
        mantissa = _half_up(exact.scaleb(-exponent, context=_EXACT), digits)
    exponent_sign = "+" if exponent >= 0 else "-"
    return f"{sign}{mantissa:.{digits}f}e{exponent_sign}{abs(exponent)}"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_number(n: Optional[float]) -> str:
    """Format a number for display, switching to words for large magnitudes."""
    if n is None or math.isnan(n):
        return "-"
    if math.isinf(n):
        return INFINITY

    magnitude = abs(n)
    sign = MINUS if n < 0 else ""

    if magnitude == 0:
        return "0"
    if magnitude < 0.01:
        return sign + to_exponential(magnitude, 1)
    if magnitude < 1:
        return sign + to_fixed(magnitude, 2)
    if magnitude < 1_000:
        return sign + to_fixed(magnitude, 1)
    if magnitude < 1_000_000:
        return sign + f"{_round_half_up(magnitude):,}"
    if magnitude < 1_000_000_000:
        return sign + to_fixed(magnitude / 1_000_000, 1) + " million"
    if magnitude < 1_000_000_000_000:
        return sign + to_fixed(magnitude / 1_000_000_000, 2) + " billion"
    if magnitude < 1e15:
        return sign + to_fixed(magnitude / 1_000_000_000_000, 2) + " trillion"
    return sign + to_exponential(magnitude, 2)


def format_integer(n: Optional[float]) -> str:
    """Format a number as an integer with thousand separators."""
    if n is None or math.isnan(n):
        return "-"
    if math.isinf(n):
        return INFINITY
    return f"{_round_half_up(n):,}"
