"""
Number-to-string helpers for display tables.

Rounding is half away from zero on the shortest decimal representation
of the float, so 2.675 displays as 2.68 at two digits.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext

from pytabstats.core.exceptions import ValidationError


DEFAULT_DIGITS = 2

_NUMBER = r"-?\d[\d,]*(?:\.\d+)?"
_CELL = re.compile(
    rf"^\s*({_NUMBER})(?:\s*\(\s*({_NUMBER})(?:\s+-\s+({_NUMBER}))?\s*\))?\s*$"
)


def check_digits(digits: int) -> int:
    """
    Verify ``digits`` is a non-negative integer.

    Raises:
        ValidationError: If it is not
    """
    if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
        raise ValidationError(f"digits must be a non-negative integer, got {digits!r}")
    return digits


def format_number(value: float, digits: int = DEFAULT_DIGITS) -> str:
    """
    Round half away from zero and show exactly ``digits`` decimals.

    >>> format_number(26.663636, 2)
    '26.66'
    >>> format_number(15.1, 2)
    '15.10'
    """
    check_digits(digits)
    if value is None or not math.isfinite(value):
        raise ValidationError(f"cannot format non-finite value {value!r}")

    exact = Decimal(repr(float(value)))
    with localcontext() as ctx:
        # quantize needs every integer digit plus the decimals in precision
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:.{digits}f}"


def format_count(n: int) -> str:
    """Integer with ',' thousands separators: 12345 -> '12,345'."""
    return f"{int(n):,}"


def format_estimate_ci(value: float, lower: float, upper: float, digits: int = DEFAULT_DIGITS) -> str:
    """'<value> (<lcl> - <ucl>)'"""
    return (
        f"{format_number(value, digits)} "
        f"({format_number(lower, digits)} - {format_number(upper, digits)})"
    )


def format_count_value(n: int, value: float, digits: int = DEFAULT_DIGITS) -> str:
    """'<n> (<value>)'"""
    return f"{format_count(n)} ({format_number(value, digits)})"


def parse_cell(text: str) -> tuple[float, ...]:
    """
    Read the numbers back out of a formatted cell.

    >>> parse_cell('24.00 (21.00 - 27.00)')
    (24.0, 21.0, 27.0)
    >>> parse_cell('1,024 (59.38)')
    (1024.0, 59.38)

    Raises:
        ValidationError: If ``text`` is not in one of the display patterns
    """
    match = _CELL.match(text)
    if match is None:
        raise ValidationError(f"not a formatted statistic: {text!r}")
    return tuple(float(g.replace(",", "")) for g in match.groups() if g is not None)
