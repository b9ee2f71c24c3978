"""Length scaling: rewrite every ``<number>px`` token by a ratio."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

# A digit immediately followed by "px".
PX_TEST_RE = re.compile(r"(?<=\d)px")

# The complete number in front of "px" (digits, optionally with a fraction).
PX_MATCH_RE = re.compile(r"(?<![\d.])\d*\.?\d+(?=px)")

_THOUSANDTHS = Decimal("0.001")


def has_px(value: str) -> bool:
    """Return True if *value* contains at least one px length."""
    return PX_TEST_RE.search(value) is not None


def to_fixed(number: float) -> str:
    """Format *number* with 3 decimals, exact binary ties rounding away from zero."""
    return f"{Decimal(number).quantize(_THOUSANDTHS, rounding=ROUND_HALF_UP):f}"


def scale_px(value: str, ratio: float) -> str:
    """Multiply each px number in *value* by *ratio*, keeping 3 decimals.

    >>> scale_px("10px 20px", 0.5)
    '5.000px 10.000px'
    """
    return PX_MATCH_RE.sub(lambda m: to_fixed(float(m.group()) * ratio), value)


def format_number(number: float) -> str:
    """Render a width for CSS output: ``600`` and ``600.0`` both give ``600``."""
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)
