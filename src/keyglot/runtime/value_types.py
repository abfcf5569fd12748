"""Value types accepted for placeholder substitution.

Defines:
    - MessageValue: Union of all values a caller may substitute
    - to_display_string: Canonical string form of a MessageValue

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from decimal import Decimal

__all__ = [
    "MessageValue",
    "to_display_string",
]

type MessageValue = str | int | float | Decimal | None
"""Value substituted into a {{placeholder}}. None leaves the placeholder as-is."""


# Decimal-point positions (relative to the first significant digit) that
# still render in plain notation; anything outside uses exponent form.
_MAX_POSITIONAL_EXPONENT = 21
_MIN_POSITIONAL_EXPONENT = -6


def _float_to_string(value: float) -> str:
    """Shortest round-trip digits, laid out the way ECMAScript Number#toString does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    all_digits = "".join(map(str, digit_tuple))
    digits = all_digits.rstrip("0")
    exponent = int(exponent) + len(all_digits) - len(digits)
    # point: digits before the decimal point (may be <= 0 or > len(digits))
    count = len(digits)
    point = exponent + count

    if count <= point <= _MAX_POSITIONAL_EXPONENT:
        body = digits + "0" * (point - count)
    elif 0 < point <= _MAX_POSITIONAL_EXPONENT:
        body = f"{digits[:point]}.{digits[point:]}"
    elif _MIN_POSITIONAL_EXPONENT < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        mantissa = digits if count == 1 else f"{digits[0]}.{digits[1:]}"
        shown = point - 1
        body = f"{mantissa}e{'+' if shown >= 0 else '-'}{abs(shown)}"
    return f"-{body}" if sign else body


def to_display_string(value: str | int | float | Decimal) -> str:
    """Render a substitution value in its natural decimal string form.

    Floats follow JavaScript's String(number): integral values drop the
    trailing ".0" ("3 ag." rather than "3.0 ag."), exponent form is used
    only below 1e-6 or from 1e21 up ("1e-7", "1e+21"), and non-finite
    values read "NaN", "Infinity" and "-Infinity". Booleans render in
    lowercase. int and Decimal use str().

    Args:
        value: Non-None substitution value

    Returns:
        String inserted verbatim into the template

    Examples:
        >>> to_display_string(3.0)
        '3'
        >>> to_display_string(2.5)
        '2.5'
        >>> to_display_string(1e-7)
        '1e-7'
        >>> to_display_string(0.00001)
        '0.00001'
        >>> to_display_string(Decimal("1.50"))
        '1.50'
        >>> to_display_string(True)
        'true'
    """
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case float():
            return _float_to_string(value)
        case _:
            return str(value)
