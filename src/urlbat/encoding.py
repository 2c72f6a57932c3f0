"""
Value rendering and percent-encoding.

Path segments and query components are escaped by two separate functions.
They differ only in how a space is written: ``%20`` in a path segment,
``+`` in a form-encoded query component.
"""

import math
from typing import Any
from urllib.parse import quote, quote_plus

# Characters left as-is in a path segment besides letters, digits and "_.-~"
PATH_SAFE = "!*'()"

# Characters left as-is in a query component besides letters, digits and "_.-"
QUERY_SAFE = "*"

# Decimal point positions (ECMAScript "n") rendered without an exponent
_MIN_DECIMAL_POINT = -5
_MAX_DECIMAL_POINT = 21


def _shortest_digits(value: float) -> tuple[str, int]:
    """Split a positive float into its shortest round-trip digits and the
    position of the decimal point relative to the first digit."""
    mantissa, _, exponent = repr(value).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    all_digits = int_part + frac_part
    digits = all_digits.lstrip("0")
    point = len(int_part) + int(exponent or 0) - (len(all_digits) - len(digits))
    return digits.rstrip("0"), point


def _render_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    k = len(digits)

    if k <= point <= _MAX_DECIMAL_POINT:
        return f"{sign}{digits}{'0' * (point - k)}"
    if 0 < point <= _MAX_DECIMAL_POINT:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if _MIN_DECIMAL_POINT <= point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"

    exponent = point - 1
    exponent_sign = "+" if exponent >= 0 else "-"
    fraction = f".{digits[1:]}" if k > 1 else ""
    return f"{sign}{digits[0]}{fraction}e{exponent_sign}{abs(exponent)}"


def render_value(value: Any) -> str:
    """
    Render a parameter value as text.

    Booleans render as ``"true"``/``"false"``, numbers in the shortest
    round-trip form of JavaScript number-to-string (``1.0`` becomes ``"1"``,
    ``0.00005`` stays ``"0.00005"``, ``1e-7`` becomes ``"1e-7"``), strings
    unchanged. Anything else falls back to ``str()``.

    Args:
        value: Parameter value

    Returns:
        str: Rendered text, not yet encoded
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _render_float(value)
    if isinstance(value, str):
        return value
    return str(value)


def encode_path_segment(text: str) -> str:
    """
    Percent-encode text for use inside a path segment.

    >>> encode_path_segment("a b/c")
    'a%20b%2Fc'
    """
    return quote(text, safe=PATH_SAFE)


def encode_query_component(text: str) -> str:
    """
    Form-encode text for use as a query key or value.

    >>> encode_query_component("b c&d~")
    'b+c%26d%7E'
    """
    # quote_plus never escapes "~"; form encoding does
    return quote_plus(text, safe=QUERY_SAFE).replace("~", "%7E")


__all__ = [
    "render_value",
    "encode_path_segment",
    "encode_query_component",
]
