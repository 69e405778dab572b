"""
Numeric coercion helpers

Target fields and end values may arrive as ints, floats or numeric
strings ("12", "12.5px"). These helpers coerce them once, at capture
time, with the same rules browsers use:

- parse_float(): leading numeric prefix, like JavaScript parseFloat()
- to_number(): whole-value conversion, like JavaScript Number()

Both return NaN instead of raising. NaN is a legal field value; it
propagates through interpolation untouched.
"""

import math
import re
from numbers import Real

NAN = float("nan")

_DECIMAL = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_FLOAT_PREFIX = re.compile(rf"\s*({_DECIMAL}|[+-]?Infinity)")
_FULL_NUMBER = re.compile(rf"(?:{_DECIMAL}|[+-]?Infinity)")


def _is_real(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _parse_literal(text: str) -> float:
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def parse_float(value) -> float:
    """
    Parse the leading number of value.

    Examples:
        parse_float(3) -> 3.0
        parse_float("12.5px") -> 12.5
        parse_float("abc") -> nan
        parse_float(None) -> nan
    """
    if _is_real(value):
        return float(value)
    if not isinstance(value, str):
        return NAN
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return NAN
    return _parse_literal(match.group(1))


def to_number(value) -> float:
    """
    Convert the whole value to a float.

    Blank strings count as 0 (like Number("")). None and anything that is
    not entirely numeric becomes NaN.
    """
    if _is_real(value):
        return float(value)
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if not isinstance(value, str):
        return NAN
    text = value.strip()
    if not text:
        return 0.0
    if _FULL_NUMBER.fullmatch(text) is None:
        return NAN
    return _parse_literal(text)


def coerce_or_zero(value) -> float:
    """parse_float() with NaN mapped to 0.0 (used for captured start values)."""
    number = parse_float(value)
    return 0.0 if math.isnan(number) else number
