"""Lenient typed conversions of element values.

Every function accepts an element or ``None`` (the result of a missed lookup)
and never raises: text that does not parse degrades to the type's default.

Examples:
    >>> as_int(root["count"])
    3
    >>> as_int(root["missing"])
    0
"""

import re
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .element import XMLElement

# (minimum, maximum) for the fixed-width integer views
INT8_RANGE = (-(2 ** 7), 2 ** 7 - 1)
UINT8_RANGE = (0, 2 ** 8 - 1)
INT16_RANGE = (-(2 ** 15), 2 ** 15 - 1)
UINT16_RANGE = (0, 2 ** 16 - 1)
INT32_RANGE = (-(2 ** 31), 2 ** 31 - 1)
UINT32_RANGE = (0, 2 ** 32 - 1)
INT64_RANGE = (-(2 ** 63), 2 ** 63 - 1)
UINT64_RANGE = (0, 2 ** 64 - 1)

# Optional sign followed by ASCII digits only
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def as_string(element: Optional["XMLElement"]) -> str:
    """Element value, or an empty string when there is no value."""
    if element is None or element.value is None:
        return ""
    return element.value


def as_int(element: Optional["XMLElement"]) -> int:
    """Element value parsed as an integer (0 when it does not parse)."""
    text = as_string(element)
    if INTEGER_PATTERN.fullmatch(text) is None:
        return 0
    return int(text)


def as_bool(element: Optional["XMLElement"]) -> bool:
    """True when the value is "true" (any case) or parses as the integer 1."""
    text = as_string(element)
    if text.lower() == "true":
        return True
    return as_int(element) == 1


def as_float(element: Optional["XMLElement"]) -> float:
    """Element value parsed as a float (0.0 when it does not parse)."""
    try:
        return float(as_string(element))
    except ValueError:
        return 0.0


def as_decimal(element: Optional["XMLElement"]) -> Decimal:
    """Element value parsed as a Decimal (Decimal(0) when it does not parse)."""
    try:
        return Decimal(as_string(element))
    except InvalidOperation:
        return Decimal(0)


def as_sized_int(element: Optional["XMLElement"], bounds: tuple) -> int:
    """Integer value restricted to ``bounds``; out-of-range values give 0."""
    number = as_int(element)
    minimum, maximum = bounds
    if minimum <= number <= maximum:
        return number
    return 0
