"""JSON value handling for confmap.

A config value is whatever ``json.loads`` produces for a document: ``None``,
``bool``, ``int``, ``float``, ``str``, ``list`` or ``dict``. This module owns
parsing config text and the conversions the typed accessors apply, including
the fixed-width narrowing done with numpy.
"""

from __future__ import annotations

import json
import math
from typing import Any, Optional, Union

import numpy as np

ConfigValue = Union[None, bool, int, float, str, list["ConfigValue"], dict[str, "ConfigValue"]]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

INT_WIDTHS = {
    8: np.int8,
    16: np.int16,
    32: np.int32,
    64: np.int64,
}


def _reject_constant(name: str) -> float:
    raise ValueError(f"Non-finite number {name} is not valid JSON")


def _parse_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"Number {text} is out of range")
    return number


def parse_document(text: str) -> dict[str, ConfigValue]:
    """Parse config text into a top-level mapping.

    Raises
    ------
    ValueError
        If the text is not valid JSON, uses non-finite numbers, or its
        top-level value is not an object.
    """
    document = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_float)
    if not isinstance(document, dict):
        raise ValueError(f"Top-level JSON value is {type(document).__name__}, expected an object")
    return document


def is_number(value: Any) -> bool:
    # bool is a subclass of int but never a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_int64(value: Any) -> Optional[int]:
    """Return ``value`` as a signed 64-bit integer, or None.

    Floats are never accepted, even integral ones, and integers outside the
    signed 64-bit range are rejected.
    """
    if not is_number(value) or isinstance(value, float):
        return None
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def narrow_int(value: int, width: int) -> int:
    """Convert a 64-bit integer to ``width`` bits, wrapping on overflow.

    This is lossy: ``narrow_int(300, 8)`` is ``44``.
    """
    try:
        dtype = INT_WIDTHS[width]
    except KeyError:
        raise ValueError(f"Unsupported integer width: {width}") from None
    return int(np.int64(value).astype(dtype))


def as_float64(value: Any) -> Optional[float]:
    if not is_number(value):
        return None
    try:
        return float(value)
    except OverflowError:
        return None


def narrow_float32(value: float) -> float:
    """Round a float to single precision; out-of-range values become +/-inf."""
    with np.errstate(over="ignore"):
        return float(np.float32(value))
