"""Resource quantity parsing for CPU and memory values.

Parses Kubernetes quantity strings into plain floats in base units:
- CPU: cores ("250m" -> 0.25)
- Memory: bytes ("128Mi" -> 134217728.0)

Unlike lenient display helpers, parse failures raise ``QuantityParseError``
so callers can decide to log and skip the affected value.
"""

from __future__ import annotations

import re

from kubeinspect.errors import QuantityParseError

# Module-level constants to avoid re-creating on every function call.
_BINARY_MULTIPLIERS: dict[str, float] = {
    "Ki": 1024.0,
    "Mi": 1024.0**2,
    "Gi": 1024.0**3,
    "Ti": 1024.0**4,
    "Pi": 1024.0**5,
    "Ei": 1024.0**6,
}

_DECIMAL_MULTIPLIERS: dict[str, float] = {
    "n": 1e-9,
    "u": 1e-6,
    "m": 1e-3,
    "": 1.0,
    "k": 1e3,
    "M": 1e6,
    "G": 1e9,
    "T": 1e12,
    "P": 1e15,
    "E": 1e18,
}

# Exponent suffixes are tried first so "1E3" is not read as exa followed by garbage.
_QUANTITY_PATTERN = re.compile(
    r"^(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+))"
    r"(?P<suffix>[eE][+-]?\d+|Ki|Mi|Gi|Ti|Pi|Ei|[numkMGTPE])?$"
)


def parse_quantity(quantity: str) -> float:
    """Parse a Kubernetes quantity string to a float in base units.

    Handles the three suffix families Kubernetes accepts:
    - Binary SI: "512Mi" -> 536870912.0
    - Decimal SI: "100m" -> 0.1, "2k" -> 2000.0
    - Decimal exponent: "1e3" -> 1000.0

    Args:
        quantity: Quantity string (e.g., "128Mi", "250m", "2").

    Returns:
        The quantity as a float.

    Raises:
        QuantityParseError: If the string is empty or not a valid quantity.
    """
    if quantity is None:
        raise QuantityParseError("quantity is empty")
    text = str(quantity).strip()
    if not text:
        raise QuantityParseError("quantity is empty")

    match = _QUANTITY_PATTERN.match(text)
    if match is None:
        raise QuantityParseError(f"quantities must match the regular expression: {text!r}")

    number = float(match.group("number"))
    suffix = match.group("suffix") or ""

    if suffix in _BINARY_MULTIPLIERS:
        return number * _BINARY_MULTIPLIERS[suffix]
    if suffix in _DECIMAL_MULTIPLIERS:
        return number * _DECIMAL_MULTIPLIERS[suffix]
    # Decimal exponent, e.g. "e3" or "E-2"
    return number * 10 ** int(suffix[1:])


def parse_optional_quantity(quantity: str | None) -> float | None:
    """Parse a quantity that may be absent.

    Args:
        quantity: Quantity string or None.

    Returns:
        Parsed value, or None when the input is None or blank.

    Raises:
        QuantityParseError: If a non-blank value is not a valid quantity.
    """
    if quantity is None or not str(quantity).strip():
        return None
    return parse_quantity(quantity)


__all__ = [
    "parse_optional_quantity",
    "parse_quantity",
]
