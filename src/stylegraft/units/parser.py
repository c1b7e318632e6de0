"""Parse quantity text such as ``12px``, ``-1.5em`` or ``50%``."""

from __future__ import annotations

import re

from stylegraft.errors import UnitParseError
from stylegraft.units.model import Quantity, lookup_unit

__all__ = ["parse_quantity"]

_QUANTITY_RE = re.compile(
    r"""
    ^\s*
    (?P<magnitude>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)   # number
    (?P<unit>[a-zA-Z]+|%)                                     # unit suffix
    \s*$
    """,
    re.VERBOSE,
)


def parse_quantity(text: str) -> Quantity:
    """Parse *text* into a Quantity.

    Raises UnitParseError if the text is not a number followed by a known
    unit suffix.
    """
    match = _QUANTITY_RE.match(text)
    if match is None:
        raise UnitParseError(f"Invalid quantity: {text!r}", text=text)
    unit = lookup_unit(match.group("unit"))
    if unit is None:
        raise UnitParseError(
            f"Unknown unit {match.group('unit')!r} in {text!r}", text=text
        )
    raw = match.group("magnitude")
    if any(c in raw for c in ".eE"):
        magnitude: float = float(raw)
    else:
        magnitude = int(raw)
    return Quantity(magnitude, unit)
