"""Unit model: categories, unit tags, quantities and the conversion table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from stylegraft.errors import ConversionError

__all__ = [
    "Category",
    "Unit",
    "Quantity",
    "UNITS",
    "lookup_unit",
    "construct",
    "convert",
    "format_magnitude",
]

logger = logging.getLogger(__name__)


class Category(Enum):
    """A group of units that convert freely among themselves.

    ``RELATIVE`` units (em, rem, %, ...) depend on layout context and have
    no base unit, so each of them only converts to itself.
    """

    ABSOLUTE = "px"
    ANGLE = "deg"
    TIME = "ms"
    FREQUENCY = "Hz"
    RELATIVE = ""

    @property
    def base(self) -> str | None:
        return self.value or None


@dataclass(frozen=True)
class Unit:
    """A CSS unit tag.

    Attributes:
        name: The CSS suffix, e.g. ``px`` or ``kHz``.
        category: The category this unit belongs to.
        factor: How many base units one of this unit is worth, or ``None``
            for units without a base.
    """

    name: str
    category: Category
    factor: float | None = None

    def __str__(self) -> str:
        return self.name


def _table(category: Category, factors: dict[str, float | None]) -> dict[str, Unit]:
    return {name: Unit(name, category, factor) for name, factor in factors.items()}


UNITS: dict[str, Unit] = {
    **_table(Category.ABSOLUTE, {
        "px": 1,
        "in": 96,
        "cm": 37.795275591,
        "mm": 3.7795275591,
        "pt": 4 / 3,
        "pc": 16,
    }),
    **_table(Category.ANGLE, {
        "deg": 1,
        "grad": 0.9,
        "rad": 57.29577951308232,
        "turn": 360,
    }),
    **_table(Category.TIME, {"ms": 1, "s": 1000}),
    **_table(Category.FREQUENCY, {"Hz": 1, "kHz": 1000}),
    **_table(Category.RELATIVE, {
        "em": None,
        "ex": None,
        "ch": None,
        "rem": None,
        "vw": None,
        "vh": None,
        "vmin": None,
        "vmax": None,
        "%": None,
    }),
}

_UNITS_FOLDED = {name.lower(): unit for name, unit in UNITS.items()}


def lookup_unit(name: str) -> Unit | None:
    """Return the unit for a CSS suffix, matching case-insensitively as a fallback."""
    return UNITS.get(name) or _UNITS_FOLDED.get(name.lower())


def format_magnitude(value: float) -> str:
    """Format a magnitude for CSS output.

    Integral values lose their fractional part; everything else is rounded
    to ten fractional digits with trailing zeros stripped.
    """
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    text = f"{value:.10f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class Quantity:
    """A magnitude tagged with a unit, e.g. ``Quantity(12, UNITS["px"])``."""

    magnitude: float
    unit: Unit

    @property
    def category(self) -> Category:
        return self.unit.category

    def __float__(self) -> float:
        return float(self.magnitude)

    def __str__(self) -> str:
        return f"{format_magnitude(self.magnitude)}{self.unit.name}"


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def construct(magnitude: float, unit: Unit) -> Quantity:
    """Build a Quantity from a plain number; no conversion takes place."""
    if not _is_number(magnitude):
        raise TypeError(
            f"Cannot build a {unit.name} quantity from {type(magnitude).__name__}"
        )
    return Quantity(magnitude, unit)


def convert(quantity: Quantity, unit: Unit) -> Quantity:
    """Convert *quantity* to *unit*, returning a new Quantity.

    Raises ConversionError when the units belong to different categories or
    when either unit has no base to convert through.
    """
    source = quantity.unit
    if source == unit:
        return Quantity(quantity.magnitude, unit)
    if source.category is not unit.category or unit.category.base is None:
        raise ConversionError(
            f"Cannot convert {source.name} ({source.category.name.lower()}) "
            f"to {unit.name} ({unit.category.name.lower()})",
            source=source.name,
            target=unit.name,
        )
    magnitude = quantity.magnitude * source.factor / unit.factor
    logger.debug(
        "Converted %s to %s%s via %s", quantity, magnitude, unit.name, unit.category.base
    )
    return Quantity(magnitude, unit)
