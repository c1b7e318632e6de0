"""Unit families: one callable per CSS unit.

A family both builds quantities (``px(12)``), converts them
(``inch(px(96))``) and exposes the arithmetic operators for its unit
(``px.add(1, pt(3))``).
"""

from __future__ import annotations

from stylegraft.units import arithmetic
from stylegraft.units.arithmetic import Operand
from stylegraft.units.model import UNITS, Quantity, Unit, construct, convert

__all__ = [
    "UnitFamily",
    "FAMILIES",
    "px", "inch", "cm", "mm", "pt", "pc",
    "deg", "grad", "rad", "turn",
    "ms", "s",
    "hz", "khz",
    "em", "ex", "ch", "rem", "vw", "vh", "vmin", "vmax", "percent",
]


class UnitFamily:
    """Constructor, converter and arithmetic operators bound to one unit."""

    __slots__ = ("unit",)

    def __init__(self, unit: Unit) -> None:
        self.unit = unit

    def __call__(self, source: Operand) -> Quantity:
        if isinstance(source, Quantity):
            return convert(source, self.unit)
        return construct(source, self.unit)

    def __repr__(self) -> str:
        return f"UnitFamily({self.unit.name!r})"

    def add(self, *operands: Operand) -> Quantity:
        return arithmetic.add(self.unit, *operands)

    def sub(self, *operands: Operand) -> Quantity:
        return arithmetic.sub(self.unit, *operands)

    def mul(self, *operands: Operand) -> Quantity:
        return arithmetic.mul(self.unit, *operands)

    def div(self, *operands: Operand) -> Quantity:
        return arithmetic.div(self.unit, *operands)


FAMILIES: dict[str, UnitFamily] = {name: UnitFamily(unit) for name, unit in UNITS.items()}

px = FAMILIES["px"]
inch = FAMILIES["in"]
cm = FAMILIES["cm"]
mm = FAMILIES["mm"]
pt = FAMILIES["pt"]
pc = FAMILIES["pc"]

deg = FAMILIES["deg"]
grad = FAMILIES["grad"]
rad = FAMILIES["rad"]
turn = FAMILIES["turn"]

ms = FAMILIES["ms"]
s = FAMILIES["s"]

hz = FAMILIES["Hz"]
khz = FAMILIES["kHz"]

em = FAMILIES["em"]
ex = FAMILIES["ex"]
ch = FAMILIES["ch"]
rem = FAMILIES["rem"]
vw = FAMILIES["vw"]
vh = FAMILIES["vh"]
vmin = FAMILIES["vmin"]
vmax = FAMILIES["vmax"]
percent = FAMILIES["%"]
