from stylegraft.units.model import (
    Category,
    Quantity,
    Unit,
    UNITS,
    construct,
    convert,
    format_magnitude,
    lookup_unit,
)
from stylegraft.units.families import (
    FAMILIES,
    UnitFamily,
    ch,
    cm,
    deg,
    em,
    ex,
    grad,
    hz,
    inch,
    khz,
    mm,
    ms,
    pc,
    percent,
    pt,
    px,
    rad,
    rem,
    s,
    turn,
    vh,
    vmax,
    vmin,
    vw,
)
from stylegraft.units.parser import parse_quantity

__all__ = [
    "Category",
    "Quantity",
    "Unit",
    "UNITS",
    "construct",
    "convert",
    "format_magnitude",
    "lookup_unit",
    "parse_quantity",
    "FAMILIES",
    "UnitFamily",
    "px", "inch", "cm", "mm", "pt", "pc",
    "deg", "grad", "rad", "turn",
    "ms", "s",
    "hz", "khz",
    "em", "ex", "ch", "rem", "vw", "vh", "vmin", "vmax", "percent",
]
