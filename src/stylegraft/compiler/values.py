"""CSS values: classification of authored values and rendering to text.

Authored values are classified once by :func:`to_value` into one of
``Literal``, ``Quantity``, ``SpaceList`` or ``CommaList``. List separators
alternate with depth: the outermost list of a declaration is space
separated, a list inside it is comma separated, a list inside that is
space separated again, and so on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from stylegraft.units.model import Quantity

__all__ = ["Literal", "SpaceList", "CommaList", "Value", "to_value", "render_value"]


@dataclass(frozen=True)
class Literal:
    """A string or number rendered verbatim."""

    value: str | int | float


@dataclass(frozen=True)
class SpaceList:
    items: tuple["Value", ...]


@dataclass(frozen=True)
class CommaList:
    items: tuple["Value", ...]


Value = Union[Literal, Quantity, SpaceList, CommaList]


def to_value(raw: Any, depth: int = 0) -> Value:
    """Classify an authored value.

    Lists and tuples become SpaceList at even depth and CommaList at odd
    depth. Anything that is not a list or a Quantity is a Literal.
    """
    if isinstance(raw, (Literal, Quantity, SpaceList, CommaList)):
        return raw
    if isinstance(raw, (list, tuple)):
        items = tuple(to_value(item, depth + 1) for item in raw)
        return CommaList(items) if depth % 2 else SpaceList(items)
    return Literal(raw)


def render_value(value: Value) -> str:
    """Render a classified value to CSS text."""
    if isinstance(value, Quantity):
        return str(value)
    if isinstance(value, SpaceList):
        return " ".join(render_value(item) for item in value.items)
    if isinstance(value, CommaList):
        return ",".join(render_value(item) for item in value.items)
    return str(value.value)
