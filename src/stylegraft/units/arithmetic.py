"""Variadic unit arithmetic.

Every operator takes a result unit and any number of operands (plain
numbers or Quantities). Operands are normalized to the result unit and then
folded left to right, so ``div(px, 2, 4)`` is ``2 / 4``.
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import Callable, Union

from stylegraft.errors import ArityError
from stylegraft.units.model import Quantity, Unit, construct, convert

__all__ = ["Operand", "normalize", "add", "sub", "mul", "div"]

Operand = Union[int, float, Quantity]


def normalize(operand: Operand, unit: Unit) -> float:
    """Return the magnitude of *operand* expressed in *unit*.

    Plain numbers are taken to already be in *unit*.
    """
    if isinstance(operand, Quantity):
        return convert(operand, unit).magnitude
    return construct(operand, unit).magnitude


def _fold(
    name: str, op: Callable[[float, float], float], unit: Unit, operands: tuple[Operand, ...]
) -> Quantity:
    if not operands:
        raise ArityError(
            f"{unit.name} {name} requires at least one operand", operation=name
        )
    magnitudes = [normalize(operand, unit) for operand in operands]
    return Quantity(reduce(op, magnitudes), unit)


def add(unit: Unit, *operands: Operand) -> Quantity:
    return _fold("add", operator.add, unit, operands)


def sub(unit: Unit, *operands: Operand) -> Quantity:
    return _fold("sub", operator.sub, unit, operands)


def mul(unit: Unit, *operands: Operand) -> Quantity:
    return _fold("mul", operator.mul, unit, operands)


def div(unit: Unit, *operands: Operand) -> Quantity:
    return _fold("div", operator.truediv, unit, operands)
