"""Declaration compilation: nested property maps to ``prop:value`` pairs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Union

from stylegraft.compiler.values import Value, render_value, to_value

__all__ = [
    "DeclarationBlock",
    "parse_declarations",
    "compile_declarations",
    "prefix_declarations",
    "join_declarations",
]


@dataclass(frozen=True)
class DeclarationBlock:
    """An ordered declaration map.

    Entry values are either classified values or nested DeclarationBlocks,
    which prefix their keys with the enclosing key and a hyphen.
    """

    entries: tuple[tuple[Any, Union[Value, "DeclarationBlock"]], ...]


def parse_declarations(raw: Mapping[Any, Any]) -> DeclarationBlock:
    """Classify an authored declaration dict, recursing into nested dicts."""
    entries = []
    for key, value in raw.items():
        if isinstance(value, DeclarationBlock):
            entries.append((key, value))
        elif isinstance(value, Mapping):
            entries.append((key, parse_declarations(value)))
        else:
            entries.append((key, to_value(value)))
    return DeclarationBlock(tuple(entries))


def _key_text(key: Any) -> str:
    return key if isinstance(key, str) else str(key)


def compile_declarations(
    block: DeclarationBlock, prefix: str = ""
) -> list[tuple[str, str]]:
    """Flatten *block* into ``(property, value)`` pairs in entry order.

    Keys are not validated and duplicate property names are all kept.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in block.entries:
        name = f"{prefix}-{_key_text(key)}" if prefix else _key_text(key)
        if isinstance(value, DeclarationBlock):
            pairs.extend(compile_declarations(value, name))
        else:
            pairs.append((name, render_value(value)))
    return pairs


def prefix_declarations(
    pairs: Iterable[tuple[str, str]],
    vendors: Iterable[str],
    properties: Iterable[str],
) -> list[tuple[str, str]]:
    """Emit ``-vendor-property`` copies ahead of each auto-prefixed property."""
    vendors = tuple(vendors)
    properties = frozenset(properties)
    if not vendors or not properties:
        return list(pairs)
    out: list[tuple[str, str]] = []
    for name, value in pairs:
        if name in properties:
            out.extend((f"-{vendor}-{name}", value) for vendor in vendors)
        out.append((name, value))
    return out


def join_declarations(
    pairs: Iterable[tuple[str, str]],
    separator: str = ";",
    assign: str = ":",
    indent: str = "",
) -> str:
    return separator.join(f"{indent}{name}{assign}{value}" for name, value in pairs)
