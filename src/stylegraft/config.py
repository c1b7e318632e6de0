"""Compiler flags."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Iterable, Mapping

from stylegraft.errors import ConfigurationError

__all__ = ["CompilerFlags"]


def _names(value: Any) -> Iterable[str]:
    """A single name stands for itself, not for its characters."""
    return (value,) if isinstance(value, str) else value


@dataclass(frozen=True)
class CompilerFlags:
    pretty_print: bool = False
    vendors: tuple[str, ...] = ()
    auto_prefix: frozenset[str] = field(default_factory=frozenset)
    output_to: str | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> CompilerFlags:
        """Build flags from a plain mapping.

        Keys may use hyphens (``pretty-print``) or underscores. Unknown keys
        raise ConfigurationError.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in raw.items():
            name = str(key).lstrip(":").replace("-", "_")
            if name not in known:
                raise ConfigurationError(f"Unknown compiler flag: {key!r}", key=str(key))
            kwargs[name] = value
        if "vendors" in kwargs:
            kwargs["vendors"] = tuple(_names(kwargs["vendors"]))
        if "auto_prefix" in kwargs:
            kwargs["auto_prefix"] = frozenset(_names(kwargs["auto_prefix"]))
        if kwargs.get("output_to") is not None:
            kwargs["output_to"] = str(kwargs["output_to"])
        return cls(**kwargs)
