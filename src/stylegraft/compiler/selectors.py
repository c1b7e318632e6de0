"""Selector resolution across nested rules."""

from __future__ import annotations

from typing import Sequence

__all__ = ["resolve_selectors", "join_selectors"]


def resolve_selectors(
    own: Sequence[str], parents: Sequence[str] = ()
) -> tuple[str, ...]:
    """Combine a rule's own selectors with its inherited selector path.

    At the root the rule's selectors are used as-is. Below the root every
    parent is joined with every child by a descendant space, parent-major:
    ``["p1", "p2"] x ["c1", "c2"]`` gives ``p1 c1, p1 c2, p2 c1, p2 c2``.
    A rule without selectors resolves to nothing.
    """
    if not own:
        return ()
    if not parents:
        return tuple(own)
    return tuple(f"{parent} {child}" for parent in parents for child in own)


def join_selectors(selectors: Sequence[str], separator: str = ",") -> str:
    return separator.join(selectors)
