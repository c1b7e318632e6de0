"""Rule compilation: nested rule trees to CSS text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Sequence, Union

from stylegraft.compiler.declarations import (
    DeclarationBlock,
    compile_declarations,
    join_declarations,
    parse_declarations,
    prefix_declarations,
)
from stylegraft.compiler.selectors import join_selectors, resolve_selectors
from stylegraft.config import CompilerFlags

__all__ = ["Rule", "Format", "MINIFIED", "PRETTY", "parse_rule", "iter_blocks", "compile_rules"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A rule node: its own selectors followed by declarations and child rules.

    A rule with no selectors renders to nothing, children included.
    """

    selectors: tuple[str, ...]
    body: tuple[Union[DeclarationBlock, "Rule"], ...] = ()


@dataclass(frozen=True)
class Format:
    """Separators used to lay out a rule block."""

    selector_separator: str = ","
    open: str = "{"
    indent: str = ""
    assign: str = ":"
    declaration_separator: str = ";"
    close: str = "}"
    block_separator: str = ""

    def block(self, selectors: Sequence[str], pairs: Sequence[tuple[str, str]]) -> str:
        body = join_declarations(
            pairs,
            separator=self.declaration_separator,
            assign=self.assign,
            indent=self.indent,
        )
        return f"{join_selectors(selectors, self.selector_separator)}{self.open}{body}{self.close}"


MINIFIED = Format()

PRETTY = Format(
    selector_separator=",\n",
    open=" {\n",
    indent="  ",
    assign=": ",
    declaration_separator=";\n",
    close=";\n}",
    block_separator="\n\n",
)


def _is_atomic(element: Any) -> bool:
    return not isinstance(element, (list, tuple, Mapping, Rule, DeclarationBlock))


def parse_rule(raw: Any) -> Rule:
    """Classify an authored rule (a list) into a Rule.

    The leading run of atomic elements are the selectors. After that, dicts
    are declaration maps and lists are child rules; stray atomic elements
    are ignored.
    """
    if isinstance(raw, Rule):
        return raw
    if not isinstance(raw, (list, tuple)):
        logger.warning("Ignoring %r: a rule must be a list", raw)
        return Rule(())

    elements = list(raw)
    count = 0
    while count < len(elements) and _is_atomic(elements[count]):
        count += 1
    selectors = tuple(str(element) for element in elements[:count])
    if not selectors:
        return Rule(())

    body: list[DeclarationBlock | Rule] = []
    for element in elements[count:]:
        if isinstance(element, DeclarationBlock):
            body.append(element)
        elif isinstance(element, Mapping):
            body.append(parse_declarations(element))
        elif isinstance(element, (list, tuple, Rule)):
            body.append(parse_rule(element))
        else:
            logger.warning(
                "Ignoring %r after the selectors of rule %s", element, ",".join(selectors)
            )
    return Rule(selectors, tuple(body))


def iter_blocks(
    rule: Rule,
    parents: Sequence[str] = (),
    flags: CompilerFlags | None = None,
    fmt: Format = MINIFIED,
) -> Iterator[str]:
    """Yield the rendered blocks of *rule* and its descendants, depth first."""
    selectors = resolve_selectors(rule.selectors, parents)
    if not selectors:
        return

    pairs: list[tuple[str, str]] = []
    children: list[Rule] = []
    for item in rule.body:
        if isinstance(item, DeclarationBlock):
            pairs.extend(compile_declarations(item))
        else:
            children.append(item)

    if flags is not None:
        pairs = prefix_declarations(pairs, flags.vendors, flags.auto_prefix)
    if pairs:
        yield fmt.block(selectors, pairs)

    for child in children:
        yield from iter_blocks(child, selectors, flags, fmt)


def compile_rules(rules: Iterable[Any], flags: CompilerFlags | None = None) -> str:
    """Compile authored rules to CSS text.

    Without flags the output is minified: blocks are concatenated with no
    separator.
    """
    fmt = PRETTY if flags is not None and flags.pretty_print else MINIFIED
    blocks: list[str] = []
    for raw in rules:
        blocks.extend(iter_blocks(parse_rule(raw), flags=flags, fmt=fmt))
    logger.debug("Compiled %d rule block(s)", len(blocks))
    return fmt.block_separator.join(blocks)
