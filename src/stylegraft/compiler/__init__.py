from stylegraft.compiler.values import (
    CommaList,
    Literal,
    SpaceList,
    Value,
    render_value,
    to_value,
)
from stylegraft.compiler.declarations import (
    DeclarationBlock,
    compile_declarations,
    join_declarations,
    parse_declarations,
    prefix_declarations,
)
from stylegraft.compiler.selectors import join_selectors, resolve_selectors
from stylegraft.compiler.rules import (
    MINIFIED,
    PRETTY,
    Format,
    Rule,
    compile_rules,
    iter_blocks,
    parse_rule,
)

compile = compile_rules

__all__ = [
    "CommaList",
    "Literal",
    "SpaceList",
    "Value",
    "render_value",
    "to_value",
    "DeclarationBlock",
    "compile_declarations",
    "join_declarations",
    "parse_declarations",
    "prefix_declarations",
    "join_selectors",
    "resolve_selectors",
    "MINIFIED",
    "PRETTY",
    "Format",
    "Rule",
    "compile",
    "compile_rules",
    "iter_blocks",
    "parse_rule",
]
