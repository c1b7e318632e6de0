"""Top-level entry point: ``css(flags?, *rules)``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from stylegraft.compiler.rules import compile_rules
from stylegraft.config import CompilerFlags

__all__ = ["css"]

logger = logging.getLogger(__name__)


def css(*args: Any) -> str:
    """Compile rules to CSS text.

    If the first argument is a mapping or a CompilerFlags it is taken as
    the compiler flags; every remaining argument is a rule.

        >>> css(["h1", {"font-weight": "bold"}])
        'h1{font-weight:bold}'
        >>> css({"pretty-print": True}, ["p", {"margin": 0}])
        'p {\\n  margin: 0;\\n}'
    """
    flags = CompilerFlags()
    rules = args
    if args and isinstance(args[0], CompilerFlags):
        flags, rules = args[0], args[1:]
    elif args and isinstance(args[0], Mapping):
        flags, rules = CompilerFlags.from_mapping(args[0]), args[1:]

    text = compile_rules(rules, flags)

    if flags.output_to:
        path = Path(flags.output_to)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info("Wrote %d characters of CSS to %s", len(text), path)
    return text
