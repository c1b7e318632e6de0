"""stylegraft: compile nested Python data structures into CSS."""

__version__ = "0.1.0"

from stylegraft.api import css  # noqa: E402
from stylegraft.config import CompilerFlags  # noqa: E402
from stylegraft.compiler import compile_rules  # noqa: E402
from stylegraft.errors import (  # noqa: E402
    ArityError,
    ConfigurationError,
    ConversionError,
    StylegraftError,
    UnitParseError,
)

__all__ = [
    "__version__",
    "css",
    "compile_rules",
    "CompilerFlags",
    "StylegraftError",
    "ConversionError",
    "ArityError",
    "UnitParseError",
    "ConfigurationError",
]
