"""
Template rendering for URL records.

Compiles placeholder templates once and renders them with output-specific
escaping.
"""

from .engine import (
    Literal,
    Placeholder,
    PlaceholderKind,
    Template,
    compile_template,
    render,
)
from .escaping import EscapeMode, escape_value

__all__ = [
    "EscapeMode",
    "Literal",
    "Placeholder",
    "PlaceholderKind",
    "Template",
    "compile_template",
    "escape_value",
    "render",
]
