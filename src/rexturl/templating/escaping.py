"""
Output-format escaping for substituted template values.
"""

import json
from enum import Enum


class EscapeMode(str, Enum):
    """Target syntax for substituted values."""

    NONE = "none"
    SHELL = "shell"
    CSV = "csv"
    JSON = "json"
    SQL = "sql"


def shell_escape(value: str) -> str:
    """Single-quote for POSIX shells, splicing embedded quotes as '\\''."""
    return "'" + value.replace("'", "'\\''") + "'"


def csv_escape(value: str) -> str:
    """Quote only when the value holds a comma, double quote or newline."""
    if "," in value or '"' in value or "\n" in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def json_escape(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def sql_escape(value: str) -> str:
    """Single-quoted SQL string literal."""
    return "'" + value.replace("'", "''") + "'"


_ESCAPERS = {
    EscapeMode.SHELL: shell_escape,
    EscapeMode.CSV: csv_escape,
    EscapeMode.JSON: json_escape,
    EscapeMode.SQL: sql_escape,
}


def escape_value(value: str, mode: EscapeMode | str = EscapeMode.NONE) -> str:
    """
    Escape a value for the given mode.

    Args:
        value: Field value to escape
        mode: EscapeMode or its string identifier

    Returns:
        Escaped value

    Raises:
        ValueError: If mode is not a known escape mode
    """
    mode = EscapeMode(mode)
    escaper = _ESCAPERS.get(mode)
    if escaper is None:
        return value
    return escaper(value)
