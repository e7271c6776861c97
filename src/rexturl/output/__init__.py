"""
Output writers and SQL generation for URL records.
"""

from .formatters import (
    DEFAULT_FIELDS,
    OutputFormat,
    OutputOptions,
    format_records,
    order_records,
    parse_field_list,
    write_records,
)
from .sql import SqlDialect, column_type, generate_create_table, generate_insert

__all__ = [
    "DEFAULT_FIELDS",
    "OutputFormat",
    "OutputOptions",
    "SqlDialect",
    "column_type",
    "format_records",
    "generate_create_table",
    "generate_insert",
    "order_records",
    "parse_field_list",
    "write_records",
]
