"""
Output writers for URL records.

Renders batches of records as plain text, TSV/CSV, JSON, JSON Lines, custom
templates or SQL statements.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, TextIO, Tuple

import polars as pl

from rexturl.parsing import FIELD_NAMES, URLRecord
from rexturl.templating import EscapeMode, Template, compile_template

from .sql import SqlDialect, generate_create_table, generate_insert

logger = logging.getLogger(__name__)

# Fields used when nothing is selected: every field except the url echo and
# the hostname alias
DEFAULT_FIELDS: Tuple[str, ...] = tuple(
    name for name in FIELD_NAMES if name not in ("url", "hostname")
)


class OutputFormat(str, Enum):
    PLAIN = "plain"
    TSV = "tsv"
    CSV = "csv"
    JSON = "json"
    JSONL = "jsonl"
    CUSTOM = "custom"
    SQL = "sql"


@dataclass(frozen=True)
class OutputOptions:
    """
    Settings for rendering a batch of records.

    Attributes:
        format: Output format
        fields: Fields to emit (ignored by the custom format)
        header: Emit a header row for TSV/CSV
        pretty: Indent JSON output
        null_value: Placeholder for missing fields in plain/TSV/CSV
        template: Template text for the custom format
        escape: Escape mode for the custom format
        sql_table: Table name for SQL output
        sql_dialect: Dialect for CREATE TABLE column types
        sql_create_table: Emit a CREATE TABLE statement before the inserts
        no_newline: Drop the final trailing newline
        sort: Order records by their rendered key
        unique: Drop records whose rendered key was already emitted
    """

    format: OutputFormat = OutputFormat.PLAIN
    fields: Tuple[str, ...] = DEFAULT_FIELDS
    header: bool = False
    pretty: bool = False
    null_value: str = "\\N"
    template: Optional[str] = None
    escape: EscapeMode = EscapeMode.NONE
    sql_table: str = "urls"
    sql_dialect: SqlDialect = SqlDialect.POSTGRES
    sql_create_table: bool = False
    no_newline: bool = False
    sort: bool = False
    unique: bool = False


def parse_field_list(text: str) -> Tuple[str, ...]:
    """
    Parse a comma-separated field list, dropping blanks and duplicates.

    Raises:
        ValueError: If a field name is unknown or the list is empty
    """
    fields: List[str] = []
    for name in (part.strip() for part in text.split(",")):
        if not name:
            continue
        if name not in FIELD_NAMES:
            raise ValueError(
                f"Unknown field '{name}'. Valid fields: {', '.join(FIELD_NAMES)}"
            )
        if name not in fields:
            fields.append(name)

    if not fields:
        raise ValueError("Field list is empty")
    return tuple(fields)


def _select(record: URLRecord, fields: Sequence[str], null_value: str) -> List[str]:
    values = []
    for field in fields:
        value = record.get_field(field)
        values.append(null_value if value is None else value)
    return values


def _record_key(options: OutputOptions, template: Optional[Template]) -> Callable[[URLRecord], object]:
    if template is not None:
        return lambda record: template.render(record, options.escape)
    return lambda record: tuple(record.get_field(f) or "" for f in options.fields)


def order_records(
    records: Sequence[URLRecord],
    options: OutputOptions,
    template: Optional[Template] = None,
) -> List[URLRecord]:
    """
    Apply sort and unique options.

    Records are keyed by their template output for the custom format and by
    the tuple of selected field values otherwise. Unique keeps the first
    occurrence of each key.
    """
    result = list(records)
    if not (options.sort or options.unique):
        return result

    key = _record_key(options, template)
    if options.unique:
        seen = set()
        deduped = []
        for record in result:
            k = key(record)
            if k in seen:
                continue
            seen.add(k)
            deduped.append(record)
        result = deduped
    if options.sort:
        result.sort(key=key)
    return result


def _format_plain(records: Sequence[URLRecord], options: OutputOptions) -> str:
    return "".join(
        " ".join(_select(record, options.fields, options.null_value)) + "\n"
        for record in records
    )


def _format_tabular(
    records: Sequence[URLRecord], options: OutputOptions, separator: str
) -> str:
    df = pl.DataFrame(
        {field: [record.get_field(field) for record in records] for field in options.fields},
        schema={field: pl.Utf8 for field in options.fields},
    )
    # TSV is plain concatenation; only CSV quotes values
    return df.write_csv(
        separator=separator,
        include_header=options.header,
        null_value=options.null_value,
        quote_style="never" if separator == "\t" else "necessary",
    )


def _format_json(records: Sequence[URLRecord], options: OutputOptions) -> str:
    payload = {"urls": [record.to_dict(options.fields) for record in records]}
    if options.pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False) + "\n"


def _format_jsonl(records: Sequence[URLRecord], options: OutputOptions) -> str:
    return "".join(
        json.dumps(record.to_dict(options.fields), separators=(",", ":"), ensure_ascii=False)
        + "\n"
        for record in records
    )


def _format_custom(
    records: Sequence[URLRecord], options: OutputOptions, template: Template
) -> str:
    return "".join(template.render(record, options.escape) + "\n" for record in records)


def _format_sql(records: Sequence[URLRecord], options: OutputOptions) -> str:
    if not options.fields:
        raise ValueError("SQL format requires at least one field to be specified")

    lines = []
    if options.sql_create_table:
        lines.append(generate_create_table(options.sql_table, options.fields, options.sql_dialect))
    for record in records:
        lines.append(generate_insert(record, options.fields, options.sql_table))
    return "".join(line + "\n" for line in lines)


_SIMPLE_FORMATTERS: Dict[OutputFormat, Callable[[Sequence[URLRecord], OutputOptions], str]] = {
    OutputFormat.PLAIN: _format_plain,
    OutputFormat.TSV: lambda records, options: _format_tabular(records, options, "\t"),
    OutputFormat.CSV: lambda records, options: _format_tabular(records, options, ","),
    OutputFormat.JSON: _format_json,
    OutputFormat.JSONL: _format_jsonl,
    OutputFormat.SQL: _format_sql,
}


def format_records(records: Sequence[URLRecord], options: OutputOptions) -> str:
    """
    Render records in the configured output format.

    Args:
        records: Records in input order
        options: Output settings

    Returns:
        Rendered text, one line per record for line-oriented formats

    Raises:
        TemplateError: If the custom template does not compile
        ValueError: If the options are inconsistent
    """
    template = None
    if options.format is OutputFormat.CUSTOM:
        if not options.template:
            raise ValueError("Custom format requires a template")
        template = compile_template(options.template)

    ordered = order_records(records, options, template)
    logger.debug(
        "Formatting %d records as %s (%d before sort/unique)",
        len(ordered),
        options.format.value,
        len(records),
    )

    if template is not None:
        text = _format_custom(ordered, options, template)
    else:
        text = _SIMPLE_FORMATTERS[options.format](ordered, options)

    if options.no_newline and text.endswith("\n"):
        text = text[:-1]
    return text


def write_records(
    records: Sequence[URLRecord], options: OutputOptions, stream: TextIO
) -> None:
    """Render records and write them to ``stream``."""
    stream.write(format_records(records, options))
    stream.flush()
