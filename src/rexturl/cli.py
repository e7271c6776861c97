"""
Command-line interface for rexturl.

Parses URLs from arguments, files or stdin and prints selected components in
one of several output formats.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from rexturl.config import get_config
from rexturl.errors import TemplateError
from rexturl.output import (
    DEFAULT_FIELDS,
    OutputFormat,
    OutputOptions,
    SqlDialect,
    parse_field_list,
    write_records,
)
from rexturl.parsing import URLParser
from rexturl.processing import URLProcessor, collect_inputs
from rexturl.templating import EscapeMode, compile_template

logger = logging.getLogger(__name__)

# Individual field switches, in the order their values are printed
FIELD_FLAGS = (
    "scheme",
    "username",
    "host",
    "port",
    "path",
    "query",
    "fragment",
    "domain",
    "subdomain",
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, with defaults taken from config."""
    config = get_config()
    parser = argparse.ArgumentParser(
        prog="rexturl",
        description="Split URLs into scheme, host, domain, port, path, query and fragment.",
    )
    parser.add_argument(
        "--urls",
        nargs="+",
        default=[],
        metavar="URL",
        help="Input URLs to process (stdin is read when no URLs or files are given).",
    )
    parser.add_argument(
        "--file",
        dest="files",
        action="append",
        type=Path,
        default=[],
        metavar="PATH",
        help="File with one URL per line (may be repeated).",
    )

    fields = parser.add_argument_group("field selection")
    for name in FIELD_FLAGS:
        fields.add_argument(
            f"--{name}", action="store_true", help=f"Output the {name} component."
        )
    fields.add_argument(
        "--fields",
        help="Comma-separated list of fields to output (e.g. domain,path,url).",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        help="Output format (default: plain, or custom when --template is given).",
    )
    output.add_argument(
        "--header", action="store_true", help="Include a header row for tsv/csv."
    )
    output.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")
    output.add_argument(
        "--null-empty",
        default=config.output.null_value,
        help="Value printed for missing fields in plain/tsv/csv output.",
    )
    output.add_argument(
        "--no-newline", action="store_true", help="Suppress the trailing newline."
    )
    output.add_argument("--sort", action="store_true", help="Sort the output.")
    output.add_argument(
        "--unique", action="store_true", help="Remove duplicate entries from the output."
    )
    output.add_argument(
        "--template",
        help="Custom format template, e.g. '{scheme}://{domain}{path}'.",
    )
    output.add_argument(
        "--escape",
        choices=[mode.value for mode in EscapeMode],
        default=EscapeMode.NONE.value,
        help="Escaping applied to values substituted into the template.",
    )
    output.add_argument(
        "--sql-table", default=config.output.sql_table, help="Table name for SQL output."
    )
    output.add_argument(
        "--sql-create-table",
        action="store_true",
        help="Emit a CREATE TABLE statement before the inserts.",
    )
    output.add_argument(
        "--sql-dialect",
        choices=[dialect.value for dialect in SqlDialect],
        default=config.output.sql_dialect,
        help="SQL dialect for column types.",
    )

    parsing = parser.add_argument_group("parsing")
    parsing.add_argument(
        "--default-scheme",
        default=config.parser.default_scheme,
        help="Scheme assumed for inputs without '://' (default: %(default)s).",
    )
    parsing.add_argument(
        "--require-scheme",
        action=argparse.BooleanOptionalAction,
        default=config.parser.require_scheme,
        help="Reject inputs without an explicit scheme.",
    )
    parsing.add_argument(
        "--strict",
        action="store_true",
        help="Exit with a non-zero code if any URL fails to parse.",
    )
    parsing.add_argument(
        "--workers",
        type=int,
        default=config.processing.max_workers,
        help="Worker threads for parsing (default: %(default)s).",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    return parser


def resolve_fields(args: argparse.Namespace) -> tuple[str, ...]:
    """
    Work out which fields to print.

    --fields wins, then the individual field switches, then every field.

    Raises:
        ValueError: If --fields names an unknown field
    """
    if args.fields:
        return parse_field_list(args.fields)

    selected = tuple(name for name in FIELD_FLAGS if getattr(args, name))
    return selected or DEFAULT_FIELDS


def build_output_options(args: argparse.Namespace) -> OutputOptions:
    """
    Translate parsed arguments into output options.

    Raises:
        ValueError: If the field list is invalid
        TemplateError: If the template does not compile
    """
    if args.format:
        fmt = OutputFormat(args.format)
    elif args.template:
        fmt = OutputFormat.CUSTOM
    else:
        fmt = OutputFormat.PLAIN

    template = None
    if fmt is OutputFormat.CUSTOM:
        template = args.template or get_config().output.default_template
        # Compile up front so template errors surface before any input is read
        compile_template(template)

    return OutputOptions(
        format=fmt,
        fields=resolve_fields(args),
        header=args.header,
        pretty=args.pretty,
        null_value=args.null_empty,
        template=template,
        escape=EscapeMode(args.escape),
        sql_table=args.sql_table,
        sql_dialect=SqlDialect(args.sql_dialect),
        sql_create_table=args.sql_create_table,
        no_newline=args.no_newline,
        sort=args.sort,
        unique=args.unique,
    )


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout carries only results."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (sys.argv[1:] if None)
        stdin: Stream read when no URLs or files are given (sys.stdin if None)

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        options = build_output_options(args)
        url_parser = URLParser(
            default_scheme=args.default_scheme, require_scheme=args.require_scheme
        )
    except TemplateError as e:
        print(f"Error: invalid template: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        inputs = collect_inputs(
            args.urls, args.files, stdin if stdin is not None else sys.stdin
        )
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not inputs:
        print(
            "Error: No input URLs provided. Use --urls, --file or pipe input from stdin.",
            file=sys.stderr,
        )
        return 1

    logger.info("Processing %d inputs as %s", len(inputs), options.format.value)
    processor = URLProcessor(parser=url_parser, max_workers=args.workers)
    results = processor.process(inputs)

    failed = 0
    for result in results:
        if not result.ok:
            failed += 1
            print(f"Error parsing URL '{result.raw}': {result.error}", file=sys.stderr)

    records = [result.record for result in results if result.ok]
    try:
        write_records(records, options, sys.stdout)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.strict and failed:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
