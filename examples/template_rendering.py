"""
Template rendering example.

Shows placeholder templates, escape modes and the output writers.
"""

import sys

from rexturl.output import OutputFormat, OutputOptions, write_records
from rexturl.parsing import build_record
from rexturl.templating import EscapeMode, compile_template


def main():
    """Run template rendering example."""
    print("=" * 60)
    print("rexturl: Template Rendering Example")
    print("=" * 60)

    records = [
        build_record("https://www.example.com/path with spaces"),
        build_record("http://api.example.co.uk:8080/v1?key=it's"),
    ]

    # Example 1: Placeholder forms
    print("\n1. Placeholders")
    print("-" * 60)

    template = compile_template("{scheme}://{domain}{port?:}{port}{path}{query?  [has query]}")
    print(f"Fields used: {', '.join(template.fields)}")
    for record in records:
        print(f"  {template.render(record)}")

    defaults = compile_template("{subdomain:none} {port:80} {fragment!  (no fragment)}")
    for record in records:
        print(f"  {defaults.render(record)}")

    # Example 2: Escape modes
    print("\n\n2. Escape Modes")
    print("-" * 60)

    url_template = compile_template("{url}")
    for mode in EscapeMode:
        print(f"  {mode.value:<6} {url_template.render(records[1], mode)}")

    # Example 3: Output formats
    print("\n\n3. Output Formats")
    print("-" * 60)

    fields = ("subdomain", "domain", "port", "path")
    for fmt in (OutputFormat.TSV, OutputFormat.JSONL, OutputFormat.SQL):
        print(f"\n[{fmt.value}]")
        options = OutputOptions(format=fmt, fields=fields, header=True, sql_create_table=True)
        write_records(records, options, sys.stdout)

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
