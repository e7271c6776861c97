"""
SQL statement generation for URL records.

Column type tables per dialect plus CREATE TABLE / INSERT rendering.
"""

from enum import Enum
from typing import Dict, Sequence

from rexturl.parsing import URLRecord
from rexturl.templating.escaping import sql_escape


class SqlDialect(str, Enum):
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"
    GENERIC = "generic"


_HOST_COLUMN = "VARCHAR(253)"

POSTGRES_TYPES: Dict[str, str] = {
    "url": "VARCHAR(2048)",
    "scheme": "VARCHAR(32)",
    "username": "VARCHAR(255)",
    "host": _HOST_COLUMN,
    "hostname": _HOST_COLUMN,
    "subdomain": _HOST_COLUMN,
    "domain": _HOST_COLUMN,
    "port": "INTEGER",
    "path": "TEXT",
    "query": "TEXT",
    "fragment": "VARCHAR(255)",
}

MYSQL_TYPES: Dict[str, str] = {**POSTGRES_TYPES, "port": "INT"}

# SQLite and the generic dialect only distinguish the integer port
SIMPLE_TYPES: Dict[str, str] = {"port": "INTEGER"}

COLUMN_TYPES: Dict[SqlDialect, Dict[str, str]] = {
    SqlDialect.POSTGRES: POSTGRES_TYPES,
    SqlDialect.MYSQL: MYSQL_TYPES,
    SqlDialect.SQLITE: SIMPLE_TYPES,
    SqlDialect.GENERIC: SIMPLE_TYPES,
}

PRIMARY_KEY_COLUMNS: Dict[SqlDialect, str] = {
    SqlDialect.POSTGRES: "id SERIAL PRIMARY KEY",
    SqlDialect.MYSQL: "id INT AUTO_INCREMENT PRIMARY KEY",
    SqlDialect.SQLITE: "id INTEGER PRIMARY KEY AUTOINCREMENT",
    SqlDialect.GENERIC: "id INTEGER PRIMARY KEY",
}


def column_type(field: str, dialect: SqlDialect | str) -> str:
    """
    Get the column type for a field in a dialect.

    Raises:
        ValueError: If the dialect is unknown
    """
    return COLUMN_TYPES[SqlDialect(dialect)].get(field, "TEXT")


def generate_create_table(
    table_name: str, fields: Sequence[str], dialect: SqlDialect | str
) -> str:
    """Build a CREATE TABLE IF NOT EXISTS statement for the selected fields."""
    dialect = SqlDialect(dialect)
    lines = [f"CREATE TABLE IF NOT EXISTS {table_name} ("]
    lines.append(f"    {PRIMARY_KEY_COLUMNS[dialect]},")
    for field in fields:
        lines.append(f"    {field} {column_type(field, dialect)},")
    lines.append("    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP")
    lines.append(");")
    return "\n".join(lines)


def generate_insert(record: URLRecord, fields: Sequence[str], table_name: str) -> str:
    """
    Build an INSERT statement for one record.

    Absent fields become NULL; the port is written as a bare integer.

    Example:
        >>> generate_insert(record, ["domain", "port"], "urls")
        "INSERT INTO urls (domain, port) VALUES ('example.com', NULL);"
    """
    values = []
    for field in fields:
        value = record.get_field(field)
        if value is None:
            values.append("NULL")
        elif field == "port":
            values.append(value)
        else:
            values.append(sql_escape(value))

    return f"INSERT INTO {table_name} ({', '.join(fields)}) VALUES ({', '.join(values)});"
