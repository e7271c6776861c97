"""Unit tests for SQL generation."""

import pytest

from rexturl.output import SqlDialect, column_type, generate_create_table, generate_insert
from rexturl.parsing import build_record


class TestColumnTypes:
    """Test dialect column type tables."""

    def test_postgres(self):
        """Test Postgres column types."""
        assert column_type("domain", SqlDialect.POSTGRES) == "VARCHAR(253)"
        assert column_type("port", SqlDialect.POSTGRES) == "INTEGER"
        assert column_type("path", SqlDialect.POSTGRES) == "TEXT"
        assert column_type("url", SqlDialect.POSTGRES) == "VARCHAR(2048)"
        assert column_type("scheme", SqlDialect.POSTGRES) == "VARCHAR(32)"

    def test_mysql(self):
        """Test MySQL uses INT for the port."""
        assert column_type("port", SqlDialect.MYSQL) == "INT"
        assert column_type("domain", SqlDialect.MYSQL) == "VARCHAR(253)"
        assert column_type("path", SqlDialect.MYSQL) == "TEXT"

    def test_sqlite(self):
        """Test SQLite types everything but the port as TEXT."""
        assert column_type("port", SqlDialect.SQLITE) == "INTEGER"
        assert column_type("domain", SqlDialect.SQLITE) == "TEXT"
        assert column_type("path", SqlDialect.SQLITE) == "TEXT"

    def test_generic(self):
        """Test the generic dialect matches SQLite."""
        assert column_type("port", "generic") == "INTEGER"
        assert column_type("fragment", "generic") == "TEXT"

    def test_unknown_dialect(self):
        """Test an unknown dialect is rejected."""
        with pytest.raises(ValueError):
            column_type("port", "oracle")


class TestCreateTable:
    """Test CREATE TABLE generation."""

    def test_postgres(self):
        """Test the full Postgres CREATE TABLE statement."""
        sql = generate_create_table("test_table", ["domain", "path", "port"], SqlDialect.POSTGRES)

        assert sql == (
            "CREATE TABLE IF NOT EXISTS test_table (\n"
            "    id SERIAL PRIMARY KEY,\n"
            "    domain VARCHAR(253),\n"
            "    path TEXT,\n"
            "    port INTEGER,\n"
            "    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP\n"
            ");"
        )

    def test_dialect_primary_keys(self):
        """Test each dialect has its own primary key column."""
        assert "id INT AUTO_INCREMENT PRIMARY KEY" in generate_create_table("t", ["domain"], "mysql")
        assert "id INTEGER PRIMARY KEY AUTOINCREMENT" in generate_create_table("t", ["domain"], "sqlite")
        assert "id INTEGER PRIMARY KEY," in generate_create_table("t", ["domain"], "generic")


class TestInsert:
    """Test INSERT generation."""

    def test_null_for_absent(self):
        """Test absent fields become NULL."""
        record = build_record("https://www.example.com/path")
        sql = generate_insert(record, ["domain", "path", "port"], "test_table")
        assert sql == (
            "INSERT INTO test_table (domain, path, port) VALUES ('example.com', '/path', NULL);"
        )

    def test_port_unquoted(self):
        """Test the port is written as a bare integer."""
        record = build_record("https://example.com:8080/")
        assert generate_insert(record, ["port"], "urls") == "INSERT INTO urls (port) VALUES (8080);"

    def test_quotes_escaped(self):
        """Test single quotes are doubled."""
        record = build_record("https://example.com/o'brien")
        assert generate_insert(record, ["path"], "urls") == (
            "INSERT INTO urls (path) VALUES ('/o''brien');"
        )
