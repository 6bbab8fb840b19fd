"""Go-specific helpers used by the model templates."""

from typing import Iterable, Optional

from structgen.schema.models import Column, Table

GO_TIME = "time.Time"
GO_BYTES = "[]byte"

_GO_TYPES_BY_SQL: dict[str, str] = {}


def _register(go_type: str, *sql_types: str) -> None:
    for sql_type in sql_types:
        _GO_TYPES_BY_SQL[sql_type] = go_type


_register("int", "BIT", "TINYINT", "SMALLINT", "MEDIUMINT", "INT", "INTEGER", "SERIAL")
_register("int64", "BIGINT", "BIGSERIAL")
_register("float32", "FLOAT", "REAL")
_register("float64", "DOUBLE")
_register(
    "string",
    "CHAR", "NCHAR", "VARCHAR", "NVARCHAR", "TINYTEXT", "TEXT", "NTEXT",
    "MEDIUMTEXT", "LONGTEXT", "ENUM", "SET", "UUID", "CLOB", "SYSNAME",
    "DECIMAL", "NUMERIC", "MONEY", "SMALLMONEY", "JSON",
)
_register(
    GO_BYTES,
    "TINYBLOB", "BLOB", "MEDIUMBLOB", "LONGBLOB", "BYTEA", "BINARY",
    "VARBINARY", "UNIQUEIDENTIFIER",
)
_register("bool", "BOOL", "BOOLEAN")
_register(
    GO_TIME,
    "DATETIME", "DATE", "TIME", "TIMESTAMP", "TIMESTAMPZ", "SMALLDATETIME", "YEAR",
)


def go_type(col: Column) -> str:
    """Go type name for a column; unknown SQL types map to ``string``."""
    return _GO_TYPES_BY_SQL.get(col.sql_type.name, "string")


def table_to_obj(name: str) -> str:
    """Convert a snake_case table or column name to a Go identifier.

    ``user_id`` -> ``UserId``
    """
    out = []
    up_next = True
    for ch in name.lower():
        if up_next:
            up_next = False
            out.append(ch.upper() if "a" <= ch <= "z" else ch)
        elif ch == "_":
            up_next = True
        else:
            out.append(ch)
    return "".join(out)


def un_title(s: str) -> str:
    """Lower-case the first character."""
    if not s:
        return s
    return s[0].lower() + s[1:]


def get_col(cols: dict[str, Column], name: str) -> Optional[Column]:
    """Look up a column in a lower-cased name mapping, ignoring case."""
    return cols.get(name.lower())


def gen_imports(tables: Iterable[Table]) -> dict[str, str]:
    """Collect the Go packages the generated models must import."""
    imports: dict[str, str] = {}
    for table in tables:
        for col in table.columns:
            if go_type(col) == GO_TIME:
                imports["time"] = "time"
    return imports


def distinct(values: Iterable[str]) -> list[str]:
    """Drop repeated strings, keeping first-occurrence order."""
    seen: set[str] = set()
    unique = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique
