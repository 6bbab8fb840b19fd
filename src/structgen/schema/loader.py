"""Load table metadata from YAML files."""

import logging
from pathlib import Path

import yaml

from structgen.exceptions import SchemaLoadError
from structgen.schema.models import Column, Index, IndexType, SQLType, Table

logger = logging.getLogger(__name__)

VALID_TABLE_FIELDS = {
    "table",
    "comment",
    "columns",
    "indexes",
}

VALID_COLUMN_FIELDS = {
    "name",
    "type",
    "length",
    "length2",
    "enum_options",
    "set_options",
    "primary_key",
    "autoincrement",
    "nullable",
    "default",
    "created",
    "updated",
    "comment",
}

VALID_INDEX_FIELDS = {"name", "type", "columns"}


def load_schema(schema_path: Path) -> list[Table]:
    """Load tables from a directory of YAML files or a single file."""
    if schema_path.is_file():
        return _load_single_file(schema_path)
    elif schema_path.is_dir():
        return _load_directory(schema_path)
    else:
        raise SchemaLoadError(f"Schema path does not exist: {schema_path}")


def _load_directory(directory: Path) -> list[Table]:
    """Load tables from a directory of YAML files."""
    tables: list[Table] = []
    for yaml_file in sorted(directory.glob("*.yaml")):
        tables.extend(_load_single_file(yaml_file))
    _check_unique_tables(tables, f"directory {directory}")
    logger.info(f"Loaded {len(tables)} tables from {directory}")
    return tables


def _load_single_file(file_path: Path) -> list[Table]:
    """Load tables from a single YAML file."""
    try:
        with open(file_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML in {file_path}: {e}") from e

    if data is None:
        raise SchemaLoadError(f"Empty YAML file: {file_path}")
    if not isinstance(data, dict):
        raise SchemaLoadError(f"Expected a mapping at top level of {file_path}")

    if "tables" in data:
        tables = [_parse_table_dict(t) for t in data.get("tables") or []]
        _check_unique_tables(tables, f"file {file_path}")
        return tables
    return [_parse_table_dict(data)]


def _check_unique_tables(tables: list[Table], where: str) -> None:
    seen = set()
    for table in tables:
        if table.name in seen:
            raise SchemaLoadError(f"Duplicate table name '{table.name}' in {where}")
        seen.add(table.name)


def _require_str(data: dict, key: str, where: str) -> str:
    """Return a string field; YAML scalars such as ``yes`` or ``1`` are rejected."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise SchemaLoadError(
            f"Field '{key}' of {where} must be a string, got {value!r} (quote it)"
        )
    return value


def _require_bool(data: dict, key: str, where: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise SchemaLoadError(
            f"Field '{key}' of {where} must be true or false, got {value!r}"
        )
    return value


def _require_length(data: dict, key: str, where: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SchemaLoadError(
            f"Field '{key}' of {where} must be a non-negative integer, got {value!r}"
        )
    return value


def _parse_options(data: dict, key: str, where: str) -> set[str]:
    """Parse enum or set options; numeric options keep their literal text."""
    value = data.get(key)
    if value is None:
        return set()
    if not isinstance(value, list):
        raise SchemaLoadError(f"Field '{key}' of {where} must be a list")
    options = set()
    for opt in value:
        if isinstance(opt, bool) or not isinstance(opt, (str, int, float)):
            raise SchemaLoadError(
                f"Option {opt!r} in '{key}' of {where} must be a string (quote it)"
            )
        options.add(str(opt))
    return options


def _parse_table_dict(data: dict) -> Table:
    """Parse a table definition from a dictionary."""
    unknown_fields = set(data.keys()) - VALID_TABLE_FIELDS
    if unknown_fields:
        raise SchemaLoadError(
            f"Unknown field(s) in table definition: {', '.join(sorted(unknown_fields))}"
        )

    name = _require_str(data, "table", "table definition")
    if not name:
        raise SchemaLoadError("Table definition missing 'table' field")

    columns = [_parse_column(col) for col in data.get("columns") or []]

    seen = set()
    for col in columns:
        if col.name in seen:
            raise SchemaLoadError(
                f"Duplicate column name '{col.name}' in table '{name}'"
            )
        seen.add(col.name)

    comment = _require_str(data, "comment", f"table '{name}'")
    table = Table(name=name, columns=columns, comment=comment)
    for index_data in data.get("indexes") or []:
        index = _parse_index(index_data, name)
        if index.name in table.indexes:
            raise SchemaLoadError(
                f"Duplicate index name '{index.name}' in table '{name}'"
            )
        missing = [c for c in index.cols if c not in seen]
        if missing:
            raise SchemaLoadError(
                f"Index '{index.name}' in table '{name}' references unknown "
                f"column(s): {', '.join(missing)}"
            )
        table.add_index(index)
    return table


def _parse_column(data: dict) -> Column:
    """Parse a column definition from a dictionary."""
    unknown_fields = set(data.keys()) - VALID_COLUMN_FIELDS
    if unknown_fields:
        raise SchemaLoadError(
            f"Unknown field(s) in column definition: {', '.join(sorted(unknown_fields))}"
        )

    name = _require_str(data, "name", "column definition")
    if not name:
        raise SchemaLoadError("Column definition missing 'name' field")

    where = f"column '{name}'"
    col_type = _require_str(data, "type", where)
    if not col_type:
        raise SchemaLoadError(f"Column '{name}' missing 'type' field")

    default = data.get("default")
    if isinstance(default, (dict, list)):
        raise SchemaLoadError(f"Field 'default' of {where} must be a scalar")
    return Column(
        name=name,
        sql_type=SQLType(col_type),
        length=_require_length(data, "length", where),
        length2=_require_length(data, "length2", where),
        enum_options=_parse_options(data, "enum_options", where),
        set_options=_parse_options(data, "set_options", where),
        is_primary_key=_require_bool(data, "primary_key", where, False),
        is_autoincrement=_require_bool(data, "autoincrement", where, False),
        nullable=_require_bool(data, "nullable", where, True),
        default="" if default is None else str(default),
        is_created=_require_bool(data, "created", where, False),
        is_updated=_require_bool(data, "updated", where, False),
        comment=_require_str(data, "comment", where),
    )


def _parse_index(data: dict, table_name: str) -> Index:
    """Parse an index definition from a dictionary."""
    unknown_fields = set(data.keys()) - VALID_INDEX_FIELDS
    if unknown_fields:
        raise SchemaLoadError(
            f"Unknown field(s) in index definition: {', '.join(sorted(unknown_fields))}"
        )

    name = _require_str(data, "name", f"index in table '{table_name}'")
    if not name:
        raise SchemaLoadError(f"Index definition in table '{table_name}' missing 'name'")

    type_name = data.get("type", IndexType.INDEX.value)
    try:
        index_type = IndexType(type_name)
    except ValueError:
        raise SchemaLoadError(
            f"Unknown index type '{type_name}' for index '{name}' "
            f"(expected 'index' or 'unique')"
        ) from None

    cols = data.get("columns") or []
    if not isinstance(cols, list) or not all(isinstance(c, str) for c in cols):
        raise SchemaLoadError(
            f"Index '{name}' in table '{table_name}' must list column names"
        )
    if not cols:
        raise SchemaLoadError(f"Index '{name}' in table '{table_name}' has no columns")
    return Index(name=name, type=index_type, cols=list(cols))
