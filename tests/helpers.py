"""Shared test helpers for structgen tests."""

from structgen.schema.models import Column, Index, IndexType, SQLType, Table


def make_column(name: str = "id", sql_type: str = "BIGINT", **kwargs) -> Column:
    """Create a Column with sensible defaults."""
    return Column(name=name, sql_type=SQLType(sql_type), **kwargs)


def make_table(
    name: str = "users",
    columns: list[Column] | None = None,
    indexes: list[Index] | None = None,
) -> Table:
    """Create a Table and wire its indexes onto the columns."""
    table = Table(name=name, columns=columns or [])
    for index in indexes or []:
        table.add_index(index)
    return table


def unique_index(name: str, *cols: str) -> Index:
    return Index(name=name, type=IndexType.UNIQUE, cols=list(cols))


def plain_index(name: str, *cols: str) -> Index:
    return Index(name=name, type=IndexType.INDEX, cols=list(cols))
