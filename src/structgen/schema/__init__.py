"""Table metadata models and loading."""

from structgen.schema.loader import load_schema
from structgen.schema.models import (
    Column,
    Index,
    IndexType,
    SQLType,
    Table,
)

__all__ = [
    "Column",
    "Index",
    "IndexType",
    "SQLType",
    "Table",
    "load_schema",
]
