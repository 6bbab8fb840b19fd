"""Schema representation classes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class IndexType(Enum):
    """Kinds of table index."""

    INDEX = "index"
    UNIQUE = "unique"


@dataclass(frozen=True)
class SQLType:
    """SQL type descriptor as reported by the database, e.g. ``VARCHAR``."""

    name: str

    def __post_init__(self) -> None:
        """Store type names upper-cased and without surrounding whitespace."""
        object.__setattr__(self, "name", self.name.strip().upper())


@dataclass
class Index:
    """Named index over one or more columns of a table."""

    name: str
    type: IndexType = IndexType.INDEX
    cols: list[str] = field(default_factory=list)

    @property
    def is_composite(self) -> bool:
        """True if the index spans more than one column."""
        return len(self.cols) > 1


@dataclass
class Column:
    """Column definition.

    ``length``/``length2`` carry the size or precision/scale pair of the type;
    0 means unset. ``default`` is the raw default literal, empty when absent.
    ``indexes`` holds the names of the table indexes the column takes part in.
    """

    name: str
    sql_type: SQLType
    length: int = 0
    length2: int = 0
    enum_options: set[str] = field(default_factory=set)
    set_options: set[str] = field(default_factory=set)
    is_primary_key: bool = False
    is_autoincrement: bool = False
    nullable: bool = True
    default: str = ""
    is_created: bool = False
    is_updated: bool = False
    comment: str = ""
    indexes: set[str] = field(default_factory=set)


@dataclass
class Table:
    """Table definition."""

    name: str
    columns: list[Column] = field(default_factory=list)
    indexes: dict[str, Index] = field(default_factory=dict)
    comment: str = ""

    def get_column(self, name: str) -> Optional[Column]:
        """Get a column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def columns_by_name(self) -> dict[str, Column]:
        """Map lower-cased column names to columns."""
        return {col.name.lower(): col for col in self.columns}

    def add_index(self, index: Index) -> None:
        """Register an index and record its participation on each column."""
        self.indexes[index.name] = index
        for col_name in index.cols:
            col = self.get_column(col_name)
            if col is not None:
                col.indexes.add(index.name)
