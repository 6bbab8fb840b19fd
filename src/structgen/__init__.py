"""Generate Go model structs with xorm tags from relational table metadata."""

__version__ = "0.1.0"
