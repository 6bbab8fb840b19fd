"""Render the xorm struct tag for a table column."""

from structgen.config import GenerationOptions
from structgen.exceptions import MetadataError
from structgen.schema.models import Column, IndexType, Table

# Defaults containing this are rewritten to an empty string literal.
_VARCHAR_DEFAULT_MARKER = "character varying"


def _quoted_options(options: set[str]) -> str:
    """Sorted, single-quoted, comma-joined options: ``'a','b'``."""
    return ",".join(f"'{opt}'" for opt in sorted(options))


def _type_segment(col: Column) -> str:
    name = col.sql_type.name
    if col.length:
        if col.length2:
            return f"{name}({col.length},{col.length2})"
        return f"{name}({col.length})"
    if col.enum_options:
        return f"{name}({_quoted_options(col.enum_options)})"
    if col.set_options:
        return f"{name}({_quoted_options(col.set_options)})"
    return name


def _default_segment(col: Column) -> str:
    if not col.default:
        return " "
    value = col.default
    if _VARCHAR_DEFAULT_MARKER in value:
        value = "''"
    return f"default {value}"


def _index_segments(table: Table, col: Column) -> list[str]:
    if not col.indexes:
        return [f"{' ':<20}"]

    segments = []
    for name in sorted(col.indexes):
        index = table.indexes.get(name)
        if index is None:
            raise MetadataError(
                f"Column '{col.name}' of table '{table.name}' references "
                f"unknown index '{name}'"
            )
        text = "unique" if index.type is IndexType.UNIQUE else "index"
        if index.is_composite:
            text += f"({index.name})"
        segments.append(f"{text:<20}")
    return segments


def xorm_segments(table: Table, col: Column, support_comment: bool = False) -> list[str]:
    """Return the padded segments of the xorm tag body, in tag order."""
    not_null = not col.nullable and not col.is_primary_key
    segments = [
        f"{_type_segment(col):<20}",
        f"{'pk' if col.is_primary_key else ' ':<4}",
        f"{'autoincr' if col.is_autoincrement else ' ':<10}",
        f"{'version' if col.name.upper() == 'VERSION' else ' ':<10}",
        f"{'not null' if not_null else ' ':<10}",
        f"{_default_segment(col):<20}",
        f"{'created' if col.is_created else ' ':<10}",
        f"{'updated' if col.is_updated else ' ':<10}",
    ]
    segments.extend(_index_segments(table, col))

    if support_comment and col.comment:
        comment = f"      comment('{col.comment}')"
        segments.append(f"{comment:>20}")
    return segments


def format_tag(
    table: Table, col: Column, options: GenerationOptions | None = None
) -> str:
    """Build the backquoted struct tag for col, e.g. `` `xorm:"..."` ``.

    Returns an empty string when no sub-tag is produced.

    Raises:
        MetadataError: If col names an index missing from table.indexes.
    """
    options = options or GenerationOptions()

    tags = []
    if options.gen_json:
        tags.append(f'json:"{col.name}"  ')
    segments = xorm_segments(table, col, options.support_comment)
    if segments:
        tags.append('xorm:"' + " ".join(segments) + '"')
    if options.gen_comment:
        tags.append(f'  comment:"{col.comment}"')

    if not tags:
        return ""
    return "`" + " ".join(tags) + "`"
