"""Code generation: struct tags, Go helpers and template rendering."""

from structgen.codegen.golang import distinct, gen_imports, go_type
from structgen.codegen.tag import format_tag

__all__ = [
    "distinct",
    "format_tag",
    "gen_imports",
    "go_type",
]
