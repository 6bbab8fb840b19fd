"""Render model source files from Jinja2 templates."""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Iterable, Optional

from jinja2 import Environment, BaseLoader, StrictUndefined
from jinja2 import TemplateError as JinjaTemplateError

from structgen import compare
from structgen.codegen import golang
from structgen.codegen.tag import format_tag
from structgen.config import GenerationOptions
from structgen.exceptions import ComparisonError, MetadataError, TemplateError
from structgen.schema.models import Table

logger = logging.getLogger(__name__)

GO_STRUCT_TEMPLATE = """\
package {{ package }}

{% if imports %}
import (
{% for name in imports %}
	"{{ name }}"
{% endfor %}
)

{% endif %}
{% for table in tables %}
{% if gt(table.columns | length, 0) %}
type {{ Mapper(table.name) }} struct {
{% for col in table.columns %}
	{{ Mapper(col.name) }} {{ Type(col) }} {{ Tag(table, col) }}
{% endfor %}
}
{% else %}
type {{ Mapper(table.name) }} struct{}
{% endif %}

func (m *{{ Mapper(table.name) }}) TableName() string {
	return "{{ table.name }}"
}

{% endfor %}
"""


@dataclass
class LangTemplate:
    """Callables and import resolution for one target language."""

    funcs: dict[str, Callable[..., Any]]
    gen_imports: Callable[[list[Table]], dict[str, str]]


def go_lang_template(options: Optional[GenerationOptions] = None) -> LangTemplate:
    """Build the Go template bundle with the tag formatter bound to options."""
    return LangTemplate(
        funcs={
            "Mapper": golang.table_to_obj,
            "Type": golang.go_type,
            "Tag": partial(format_tag, options=options or GenerationOptions()),
            "UnTitle": golang.un_title,
            "eq": compare.eq,
            "lt": compare.lt,
            "le": compare.le,
            "gt": compare.gt,
            "getCol": golang.get_col,
            "distinct": golang.distinct,
        },
        gen_imports=golang.gen_imports,
    )


def make_environment(lang: LangTemplate) -> Environment:
    """Create a Jinja2 environment exposing the language callables as globals."""
    env = Environment(
        loader=BaseLoader(),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.globals.update(lang.funcs)
    return env


def render(
    tables: Iterable[Table],
    options: Optional[GenerationOptions] = None,
    package: str = "models",
    template_source: str = GO_STRUCT_TEMPLATE,
) -> str:
    """Render template_source for tables.

    The template context holds ``tables``, ``imports`` (sorted import names)
    and ``package``.

    Raises:
        TemplateError: If the template is invalid or a helper fails while
            rendering (comparison errors, inconsistent metadata).
    """
    tables = list(tables)
    lang = go_lang_template(options)
    env = make_environment(lang)
    imports = sorted(lang.gen_imports(tables))

    try:
        template = env.from_string(template_source)
        output = template.render(tables=tables, imports=imports, package=package)
    except (ComparisonError, MetadataError) as e:
        raise TemplateError(f"Template evaluation failed: {e}") from e
    except JinjaTemplateError as e:
        raise TemplateError(f"Invalid template: {e}") from e

    logger.debug(f"Rendered {len(tables)} tables into package {package}")
    return output
