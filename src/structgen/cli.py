"""Command-line interface for structgen."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from structgen.codegen.template import render
from structgen.config import Config
from structgen.exceptions import ConfigError
from structgen.schema.loader import load_schema


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    parser = argparse.ArgumentParser(
        prog="structgen",
        description="Generate Go models with xorm tags from table metadata",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render Go models")
    render_parser.add_argument("--schema-path", type=Path, default=None)
    render_parser.add_argument("--package", help="Go package name")
    render_parser.add_argument(
        "--dialect",
        help="Source database dialect (mysql and mymysql support inline comments)",
    )
    render_parser.add_argument(
        "--json",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add json tags to struct fields (--no-json overrides config)",
    )
    render_parser.add_argument(
        "--comment",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add comment tags to struct fields (--no-comment overrides config)",
    )
    render_parser.add_argument("--profile", help="Profile in ~/.structgen.cfg")
    render_parser.add_argument(
        "--output",
        type=Path,
        help="Output file path (default: stdout)",
    )

    args = parser.parse_args(argv)

    if args.command == "render":
        return cmd_render(args)
    else:
        print(f"Command '{args.command}' not yet implemented", file=sys.stderr)
        return 1


def cmd_render(args: argparse.Namespace) -> int:
    """Render Go models for every table in the schema."""
    try:
        config = Config.from_env(
            schema_path=str(args.schema_path) if args.schema_path else None,
            package=args.package,
            dialect=args.dialect,
            gen_json=args.json,
            gen_comment=args.comment,
            profile=args.profile,
        )
        tables = load_schema(Path(config.schema_path))
        source = render(
            tables,
            options=config.generation_options(),
            package=config.package,
        )

        if args.output:
            args.output.write_text(source)
            print(f"Wrote {len(tables)} models to {args.output}")
        else:
            print(source, end="")
        return 0
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"Render error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
