"""
Command-line interface for the OpenAPI schema generator.
"""

import argparse
import asyncio
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import DEFAULT_DESCRIPTION, DEFAULT_TITLE, DEFAULT_VERSION, GeneratorConfig, enum_cap
from .errors import SchemaGeneratorError
from .io_utils import discover_json_files, load_entries
from .spec_builder import generate_openapi_spec

console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openapi-schema-generator",
        description="Generate an OpenAPI document describing a directory tree of JSON files",
    )
    parser.add_argument("directory", help="Root directory of the JSON files")
    parser.add_argument(
        "-o", "--output",
        help="Output file for the generated spec (default: stdout)",
    )
    parser.add_argument("--title", default=DEFAULT_TITLE, help="Spec title")
    parser.add_argument("--description", default=DEFAULT_DESCRIPTION, help="Spec description")
    parser.add_argument("--spec-version", default=DEFAULT_VERSION, help="Spec version")
    parser.add_argument(
        "--max-enum-values",
        type=int,
        default=None,
        help="Omit enum from schemas with more distinct values than this (0 or unset: no limit)",
    )
    parser.add_argument(
        "--flatten-arrays",
        action="store_true",
        help="Treat a top-level array as a list of documents",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        config = GeneratorConfig(
            title=args.title,
            description=args.description,
            version=args.spec_version,
            max_enum_values=enum_cap(args.max_enum_values),
            flatten_top_level_arrays=args.flatten_arrays,
        )
        files = discover_json_files(args.directory)
        entries = asyncio.run(load_entries(files, config))
        spec = generate_openapi_spec(entries, config)
    except (SchemaGeneratorError, OSError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1

    text = json.dumps(spec, indent=args.indent)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        console.print(f"[bold green]Wrote spec for {len(entries):,} documents to {args.output}[/bold green]")
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
