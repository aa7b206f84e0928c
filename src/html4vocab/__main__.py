#!/usr/bin/env python3
"""Command-line interface for html4vocab."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, TextIO

from .definitions import AttributeDefinition, CharacterDefinition, ElementDefinition
from .errors import VocabularyError
from .loader import DocumentLoader
from .stubs import write_stubs
from .vocabulary import Vocabulary


def _get_version() -> str:
    try:
        return version("html4vocab")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="html4vocab",
        description="Extract the HTML 4.01 vocabulary from the W3C index pages and emit templating stubs.",
        epilog=(
            "Examples:\n"
            "  html4vocab elements\n"
            "  html4vocab attributes --format json\n"
            "  html4vocab --resources ./w3c stubs > Elements.java\n"
            "\n"
            "If you don't have the 'html4vocab' command available, use:\n"
            "  python -m html4vocab ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "table",
        nargs="?",
        choices=["characters", "elements", "attributes", "stubs"],
        help="Table to print, or 'stubs' for element factory methods",
    )
    parser.add_argument(
        "--resources",
        metavar="DIR",
        help="Directory holding characters.html, elements.html and attributes.html "
        "(defaults to $HTML4VOCAB_RESOURCES, then the bundled copies)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format for tables (default: text)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parsing progress to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"html4vocab {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.table:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _character_row(definition: CharacterDefinition) -> dict[str, Any]:
    return {"name": definition.name, "value": definition.value}


def _element_row(definition: ElementDefinition) -> dict[str, Any]:
    return {
        "name": definition.lowercase,
        "inline": definition.inline,
        "empty": definition.empty,
        "dtd": definition.dtd.name,
    }


def _attribute_row(definition: AttributeDefinition) -> dict[str, Any]:
    return {
        "name": definition.name,
        "types": {
            element: attr_type.name if attr_type is not None else None
            for element, attr_type in definition.types_by_element.items()
        },
        "dtds": {element: dtd.name if dtd is not None else None for element, dtd in definition.dtds_by_element.items()},
    }


def _text_line(row: dict[str, Any]) -> str:
    if "types" in row:
        scopes = ", ".join(
            f"{element}={attr_type or '-'}/{row['dtds'][element] or '-'}" for element, attr_type in row["types"].items()
        )
        return f"{row['name']}\t{scopes}"
    if "value" in row:
        return f"{row['name']}\t{row['value']}\tU+{row['value']:04X}"
    flags = [flag for flag in ("inline", "empty") if row[flag]]
    return f"{row['name']}\t{row['dtd']}\t{' '.join(flags)}".rstrip()


def _write_table(rows: list[dict[str, Any]], fmt: str, out: TextIO) -> None:
    if fmt == "json":
        json.dump(rows, out, indent=2)
        out.write("\n")
        return
    for row in rows:
        out.write(_text_line(row))
        out.write("\n")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    loader = DocumentLoader(args.resources) if args.resources else DocumentLoader.from_environment()
    vocabulary = Vocabulary(loader)

    try:
        vocabulary.load()
    except VocabularyError as e:
        print(f"html4vocab: {e}", file=sys.stderr)
        raise SystemExit(2) from e

    if args.table == "stubs":
        write_stubs(vocabulary.elements, sys.stdout)
        return

    if args.table == "characters":
        rows = [_character_row(d) for d in vocabulary.characters.values()]
    elif args.table == "elements":
        rows = [_element_row(d) for d in vocabulary.elements.values()]
    else:
        rows = [_attribute_row(d) for d in vocabulary.attributes.values()]

    _write_table(rows, args.format, sys.stdout)


if __name__ == "__main__":
    main()
