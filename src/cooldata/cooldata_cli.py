"""
CoolData CLI Entrypoint.

This module provides the command-line interface for inspecting CoolData documents.

Features:
    - Read a document from a file or from an inline string.
    - Print the value found at a dotted path (`server.port`, `items.0`).
    - Print the normalized (re-rendered) document.
    - Write the normalized document to a file.

Example usage:
    cooldata settings.cool
    cooldata settings.cool -g ip -g server.port
    cooldata -s 'a = [1 2 3]' -g a.1
    cooldata settings.cool -o normalized.cool --max-depth 16

Functions:
    resolve_path(doc: CoolObject, path: str) -> Value:
        Follows a dotted path through objects (by name) and lists (by index).

    run_cooldata(source: str, is_string: bool = False, get: list[str] | None = None,
                 out: str | None = None, options: ParserOptions | None = None) -> None:
        Parses a document and prints or writes the requested output.

    main(argv: list[str] | None = None) -> None:
        Parses CLI arguments, configures logging and invokes `run_cooldata`.
"""

from __future__ import annotations

import argparse
import logging
import sys

from cooldata.cooldata_errors import CoolDataError, UnknownFieldError
from cooldata.cooldata_io import dump, load, parse
from cooldata.cooldata_options import ParserOptions
from cooldata.cooldata_render import Renderer, render
from cooldata.cooldata_value import CoolObject, Value, ValueKind

logger = logging.getLogger(__name__)


def resolve_path(doc: CoolObject, path: str) -> Value:
    """Returns the value at a dotted path.

    Segments select object fields by name; a numeric segment selects a list item.

    Raises:
        UnknownFieldError: If a segment cannot be followed.
        IndexOutOfBoundsError: If a numeric segment is past the end of a list.
    """
    value = Value(ValueKind.OBJECT, doc)
    for segment in path.split("."):
        if isinstance(value.data, CoolObject):
            value = value.data.get(segment)
        elif value.kind is ValueKind.LIST and segment.isdigit():
            value = value.data.at(int(segment))
        else:
            raise UnknownFieldError(path)
    return value


def run_cooldata(
    source: str,
    is_string: bool = False,
    get: list[str] | None = None,
    out: str | None = None,
    options: ParserOptions | None = None,
) -> None:
    """
    Parse a CoolData document and print or write the requested output.

    Args:
        source (str): Path to a document, or the document text itself with `is_string`.
        is_string (bool): If True, treats `source` as raw text instead of a path.
        get (list[str] | None): Dotted paths to print as `path: value` lines. When
            empty, the whole document is printed unless `out` is given.
        out (str | None): Optional path to write the rendered document to.
        options (ParserOptions | None): Parser configuration.

    Raises:
        CoolDataError: If the document is invalid or a path cannot be resolved.
        OSError: If a file cannot be read or written.
    """
    doc = parse(source, options) if is_string else load(source, options)

    for path in get or []:
        print(f"{path}: {Renderer().render_value(resolve_path(doc, path))}")

    if out:
        dump(doc, out)
    elif not get:
        print(render(doc), end="")


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the CoolData CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as document text instead of a file path.
        - `-g`, `--get`: Print the value at a dotted path (repeatable).
        - `-o`, `--out`: Write the rendered document to a file.
        - `--max-depth`: Reject documents nested deeper than this.
        - `--verbose`: Enable debug logging on stderr.

    Errors are reported on stderr and exit the process with status 1.
    """
    parser = argparse.ArgumentParser(prog="cooldata")
    parser.add_argument("source", help="Filename or raw document (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal text"
    )
    parser.add_argument(
        "-g",
        "--get",
        action="append",
        metavar="PATH",
        help="Print the value at a dotted path (repeatable)",
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "--max-depth", type=int, default=None, help="Maximum nesting depth"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = ParserOptions(max_depth=args.max_depth)
        run_cooldata(
            source=args.source,
            is_string=args.string,
            get=args.get,
            out=args.out,
            options=options,
        )
    except (CoolDataError, OSError, ValueError) as e:
        logger.debug("cooldata failed", exc_info=True)
        print(f"cooldata: error: {e}", file=sys.stderr)
        sys.exit(1)
