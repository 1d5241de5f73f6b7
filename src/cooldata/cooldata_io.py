"""
Text and file entry points for CoolData documents.

Functions:
    parse(text, options=None) -> CoolObject:
        Scan and parse a complete document held in memory.

    load(path, options=None) -> CoolObject:
        Read a UTF-8 file and parse it.

    dump(obj, path, indent_unit="  ") -> None:
        Render a document and write it to a UTF-8 file, replacing any existing content.
"""

from __future__ import annotations

import logging
import os

from cooldata.cooldata_lexer import tokenize
from cooldata.cooldata_options import ParserOptions
from cooldata.cooldata_parser import parse_tokens
from cooldata.cooldata_render import render
from cooldata.cooldata_value import CoolObject

logger = logging.getLogger(__name__)


def parse(text: str, options: ParserOptions | None = None) -> CoolObject:
    """Parse CoolData source text into its document object.

    Raises:
        LexError: If the text cannot be tokenized.
        ParseError: If the tokens violate the grammar.
        InvalidNumberError: If a numeric literal cannot be converted.
    """
    return parse_tokens(tokenize(text), options)


def load(
    path: str | os.PathLike[str], options: ParserOptions | None = None
) -> CoolObject:
    """Read and parse the CoolData file at `path`.

    Raises:
        OSError: If the file cannot be read.
        CoolDataError: If its content is not a valid document.
    """
    logger.debug("Loading %s", path)
    with open(path, encoding="utf-8") as f:
        return parse(f.read(), options)


def dump(
    obj: CoolObject, path: str | os.PathLike[str], indent_unit: str = "  "
) -> None:
    """Render `obj` and write it to `path`."""
    text = render(obj, indent_unit)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.debug("Wrote %d characters to %s", len(text), path)


__all__ = ["dump", "load", "parse"]
