r"""
CoolData: a small `key = value` configuration language.

    >>> import cooldata
    >>> doc = cooldata.parse('name = "demo"\nports = [80, 443]\n')
    >>> doc.get_string("name")
    'demo'
    >>> doc.get_list("ports").int_at(1)
    443
"""

from cooldata.cooldata_errors import (
    CoolDataError,
    FieldError,
    IndexOutOfBoundsError,
    InvalidNumberError,
    LexError,
    ListIndexError,
    ParseError,
    ParseErrorKind,
    UnknownFieldError,
    WrongFieldTypeError,
    WrongItemTypeError,
)
from cooldata.cooldata_io import dump, load, parse
from cooldata.cooldata_lexer import CharacterStream, Lexer, Token, TokenKind, tokenize
from cooldata.cooldata_options import ParserOptions
from cooldata.cooldata_parser import Parser, parse_tokens
from cooldata.cooldata_render import Renderer, render
from cooldata.cooldata_value import CoolList, CoolObject, Value, ValueKind

__version__ = "0.1.0"

__all__ = [
    "CharacterStream",
    "CoolDataError",
    "CoolList",
    "CoolObject",
    "FieldError",
    "IndexOutOfBoundsError",
    "InvalidNumberError",
    "LexError",
    "Lexer",
    "ListIndexError",
    "ParseError",
    "ParseErrorKind",
    "Parser",
    "ParserOptions",
    "Renderer",
    "Token",
    "TokenKind",
    "UnknownFieldError",
    "Value",
    "ValueKind",
    "WrongFieldTypeError",
    "WrongItemTypeError",
    "dump",
    "load",
    "parse",
    "parse_tokens",
    "render",
    "tokenize",
]
