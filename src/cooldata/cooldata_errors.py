"""
Error taxonomy for the CoolData configuration language.

Every failure raised by the scanner, the parser, or the value accessors derives
from `CoolDataError`. Each concrete error also derives from the builtin exception
a Python caller would naturally catch for that situation, so both of these work:

    >>> try:
    ...     cooldata.parse("a = 1.2.3")
    ... except SyntaxError as e:
    ...     print(e.line, e.column)
    1 8

Classes:
    CoolDataError: Base class for all CoolData errors.
    LexError: Invalid input at the character level (scanner).
    ParseError: Grammar violation in the token stream (parser).
    ParseErrorKind: Enumerates the parser's failure categories.
    FieldError: Base class for object field accessor failures.
    UnknownFieldError: Requested field does not exist.
    WrongFieldTypeError: Field exists but holds a different variant.
    ListIndexError: Base class for list accessor failures.
    IndexOutOfBoundsError: Index is not within the list.
    WrongItemTypeError: Item exists but holds a different variant.
    InvalidNumberError: Numeric literal text cannot be converted.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cooldata.cooldata_lexer import Token


class CoolDataError(Exception):
    """Base class for every error raised by the CoolData package."""


class LexError(CoolDataError, SyntaxError):
    """Raised by the scanner when the source text cannot be tokenized.

    Attributes:
        message (str): Short description of the problem (e.g. "double period").
        line (int): 1-based line of the offending character.
        column (int): 1-based column of the offending character.
        literal_start (tuple[int, int] | None): Start of the literal being
            scanned when the error occurred, if any.
    """

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        literal_start: tuple[int, int] | None = None,
    ) -> None:
        super().__init__(f"{message} at {line}:{column}")
        self.message = message
        self.line = line
        self.column = column
        self.literal_start = literal_start


class ParseErrorKind(Enum):
    """Failure categories reported by the parser."""

    EXPECTED_TOKEN = "expected_token"
    UNEXPECTED_TOKEN = "unexpected_token"
    UNEXPECTED_EOF = "unexpected_eof"
    TOO_DEEP = "too_deep"


class ParseError(CoolDataError, SyntaxError):
    """Raised by the parser on a grammar violation.

    Attributes:
        kind (ParseErrorKind): The failure category.
        expected (str): Description of what the parser wanted (e.g. "=", "}").
        got (Token | None): The token actually found, or None at end of input.
        line (int): 1-based line the error is reported at.
        column (int): 1-based column the error is reported at.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        expected: str,
        got: Token | None,
        line: int,
        column: int,
    ) -> None:
        if kind is ParseErrorKind.UNEXPECTED_EOF:
            detail = f"Expected `{expected}`, got end of input"
        elif kind is ParseErrorKind.TOO_DEEP:
            detail = f"Nesting deeper than {expected} levels"
        elif kind is ParseErrorKind.UNEXPECTED_TOKEN:
            detail = f"Unexpected `{got.text if got else ''}`, expected {expected}"
        else:
            detail = f"Expected `{expected}`, got `{got.text if got else ''}`"
        super().__init__(f"{detail} at {line}:{column}")
        self.kind = kind
        self.expected = expected
        self.got = got
        self.line = line
        self.column = column


class FieldError(CoolDataError, LookupError):
    """Base class for `CoolObject` accessor failures.

    Attributes:
        name (str): The field name that was requested.
    """

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name = name


class UnknownFieldError(FieldError):
    """The requested field is not present in the object."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown field {name!r}", name)


class WrongFieldTypeError(FieldError):
    """The field exists but does not hold the requested variant.

    Attributes:
        expected (Any): The `ValueKind` the caller asked for.
        actual (Any): The `ValueKind` actually stored.
    """

    def __init__(self, name: str, expected: Any, actual: Any) -> None:
        super().__init__(
            f"Field {name!r} is not {expected.label} (found {actual.label})", name
        )
        self.expected = expected
        self.actual = actual


class ListIndexError(CoolDataError, IndexError):
    """Base class for `CoolList` accessor failures.

    Attributes:
        index (int): The index that was requested.
    """

    def __init__(self, message: str, index: int) -> None:
        super().__init__(message)
        self.index = index


class IndexOutOfBoundsError(ListIndexError):
    """The index is negative or not smaller than the list length."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of bounds for length {length}", index)
        self.length = length


class WrongItemTypeError(ListIndexError):
    """The list item exists but does not hold the requested variant."""

    def __init__(self, index: int, expected: Any, actual: Any) -> None:
        super().__init__(
            f"Index {index} is not {expected.label} (found {actual.label})", index
        )
        self.expected = expected
        self.actual = actual


class InvalidNumberError(CoolDataError, ValueError):
    """Numeric literal text could not be converted to its target type.

    Attributes:
        text (str): The literal text.
        target (str): "int" or "float".
    """

    def __init__(self, text: str, target: str) -> None:
        super().__init__(f"Invalid value for {target}: {text!r}")
        self.text = text
        self.target = target


__all__ = [
    "CoolDataError",
    "FieldError",
    "IndexOutOfBoundsError",
    "InvalidNumberError",
    "LexError",
    "ListIndexError",
    "ParseError",
    "ParseErrorKind",
    "UnknownFieldError",
    "WrongFieldTypeError",
    "WrongItemTypeError",
]
