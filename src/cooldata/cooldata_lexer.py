"""
Lexical analyzer for the CoolData configuration language.

This module converts raw CoolData source text into a flat list of located tokens:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    TokenKind: The closed set of token categories.
    Token: A single token with kind, text, and source location.
    Lexer: Converts a CharacterStream into a sequence of tokens.

Functions:
    tokenize(text): Scan a whole document and return its token list.

Scanning rules (in priority order):
    - `\\n` produces a NEWLINE token; newlines separate fields and list items
    - Other whitespace is skipped
    - A digit starts a number; one `.` makes it a FLOAT, a second `.` is an error
    - A letter starts an identifier made of letters only
    - `"` starts a string that must close on the same line; no escapes
    - `{ } [ ] , =` are single-character punctuation tokens

Raises:
    LexError: On an unexpected character, a double period in a number, or a
        string literal that contains a newline or never closes.

Example:
    >>> [t.kind.name for t in tokenize("port = 80")]
    ['IDENTIFIER', 'EQUALS', 'INT']
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from cooldata.cooldata_errors import LexError

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Token categories produced by the CoolData lexer."""

    IDENTIFIER = "identifier"
    EQUALS = "="
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    COMMA = ","
    NEWLINE = "newline"


PUNCTUATION: dict[str, TokenKind] = {
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ",": TokenKind.COMMA,
    "=": TokenKind.EQUALS,
}


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Every consumed character advances the column by one, and a newline moves to
    column 1 of the next line, so the position reported for a token is always the
    position of its first character no matter how long the preceding tokens were.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(
        self, source: str, position: int = 0, line: int = 1, column: int = 1
    ) -> None:
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Returns:
            str: The next character.

        Raises:
            LexError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise LexError("unexpected end of input", self.line, self.column)
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """
        Returns the character at the given offset from the current position without advancing.

        Args:
            offset (int, optional): Number of characters to look ahead. Defaults to 0.

        Returns:
            str: The character at the offset, or an empty string if out of bounds.
        """
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        """Checks if the stream has consumed all characters."""
        return self.position >= len(self.source)


class Token:
    """Represents a single lexical token in a CoolData document.

    Attributes:
        kind (TokenKind): The token category.
        text (str): The raw text of the token. For STRING tokens this is the
            content between the quotes; for INT/FLOAT it is the unconverted literal.
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    def __init__(self, kind: TokenKind, text: str, line: int = 0, col: int = 0):
        self.kind = kind
        self.text = text
        self.line = line
        self.col = col

    @property
    def location(self) -> tuple[int, int]:
        """The `(line, column)` pair where the token starts."""
        return (self.line, self.col)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.col})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.kind == other.kind
            and self.text == other.text
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.text, self.line, self.col))


class Lexer:
    """Lexical analyzer for CoolData documents.

    The Lexer takes a CharacterStream and produces Token objects one at a time
    through `next_token()`, returning None once the stream is exhausted.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        """Skips whitespace other than newlines, which are significant."""
        while not self.stream.end_of_file():
            ch = self.peek()
            if ch != "\n" and ch.isspace():
                self.advance()
            else:
                break

    def read_number(self) -> Token:
        """Reads an INT or FLOAT literal starting at the current digit.

        Raises:
            LexError: If the literal contains a second `.`.
        """
        line, col = self.stream.line, self.stream.column
        num = ""
        has_dot = False
        while not self.stream.end_of_file() and (
            is_digit(self.peek()) or self.peek() == "."
        ):
            if self.peek() == ".":
                if has_dot:
                    raise LexError(
                        "double period",
                        self.stream.line,
                        self.stream.column,
                        literal_start=(line, col),
                    )
                has_dot = True
            num += self.advance()
        return Token(TokenKind.FLOAT if has_dot else TokenKind.INT, num, line, col)

    def read_identifier(self) -> Token:
        """Reads an identifier: a run of alphabetic characters only."""
        line, col = self.stream.line, self.stream.column
        ident = ""
        while not self.stream.end_of_file() and self.peek().isalpha():
            ident += self.advance()
        return Token(TokenKind.IDENTIFIER, ident, line, col)

    def read_string(self) -> Token:
        """Reads a double-quoted string. The quotes are not part of the token text.

        Raises:
            LexError: If a newline or the end of input comes before the closing quote.
        """
        line, col = self.stream.line, self.stream.column
        self.advance()
        val = ""
        while not self.stream.end_of_file() and self.peek() != '"':
            if self.peek() == "\n":
                raise LexError("un-allowed newline", line, col)
            val += self.advance()
        if self.stream.end_of_file():
            raise LexError("unterminated string", line, col)
        self.advance()
        return Token(TokenKind.STRING, val, line, col)

    def next_token(self) -> Token | None:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token | None: The next token, or None at end of input.

        Raises:
            LexError: If a malformed token or an unknown character is encountered.
        """
        self.skip_whitespace()
        if self.stream.end_of_file():
            return None

        ch = self.peek()
        line, col = self.stream.line, self.stream.column

        # 1. Newline
        if ch == "\n":
            self.advance()
            return Token(TokenKind.NEWLINE, "\n", line, col)

        # 2. Number
        if is_digit(ch):
            return self.read_number()

        # 3. Identifier
        if ch.isalpha():
            return self.read_identifier()

        # 4. String
        if ch == '"':
            return self.read_string()

        # 5. Punctuation
        kind = PUNCTUATION.get(ch)
        if kind is not None:
            self.advance()
            return Token(kind, ch, line, col)

        # 6. Unknown character
        raise LexError(f"unexpected character {ch!r}", line, col)

    def tokens(self) -> list[Token]:
        """Drains the stream and returns every remaining token."""
        out: list[Token] = []
        while True:
            tok = self.next_token()
            if tok is None:
                return out
            out.append(tok)


def is_digit(ch: str) -> bool:
    """Returns True for the ASCII digits `0`-`9` only."""
    return ch.isascii() and ch.isdigit()


def tokenize(text: str) -> list[Token]:
    """Scans a complete CoolData document into a list of tokens.

    Args:
        text: The full document source.

    Returns:
        The tokens in source order. Whitespace other than newlines produces no tokens.

    Raises:
        LexError: If the text contains invalid input.
    """
    tokens = Lexer(CharacterStream(text)).tokens()
    logger.debug("Scanned %d characters into %d tokens", len(text), len(tokens))
    return tokens


__all__ = ["CharacterStream", "Lexer", "Token", "TokenKind", "tokenize"]
