"""
CoolData Parser

Parses CoolData tokens into a tree of `Value` objects.

This module implements a recursive-descent parser with one token of lookahead. It
consumes the flat token list produced by `cooldata.cooldata_lexer` and builds the
document's `CoolObject`, mutually recursing between object bodies and list bodies to
support arbitrary nesting.

Grammar
-------
    document    := (field | NEWLINE)*
    object_body := '{' (field | NEWLINE)* '}'
    field       := IDENTIFIER '=' fieldvalue
    fieldvalue  := scalar | object_body | list_body
    list_body   := '[' (listitem | ',' | NEWLINE)* ']'
    listitem    := scalar | object_body | list_body
    scalar      := INT | FLOAT | STRING

Parser Behavior
---------------
- The document has no enclosing braces; it is always an object.
- Newlines separate fields and are otherwise ignored.
- Inside lists, commas and newlines are optional separators; `[1 2 3]`,
  `[1, 2, 3]` and one item per line all parse the same.
- A repeated field name replaces the earlier value.
- Nesting depth is unlimited unless `ParserOptions.max_depth` is set.

Entry Points
------------
- `Parser(tokens, options).parse()`: Parse a full token list into a `CoolObject`.
- `parse_tokens(tokens, options)`: Functional shorthand for the above.

Raises
------
ParseError
    Raised on any grammar violation, carrying the failure kind, what was expected,
    the offending token and its location.
InvalidNumberError
    Raised when a numeric literal cannot be converted (e.g. an int outside 32 bits).
"""

from __future__ import annotations

import logging

from cooldata.cooldata_errors import ParseError, ParseErrorKind
from cooldata.cooldata_lexer import Token, TokenKind
from cooldata.cooldata_options import ParserOptions
from cooldata.cooldata_value import CoolList, CoolObject, Value, ValueKind

logger = logging.getLogger(__name__)

SCALAR_KINDS = {TokenKind.INT, TokenKind.FLOAT, TokenKind.STRING}


class Parser:
    """
    CoolData Parser Class

    Transforms a list of tokens into a `CoolObject`. The parser keeps no state besides
    its cursor and the current nesting depth, so each instance parses one token list.

    Attributes
    ----------
    tokens : list[Token]
        The input token list.
    position : int
        Index of the next token to consume.
    options : ParserOptions
        Parser configuration.
    depth : int
        Number of objects and lists currently open below the document root.
    """

    def __init__(
        self, tokens: list[Token], options: ParserOptions | None = None
    ) -> None:
        self.tokens: list[Token] = tokens
        self.position: int = 0
        self.options: ParserOptions = options or ParserOptions()
        self.depth: int = 0

    def current(self) -> Token | None:
        return self.tokens[self.position] if self.position < len(self.tokens) else None

    def advance(self) -> Token:
        tok = self.current()
        if tok is None:
            raise self.eof_error("token")
        self.position += 1
        return tok

    def eof_error(self, expected: str) -> ParseError:
        """Builds an UNEXPECTED_EOF error located at the last token of the input."""
        line, col = self.tokens[-1].location if self.tokens else (1, 1)
        return ParseError(ParseErrorKind.UNEXPECTED_EOF, expected, None, line, col)

    def expect(self, kind: TokenKind, expected: str) -> Token:
        """Consumes the current token if it has the given kind.

        Raises:
            ParseError: UNEXPECTED_EOF at end of input, EXPECTED_TOKEN on a mismatch.
        """
        tok = self.current()
        if tok is None:
            raise self.eof_error(expected)
        if tok.kind is not kind:
            raise ParseError(
                ParseErrorKind.EXPECTED_TOKEN, expected, tok, tok.line, tok.col
            )
        self.position += 1
        return tok

    def enter(self, tok: Token) -> None:
        self.depth += 1
        limit = self.options.max_depth
        if limit is not None and self.depth > limit:
            raise ParseError(
                ParseErrorKind.TOO_DEEP, str(limit), tok, tok.line, tok.col
            )

    def leave(self) -> None:
        self.depth -= 1

    def parse(self) -> CoolObject:
        """Parse a whole document and return its top-level object."""
        doc = CoolObject()
        while (tok := self.current()) is not None:
            if tok.kind is TokenKind.NEWLINE:
                self.advance()
            elif tok.kind is TokenKind.IDENTIFIER:
                self.parse_field(doc)
            else:
                raise ParseError(
                    ParseErrorKind.UNEXPECTED_TOKEN,
                    "identifier",
                    tok,
                    tok.line,
                    tok.col,
                )
        logger.debug(
            "Parsed %d tokens into %d top-level fields", len(self.tokens), len(doc)
        )
        return doc

    def parse_field(self, target: CoolObject) -> None:
        """Parse `name = value` and store it on `target`."""
        name = self.advance()
        self.expect(TokenKind.EQUALS, "=")
        target.set(name.text, self.parse_value("value"))

    def parse_value(self, expected: str) -> Value:
        """Parse a scalar, object body or list body at the cursor.

        Args:
            expected: How to describe the wanted token if the cursor holds something
                that cannot start a value.
        """
        tok = self.current()
        if tok is None:
            raise self.eof_error(expected)
        if tok.kind is TokenKind.LEFT_BRACE:
            return Value(ValueKind.OBJECT, self.parse_object())
        if tok.kind is TokenKind.LEFT_BRACKET:
            return Value(ValueKind.LIST, self.parse_list())
        if tok.kind in SCALAR_KINDS:
            self.advance()
            return self.parse_scalar(tok)
        raise ParseError(
            ParseErrorKind.EXPECTED_TOKEN, expected, tok, tok.line, tok.col
        )

    def parse_scalar(self, tok: Token) -> Value:
        if tok.kind is TokenKind.INT:
            return Value.parse_int(tok.text)
        if tok.kind is TokenKind.FLOAT:
            return Value.parse_float(tok.text)
        return Value.string(tok.text)

    def parse_object(self) -> CoolObject:
        """Parse a `{}`-enclosed object body."""
        self.enter(self.expect(TokenKind.LEFT_BRACE, "{"))
        obj = CoolObject()
        while True:
            tok = self.current()
            if tok is None:
                raise self.eof_error("}")
            if tok.kind is TokenKind.RIGHT_BRACE:
                self.advance()
                break
            if tok.kind is TokenKind.NEWLINE:
                self.advance()
            elif tok.kind is TokenKind.IDENTIFIER:
                self.parse_field(obj)
            else:
                raise ParseError(
                    ParseErrorKind.EXPECTED_TOKEN, "}", tok, tok.line, tok.col
                )
        self.leave()
        return obj

    def parse_list(self) -> CoolList:
        """Parse a `[]`-enclosed list body."""
        self.enter(self.expect(TokenKind.LEFT_BRACKET, "["))
        lst = CoolList()
        while True:
            tok = self.current()
            if tok is None:
                raise self.eof_error("]")
            if tok.kind is TokenKind.RIGHT_BRACKET:
                self.advance()
                break
            if tok.kind in (TokenKind.COMMA, TokenKind.NEWLINE):
                self.advance()
            else:
                # identifiers and stray punctuation fail here with an expected `]`
                lst.append(self.parse_value("]"))
        self.leave()
        return lst


def parse_tokens(
    tokens: list[Token], options: ParserOptions | None = None
) -> CoolObject:
    """Parse a token list produced by `tokenize` into a document object."""
    return Parser(tokens, options).parse()


__all__ = ["Parser", "parse_tokens"]
