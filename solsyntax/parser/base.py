"""
Base parser class with shared cursor utilities.

The statement parser, the expression parser and the Yul parser all read
from one TokenCursor so that they can hand control back and forth while
consuming a single token list strictly left to right.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..config import ParseOptions
from ..diagnostics import DiagnosticReporter, ParserError
from ..lexer.tokens import (
    SourceSpan,
    Token,
    TokenType,
    KEYWORDS,
    LONG_OPS,
    TWO_CHAR_OPS,
    SINGLE_CHAR_OPS,
    YUL_KEYWORDS,
    YUL_SYMBOLS,
)


_TOKEN_TEXT = {}
for _table in (KEYWORDS, LONG_OPS, TWO_CHAR_OPS, SINGLE_CHAR_OPS, YUL_KEYWORDS, YUL_SYMBOLS):
    for _text, _type in _table.items():
        _TOKEN_TEXT.setdefault(_type, _text)
_TOKEN_TEXT[TokenType.PRAGMA_SEMICOLON] = ';'
_TOKEN_TEXT[TokenType.ASSEMBLY_LBRACE] = '{'


def describe_token_type(token_type: TokenType) -> str:
    """Render a token type the way it appears in 'Expected ...' messages."""
    if token_type in _TOKEN_TEXT:
        return f"'{_TOKEN_TEXT[token_type]}'"
    if token_type == TokenType.EOF:
        return 'end of input'
    return token_type.name.lower().replace('_', ' ')


DATA_LOCATIONS = (TokenType.MEMORY, TokenType.STORAGE, TokenType.CALLDATA)

# Nested expressions, statements, type names and Yul constructs combined.
MAX_NESTING_DEPTH = 64


class TokenCursor:
    """Position in a visible token list, shared by cooperating parsers."""

    def __init__(
        self,
        tokens: List[Token],
        reporter: DiagnosticReporter,
        options: ParseOptions,
    ):
        self.tokens = tokens
        self.pos = 0
        self.reporter = reporter
        self.options = options
        self.depth = 0


class BaseParser:
    """
    Base class for all parsers.

    Provides shared utilities for:
    - Lookahead and consumption
    - Expectation checks that raise positioned ParserErrors
    - Identifier acceptance policy (``from``, reserved words)
    - Nesting depth limit
    - Span construction
    """

    def __init__(self, cursor: TokenCursor):
        self._cursor = cursor

    @property
    def tokens(self) -> List[Token]:
        return self._cursor.tokens

    @property
    def pos(self) -> int:
        return self._cursor.pos

    @pos.setter
    def pos(self, value: int) -> None:
        self._cursor.pos = value

    @property
    def reporter(self) -> DiagnosticReporter:
        return self._cursor.reporter

    @property
    def options(self) -> ParseOptions:
        return self._cursor.options

    # =========================================================================
    # LOOKAHEAD
    # =========================================================================

    def peek(self, offset: int = 0) -> Token:
        """Look ahead in the token stream without consuming."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def current(self) -> Token:
        """Return the current token."""
        return self.peek()

    def previous(self) -> Token:
        """Return the most recently consumed token."""
        return self.tokens[max(self.pos - 1, 0)]

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current().type in types

    def match_value(self, token_type: TokenType, value: str, offset: int = 0) -> bool:
        token = self.peek(offset)
        return token.type == token_type and token.value == value

    # =========================================================================
    # EXPECTATIONS
    # =========================================================================

    def error(self, expected: str, construct: Optional[str] = None) -> ParserError:
        """Build a ParserError for the current token."""
        return self.reporter.syntax_error(self.current(), expected, construct)

    def expect(self, token_type: TokenType, construct: Optional[str] = None) -> Token:
        """Consume the current token if it matches, otherwise raise an error."""
        if self.current().type != token_type:
            raise self.error(describe_token_type(token_type), construct)
        return self.advance()

    def is_identifier(self, offset: int = 0, allow_from: bool = True) -> bool:
        """Whether the token at ``offset`` may be used as an identifier."""
        token_type = self.peek(offset).type
        if token_type == TokenType.IDENTIFIER:
            return True
        if token_type == TokenType.FROM:
            return allow_from
        if token_type == TokenType.RESERVED_KEYWORD:
            return self.options.allow_reserved_identifiers
        return False

    def expect_identifier(self, construct: Optional[str] = None, allow_from: bool = True) -> str:
        if not self.is_identifier(allow_from=allow_from):
            raise self.error('identifier', construct)
        return self.advance().value

    def parse_identifier_path(self, construct: Optional[str] = None) -> List[str]:
        """identifier ('.' identifier)*"""
        path = [self.expect_identifier(construct)]
        while self.match(TokenType.DOT) and self.is_identifier(1):
            self.advance()
            path.append(self.advance().value)
        return path

    # =========================================================================
    # NESTING
    # =========================================================================

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Track one level of recursive descent; too deep is a ParserError."""
        self._cursor.depth += 1
        try:
            if self._cursor.depth > MAX_NESTING_DEPTH:
                raise self.reporter.structural_error(
                    'Maximum recursion depth reached during parsing',
                    self.current().span,
                )
            yield
        finally:
            self._cursor.depth -= 1

    # =========================================================================
    # SPANS
    # =========================================================================

    def span_from(self, start: SourceSpan) -> SourceSpan:
        """Span from ``start`` through the last consumed token."""
        return start.merge(self.previous().span)
