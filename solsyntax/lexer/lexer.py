"""
Lexer implementation for Solidity source code.

The Lexer tokenizes Solidity source code into a stream of tokens that can
be consumed by the parser. It keeps a stack of lexical modes so that the
same characters are classified differently inside pragma directives,
assembly block headers and Yul code than in ordinary Solidity.
"""

import re
from typing import List, Optional

from ..diagnostics import DiagnosticReporter, LexerError
from .tokens import (
    Channel,
    Mode,
    SourceSpan,
    Token,
    TokenType,
    KEYWORDS,
    RESERVED_KEYWORDS,
    SUB_DENOMINATIONS,
    SIGNED_INTEGER_TYPES,
    UNSIGNED_INTEGER_TYPES,
    FIXED_BYTES_TYPES,
    LONG_OPS,
    TWO_CHAR_OPS,
    SINGLE_CHAR_OPS,
    YUL_KEYWORDS,
    YUL_EVM_BUILTINS,
    YUL_SYMBOLS,
)


# =============================================================================
# PRECOMPILED REGEX PATTERNS
# =============================================================================

WHITESPACE_PATTERN = re.compile(r'[ \t\r\n\f]+')
LINE_COMMENT_PATTERN = re.compile(r'//[^\r\n]*')
BLOCK_COMMENT_PATTERN = re.compile(r'/\*[\s\S]*?\*/')

WORD_PATTERN = re.compile(r'[a-zA-Z$_][a-zA-Z0-9$_]*')
FIXED_PATTERN = re.compile(r'u?fixed(?:[1-9][0-9]*x[1-9][0-9]*)?')

HEX_NUMBER_PATTERN = re.compile(r'0[xX][0-9a-fA-F](?:_?[0-9a-fA-F])*')
DECIMAL_NUMBER_PATTERN = re.compile(
    r'(?:[0-9](?:_?[0-9])*(?:\.[0-9](?:_?[0-9])*)?|\.[0-9](?:_?[0-9])*)'
    r'(?:[eE]-?[0-9](?:_?[0-9])*)?'
)

STRING_PATTERNS = {
    '"': re.compile(r'"(?:[^"\\\r\n]|\\[\s\S])*"'),
    "'": re.compile(r"'(?:[^'\\\r\n]|\\[\s\S])*'"),
}
HEX_STRING_PATTERNS = {
    '"': re.compile(r'"([^"\r\n]*)"'),
    "'": re.compile(r"'([^'\r\n]*)'"),
}
HEX_STRING_BODY_PATTERN = re.compile(r'(?:[0-9a-fA-F]{2}(?:_?[0-9a-fA-F]{2})*)?')

PRAGMA_CHUNK_PATTERN = re.compile(r'[^\s;]+')

YUL_HEX_NUMBER_PATTERN = re.compile(r'0x[0-9a-fA-F]+')
YUL_DECIMAL_NUMBER_PATTERN = re.compile(r'0|[1-9][0-9]*')

YUL_TWO_CHAR_SYMBOLS = (':=', '->')
QUOTES = ('"', "'")
ASSEMBLY_DIALECT = '"evmasm"'


def visible_tokens(tokens: List[Token]) -> List[Token]:
    """Filter a full token list down to the tokens the parser consumes."""
    return [t for t in tokens if not t.is_hidden]


class Lexer:
    """
    Lexer for Solidity source code.

    Converts source text into a list of tokens for parsing. ``tokenize``
    returns the parser's view (whitespace and comments removed);
    ``tokenize_all`` returns every token, so that joining their values
    reproduces the source exactly.
    """

    def __init__(self, source: str, reporter: Optional[DiagnosticReporter] = None):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.modes: List[Mode] = [Mode.DEFAULT]
        self.reporter = reporter or DiagnosticReporter()
        self._finished = False

    @property
    def mode(self) -> Mode:
        return self.modes[-1]

    @property
    def hidden_tokens(self) -> List[Token]:
        return [t for t in self.tokens if t.is_hidden]

    def peek(self, offset: int = 0) -> str:
        """Look ahead in the source without consuming."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ''
        return self.source[pos]

    def _advance(self, length: int) -> None:
        text = self.source[self.pos:self.pos + length]
        newlines = text.count('\n')
        if newlines:
            self.line += newlines
            self.column = length - text.rfind('\n')
        else:
            self.column += length
        self.pos += length

    def _consume(
        self,
        token_type: TokenType,
        length: int,
        channel: Channel = Channel.DEFAULT,
    ) -> Token:
        """Consume ``length`` characters as one token and record it."""
        start, line, column = self.pos, self.line, self.column
        self._advance(length)
        token = Token(
            type=token_type,
            value=self.source[start:self.pos],
            span=SourceSpan(start, self.pos, line, column, self.line, self.column),
            channel=channel,
        )
        self.tokens.append(token)
        return token

    def _span_here(self, length: int = 1) -> SourceSpan:
        length = min(length, len(self.source) - self.pos)
        return SourceSpan(
            self.pos, self.pos + length,
            self.line, self.column,
            self.line, self.column + length,
        )

    def _error(self, message: str, length: int = 1) -> LexerError:
        return self.reporter.lexical_error(message, self._span_here(length))

    # =========================================================================
    # MODE STACK
    # =========================================================================

    def push_mode(self, mode: Mode) -> None:
        self.modes.append(mode)

    def pop_mode(self) -> None:
        if len(self.modes) == 1:
            raise self._error("Unbalanced '}': no assembly block is open")
        self.modes.pop()

    def _check_balanced(self) -> None:
        if self.mode == Mode.PRAGMA:
            raise self._error("Unterminated pragma directive: expected ';'", 0)
        if self.mode == Mode.ASSEMBLY_BLOCK:
            raise self._error("Expected '{' to open the assembly block", 0)
        if self.mode == Mode.YUL:
            depth = self.modes.count(Mode.YUL)
            raise self._error(f"Unterminated assembly block: {depth} unclosed '{{'", 0)

    # =========================================================================
    # TOKENIZATION
    # =========================================================================

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return the parser-visible tokens.

        Returns:
            List of Token objects, ending with an EOF token.
        """
        return visible_tokens(self.tokenize_all())

    def tokenize_all(self) -> List[Token]:
        """Tokenize the entire source, keeping whitespace and comment tokens."""
        if self._finished:
            return list(self.tokens)

        while self.pos < len(self.source):
            mode = self.mode
            if mode == Mode.DEFAULT:
                self._lex_default()
            elif mode == Mode.PRAGMA:
                self._lex_pragma()
            elif mode == Mode.ASSEMBLY_BLOCK:
                self._lex_assembly_block()
            else:
                self._lex_yul()

        self._check_balanced()
        self._consume(TokenType.EOF, 0)
        self._finished = True
        return list(self.tokens)

    def _lex_trivia(self) -> bool:
        """Consume whitespace or a comment onto the hidden channel."""
        match = WHITESPACE_PATTERN.match(self.source, self.pos)
        if match:
            self._consume(TokenType.WHITESPACE, match.end() - self.pos, Channel.HIDDEN)
            return True
        if self.source.startswith('//', self.pos):
            match = LINE_COMMENT_PATTERN.match(self.source, self.pos)
            self._consume(TokenType.COMMENT, match.end() - self.pos, Channel.HIDDEN)
            return True
        if self.source.startswith('/*', self.pos):
            match = BLOCK_COMMENT_PATTERN.match(self.source, self.pos)
            if not match:
                raise self._error('Unterminated block comment', 2)
            self._consume(TokenType.COMMENT, match.end() - self.pos, Channel.HIDDEN)
            return True
        return False

    def _next_is_quote(self, offset: int) -> bool:
        return self.peek(offset) in QUOTES

    def _read_string(self, token_type: TokenType, prefix_length: int = 0) -> None:
        quote = self.peek(prefix_length)
        match = STRING_PATTERNS[quote].match(self.source, self.pos + prefix_length)
        if not match:
            raise self._error('Unterminated string literal', prefix_length + 1)
        self._consume(token_type, match.end() - self.pos)

    def _read_hex_string(self, token_type: TokenType) -> None:
        """Read ``hex"..."``: pairs of hex digits, optionally separated by '_'."""
        quote = self.peek(3)
        match = HEX_STRING_PATTERNS[quote].match(self.source, self.pos + 3)
        if not match:
            raise self._error('Unterminated hex string literal', 4)
        body = match.group(1)
        length = match.end() - self.pos
        if not HEX_STRING_BODY_PATTERN.fullmatch(body):
            digits = [c for c in body if c != '_']
            if any(c not in '0123456789abcdefABCDEF' for c in digits):
                message = 'Invalid character in hex string literal'
            elif len(digits) % 2:
                message = 'Hex string literal must contain an even number of hex digits'
            else:
                message = "Misplaced '_' in hex string literal"
            raise self._error(message, length)
        self._consume(token_type, length)

    def _classify_word(self, word: str) -> TokenType:
        token_type = KEYWORDS.get(word)
        if token_type is not None:
            return token_type
        if word in UNSIGNED_INTEGER_TYPES:
            return TokenType.UNSIGNED_INTEGER_TYPE
        if word in SIGNED_INTEGER_TYPES:
            return TokenType.SIGNED_INTEGER_TYPE
        if word in FIXED_BYTES_TYPES:
            return TokenType.FIXED_BYTES
        if FIXED_PATTERN.fullmatch(word):
            return TokenType.UFIXED if word.startswith('u') else TokenType.FIXED
        if word in SUB_DENOMINATIONS:
            return TokenType.SUB_DENOMINATION
        if word in RESERVED_KEYWORDS:
            return TokenType.RESERVED_KEYWORD
        return TokenType.IDENTIFIER

    def _lex_default(self) -> None:
        if self._lex_trivia():
            return

        ch = self.peek()

        # Identifiers, keywords and prefixed string literals
        if ch.isascii() and (ch.isalpha() or ch in '$_'):
            word = WORD_PATTERN.match(self.source, self.pos).group()
            if word == 'hex' and self._next_is_quote(3):
                self._read_hex_string(TokenType.HEX_STRING)
                return
            if word == 'unicode' and self._next_is_quote(7):
                self._read_string(TokenType.UNICODE_STRING_LITERAL, prefix_length=7)
                return
            token_type = self._classify_word(word)
            self._consume(token_type, len(word))
            if token_type == TokenType.PRAGMA:
                self.push_mode(Mode.PRAGMA)
            elif token_type == TokenType.ASSEMBLY:
                self.push_mode(Mode.ASSEMBLY_BLOCK)
            return

        # Numbers
        if '0' <= ch <= '9' or (ch == '.' and '0' <= self.peek(1) <= '9'):
            match = HEX_NUMBER_PATTERN.match(self.source, self.pos)
            if match:
                self._consume(TokenType.HEX_NUMBER, match.end() - self.pos)
                return
            match = DECIMAL_NUMBER_PATTERN.match(self.source, self.pos)
            self._consume(TokenType.NUMBER, match.end() - self.pos)
            return

        # String literals
        if ch in QUOTES:
            self._read_string(TokenType.STRING_LITERAL)
            return

        # Operators, longest first
        for length in (4, 3):
            text = self.source[self.pos:self.pos + length]
            if text in LONG_OPS:
                self._consume(LONG_OPS[text], len(text))
                return
        two_char = self.source[self.pos:self.pos + 2]
        if two_char in TWO_CHAR_OPS:
            self._consume(TWO_CHAR_OPS[two_char], 2)
            return
        if ch in SINGLE_CHAR_OPS:
            self._consume(SINGLE_CHAR_OPS[ch], 1)
            return

        raise self._error(f'Invalid character {ch!r}')

    def _lex_pragma(self) -> None:
        if self._lex_trivia():
            return
        if self.peek() == ';':
            self._consume(TokenType.PRAGMA_SEMICOLON, 1)
            self.pop_mode()
            return
        match = PRAGMA_CHUNK_PATTERN.match(self.source, self.pos)
        self._consume(TokenType.PRAGMA_TOKEN, match.end() - self.pos)

    def _lex_assembly_block(self) -> None:
        if self._lex_trivia():
            return

        ch = self.peek()
        if ch == '{':
            self._consume(TokenType.ASSEMBLY_LBRACE, 1)
            self.modes[-1] = Mode.YUL
        elif ch in QUOTES:
            match = STRING_PATTERNS[ch].match(self.source, self.pos)
            if not match:
                raise self._error('Unterminated string literal')
            text = match.group()
            if text == ASSEMBLY_DIALECT:
                self._consume(TokenType.ASSEMBLY_DIALECT, len(text))
            else:
                self._consume(TokenType.ASSEMBLY_FLAG_STRING, len(text))
        elif ch == '(':
            self._consume(TokenType.LPAREN, 1)
        elif ch == ')':
            self._consume(TokenType.RPAREN, 1)
        elif ch == ',':
            self._consume(TokenType.COMMA, 1)
        else:
            raise self._error(f"Invalid character {ch!r} in assembly block header")

    def _lex_yul(self) -> None:
        if self._lex_trivia():
            return

        ch = self.peek()

        if ch.isascii() and (ch.isalpha() or ch in '$_'):
            word = WORD_PATTERN.match(self.source, self.pos).group()
            if word == 'hex' and self._next_is_quote(3):
                self._read_hex_string(TokenType.YUL_HEX_STRING)
            elif word in YUL_KEYWORDS:
                self._consume(YUL_KEYWORDS[word], len(word))
            elif word in YUL_EVM_BUILTINS:
                self._consume(TokenType.YUL_EVM_BUILTIN, len(word))
            else:
                self._consume(TokenType.YUL_IDENTIFIER, len(word))
            return

        if '0' <= ch <= '9':
            match = YUL_HEX_NUMBER_PATTERN.match(self.source, self.pos)
            if match:
                self._consume(TokenType.YUL_HEX_NUMBER, match.end() - self.pos)
            else:
                match = YUL_DECIMAL_NUMBER_PATTERN.match(self.source, self.pos)
                self._consume(TokenType.YUL_DECIMAL_NUMBER, match.end() - self.pos)
            return

        if ch in QUOTES:
            self._read_string(TokenType.YUL_STRING_LITERAL)
            return

        two_char = self.source[self.pos:self.pos + 2]
        if two_char in YUL_TWO_CHAR_SYMBOLS:
            self._consume(YUL_SYMBOLS[two_char], 2)
            return
        if ch in YUL_SYMBOLS:
            self._consume(YUL_SYMBOLS[ch], 1)
            if ch == '{':
                self.push_mode(Mode.YUL)
            elif ch == '}':
                self.pop_mode()
            return

        raise self._error(f'Invalid character {ch!r} in assembly block')
