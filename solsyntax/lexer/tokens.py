"""
Token definitions for the Solidity lexer.

This module contains the TokenType enum, the lexer Mode and Channel
enums, the Token and SourceSpan dataclasses, and the constant tables for
keywords, operators and low-level (Yul) builtins.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types recognized by the Solidity lexer."""

    # Keywords
    ABSTRACT = auto()
    ANONYMOUS = auto()
    AS = auto()
    ASSEMBLY = auto()
    BREAK = auto()
    CALLDATA = auto()
    CATCH = auto()
    CONSTANT = auto()
    CONSTRUCTOR = auto()
    CONTINUE = auto()
    CONTRACT = auto()
    DELETE = auto()
    DO = auto()
    ELSE = auto()
    EMIT = auto()
    ENUM = auto()
    EVENT = auto()
    EXTERNAL = auto()
    FALLBACK = auto()
    FALSE = auto()
    FOR = auto()
    FROM = auto()
    FUNCTION = auto()
    HEX = auto()
    IF = auto()
    IMMUTABLE = auto()
    IMPORT = auto()
    INDEXED = auto()
    INTERFACE = auto()
    INTERNAL = auto()
    IS = auto()
    LIBRARY = auto()
    MAPPING = auto()
    MEMORY = auto()
    MODIFIER = auto()
    NEW = auto()
    OVERRIDE = auto()
    PAYABLE = auto()
    PRAGMA = auto()
    PRIVATE = auto()
    PUBLIC = auto()
    PURE = auto()
    RECEIVE = auto()
    RETURN = auto()
    RETURNS = auto()
    STORAGE = auto()
    STRUCT = auto()
    TRUE = auto()
    TRY = auto()
    TYPE = auto()
    UNCHECKED = auto()
    USING = auto()
    VIEW = auto()
    VIRTUAL = auto()
    WHILE = auto()
    SUB_DENOMINATION = auto()
    RESERVED_KEYWORD = auto()

    # Elementary types
    ADDRESS = auto()
    BOOL = auto()
    BYTES = auto()
    STRING = auto()
    FIXED_BYTES = auto()
    SIGNED_INTEGER_TYPE = auto()
    UNSIGNED_INTEGER_TYPE = auto()
    FIXED = auto()
    UFIXED = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    STAR_STAR = auto()
    AMPERSAND = auto()
    PIPE = auto()
    CARET = auto()
    TILDE = auto()
    LT = auto()
    GT = auto()
    LT_EQ = auto()
    GT_EQ = auto()
    EQ_EQ = auto()
    BANG_EQ = auto()
    AMPERSAND_AMPERSAND = auto()
    PIPE_PIPE = auto()
    BANG = auto()
    LT_LT = auto()
    GT_GT = auto()
    GT_GT_GT = auto()
    EQ = auto()
    PLUS_EQ = auto()
    MINUS_EQ = auto()
    STAR_EQ = auto()
    SLASH_EQ = auto()
    PERCENT_EQ = auto()
    AMPERSAND_EQ = auto()
    PIPE_EQ = auto()
    CARET_EQ = auto()
    LT_LT_EQ = auto()
    GT_GT_EQ = auto()
    GT_GT_GT_EQ = auto()
    PLUS_PLUS = auto()
    MINUS_MINUS = auto()
    QUESTION = auto()
    COLON = auto()
    ARROW = auto()
    RIGHT_ARROW = auto()

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    SEMICOLON = auto()
    COMMA = auto()
    DOT = auto()

    # Literals
    NUMBER = auto()
    HEX_NUMBER = auto()
    STRING_LITERAL = auto()
    UNICODE_STRING_LITERAL = auto()
    HEX_STRING = auto()
    IDENTIFIER = auto()

    # Pragma mode
    PRAGMA_TOKEN = auto()
    PRAGMA_SEMICOLON = auto()

    # Assembly block mode
    ASSEMBLY_DIALECT = auto()
    ASSEMBLY_FLAG_STRING = auto()
    ASSEMBLY_LBRACE = auto()

    # Yul mode
    YUL_BREAK = auto()
    YUL_CASE = auto()
    YUL_CONTINUE = auto()
    YUL_DEFAULT = auto()
    YUL_FALSE = auto()
    YUL_FOR = auto()
    YUL_FUNCTION = auto()
    YUL_IF = auto()
    YUL_LEAVE = auto()
    YUL_LET = auto()
    YUL_SWITCH = auto()
    YUL_TRUE = auto()
    YUL_EVM_BUILTIN = auto()
    YUL_LBRACE = auto()
    YUL_RBRACE = auto()
    YUL_LPAREN = auto()
    YUL_RPAREN = auto()
    YUL_ASSIGN = auto()
    YUL_PERIOD = auto()
    YUL_COMMA = auto()
    YUL_ARROW = auto()
    YUL_IDENTIFIER = auto()
    YUL_DECIMAL_NUMBER = auto()
    YUL_HEX_NUMBER = auto()
    YUL_STRING_LITERAL = auto()
    YUL_HEX_STRING = auto()

    # Special
    WHITESPACE = auto()
    COMMENT = auto()
    EOF = auto()


class Mode(Enum):
    """Lexical contexts; the top of the lexer's mode stack selects the rule table."""
    DEFAULT = 'default'
    PRAGMA = 'pragma'
    ASSEMBLY_BLOCK = 'assembly_block'
    YUL = 'yul'


class Channel(Enum):
    """Whether a token is consumed by the parser or kept only for tooling."""
    DEFAULT = 'default'
    HIDDEN = 'hidden'


@dataclass(frozen=True)
class SourceSpan:
    """Character offsets and line/column positions of a slice of source text."""
    start: int
    end: int
    line: int
    column: int
    end_line: int
    end_column: int

    def __str__(self) -> str:
        return f'{self.line}:{self.column}'

    def merge(self, other: 'SourceSpan') -> 'SourceSpan':
        """Return the span covering this span through the end of ``other``."""
        return SourceSpan(
            start=self.start,
            end=other.end,
            line=self.line,
            column=self.column,
            end_line=other.end_line,
            end_column=other.end_column,
        )


@dataclass(frozen=True)
class Token:
    """Represents a single token from the lexer."""
    type: TokenType
    value: str
    span: SourceSpan
    channel: Channel = Channel.DEFAULT

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column

    @property
    def is_hidden(self) -> bool:
        return self.channel == Channel.HIDDEN

    @property
    def is_doc_comment(self) -> bool:
        """NatSpec comments (``///`` and ``/** */``) attach to the next definition."""
        return self.type == TokenType.COMMENT and (
            self.value.startswith('///') or
            (self.value.startswith('/**') and self.value != '/**/')
        )

    def describe(self) -> str:
        """Human-readable form used in diagnostics."""
        if self.type == TokenType.EOF:
            return 'end of input'
        return f"'{self.value}'"


# Keyword to TokenType mapping
KEYWORDS = {
    'abstract': TokenType.ABSTRACT,
    'anonymous': TokenType.ANONYMOUS,
    'as': TokenType.AS,
    'assembly': TokenType.ASSEMBLY,
    'break': TokenType.BREAK,
    'calldata': TokenType.CALLDATA,
    'catch': TokenType.CATCH,
    'constant': TokenType.CONSTANT,
    'constructor': TokenType.CONSTRUCTOR,
    'continue': TokenType.CONTINUE,
    'contract': TokenType.CONTRACT,
    'delete': TokenType.DELETE,
    'do': TokenType.DO,
    'else': TokenType.ELSE,
    'emit': TokenType.EMIT,
    'enum': TokenType.ENUM,
    'event': TokenType.EVENT,
    'external': TokenType.EXTERNAL,
    'fallback': TokenType.FALLBACK,
    'false': TokenType.FALSE,
    'for': TokenType.FOR,
    'from': TokenType.FROM,
    'function': TokenType.FUNCTION,
    'hex': TokenType.HEX,
    'if': TokenType.IF,
    'immutable': TokenType.IMMUTABLE,
    'import': TokenType.IMPORT,
    'indexed': TokenType.INDEXED,
    'interface': TokenType.INTERFACE,
    'internal': TokenType.INTERNAL,
    'is': TokenType.IS,
    'library': TokenType.LIBRARY,
    'mapping': TokenType.MAPPING,
    'memory': TokenType.MEMORY,
    'modifier': TokenType.MODIFIER,
    'new': TokenType.NEW,
    'override': TokenType.OVERRIDE,
    'payable': TokenType.PAYABLE,
    'pragma': TokenType.PRAGMA,
    'private': TokenType.PRIVATE,
    'public': TokenType.PUBLIC,
    'pure': TokenType.PURE,
    'receive': TokenType.RECEIVE,
    'return': TokenType.RETURN,
    'returns': TokenType.RETURNS,
    'storage': TokenType.STORAGE,
    'struct': TokenType.STRUCT,
    'true': TokenType.TRUE,
    'try': TokenType.TRY,
    'type': TokenType.TYPE,
    'unchecked': TokenType.UNCHECKED,
    'using': TokenType.USING,
    'view': TokenType.VIEW,
    'virtual': TokenType.VIRTUAL,
    'while': TokenType.WHILE,
    'address': TokenType.ADDRESS,
    'bool': TokenType.BOOL,
    'bytes': TokenType.BYTES,
    'string': TokenType.STRING,
}

RESERVED_KEYWORDS = frozenset({
    'after', 'alias', 'apply', 'auto', 'byte', 'case', 'copyof', 'default',
    'define', 'final', 'implements', 'in', 'inline', 'let', 'macro', 'match',
    'mutable', 'null', 'of', 'partial', 'promise', 'reference', 'relocatable',
    'sealed', 'sizeof', 'static', 'supports', 'switch', 'typedef', 'typeof',
    'var',
})

SUB_DENOMINATIONS = frozenset({
    'wei', 'gwei', 'ether', 'seconds', 'minutes', 'hours', 'days', 'weeks', 'years',
})

SIGNED_INTEGER_TYPES = frozenset({'int'} | {f'int{n}' for n in range(8, 257, 8)})
UNSIGNED_INTEGER_TYPES = frozenset({'uint'} | {f'uint{n}' for n in range(8, 257, 8)})
FIXED_BYTES_TYPES = frozenset(f'bytes{n}' for n in range(1, 33))

# Token types that name an elementary type
ELEMENTARY_TYPES = frozenset({
    TokenType.ADDRESS,
    TokenType.BOOL,
    TokenType.BYTES,
    TokenType.STRING,
    TokenType.FIXED_BYTES,
    TokenType.SIGNED_INTEGER_TYPE,
    TokenType.UNSIGNED_INTEGER_TYPE,
    TokenType.FIXED,
    TokenType.UFIXED,
})

# Operators longer than two characters
LONG_OPS = {
    '>>>=': TokenType.GT_GT_GT_EQ,
    '>>>': TokenType.GT_GT_GT,
    '<<=': TokenType.LT_LT_EQ,
    '>>=': TokenType.GT_GT_EQ,
}

# Two-character operators
TWO_CHAR_OPS = {
    '++': TokenType.PLUS_PLUS,
    '--': TokenType.MINUS_MINUS,
    '**': TokenType.STAR_STAR,
    '&&': TokenType.AMPERSAND_AMPERSAND,
    '||': TokenType.PIPE_PIPE,
    '==': TokenType.EQ_EQ,
    '!=': TokenType.BANG_EQ,
    '<=': TokenType.LT_EQ,
    '>=': TokenType.GT_EQ,
    '<<': TokenType.LT_LT,
    '>>': TokenType.GT_GT,
    '+=': TokenType.PLUS_EQ,
    '-=': TokenType.MINUS_EQ,
    '*=': TokenType.STAR_EQ,
    '/=': TokenType.SLASH_EQ,
    '%=': TokenType.PERCENT_EQ,
    '&=': TokenType.AMPERSAND_EQ,
    '|=': TokenType.PIPE_EQ,
    '^=': TokenType.CARET_EQ,
    '=>': TokenType.ARROW,
    '->': TokenType.RIGHT_ARROW,
}

# Single-character operators and delimiters
SINGLE_CHAR_OPS = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.STAR,
    '/': TokenType.SLASH,
    '%': TokenType.PERCENT,
    '&': TokenType.AMPERSAND,
    '|': TokenType.PIPE,
    '^': TokenType.CARET,
    '~': TokenType.TILDE,
    '<': TokenType.LT,
    '>': TokenType.GT,
    '!': TokenType.BANG,
    '=': TokenType.EQ,
    '?': TokenType.QUESTION,
    ':': TokenType.COLON,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ';': TokenType.SEMICOLON,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
}

# Yul keywords; Solidity keywords are plain identifiers inside assembly
YUL_KEYWORDS = {
    'break': TokenType.YUL_BREAK,
    'case': TokenType.YUL_CASE,
    'continue': TokenType.YUL_CONTINUE,
    'default': TokenType.YUL_DEFAULT,
    'false': TokenType.YUL_FALSE,
    'for': TokenType.YUL_FOR,
    'function': TokenType.YUL_FUNCTION,
    'if': TokenType.YUL_IF,
    'leave': TokenType.YUL_LEAVE,
    'let': TokenType.YUL_LET,
    'switch': TokenType.YUL_SWITCH,
    'true': TokenType.YUL_TRUE,
}

YUL_EVM_BUILTINS = frozenset({
    'stop', 'add', 'sub', 'mul', 'div', 'sdiv', 'mod', 'smod', 'exp', 'not',
    'lt', 'gt', 'slt', 'sgt', 'eq', 'iszero', 'and', 'or', 'xor', 'byte',
    'shl', 'shr', 'sar', 'addmod', 'mulmod', 'signextend', 'keccak256',
    'pop', 'mload', 'mstore', 'mstore8', 'sload', 'sstore', 'tload', 'tstore',
    'mcopy', 'msize', 'gas', 'address', 'balance', 'selfbalance', 'caller',
    'callvalue', 'calldataload', 'calldatasize', 'calldatacopy',
    'extcodesize', 'extcodecopy', 'returndatasize', 'returndatacopy',
    'extcodehash', 'create', 'create2', 'call', 'callcode', 'delegatecall',
    'staticcall', 'return', 'revert', 'selfdestruct', 'invalid', 'log0',
    'log1', 'log2', 'log3', 'log4', 'chainid', 'origin', 'gasprice',
    'blockhash', 'coinbase', 'timestamp', 'number', 'difficulty',
    'prevrandao', 'gaslimit', 'basefee', 'blobhash', 'blobbasefee',
})

YUL_SYMBOLS = {
    ':=': TokenType.YUL_ASSIGN,
    '->': TokenType.YUL_ARROW,
    '{': TokenType.YUL_LBRACE,
    '}': TokenType.YUL_RBRACE,
    '(': TokenType.YUL_LPAREN,
    ')': TokenType.YUL_RPAREN,
    '.': TokenType.YUL_PERIOD,
    ',': TokenType.YUL_COMMA,
}
