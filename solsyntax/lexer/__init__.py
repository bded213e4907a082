"""
Lexer module for the Solidity syntax front end.

This module provides mode-aware tokenization of Solidity source code.
"""

from .tokens import (
    TokenType,
    Token,
    Mode,
    Channel,
    SourceSpan,
    KEYWORDS,
    RESERVED_KEYWORDS,
    ELEMENTARY_TYPES,
    YUL_EVM_BUILTINS,
)
from .lexer import Lexer, visible_tokens

__all__ = [
    'TokenType',
    'Token',
    'Mode',
    'Channel',
    'SourceSpan',
    'KEYWORDS',
    'RESERVED_KEYWORDS',
    'ELEMENTARY_TYPES',
    'YUL_EVM_BUILTINS',
    'Lexer',
    'visible_tokens',
]
