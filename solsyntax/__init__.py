"""
Solidity syntax front end

This package tokenizes and parses Solidity source text, including inline
assembly written in Yul, into a typed AST with positioned diagnostics.

Module Structure:
- lexer/: Mode-aware tokenization (TokenType, Token, Mode, Lexer)
- parser/: AST nodes, expression engine, Yul sub-parser and Parser
- diagnostics.py: Diagnostic records, the reporter and parse exceptions
- config.py: ParseOptions and HarnessConfig
- api.py: parse_source / tokenize_source, which never raise on bad input
- harness.py: fixture-corpus runner (solsyntax-harness)

Usage:
    from solsyntax import parse_source

    result = parse_source(text)
    if not result.ok:
        for diagnostic in result.diagnostics:
            print(diagnostic)

    # Or drive the stages directly:
    from solsyntax.lexer import Lexer
    from solsyntax.parser import Parser

    unit = Parser(Lexer(text).tokenize()).parse()
"""

from .api import ParseResult, parse_source, tokenize_source
from .config import ParseOptions, HarnessConfig
from .diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticReporter,
    SolidityParseError,
    LexerError,
    ParserError,
)
from .lexer import Lexer, Token, TokenType, Mode
from .parser import Parser, SourceUnit

__all__ = [
    'ParseResult',
    'parse_source',
    'tokenize_source',
    'ParseOptions',
    'HarnessConfig',
    'Diagnostic',
    'DiagnosticKind',
    'DiagnosticReporter',
    'SolidityParseError',
    'LexerError',
    'ParserError',
    'Lexer',
    'Token',
    'TokenType',
    'Mode',
    'Parser',
    'SourceUnit',
]
