"""
Entry points that turn source text into tokens or an AST without raising.

Lexer and parser errors are converted into Diagnostic records; any other
exception is a defect and propagates.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import ParseOptions
from .diagnostics import Diagnostic, DiagnosticReporter, SolidityParseError
from .lexer import Lexer, Token, visible_tokens
from .parser import Parser, SourceUnit


@dataclass
class ParseResult:
    """Outcome of parsing one source text."""
    source_unit: Optional[SourceUnit]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.source_unit is not None and not self.diagnostics


def parse_source(
    source: str,
    options: Optional[ParseOptions] = None,
    file_path: str = '',
) -> ParseResult:
    """Tokenize and parse ``source``; failures are reported as diagnostics."""
    reporter = DiagnosticReporter(file_path)
    try:
        tokens = Lexer(source, reporter).tokenize()
        source_unit = Parser(tokens, options, reporter).parse()
    except SolidityParseError:
        return ParseResult(source_unit=None, diagnostics=reporter.diagnostics)
    return ParseResult(source_unit=source_unit, diagnostics=reporter.diagnostics)


def tokenize_source(source: str, include_hidden: bool = False) -> Tuple[List[Token], List[Diagnostic]]:
    """
    Tokenize ``source``.

    Returns the tokens produced (up to the first error, if any) and the
    diagnostics. Whitespace and comments are included only when
    ``include_hidden`` is set.
    """
    reporter = DiagnosticReporter()
    lexer = Lexer(source, reporter)
    try:
        lexer.tokenize_all()
    except SolidityParseError:
        pass  # already recorded by the reporter
    tokens = list(lexer.tokens) if include_hidden else visible_tokens(lexer.tokens)
    return tokens, reporter.diagnostics
