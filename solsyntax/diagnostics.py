"""
Diagnostic reporting for the Solidity syntax front end.

Collects positioned errors raised by the lexer, the expression engine,
the statement parser and the Yul sub-parser. Every component of a single
parse shares one DiagnosticReporter; the first error aborts the parse.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer.tokens import SourceSpan, Token


class DiagnosticSeverity(Enum):
    """Severity levels for syntax diagnostics."""
    ERROR = 'error'


class DiagnosticKind(Enum):
    """Which stage detected the problem."""
    LEXICAL = 'LexerError'
    SYNTACTIC = 'ParserError'


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    kind: DiagnosticKind
    message: str
    span: 'SourceSpan'
    file_path: str = ''

    @property
    def line(self) -> int:
        return self.span.line

    @property
    def column(self) -> int:
        return self.span.column

    def __str__(self) -> str:
        location = f'{self.span.line}:{self.span.column}'
        if self.file_path:
            location = f'{self.file_path}:{location}'
        return f'[{self.severity.value}] {location}: {self.message} ({self.kind.value})'


class SolidityParseError(Exception):
    """Base exception for errors that abort a parse."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(str(diagnostic))


class LexerError(SolidityParseError):
    """Raised when no token rule matches or a literal is malformed."""
    pass


class ParserError(SolidityParseError):
    """Raised when the next token does not fit the current grammar position."""
    pass


class DiagnosticReporter:
    """
    Collects diagnostics for one parse and builds the exceptions that abort it.

    Usage:
        reporter = DiagnosticReporter()
        raise reporter.syntax_error(token, "';'")
        # ... in the caller ...
        reporter.print_summary()
    """

    def __init__(self, file_path: str = ''):
        self._diagnostics: List[Diagnostic] = []
        self._file_path = file_path

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def count(self) -> int:
        """Get total diagnostic count."""
        return len(self._diagnostics)

    @property
    def has_errors(self) -> bool:
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def clear(self) -> None:
        """Clear all diagnostics."""
        self._diagnostics.clear()

    # =========================================================================
    # ERROR CONSTRUCTORS
    # =========================================================================

    def _record(self, kind: DiagnosticKind, message: str, span: 'SourceSpan') -> Diagnostic:
        diagnostic = Diagnostic(
            severity=DiagnosticSeverity.ERROR,
            kind=kind,
            message=message,
            span=span,
            file_path=self._file_path,
        )
        self._diagnostics.append(diagnostic)
        return diagnostic

    def lexical_error(self, message: str, span: 'SourceSpan') -> LexerError:
        """Record a lexical error and return the exception to raise."""
        return LexerError(self._record(DiagnosticKind.LEXICAL, message, span))

    def syntax_error(
        self,
        token: 'Token',
        expected: str,
        construct: Optional[str] = None,
    ) -> ParserError:
        """Record an unexpected-token error at ``token``."""
        message = f'Expected {expected} but got {token.describe()}'
        if construct:
            message = f'{message} in {construct}'
        return ParserError(self._record(DiagnosticKind.SYNTACTIC, message, token.span))

    def structural_error(self, message: str, span: 'SourceSpan') -> ParserError:
        """Record a cardinality or shape violation (e.g. a switch without cases)."""
        return ParserError(self._record(DiagnosticKind.SYNTACTIC, message, span))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        print(f'\nSyntax errors ({len(self._diagnostics)}):', file=file)
        for d in self._diagnostics:
            print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all diagnostics."""
        if not self._diagnostics:
            return 'No syntax errors.'

        by_kind: dict = {}
        for d in self._diagnostics:
            by_kind[d.kind.value] = by_kind.get(d.kind.value, 0) + 1

        parts = [f'{count} {kind}' for kind, count in sorted(by_kind.items())]
        return f'Syntax errors: {", ".join(parts)}'
