#!/usr/bin/env python3
"""
Unit tests for diagnostic records, the reporter and the public API.

Run with: python3 -m pytest solsyntax/test_diagnostics.py
"""

import io
import unittest

from solsyntax import parse_source, tokenize_source
from solsyntax.diagnostics import (
    DiagnosticKind,
    DiagnosticReporter,
    DiagnosticSeverity,
    LexerError,
    ParserError,
    SolidityParseError,
)
from solsyntax.lexer import Lexer, TokenType


class TestDiagnosticReporter(unittest.TestCase):
    """Test the diagnostics collector."""

    def setUp(self):
        self.token = Lexer('x ;').tokenize()[1]

    def test_syntax_error_message(self):
        reporter = DiagnosticReporter('a.sol')
        error = reporter.syntax_error(self.token, 'expression', 'return statement')
        self.assertIsInstance(error, ParserError)
        self.assertIsInstance(error, SolidityParseError)
        self.assertEqual(error.diagnostic.message, "Expected expression but got ';' in return statement")
        self.assertEqual(reporter.count, 1)

    def test_diagnostic_str(self):
        reporter = DiagnosticReporter('a.sol')
        diagnostic = reporter.syntax_error(self.token, "'('").diagnostic
        self.assertEqual(str(diagnostic), "[error] a.sol:1:3: Expected '(' but got ';' (ParserError)")
        self.assertEqual((diagnostic.line, diagnostic.column), (1, 3))

    def test_lexical_error(self):
        reporter = DiagnosticReporter()
        error = reporter.lexical_error('Invalid character', self.token.span)
        self.assertIsInstance(error, LexerError)
        self.assertEqual(error.diagnostic.kind, DiagnosticKind.LEXICAL)
        self.assertEqual(error.diagnostic.severity, DiagnosticSeverity.ERROR)

    def test_summary_and_clear(self):
        reporter = DiagnosticReporter()
        self.assertEqual(reporter.get_summary(), 'No syntax errors.')
        self.assertFalse(reporter.has_errors)

        reporter.structural_error('Switch statement requires at least one non-default case', self.token.span)
        self.assertTrue(reporter.has_errors)
        self.assertEqual(reporter.get_summary(), 'Syntax errors: 1 ParserError')

        reporter.clear()
        self.assertEqual(reporter.count, 0)

    def test_print_summary(self):
        reporter = DiagnosticReporter('a.sol')
        reporter.syntax_error(self.token, "'('")
        out = io.StringIO()
        reporter.print_summary(file=out)
        self.assertIn('Syntax errors (1):', out.getvalue())
        self.assertIn('a.sol:1:3', out.getvalue())

    def test_print_summary_silent_without_errors(self):
        out = io.StringIO()
        DiagnosticReporter().print_summary(file=out)
        self.assertEqual(out.getvalue(), '')


class TestPublicApi(unittest.TestCase):
    """parse_source and tokenize_source never raise on malformed input."""

    def test_parse_source_ok(self):
        result = parse_source('contract C {}')
        self.assertTrue(result.ok)
        self.assertEqual(result.source_unit.contracts[0].name, 'C')

    def test_parse_source_records_file_path(self):
        result = parse_source('contract {', file_path='bad.sol')
        self.assertFalse(result.ok)
        self.assertEqual(result.diagnostics[0].file_path, 'bad.sol')
        self.assertEqual(result.diagnostics[0].kind, DiagnosticKind.SYNTACTIC)

    def test_only_first_error_is_reported(self):
        result = parse_source('contract { uint x = ; }')
        self.assertEqual(len(result.diagnostics), 1)

    def test_deep_nesting_is_a_diagnostic(self):
        sources = {
            'parentheses': 'contract C { function f() public { x = %s1%s; } }' % ('(' * 150, ')' * 150),
            'prefix operators': 'contract C { function f() public { x = %s1; } }' % ('!' * 1500),
            'blocks': 'contract C { function f() public { %s %s } }' % ('{' * 300, '}' * 300),
            'mappings': 'contract C { %suint%s m; }' % ('mapping(uint => ' * 200, ')' * 200),
            'yul calls': 'contract C { function f() public { assembly { pop(%s1%s) } } }' % ('f(' * 300, ')' * 300),
        }
        for name, source in sources.items():
            with self.subTest(name=name):
                result = parse_source(source)
                self.assertFalse(result.ok)
                self.assertIsNone(result.source_unit)
                self.assertEqual(len(result.diagnostics), 1)
                self.assertIn('recursion depth', result.diagnostics[0].message)
                self.assertEqual(result.diagnostics[0].kind, DiagnosticKind.SYNTACTIC)

    def test_moderate_nesting_parses(self):
        source = 'contract C { function f() public { x = %s1%s; { { if (a) { b; } } } } }' % ('(' * 30, ')' * 30)
        self.assertTrue(parse_source(source).ok)

    def test_tokenize_source(self):
        tokens, diagnostics = tokenize_source('uint x; // c')
        self.assertEqual(diagnostics, [])
        self.assertEqual([t.type for t in tokens][-1], TokenType.EOF)
        self.assertNotIn(TokenType.COMMENT, [t.type for t in tokens])

        all_tokens, _ = tokenize_source('uint x; // c', include_hidden=True)
        self.assertIn(TokenType.COMMENT, [t.type for t in all_tokens])

    def test_tokenize_source_partial_on_error(self):
        tokens, diagnostics = tokenize_source('uint x = "open')
        self.assertEqual(len(diagnostics), 1)
        self.assertEqual([t.value for t in tokens], ['uint', 'x', '='])


if __name__ == '__main__':
    unittest.main(verbosity=2)
