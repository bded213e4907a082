"""
Fixture-corpus runner for the Solidity syntax front end.

Walks directories of .sol fixtures, skips the ones annotated with errors a
syntax-only front end cannot detect (or that hold several sources), parses
the rest and checks the outcome against the file's '// ParserError'
annotation. The exit code is the number of failed fixtures.

Usage:
    solsyntax-harness test/libsolidity/syntaxTests test/libsolidity/semanticTests
    solsyntax-harness --keep-going -v fixtures/
"""

import argparse
import logging
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .api import parse_source
from .config import HarnessConfig
from .diagnostics import Diagnostic

logger = logging.getLogger(__name__)

SGR_RESET = '\033[0m'
SGR_BOLD = '\033[1m'
SGR_GREEN = '\033[32m'
SGR_RED = '\033[31m'
SGR_BLUE = '\033[34m'


class FixtureStatus(Enum):
    OK = 'OK'
    FAILED_AS_EXPECTED = 'FAILED AS EXPECTED'
    SUCCEEDED_DESPITE_PARSER_ERROR = 'SUCCEEDED DESPITE PARSER ERROR'
    FAILED = 'FAILED'

    @property
    def is_failure(self) -> bool:
        return self in (FixtureStatus.SUCCEEDED_DESPITE_PARSER_ERROR, FixtureStatus.FAILED)


@dataclass
class FixtureResult:
    """Outcome of running one fixture file."""
    path: Path
    status: FixtureStatus
    diagnostics: List[Diagnostic] = field(default_factory=list)


@dataclass
class HarnessSummary:
    failed: int = 0
    total: int = 0
    results: List[FixtureResult] = field(default_factory=list)


class FixtureRunner:
    """Selects, parses and judges fixture files according to a HarnessConfig."""

    def __init__(self, config: Optional[HarnessConfig] = None):
        self.config = config or HarnessConfig()
        self.options = self.config.parse_options()
        self._expect_failure = re.compile(self.config.expect_failure_pattern, re.MULTILINE)
        self._excludes = [
            re.compile(pattern, re.MULTILINE | re.IGNORECASE)
            for pattern in [self.config.exclude_pattern] + list(self.config.extra_excludes)
        ]

    def is_multi_source(self, text: str) -> bool:
        marker = self.config.multi_source_marker
        return bool(marker) and any(line.startswith(marker) for line in text.splitlines())

    def is_excluded(self, text: str) -> bool:
        if self.is_multi_source(text):
            return True
        return any(pattern.search(text) for pattern in self._excludes)

    def expects_failure(self, text: str) -> bool:
        return self._expect_failure.search(text) is not None

    def collect(self, paths: Iterable[str]) -> List[Path]:
        """Expand files and directories into the sorted list of fixtures to run."""
        fixtures = []
        for raw in paths:
            path = Path(raw)
            if path.is_dir():
                candidates = sorted(p for p in path.glob(self.config.file_pattern) if p.is_file())
            elif path.is_file():
                candidates = [path]
            else:
                raise FileNotFoundError(f'{raw} is not a valid file or directory')

            for candidate in candidates:
                if self.is_excluded(_read_source(candidate)):
                    logger.debug('Skipping excluded fixture %s', candidate)
                    continue
                fixtures.append(candidate)

        logger.debug('Collected %d fixture(s)', len(fixtures))
        return fixtures

    def run_file(self, path: Path) -> FixtureResult:
        text = _read_source(path)
        result = parse_source(text, self.options, file_path=str(path))
        expect_failure = self.expects_failure(text)

        if expect_failure:
            status = FixtureStatus.SUCCEEDED_DESPITE_PARSER_ERROR if result.ok else FixtureStatus.FAILED_AS_EXPECTED
        else:
            status = FixtureStatus.OK if result.ok else FixtureStatus.FAILED

        logger.debug('%s: %s (expected failure: %s)', path, status.value, expect_failure)
        return FixtureResult(path=path, status=status, diagnostics=result.diagnostics)

    def run(self, paths: Iterable[str], out: Optional[TextIO] = None, color: bool = True) -> HarnessSummary:
        """Run every selected fixture, printing one status line per file."""
        if out is None:
            out = sys.stdout

        fixtures = self.collect(paths)
        summary = HarnessSummary(total=len(fixtures))

        for index, path in enumerate(fixtures, start=1):
            result = self.run_file(path)
            summary.results.append(result)
            print(format_status_line(result, index, len(fixtures), color), file=out)

            if result.status.is_failure:
                summary.failed += 1
                for diagnostic in result.diagnostics:
                    print(f'  {diagnostic}', file=out)
                if self.config.stop_on_failure:
                    break

        print(f'Summary: {summary.failed} of {summary.total} sources failed.', file=out)
        return summary


def _read_source(path: Path) -> str:
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return f.read()


def format_status_line(result: FixtureResult, index: int, total: int, color: bool = True) -> str:
    prefix = f'[{index}/{total}] Testing {result.path}'
    if not color:
        return f'{prefix} {result.status.value}'

    status_color = SGR_RED if result.status.is_failure else SGR_GREEN
    return f'{SGR_BLUE}{prefix}{SGR_RESET} {SGR_BOLD}{status_color}{result.status.value}{SGR_RESET}'


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Run the Solidity syntax front end over a fixture corpus')
    parser.add_argument('paths', nargs='+', help='Fixture files or directories')
    parser.add_argument('--config', metavar='FILE', help='JSON file with harness options')
    parser.add_argument('--keep-going', action='store_true',
                        help='Continue after the first failing fixture')
    parser.add_argument('--strict-reserved', action='store_true',
                        help='Reject reserved keywords used as identifiers')
    parser.add_argument('--pattern', metavar='GLOB', help='File glob used inside directories')
    parser.add_argument('--no-color', action='store_true', help='Disable ANSI colors')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log skipped fixtures and decisions')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        config = HarnessConfig.from_json(args.config) if args.config else HarnessConfig()
    except (OSError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if args.keep_going:
        config.stop_on_failure = False
    if args.strict_reserved:
        config.allow_reserved_identifiers = False
    if args.pattern:
        config.file_pattern = args.pattern

    runner = FixtureRunner(config)
    try:
        summary = runner.run(args.paths, color=not args.no_color and sys.stdout.isatty())
    except FileNotFoundError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    return summary.failed


if __name__ == '__main__':
    sys.exit(main())
