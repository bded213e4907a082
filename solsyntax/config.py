"""
Configuration for parsing and for the fixture harness.

ParseOptions tunes grammar policy for a single parse. HarnessConfig holds
the annotation conventions used to decide which fixture files are run and
which are expected to fail; it can be loaded from a JSON file.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class ParseOptions:
    """Grammar policy switches for one parse."""
    # Reserved-for-future words lex as RESERVED_KEYWORD; when True they are
    # also accepted wherever an identifier is expected.
    allow_reserved_identifiers: bool = True


DEFAULT_EXPECT_FAILURE_PATTERN = r'^// ParserError'
DEFAULT_EXCLUDE_PATTERN = (
    r'^// (Syntax|Type|Declaration)Error'
    r'|^// ParserError (6275|3716|6281|2837|6933)'
)
DEFAULT_MULTI_SOURCE_MARKER = '==== Source:'


@dataclass
class HarnessConfig:
    """Conventions for selecting and judging fixture files."""
    expect_failure_pattern: str = DEFAULT_EXPECT_FAILURE_PATTERN
    exclude_pattern: str = DEFAULT_EXCLUDE_PATTERN
    # Fixtures with a line starting with this marker hold several sources; '' disables.
    multi_source_marker: str = DEFAULT_MULTI_SOURCE_MARKER
    file_pattern: str = '**/*.sol'
    stop_on_failure: bool = True
    allow_reserved_identifiers: bool = True
    extra_excludes: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, path: str) -> 'HarnessConfig':
        """Load overrides from a JSON object; unknown keys are rejected."""
        with open(Path(path), 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f'{path}: expected a JSON object')

        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f'{path}: unknown harness option(s): {", ".join(unknown)}')
        return cls(**data)

    def parse_options(self) -> ParseOptions:
        return ParseOptions(allow_reserved_identifiers=self.allow_reserved_identifiers)
