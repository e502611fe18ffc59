"""
parsingstream: predicate-driven scanner for hand-written parsers

Wraps a sequence (text, bytes, or any values) and a forward-only cursor,
and exposes small composable matching primitives to write parsers and
tokenizers with. Zero runtime dependencies.

Quick Start:
    >>> from parsingstream import Scanner
    >>> scanner = Scanner("a fox jumped over\\tthe lazy brown dog")
    >>> words = []
    >>> while scanner:
    ...     words.append(scanner.skip().match(str.isalpha))
    >>> words
    ['a', 'fox', 'jumped', 'over', 'the', 'lazy', 'brown', 'dog']

Enforcing and chaining:
    >>> from parsingstream import Capture, MatchError
    >>> key = Capture()
    >>> scanner = Scanner("  width: 80")
    >>> scanner.skip().capture_match(str.isalpha, key).enforce_step(lambda c: c == ":")
    ':'
    >>> key.value
    'width'
    >>> scanner.enforce_match(str.isdigit)
    Traceback (most recent call last):
    ...
    parsingstream.errors.MatchError: 1:9 Empty match.

Line tracking:
    >>> scanner = Scanner("one\\r\\ntwo\\rthree\\nfour")
    >>> scanner.skip_until(lambda c: c == "f").line_number
    4
"""

from parsingstream.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from parsingstream.errors import MatchError, ParsingStreamError
from parsingstream.kinds import ElementKind
from parsingstream.location import SourceLocation
from parsingstream.predicates import Predicate
from parsingstream.results import Capture, StepResult
from parsingstream.scanner import Scanner

__version__ = "0.1.0"


def text_scanner(text: str = "", *, source_file: str | None = None) -> Scanner[str]:
    """Create a Scanner over text.

    Equivalent to ``Scanner(text)``, typed for ``str`` elements.
    """
    return Scanner(text, source_file=source_file)


__all__ = [
    "Capture",
    "ElementKind",
    "MatchError",
    "ParsingStreamError",
    "Predicate",
    "ScanConfig",
    "Scanner",
    "SourceLocation",
    "StepResult",
    "__version__",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "text_scanner",
]
