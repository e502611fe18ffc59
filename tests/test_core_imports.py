"""Verify core module imports work correctly."""

from __future__ import annotations


def test_import_location() -> None:
    """Test SourceLocation import and instantiation."""
    from parsingstream.location import SourceLocation

    loc = SourceLocation(lineno=1, col_offset=1)
    assert loc.lineno == 1
    assert loc.offset == 0
    assert str(loc) == "1:1"


def test_import_results() -> None:
    """Test StepResult and Capture."""
    from parsingstream.results import Capture, StepResult

    hit = StepResult(True, "x")
    assert hit
    assert list(hit) == [True, "x"]

    slot = Capture()
    slot.set("y")
    assert slot.is_set
    assert slot.value == "y"


def test_import_kinds() -> None:
    from parsingstream.kinds import ElementKind

    assert {k.name for k in ElementKind} == {"TEXT", "BYTES", "VALUES"}


def test_import_scanner() -> None:
    from parsingstream.scanner import Scanner

    scanner = Scanner("x")
    assert scanner
    assert scanner.location.offset == 0
