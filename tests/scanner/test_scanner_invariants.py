"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from parsingstream import MatchError, Scanner

# Small alphabet so predicates hit and miss often
ALPHABET = "ab \t\r\n1"

PREDICATES = {
    "alpha": str.isalpha,
    "space": str.isspace,
    "digit": str.isdigit,
    "is_a": lambda c: c == "a",
    "break": lambda c: c in "\r\n",
}

sources = st.text(alphabet=ALPHABET, max_size=60)
predicate_names = st.sampled_from(sorted(PREDICATES))


def _state(scanner: Scanner[str]) -> tuple[int, int, bool, int]:
    return (scanner.cursor, scanner.line_number, scanner.pending_cr, scanner.column)


def _advance(scanner: Scanner[str], count: int) -> None:
    for _ in range(count):
        scanner.skip_one()


class TestStepInvariants:
    @given(sources, st.integers(min_value=0, max_value=60), predicate_names)
    @settings(max_examples=200)
    def test_failed_step_mutates_nothing(self, source: str, prefix: int, name: str) -> None:
        scanner = Scanner(source)
        _advance(scanner, prefix)
        before = _state(scanner)

        if not scanner.step(PREDICATES[name]):
            assert _state(scanner) == before
        else:
            assert scanner.cursor == before[0] + 1

    @given(sources, st.lists(predicate_names, max_size=30))
    @settings(max_examples=100)
    def test_cursor_bounds_and_monotonic(self, source: str, names: list[str]) -> None:
        scanner = Scanner(source)
        previous = 0
        for name in names:
            scanner.match(PREDICATES[name])
            scanner.skip_one()
            assert previous <= scanner.cursor <= len(source)
            previous = scanner.cursor


class TestMatchInvariants:
    @given(sources, st.integers(min_value=0, max_value=60), predicate_names)
    @settings(max_examples=200)
    def test_match_is_maximal_run(self, source: str, prefix: int, name: str) -> None:
        check = PREDICATES[name]
        scanner = Scanner(source)
        _advance(scanner, prefix)
        start = scanner.cursor

        result = scanner.match(check)

        assert scanner.cursor == start + len(result)
        assert result == source[start : scanner.cursor]
        assert all(check(c) for c in result)
        assert not scanner or not check(source[scanner.cursor])
        assert scanner.match(check) == ""

    @given(sources, st.integers(min_value=0, max_value=60), predicate_names)
    @settings(max_examples=200)
    def test_match_until_stops_at_first_hit(self, source: str, prefix: int, name: str) -> None:
        check = PREDICATES[name]
        scanner = Scanner(source)
        _advance(scanner, prefix)
        start = scanner.cursor

        hits = [i for i in range(start, len(source)) if check(source[i])]
        stop = hits[0] if hits else len(source)

        assert scanner.match_until(check) == source[start:stop]
        assert scanner.cursor == stop

    @given(sources, predicate_names)
    @settings(max_examples=100)
    def test_enforce_match_agrees_with_match(self, source: str, name: str) -> None:
        check = PREDICATES[name]
        expected = Scanner(source).match(check)
        scanner = Scanner(source)

        if expected:
            assert scanner.enforce_match(check) == expected
        else:
            with pytest.raises(MatchError):
                scanner.enforce_match(check)
            assert scanner.cursor == 0

    @given(sources, predicate_names)
    @settings(max_examples=100)
    def test_enforce_until_agrees_with_match_until(self, source: str, name: str) -> None:
        check = PREDICATES[name]
        expected = Scanner(source).match_until(check)
        scanner = Scanner(source)

        if expected:
            assert scanner.enforce_until(check) == expected
        else:
            with pytest.raises(MatchError):
                scanner.enforce_until(check)


class TestLineInvariants:
    @given(sources)
    @settings(max_examples=200)
    def test_line_number_counts_logical_breaks(self, source: str) -> None:
        scanner = Scanner(source)
        scanner.match(lambda c: True)

        normalized = source.replace("\r\n", "\n").replace("\r", "\n")
        assert scanner.line_number == normalized.count("\n") + 1

    @given(sources)
    @settings(max_examples=100)
    def test_final_column_is_last_line_length(self, source: str) -> None:
        """Column at the end equals the length of the last line plus one."""
        scanner = Scanner(source)
        scanner.skip_until(lambda c: False)

        last_line = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")[-1]
        assert scanner.column == len(last_line) + 1
