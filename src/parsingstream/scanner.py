"""Predicate-driven sequential scanner.

A Scanner wraps an immutable sequence and a cursor that only moves forward.
Every operation is a predicate match against the element under the cursor:

- step: consume one element if it matches
- match / match_until: consume the longest run while / until a check holds
- skip*: the same, discarding the result and returning the scanner

Failed checks never move the cursor, so callers can try another predicate
at the same position. Only the ``enforce_*`` and ``capture_*`` methods raise.

Line tracking (text sources only) counts LF, CR and CRLF as one line break
each.

Thread Safety:
Scanner instances are mutable and not synchronized. Confine each instance
to a single thread or parse task.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Self

from parsingstream.config import ScanConfig, get_scan_config
from parsingstream.errors import MatchError
from parsingstream.kinds import ElementKind, detect_kind, freeze
from parsingstream.location import SourceLocation
from parsingstream.predicates import Predicate, always
from parsingstream.results import Capture, StepResult
from parsingstream.utils.logger import get_logger

logger = get_logger(__name__)

_NO_MATCH: StepResult[Any] = StepResult(False, None)


class Scanner[T]:
    """Stateful scanner over a sequence of elements.

    The source may be text (``str``), binary (``bytes``) or any other
    iterable of values. Matched runs are returned as slices of the source,
    so a text scanner yields ``str``, a binary one ``bytes`` and a value
    scanner ``tuple``.

    Usage:
            >>> scanner = Scanner("a fox jumped")
            >>> words = []
            >>> while scanner:
            ...     words.append(scanner.skip().match(str.isalpha))
            >>> words
            ['a', 'fox', 'jumped']

    Thread Safety:
        Not thread-safe. All state is instance-local; confine an instance
        to one thread.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_cursor",
        "_lineno",
        "_line_start",  # Cursor offset where the current line begins
        "_pending_cr",  # Last consumed element was "\r"
        "_kind",
        "_track_lines",
        "_whitespace",
        "_source_file",
    )

    def __init__(
        self,
        source: Iterable[T] = "",
        *,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner over ``source``.

        Args:
            source: Sequence to scan. Mutable inputs are copied into an
                immutable sequence first.
            source_file: Optional source name for error messages
            config: Explicit configuration; defaults to the active
                context config
        """
        if config is None:
            config = get_scan_config()

        self._source: Sequence[T] = freeze(source)
        self._source_len = len(self._source)
        self._cursor = 0
        self._lineno = 1
        self._line_start = 0
        self._pending_cr = False
        self._kind = detect_kind(self._source)
        self._track_lines = self._kind.is_textual and config.track_lines
        self._whitespace = config.whitespace
        self._source_file = source_file

    # =========================================================================
    # State
    # =========================================================================

    def __bool__(self) -> bool:
        """True while there is still something left to scan."""
        return self._cursor < self._source_len

    def __len__(self) -> int:
        """Number of elements not yet consumed."""
        return self._source_len - self._cursor

    def __repr__(self) -> str:
        return (
            f"Scanner({self._kind.name}, cursor={self._cursor}/{self._source_len}, "
            f"line={self._lineno})"
        )

    @property
    def source(self) -> Sequence[T]:
        return self._source

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def kind(self) -> ElementKind:
        return self._kind

    @property
    def cursor(self) -> int:
        """Index of the next element to be consumed."""
        return self._cursor

    @property
    def line_number(self) -> int:
        """Current line (1-indexed). Stays at 1 for non-text sources."""
        return self._lineno

    @property
    def column(self) -> int:
        """Current column (1-indexed) on the current line."""
        return self._cursor - self._line_start + 1

    @property
    def pending_cr(self) -> bool:
        return self._pending_cr

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(
            lineno=self._lineno,
            col_offset=self.column,
            offset=self._cursor,
            source_file=self._source_file,
        )

    @property
    def remaining(self) -> Sequence[T]:
        """Unconsumed part of the source. Does not advance the cursor."""
        return self._source[self._cursor :]

    # =========================================================================
    # Stepping
    # =========================================================================

    def step(self, check: Predicate[T]) -> StepResult[T]:
        """Consume the current element if ``check`` accepts it.

        On a miss (or at the end of the source) nothing changes: cursor and
        line tracking stay exactly where they were.

        Args:
            check: Predicate applied to the current element.

        Returns:
            StepResult, truthy and carrying the element if it was consumed.
        """
        if self._cursor >= self._source_len:
            return _NO_MATCH

        element = self._source[self._cursor]
        if not check(element):
            return _NO_MATCH

        if self._track_lines:
            self._track_line_break(element)
        self._cursor += 1
        return StepResult(True, element)

    def _track_line_break(self, element: Any) -> None:
        """Update line counters for an element about to be consumed."""
        if element == "\n" and not self._pending_cr:
            self._lineno += 1
            self._line_start = self._cursor + 1
        elif element == "\r":
            self._lineno += 1
            self._line_start = self._cursor + 1
            self._pending_cr = True
        else:
            # LF of a CRLF pair closes the break without counting it again
            if element == "\n":
                self._line_start = self._cursor + 1
            self._pending_cr = False

    def enforce_step(self, check: Predicate[T]) -> T:
        """Consume and return the current element.

        Raises:
            MatchError: if the element was rejected or the source is exhausted.
        """
        result = self.step(check)
        if not result:
            if self:
                raise self._failure(
                    f"Match failed on {self._source[self._cursor]!r}."
                )
            raise self._failure("Match failed: end of input.")
        return result.element  # type: ignore[return-value]

    def capture_step(self, check: Predicate[T], into: Capture[T]) -> Self:
        """Chaining form of :meth:`enforce_step`; stores the element in ``into``.

        Raises:
            MatchError: as enforce_step.
        """
        into.set(self.enforce_step(check))
        return self

    # =========================================================================
    # Matching
    # =========================================================================

    def match(self, check: Predicate[T]) -> Sequence[T]:
        """Consume elements while ``check`` holds.

        Returns:
            The consumed run, possibly empty, as a slice of the source.
        """
        start = self._cursor
        while self.step(check):
            pass
        return self._source[start : self._cursor]

    def enforce_match(self, check: Predicate[T]) -> Sequence[T]:
        """Like :meth:`match`, but an empty result is an error.

        Raises:
            MatchError: if nothing was matched.
        """
        result = self.match(check)
        if not result:
            raise self._failure("Empty match.")
        return result

    def capture_match(self, check: Predicate[T], into: Capture[Sequence[T]]) -> Self:
        """Chaining form of :meth:`enforce_match`."""
        into.set(self.enforce_match(check))
        return self

    def match_until(self, check: Predicate[T]) -> Sequence[T]:
        """Consume elements until ``check`` holds.

        The element that satisfies ``check`` is left unconsumed.
        """
        return self.match(lambda element: not check(element))

    def enforce_until(self, check: Predicate[T]) -> Sequence[T]:
        """Like :meth:`match_until`, but an empty result is an error.

        Raises:
            MatchError: if nothing was matched.
        """
        result = self.match_until(check)
        if not result:
            raise self._failure("Empty match.")
        return result

    def capture_until(self, check: Predicate[T], into: Capture[Sequence[T]]) -> Self:
        """Chaining form of :meth:`enforce_until`."""
        into.set(self.enforce_until(check))
        return self

    # =========================================================================
    # Skipping
    # =========================================================================

    def skip_one(self) -> Self:
        """Consume one element unconditionally (no-op at the end)."""
        self.step(always)
        return self

    def skip(self, check: Predicate[T] | None = None) -> Self:
        """Consume elements while ``check`` holds.

        Without a predicate, text scanners skip whitespace (see
        ``ScanConfig.whitespace``).

        Raises:
            TypeError: if no predicate is given for a non-text source.
        """
        if check is None:
            if not self._kind.is_textual:
                raise TypeError(
                    f"skip() requires a predicate for {self._kind.name} sources"
                )
            check = self._whitespace
        self.match(check)
        return self

    def skip_until(self, check: Predicate[T]) -> Self:
        """Consume elements until ``check`` holds."""
        self.match_until(check)
        return self

    def skip_step(self, check: Predicate[T]) -> Self:
        """Consume the current element if ``check`` accepts it."""
        self.step(check)
        return self

    # =========================================================================
    # Errors
    # =========================================================================

    def _failure(self, message: str) -> MatchError:
        location = self.location
        logger.debug("%s at %s", message, location)
        return MatchError.at(message, location)


__all__ = ["Scanner"]
