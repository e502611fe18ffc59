"""Value types returned or filled in by Scanner operations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class StepResult[T]:
    """Outcome of a single ``Scanner.step`` call.

    Truthy iff the element was consumed, and unpacks into
    ``(matched, element)``:

        >>> from parsingstream import Scanner
        >>> scanner = Scanner("hi")
        >>> matched, char = scanner.step(str.isalpha)
        >>> matched, char
        (True, 'h')
        >>> bool(scanner.step(str.isdigit))
        False

    """

    matched: bool
    element: T | None = None

    def __bool__(self) -> bool:
        return self.matched

    def __iter__(self) -> Iterator[Any]:
        yield self.matched
        yield self.element


_UNSET: Any = object()


class Capture[T]:
    """Output slot for the chaining ``capture_*`` methods.

    Usage:
            >>> from parsingstream import Scanner
            >>> key, value = Capture(), Capture()
            >>> _ = (Scanner("name = value")
            ...     .capture_match(str.isalpha, key)
            ...     .skip()
            ...     .skip_step(lambda c: c == "=")
            ...     .skip()
            ...     .capture_match(str.isalpha, value))
            >>> key.value, value.value
            ('name', 'value')

    """

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value: T = _UNSET

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> T:
        """The captured value.

        Raises:
            LookupError: if nothing has been captured yet
        """
        if self._value is _UNSET:
            raise LookupError("Capture has no value")
        return self._value

    def set(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        if self._value is _UNSET:
            return "Capture(<unset>)"
        return f"Capture({self._value!r})"


__all__ = ["Capture", "StepResult"]
