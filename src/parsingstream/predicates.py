"""Reusable element predicates.

Frozensets for O(1) membership testing plus small combinators for building
checks inline. Every predicate takes a single element and returns a bool,
so they plug directly into ``Scanner.step``/``match``/``skip``.

Usage:
    from parsingstream.predicates import ASCII_DIGITS, is_whitespace, one_of

    scanner.skip(is_whitespace).match(one_of(ASCII_DIGITS))
"""

from collections.abc import Callable, Iterable
from typing import Any

type Predicate[T] = Callable[[T], bool]

# Line break characters recognised by line tracking
LINE_BREAKS: frozenset[str] = frozenset("\r\n")

ASCII_WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

ASCII_LETTERS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def is_whitespace(char: str) -> bool:
    """Unicode whitespace, the default for ``Scanner.skip()``."""
    return char.isspace()


def is_alpha(char: str) -> bool:
    return char.isalpha()


def is_digit(char: str) -> bool:
    return char.isdigit()


def is_alnum(char: str) -> bool:
    return char.isalnum()


def is_line_break(char: str) -> bool:
    return char in LINE_BREAKS


def always(_: Any) -> bool:
    return True


def never(_: Any) -> bool:
    return False


def equals[T](value: T) -> Predicate[T]:
    """Match elements equal to ``value``."""

    def check(element: T) -> bool:
        return element == value

    return check


def one_of[T](values: Iterable[T]) -> Predicate[T]:
    """Match elements contained in ``values``.

    ``values`` is frozen into a frozenset when its items are hashable, so a
    string like ``"+-"`` means "either character". Unhashable values, or
    unhashable elements at check time, fall back to an equality scan.
    """
    items = tuple(values)
    try:
        members: frozenset[T] | tuple[T, ...] = frozenset(items)
    except TypeError:
        members = items

    def check(element: T) -> bool:
        try:
            return element in members
        except TypeError:
            return element in items

    return check


def none_of[T](values: Iterable[T]) -> Predicate[T]:
    """Match elements not contained in ``values``."""
    return negate(one_of(values))


def negate[T](check: Predicate[T]) -> Predicate[T]:
    def negated(element: T) -> bool:
        return not check(element)

    return negated


def any_of[T](*checks: Predicate[T]) -> Predicate[T]:
    """Match elements accepted by at least one of ``checks``."""

    def check(element: T) -> bool:
        return any(c(element) for c in checks)

    return check


def all_of[T](*checks: Predicate[T]) -> Predicate[T]:
    """Match elements accepted by every one of ``checks``."""

    def check(element: T) -> bool:
        return all(c(element) for c in checks)

    return check


__all__ = [
    "ASCII_DIGITS",
    "ASCII_LETTERS",
    "ASCII_WHITESPACE",
    "LINE_BREAKS",
    "Predicate",
    "all_of",
    "always",
    "any_of",
    "equals",
    "is_alnum",
    "is_alpha",
    "is_digit",
    "is_line_break",
    "is_whitespace",
    "negate",
    "never",
    "none_of",
    "one_of",
]
