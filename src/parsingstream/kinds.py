"""Element kinds a Scanner can operate on.

The kind is decided once, when the scanner is built, and controls whether
line tracking and the default whitespace ``skip()`` are available.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum, auto
from typing import Any


class ElementKind(Enum):
    """Classification of a scanner's source sequence."""

    TEXT = auto()  # str, one code point per element
    BYTES = auto()  # binary mode, elements are ints
    VALUES = auto()  # arbitrary values (e.g. pre-lexed tokens)

    @property
    def is_textual(self) -> bool:
        return self is ElementKind.TEXT


def detect_kind(source: Sequence[Any]) -> ElementKind:
    """Classify a (frozen) source sequence."""
    if isinstance(source, str):
        return ElementKind.TEXT
    if isinstance(source, bytes):
        return ElementKind.BYTES
    return ElementKind.VALUES


def freeze(source: Iterable[Any]) -> Sequence[Any]:
    """Return an immutable, indexable copy of ``source``.

    ``str``, ``bytes`` and ``tuple`` are already immutable and kept as-is.
    Mutable byte buffers become ``bytes``; anything else becomes a ``tuple``.
    """
    if isinstance(source, (str, bytes, tuple)):
        return source
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    return tuple(source)


__all__ = ["ElementKind", "detect_kind", "freeze"]
