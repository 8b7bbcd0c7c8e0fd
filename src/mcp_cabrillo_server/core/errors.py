"""Error taxonomy for Cabrillo parsing.

Grammars and tag handlers raise :class:`GrammarError` without knowing where the
value came from. The line driver turns that into a :class:`CabrilloError`
carrying the tag name and the zero-based line number.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of a parse failure."""

    IO = "IO"
    PARSE = "PARSE"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS = {
    ErrorKind.IO: "I/O Error",
    ErrorKind.PARSE: "Parse Error",
    ErrorKind.OTHER: "Unknown Error",
}


class GrammarError(ValueError):
    """Raised when a value does not match the grammar expected for it."""


class CabrilloError(Exception):
    """Positioned parse failure.

    ``tag`` is empty when the failure happened before a tag could be
    identified (malformed line, undecodable bytes).
    """

    def __init__(self, tag: str, line: int, kind: ErrorKind, detail: str) -> None:
        self.tag = tag
        self.line = line
        self.kind = kind
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.kind.label}: {self.detail} in tag '{self.tag}' on line {self.line}"

    def __repr__(self) -> str:
        return (
            f"CabrilloError(tag={self.tag!r}, line={self.line}, "
            f"kind={self.kind.value}, detail={self.detail!r})"
        )

    @classmethod
    def parse(cls, tag: str, line: int, detail: str) -> CabrilloError:
        return cls(tag, line, ErrorKind.PARSE, detail)

    @classmethod
    def io(cls, line: int, detail: str) -> CabrilloError:
        return cls("", line, ErrorKind.IO, detail)
