"""Source span type shared across layers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` range of code-point offsets into a source."""

    start: int
    end: int

    def extract(self, source: str) -> str:
        return source[self.start : self.end]

    def contains(self, other: Span) -> bool:
        return self.start <= other.start and other.end <= self.end

    @classmethod
    def cover(cls, spans: Iterable[Span]) -> Span:
        """Smallest span covering every span in ``spans`` (which must be non-empty)."""
        spans = tuple(spans)
        if not spans:
            raise ValueError("Cannot cover an empty collection of spans")
        return cls(min(s.start for s in spans), max(s.end for s in spans))

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"
