"""Error types raised while building or annotating terms."""

from __future__ import annotations

from dataclasses import dataclass

from termspan.common.span import Span


@dataclass
class TermError(Exception):
    message: str
    span: Span | None = None
    source: str | None = None

    def __str__(self) -> str:
        if self.span is None:
            return self.message
        if self.source is None:
            return f"{self.message} @ {self.span}"
        snippet = self.span.extract(self.source)
        return f"{self.message} @ {self.span}: {snippet!r}"


class MalformedTermError(TermError):
    """A term whose positions cannot be turned into valid source ranges."""


class TermSyntaxError(TermError):
    """Source text the s-expression reader cannot parse."""
