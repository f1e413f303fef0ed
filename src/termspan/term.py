"""Unannotated terms.

Only leaves carry position metadata: a :class:`Leaf` knows the span of source
text it was read from (or ``None`` when it has not been positioned yet). The
spans of branches are derived from their children by
:func:`termspan.annotate.annotate_ranges`.
"""

from __future__ import annotations

from dataclasses import dataclass

from termspan.common.span import Span
from termspan.tree import Shape


@dataclass(frozen=True)
class Term:
    """Base class for unannotated terms."""

    label: str

    @property
    def children(self) -> tuple[Term, ...]:
        return ()

    def shape(self) -> Shape:
        return (self.label, tuple(child.shape() for child in self.children))


@dataclass(frozen=True)
class Leaf(Term):
    span: Span | None = None


@dataclass(frozen=True)
class Branch(Term):
    children: tuple[Term, ...] = ()  # type: ignore[assignment]


__all__ = ["Branch", "Leaf", "Term"]
