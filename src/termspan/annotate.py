"""Attach source ranges to every node of an unannotated term."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from termspan.common.span import Span
from termspan.errors import MalformedTermError
from termspan.term import Branch, Leaf, Term
from termspan.tree import AnnotatedTree

logger = logging.getLogger(__name__)

RangedTree = AnnotatedTree[str, Span]


@dataclass(frozen=True)
class RangedTerm:
    """An annotated term together with the source text its spans index into."""

    term: RangedTree
    source: str


def _leaf_span(leaf: Leaf, source: str) -> Span:
    span = leaf.span
    if span is None:
        raise MalformedTermError(f"Leaf {leaf.label!r} has no source position")
    if span.start > span.end:
        raise MalformedTermError(f"Inverted span for leaf {leaf.label!r}", span)
    if span.start < 0 or span.end > len(source):
        raise MalformedTermError(
            f"Span of leaf {leaf.label!r} is outside source of length {len(source)}",
            span,
        )
    return span


def _annotate(term: Term, source: str) -> RangedTree:
    match term:
        case Leaf():
            return AnnotatedTree(_leaf_span(term, source), term.label)
        case Branch(children=()):
            raise MalformedTermError(f"Branch {term.label!r} has no children to cover")
        case Branch():
            children = tuple(_annotate(child, source) for child in term.children)
            span = Span.cover(child.annotation for child in children)
            return AnnotatedTree(span, term.label, children)
        case _:
            raise MalformedTermError(f"Unsupported term {term!r}")


def annotate_ranges(term: Term, source: str) -> RangedTree:
    """Annotate ``term`` with the span of ``source`` each node covers.

    Leaf spans are taken from the leaves' own position metadata. A branch
    covers the smallest range containing all of its children. Raises
    :class:`MalformedTermError` if any leaf is unpositioned, inverted or out
    of bounds, or if a branch has no children. Nothing is returned on failure.
    """
    logger.debug("annotating %r over %d characters", term.label, len(source))
    try:
        return _annotate(term, source)
    except MalformedTermError as exc:
        if exc.source is None and exc.span is not None:
            exc.source = source
        raise


def layout(term: Term, separator: str = " ") -> tuple[Term, str]:
    """Render ``term`` as an s-expression and position its leaves in the text.

    A leaf is written as its label and a branch as its children joined by
    ``separator`` inside parentheses. Returns a copy of ``term`` whose leaves
    carry the spans of their labels, together with the rendered text. Any
    spans already on the leaves are replaced.
    """
    parts: list[str] = []
    offset = 0

    def emit(text: str) -> Span:
        nonlocal offset
        parts.append(text)
        start = offset
        offset += len(text)
        return Span(start, offset)

    def place(node: Term) -> Term:
        match node:
            case Leaf():
                return Leaf(node.label, emit(node.label))
            case Branch():
                emit("(")
                children = []
                for index, child in enumerate(node.children):
                    if index:
                        emit(separator)
                    children.append(place(child))
                emit(")")
                return Branch(node.label, tuple(children))
            case _:
                raise MalformedTermError(f"Unsupported term {node!r}")

    placed = place(term)
    source = "".join(parts)
    logger.debug("laid out %r as %d characters", term.label, len(source))
    return placed, source


def arrange(term: Term, separator: str = " ") -> RangedTerm:
    """Lay ``term`` out as source text and annotate it with ranges into it."""
    placed, source = layout(term, separator)
    return RangedTerm(annotate_ranges(placed, source), source)


__all__ = ["RangedTerm", "RangedTree", "annotate_ranges", "arrange", "layout"]
