"""Annotated syntax trees and source-range tagging."""

from termspan.annotate import RangedTerm, annotate_ranges, arrange, layout
from termspan.common.span import Span
from termspan.errors import MalformedTermError, TermError, TermSyntaxError
from termspan.parse import parse_term
from termspan.pretty import pretty
from termspan.term import Branch, Leaf, Term
from termspan.tree import AnnotatedTree, make

__all__ = [
    "AnnotatedTree",
    "Branch",
    "Leaf",
    "MalformedTermError",
    "RangedTerm",
    "Span",
    "Term",
    "TermError",
    "TermSyntaxError",
    "annotate_ranges",
    "arrange",
    "layout",
    "make",
    "parse_term",
    "pretty",
]
