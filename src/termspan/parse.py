"""Reader for s-expression terms with positioned leaves."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from termspan.common.span import Span
from termspan.errors import TermSyntaxError
from termspan.term import Branch, Leaf, Term

logger = logging.getLogger(__name__)

LIST_LABEL = "list"

tokens = ("ATOM", "LPAREN", "RPAREN")

t_LPAREN = r"\("
t_RPAREN = r"\)"

t_ignore = " \t\r\f\v"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_ATOM(t: lex.LexToken) -> lex.LexToken:
    r"[^\s()]+"
    t.end = t.lexpos + len(t.value)
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise TermSyntaxError(f"Unexpected character {t.value[0]!r}", span)


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def p_term_atom(p: yacc.YaccProduction) -> None:
    "term : ATOM"
    tok = cast(lex.LexToken, p.slice[1])
    p[0] = Leaf(p[1], _tok_span(tok))


def p_term_list(p: yacc.YaccProduction) -> None:
    "term : LPAREN items RPAREN"
    # The label is filled in by ``parse_term``.
    p[0] = Branch(LIST_LABEL, tuple(p[2]))


def p_items_one(p: yacc.YaccProduction) -> None:
    "items : term"
    p[0] = [p[1]]


def p_items_more(p: yacc.YaccProduction) -> None:
    "items : items term"
    p[0] = p[1] + [p[2]]


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        raise TermSyntaxError("Unexpected end of input")
    raise TermSyntaxError("Unexpected token", _tok_span(cast(lex.LexToken, p)))


def _relabel(term: Term, label: str) -> Term:
    match term:
        case Branch():
            return Branch(label, tuple(_relabel(c, label) for c in term.children))
        case _:
            return term


_PARSER = None


def parse_term(source: str, *, list_label: str = LIST_LABEL) -> Term:
    """Read one s-expression from ``source``.

    Atoms become leaves positioned at their offsets in ``source``; lists
    become branches labelled ``list_label``. Raises :class:`TermSyntaxError`
    for anything that is not exactly one well-formed s-expression.
    """
    global _PARSER
    lexer = lex.lex()
    if _PARSER is None:
        _PARSER = yacc.yacc(start="term", debug=False, write_tables=False)
    try:
        term = cast(Term | None, _PARSER.parse(source, lexer=lexer))
    except TermSyntaxError as exc:
        span = exc.span or Span(len(source), len(source))
        raise replace(exc, span=span, source=source) from None
    if term is None:
        span = Span(len(source), len(source))
        raise TermSyntaxError("Unexpected end of input", span, source)
    if list_label != LIST_LABEL:
        term = _relabel(term, list_label)
    logger.debug("parsed %d characters into %r", len(source), term.label)
    return term


__all__ = ["LIST_LABEL", "parse_term"]
