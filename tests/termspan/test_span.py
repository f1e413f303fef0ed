import pytest

from termspan.common.span import Span


def test_extract_is_half_open() -> None:
    assert Span(1, 4).extract("(add 1 2)") == "add"
    assert Span(0, 0).extract("") == ""


def test_contains() -> None:
    outer = Span(1, 8)
    assert outer.contains(Span(1, 4))
    assert outer.contains(Span(7, 8))
    assert outer.contains(outer)
    assert not outer.contains(Span(0, 4))
    assert not outer.contains(Span(5, 9))


def test_cover_takes_min_start_and_max_end() -> None:
    assert Span.cover([Span(5, 6), Span(1, 4), Span(7, 8)]) == Span(1, 8)


def test_cover_rejects_empty() -> None:
    with pytest.raises(ValueError, match="empty collection"):
        Span.cover([])


def test_str_and_len() -> None:
    assert str(Span(1, 8)) == "1:8"
    assert len(Span(1, 8)) == 7
