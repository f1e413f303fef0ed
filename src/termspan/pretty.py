"""Pretty-printing utilities for range-annotated trees."""

from __future__ import annotations

from termspan.annotate import RangedTree


def _render(tree: RangedTree, source: str | None, depth: int, lines: list[str]) -> None:
    line = f"{'  ' * depth}{tree.label} @ {tree.annotation}"
    if source is not None and tree.is_leaf:
        line += f": {tree.annotation.extract(source)!r}"
    lines.append(line)
    for child in tree.children:
        _render(child, source, depth + 1, lines)


def pretty(tree: RangedTree, source: str | None = None) -> str:
    """Render one node per line, indented by depth.

    When ``source`` is given, leaves also show the text their span covers.
    """
    lines: list[str] = []
    _render(tree, source, 0, lines)
    return "\n".join(lines)
