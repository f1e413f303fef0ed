"""Generic trees carrying an annotation on every node.

An :class:`AnnotatedTree` pairs each node's ``label`` with an ``annotation``
and an ordered tuple of children. The annotation is supplied together with
the structure when a node is built, so a tree is never partially annotated.
Trees are frozen dataclasses: equality is structural and nothing mutates a
tree after construction. Transformations such as :meth:`AnnotatedTree.map`
build new trees.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

L = TypeVar("L")
A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")

Shape = tuple[Any, tuple["Shape", ...]]


@dataclass(frozen=True)
class AnnotatedTree(Generic[L, A]):
    annotation: A
    label: L
    children: tuple[AnnotatedTree[L, A], ...] = ()

    @classmethod
    def make(
        cls,
        annotation: A,
        label: L,
        children: Iterable[AnnotatedTree[L, A]] = (),
    ) -> AnnotatedTree[L, A]:
        return cls(annotation, label, tuple(children))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def map(self, transform: Callable[[A], B]) -> AnnotatedTree[L, B]:
        """Replace every annotation with ``transform(annotation)``."""
        return AnnotatedTree(
            transform(self.annotation),
            self.label,
            tuple(child.map(transform) for child in self.children),
        )

    def fold(self, step: Callable[[L, A, tuple[R, ...]], R]) -> R:
        """Collapse the tree bottom-up.

        ``step`` receives a node's label, its annotation and the already folded
        results of its children, in order.
        """
        results = tuple(child.fold(step) for child in self.children)
        return step(self.label, self.annotation, results)

    def preorder(self) -> Iterator[AnnotatedTree[L, A]]:
        """Yield each node before its children, children in stored order."""
        stack: list[AnnotatedTree[L, A]] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def postorder(self) -> Iterator[AnnotatedTree[L, A]]:
        """Yield each node after all of its children."""
        for child in self.children:
            yield from child.postorder()
        yield self

    def __iter__(self) -> Iterator[AnnotatedTree[L, A]]:
        return self.preorder()

    def leaves(self) -> Iterator[AnnotatedTree[L, A]]:
        return (node for node in self.preorder() if node.is_leaf)

    def size(self) -> int:
        return sum(1 for _ in self.preorder())

    def depth(self) -> int:
        return self.fold(lambda _label, _ann, depths: 1 + max(depths, default=0))

    def shape(self) -> Shape:
        """Labels and arities of the tree with annotations dropped."""
        return (self.label, tuple(child.shape() for child in self.children))


def make(
    annotation: A, label: L, children: Iterable[AnnotatedTree[L, A]] = ()
) -> AnnotatedTree[L, A]:
    return AnnotatedTree.make(annotation, label, children)


__all__ = ["AnnotatedTree", "Shape", "make"]
