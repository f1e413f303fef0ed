from hypothesis import given

from strategies import ranged_terms
from termspan.annotate import RangedTerm
from termspan.common.span import Span
from termspan.tree import AnnotatedTree, make


def sample() -> AnnotatedTree[str, int]:
    return make(
        0,
        "root",
        [
            make(1, "a", [make(2, "a1"), make(3, "a2")]),
            make(4, "b"),
        ],
    )


def test_make_stores_children_as_tuple() -> None:
    tree = AnnotatedTree.make("x", "node", iter([make("y", "leaf")]))
    assert tree.children == (AnnotatedTree("y", "leaf"),)
    assert not tree.is_leaf
    assert tree.children[0].is_leaf


def test_preorder_visits_node_before_children() -> None:
    tree = sample()
    assert [n.label for n in tree.preorder()] == ["root", "a", "a1", "a2", "b"]


def test_traversal_restarts_on_each_call() -> None:
    tree = sample()
    first = [n.annotation for n in tree]
    second = [n.annotation for n in tree]
    assert first == second == [0, 1, 2, 3, 4]


def test_postorder_visits_children_first() -> None:
    assert [n.label for n in sample().postorder()] == ["a1", "a2", "a", "b", "root"]


def test_map_touches_every_node() -> None:
    tree = sample()
    mapped = tree.map(lambda x: x * 10)
    assert [n.annotation for n in mapped] == [0, 10, 20, 30, 40]
    assert mapped.shape() == tree.shape()
    assert [n.annotation for n in tree] == [0, 1, 2, 3, 4]


def test_fold_sums_bottom_up() -> None:
    total = sample().fold(lambda _label, ann, results: ann + sum(results))
    assert total == 10


def test_size_depth_and_leaves() -> None:
    tree = sample()
    assert tree.size() == 5
    assert tree.depth() == 3
    assert [n.label for n in tree.leaves()] == ["a1", "a2", "b"]
    assert make(None, "solo").depth() == 1


def test_shape_drops_annotations() -> None:
    assert make(1, "f", [make(2, "x")]).shape() == ("f", (("x", ()),))


@given(ranged_terms())
def test_map_identity(ranged: RangedTerm) -> None:
    assert ranged.term.map(lambda span: span) == ranged.term


@given(ranged_terms())
def test_map_composition(ranged: RangedTerm) -> None:
    def f(span: Span) -> int:
        return span.start

    def g(start: int) -> str:
        return f"@{start}"

    tree = ranged.term
    assert tree.map(f).map(g) == tree.map(lambda span: g(f(span)))
