import math

import pytest

from dslabs.wordindex.avl import AvlTree
from dslabs.wordindex.common import DuplicateWordError, WordInfo


def build(words):
    tree = AvlTree()
    for word in words:
        tree.insert(WordInfo(word, f"help {word}"))
    return tree


def avl_bound(n):
    return 1.4405 * math.log2(n + 2) - 0.3277


def test_empty_tree():
    tree = AvlTree()
    assert tree.height() == 0
    assert tree.words() == []
    assert tree.find("int") == (None, 0)


def test_sorted_inserts_are_rebalanced():
    tree = build(["a", "b", "c"])
    assert tree.height() == 2
    text = tree.render()
    assert "  b -> a;\n" in text
    assert "  b -> c;\n" in text


def test_seven_sorted_inserts_form_perfect_tree():
    tree = build([f"w{i}" for i in range(7)])
    assert tree.height() == 3


def test_many_inserts_stay_balanced():
    words = [f"w{i:04d}" for i in range(300)]
    tree = build(words)
    assert tree.words() == words
    assert tree.height() <= avl_bound(len(words))
    for word in words[::17]:
        help_text, comparisons = tree.find(word)
        assert help_text == f"help {word}"
        assert comparisons <= tree.height()


def test_duplicate_raises():
    tree = build(["m", "c", "x"])
    _, comps = tree.find("c")
    with pytest.raises(DuplicateWordError) as info:
        tree.insert(WordInfo("c", "other"))
    assert info.value.comparisons == comps
    assert tree.find("c")[0] == "help c"


def test_remove_keeps_order_and_balance():
    words = [f"w{i:04d}" for i in range(200)]
    tree = build(words)
    removed = set(words[::3])
    for word in words[::3]:
        found, comparisons = tree.remove(word)
        assert found
        assert comparisons >= 1
    remaining = [w for w in words if w not in removed]
    assert tree.words() == remaining
    assert tree.height() <= avl_bound(len(remaining))
    for word in words[::3]:
        assert tree.find(word)[0] is None


def test_remove_root_with_two_children():
    tree = build(["b", "a", "c"])
    assert tree.remove("b")[0]
    assert tree.words() == ["a", "c"]
    assert tree.height() == 2


def test_remove_missing():
    tree = build(["a", "b"])
    found, _ = tree.remove("zz")
    assert not found
    assert tree.words() == ["a", "b"]


def test_remove_all_empties_tree():
    words = [f"w{i}" for i in range(20)]
    tree = build(words)
    for word in reversed(words):
        assert tree.remove(word)[0]
    assert tree.height() == 0
    assert len(tree) == 0


def test_render_empty_uses_graph_name():
    assert AvlTree().render() == 'digraph avl_tree {\n  node [fontname="Arial"];\n\n}\n'


def test_set_max_comparisons_not_supported():
    with pytest.raises(TypeError):
        AvlTree().set_max_comparisons(3)