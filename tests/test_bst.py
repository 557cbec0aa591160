import pytest

from dslabs.wordindex.bst import BstTree
from dslabs.wordindex.common import DuplicateWordError, WordInfo


def build(words):
    tree = BstTree()
    for word in words:
        tree.insert(WordInfo(word, f"help {word}"))
    return tree


def test_insert_into_empty_makes_no_comparisons():
    tree = BstTree()
    assert tree.insert(WordInfo("int", "Integer")) == 0


def test_find_returns_help_and_counts_path():
    tree = build(["m", "f", "t"])
    help_text, comparisons = tree.find("t")
    assert help_text == "help t"
    assert comparisons == 2


def test_find_missing_returns_none():
    tree = build(["m", "f", "t"])
    help_text, _ = tree.find("zz")
    assert help_text is None


def test_words_are_sorted():
    words = ["while", "for", "int", "char", "if", "return", "void"]
    tree = build(words)
    assert tree.words() == sorted(words)
    assert len(tree) == len(words)


def test_duplicate_raises_with_comparisons():
    tree = build(["b", "a"])
    _, find_comps = tree.find("a")
    with pytest.raises(DuplicateWordError) as info:
        tree.insert(WordInfo("a", "again"))
    assert info.value.comparisons == find_comps
    assert tree.find("a")[0] == "help a"


@pytest.mark.parametrize("victim", ["m", "f", "t", "a", "h", "p", "z"])
def test_remove_each_word(victim):
    words = ["m", "f", "t", "a", "h", "p", "z"]
    tree = build(words)
    removed, comparisons = tree.remove(victim)
    assert removed
    assert comparisons >= 1
    assert tree.words() == sorted(w for w in words if w != victim)
    assert tree.find(victim)[0] is None
    for word in words:
        if word != victim:
            assert tree.find(word)[0] == f"help {word}"


def test_remove_root_with_two_children_uses_successor():
    tree = build(["m", "f", "t", "a", "h", "p", "z"])
    tree.remove("m")
    assert "  p -> f;\n" in tree.render()


def test_remove_missing():
    tree = build(["m"])
    removed, _ = tree.remove("x")
    assert not removed
    assert tree.words() == ["m"]


def test_render_empty_and_single():
    tree = BstTree()
    assert tree.render() == 'digraph bst_tree {\n  node [fontname="Arial"];\n\n}\n'
    tree.insert(WordInfo("int", "x"))
    assert tree.render() == 'digraph bst_tree {\n  node [fontname="Arial"];\n  int;\n}\n'


def test_render_marks_missing_children():
    tree = build(["b", "a"])
    text = tree.render()
    assert "  b -> a;\n" in text
    assert "  null1 [shape=point];\n  b -> null1;\n" in text


def test_reset_keeps_words_and_limit_not_supported():
    tree = build(["a", "b"])
    tree.reset(100)
    assert tree.words() == ["a", "b"]
    assert tree.maybe_restructure(1000) is False
    with pytest.raises(TypeError):
        tree.set_max_comparisons(5)