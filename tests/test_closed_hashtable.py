import pytest

from dslabs.wordindex.closed_hashtable import ClosedHashTable
from dslabs.wordindex.common import (
    INITIAL_SIZE,
    MAX_COMPARISONS,
    DuplicateWordError,
    WordInfo,
    find_next_size,
    hash_function,
)


def _colliding(size, count):
    groups = {}
    for number in range(10000):
        word = f"w{number}"
        group = groups.setdefault(hash_function(word, size), [])
        group.append(word)
        if len(group) == count:
            return group
    raise AssertionError("no collision found")


def test_initial_state():
    table = ClosedHashTable()
    assert table.size == find_next_size(INITIAL_SIZE)
    assert table.max_comparisons == MAX_COMPARISONS
    assert len(table) == 0


def test_insert_and_find():
    table = ClosedHashTable()
    assert table.insert(WordInfo("int", "integer type")) == 1
    help_text, comparisons = table.find("int")
    assert help_text == "integer type"
    assert comparisons >= 1


def test_find_absent():
    table = ClosedHashTable()
    table.insert(WordInfo("int", "x"))
    assert table.find("char")[0] is None


def test_duplicate_raises():
    table = ClosedHashTable()
    table.insert(WordInfo("while", "loop"))
    with pytest.raises(DuplicateWordError) as info:
        table.insert(WordInfo("while", "again"))
    assert info.value.word == "while"


def test_collision_probes_next_slot():
    table = ClosedHashTable()
    first, second = _colliding(table.size, 2)
    table.insert(WordInfo(first, "a"))
    assert table.insert(WordInfo(second, "b")) == 2
    assert table.find(second)[0] == "b"
    assert table.find(first)[0] == "a"


def test_remove_leaves_tombstone():
    table = ClosedHashTable()
    first, second = _colliding(table.size, 2)
    table.insert(WordInfo(first, "a"))
    table.insert(WordInfo(second, "b"))
    found, _ = table.remove(first)
    assert found
    assert table.find(first)[0] is None
    assert table.find(second)[0] == "b"
    assert "Элемент удален" in table.render()


def test_remove_absent():
    table = ClosedHashTable()
    table.insert(WordInfo("for", "loop"))
    assert table.remove("if")[0] is False


def test_render_layout():
    table = ClosedHashTable()
    table.insert(WordInfo("case", "label"))
    lines = table.render().splitlines()
    assert lines[0] == "Индекс | Хеш | Слово"
    assert len(lines) == table.size + 1
    index = hash_function("case", table.size)
    assert lines[index + 1].endswith("| case")


def test_restructure_keeps_words():
    table = ClosedHashTable()
    words = [f"k{i}" for i in range(8)]
    for word in words:
        table.insert(WordInfo(word, word.upper()))
    new_size = find_next_size(table.size)
    table.restructure(new_size)
    assert table.size == new_size
    assert sorted(table.words()) == sorted(words)
    for word in words:
        assert table.find(word)[0] == word.upper()


def test_restructure_too_small():
    table = ClosedHashTable()
    for i in range(5):
        table.insert(WordInfo(f"k{i}", ""))
    with pytest.raises(ValueError):
        table.restructure(3)


def test_maybe_restructure():
    table = ClosedHashTable()
    old = table.size
    assert table.maybe_restructure(MAX_COMPARISONS) is False
    assert table.size == old
    assert table.maybe_restructure(MAX_COMPARISONS + 1) is True
    assert table.size == find_next_size(old)


def test_set_max_comparisons():
    table = ClosedHashTable()
    table.set_max_comparisons(7)
    assert table.max_comparisons == 7
    with pytest.raises(ValueError):
        table.set_max_comparisons(-1)


def test_reset_clears():
    table = ClosedHashTable()
    table.insert(WordInfo("auto", ""))
    table.reset(40)
    assert table.size == find_next_size(40)
    assert len(table) == 0
    assert table.find("auto")[0] is None


def test_full_table():
    table = ClosedHashTable()
    table.reset(1)
    words = [f"f{i}" for i in range(table.size)]
    for word in words:
        table.insert(WordInfo(word, ""))
    with pytest.raises(DuplicateWordError):
        table.insert(WordInfo("extra", ""))
    assert table.find("extra")[0] is None
    assert table.remove("extra")[0] is False