import io

import pytest

from dslabs.wordindex.analysis import WORDS, measure_find, measure_insert, run_analysis
from dslabs.wordindex.bst import BstTree
from dslabs.wordindex.open_hashtable import OpenHashTable


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("1\nzzz\nlast word\n", encoding="utf-8")
    return path


def test_measure_insert_bst(word_file):
    elapsed, comparisons = measure_insert(BstTree, word_file, ["a"], tests=2, warmup=1)
    assert elapsed >= 0
    assert comparisons == 1.0


def test_measure_find_bst(word_file):
    elapsed, comparisons = measure_find(BstTree, word_file, ["a"], tests=2, warmup=0)
    assert elapsed >= 0
    assert comparisons == 2.0


def test_bad_file_content_is_ignored(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("not a number\n", encoding="utf-8")
    _, comparisons = measure_insert(BstTree, path, ["a"], tests=1, warmup=0)
    assert comparisons == 0.0


def test_find_comparisons_at_least_one(word_file):
    _, comparisons = measure_find(OpenHashTable, word_file, list(WORDS), tests=1, warmup=0)
    assert comparisons >= 1.0


def test_invalid_arguments(word_file):
    with pytest.raises(ValueError):
        measure_insert(BstTree, word_file, ["a"], tests=0, warmup=0)
    with pytest.raises(ValueError):
        measure_find(BstTree, word_file, ["a"], tests=1, warmup=-1)
    with pytest.raises(ValueError):
        measure_find(BstTree, word_file, [], tests=1, warmup=0)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        measure_insert(BstTree, tmp_path / "absent.txt", ["a"], tests=1, warmup=0)


def test_run_analysis_report(word_file):
    out = io.StringIO()
    results = run_analysis(word_file, tests=1, warmup=0, out=out)
    text = out.getvalue()
    assert text.startswith("Результаты сравнения (в наносекундах):\n")
    for title in ("Двоичное дерево поиска", "AVL-дерево",
                  "Хеш-таблица с открытым хешированием",
                  "Хеш-таблица с закрытым хешированием"):
        assert title in results
        assert f"{title}\n" in text
    assert text.count("Занимаемый объем памяти") == len(results)
    for figures in results.values():
        assert figures["find_comparisons"] >= 1.0