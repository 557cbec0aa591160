"""Timing and comparison counts of the four word indexes."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from time import perf_counter_ns
from typing import Callable, Optional, Sequence, TextIO, Union

from dslabs.wordindex.avl import AvlTree
from dslabs.wordindex.bst import BstTree
from dslabs.wordindex.closed_hashtable import ClosedHashTable
from dslabs.wordindex.common import AssocArray, DuplicateWordError, WordInfo
from dslabs.wordindex.loader import WordFileError, read_words
from dslabs.wordindex.open_hashtable import OpenHashTable

TESTS = 1000
START_GARBAGE_NUM = 10

WORDS = (
    "int", "char", "if", "while", "for", "return", "continue", "break", "short", "long",
    "unsigned", "static", "auto", "extern", "void", "else", "switch", "case", "float ", "double",
)

_POINTER = 8
_WORD = 16
_BST_NODE = _POINTER + _WORD + 2 * _POINTER
_AVL_NODE = _POINTER + _WORD + 8 + 2 * _POINTER
_OPEN_NODE = _POINTER + _WORD + _POINTER
_CLOSED_ELEM = _POINTER + _WORD + 8

STRUCTURES = (
    ("Двоичное дерево поиска", BstTree, _BST_NODE * 1000),
    ("AVL-дерево", AvlTree, _AVL_NODE * 1000),
    ("Хеш-таблица с открытым хешированием", OpenHashTable, (_POINTER + _OPEN_NODE) * 1000),
    ("Хеш-таблица с закрытым хешированием", ClosedHashTable, _CLOSED_ELEM * 1000),
)

Factory = Callable[[], AssocArray]


def _prepare(factory: Factory, data: str) -> AssocArray:
    index = factory()
    try:
        read_words(index, io.StringIO(data))
    except WordFileError:
        pass
    return index


def _insert_all(index: AssocArray, words: Sequence[str]) -> int:
    comparisons = 0
    for word in words:
        try:
            comparisons += index.insert(WordInfo(word))
        except DuplicateWordError as exc:
            comparisons += exc.comparisons
    return comparisons


def _one_insert(factory: Factory, data: str, words: Sequence[str]) -> tuple[int, int]:
    index = _prepare(factory, data)
    start = perf_counter_ns()
    comparisons = _insert_all(index, words)
    return perf_counter_ns() - start, comparisons


def _one_find(factory: Factory, data: str, words: Sequence[str]) -> tuple[int, int]:
    index = _prepare(factory, data)
    _insert_all(index, words)
    comparisons = 0
    start = perf_counter_ns()
    for word in words:
        comparisons += index.find(word)[1]
    return perf_counter_ns() - start, comparisons


def _measure(run, factory: Factory, path, words: Sequence[str],
             tests: int, warmup: int) -> tuple[int, float]:
    if tests < 1:
        raise ValueError("tests must be positive")
    if warmup < 0:
        raise ValueError("warmup must not be negative")
    if not words:
        raise ValueError("no words to measure")
    data = Path(path).read_text(encoding="utf-8")
    for _ in range(warmup):
        run(factory, data, words)
    total_ns = 0
    total_comparisons = 0
    for _ in range(tests):
        elapsed, comparisons = run(factory, data, words)
        total_ns += elapsed
        total_comparisons += comparisons
    return total_ns // tests, (total_comparisons // tests) / len(words)


def measure_insert(factory: Factory, path: Union[str, Path], words: Sequence[str] = WORDS,
                   tests: int = TESTS, warmup: int = START_GARBAGE_NUM) -> tuple[int, float]:
    """Average time of inserting ``words`` and comparisons per word."""
    return _measure(_one_insert, factory, path, words, tests, warmup)


def measure_find(factory: Factory, path: Union[str, Path], words: Sequence[str] = WORDS,
                 tests: int = TESTS, warmup: int = START_GARBAGE_NUM) -> tuple[int, float]:
    """Average time of finding ``words`` and comparisons per word."""
    return _measure(_one_find, factory, path, words, tests, warmup)


def run_analysis(
    path: Union[str, Path] = "big.txt",
    tests: int = TESTS,
    warmup: int = START_GARBAGE_NUM,
    out: Optional[TextIO] = None,
) -> dict[str, dict]:
    """Print the comparison report for the word file and return its figures."""
    if out is None:
        out = sys.stdout
    results = {}
    for title, factory, memory in STRUCTURES:
        insert_ns, insert_comps = measure_insert(factory, path, WORDS, tests, warmup)
        find_ns, find_comps = measure_find(factory, path, WORDS, tests, warmup)
        results[title] = {
            "insert_ns": insert_ns,
            "insert_comparisons": insert_comps,
            "find_ns": find_ns,
            "find_comparisons": find_comps,
            "memory_bytes": memory,
        }

    out.write("Результаты сравнения (в наносекундах):\n")
    for title, figures in results.items():
        out.write(f"{title}\n")
        out.write("|  Операция  | Время | Сравнения |\n")
        out.write(f"| Добавление | {figures['insert_ns']:5d} | {figures['insert_comparisons']:9.2f} |\n")
        out.write(f"|   Поиск    | {figures['find_ns']:5d} | {figures['find_comparisons']:9.2f} |\n")
        out.write(f"Занимаемый объем памяти: {figures['memory_bytes']} байт\n")
    return results