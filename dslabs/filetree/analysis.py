"""Timing comparison of deleting old records from name- and date-ordered trees."""

from __future__ import annotations

import math
import sys
from pathlib import Path
from time import perf_counter_ns
from typing import Callable, Optional, TextIO, Union

from dslabs.filetree.reader import load_tree
from dslabs.filetree.tree import (
    Date,
    DuplicateRecordError,
    FileRecord,
    FileTree,
    correct_del_old_files,
    wrong_del_old_files,
)

TESTS = 1000
START_GARBAGE_NUM = 10

CASES = (
    (Date(1, 1, 1969), "Остаются все элементы       "),
    (Date(1, 1, 2000), "Удаляется половина элементов"),
    (Date(1, 1, 2041), "Удаляются все элементы      "),
)

_HEADER = (
    "|       Тестовые случаи        | Время удаления в изначальном дереве "
    "| Время перестроения | Время удаления в перестроенном "
    "| Сумма в перестроенном | Выигрыш времени от перестроения |\n"
)


def calc_gain(before: float, after: float) -> float:
    """Relative saving of ``after`` against ``before``, in percent."""
    if before == 0:
        return math.nan if after == 0 else -math.inf
    return (1.0 - after / before) * 100.0


def _build(records: list[FileRecord]) -> FileTree:
    tree = FileTree()
    for record in records:
        tree.insert(record)
    return tree


def _resort(tree: FileTree) -> None:
    try:
        tree.change_sort()
    except DuplicateRecordError:
        pass


def _time_delete_unsorted(records: list[FileRecord], sample: Date) -> int:
    tree = _build(records)
    start = perf_counter_ns()
    tree.root = wrong_del_old_files(tree.root, sample)
    return perf_counter_ns() - start


def _time_resort(records: list[FileRecord], sample: Date) -> int:
    tree = _build(records)
    start = perf_counter_ns()
    _resort(tree)
    return perf_counter_ns() - start


def _time_delete_sorted(records: list[FileRecord], sample: Date) -> int:
    tree = _build(records)
    _resort(tree)
    start = perf_counter_ns()
    tree.root = correct_del_old_files(tree.root, sample)
    return perf_counter_ns() - start


def _average(action: Callable[[list[FileRecord], Date], int], records: list[FileRecord],
             sample: Date, tests: int, warmup: int) -> int:
    for _ in range(warmup):
        action(records, sample)
    return sum(action(records, sample) for _ in range(tests)) // tests


def run_analysis(
    path: Union[str, Path] = "big.txt",
    tests: int = TESTS,
    warmup: int = START_GARBAGE_NUM,
    out: Optional[TextIO] = None,
) -> list[dict]:
    """Print the comparison table for the data file and return its rows."""
    if tests < 1:
        raise ValueError("tests must be positive")
    if warmup < 0:
        raise ValueError("warmup must not be negative")
    if out is None:
        out = sys.stdout

    records = list(load_tree(path).pre_order())
    if not records:
        raise ValueError("the data file holds no records")

    out.write("Результаты сравнения (в наносекундах):\n")
    out.write(_HEADER)
    rows = []
    for sample, label in CASES:
        delete_unsorted = _average(_time_delete_unsorted, records, sample, tests, warmup)
        resort = _average(_time_resort, records, sample, tests, warmup)
        delete_sorted = _average(_time_delete_sorted, records, sample, tests, warmup)
        total = resort + delete_sorted
        gain = calc_gain(delete_unsorted, total)
        out.write(f"| {label} | {delete_unsorted:35d} | {resort:18d} | {delete_sorted:30d} "
                  f"| {total:21d} | {gain:30.2f}% |\n")
        rows.append({
            "case": label.strip(),
            "sample": sample,
            "delete_unsorted_ns": delete_unsorted,
            "resort_ns": resort,
            "delete_sorted_ns": delete_sorted,
            "total_sorted_ns": total,
            "gain": gain,
        })
    return rows