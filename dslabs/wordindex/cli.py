"""Interactive menu for the reserved-word indexes."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import NoReturn, Optional, TextIO

from dslabs.wordindex.analysis import run_analysis
from dslabs.wordindex.avl import AvlTree
from dslabs.wordindex.bst import BstTree
from dslabs.wordindex.closed_hashtable import ClosedHashTable
from dslabs.wordindex.common import MAX_WORD_LEN, AssocArray, DuplicateWordError, WordInfo
from dslabs.wordindex.loader import WordFileError, parse_int, read_words
from dslabs.wordindex.open_hashtable import OpenHashTable

ERR_CRITICAL = 1
COMPARISONS_LIMIT = 10000

_MENU_LINE = re.compile(r"[0-9]+\n")
_WORD_ERROR = "Ошибка ввода зарезервированного слова!"
_FILE_ERROR = "Ошибка чтения файла!"


class MenuItem(IntEnum):
    EXIT = 0
    INIT_BST_TREE = 1
    INIT_AVL_TREE = 2
    INIT_OPEN_HASHTABLE = 3
    INIT_CLOSED_HASHTABLE = 4
    READ_FILE = 5
    INSERT_WORD = 6
    FIND_WORD = 7
    REMOVE_WORD = 8
    EXPORT = 9
    CHANGE_COMPARISONS = 10
    RUN_ANALYSIS = 11


_MENU_LABELS = {
    MenuItem.EXIT: "Выйти из программы",
    MenuItem.INIT_BST_TREE: "Инициализировать двоичное дерево поиска",
    MenuItem.INIT_AVL_TREE: "Инициализировать AVL-дерево",
    MenuItem.INIT_OPEN_HASHTABLE: "Инициализировать хеш-таблицу с открытым хешированием",
    MenuItem.INIT_CLOSED_HASHTABLE: "Инициализировать хеш-таблицу с закрытым хешированием",
    MenuItem.READ_FILE: "Считать файл в выбранную СД",
    MenuItem.INSERT_WORD: "Добавить элемент в выбранную СД",
    MenuItem.FIND_WORD: "Найти элемент в выбранной СД",
    MenuItem.REMOVE_WORD: "Удалить элемент из выбранной СД",
    MenuItem.EXPORT: "Вывести выбранную СД",
    MenuItem.CHANGE_COMPARISONS: (
        "Изменить максимальное количество сравнений\n"
        "    до реструктуризации (только для хеш-таблиц)"
    ),
    MenuItem.RUN_ANALYSIS: (
        "Провести сравнение эффективности поиска и добавления элементов\n"
        "    в ДДП, AVL-дереве, хеш-таблицах с различным хешированием"
    ),
}

_STRUCTURES = {
    MenuItem.INIT_BST_TREE: (BstTree, "Инициализировано двоичное дерево поиска"),
    MenuItem.INIT_AVL_TREE: (AvlTree, "Инициализировано AVL-дерево"),
    MenuItem.INIT_OPEN_HASHTABLE: (
        OpenHashTable, "Инициализирована хеш-таблица с открытым хешированием"),
    MenuItem.INIT_CLOSED_HASHTABLE: (
        ClosedHashTable, "Инициализирована хеш-таблица с закрытым хешированием"),
}

_NEEDS_INDEX = {
    MenuItem.READ_FILE,
    MenuItem.INSERT_WORD,
    MenuItem.FIND_WORD,
    MenuItem.REMOVE_WORD,
    MenuItem.EXPORT,
    MenuItem.CHANGE_COMPARISONS,
}


@dataclass
class Session:
    """State kept between menu actions: the chosen index and the directory for its files."""

    index: Optional[AssocArray] = None
    workdir: Path = field(default_factory=lambda: Path("."))


def print_menu(out: TextIO) -> None:
    """Write the list of menu items."""
    for item in MenuItem:
        out.write(f"{item.value:2d}: {_MENU_LABELS[item]}\n")


def read_menu_item(stream: TextIO, out: TextIO) -> MenuItem:
    """Prompt until a valid menu number is entered; EOFError at end of input."""
    while True:
        out.write(
            "Для выбора пункта меню введите целое число от "
            f"{MenuItem.EXIT.value} до {MenuItem.RUN_ANALYSIS.value}\n"
        )
        line = stream.readline()
        if not line:
            raise EOFError("input ended")
        if not _MENU_LINE.fullmatch(line):
            continue
        number = int(line)
        if MenuItem.EXIT <= number <= MenuItem.RUN_ANALYSIS:
            return MenuItem(number)


def _fail(out: TextIO, message: str) -> NoReturn:
    out.write(f"{message}\n")
    raise ValueError(message)


def _read_line(stream: TextIO) -> str:
    return stream.readline().split("\n", 1)[0]


def _read_word(stream: TextIO, out: TextIO) -> str:
    word = _read_line(stream)
    if not word or len(word.encode("utf-8")) >= MAX_WORD_LEN:
        _fail(out, _WORD_ERROR)
    return word


def _report_restructure(index: AssocArray, comparisons: int, out: TextIO) -> None:
    if index.maybe_restructure(comparisons):
        out.write("Превышено число сравнений, произведена реструктуризация\n")


def _read_file(session: Session, stream: TextIO, out: TextIO) -> None:
    out.write("Введите имя файла с зарезервированными словами языка C++:\n")
    name = _read_line(stream)
    if not name:
        _fail(out, "Ошибка ввода имени файла!")
    try:
        with open(session.workdir / name, encoding="utf-8") as source:
            read_words(session.index, source)
    except OSError:
        out.write(f"{_FILE_ERROR}\n")
        return
    except ValueError:
        return
    out.write("Слова успешно считаны\n")


def _insert(index: AssocArray, stream: TextIO, out: TextIO) -> None:
    out.write("Введите зарезервированное слово\n")
    word = _read_word(stream, out)
    out.write("Введите подсказку\n")
    help_text = _read_line(stream)
    if not help_text:
        _fail(out, _WORD_ERROR)
    try:
        comparisons = index.insert(WordInfo(word, help_text))
    except DuplicateWordError:
        out.write("Слово уже есть в СД!\n")
        return
    out.write(f"Слово успешно добавлено за {comparisons} сравнений\n")
    _report_restructure(index, comparisons, out)


def _find(index: AssocArray, stream: TextIO, out: TextIO) -> None:
    out.write("Введите зарезервированное слово\n")
    word = _read_word(stream, out)
    help_text, comparisons = index.find(word)
    if help_text is None:
        out.write("Зарезервированное слово не найдено!\n")
        return
    out.write(f"Подсказка:\n{help_text}\nНайдена за {comparisons} сравнений\n")
    _report_restructure(index, comparisons, out)


def _remove(index: AssocArray, stream: TextIO, out: TextIO) -> None:
    out.write("Введите зарезервированное слово\n")
    word = _read_word(stream, out)
    removed, comparisons = index.remove(word)
    if not removed:
        out.write("Зарезервированное слово не найдено!\n")
        return
    out.write(f"Слово удалено за {comparisons} сравнений\n")
    _report_restructure(index, comparisons, out)


def _export(session: Session, out: TextIO) -> None:
    index = session.index
    text = index.render()
    if index.graph_name is None:
        out.write(text)
        return
    (session.workdir / "graph.gv").write_text(text, encoding="utf-8")
    picture = f"{index.graph_name}.png"
    for command in (["dot", "-Tpng", "-o", picture, "./graph.gv"], ["open", picture]):
        try:
            subprocess.run(command, cwd=session.workdir, check=False)
        except OSError:
            out.write(f"Не удалось запустить {command[0]}\n")


def _change_comparisons(index: AssocArray, stream: TextIO, out: TextIO) -> None:
    if not index.supports_max_comparisons:
        out.write("Данное действие не применимо к дереву!\n")
        return
    out.write("Введите максимальное число сравнений\n")
    try:
        value = parse_int(_read_line(stream), COMPARISONS_LIMIT)
    except WordFileError:
        value = None
    if value is None:
        _fail(out, "Ошибка ввода числа сравнений!")
    index.set_max_comparisons(value)


def process_menu(item: MenuItem, session: Session, stream: TextIO, out: TextIO) -> bool:
    """Carry out one menu action. Returns False when the user chose to exit.

    ValueError propagates, after its message is written, when user input
    cannot be read.
    """
    if session.index is None and item in _NEEDS_INDEX:
        out.write("Нельзя производить данное действие над неинициализированной СД!\n")
        return True

    if item == MenuItem.EXIT:
        return False
    if item in _STRUCTURES:
        factory, message = _STRUCTURES[item]
        session.index = factory()
        out.write(f"{message}\n")
    elif item == MenuItem.READ_FILE:
        _read_file(session, stream, out)
    elif item == MenuItem.INSERT_WORD:
        _insert(session.index, stream, out)
    elif item == MenuItem.FIND_WORD:
        _find(session.index, stream, out)
    elif item == MenuItem.REMOVE_WORD:
        _remove(session.index, stream, out)
    elif item == MenuItem.EXPORT:
        _export(session, out)
    elif item == MenuItem.CHANGE_COMPARISONS:
        _change_comparisons(session.index, stream, out)
    elif item == MenuItem.RUN_ANALYSIS:
        try:
            run_analysis(session.workdir / "big.txt", out=out)
        except (OSError, ValueError):
            out.write(f"{_FILE_ERROR}\n")
    return True


def main(argv=None) -> int:
    """Run the interactive word-index program on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dslabs-wordindex",
        description="Search trees and hash tables of reserved words.",
    )
    parser.parse_args(argv)
    stream, out = sys.stdin, sys.stdout
    session = Session()

    out.write("Программа для работы с деревьями поиска и хеш-таблицами\n")
    out.write("Для дальнейшей работы инициализируйте одну из СД\n")
    try:
        while True:
            print_menu(out)
            item = read_menu_item(stream, out)
            if not process_menu(item, session, stream, out):
                return 0
    except (EOFError, ValueError):
        return ERR_CRITICAL


if __name__ == "__main__":
    sys.exit(main())