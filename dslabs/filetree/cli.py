"""Interactive menu for the tree of file records."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import TextIO

from dslabs.filetree.analysis import run_analysis
from dslabs.filetree.reader import (
    FILE_ERROR,
    MAX_DAY,
    MAX_MONTH,
    MAX_YEAR,
    RecordFormatError,
    load_tree,
    parse_int,
    read_record,
)
from dslabs.filetree.tree import (
    Date,
    DuplicateRecordError,
    FileTree,
    RecordNotFoundError,
    export_to_dot,
    format_record,
)

ERR_EOF = 3
_MENU_LINE = re.compile(r"[0-9]+\n")
_NAME_ERROR = "Ошибка чтения имени файла!"
_SAMPLE_DATE_ERROR = "Ошибка чтения даты обращения!"


class MenuItem(IntEnum):
    EXIT = 0
    READ = 1
    RESORT = 2
    DRAW = 3
    PRINT_PRE = 4
    PRINT_IN = 5
    PRINT_POST = 6
    ADD_ELEM = 7
    DEL_ELEM = 8
    FIND_ELEM = 9
    DEL_OLD_FILES = 10
    RUN_ANALYSIS = 11


_MENU_LABELS = {
    MenuItem.EXIT: "Выйти из программы",
    MenuItem.READ: "Прочитать дерево из файла",
    MenuItem.RESORT: "Перестроить дерево",
    MenuItem.DRAW: "Вывести дерево в виде картинки",
    MenuItem.PRINT_PRE: "Напечатать дерево в префиксном обходе",
    MenuItem.PRINT_IN: "Напечатать дерево в инфиксном обходе",
    MenuItem.PRINT_POST: "Напечатать дерево в постфиксном обходе",
    MenuItem.ADD_ELEM: "Добавить элемент в дерево",
    MenuItem.DEL_ELEM: "Удалить элемент из дерева",
    MenuItem.FIND_ELEM: "Найти элемент в дереве",
    MenuItem.DEL_OLD_FILES: "Удалить элементы, обращение к которым было до определенной даты",
    MenuItem.RUN_ANALYSIS: "Провести сравнение удаления в дереве построенных по разным ключам",
}

_ALLOWED_ON_EMPTY = {MenuItem.EXIT, MenuItem.RUN_ANALYSIS, MenuItem.READ, MenuItem.ADD_ELEM}


@dataclass
class Session:
    """State kept between menu actions: the tree and the directory for its files."""

    tree: FileTree = field(default_factory=FileTree)
    workdir: Path = field(default_factory=lambda: Path("."))


def print_menu(out: TextIO) -> None:
    """Write the list of menu items."""
    for item in MenuItem:
        out.write(f"{item.value}: {_MENU_LABELS[item]}\n")


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


def _read_text(stream: TextIO, message: str) -> str:
    text = stream.readline().split("\n", 1)[0]
    if not text:
        raise RecordFormatError(message)
    return text


def _read_number(stream: TextIO, maximum: int, message: str) -> int:
    text = _read_text(stream, message)
    try:
        return parse_int(text, maximum)
    except RecordFormatError:
        raise RecordFormatError(message) from None


def _read_from_file(session: Session, stream: TextIO, out: TextIO) -> None:
    session.tree = FileTree()
    out.write("Введите имя файла:\n")
    name = _read_text(stream, "Ошибка ввода имени файла!")
    try:
        session.tree = load_tree(session.workdir / name)
    except OSError:
        out.write(f"{FILE_ERROR}\n")
    except RecordFormatError as exc:
        out.write(f"{exc}\n")
    except DuplicateRecordError:
        out.write("Совпадающие элементы в файле!\n")


def _resort(tree: FileTree, out: TextIO) -> None:
    try:
        tree.change_sort()
    except DuplicateRecordError:
        out.write("Невозможно сменить вид дерева!\n")
    else:
        out.write("Дерево успешно перестроено\n")


def _draw(session: Session, out: TextIO) -> None:
    (session.workdir / "graph.gv").write_text(
        export_to_dot(session.tree.root, "Дерево"), encoding="utf-8")
    for command in (["dot", "-Tpng", "-o", "out.png", "graph.gv"], ["open", "out.png"]):
        try:
            subprocess.run(command, cwd=session.workdir, check=False)
        except OSError:
            out.write(f"Не удалось запустить {command[0]}\n")


def _insert(tree: FileTree, stream: TextIO, out: TextIO) -> None:
    record = read_record(stream, prompt=True, out=out)
    try:
        tree.insert(record)
    except DuplicateRecordError:
        out.write("Элемент уже есть в дереве!\n")
    else:
        out.write("Элемент добавлен в дерево\n")


def _delete(tree: FileTree, stream: TextIO, out: TextIO) -> None:
    out.write("Введите имя файла к удалению:\n")
    name = _read_text(stream, _NAME_ERROR)
    try:
        tree.delete(name)
    except RecordNotFoundError:
        out.write("Файл с заданным именем не найден!\n")
    else:
        out.write("Файл удален\n")


def _find(tree: FileTree, stream: TextIO, out: TextIO) -> None:
    out.write("Введите имя файла к поиску:\n")
    name = _read_text(stream, _NAME_ERROR)
    try:
        record = tree.find(name)
    except RecordNotFoundError:
        out.write("Файл с заданным именем не найден!\n")
        return
    out.write("Информация о найденном файле:\n")
    out.write(format_record(record))


def _delete_old(tree: FileTree, stream: TextIO, out: TextIO) -> None:
    out.write("Введите первую не удаляемую дату обращения:\n")
    out.write("Введите день:\n")
    day = _read_number(stream, MAX_DAY, _SAMPLE_DATE_ERROR)
    out.write("Введите месяц:\n")
    month = _read_number(stream, MAX_MONTH, _SAMPLE_DATE_ERROR)
    out.write("Введите год:\n")
    year = _read_number(stream, MAX_YEAR, _SAMPLE_DATE_ERROR)
    tree.delete_older_than(Date(day, month, year))


def process_menu(item: MenuItem, session: Session, stream: TextIO, out: TextIO) -> bool:
    """Carry out one menu action. Returns False when the user chose to exit.

    RecordFormatError propagates when user input cannot be read.
    """
    if session.tree.root is None and item not in _ALLOWED_ON_EMPTY:
        out.write("Пустое дерево!\n")
        return True

    tree = session.tree
    if item == MenuItem.EXIT:
        return False
    if item == MenuItem.READ:
        _read_from_file(session, stream, out)
    elif item == MenuItem.RESORT:
        _resort(tree, out)
    elif item == MenuItem.DRAW:
        _draw(session, out)
    elif item in (MenuItem.PRINT_PRE, MenuItem.PRINT_IN, MenuItem.PRINT_POST):
        walk = {MenuItem.PRINT_PRE: tree.pre_order,
                MenuItem.PRINT_IN: tree.in_order,
                MenuItem.PRINT_POST: tree.post_order}[item]
        for record in walk():
            out.write(format_record(record))
    elif item == MenuItem.ADD_ELEM:
        _insert(tree, stream, out)
    elif item == MenuItem.DEL_ELEM:
        _delete(tree, stream, out)
    elif item == MenuItem.FIND_ELEM:
        _find(tree, stream, out)
    elif item == MenuItem.DEL_OLD_FILES:
        _delete_old(tree, stream, out)
    elif item == MenuItem.RUN_ANALYSIS:
        try:
            run_analysis(session.workdir / "big.txt", out=out)
        except (OSError, RecordFormatError, DuplicateRecordError, ValueError):
            out.write(f"{FILE_ERROR}\n")
    return True


def main(argv=None) -> int:
    """Run the interactive tree program on standard input and output."""
    parser = argparse.ArgumentParser(prog="dslabs-filetree",
                                     description="A search tree of file records.")
    parser.parse_args(argv)
    stream, out = sys.stdin, sys.stdout
    session = Session()

    out.write("Программа для работы с деревом\n")
    try:
        while True:
            print_menu(out)
            item = read_menu_item(stream, out)
            if not process_menu(item, session, stream, out):
                return 0
    except EOFError:
        return ERR_EOF
    except RecordFormatError as exc:
        out.write(f"{exc}\n")
        return ERR_EOF


if __name__ == "__main__":
    sys.exit(main())