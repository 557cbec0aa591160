"""Reading file records from text streams and data files."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from dslabs.filetree.tree import Date, FileRecord, FileTree

MAX_RECORDS = 10000
MAX_DAY = 31
MAX_MONTH = 12
MAX_YEAR = 2100
MAX_FLAG = 2

FILE_ERROR = "Ошибка чтения файла!"
NAME_ERROR = "Ошибка чтения имени файла!"
DATE_ERROR = "Ошибка чтения даты обращения файла!"
ATTRIBUTE_ERROR = "Ошибка чтения атрибута файла!"

_DIGITS = re.compile(r"[0-9]+")


class RecordFormatError(ValueError):
    """Raised when a record or a data file cannot be read."""


def parse_int(text: str, maximum: int) -> int:
    """Parse a whole decimal number in the range 1..maximum."""
    if not _DIGITS.fullmatch(text):
        raise RecordFormatError(f"not a positive integer: {text!r}")
    value = int(text)
    if not 0 < value <= maximum:
        raise RecordFormatError(f"{value} is outside 1..{maximum}")
    return value


def _read_line(stream: TextIO) -> Optional[str]:
    """Return the next line without its end, or None at end of input or on a blank line."""
    line = stream.readline()
    text = line.split("\n", 1)[0]
    return text or None


def _read_int(stream: TextIO, maximum: int, message: str) -> int:
    text = _read_line(stream)
    if text is None:
        raise RecordFormatError(message)
    try:
        return parse_int(text, maximum)
    except RecordFormatError:
        raise RecordFormatError(message) from None


def read_record(stream: TextIO, prompt: bool = False, out: Optional[TextIO] = None) -> FileRecord:
    """Read one record: name, day, month, year, hidden flag and system flag.

    With ``prompt`` set, a prompt is written to ``out`` before each field.
    """
    if out is None:
        out = sys.stdout

    def ask(text: str) -> None:
        if prompt:
            out.write(f"{text}\n")

    ask("Введите имя файла:")
    name = _read_line(stream)
    if name is None:
        raise RecordFormatError(NAME_ERROR)
    ask("Введите день последнего обращения файла:")
    day = _read_int(stream, MAX_DAY, DATE_ERROR)
    ask("Введите месяц последнего обращения файла:")
    month = _read_int(stream, MAX_MONTH, DATE_ERROR)
    ask("Введите год последнего обращения файла:")
    year = _read_int(stream, MAX_YEAR, DATE_ERROR)
    ask("Введите 2 для скрытого файла, иначе 1:")
    hidden = _read_int(stream, MAX_FLAG, ATTRIBUTE_ERROR) == 2
    ask("Введите 2 для системного файла, иначе 1:")
    system = _read_int(stream, MAX_FLAG, ATTRIBUTE_ERROR) == 2
    return FileRecord(name, Date(day, month, year), hidden, system)


def read_tree(stream: TextIO) -> FileTree:
    """Read a record count followed by that many records into a name-ordered tree.

    Raises RecordFormatError on malformed data and DuplicateRecordError
    when two records share a name.
    """
    count = _read_int(stream, MAX_RECORDS, FILE_ERROR)
    tree = FileTree()
    for _ in range(count):
        try:
            record = read_record(stream)
        except RecordFormatError as exc:
            raise RecordFormatError(f"{exc}\n{FILE_ERROR}") from exc
        tree.insert(record)
    return tree


def load_tree(path: Union[str, Path]) -> FileTree:
    """Read a tree from a data file; OSError if the file cannot be opened."""
    with open(path, encoding="utf-8") as stream:
        return read_tree(stream)