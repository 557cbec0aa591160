"""Interactive menu for working with the queues and running the model."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, TextIO, Union

from dslabs.queues.analysis import run_analysis
from dslabs.queues.simulation import Params, expected_time, run_simulation
from dslabs.queues.structures import (
    ArrayQueue,
    ListQueue,
    QueueEmptyError,
    QueueOverflowError,
)

_EMPTY_VALUE = "Введено пустое значение!"
_INVALID_VALUE = "Введено некорректное значение!"
_MENU_LINE = re.compile(r"[0-9]+\n")


class MenuItem(IntEnum):
    EXIT = 0
    INIT_ARRAY_QUEUE = 1
    INIT_LIST_QUEUE = 2
    PUSH_ELEM = 3
    POP_ELEM = 4
    PRINT_QUEUE = 5
    PRINT_FREED_MEMORY = 6
    CHANGE_PARAMS = 7
    RUN_SIMULATION_ARRAY = 8
    RUN_SIMULATION_LIST = 9
    RUN_ANALYSIS = 10


_MENU_LABELS = {
    MenuItem.EXIT: "Выйти из программы",
    MenuItem.INIT_ARRAY_QUEUE: "Инициализировать очередь на массиве",
    MenuItem.INIT_LIST_QUEUE: "Инициализировать очередь на списке",
    MenuItem.PUSH_ELEM: "Записать элемент в очередь",
    MenuItem.POP_ELEM: "Удалить элемент из очереди",
    MenuItem.PRINT_QUEUE: "Напечатать очередь",
    MenuItem.PRINT_FREED_MEMORY: "Напечатать список освобожденных адресов(только для списка)",
    MenuItem.CHANGE_PARAMS: "Изменить времена поступления и обработки",
    MenuItem.RUN_SIMULATION_ARRAY: "Запустить симуляцию очереди на массиве",
    MenuItem.RUN_SIMULATION_LIST: "Запустить симуляцию очереди на списке",
    MenuItem.RUN_ANALYSIS: "Провести сравнение очереди на массиве и списке",
}

_NEEDS_QUEUE = {
    MenuItem.PUSH_ELEM,
    MenuItem.POP_ELEM,
    MenuItem.PRINT_QUEUE,
    MenuItem.PRINT_FREED_MEMORY,
}

_RESETS_QUEUE = {
    MenuItem.RUN_SIMULATION_ARRAY,
    MenuItem.RUN_SIMULATION_LIST,
    MenuItem.RUN_ANALYSIS,
}


@dataclass
class Session:
    """State kept between menu actions: model parameters and the working queue."""

    params: Params = field(default_factory=Params)
    queue: Optional[Union[ArrayQueue, ListQueue]] = None


def parse_non_negative(text: str) -> float:
    """Parse a non-negative real number occupying the whole text.

    Raises ValueError carrying the message to show to the user.
    """
    if text == "":
        raise ValueError(_EMPTY_VALUE)
    if text != text.rstrip() or "_" in text:
        raise ValueError(_INVALID_VALUE)
    try:
        value = float(text)
    except ValueError:
        raise ValueError(_INVALID_VALUE) from None
    if value < 0.0:
        raise ValueError(_INVALID_VALUE)
    return value


def _read_value(stream: TextIO, out: TextIO) -> Optional[float]:
    """Read one value line; None means the value was rejected (already reported)."""
    line = stream.readline()
    if not line:
        raise EOFError("input ended")
    try:
        if len(line) < 2:
            raise ValueError(_EMPTY_VALUE)
        if not line.endswith("\n"):
            raise ValueError(_INVALID_VALUE)
        return parse_non_negative(line[:-1])
    except ValueError as exc:
        out.write(f"{exc}\n")
        return None


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


def _push_from_user(queue, stream: TextIO, out: TextIO) -> None:
    out.write("Введите элемент очереди - вещественное число в формате IEEE754:\n")
    value = _read_value(stream, out)
    if value is None:
        return
    try:
        queue.push(value)
    except QueueOverflowError:
        out.write("Очередь переполнена!\n")
    else:
        out.write("В очередь успешно добавлено число\n")


def _pop_from_user(queue, out: TextIO) -> None:
    try:
        value = queue.pop()
    except QueueEmptyError:
        out.write("Очередь пуста!\n")
        return
    out.write("Бывшее значение в начале очереди:\n")
    out.write(f"{value:.6f}\n")


def _print_queue(queue, out: TextIO) -> None:
    if len(queue) == 0:
        out.write("Очередь пуста!\n")
        return
    if isinstance(queue, ArrayQueue):
        out.write("Очередь-массив:\n")
    else:
        out.write("Очередь-список:\n")
    for address, value in queue.entries():
        out.write(f"{address:#x} {value:.6f}\n")


def _print_freed(queue, out: TextIO) -> None:
    if isinstance(queue, ArrayQueue):
        out.write("Действие не имеет смысла для очереди-массива!\n")
        return
    freed = queue.freed_addresses()
    if not freed:
        out.write("Массив адресов освобожденной памяти пуст!\n")
        return
    out.write("Список адресов освобожденной памяти:\n")
    for address in freed:
        out.write(f"{address:#x}\n")


def _change_params(params: Params, stream: TextIO, out: TextIO) -> None:
    out.write(
        "Введите 8 вещественных чисел в формате IEEE754, каждое в отдельной "
        "строке - нижние и верхние пределы времен T1, T2, T3, T4:\n"
    )
    for prefix in ("t1", "t2", "t3", "t4"):
        lo = _read_value(stream, out)
        if lo is None:
            return
        hi = _read_value(stream, out)
        if hi is None:
            return
        if lo > hi:
            out.write("Введены некорректные значения!\n")
            return
        setattr(params, f"{prefix}_lo", lo)
        setattr(params, f"{prefix}_hi", hi)

    if expected_time(params.t4_lo, params.t4_hi) > expected_time(params.t2_lo, params.t2_hi):
        out.write(
            "Warning: Заявки во второй очереди будут поступать быстрее чем "
            "обрабатываться!\nБольшой шанс вечной работы программы!\n"
        )


def process_menu(item: MenuItem, session: Session, stream: TextIO, out: TextIO) -> bool:
    """Carry out one menu action. Returns False when the user chose to exit.

    EOFError propagates when input ends; QueueOverflowError when a
    simulation overflows a queue.
    """
    if session.queue is None and item in _NEEDS_QUEUE:
        out.write("Нельзя производить данное действие над неинициализированной очередью!\n")
        return True

    if item in _RESETS_QUEUE:
        session.queue = None

    if item == MenuItem.EXIT:
        return False
    if item == MenuItem.INIT_ARRAY_QUEUE:
        session.queue = ArrayQueue()
        out.write("Очередь на массиве успешно инициализирована\n")
    elif item == MenuItem.INIT_LIST_QUEUE:
        session.queue = ListQueue(track_freed=True)
        out.write("Очередь на списке успешно инициализирована\n")
    elif item == MenuItem.PUSH_ELEM:
        _push_from_user(session.queue, stream, out)
    elif item == MenuItem.POP_ELEM:
        _pop_from_user(session.queue, out)
    elif item == MenuItem.PRINT_QUEUE:
        _print_queue(session.queue, out)
    elif item == MenuItem.PRINT_FREED_MEMORY:
        _print_freed(session.queue, out)
    elif item == MenuItem.CHANGE_PARAMS:
        _change_params(session.params, stream, out)
    elif item == MenuItem.RUN_SIMULATION_ARRAY:
        run_simulation(session.params, ArrayQueue(), ArrayQueue(), verbose=True, out=out)
    elif item == MenuItem.RUN_SIMULATION_LIST:
        run_simulation(session.params, ListQueue(), ListQueue(), verbose=True, out=out)
    elif item == MenuItem.RUN_ANALYSIS:
        run_analysis(session.params, out=out)
    return True


def main(argv=None) -> int:
    """Run the interactive queue program on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dslabs-queues",
        description="Queues on an array and on a linked list, and a service model.",
    )
    parser.parse_args(argv)
    stream, out = sys.stdin, sys.stdout
    session = Session()

    out.write("Программа для работы с очередью на массиве и списке\n")
    out.write("Для дальнейшей работы инициализируйте очередь на одном из типов данных\n")
    try:
        while True:
            print_menu(out)
            item = read_menu_item(stream, out)
            if not process_menu(item, session, stream, out):
                return 0
    except EOFError:
        return 1
    except QueueOverflowError as exc:
        out.write(f"{exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())