"""Timing and memory comparison of the array and list queues."""

from __future__ import annotations

import math
import random
import sys
from time import perf_counter_ns
from typing import Callable, Optional, TextIO

from dslabs.queues.simulation import Params, run_simulation
from dslabs.queues.structures import QUEUE_DEPTH, ArrayQueue, ListQueue

START_GARBAGE_NUM = 20
TESTS = 500

_VALUE_SIZE = 8
_POINTER_SIZE = 8
_INT_SIZE = 4
_ALIGN = 8


def _align(size: int) -> int:
    return -(-size // _ALIGN) * _ALIGN


ARRAY_QUEUE_BYTES = _align(QUEUE_DEPTH * _VALUE_SIZE + 3 * _INT_SIZE)
LIST_NODE_BYTES = _align(_VALUE_SIZE + _POINTER_SIZE)
LIST_HEADER_BYTES = _align(2 * _POINTER_SIZE + _INT_SIZE)


def calc_gain(before: float, after: float) -> float:
    """Relative saving of ``after`` against ``before``, in percent."""
    if before == 0:
        return math.nan if after == 0 else -math.inf
    return (1.0 - after / before) * 100.0


def _run_tests(factory: Callable[[], object], params: Params, tests: int,
               warmup: int, rng: random.Random) -> tuple[int, int]:
    total = 0
    max_len = 0
    for run in range(warmup + tests):
        queue_1, queue_2 = factory(), factory()
        start = perf_counter_ns()
        result = run_simulation(params, queue_1, queue_2, rng=rng)
        elapsed = perf_counter_ns() - start
        max_len = max(max_len, result.max_queue_len)
        if run >= warmup:
            total += elapsed
    return total // tests, max_len


def _time_push(queue) -> int:
    start = perf_counter_ns()
    for i in range(QUEUE_DEPTH):
        queue.push(float(i))
    return (perf_counter_ns() - start) // QUEUE_DEPTH


def _time_pop(queue) -> int:
    start = perf_counter_ns()
    for _ in range(QUEUE_DEPTH):
        queue.pop()
    return (perf_counter_ns() - start) // QUEUE_DEPTH


def run_analysis(
    params: Optional[Params] = None,
    tests: int = TESTS,
    warmup: int = START_GARBAGE_NUM,
    out: Optional[TextIO] = None,
) -> dict[str, int]:
    """Print the comparison report and return the measured figures."""
    if tests < 1:
        raise ValueError("tests must be positive")
    if warmup < 0:
        raise ValueError("warmup must not be negative")
    if params is None:
        params = Params()
    if out is None:
        out = sys.stdout
    rng = random.Random()

    def emit(text: str) -> None:
        out.write(text)
        out.flush()

    emit("Результаты сравнения:\n")
    emit("Среднее время моделирования списками: ")
    time_list, max_len = _run_tests(ListQueue, params, tests, warmup, rng)
    emit(f"{time_list // 1000} мкс\n")
    emit("Среднее время моделирования массивами: ")
    time_array, _ = _run_tests(ArrayQueue, params, tests, warmup, rng)
    emit(f"{time_array // 1000} мкс\n")
    emit(f"Выигрыш времени от очереди на массиве: {calc_gain(time_list, time_array):.2f}%\n")

    array_bytes = ARRAY_QUEUE_BYTES
    list_bytes = LIST_NODE_BYTES * max_len + LIST_HEADER_BYTES
    emit(f"Размер очереди на массиве: {array_bytes} байт\n")
    emit(f"Размер очереди на списке: {list_bytes} байт\n")
    emit(f"Выигрыш памяти от очереди на списке: {calc_gain(array_bytes, list_bytes):.2f}%\n\n")

    list_queue = ListQueue()
    array_queue = ArrayQueue()
    emit("Среднее время добавления элемента в очередь-список: ")
    push_list = _time_push(list_queue)
    emit(f"{push_list} нс\n")
    emit("Среднее время добавления элемента в очередь-массив: ")
    push_array = _time_push(array_queue)
    emit(f"{push_array} нс\n")
    emit("Выигрыш времени при добавлении в очередь на массиве: "
         f"{calc_gain(push_list, push_array):.2f}%\n")
    emit("Среднее время удаления элемента из очереди-списка: ")
    pop_list = _time_pop(list_queue)
    emit(f"{pop_list} нс\n")
    emit("Среднее время удаления элемента из очереди-массива: ")
    pop_array = _time_pop(array_queue)
    emit(f"{pop_array} нс\n")
    emit("Выигрыш времени при удалении из очереди на массиве: "
         f"{calc_gain(pop_list, pop_array):.2f}%\n\n")

    return {
        "simulation_list_ns": time_list,
        "simulation_array_ns": time_array,
        "max_queue_len": max_len,
        "array_bytes": array_bytes,
        "list_bytes": list_bytes,
        "push_list_ns": push_list,
        "push_array_ns": push_array,
        "pop_list_ns": pop_list,
        "pop_array_ns": pop_array,
    }