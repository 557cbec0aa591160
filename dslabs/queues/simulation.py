"""Discrete-event model of one service unit fed by two request queues."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Optional, Protocol, TextIO

from dslabs.queues.structures import QueueOverflowError

REQ_1_MAX = 1000
EPS = 1e-7


class FloatQueue(Protocol):
    def push(self, value: float) -> None: ...

    def pop(self) -> float: ...

    def __len__(self) -> int: ...


@dataclass
class Params:
    """Bounds of the uniform distributions of arrival and service times."""

    t1_lo: float = 1.0
    t1_hi: float = 5.0
    t2_lo: float = 0.0
    t2_hi: float = 3.0
    t3_lo: float = 0.0
    t3_hi: float = 4.0
    t4_lo: float = 0.0
    t4_hi: float = 1.0


@dataclass
class SimulationResult:
    """Totals gathered by one simulation run."""

    total_time: float
    calculated_time: float
    time_used: float
    time_wasted: float
    processed_1: int
    processed_2: int
    received_1: int
    received_2: int
    max_queue_len: int


def expected_time(lo: float, hi: float) -> float:
    """Mean of a uniform distribution on [lo, hi]."""
    return (lo + hi) / 2.0


def calc_total_time(params: Params) -> float:
    """Theoretical duration of the simulation."""
    t1 = expected_time(params.t1_lo, params.t1_hi)
    t2 = expected_time(params.t2_lo, params.t2_hi)
    t3 = expected_time(params.t3_lo, params.t3_hi)
    t4 = expected_time(params.t4_lo, params.t4_hi)

    # The first queue never yields priority.
    if t3 > t1:
        return t3 * REQ_1_MAX
    return max(t1 * REQ_1_MAX, t3 * REQ_1_MAX + t4 * (t1 / t2 * REQ_1_MAX))


def _is_zero(value: float) -> bool:
    return abs(value) < EPS


def _uniform(rng: random.Random, lo: float, hi: float) -> float:
    return lo + rng.random() * (hi - lo)


def _print_stats(out: TextIO, processed_1: int, len_1: int, avg_1: float,
                 len_2: int, avg_2: float) -> None:
    out.write(f"Обработано заявок первого типа: {processed_1}\n")
    out.write(f"Текущая длина первой очереди: {len_1}, средняя длина: {avg_1:.2f}\n")
    out.write(f"Текущая длина второй очереди: {len_2}, средняя длина: {avg_2:.2f}\n\n")


def _print_results(out: TextIO, result: SimulationResult) -> None:
    error = abs(1.0 - result.calculated_time / result.total_time) * 100.0
    out.write(f"Симуляция заняла всего: {result.total_time:.2f} е.в.\n")
    out.write(f"Теоретический расчет времени: {result.calculated_time:.2f} е.в.\n")
    out.write(f"Погрешность расчета: {error:.2f}%\n")
    out.write(f"Из них ОА работал: {result.time_used:.2f} е.в., "
              f"простаивал: {result.time_wasted:.2f} е.в.\n")
    out.write(f"Всего пришло заявок первого типа: {result.received_1}, "
              f"из них обработано: {result.processed_1}\n")
    out.write(f"Всего пришло заявок второго типа: {result.received_2}, "
              f"из них обработано: {result.processed_2}\n\n")


def run_simulation(
    params: Params,
    queue_1: FloatQueue,
    queue_2: FloatQueue,
    verbose: bool = False,
    rng: Optional[random.Random] = None,
    out: Optional[TextIO] = None,
) -> SimulationResult:
    """Run the model until REQ_1_MAX requests of the first type are served.

    Raises QueueOverflowError when either queue cannot accept a request.
    """
    if rng is None:
        rng = random.Random()
    if out is None:
        out = sys.stdout

    processed_1 = processed_2 = 0
    received_1 = received_2 = 0
    total_time = time_used = time_wasted = 0.0
    is_running = False
    process_time_left = 0.0
    arrive_1_left = _uniform(rng, params.t1_lo, params.t1_hi)
    arrive_2_left = _uniform(rng, params.t2_lo, params.t2_hi)
    area_1 = area_2 = 0.0
    type_in_machine = 0
    was_empty_1 = was_empty_2 = True
    max_len = 0

    while processed_1 < REQ_1_MAX:
        time_step = min(arrive_1_left, arrive_2_left)
        if is_running:
            time_step = min(time_step, process_time_left)
        total_time += time_step

        area_1 += len(queue_1) * time_step
        area_2 += len(queue_2) * time_step

        arrive_1_left -= time_step
        arrive_2_left -= time_step
        if is_running:
            time_used += time_step
            process_time_left -= time_step
        else:
            time_wasted += time_step

        if _is_zero(arrive_1_left):
            try:
                queue_1.push(_uniform(rng, params.t3_lo, params.t3_hi))
            except QueueOverflowError as exc:
                raise QueueOverflowError("Очередь 1 переполнена!") from exc
            received_1 += 1
            arrive_1_left = _uniform(rng, params.t1_lo, params.t1_hi)
        if _is_zero(arrive_2_left):
            try:
                queue_2.push(_uniform(rng, params.t4_lo, params.t4_hi))
            except QueueOverflowError as exc:
                raise QueueOverflowError("Очередь 2 переполнена!") from exc
            received_2 += 1
            arrive_2_left = _uniform(rng, params.t2_lo, params.t2_hi)

        if is_running and _is_zero(process_time_left):
            if type_in_machine == 1:
                processed_1 += 1
                if verbose and processed_1 % 100 == 0:
                    _print_stats(out, processed_1, len(queue_1), area_1 / total_time,
                                 len(queue_2), area_2 / total_time)
            elif type_in_machine == 2:
                processed_2 += 1
            is_running = False

        if not is_running:
            both_empty = was_empty_1 and was_empty_2
            take_1 = ((type_in_machine == 1 and not was_empty_1)
                      or (type_in_machine == 2 and was_empty_2)
                      or both_empty)
            take_2 = ((type_in_machine == 2 and not was_empty_2)
                      or (type_in_machine == 1 and was_empty_1)
                      or both_empty)
            if take_1 and len(queue_1) > 0:
                process_time_left = queue_1.pop()
                is_running = True
                was_empty_1 = len(queue_1) == 0
                type_in_machine = 1
            elif take_2 and len(queue_2) > 0:
                process_time_left = queue_2.pop()
                is_running = True
                was_empty_2 = len(queue_2) == 0
                type_in_machine = 2
            else:
                type_in_machine = 0
                was_empty_1 = was_empty_2 = True

        max_len = max(max_len, len(queue_1) + len(queue_2))

    result = SimulationResult(
        total_time=total_time,
        calculated_time=calc_total_time(params),
        time_used=time_used,
        time_wasted=time_wasted,
        processed_1=processed_1,
        processed_2=processed_2,
        received_1=received_1,
        received_2=received_2,
        max_queue_len=max_len,
    )
    if verbose:
        _print_results(out, result)
    return result