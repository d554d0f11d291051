"""
Timing and space benchmarks for :class:`LinkedList`.

Each benchmarked operation receives a list of random integers, builds a
LinkedList from it and exercises one part of the API. Input sizes grow
exponentially (``base_input * 2**i``) so the O(1) and O(n) operations can
be told apart in the resulting CSV.
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, Optional

from ..datastructures.linked_list import LinkedList

logger = logging.getLogger(__name__)

# Defaults shared with the CLI
OUTPUT_CSV = "linked_list_performance.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_ROUNDS = 6
DEFAULT_ITERATIONS = 5

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Std Dev Time (ms)",
    "Average Space (bytes)",
    "Std Dev Space (bytes)",
]

Operation = Callable[[list], LinkedList]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng: Optional[random.Random] = None) -> list[int]:
    """Generate a list of random integers of given size."""
    rng = rng or random.Random()
    return [rng.randint(0, 1000000) for _ in range(size)]


def prefill(data: list) -> LinkedList:
    """Build a LinkedList from *data* in O(n) by pushing to the front in reverse."""
    lst: LinkedList = LinkedList()
    for item in reversed(data):
        lst.push_front(item)
    return lst


def measure_true_space(lst: LinkedList) -> int:
    """Estimate total memory of the list: every slot, node and value."""
    total = 0
    slot = lst
    while True:
        total += sys.getsizeof(slot)
        if slot.is_empty():
            break
        node = slot.node
        total += sys.getsizeof(node) + sys.getsizeof(node.value)
        slot = node.next
    return total


def measure_operation(operation: Operation, input_size: int, iterations: int = DEFAULT_ITERATIONS,
                      rng: Optional[random.Random] = None):
    """Run the operation multiple times and return avg/std of time (ms) and space (bytes)."""
    times = []
    space_used = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        start = time.perf_counter()
        lst = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds
        space_used.append(measure_true_space(lst))

    avg_time = statistics.mean(times)
    std_time = statistics.stdev(times) if len(times) > 1 else 0.0
    avg_space = statistics.mean(space_used)
    std_space = statistics.stdev(space_used) if len(space_used) > 1 else 0.0
    return avg_time, std_time, avg_space, std_space


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_push_front(data):
    return prefill(data)


def bench_push_back(data):
    lst = prefill(data)
    for item in data[:3]:
        lst.push_back(item)
    return lst


def bench_pop_front(data):
    lst = prefill(data)
    while not lst.is_empty():
        lst.pop_front()
    return lst


def bench_pop_back(data):
    lst = prefill(data)
    for _ in range(3):
        lst.pop_back()
    return lst


def bench_get(data):
    lst = prefill(data)
    n = len(data)
    for i in range(n - 1, n - 4, -1):
        _ = lst.get(i)
    return lst


def bench_insert(data):
    lst = prefill(data)
    mid = len(data) // 2
    for item in data[:3]:
        lst.insert(mid, item)
    return lst


def bench_remove(data):
    lst = prefill(data)
    mid = len(data) // 2
    for _ in range(3):
        lst.remove(mid)
    return lst


def bench_iterate(data):
    lst = prefill(data)
    for _ in lst:
        pass
    return lst


OPERATIONS: dict[str, Operation] = {
    "push_front": bench_push_front,
    "push_back": bench_push_back,
    "pop_front": bench_pop_front,
    "pop_back": bench_pop_back,
    "get": bench_get,
    "insert": bench_insert,
    "remove": bench_remove,
    "iterate": bench_iterate,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str = OUTPUT_CSV, base_input: int = DEFAULT_BASE_INPUT,
                   rounds: int = DEFAULT_ROUNDS, iterations: int = DEFAULT_ITERATIONS,
                   operations: Optional[dict[str, Operation]] = None,
                   seed: Optional[int] = None) -> list[list]:
    """Run exponential performance tests for LinkedList operations.

    Writes one CSV row per (operation, input size) to *output_file* and
    returns the rows (header excluded).
    """
    if base_input <= 0:
        raise ValueError("base_input must be positive")
    if rounds <= 0:
        raise ValueError("rounds must be positive")
    if iterations <= 0:
        raise ValueError("iterations must be positive")

    operations = operations or OPERATIONS
    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows: list[list] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time, avg_space, std_space = measure_operation(op_func, size, iterations, rng)
                row = [
                    size,
                    op_name,
                    f"{avg_time:.3f}",
                    f"{std_time:.3f}",
                    f"{avg_space:.0f}",
                    f"{std_space:.0f}",
                ]
                writer.writerow(row)
                rows.append(row)
                logger.info("%-10s | Size: %-8d | Avg Time: %.3f ms | Std Time: %.3f ms | Avg Space: %.0f B",
                            op_name, size, avg_time, std_time, avg_space)

    logger.info("Benchmark completed. Results saved to %s", output_file)
    return rows
