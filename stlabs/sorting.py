"""Insertion sorts and the small vector exercises built around them."""

from __future__ import annotations

import argparse
import operator
import random
import sys
import time
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from pathlib import Path
from typing import Any, TextIO

Comparator = Callable[[Any, Any], bool]

RANDOM_VECTOR_SIZES = (5, 10, 25, 50, 100)
BENCHMARK_SIZE = 10_000


def insort_brackets(values: MutableSequence[Any], comp: Comparator = operator.lt) -> None:
    """Sort ``values`` in place, shifting greater elements one slot right."""
    for current in range(1, len(values)):
        key = values[current]
        border = current
        while border and comp(key, values[border - 1]):
            values[border] = values[border - 1]
            border -= 1
        values[border] = key


def insort_at(values: MutableSequence[Any], comp: Comparator = operator.lt) -> None:
    """Sort ``values`` in place, moving each element to its slot by delete and insert."""
    for current in range(1, len(values)):
        key = values[current]
        border = current
        while border and comp(key, values[border - 1]):
            border -= 1
        if border != current:
            del values[current]
            values.insert(border, key)


def insort_iter(values: MutableSequence[Any], comp: Comparator = operator.lt) -> None:
    """Sort ``values`` in place by swapping neighbouring elements backwards."""
    for current in range(1, len(values)):
        position = current
        while position and comp(values[position], values[position - 1]):
            values[position - 1], values[position] = values[position], values[position - 1]
            position -= 1


def fill_random_ints(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers drawn uniformly from -1, 0 and 1."""
    rng = rng or random.Random()
    return [rng.randint(-1, 1) for _ in range(size)]


def fill_random_floats(size: int, rng: random.Random | None = None) -> list[float]:
    """Return ``size`` random floats drawn uniformly from [-1.0, 1.0]."""
    rng = rng or random.Random()
    return [rng.uniform(-1.0, 1.0) for _ in range(size)]


def apply_last_number_rule(numbers: Sequence[int]) -> list[int]:
    """Transform ``numbers`` according to its last element.

    A last element of 1 drops every even number; a last element of 2 puts
    three 1s after every number divisible by 3. Otherwise nothing changes.
    """
    if not numbers:
        return []
    last = numbers[-1]
    if last == 1:
        return [n for n in numbers if n % 2 != 0]
    if last == 2:
        result: list[int] = []
        for n in numbers:
            result.append(n)
            if n % 3 == 0:
                result.extend((1, 1, 1))
        return result
    return list(numbers)


def read_numbers(tokens: Iterable[str]) -> list[int]:
    """Collect integers from ``tokens`` until a zero or a non-integer token."""
    numbers: list[int] = []
    for token in tokens:
        try:
            value = int(token)
        except ValueError:
            break
        if value == 0:
            break
        numbers.append(value)
    return numbers


def benchmark(values: Sequence[Any]) -> dict[str, float]:
    """Time each insertion sort on a fresh copy of ``values``; seconds per run."""
    sorts = {
        "Insertion sort w/ operator[]": insort_brackets,
        "Insertion sort w/ .at()": insort_at,
        "Insertion sort w/ iterators": insort_iter,
    }
    timings: dict[str, float] = {}
    for name, sort in sorts.items():
        numbers = list(values)
        start = time.perf_counter()
        sort(numbers)
        timings[name] = time.perf_counter() - start
    return timings


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _format_floats(values: Iterable[float]) -> str:
    return "".join(f"{value:g} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the vector exercises."""
    parser = argparse.ArgumentParser(prog="Lab1Vector", description="Vector tasks")
    parser.add_argument("-t", "--tests", action="store_true", help="Run tests (tasks 1-3)")
    parser.add_argument("-p", "--path", default="data.txt", help="Path to the file for task 4")
    args = parser.parse_args(argv)

    rng = random.Random()
    values = fill_random_ints(BENCHMARK_SIZE, rng)

    if args.tests:
        for name, seconds in benchmark(values).items():
            print(f"{name}: {seconds:.6f} s")

    try:
        content = Path(args.path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        print("Error opening file", file=sys.stderr)
        return 1

    print("Vector from C-style array:")
    print(content)

    print("\nEnter numbers:")
    numbers = apply_last_number_rule(read_numbers(_tokens(sys.stdin)))
    print("".join(f"{n} " for n in numbers))

    for count in RANDOM_VECTOR_SIZES:
        random_vector = fill_random_floats(count, rng)
        print(f"\nRandom filled vector of size {count} before sorting: [ ", end="")
        print(_format_floats(random_vector), end="")
        insort_iter(random_vector)
        print("]\nSorted vector: [ ", end="")
        print(_format_floats(random_vector), end="")
        print("]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())