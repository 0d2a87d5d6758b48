"""Multiplying a list of floats by pi with a function object."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Iterable, Sequence

SIZE = 5
MIN_VALUE = 0.0
MAX_VALUE = 5.0


class MultiplyByPi:
    """A function object that multiplies its argument by pi."""

    def __call__(self, x: float) -> float:
        return x * math.pi


def multiply_all(numbers: Iterable[float]) -> list[float]:
    """Return every number multiplied by pi."""
    return list(map(MultiplyByPi(), numbers))


def _format(values: Iterable[float]) -> str:
    return "".join(f"{value:g} " for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Print random numbers before and after multiplying them by pi."""
    argparse.ArgumentParser(prog="stlabs-pi").parse_args(argv)
    rng = random.Random()
    numbers = [rng.uniform(MIN_VALUE, MAX_VALUE) for _ in range(SIZE)]

    print("Числа в исходном виде: " + _format(numbers))
    numbers = multiply_all(numbers)
    print("Числа, умноженные на PI: " + _format(numbers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())