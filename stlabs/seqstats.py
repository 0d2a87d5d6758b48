"""Statistics gathered element by element over a sequence of integers."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

SEQUENCE_SIZE = 30
MIN_VALUE = -500
MAX_VALUE = 500

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class Statistics:
    """A callable that updates its statistics with every value it is given."""

    def __init__(self) -> None:
        self.maximum = _INT_MIN
        self.minimum = _INT_MAX
        self.positives = 0
        self.negatives = 0
        self.odd_sum = 0
        self.even_sum = 0
        self.count = 0
        self.first = 0
        self.last = 0

    def __call__(self, value: int) -> None:
        self.maximum = max(self.maximum, value)
        self.minimum = min(self.minimum, value)

        if value > 0:
            self.positives += 1
        elif value < 0:
            self.negatives += 1

        if value % 2:
            self.odd_sum += value
        else:
            self.even_sum += value

        if self.count == 0:
            self.first = value
        self.last = value
        self.count += 1

    @property
    def mean(self) -> float:
        """The arithmetic mean of the values seen so far."""
        if self.count == 0:
            raise ZeroDivisionError("no values have been processed")
        return self.odd_sum / self.count + self.even_sum / self.count

    def report(self) -> str:
        """Describe the collected statistics."""
        if self.count == 0:
            return "Пустая последовательность"
        same = "Да" if self.first == self.last else "Нет"
        return "\n".join(
            (
                f"Количество элементов: {self.count}",
                f"Максимальное число: {self.maximum}",
                f"Минимальное число: {self.minimum}",
                f"Среднее: {self.mean:g}",
                f"Положительные числа: {self.positives}",
                f"Отрицательные числа: {self.negatives}",
                f"Сумма нечетных чисел: {self.odd_sum}",
                f"Сумма четных чисел: {self.even_sum}",
                f"Первый и последний элемент совпадают: {same}",
            )
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a random sequence and print its statistics."""
    argparse.ArgumentParser(prog="stlabs-seqstats").parse_args(argv)
    rng = random.Random()
    sequence = [rng.randint(MIN_VALUE, MAX_VALUE) for _ in range(SEQUENCE_SIZE)]

    print("Сгенерированная последовательность: { " + "".join(f"{v} " for v in sequence) + " }")

    stats = Statistics()
    for value in sequence:
        stats(value)

    print("Статистика:\n" + stats.report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())