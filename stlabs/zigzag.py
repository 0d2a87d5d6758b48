"""Zigzag traversal of a list: first, last, second, second to last, ..."""

from __future__ import annotations

import argparse
import random
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

LIST_SIZES = (0, 1, 2, 3, 4, 5, 7, 14)


def zigzag(items: Iterable[T]) -> Iterator[T]:
    """Yield items alternately from the front and the back."""
    pending = deque(items)
    from_front = True
    while pending:
        yield pending.popleft() if from_front else pending.pop()
        from_front = not from_front


def random_list(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers between 0 and 20 inclusive."""
    rng = rng or random.Random()
    return [rng.randint(0, 20) for _ in range(size)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print random lists of several sizes in direct and zigzag order."""
    argparse.ArgumentParser(prog="stlabs-zigzag").parse_args(argv)
    rng = random.Random()
    for size in LIST_SIZES:
        items = random_list(size, rng)
        print(f"Размер списка: {len(items)}")
        print("Список в прямом порядке: " + "".join(f"{i} " for i in items))
        print("Список в зигзагообразном порядке:   " + " ".join(map(str, zigzag(items))))
        print("-" * 40)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())