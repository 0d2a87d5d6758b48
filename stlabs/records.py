"""Records with two integer keys and a string, sorted by a composite key."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

KEY_MIN = -5
KEY_MAX = 5

STRINGS = (
    "Lorem ipsum",
    "dolor sit amet",
    "consectetur adipiscing",
    "elit",
    "sed do eiusmod",
    "tempor incididunt",
    "ut labore et",
    "dolore magna aliqua",
    "Ut enim ad",
    "minim veniam",
)


@dataclass(frozen=True)
class DataStruct:
    """Two keys and a string."""

    key1: int
    key2: int
    text: str

    def __str__(self) -> str:
        return f'ds: [ key1: {self.key1},\tkey2: {self.key2},\tstr: "{self.text}" ]'


def sort_records(records: Iterable[DataStruct]) -> list[DataStruct]:
    """Sort by ``key1``, then ``key2``, then string length, all ascending."""
    return sorted(records, key=lambda r: (r.key1, r.key2, len(r.text)))


def generate_key(rng: random.Random | None = None) -> int:
    """Return a random key between -5 and 5 inclusive."""
    return (rng or random.Random()).randint(KEY_MIN, KEY_MAX)


def generate_string(rng: random.Random | None = None) -> str:
    """Return one of the predefined strings at random."""
    return (rng or random.Random()).choice(STRINGS)


def random_records(count: int, rng: random.Random | None = None) -> list[DataStruct]:
    """Return ``count`` records with random keys and strings."""
    rng = rng or random.Random()
    return [
        DataStruct(generate_key(rng), generate_key(rng), generate_string(rng))
        for _ in range(count)
    ]


def test_data() -> list[DataStruct]:
    """Return a fixed set of records covering every tie-breaking case."""
    return [
        DataStruct(3, -2, "dolor sit amet"),
        DataStruct(-1, 0, "elit"),
        DataStruct(2, 2, "tempor incididunt"),
        DataStruct(-3, 4, "Ut enim ad"),
        DataStruct(1, -5, "minim veniam"),
        DataStruct(0, 3, "consectetur adipiscing"),
        DataStruct(-4, 1, "sed do eiusmod"),
        DataStruct(5, -3, "Lorem ipsum"),
        DataStruct(-2, 2, "tempor incididunt"),
        DataStruct(2, 3, "tempor incididunt"),
        DataStruct(2, 2, "short string"),
        DataStruct(2, 2, "longer string"),
        DataStruct(2, 2, "medium string"),
        DataStruct(2, 2, "medium string"),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the fixed and random records before and after sorting."""
    argparse.ArgumentParser(prog="stlabs-records").parse_args(argv)
    records = test_data() + random_records(5)

    print("До сортировки:")
    for record in records:
        print(record)

    print("\nПосле сортировки:")
    for record in sort_records(records):
        print(record)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())