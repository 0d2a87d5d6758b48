"""A lazy container of the factorials 1! to 10!."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

FIRST = 1
LAST = 10


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` below 2 gives 1."""
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


class FactorialCursor:
    """A bidirectional position in the factorial sequence.

    The value is computed on every access rather than stored.
    """

    def __init__(self, number: int) -> None:
        self._number = number

    @property
    def number(self) -> int:
        """The index whose factorial this cursor yields."""
        return self._number

    def value(self) -> int:
        """Return the factorial at the current position."""
        return factorial(self._number)

    def advance(self) -> FactorialCursor:
        """Step forward by one and return the cursor."""
        self._number += 1
        return self

    def retreat(self) -> FactorialCursor:
        """Step back by one and return the cursor."""
        self._number -= 1
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FactorialCursor):
            return NotImplemented
        return self._number == other._number

    def __hash__(self) -> int:
        return hash(self._number)

    def __repr__(self) -> str:
        return f"FactorialCursor({self._number})"


class FactorialContainer:
    """Holds 1! to 10! without storing them."""

    def begin(self) -> FactorialCursor:
        """Return a cursor at the first element."""
        return FactorialCursor(FIRST)

    def end(self) -> FactorialCursor:
        """Return a cursor one past the last element."""
        return FactorialCursor(LAST + 1)

    def __iter__(self) -> Iterator[int]:
        cursor, stop = self.begin(), self.end()
        while cursor != stop:
            yield cursor.value()
            cursor.advance()

    def __reversed__(self) -> Iterator[int]:
        cursor, start = self.end(), self.begin()
        while cursor != start:
            yield cursor.retreat().value()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the factorials held by the container."""
    argparse.ArgumentParser(prog="stlabs-factorial").parse_args(argv)
    result = list(FactorialContainer())
    print("Factorials from 1! to 10!: " + "".join(f"{value} " for value in result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())