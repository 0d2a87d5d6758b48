"""A queue with three priority levels, served highest first."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum


class Priority(IntEnum):
    """Priority levels."""

    LOW = 0
    NORMAL = 1
    HIGH = 2


@dataclass(frozen=True)
class Element:
    """A queued element."""

    name: str


class PriorityQueue:
    """FIFO queues for each priority; ``get`` serves the highest non-empty one."""

    def __init__(
        self,
        high: Iterable[Element] = (),
        normal: Iterable[Element] = (),
        low: Iterable[Element] = (),
    ) -> None:
        self._queues: dict[Priority, deque[Element]] = {
            Priority.HIGH: deque(high),
            Priority.NORMAL: deque(normal),
            Priority.LOW: deque(low),
        }

    def put(self, element: Element, priority: Priority) -> None:
        """Append ``element`` at the given priority."""
        try:
            level = Priority(priority)
        except ValueError:
            raise ValueError(f"invalid priority value: {priority!r}") from None
        self._queues[level].append(element)

    def get(self) -> Element:
        """Remove and return the oldest element of the highest priority."""
        for level in (Priority.HIGH, Priority.NORMAL, Priority.LOW):
            if self._queues[level]:
                return self._queues[level].popleft()
        raise IndexError("queue is empty")

    def accelerate(self) -> None:
        """Move every low-priority element to the end of the high queue."""
        low = self._queues[Priority.LOW]
        self._queues[Priority.HIGH].extend(low)
        low.clear()

    def __len__(self) -> int:
        return sum(len(queue) for queue in self._queues.values())

    def __bool__(self) -> bool:
        return any(self._queues.values())

    def render(self) -> str:
        """Describe the contents of every priority level."""
        sections = (
            ("C высоким приоритетом:", Priority.HIGH),
            ("С обычным приоритетом:", Priority.NORMAL),
            ("С низким приоритетом:", Priority.LOW),
        )
        lines = ["Элементы очереди:"]
        for title, level in sections:
            lines.append(title)
            lines.extend(f"  {element.name}" for element in self._queues[level])
        return "\n".join(lines) + "\n"


def _drain(queue: PriorityQueue) -> None:
    while queue:
        print(f"Извлечённый элемент: {queue.get().name}")
    print(f"Размер очереди после извлечения: {len(queue)}")


def _put_three(queue: PriorityQueue, low: str, normal: str, high: str) -> None:
    queue.put(Element(low), Priority.LOW)
    queue.put(Element(normal), Priority.NORMAL)
    queue.put(Element(high), Priority.HIGH)
    print(f"Размер очереди после добавления: {len(queue)}")
    print(queue.render(), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Demonstrate filling, draining and accelerating the queue."""
    argparse.ArgumentParser(prog="stlabs-priority-queue").parse_args(argv)
    queue = PriorityQueue(
        [Element(name) for name in ("1", "2", "3")],
        [Element(name) for name in ("4", "5", "6")],
        [Element(name) for name in ("7", "8", "9")],
    )
    print(f"Размер очереди: {len(queue)}")
    print(queue.render(), end="")
    _drain(queue)

    _put_three(queue, "10", "11", "12")
    _drain(queue)

    _put_three(queue, "13", "14", "15")
    queue.accelerate()
    print(f"Очередь после аксселирации: {len(queue)}")
    print(queue.render(), end="")
    _drain(queue)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())