"""A small hierarchy of drawable shapes positioned by their centre."""

from __future__ import annotations

import argparse
import functools
import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

SHAPE_COUNT = 10
COORDINATE_MIN = -100.0
COORDINATE_MAX = 100.0


class ShapeKind(Enum):
    """The kinds of shape that can be generated."""

    CIRCLE = 0
    TRIANGLE = 1
    SQUARE = 2


class Shape(ABC):
    """A shape with a fixed centre."""

    def __init__(self, x: float, y: float) -> None:
        self._x = x
        self._y = y

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @abstractmethod
    def draw(self) -> str:
        """Print the shape's name and centre, and return the printed line."""

    def is_more_left(self, other: Shape) -> bool:
        """Tell whether this centre lies left of ``other``'s."""
        return self._x < other._x

    def is_upper(self, other: Shape) -> bool:
        """Tell whether this centre lies above ``other``'s."""
        return self._y > other._y

    def _position(self) -> str:
        return f"({self._x:g}, {self._y:g})"

    def _emit(self, name: str) -> str:
        line = f"{name} в точке {self._position()}"
        print(line)
        return line


class Circle(Shape):
    """A circle."""

    def draw(self) -> str:
        return self._emit("Круг")


class Triangle(Shape):
    """A triangle."""

    def draw(self) -> str:
        return self._emit("Треугольник")


class Square(Shape):
    """A square."""

    def draw(self) -> str:
        return self._emit("Квадрат")


_CLASSES: dict[ShapeKind, type[Shape]] = {
    ShapeKind.CIRCLE: Circle,
    ShapeKind.TRIANGLE: Triangle,
    ShapeKind.SQUARE: Square,
}


def draw_shapes(shapes: Iterable[Shape], message: str = "") -> None:
    """Print ``message``, draw every shape, then print an empty line."""
    print(message, end="")
    for shape in shapes:
        shape.draw()
    print()


def generate_random_shape(rng: random.Random | None = None) -> Shape:
    """Return a shape of random kind centred somewhere in [-100, 100]²."""
    rng = rng or random.Random()
    x = rng.uniform(COORDINATE_MIN, COORDINATE_MAX)
    y = rng.uniform(COORDINATE_MIN, COORDINATE_MAX)
    kind = rng.choice(list(ShapeKind))
    return _CLASSES[kind](x, y)


def _ordered(shapes: list[Shape], before: Callable[[Shape, Shape], bool]) -> list[Shape]:
    def compare(a: Shape, b: Shape) -> int:
        if before(a, b):
            return -1
        if before(b, a):
            return 1
        return 0

    return sorted(shapes, key=functools.cmp_to_key(compare))


def main(argv: Sequence[str] | None = None) -> int:
    """Draw random shapes unsorted and sorted in four directions."""
    argparse.ArgumentParser(prog="stlabs-shapes").parse_args(argv)
    rng = random.Random()
    shapes = [generate_random_shape(rng) for _ in range(SHAPE_COUNT)]

    print(f"Все {len(shapes)} фигур:")
    draw_shapes(shapes)

    orderings = (
        ("Слева направо:", lambda a, b: a.is_more_left(b)),
        ("Справа налево:", lambda a, b: b.is_more_left(a)),
        ("Сверху вниз:", lambda a, b: a.is_upper(b)),
        ("Снизу вверх:", lambda a, b: b.is_upper(a)),
    )
    for title, before in orderings:
        shapes = _ordered(shapes, before)
        print(title)
        draw_shapes(shapes)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())