"""Polygons described by their vertices: counting, filtering and ordering."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


@dataclass
class Shape:
    """A polygon: its vertex count and its vertices."""

    vertex_num: int
    vertexes: list[Point] = field(default_factory=list)

    def __str__(self) -> str:
        points = "".join(f"({p.x}, {p.y}) " for p in self.vertexes)
        return f"{{ Номер вершины: {self.vertex_num}, вершины: [ {points}] }}"


class ShapeType(IntEnum):
    """Shape kinds; the value is the vertex count, except for squares."""

    TRIANGLE = 3
    RECTANGLE = 4
    PENTAGON = 5
    SQUARE = 14


def generate_random_shapes(count: int, rng: random.Random | None = None) -> list[Shape]:
    """Return ``count`` shapes of 3 to 5 vertices with coordinates in [-100, 100]."""
    rng = rng or random.Random()
    shapes = []
    for _ in range(count):
        vertices_count = rng.randint(3, 5)
        vertices = [
            Point(rng.randint(-100, 100), rng.randint(-100, 100)) for _ in range(vertices_count)
        ]
        shapes.append(Shape(vertices_count, vertices))
    return shapes


def total_vertices(shapes: Iterable[Shape]) -> int:
    """Return the sum of the vertex counts."""
    return sum(shape.vertex_num for shape in shapes)


def _squared_length(a: Point, b: Point) -> int:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def is_square(shape: Shape) -> bool:
    """Tell whether a four-vertex shape has four sides of equal length."""
    if shape.vertex_num != 4:
        return False
    v = shape.vertexes
    sides = {_squared_length(v[i], v[(i + 1) % 4]) for i in range(4)}
    return len(sides) == 1


def count_shapes(shapes: Iterable[Shape], shape_type: ShapeType) -> int:
    """Count shapes of a kind; squares are recognised by their sides."""
    if shape_type == ShapeType.SQUARE:
        return sum(1 for shape in shapes if is_square(shape))
    return sum(1 for shape in shapes if shape.vertex_num == int(shape_type))


def remove_shapes(shapes: Iterable[Shape], shape_type: ShapeType) -> list[Shape]:
    """Return the shapes without those of the given kind.

    For SQUARE and RECTANGLE only shapes whose vertex count equals the kind's
    value and that are squares are removed.
    """
    if shape_type in (ShapeType.SQUARE, ShapeType.RECTANGLE):
        def removed(shape: Shape) -> bool:
            return shape.vertex_num == int(shape_type) and is_square(shape)
    else:
        def removed(shape: Shape) -> bool:
            return shape.vertex_num == int(shape_type)
    return [shape for shape in shapes if not removed(shape)]


def extract_vertices(shapes: Iterable[Shape]) -> list[Point]:
    """Return the first vertex of every shape."""
    return [shape.vertexes[0] for shape in shapes]


def _rank(shape: Shape) -> int:
    if shape.vertex_num == ShapeType.TRIANGLE:
        return 0
    if is_square(shape):
        return 1
    if shape.vertex_num == ShapeType.RECTANGLE:
        return 2
    if shape.vertex_num == ShapeType.PENTAGON:
        return 3
    return 4


def reorder_shapes(shapes: Iterable[Shape]) -> list[Shape]:
    """Order triangles, squares, rectangles, pentagons, keeping relative order."""
    return sorted(shapes, key=_rank)


def _print_shapes(shapes: Iterable[Shape]) -> None:
    for shape in shapes:
        print(shape)


def main(argv: Sequence[str] | None = None) -> int:
    """Run every stage on random shapes plus five squares, printing each."""
    argparse.ArgumentParser(prog="stlabs-geometry").parse_args(argv)
    shapes = generate_random_shapes(5)
    print(f"1. Сгенерировано {len(shapes)} случайных фигур:")
    _print_shapes(shapes)

    for lo, hi in ((0, 1), (2, 4), (5, 7), (8, 10), (11, 13)):
        shapes.append(Shape(4, [Point(lo, lo), Point(hi, lo), Point(hi, hi), Point(lo, hi)]))
    print(f"\n2. Добавлено 5 квадратов для тестов. Теперь всего фигур: {len(shapes)}:")
    _print_shapes(shapes)

    print(f"\n3. Общее количество вершин: {total_vertices(shapes)}")

    print("\n4. Количество фигур каждого типа:")
    print(f"\tТреугольники: {count_shapes(shapes, ShapeType.TRIANGLE)}")
    print(f"\tКвадраты: {count_shapes(shapes, ShapeType.SQUARE)}")
    print(f"\tПрямоугольники: {count_shapes(shapes, ShapeType.RECTANGLE)}")
    print(f"\tПятиугольники: {count_shapes(shapes, ShapeType.PENTAGON)}")

    shapes = remove_shapes(shapes, ShapeType.PENTAGON)
    print(f"\n5. После удаления пятиугольников осталось {len(shapes)} фигур:")
    _print_shapes(shapes)

    print("\n6. Первые вершины, извлеченные из фигур:")
    for vertex in extract_vertices(shapes):
        print(f"Вершина: ({vertex.x}, {vertex.y})")

    shapes = reorder_shapes(shapes)
    print("\n7. Переупорядоченные фигуры:")
    _print_shapes(shapes)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())