import random
import re

import pytest

from stlabs.shapes import (
    Circle,
    Shape,
    ShapeKind,
    Square,
    Triangle,
    draw_shapes,
    generate_random_shape,
    main,
)


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape(0.0, 0.0)


def test_is_more_left():
    left, right = Circle(-3.0, 0.0), Square(4.0, 0.0)
    assert left.is_more_left(right)
    assert not right.is_more_left(left)
    assert not left.is_more_left(left)


def test_is_upper():
    high, low = Triangle(0.0, 9.5), Circle(0.0, -9.5)
    assert high.is_upper(low)
    assert not low.is_upper(high)


@pytest.mark.parametrize(
    "cls, name",
    [(Circle, "Круг"), (Triangle, "Треугольник"), (Square, "Квадрат")],
)
def test_draw(capsys, cls, name):
    cls(1.0, 2.5).draw()
    assert capsys.readouterr().out == f"{name} в точке (1, 2.5)\n"


def test_draw_shapes_with_message(capsys):
    draw_shapes([Circle(1.0, 2.0), Square(3.0, 4.0)], "Фигуры:\n")
    assert capsys.readouterr().out == (
        "Фигуры:\nКруг в точке (1, 2)\nКвадрат в точке (3, 4)\n\n"
    )


def test_draw_shapes_empty(capsys):
    draw_shapes([])
    assert capsys.readouterr().out == "\n"


def test_generate_random_shape_in_range():
    rng = random.Random(7)
    kinds = set()
    for _ in range(200):
        shape = generate_random_shape(rng)
        assert -100.0 <= shape.x <= 100.0
        assert -100.0 <= shape.y <= 100.0
        kinds.add(type(shape))
    assert kinds == {Circle, Triangle, Square}
    assert len(ShapeKind) == len(kinds)


def test_generate_is_reproducible():
    a = generate_random_shape(random.Random(3))
    b = generate_random_shape(random.Random(3))
    assert (type(a), a.x, a.y) == (type(b), b.x, b.y)


def _section(out, title):
    block = out.split(title + "\n", 1)[1].split("\n\n", 1)[0]
    return [
        tuple(float(v) for v in re.search(r"\(([^,]+), ([^)]+)\)", line).groups())
        for line in block.splitlines()
    ]


def test_main_sorts_each_direction(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Все 10 фигур:\n")
    xs = [p[0] for p in _section(out, "Слева направо:")]
    assert len(xs) == 10
    assert xs == sorted(xs)
    xs = [p[0] for p in _section(out, "Справа налево:")]
    assert xs == sorted(xs, reverse=True)
    ys = [p[1] for p in _section(out, "Сверху вниз:")]
    assert ys == sorted(ys, reverse=True)
    ys = [p[1] for p in _section(out, "Снизу вверх:")]
    assert ys == sorted(ys)