import io
import operator
import random

import pytest

from stlabs.sorting import (
    apply_last_number_rule,
    benchmark,
    fill_random_floats,
    fill_random_ints,
    insort_at,
    insort_brackets,
    insort_iter,
    main,
    read_numbers,
)


def test_sorts_random_ints():
    rng = random.Random(42)
    values = [rng.randint(-50, 50) for _ in range(200)]
    expected = sorted(values)

    by_brackets = list(values)
    insort_brackets(by_brackets)
    by_at = list(values)
    insort_at(by_at)
    by_iter = list(values)
    insort_iter(by_iter)

    assert by_brackets == expected
    assert by_at == expected
    assert by_iter == expected


def test_sorts_floats_descending_with_comparator():
    rng = random.Random(7)
    values = [rng.uniform(-1.0, 1.0) for _ in range(50)]
    expected = sorted(values, reverse=True)

    by_brackets = list(values)
    insort_brackets(by_brackets, operator.gt)
    by_at = list(values)
    insort_at(by_at, operator.gt)
    by_iter = list(values)
    insort_iter(by_iter, operator.gt)

    assert by_brackets == expected
    assert by_at == expected
    assert by_iter == expected


def test_sorts_are_stable():
    rng = random.Random(3)
    values = [(rng.randint(0, 4), index) for index in range(60)]
    expected = sorted(values, key=lambda item: item[0])

    def first_less(a, b):
        return a[0] < b[0]

    by_brackets = list(values)
    insort_brackets(by_brackets, first_less)
    by_at = list(values)
    insort_at(by_at, first_less)
    by_iter = list(values)
    insort_iter(by_iter, first_less)

    assert by_brackets == expected
    assert by_at == expected
    assert by_iter == expected


@pytest.mark.parametrize("values", [[], [5]])
def test_trivial_inputs_unchanged(values):
    by_brackets = list(values)
    insort_brackets(by_brackets)
    by_at = list(values)
    insort_at(by_at)
    by_iter = list(values)
    insort_iter(by_iter)

    assert by_brackets == values
    assert by_at == values
    assert by_iter == values


def test_fill_random_ints_range_and_size():
    values = fill_random_ints(500, random.Random(1))
    assert len(values) == 500
    assert set(values) <= {-1, 0, 1}


def test_fill_random_floats_range_and_size():
    values = fill_random_floats(300, random.Random(2))
    assert len(values) == 300
    assert all(-1.0 <= v <= 1.0 for v in values)


def test_fill_random_empty():
    assert fill_random_ints(0) == []
    assert fill_random_floats(0) == []


def test_rule_one_removes_even_numbers():
    numbers = [3, 4, 6, -2, 7, 9, 1]
    result = apply_last_number_rule(numbers)
    assert all(n % 2 != 0 for n in result)
    assert result == [n for n in numbers if n % 2 != 0]


def test_rule_two_inserts_ones_after_multiples_of_three():
    assert apply_last_number_rule([3, 2]) == [3, 1, 1, 1, 2]


def test_rule_two_length_grows_by_three_per_multiple():
    numbers = [9, 4, -3, 5, 6, 2]
    result = apply_last_number_rule(numbers)
    multiples = sum(1 for n in numbers if n % 3 == 0)
    assert len(result) == len(numbers) + 3 * multiples


def test_other_last_number_leaves_sequence():
    numbers = [4, 6, 8, 5]
    assert apply_last_number_rule(numbers) == numbers
    assert apply_last_number_rule([]) == []


def test_read_numbers_stops_at_zero():
    assert read_numbers(["5", "-3", "0", "7"]) == [5, -3]


def test_read_numbers_stops_at_non_number():
    assert read_numbers(["8", "x", "9"]) == [8]


def test_benchmark_does_not_mutate_and_times_all():
    values = [3, -1, 2, 0, 1]
    timings = benchmark(values)
    assert values == [3, -1, 2, 0, 1]
    assert set(timings) == {
        "Insertion sort w/ operator[]",
        "Insertion sort w/ .at()",
        "Insertion sort w/ iterators",
    }
    assert all(seconds >= 0 for seconds in timings.values())


def test_main_reads_file_and_sorts(tmp_path, monkeypatch, capsys):
    data = tmp_path / "data.txt"
    data.write_text("hello world", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2 0\n"))
    assert main(["--path", str(data)]) == 0
    out = capsys.readouterr().out
    assert "Vector from C-style array:\nhello world" in out
    assert out.count("Sorted vector: [ ") == 5


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["-p", str(tmp_path / "absent.txt")]) == 1
    assert "Error opening file" in capsys.readouterr().err