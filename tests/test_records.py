import random

from stlabs import records
from stlabs.records import (
    STRINGS,
    DataStruct,
    generate_key,
    generate_string,
    random_records,
    sort_records,
)


def _sort_key(r):
    return (r.key1, r.key2, len(r.text))


def test_str_format():
    assert str(DataStruct(1, -2, "ab")) == 'ds: [ key1: 1,\tkey2: -2,\tstr: "ab" ]'


def test_sort_orders_by_keys_then_length():
    result = sort_records(records.test_data())
    keys = [_sort_key(r) for r in result]
    assert keys == sorted(keys)


def test_sort_keeps_all_records():
    data = records.test_data()
    result = sort_records(data)
    assert sorted(map(str, result)) == sorted(map(str, data))


def test_sort_ties_broken_by_length():
    data = [DataStruct(2, 2, "longer string"), DataStruct(2, 2, "short")]
    assert [r.text for r in sort_records(data)] == ["short", "longer string"]


def test_sort_key2_before_length():
    data = [DataStruct(1, 3, "a"), DataStruct(1, 1, "abcdef")]
    assert [r.key2 for r in sort_records(data)] == [1, 3]


def test_fixed_data_size():
    assert len(records.test_data()) == 14


def test_generate_key_in_range():
    rng = random.Random(1)
    keys = {generate_key(rng) for _ in range(500)}
    assert keys <= set(range(-5, 6))
    assert -5 in keys and 5 in keys


def test_generate_string_from_table():
    rng = random.Random(2)
    assert all(generate_string(rng) in STRINGS for _ in range(100))


def test_random_records_shape():
    result = random_records(20, random.Random(3))
    assert len(result) == 20
    assert all(-5 <= r.key1 <= 5 and -5 <= r.key2 <= 5 for r in result)
    assert all(r.text in STRINGS for r in result)


def test_main_prints_sorted(capsys):
    assert records.main([]) == 0
    out = capsys.readouterr().out
    before, after = out.split("После сортировки:")
    assert before.startswith("До сортировки:")
    assert after.count("ds: [") == 19