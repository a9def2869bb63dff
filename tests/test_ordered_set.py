import random

import pytest

from contestlib.ordered_set import OrderedSet, process_queries


def test_insert_ignores_duplicates():
    s = OrderedSet()
    assert s.insert(5) is True
    assert s.insert(5) is False
    assert s.insert(2) is True
    assert len(s) == 2
    assert list(s) == [2, 5]


def test_erase():
    s = OrderedSet([4, 1, 9])
    assert s.erase(4) is True
    assert s.erase(4) is False
    assert 4 not in s
    assert list(s) == [1, 9]


def test_find_by_order_and_order_of_key_are_inverse():
    rng = random.Random(2)
    values = rng.sample(range(-1000, 1000), 200)
    s = OrderedSet(values)
    ordered = sorted(values)
    assert list(s) == ordered
    for index, value in enumerate(ordered):
        assert s.find_by_order(index) == value
        assert s.order_of_key(value) == index


def test_order_of_key_for_absent_value():
    s = OrderedSet([10, 20, 30])
    assert s.order_of_key(25) == 2
    assert s.order_of_key(-5) == 0
    assert s.order_of_key(100) == len(s)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_find_by_order_out_of_range(index):
    s = OrderedSet([1, 2, 3])
    with pytest.raises(IndexError):
        s.find_by_order(index)


def test_process_queries_sample():
    queries = [("I", -1), ("I", -1), ("I", 2), ("C", 0), ("K", 2), ("D", -1), ("K", 1), ("K", 2)]
    assert process_queries(queries) == ["1", "2", "2", "invalid"]


def test_process_queries_k_zero_is_invalid():
    assert process_queries([("I", 3), ("K", 0), ("K", 1)]) == ["invalid", "3"]