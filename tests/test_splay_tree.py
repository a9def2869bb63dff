import bisect
import random

import pytest

from contestlib.splay_tree import SplayNode, SplayTree, node_size


def _subtree_keys(node):
    if node is None:
        return []
    return _subtree_keys(node.child[0]) + [node.key] + _subtree_keys(node.child[1])


def _check_sizes(node):
    if node is None:
        return 0
    size = _check_sizes(node.child[0]) + _check_sizes(node.child[1]) + 1
    assert node.size == size
    return size


def test_construct_sorts_keys():
    tree = SplayTree([5, 1, 4, 2, 3])
    assert list(tree) == [1, 2, 3, 4, 5]
    assert len(tree) == 5


def test_empty_tree():
    tree = SplayTree()
    assert len(tree) == 0
    assert tree.first() is None
    assert tree.last() is None
    assert tree.node_at_index(0) is None
    assert tree.lower_bound(3) == (None, 0)


def test_node_size_of_none():
    assert node_size(None) == 0
    assert node_size(SplayNode(7)) == 1


def test_insert_returns_rank_against_model():
    rng = random.Random(1)
    tree = SplayTree()
    model = []

    for _ in range(500):
        key = rng.randint(0, 100)
        node, index = tree.insert(key)
        assert node.key == key
        assert index == bisect.bisect_left(model, key)
        bisect.insort(model, key)

    assert list(tree) == model
    _check_sizes(tree.root)


def test_insert_unique_keeps_single_copy():
    tree = SplayTree()
    first, index = tree.insert(10, require_unique=True)
    again, index_again = tree.insert(10, require_unique=True)
    assert again is first
    assert index == index_again == 0
    assert list(tree) == [10]


def test_erase_and_contains():
    rng = random.Random(2)
    tree = SplayTree()
    model = []

    for _ in range(600):
        key = rng.randint(0, 50)
        if rng.random() < 0.5:
            tree.insert(key)
            bisect.insort(model, key)
        else:
            removed = tree.erase(key)
            assert removed == (key in model)
            if removed:
                model.remove(key)
        assert (key in tree) == (key in model)

    assert list(tree) == model
    _check_sizes(tree.root)


def test_erase_missing_returns_false():
    tree = SplayTree([1, 3])
    assert tree.erase(2) is False
    assert list(tree) == [1, 3]


def test_node_at_index_matches_sorted_order():
    keys = list(range(0, 200, 3))
    tree = SplayTree(keys)
    for i, key in enumerate(keys):
        assert tree.node_at_index(i).key == key
    assert tree.node_at_index(len(keys)) is None
    assert tree.node_at_index(-1) is None


def test_first_last_successor_predecessor():
    keys = [4, 8, 15, 16, 23, 42]
    tree = SplayTree(keys)

    walked = []
    node = tree.first()
    while node is not None:
        walked.append(node.key)
        node = tree.successor(node)
    assert walked == keys

    back = []
    node = tree.last()
    while node is not None:
        back.append(node.key)
        node = tree.predecessor(node)
    assert back == keys[::-1]


def test_lower_bound_counts_smaller_keys():
    keys = [1, 3, 3, 7, 9]
    tree = SplayTree(keys)
    for probe in range(11):
        node, below = tree.lower_bound(probe)
        assert below == bisect.bisect_left(keys, probe)
        if below < len(keys):
            assert node.key == keys[below]
        else:
            assert node is None


def test_insert_at_index():
    tree = SplayTree([1, 2, 4, 5])
    tree.insert_at_index(2, 3)
    assert list(tree) == [1, 2, 3, 4, 5]
    tree.insert_at_index(5, 6)
    assert list(tree) == [1, 2, 3, 4, 5, 6]
    _check_sizes(tree.root)


def test_insert_at_index_out_of_range():
    tree = SplayTree([1, 2])
    with pytest.raises(IndexError):
        tree.insert_at_index(3, 9)


def test_prefix_and_suffix_queries():
    keys = list(range(20))
    tree = SplayTree(keys)
    for count in range(-1, 23):
        expected = min(max(count, 0), len(keys))
        assert node_size(tree.query_prefix_count(count)) == expected
        assert _subtree_keys(tree.query_prefix_count(count)) == keys[:expected]
        assert node_size(tree.query_suffix_count(count)) == expected
        assert _subtree_keys(tree.query_suffix_count(count)) == keys[len(keys) - expected:]


def test_key_prefix_and_suffix_queries():
    keys = [2, 4, 4, 6, 8, 10]
    tree = SplayTree(keys)
    for probe in range(12):
        below = bisect.bisect_left(keys, probe)
        assert _subtree_keys(tree.query_prefix_key(probe)) == keys[:below]
        assert _subtree_keys(tree.query_suffix_key(probe)) == keys[below:]


def test_query_range_covers_exact_positions():
    rng = random.Random(3)
    keys = sorted(rng.randint(0, 1000) for _ in range(80))
    tree = SplayTree(keys)
    for _ in range(200):
        start, end = sorted(rng.randint(0, len(keys)) for _ in range(2))
        assert _subtree_keys(tree.query_range(start, end)) == keys[start:end]
        _check_sizes(tree.root)


def test_query_range_key_size():
    rng = random.Random(4)
    keys = sorted(rng.randint(0, 100) for _ in range(60))
    tree = SplayTree(keys)
    for _ in range(100):
        lower, upper = sorted(rng.randint(-5, 105) for _ in range(2))
        expected = bisect.bisect_left(keys, upper) - bisect.bisect_left(keys, lower)
        assert node_size(tree.query_range_key(lower, upper)) == expected


def test_find_last_subarray_counts_elements():
    rng = random.Random(5)
    tree = SplayTree(range(40))

    for x in range(-2, 45):
        first = rng.randint(0, min(max(x, 0), len(tree)))
        remain = x - first
        total = 0

        def should_join(node, single):
            nonlocal total
            size = 1 if single else node_size(node)
            if total + size <= remain:
                total += size
                return True
            return False

        prefix = tree.find_last_subarray(should_join, first)
        if remain < 0:
            assert prefix == first - 1
        else:
            assert prefix == min(x, len(tree))


def test_clear_empties_tree():
    tree = SplayTree([1, 2, 3])
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []
    assert 2 not in tree