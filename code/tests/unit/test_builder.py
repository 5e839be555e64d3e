from __future__ import annotations

from typing import Optional

import numpy as np
import pytest

from kdmap.errors import EmptyInputError, InvalidPairError
from kdmap.index.builder import build_tree, find_duplicate_keys, median_index, normalize_pairs
from kdmap.index.nodes import KEY_AXIS, KDNode, Pair, axis_field
from kdmap.index.traverse import count_nodes, iter_leaves


def _random_pairs(n: int, seed: int) -> list[Pair]:
    rng = np.random.default_rng(seed)
    keys = [f"key{int(i):04d}" for i in rng.permutation(n)]
    values = rng.integers(-50, 50, size=n)
    return [Pair(k, int(v)) for k, v in zip(keys, values)]


def _check_node(node: KDNode, axis: bool) -> None:
    assert node.axis == axis
    if node.is_leaf:
        return
    assert node.left is not None and node.right is not None

    split = axis_field(node.point, axis)
    assert all(axis_field(p, axis) <= split for p in iter_leaves(node.left))
    assert all(axis_field(p, axis) >= split for p in iter_leaves(node.right))
    assert node.point in list(iter_leaves(node.right))

    _check_node(node.left, not axis)
    _check_node(node.right, not axis)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7, 8, 16, 31, 100])
def test_build_tree_invariants(n: int) -> None:
    pairs = _random_pairs(n, seed=n)
    root = build_tree(list(pairs), np.random.default_rng(n))

    leaves, splits = count_nodes(root)
    assert leaves == n
    assert splits == n - 1
    assert sorted(iter_leaves(root)) == sorted(pairs)
    _check_node(root, KEY_AXIS)


def test_build_tree_single_pair_is_leaf() -> None:
    root = build_tree([Pair("m", 5)], np.random.default_rng(0))
    assert root.is_leaf
    assert root.point == Pair("m", 5)
    assert root.axis is KEY_AXIS


def test_build_tree_two_pairs_puts_larger_key_on_the_right() -> None:
    root = build_tree([Pair("b", 1), Pair("a", 2)], np.random.default_rng(0))
    assert not root.is_leaf
    assert root.point == Pair("b", 1)
    assert root.left == KDNode(Pair("a", 2), axis=False)
    assert root.right == KDNode(Pair("b", 1), axis=False)


def test_build_tree_rejects_empty_input() -> None:
    with pytest.raises(EmptyInputError):
        build_tree([], np.random.default_rng(0))


def test_median_index_rounds_up() -> None:
    assert median_index(0, 1) == 1
    assert median_index(0, 2) == 1
    assert median_index(0, 3) == 2
    assert median_index(4, 4) == 4
    assert median_index(3, 8) == 6


def test_nodes_are_immutable() -> None:
    root = build_tree([Pair("a", 1), Pair("b", 2)], np.random.default_rng(0))
    with pytest.raises(AttributeError):
        root.left = None  # type: ignore[misc]


def test_normalize_pairs_accepts_tuples_and_numpy_ints() -> None:
    points = normalize_pairs([("a", 1), ["b", np.int64(-2)], Pair("c", 0)])
    assert points == [Pair("a", 1), Pair("b", -2), Pair("c", 0)]
    assert all(type(p.value) is int for p in points)


@pytest.mark.parametrize(
    "bad, match",
    [
        ([(1, 2)], r"key must be str"),
        ([("a", "1")], r"value must be int"),
        ([("a", 1.5)], r"value must be int"),
        ([("a", True)], r"value must be int"),
        ([("a", 1, 2)], r"must be a \(key, value\) pair"),
        ([42], r"must be a \(key, value\) pair"),
    ],
)
def test_normalize_pairs_rejects_bad_items(bad: list, match: str) -> None:
    with pytest.raises(InvalidPairError, match=match):
        normalize_pairs(bad)


def test_normalize_pairs_rejects_empty_iterable() -> None:
    with pytest.raises(EmptyInputError):
        normalize_pairs(iter(()))


def test_find_duplicate_keys_reports_each_key_once() -> None:
    points = [Pair("a", 1), Pair("b", 2), Pair("a", 3), Pair("a", 4), Pair("b", 5)]
    assert find_duplicate_keys(points) == ["a", "b"]
    assert find_duplicate_keys(points[:2]) == []


def _depth(node: Optional[KDNode]) -> int:
    if node is None or node.is_leaf:
        return 0
    return 1 + max(_depth(node.left), _depth(node.right))


def test_build_tree_is_balanced() -> None:
    for n in (2, 9, 64, 65, 500):
        root = build_tree(_random_pairs(n, seed=n), np.random.default_rng(0))
        assert _depth(root) == int(np.ceil(np.log2(n)))


def test_find_duplicate_keys_with_many_repeats() -> None:
    points = [Pair(f"k{i % 50}", i) for i in range(20_000)]
    dups = find_duplicate_keys(points)
    assert dups == [f"k{i}" for i in range(50)]
