import random

import pytest

from dsakit.bst import BinarySearchTree


def test_maximum_worked_example():
    assert BinarySearchTree([20, 10, 30, 5, 15]).maximum() == 30


def test_minimum_worked_example():
    assert BinarySearchTree([20, 10, 30, 5, 15]).minimum() == 5


def test_iteration_is_sorted():
    data = [20, 10, 30, 5, 15]
    assert list(BinarySearchTree(data)) == sorted(data)


def test_duplicates_ignored():
    tree = BinarySearchTree([4, 4, 2, 2, 9])
    assert list(tree) == [2, 4, 9]
    assert len(tree) == len({4, 2, 9})


def test_insert_updates_extremes():
    tree = BinarySearchTree([10])
    tree.insert(3)
    tree.insert(42)
    assert tree.minimum() == 3
    assert tree.maximum() == 42


def test_contains():
    tree = BinarySearchTree([8, 3, 12])
    assert 3 in tree
    assert 12 in tree
    assert 7 not in tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert len(tree) == 0
    assert list(tree) == []
    assert 1 not in tree


def test_empty_minimum_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()


def test_empty_maximum_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().maximum()


def test_single_node_extremes():
    tree = BinarySearchTree([7])
    assert tree.minimum() == tree.maximum() == 7


@pytest.mark.parametrize("seed", range(6))
def test_random_trees(seed):
    rng = random.Random(seed)
    data = [rng.randint(-100, 100) for _ in range(rng.randint(1, 60))]
    tree = BinarySearchTree(data)
    assert list(tree) == sorted(set(data))
    assert len(tree) == len(set(data))
    assert tree.minimum() == min(data)
    assert tree.maximum() == max(data)
    assert all(value in tree for value in data)


def test_degenerate_chain_is_handled():
    data = list(range(2000))
    tree = BinarySearchTree(data)
    assert tree.maximum() == data[-1]
    assert list(tree) == data