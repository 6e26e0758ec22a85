import io
import random
from collections import deque

import pytest

from ptitalgo.traversal import (
    Node,
    build_from_inorder_levelorder,
    build_from_inorder_preorder,
    main,
    post_order,
)


def _sample_tree():
    return Node(1, Node(2, Node(4), Node(5)), Node(3))


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.data] + _inorder(node.right)


def _preorder(node):
    if node is None:
        return []
    return [node.data] + _preorder(node.left) + _preorder(node.right)


def _levelorder(node):
    result, queue = [], deque([node] if node else [])
    while queue:
        current = queue.popleft()
        result.append(current.data)
        queue.extend(child for child in (current.left, current.right) if child)
    return result


def _random_tree(seed, size):
    rng = random.Random(seed)
    values = rng.sample(range(1, 10 * size + 1), size)
    root = None
    for value in values:
        new = Node(value)
        if root is None:
            root = new
            continue
        current = root
        while True:
            side = rng.choice(("left", "right"))
            child = getattr(current, side)
            if child is None:
                setattr(current, side, new)
                break
            current = child
    return root


def test_post_order_of_sample():
    assert post_order(_sample_tree()) == [4, 5, 2, 3, 1]


def test_post_order_of_empty_tree():
    assert post_order(None) == []


def test_rebuild_sample_from_preorder():
    tree = _sample_tree()
    assert build_from_inorder_preorder(_inorder(tree), _preorder(tree)) == tree


def test_rebuild_sample_from_levelorder():
    tree = _sample_tree()
    assert build_from_inorder_levelorder(_inorder(tree), _levelorder(tree)) == tree


@pytest.mark.parametrize("seed", range(8))
def test_random_trees_round_trip(seed):
    tree = _random_tree(seed, 25)
    inorder = _inorder(tree)
    assert build_from_inorder_preorder(inorder, _preorder(tree)) == tree
    assert build_from_inorder_levelorder(inorder, _levelorder(tree)) == tree


def test_empty_traversals_give_no_tree():
    assert build_from_inorder_preorder([], []) is None
    assert build_from_inorder_levelorder([], []) is None


@pytest.mark.parametrize(
    "builder", [build_from_inorder_preorder, build_from_inorder_levelorder]
)
def test_length_mismatch_raises(builder):
    with pytest.raises(ValueError):
        builder([1, 2], [1])


@pytest.mark.parametrize(
    "builder", [build_from_inorder_preorder, build_from_inorder_levelorder]
)
def test_different_values_raise(builder):
    with pytest.raises(ValueError):
        builder([1, 2], [3, 1])


def test_inconsistent_preorder_raises():
    with pytest.raises(ValueError):
        build_from_inorder_preorder([1, 2, 3], [2, 3, 1])


def test_main_preorder(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n4 2 5 1 3\n1 2 4 5 3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == list(map(str, post_order(_sample_tree())))


def test_main_levelorder(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n4 2 5 1 3\n1 2 3 4 5\n"))
    assert main(["--level-order"]) == 0
    assert capsys.readouterr().out.split() == list(map(str, post_order(_sample_tree())))