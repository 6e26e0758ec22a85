"""Rebuild binary trees from traversal orders and walk them in post-order."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node."""

    data: int
    left: Node | None = None
    right: Node | None = None


def _positions(inorder: Sequence[int], other: Sequence[int]) -> dict[int, int]:
    if len(inorder) != len(other):
        raise ValueError("traversals must have the same length")
    positions = {value: index for index, value in enumerate(inorder)}
    if len(positions) != len(inorder):
        raise ValueError("tree values must be distinct")
    if set(other) != positions.keys():
        raise ValueError("traversals must hold the same values")
    return positions


def build_from_inorder_preorder(inorder: Sequence[int], preorder: Sequence[int]) -> Node | None:
    """Rebuild the tree with the given in-order and pre-order traversals."""
    positions = _positions(inorder, preorder)
    values = iter(preorder)

    def build(lo: int, hi: int) -> Node | None:
        if lo > hi:
            return None
        value = next(values)
        index = positions[value]
        if not lo <= index <= hi:
            raise ValueError("traversals do not describe a binary tree")
        node = Node(value)
        node.left = build(lo, index - 1)
        node.right = build(index + 1, hi)
        return node

    return build(0, len(inorder) - 1)


def build_from_inorder_levelorder(
    inorder: Sequence[int], levelorder: Sequence[int]
) -> Node | None:
    """Rebuild the tree with the given in-order and level-order traversals."""
    positions = _positions(inorder, levelorder)
    n = len(inorder)
    if n == 0:
        return None
    root = Node(levelorder[0])
    index = positions[root.data]
    queue = deque([(root, (0, index - 1), (index + 1, n - 1))])
    consumed = 1

    while queue:
        node, left_range, right_range = queue.popleft()
        for side, (lo, hi) in (("left", left_range), ("right", right_range)):
            if consumed >= n:
                break
            value = levelorder[consumed]
            index = positions[value]
            if lo <= index <= hi:
                consumed += 1
                child = Node(value)
                setattr(node, side, child)
                queue.append((child, (lo, index - 1), (index + 1, hi)))

    if consumed != n:
        raise ValueError("traversals do not describe a binary tree")
    return root


def post_order(root: Node | None) -> list[int]:
    """Return the values of the tree in post-order."""
    result: list[int] = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left:
            stack.append(node.left)
        if node.right:
            stack.append(node.right)
    result.reverse()
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print each tree's post-order."""
    parser = argparse.ArgumentParser(
        prog="traversal",
        description="Print post-order from in-order and pre-order (or level-order).",
    )
    parser.add_argument(
        "--level-order",
        action="store_true",
        help="the second traversal of each case is level-order instead of pre-order",
    )
    args = parser.parse_args(argv)
    build = build_from_inorder_levelorder if args.level_order else build_from_inorder_preorder
    tokens = iter(map(int, sys.stdin.read().split()))
    for _ in range(next(tokens)):
        n = next(tokens)
        inorder = [next(tokens) for _ in range(n)]
        other = [next(tokens) for _ in range(n)]
        print(" ".join(map(str, post_order(build(inorder, other)))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())