"""A binary search tree driven by a small line-oriented command language."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinarySearchTree:
    """A binary search tree of distinct integers."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def insert(self, x: int) -> None:
        """Insert ``x``; a value already present is left alone."""
        if self.root is None:
            self.root = TreeNode(x)
            return
        node = self.root
        while True:
            if x < node.data:
                if node.left is None:
                    node.left = TreeNode(x)
                    return
                node = node.left
            elif x > node.data:
                if node.right is None:
                    node.right = TreeNode(x)
                    return
                node = node.right
            else:
                return

    def delete(self, x: int) -> None:
        """Remove ``x``; raise KeyError if it is not in the tree."""
        self.root = self._delete(self.root, x)

    @classmethod
    def _delete(cls, node: TreeNode | None, x: int) -> TreeNode | None:
        if node is None:
            raise KeyError(x)
        if x < node.data:
            node.left = cls._delete(node.left, x)
            return node
        if x > node.data:
            node.right = cls._delete(node.right, x)
            return node
        if node.right is None:
            return node.left
        if node.right.left is None:
            node.right.left = node.left
            return node.right
        parent, successor = node.right, node.right.left
        while successor.left is not None:
            parent, successor = successor, successor.left
        node.data = successor.data
        parent.left = successor.right
        return node

    def attach_child(self, parent: int, child: int, side: str) -> None:
        """Hang a new node ``child`` on the ``'L'`` or ``'R'`` side of the
        first node, in pre-order, holding ``parent``."""
        if side not in ("L", "R"):
            raise ValueError(f"side must be 'L' or 'R', got {side!r}")
        for node in self._preorder_nodes():
            if node.data == parent:
                if side == "L":
                    node.left = TreeNode(child)
                else:
                    node.right = TreeNode(child)
                return
        raise KeyError(parent)

    def _preorder_nodes(self) -> Iterator[TreeNode]:
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            yield node
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)

    def preorder(self) -> list[int]:
        """Values in pre-order."""
        return [node.data for node in self._preorder_nodes()]

    def inorder(self) -> list[int]:
        """Values in in-order."""
        result: list[int] = []
        stack: list[TreeNode] = []
        node = self.root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result

    def postorder(self) -> list[int]:
        """Values in post-order."""
        result: list[int] = []
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        result.reverse()
        return result


def _listing(label: str, values: Iterable[int]) -> str:
    return f"{label}: " + " ".join(map(str, values))


def run_commands(lines: Iterable[str]) -> Iterator[str]:
    """Run commands against a fresh tree, yielding the lines they report.

    ``1 x`` inserts, ``2 x`` deletes, and ``3``, ``4``, ``5`` list the tree
    in pre-, in- and post-order. Blank lines and other commands are skipped.
    """
    tree = BinarySearchTree()
    for line in lines:
        words = line.split()
        if not words:
            continue
        command = words[0]
        if command == "1":
            yield f"insert: {words[1]}"
            tree.insert(int(words[1]))
        elif command == "2":
            yield f"delete: {words[1]}"
            try:
                tree.delete(int(words[1]))
            except KeyError:
                yield "Not Found"
        elif command == "3":
            yield _listing("pre", tree.preorder())
        elif command == "4":
            yield _listing("in", tree.inorder())
        elif command == "5":
            yield _listing("post", tree.postorder())


def main(argv: Sequence[str] | None = None) -> int:
    """Run tree commands read from standard input."""
    parser = argparse.ArgumentParser(
        prog="bst", description="Run binary search tree commands read from stdin."
    )
    parser.parse_args(argv)
    for output in run_commands(sys.stdin):
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())