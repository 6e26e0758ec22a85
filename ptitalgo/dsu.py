"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence


class DisjointSet:
    """Disjoint sets over the elements ``1..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def _check(self, u: int) -> None:
        if not 1 <= u <= self._n:
            raise ValueError(f"element {u} is outside 1..{self._n}")

    def find(self, u: int) -> int:
        """Return the representative of the set holding ``u``."""
        self._check(u)
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; False if already joined."""
        ru, rv = self.find(u), self.find(v)
        if ru == rv:
            return False
        if self._size[ru] < self._size[rv]:
            ru, rv = rv, ru
        self._parent[rv] = ru
        self._size[ru] += self._size[rv]
        return True


def has_cycle(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether an undirected graph on ``1..n`` contains a cycle."""
    sets = DisjointSet(n)
    return any(not sets.union(u, v) for u, v in edges)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print YES for cyclic graphs."""
    parser = argparse.ArgumentParser(
        prog="dsu", description="Detect cycles in undirected graphs read from stdin."
    )
    parser.parse_args(argv)
    tokens = iter(map(int, sys.stdin.read().split()))
    for _ in range(next(tokens)):
        n, m = next(tokens), next(tokens)
        edges = [(next(tokens), next(tokens)) for _ in range(m)]
        print("YES" if has_cycle(n, edges) else "NO")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())