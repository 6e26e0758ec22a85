"""Backtracking enumerations: bit strings, combinations, permutations,
n-queens boards, increasing subsets and integer partitions."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

Board = tuple[tuple[int, ...], ...]


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def binary_strings(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every 0/1 tuple of length ``n`` in lexicographic order."""
    _require_non_negative(n, "n")
    return _binary(n)


def _binary(n: int) -> Iterator[tuple[int, ...]]:
    current: list[int] = []

    def extend() -> Iterator[tuple[int, ...]]:
        if len(current) == n:
            yield tuple(current)
            return
        for bit in (0, 1):
            current.append(bit)
            yield from extend()
            current.pop()

    yield from extend()


def combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield the ``k``-element subsets of ``1..n`` as increasing tuples."""
    _require_non_negative(n, "n")
    _require_non_negative(k, "k")
    return _combinations(n, k)


def _combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    chosen: list[int] = []

    def extend(start: int) -> Iterator[tuple[int, ...]]:
        if len(chosen) == k:
            yield tuple(chosen)
            return
        # Leave enough room for the elements still to be chosen.
        for value in range(start, n - k + len(chosen) + 2):
            chosen.append(value)
            yield from extend(value + 1)
            chosen.pop()

    if k <= n:
        yield from extend(1)


def permutations(n: int) -> Iterator[tuple[int, ...]]:
    """Yield the permutations of ``1..n`` in lexicographic order."""
    _require_non_negative(n, "n")
    return _permutations(n)


def _permutations(n: int) -> Iterator[tuple[int, ...]]:
    current: list[int] = []
    used: set[int] = set()

    def extend() -> Iterator[tuple[int, ...]]:
        if len(current) == n:
            yield tuple(current)
            return
        for value in range(1, n + 1):
            if value in used:
                continue
            used.add(value)
            current.append(value)
            yield from extend()
            current.pop()
            used.discard(value)

    yield from extend()


def n_queens(n: int) -> Iterator[Board]:
    """Yield every placement of ``n`` non-attacking queens as a 0/1 board."""
    _require_non_negative(n, "n")
    return _queens(n)


def _queens(n: int) -> Iterator[Board]:
    board = [[0] * n for _ in range(n)]
    columns: set[int] = set()
    sums: set[int] = set()
    diffs: set[int] = set()

    def place(row: int) -> Iterator[Board]:
        if row == n:
            yield tuple(tuple(line) for line in board)
            return
        for col in range(n):
            if col in columns or row + col in sums or row - col in diffs:
                continue
            board[row][col] = 1
            columns.add(col)
            sums.add(row + col)
            diffs.add(row - col)
            yield from place(row + 1)
            board[row][col] = 0
            columns.discard(col)
            sums.discard(row + col)
            diffs.discard(row - col)

    yield from place(0)


def increasing_subsets(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every non-empty increasing sequence drawn from ``1..n``,
    each prefix before its extensions."""
    _require_non_negative(n, "n")
    return _subsets(n)


def _subsets(n: int) -> Iterator[tuple[int, ...]]:
    current: list[int] = []

    def extend(start: int) -> Iterator[tuple[int, ...]]:
        for value in range(start, n + 1):
            current.append(value)
            yield tuple(current)
            yield from extend(value + 1)
            current.pop()

    yield from extend(1)


def partitions(n: int) -> Iterator[tuple[int, ...]]:
    """Yield the partitions of ``n`` as non-decreasing tuples."""
    _require_non_negative(n, "n")
    return _partitions(n)


def _partitions(n: int) -> Iterator[tuple[int, ...]]:
    parts: list[int] = []

    def extend(remaining: int) -> Iterator[tuple[int, ...]]:
        if remaining == 0:
            yield tuple(parts)
            return
        low = parts[-1] if parts else 1
        for value in range(low, remaining + 1):
            parts.append(value)
            yield from extend(remaining - value)
            parts.pop()

    if n > 0:
        yield from extend(n)


def _labelled(items: Sequence[int], labels: str) -> str:
    return " ".join(f"{item}:{labels[item]}" for item in items)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of every enumeration."""
    parser = argparse.ArgumentParser(
        prog="backtrack", description="Show the backtracking enumerations."
    )
    parser.parse_args(argv)

    print("binary: ")
    for bits in binary_strings(2):
        print(_labelled(bits, "ab"))

    print("combination: ")
    for combo in combinations(3, 2):
        print(_labelled(combo, "$abcd"))

    print("permutation: ")
    for perm in permutations(3):
        print(_labelled(perm, "$abcd"))

    print("xephau: ")
    for board in n_queens(4):
        for row in board:
            print(" ".join(map(str, row)))
        print()

    print("tapcon: ")
    for subset in increasing_subsets(5):
        print(" ".join(map(str, subset)))

    print("phantich: ")
    for parts in partitions(5):
        print(" ".join(map(str, parts)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())