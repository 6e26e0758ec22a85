"""Elementary sorts, merge sort with inversion counting and binary search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence


def selection_sort(a: Iterable[int]) -> list[int]:
    """Return a sorted copy made by selection sort."""
    items = list(a)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(a: Iterable[int]) -> list[int]:
    """Return a sorted copy made by insertion sort."""
    items: list[int] = []
    for key in a:
        j = len(items)
        items.append(key)
        while j > 0 and items[j - 1] > key:
            items[j] = items[j - 1]
            j -= 1
        items[j] = key
    return items


def bubble_sort(a: Iterable[int]) -> list[int]:
    """Return a sorted copy made by bubble sort, stopping once a pass swaps nothing."""
    items = list(a)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def merge_sort_count(a: Iterable[int]) -> tuple[list[int], int]:
    """Return a sorted copy and the number of inversions in the input."""
    items = list(a)
    if len(items) <= 1:
        return items, 0
    middle = (len(items) + 1) // 2
    left, left_count = merge_sort_count(items[:middle])
    right, right_count = merge_sort_count(items[middle:])
    merged: list[int] = []
    inversions = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def lower_bound(a: Sequence[int], x: int) -> int:
    """Index of the first element of sorted ``a`` not less than ``x``."""
    lo, hi = 0, len(a)
    while lo < hi:
        mid = (lo + hi) // 2
        if a[mid] < x:
            lo = mid + 1
        else:
            hi = mid
    return lo


def upper_bound(a: Sequence[int], x: int) -> int:
    """Index of the first element of sorted ``a`` greater than ``x``."""
    lo, hi = 0, len(a)
    while lo < hi:
        mid = (lo + hi) // 2
        if a[mid] <= x:
            lo = mid + 1
        else:
            hi = mid
    return lo


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from standard input and show every sort and search."""
    parser = argparse.ArgumentParser(
        prog="sorting", description="Sort numbers read from stdin in several ways."
    )
    parser.add_argument("--target", type=int, default=3, help="value to search for")
    args = parser.parse_args(argv)
    tokens = iter(map(int, sys.stdin.read().split()))
    n = next(tokens)
    values = [next(tokens) for _ in range(n)]

    for sort in (selection_sort, insertion_sort, bubble_sort):
        print(" ".join(map(str, sort(values))))
    ordered, inversions = merge_sort_count(values)
    print(inversions)
    print(" ".join(map(str, ordered)))
    print(lower_bound(ordered, args.target))
    print(upper_bound(ordered, args.target))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())