import io
import random

import pytest

from ptitalgo.sorting import (
    bubble_sort,
    insertion_sort,
    lower_bound,
    main,
    merge_sort_count,
    selection_sort,
    upper_bound,
)


def _samples():
    rng = random.Random(7)
    yield []
    yield [1]
    yield [3, 3, 3]
    for size in (2, 5, 20, 60):
        yield [rng.randint(-50, 50) for _ in range(size)]


SAMPLES = list(_samples())


@pytest.mark.parametrize("values", SAMPLES)
def test_selection_sort_agrees_with_sorted(values):
    assert selection_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_insertion_sort_agrees_with_sorted(values):
    assert insertion_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_bubble_sort_agrees_with_sorted(values):
    assert bubble_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_sort_agrees_with_sorted(values):
    assert merge_sort_count(values)[0] == sorted(values)


def test_selection_sort_leaves_input_unchanged():
    values = [5, 1, 4, 2]
    assert selection_sort(values) == [1, 2, 4, 5]
    assert values == [5, 1, 4, 2]


def test_insertion_sort_leaves_input_unchanged():
    values = [5, 1, 4, 2]
    assert insertion_sort(values) == [1, 2, 4, 5]
    assert values == [5, 1, 4, 2]


def test_bubble_sort_leaves_input_unchanged():
    values = [5, 1, 4, 2]
    assert bubble_sort(values) == [1, 2, 4, 5]
    assert values == [5, 1, 4, 2]


def test_merge_sort_leaves_input_unchanged():
    values = [5, 1, 4, 2]
    assert merge_sort_count(values)[0] == [1, 2, 4, 5]
    assert values == [5, 1, 4, 2]


def test_inversions_of_worked_example():
    assert merge_sort_count([2, 4, 1, 3, 5])[1] == 3


def test_sorted_input_has_no_inversions():
    assert merge_sort_count(list(range(30)))[1] == 0


@pytest.mark.parametrize("n", [1, 2, 9, 40])
def test_reversed_input_has_every_pair_inverted(n):
    assert merge_sort_count(list(range(n, 0, -1)))[1] == n * (n - 1) // 2


def test_equal_elements_are_not_inversions():
    assert merge_sort_count([2, 2, 2, 2])[1] == 0


@pytest.mark.parametrize("x", [-1, 0, 1, 3, 4, 7, 10])
def test_bounds_partition_sorted_list(x):
    a = [0, 1, 3, 3, 3, 5, 7, 9]
    lo, hi = lower_bound(a, x), upper_bound(a, x)
    assert all(v < x for v in a[:lo])
    assert all(v >= x for v in a[lo:])
    assert all(v <= x for v in a[:hi])
    assert all(v > x for v in a[hi:])
    assert hi - lo == a.count(x)


def test_bounds_on_empty_list():
    assert lower_bound([], 3) == 0
    assert upper_bound([], 3) == 0


def test_main_output(monkeypatch, capsys):
    values = [3, 1, 3, 2, 5]
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n3 1 3 2 5\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    ordered = " ".join(map(str, sorted(values)))
    assert lines[:3] == [ordered] * 3
    assert lines[3] == str(merge_sort_count(values)[1])
    assert lines[4] == ordered
    assert lines[5] == str(lower_bound(sorted(values), 3))
    assert lines[6] == str(upper_bound(sorted(values), 3))