"""Modular matrix multiplication and fast exponentiation."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

MOD = 10**9 + 7

Matrix = list[list[int]]


def identity(n: int) -> Matrix:
    """Return the ``n`` by ``n`` identity matrix."""
    return [[int(i == j) for j in range(n)] for i in range(n)]


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int = MOD) -> Matrix:
    """Multiply two matrices, reducing every entry modulo ``mod``."""
    if not a or not b:
        raise ValueError("matrices must not be empty")
    if any(len(row) != len(b) for row in a):
        raise ValueError("column count of the left matrix must equal row count of the right")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, col)) % mod for col in columns]
        for row in a
    ]


def mat_pow(a: Sequence[Sequence[int]], t: int, mod: int = MOD) -> Matrix:
    """Raise a square matrix to the power ``t`` modulo ``mod``."""
    if t < 0:
        raise ValueError("exponent must be non-negative")
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    result = [[value % mod for value in row] for row in identity(n)]
    base = [[value % mod for value in row] for row in a]
    while t:
        if t & 1:
            result = mat_mul(result, base, mod)
        t >>= 1
        if t:
            base = mat_mul(base, base, mod)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sixteenth power of the Fibonacci matrix."""
    parser = argparse.ArgumentParser(
        prog="matrix", description="Raise the Fibonacci matrix to a power."
    )
    parser.add_argument("power", type=int, nargs="?", default=16)
    args = parser.parse_args(argv)
    for row in mat_pow([[1, 1], [1, 0]], args.power):
        print(" ".join(map(str, row)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())