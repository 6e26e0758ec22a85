"""Lucky palindromes written with the digits 6 and 8."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence


def loc_phat_numbers(n: int) -> list[str]:
    """Return the first ``n`` even-length palindromes made of 6s and 8s,
    shortest first and in increasing order within each length."""
    result: list[str] = []
    halves = deque(["6", "8"])
    while len(result) < n:
        half = halves.popleft()
        result.append(half + half[::-1])
        halves.extend((half + "6", half + "8"))
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count from standard input and print that many numbers."""
    parser = argparse.ArgumentParser(
        prog="locphat", description="List palindromes made of the digits 6 and 8."
    )
    parser.parse_args(argv)
    count = int(sys.stdin.read().split()[0])
    print(" ".join(loc_phat_numbers(count)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())