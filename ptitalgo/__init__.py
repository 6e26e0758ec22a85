"""Classic algorithm exercises: backtracking, matrix power, disjoint sets, tree traversals, sorting and 6/8 palindromes."""

__version__ = "0.1.0"