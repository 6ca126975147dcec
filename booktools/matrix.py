"""Matrix transposition and printing."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix."""
    return [list(column) for column in zip(*matrix)]


def pretty_print(matrix: Sequence[Sequence[int]]) -> None:
    """Print each row of the matrix on its own line."""
    for row in matrix:
        print(list(row))


def main(argv=None) -> int:
    """Print a sample matrix and its transpose."""
    matrix = [
        [101, 102, 103],
        [201, 202, 203],
        [301, 302, 303],
    ]
    print("matrix:")
    pretty_print(matrix)
    print("transposed:")
    pretty_print(transpose(matrix))
    return 0


if __name__ == "__main__":
    sys.exit(main())