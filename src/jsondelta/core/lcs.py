"""Longest common subsequence of two sequences by dynamic programming"""

from typing import Sequence, TypeVar


T = TypeVar("T")


def compute_lcs(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """Return the longest common subsequence of left and right.

    Builds the full (m+1) x (n+1) length table, so cost is O(m*n) time and
    space. When backtracking and both neighbours hold the same length, the
    unmatched right item is dropped first; this fixes which of several
    equally long subsequences is returned.
    """
    m, n = len(left), len(right)
    if not m or not n:
        return []

    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row, prev = dp[i], dp[i - 1]
        for j in range(1, n + 1):
            if left[i - 1] == right[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    lcs = []
    i, j = m, n
    while i > 0 and j > 0:
        if left[i - 1] == right[j - 1]:
            lcs.append(left[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    lcs.reverse()
    return lcs
