"""
Levenshtein edit distance.

Only one column of the dynamic-programming matrix is kept: a list of
``len(s1) + 1`` cells that is rewritten once per character of ``s2``.
No case folding happens here; callers normalize both strings first.
"""

from typing import List


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning ``s1`` into ``s2``.

    Args:
        s1: First string (sets the size of the working column)
        s2: Second string

    Returns:
        Non-negative edit distance

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3

        >>> levenshtein_distance("", "abc")
        3
    """
    column: List[int] = list(range(len(s1) + 1))

    for x in range(1, len(s2) + 1):
        column[0] = x
        lastdiag = x - 1
        for y in range(1, len(s1) + 1):
            olddiag = column[y]
            cost = 0 if s1[y - 1] == s2[x - 1] else 1
            column[y] = min(column[y] + 1, column[y - 1] + 1, lastdiag + cost)
            lastdiag = olddiag

    return column[len(s1)]
