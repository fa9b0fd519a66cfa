"""
Natural ("human") string ordering

Embedded digit runs compare by numeric value, so 'file2.md' sorts before
'file10.md'. Other characters compare one at a time, ignoring ASCII case.
Names that are still equal are ordered by length (so 'a1' precedes 'a01')
and finally by their raw text, which makes the order total and locale
independent.
"""

from functools import cmp_to_key
from typing import Iterable, List


def _digit(c: str) -> bool:
    return '0' <= c <= '9'


def _run_end(s: str, start: int) -> int:
    end = start
    while end < len(s) and _digit(s[end]):
        end += 1
    return end


def naturalCompare(a: str, b: str) -> int:
    """
    Three-way natural comparison.

    Returns:
        Negative if a sorts first, positive if b does, 0 if identical

    Example:
        >>> naturalCompare('file2.md', 'file10.md') < 0
        True
    """
    i = j = 0
    while i < len(a) and j < len(b):
        if _digit(a[i]) and _digit(b[j]):
            a_end = _run_end(a, i)
            b_end = _run_end(b, j)
            a_num = int(a[i:a_end])
            b_num = int(b[j:b_end])
            if a_num != b_num:
                return -1 if a_num < b_num else 1
            i, j = a_end, b_end
            continue
        a_char = a[i].lower()
        b_char = b[j].lower()
        if a_char != b_char:
            return -1 if a_char < b_char else 1
        i += 1
        j += 1
    # One is a prefix of the other (modulo case and zeros)
    a_rest = len(a) - i
    b_rest = len(b) - j
    if a_rest != b_rest:
        return -1 if a_rest < b_rest else 1
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a != b:
        return -1 if a < b else 1
    return 0


naturalKey = cmp_to_key(naturalCompare)


def names_sortNatural(names: Iterable[str]) -> List[str]:
    """Return names sorted in natural ascending order"""
    return sorted(names, key=naturalKey)
