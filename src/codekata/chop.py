# karate chop: binary narrowing over a half-open range [left, right)
# pure function, no i/o, works for any ascending sequence of comparable values

from __future__ import annotations
from typing import Any, Sequence


def chop(x: Any, arr: Sequence[Any]) -> int:
    """Return the index of ``x`` in ``arr``, or where it would fall.

    On a match the index of an occurrence is returned (with duplicates, not
    necessarily the first). Otherwise the index of the greatest element
    smaller than ``x``, or 0 when there is none. An empty ``arr`` gives 0, so
    callers must check ``len(arr)`` before trusting index 0.
    """
    left = 0
    right = len(arr)

    while right - left > 1:
        center = (left + right) // 2
        if arr[center] > x:
            right = center
        elif arr[center] < x:
            left = center
        else:
            return center

    return left
