"""Binary search over a sorted sequence."""

from collections.abc import Sequence
from typing import Any, Optional


def search(arr: Sequence[Any], k: Any) -> Optional[int]:
    """Return the index of ``k`` in the ascending sequence ``arr``, or None if absent."""
    left, right = 0, len(arr)
    while left < right:
        mid = (left + right) >> 1
        value = arr[mid]
        if value < k:
            left = mid + 1
        elif k < value:
            right = mid
        else:
            return mid
    return None