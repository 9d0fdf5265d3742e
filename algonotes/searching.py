"""Binary searches over sorted sequences."""

from collections.abc import Sequence


def _check_not_empty(values: Sequence) -> None:
    if not values:
        raise ValueError("cannot search an empty sequence")


def last_at_most(values: Sequence, key) -> int:
    """Return the last index whose value is <= key.

    If every value is greater than key, index 0 is returned.
    """
    _check_not_empty(values)
    low, high = 0, len(values) - 1
    while low < high:
        mid = (low + high + 1) // 2
        if values[mid] <= key:
            low = mid
        else:
            high = mid - 1
    return low


def first_at_least(values: Sequence, key) -> int:
    """Return the first index whose value is >= key.

    If every value is smaller than key, the last index is returned.
    """
    _check_not_empty(values)
    low, high = 0, len(values) - 1
    while low < high:
        mid = (low + high) // 2
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid
    return low