"""Classic comparison sorts that rearrange a list in place."""

from __future__ import annotations

from collections.abc import MutableSequence


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort in place, stopping early once a pass makes no swap."""
    n = len(values)
    for round_ in range(1, n):
        swapped = False
        for j in range(n - round_):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def insertion_sort(values: MutableSequence[int]) -> None:
    """Sort in place by shifting larger elements right."""
    for i in range(1, len(values)):
        current = values[i]
        j = i - 1
        while j >= 0 and values[j] > current:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = current


def selection_sort(values: MutableSequence[int]) -> None:
    """Sort in place by repeatedly selecting the minimum of the tail."""
    n = len(values)
    for i in range(n - 1):
        min_index = min(range(i, n), key=values.__getitem__)
        values[i], values[min_index] = values[min_index], values[i]