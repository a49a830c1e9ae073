"""Drills on one- and two-dimensional integer arrays."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

Matrix = Sequence[Sequence[int]]


def is_present(matrix: Matrix, target: int) -> bool:
    """Return True if ``target`` occurs anywhere in ``matrix``."""
    return any(target in row for row in matrix)


def row_sums(matrix: Matrix) -> list[int]:
    """Return the sum of each row."""
    return [sum(row) for row in matrix]


def column_sums(matrix: Matrix) -> list[int]:
    """Return the sum of each column."""
    return [sum(column) for column in zip(*matrix)]


def largest_row_sum(matrix: Matrix) -> tuple[int, int]:
    """Return ``(row_index, row_sum)`` of the row with the largest sum.

    On a tie the earliest row wins.
    """
    if not matrix:
        raise ValueError("matrix has no rows")
    best_index, best_sum = 0, sum(matrix[0])
    for index, row in enumerate(matrix):
        total = sum(row)
        if total > best_sum:
            best_index, best_sum = index, total
    return best_index, best_sum


def array_sum(values: Sequence[int]) -> int:
    """Return the sum of all values; zero for an empty sequence."""
    return sum(values)


def find_min(values: Sequence[int]) -> int:
    """Return the smallest value."""
    if not values:
        raise ValueError("cannot take the minimum of an empty sequence")
    return min(values)


def find_max(values: Sequence[int]) -> int:
    """Return the largest value."""
    if not values:
        raise ValueError("cannot take the maximum of an empty sequence")
    return max(values)


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse ``values`` in place by swapping from both ends."""
    start, end = 0, len(values) - 1
    while start < end:
        values[start], values[end] = values[end], values[start]
        start += 1
        end -= 1


def binary_search(values: Sequence[int], key: int) -> int:
    """Return an index of ``key`` in the sorted ``values``, or -1 if absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == key:
            return mid
        if key > values[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def find_peak(values: Sequence[int]) -> int:
    """Return the index of the peak of a mountain-shaped sequence."""
    if not values:
        raise ValueError("cannot find a peak in an empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] < values[mid + 1]:
            start = mid + 1
        else:
            end = mid
    return start


def search_matrix(matrix: Matrix, target: int) -> bool:
    """Search a matrix whose rows, read in order, form one sorted sequence."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    start, end = 0, len(matrix) * cols - 1
    while start <= end:
        mid = start + (end - start) // 2
        element = matrix[mid // cols][mid % cols]
        if element == target:
            return True
        if element < target:
            start = mid + 1
        else:
            end = mid - 1
    return False


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the elements of ``matrix`` in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    total = len(matrix) * len(matrix[0])
    top, left = 0, 0
    bottom, right = len(matrix) - 1, len(matrix[0]) - 1
    result: list[int] = []

    while len(result) < total:
        for col in range(left, right + 1):
            if len(result) == total:
                break
            result.append(matrix[top][col])
        top += 1

        for row in range(top, bottom + 1):
            if len(result) == total:
                break
            result.append(matrix[row][right])
        right -= 1

        for col in range(right, left - 1, -1):
            if len(result) == total:
                break
            result.append(matrix[bottom][col])
        bottom -= 1

        for row in range(bottom, top - 1, -1):
            if len(result) == total:
                break
            result.append(matrix[row][left])
        left += 1

    return result


def wave_order(matrix: Matrix) -> list[int]:
    """Read columns alternately top-to-bottom and bottom-to-top."""
    result: list[int] = []
    for index, column in enumerate(zip(*matrix)):
        result.extend(reversed(column) if index % 2 else column)
    return result