import random

import pytest

from dsadrills.sorting import bubble_sort, insertion_sort, selection_sort

CASES = [
    [],
    [1],
    [2, 1],
    [5, 2, 8, 1, 9],
    [3, 3, 1, 1, 2, 2],
    [-4, 0, 7, -1, 15],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
]


def _random_inputs():
    rng = random.Random(1234)
    return [
        [rng.randint(-100, 100) for _ in range(rng.randint(0, 30))]
        for _ in range(50)
    ]


@pytest.mark.parametrize("values", CASES)
def test_bubble_sort_matches_sorted(values):
    data = list(values)
    bubble_sort(data)
    assert data == sorted(values)


@pytest.mark.parametrize("values", CASES)
def test_insertion_sort_matches_sorted(values):
    data = list(values)
    insertion_sort(data)
    assert data == sorted(values)


@pytest.mark.parametrize("values", CASES)
def test_selection_sort_matches_sorted(values):
    data = list(values)
    selection_sort(data)
    assert data == sorted(values)


def test_bubble_sort_random_inputs():
    for values in _random_inputs():
        data = list(values)
        bubble_sort(data)
        assert data == sorted(values)


def test_insertion_sort_random_inputs():
    for values in _random_inputs():
        data = list(values)
        insertion_sort(data)
        assert data == sorted(values)


def test_selection_sort_random_inputs():
    for values in _random_inputs():
        data = list(values)
        selection_sort(data)
        assert data == sorted(values)


def test_bubble_sort_keeps_elements():
    data = [9, 1, 9, 4, 1]
    bubble_sort(data)
    assert data == [1, 1, 4, 9, 9]


def test_insertion_sort_keeps_elements():
    data = [9, 1, 9, 4, 1]
    insertion_sort(data)
    assert data == [1, 1, 4, 9, 9]


def test_selection_sort_keeps_elements():
    data = [9, 1, 9, 4, 1]
    selection_sort(data)
    assert data == [1, 1, 4, 9, 9]