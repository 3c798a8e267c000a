import random
from functools import cmp_to_key

import pytest

from errors import InvalidArgumentError
from sorting import (
    cocktail_sort,
    heap_sort,
    insertion_sort,
    lsd_radix_sort,
    merge_sort,
    quick_sort,
)


def by_value(a, b):
    return a - b


class Counting:
    def __init__(self, compare):
        self.compare = compare
        self.count = 0

    def __call__(self, a, b):
        self.count += 1
        return self.compare(a, b)


SAMPLES = [
    [],
    [1],
    [2, 1],
    [5, 3, 9, 1, 5, 0, -4, 8, 3],
    list(range(20, 0, -1)),
    [7, 7, 7, 7],
]

COMPARISON_SORTS = [
    insertion_sort,
    cocktail_sort,
    merge_sort,
    lambda arr, cmp: quick_sort(arr, cmp, random.Random(234)),
]


@pytest.mark.parametrize("sort", COMPARISON_SORTS)
@pytest.mark.parametrize("sample", SAMPLES)
def test_comparison_sorts(sort, sample):
    arr = list(sample)
    sort(arr, by_value)
    assert arr == sorted(sample)


@pytest.mark.parametrize("sort", [insertion_sort, cocktail_sort, merge_sort])
def test_stable_sorts_keep_equal_keys_in_order(sort):
    pairs = [(3, "a"), (1, "b"), (3, "c"), (2, "d"), (1, "e"), (3, "f")]

    def by_key(x, y):
        return x[0] - y[0]

    arr = list(pairs)
    sort(arr, by_key)
    assert arr == sorted(pairs, key=cmp_to_key(by_key))


@pytest.mark.parametrize("sort", [insertion_sort, cocktail_sort])
def test_adaptive_sorts_are_linear_on_sorted_input(sort):
    counting = Counting(by_value)
    arr = list(range(50))
    sort(arr, counting)
    assert counting.count == 49


def test_cocktail_sort_shrinks_bounds():
    counting = Counting(by_value)
    arr = [1, 2, 3, 4, 5, 6, 8, 7, 9, 10]
    cocktail_sort(arr, counting)
    assert arr == list(range(1, 11))
    assert counting.count < 2 * 9 + 9


def test_quick_sort_random_data():
    rand = random.Random(7)
    data = [rand.randint(-1000, 1000) for _ in range(500)]
    arr = list(data)
    quick_sort(arr, by_value, random.Random(1))
    assert arr == sorted(data)


def test_radix_sort_handles_negatives():
    arr = [170, -45, 75, -90, 802, 24, 2, 66, -1, 0, -802]
    lsd_radix_sort(arr)
    assert arr == sorted([170, -45, 75, -90, 802, 24, 2, 66, -1, 0, -802])


def test_radix_sort_empty():
    arr = []
    lsd_radix_sort(arr)
    assert arr == []


def test_heap_sort_returns_new_list():
    data = [9, -2, 4, 4, 0, 11]
    result = heap_sort(data)
    assert result == [-2, 0, 4, 4, 9, 11]
    assert data == [9, -2, 4, 4, 0, 11]
    assert heap_sort([]) == []


@pytest.mark.parametrize("sort", [insertion_sort, cocktail_sort, merge_sort])
def test_invalid_inputs(sort):
    with pytest.raises(InvalidArgumentError):
        sort(None, by_value)
    with pytest.raises(InvalidArgumentError):
        sort([1], None)


def test_quick_sort_requires_random():
    with pytest.raises(InvalidArgumentError):
        quick_sort([2, 1], by_value, None)


def test_non_comparison_sorts_reject_none():
    with pytest.raises(InvalidArgumentError):
        lsd_radix_sort(None)
    with pytest.raises(InvalidArgumentError):
        heap_sort(None)


class NoDraws(random.Random):
    def randint(self, a, b):
        raise AssertionError("pivot drawn for a two-element range")


def test_quick_sort_two_elements_skip_pivot_draw():
    counting = Counting(by_value)
    arr = [2, 1]
    quick_sort(arr, counting, NoDraws())
    assert arr == [1, 2]
    assert counting.count == 1


def test_quick_sort_small_partitions_skip_pivot_draw():
    draws = []

    class Recording(random.Random):
        def randint(self, a, b):
            draws.append((a, b))
            return super().randint(a, b)

    arr = [3, 1, 2]
    quick_sort(arr, by_value, Recording(5))
    assert arr == [1, 2, 3]
    assert all(b - a >= 2 for a, b in draws)
