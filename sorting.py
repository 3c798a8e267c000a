from __future__ import annotations

import random
from heapq import heapify, heappop
from typing import Callable, List, MutableSequence, Optional, Sequence, TypeVar

from errors import InvalidArgumentError


T = TypeVar("T")

Comparator = Callable[[T, T], int]


def _check_inputs(arr: Optional[MutableSequence[T]], comparator: Optional[Comparator]) -> None:
    if arr is None:
        raise InvalidArgumentError("The array to sort cannot be None.")
    if comparator is None:
        raise InvalidArgumentError("The comparator cannot be None.")


def insertion_sort(arr: MutableSequence[T], comparator: Comparator) -> None:
    """In-place, stable, adaptive. O(n^2) worst case, O(n) on sorted input."""
    _check_inputs(arr, comparator)
    for i in range(1, len(arr)):
        j = i
        while j > 0 and comparator(arr[j], arr[j - 1]) < 0:
            arr[j], arr[j - 1] = arr[j - 1], arr[j]
            j -= 1


def cocktail_sort(arr: MutableSequence[T], comparator: Comparator) -> None:
    """Bidirectional bubble sort.

    Each pass narrows its bound to the position of the last swap, so already
    ordered tails and heads are not rescanned.
    """
    _check_inputs(arr, comparator)
    start, end = 0, len(arr) - 1
    swapped = True
    while swapped:
        swapped = False
        last_swap = start
        for i in range(start, end):
            if comparator(arr[i], arr[i + 1]) > 0:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
                swapped = True
                last_swap = i
        end = last_swap
        if not swapped:
            break

        swapped = False
        last_swap = end
        for j in range(end, start, -1):
            if comparator(arr[j - 1], arr[j]) > 0:
                arr[j - 1], arr[j] = arr[j], arr[j - 1]
                swapped = True
                last_swap = j
        start = last_swap


def merge_sort(arr: MutableSequence[T], comparator: Comparator) -> None:
    """Stable merge sort; the sorted result is written back into ``arr``.

    On odd lengths the extra element goes to the right half.
    """
    _check_inputs(arr, comparator)
    if len(arr) <= 1:
        return

    middle = len(arr) // 2
    left = list(arr[:middle])
    right = list(arr[middle:])
    merge_sort(left, comparator)
    merge_sort(right, comparator)

    i = j = 0
    while i < len(left) and j < len(right):
        if comparator(left[i], right[j]) <= 0:
            arr[i + j] = left[i]
            i += 1
        else:
            arr[i + j] = right[j]
            j += 1
    while i < len(left):
        arr[i + j] = left[i]
        i += 1
    while j < len(right):
        arr[i + j] = right[j]
        j += 1


def quick_sort(arr: MutableSequence[T], comparator: Comparator, rand: random.Random) -> None:
    """In-place, unstable quicksort with pivots drawn from ``rand``."""
    _check_inputs(arr, comparator)
    if rand is None:
        raise InvalidArgumentError("The random source for pivots cannot be None.")
    _quick_sort(arr, 0, len(arr) - 1, comparator, rand)


def _quick_sort(
    arr: MutableSequence[T], start: int, end: int, comparator: Comparator, rand: random.Random
) -> None:
    if end - start < 1:
        return
    if end - start == 1:
        if comparator(arr[start], arr[end]) > 0:
            arr[start], arr[end] = arr[end], arr[start]
        return

    pivot_index = rand.randint(start, end)
    pivot = arr[pivot_index]
    arr[start], arr[pivot_index] = arr[pivot_index], arr[start]

    i, j = start + 1, end
    while i <= j:
        while i <= j and comparator(arr[i], pivot) <= 0:
            i += 1
        while j >= i and comparator(arr[j], pivot) >= 0:
            j -= 1
        if i <= j:
            arr[i], arr[j] = arr[j], arr[i]
            i += 1
            j -= 1

    arr[start], arr[j] = arr[j], arr[start]
    _quick_sort(arr, start, j - 1, comparator, rand)
    _quick_sort(arr, j + 1, end, comparator, rand)


def _digit(value: int, place: int) -> int:
    # truncates toward zero so negative numbers yield negative digits
    sign = -1 if value < 0 else 1
    return sign * (abs(value) // place % 10)


def lsd_radix_sort(arr: MutableSequence[int]) -> None:
    """Least-significant-digit radix sort for ints, negatives included.

    Uses 19 buckets for digits -9..9; stable, O(kn) for k digits in the
    largest magnitude.
    """
    if arr is None:
        raise InvalidArgumentError("The array to sort cannot be None.")
    if not arr:
        return

    passes = max(len(str(abs(value))) for value in arr)
    place = 1
    for _ in range(passes):
        buckets: List[List[int]] = [[] for _ in range(19)]
        for value in arr:
            buckets[_digit(value, place) + 9].append(value)
        index = 0
        for bucket in buckets:
            for value in bucket:
                arr[index] = value
                index += 1
        place *= 10


def heap_sort(data: Sequence[int]) -> List[int]:
    """Return a new ascending list, built with a bottom-up heapify."""
    if data is None:
        raise InvalidArgumentError("The data to sort cannot be None.")
    heap = list(data)
    heapify(heap)
    return [heappop(heap) for _ in range(len(heap))]
