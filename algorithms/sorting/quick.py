"""
quick.py — Quick Sort
=====================
Lomuto partition with the last element as pivot. `_partition` is a
generator that *returns* the pivot's final index, collected by the
caller through `yield from`.
"""

from typing import List

from algorithms.step import Producer, domain


def quick_sort(arr: List[int]) -> Producer:
    yield domain(list(arr), description="Starting Quick Sort")
    yield from _sort(arr, 0, len(arr) - 1)
    yield domain(list(arr), description="Sorting completed!")


def _sort(arr: List[int], low: int, high: int) -> Producer:
    if low < high:
        pivot_idx = yield from _partition(arr, low, high)
        yield from _sort(arr, low, pivot_idx - 1)
        yield from _sort(arr, pivot_idx + 1, high)


def _partition(arr: List[int], low: int, high: int):
    pivot = arr[high]
    i = low - 1
    yield domain(list(arr), [high], description=f"Pivot selected: {pivot}")

    for j in range(low, high):
        yield domain(list(arr), [j, high], description=f"Comparing {arr[j]} with pivot {pivot}")
        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
            yield domain(list(arr), [i, j], description=f"Swapping {arr[i]} and {arr[j]}")

    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    yield domain(list(arr), [i + 1, high], description="Moving pivot to correct position")
    return i + 1
