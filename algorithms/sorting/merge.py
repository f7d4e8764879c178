"""
merge.py — Merge Sort
=====================
Top-down merge sort. The recursive helpers are generators themselves and
are chained with `yield from`, so snapshots come out in plain depth-first
call order: left half, right half, then the merge.
"""

from typing import List

from algorithms.step import Producer, domain


def merge_sort(arr: List[int]) -> Producer:
    yield domain(list(arr), description="Starting Merge Sort")
    yield from _sort(arr, 0, len(arr) - 1)
    yield domain(list(arr), description="Sorting completed!")


def _sort(arr: List[int], lo: int, hi: int) -> Producer:
    if lo >= hi:
        return
    mid = lo + (hi - lo) // 2
    yield from _sort(arr, lo, mid)
    yield from _sort(arr, mid + 1, hi)
    yield from _merge(arr, lo, mid, hi)


def _merge(arr: List[int], lo: int, mid: int, hi: int) -> Producer:
    left  = arr[lo:mid + 1]
    right = arr[mid + 1:hi + 1]
    i = j = 0
    k = lo

    while i < len(left) and j < len(right):
        yield domain(list(arr), [lo + i, mid + 1 + j], description=f"Comparing {left[i]} and {right[j]}")
        if left[i] <= right[j]:
            arr[k] = left[i]
            i += 1
        else:
            arr[k] = right[j]
            j += 1
        yield domain(list(arr), [k], description=f"Merging: placed {arr[k]} at index {k}")
        k += 1

    while i < len(left):
        arr[k] = left[i]
        yield domain(list(arr), [k], description=f"Merging remaining left: placed {arr[k]} at index {k}")
        i += 1
        k += 1

    while j < len(right):
        arr[k] = right[j]
        yield domain(list(arr), [k], description=f"Merging remaining right: placed {arr[k]} at index {k}")
        j += 1
        k += 1
