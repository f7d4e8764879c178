"""
bubble.py — Bubble Sort
=======================
Yields a snapshot for every adjacent comparison and every swap.
Stops early once a full pass makes no swap.
"""

from typing import List

from algorithms.step import Producer, domain


def bubble_sort(arr: List[int]) -> Producer:
    n = len(arr)
    yield domain(list(arr), description="Starting: unsorted array")

    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            yield domain(list(arr), [j, j + 1], description=f"Comparing {arr[j]} and {arr[j + 1]}")
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                yield domain(list(arr), [j, j + 1], description=f"Swapping {arr[j + 1]} and {arr[j]}")
        if not swapped:
            break

    yield domain(list(arr), description="Sorting completed!")
