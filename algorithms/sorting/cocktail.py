"""
cocktail.py — Cocktail Shaker Sort
==================================
Bidirectional bubble sort: a forward pass floats the maximum to the end,
a backward pass sinks the minimum to the front, and both bounds shrink.
"""

from typing import List

from algorithms.step import Producer, domain


def cocktail_shaker_sort(arr: List[int]) -> Producer:
    start, end = 0, len(arr) - 1
    swapped = True
    yield domain(list(arr), description="Starting Cocktail Shaker Sort")

    while swapped:
        swapped = False

        # forward
        for i in range(start, end):
            yield domain(list(arr), [i, i + 1], description=f"Forward: comparing {arr[i]} and {arr[i + 1]}")
            if arr[i] > arr[i + 1]:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
                swapped = True
                yield domain(list(arr), [i, i + 1], description=f"Forward: swapping {arr[i]} and {arr[i + 1]}")

        if not swapped:
            break

        swapped = False
        end -= 1

        # backward
        for i in range(end - 1, start - 1, -1):
            yield domain(list(arr), [i, i + 1], description=f"Backward: comparing {arr[i]} and {arr[i + 1]}")
            if arr[i] > arr[i + 1]:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
                swapped = True
                yield domain(list(arr), [i, i + 1], description=f"Backward: swapping {arr[i]} and {arr[i + 1]}")
        start += 1

    yield domain(list(arr), description="Sorting completed!")
