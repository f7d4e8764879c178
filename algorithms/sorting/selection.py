from typing import List

from algorithms.step import Producer, domain


def selection_sort(arr: List[int]) -> Producer:
    """Repeatedly swap the minimum of the unsorted suffix into position i."""
    n = len(arr)
    yield domain(list(arr), description="Starting Selection Sort")

    for i in range(n):
        min_idx = i
        yield domain(list(arr), [i], description=f"Looking for minimum value starting from index {i}")

        for j in range(i + 1, n):
            yield domain(list(arr), [min_idx, j], description=f"Comparing current min {arr[min_idx]} with {arr[j]}")
            if arr[j] < arr[min_idx]:
                min_idx = j
                yield domain(list(arr), [min_idx], description=f"New minimum found: {arr[min_idx]}")

        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            yield domain(list(arr), [i, min_idx], description=f"Swapped minimum {arr[i]} to correct position")

    yield domain(list(arr), description="Sorted!")
