from typing import List

from algorithms.step import Producer, domain


def insertion_sort(arr: List[int]) -> Producer:
    """Grow a sorted prefix by shifting each key left into place."""
    yield domain(list(arr), description="Starting Insertion Sort")

    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        yield domain(list(arr), [i], description=f"Selected key: {key}")

        while j >= 0 and arr[j] > key:
            yield domain(list(arr), [j, j + 1], description=f"{arr[j]} is larger than {key}, moving right")
            arr[j + 1] = arr[j]
            j -= 1
            yield domain(list(arr), [j + 1], description="Shifted")

        arr[j + 1] = key
        yield domain(list(arr), [j + 1], description=f"Inserted {key} at correct position")

    yield domain(list(arr), description="Sorted!")
