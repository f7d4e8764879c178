from typing import List

from algorithms.step import Producer, domain


def shell_sort(arr: List[int]) -> Producer:
    """Gapped insertion sort, halving the gap each round."""
    n = len(arr)
    yield domain(list(arr), description="Starting Shell Sort")

    gap = n // 2
    while gap > 0:
        yield domain(list(arr), description=f"Gap size: {gap}")

        for i in range(gap, n):
            temp = arr[i]
            yield domain(list(arr), [i], description=f"Current element: {temp}")

            j = i
            while j >= gap and arr[j - gap] > temp:
                yield domain(list(arr), [j, j - gap], description=f"Comparing {arr[j - gap]} > {temp}")
                arr[j] = arr[j - gap]
                yield domain(list(arr), [j, j - gap], description=f"Moving {arr[j]} to position {j}")
                j -= gap

            arr[j] = temp
            yield domain(list(arr), [j], description=f"Placed {temp} at position {j}")
        gap //= 2

    yield domain(list(arr), description="Sorting completed!")
