from typing import List

from algorithms.step import Producer, domain


def gnome_sort(arr: List[int]) -> Producer:
    """Walk forward while ordered, swap and step back when not."""
    n = len(arr)
    index = 0
    yield domain(list(arr), description="Starting Gnome Sort")

    while index < n:
        if index == 0:
            index = 1
            if index >= n:
                break

        yield domain(list(arr), [index, index - 1], description=f"Comparing index {index} and {index - 1}")
        if arr[index] >= arr[index - 1]:
            index += 1
        else:
            arr[index], arr[index - 1] = arr[index - 1], arr[index]
            yield domain(list(arr), [index, index - 1], description=f"Swapping {arr[index]} and {arr[index - 1]}")
            index -= 1

    yield domain(list(arr), description="Sorting completed!")
