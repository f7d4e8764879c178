import random
from typing import List

from algorithms.step import Producer, domain


def sattolo_shuffle(arr: List[int]) -> Producer:
    """Fisher–Yates with j drawn from [0, i): always yields a single n-cycle."""
    yield domain(list(arr), description="Starting: sorted array")

    for i in range(len(arr) - 1, 0, -1):
        j = random.randrange(i)
        yield domain(list(arr), [i, j], description=f"Selected index {i} and random index {j} (excluding {i})")
        arr[i], arr[j] = arr[j], arr[i]
        yield domain(list(arr), [i, j], description=f"Swapped elements at {i} and {j}")

    yield domain(list(arr), description="Cyclic shuffle completed!")
