import random
from typing import List

from algorithms.step import Producer, domain


def naive_shuffle(arr: List[int]) -> Producer:
    """Swap each position with any index of the whole array. Biased."""
    n = len(arr)
    yield domain(list(arr), description="Starting: sorted array")

    for i in range(n):
        j = random.randrange(n)
        yield domain(list(arr), [i, j], description=f"i={i}: swapping with random index {j} (from whole array)")
        arr[i], arr[j] = arr[j], arr[i]
        yield domain(list(arr), [i, j], description=f"Swapped elements at {i} and {j}")

    yield domain(list(arr), description="Shuffling completed (with likely bias)")
