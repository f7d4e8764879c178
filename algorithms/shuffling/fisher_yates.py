"""
fisher_yates.py — Fisher–Yates Shuffle
======================================
Walk i from the end down to 1 and swap arr[i] with a uniformly chosen
arr[j], j ∈ [0, i]. Every permutation is equally likely.
"""

import random
from typing import List

from algorithms.step import Producer, domain


def fisher_yates_shuffle(arr: List[int]) -> Producer:
    yield domain(list(arr), description="Starting: sorted array")

    for i in range(len(arr) - 1, 0, -1):
        j = random.randint(0, i)
        yield domain(list(arr), [i, j], description=f"Selected index {i} and random index {j}")
        arr[i], arr[j] = arr[j], arr[i]
        yield domain(list(arr), [i, j], description=f"Swapped elements at {i} and {j}")

    yield domain(list(arr), description="Shuffling completed!")
