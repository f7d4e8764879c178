"""
riffle.py — Riffle Shuffle
==========================
Gilbert–Shannon–Reeds model: cut the deck near the middle, then drop
cards from either half with probability proportional to the half's
remaining size. Three riffles are performed.
"""

import random
from typing import List

from algorithms.step import Producer, domain

RIFFLE_COUNT = 3


def riffle_shuffle(arr: List[int]) -> Producer:
    n = len(arr)
    yield domain(list(arr), description="Starting: sorted array")

    for r in range(1, RIFFLE_COUNT + 1):
        cut = n // 2 + int(random.random() * (n / 5)) - n // 10
        cut = max(0, min(n, cut))
        left, right = arr[:cut], arr[cut:]
        yield domain(list(arr), [min(cut, n - 1)], description=f"Riffle {r}: cutting deck at index {cut}")

        merged: List[int] = []
        li = ri = 0
        while li < len(left) or ri < len(right):
            if li < len(left) and ri < len(right):
                left_size  = len(left) - li
                right_size = len(right) - ri
                pick_left  = random.random() < left_size / (left_size + right_size)
            else:
                pick_left = li < len(left)

            if pick_left:
                merged.append(left[li])
                li += 1
            else:
                merged.append(right[ri])
                ri += 1

        arr[:] = merged
        yield domain(list(arr), description=f"Riffle {r} completed")

    yield domain(list(arr), description="Shuffling completed!")
