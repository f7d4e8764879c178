"""
subset_sum.py — Subset Sum
==========================
Include/exclude backtracking over a list of small positive ints.

The target is drawn at run time from a random subset of the input, so a
solution always exists; the exhaustion branch is kept for hand-built
inputs.
"""

import random
from typing import List, Optional

from algorithms.step import Producer, domain

DEFAULT_SIZE = 10
MAX_SIZE     = 30


def random_numbers(size: Optional[int] = None) -> List[int]:
    size = DEFAULT_SIZE if size is None else max(1, min(MAX_SIZE, int(size)))
    return [random.randint(1, 20) for _ in range(size)]


def pick_target(arr: List[int]) -> int:
    subset = [x for x in arr if random.random() > 0.5]
    if not subset and arr:
        subset = [arr[0]]
    return sum(subset)


def subset_sum(arr: List[int], target: Optional[int] = None) -> Producer:
    if target is None:
        target = pick_target(arr)
    yield domain(list(arr), description=f"Generated target: {target}. Looking for subset...")

    found = yield from _backtrack(arr, target, 0, 0, [])

    if not found:
        yield domain(list(arr), description="No solution found (search exhausted).")


def _backtrack(arr: List[int], target: int, index: int, current: int, chosen: List[int]):
    focus = chosen + [index] if index < len(arr) else list(chosen)
    checking = f"checking index {index} ({arr[index]})" if index < len(arr) else "no numbers left"
    yield domain(list(arr), focus, description=f"Target: {target} | Current sum: {current} | {checking}")

    if current == target:
        yield domain(list(arr), chosen, description=f"SOLUTION FOUND! Subset sums to {target}.")
        return True

    if index >= len(arr) or current > target:
        return False

    # include
    chosen.append(index)
    if (yield from _backtrack(arr, target, index + 1, current + arr[index], chosen)):
        return True

    # exclude
    chosen.pop()
    return (yield from _backtrack(arr, target, index + 1, current, chosen))
