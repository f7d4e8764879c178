"""
algorithms/shuffling/
---------------------
Shuffles start from an evenly spaced ascending ramp so the disorder they
introduce is easy to see on the bar chart.
"""

from typing import List, Optional

MIN_SIZE     = 2
MAX_SIZE     = 100
DEFAULT_SIZE = 20


def ascending_ramp(size: Optional[int] = None) -> List[int]:
    size = DEFAULT_SIZE if size is None else max(MIN_SIZE, min(MAX_SIZE, int(size)))
    return [int(i / (size - 1) * 90) + 5 for i in range(size)]
