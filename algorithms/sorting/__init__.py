"""
algorithms/sorting/
-------------------
Comparison sorts over a flat list of ints, drawn as a bar chart.

Every sort mutates the list it is handed (the engine's logical state) and
yields `domain(list(arr), …)` copies, so each snapshot is both a complete
frame and the authoritative array at that instant.
"""

import random
from typing import List, Optional

MIN_SIZE     = 2
MAX_SIZE     = 100
DEFAULT_SIZE = 20


def random_values(size: Optional[int] = None) -> List[int]:
    """`size` random bar heights in 10–89, size clamped to [2, 100]."""
    size = DEFAULT_SIZE if size is None else max(MIN_SIZE, min(MAX_SIZE, int(size)))
    return [random.randint(10, 89) for _ in range(size)]
