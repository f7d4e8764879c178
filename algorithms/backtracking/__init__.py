"""
algorithms/backtracking/
------------------------
Depth-first searches that undo choices on failure. Recursive helpers are
generators returning a success flag through `yield from`.
"""
