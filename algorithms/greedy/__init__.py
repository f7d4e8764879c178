"""
algorithms/greedy/
------------------
Greedy graph algorithms drawn as primitive graphs. The input graph is the
logical state; each algorithm recolours it in place and publishes deep
copies.
"""
