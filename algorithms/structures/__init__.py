"""
algorithms/structures/
----------------------
Data structures drawn as primitive graphs.

The min-heap is autonomous (one `run`). Stack, queue, doubly linked list
and BST are interactive: each exposes named `methods`, every method call
is a short producer that mutates the persistent structure in place and
publishes freshly built graph projections of it.
"""
