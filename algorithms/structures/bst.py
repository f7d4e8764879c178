"""
bst.py — Interactive Binary Search Tree
=======================================
The logical state is a `BinarySearchTree` holder, not a bare root node:
inserting into an empty tree then mutates `tree.root` in place like every
other insert, and each frame is a graph projection of the current tree.

Duplicates go to the right subtree.
"""

import uuid
from typing import List, Optional, Sequence

from algorithms.step import Producer, projection
from projection.graph import GraphProjection
from projection.node import Tint

ROOT_X       = 400
ROOT_Y       = 50
LEVEL_HEIGHT = 60
ROOT_OFFSET  = 180
SHRINK       = 1.6


class TreeNode:
    __slots__ = ("id", "value", "left", "right")

    def __init__(self, value):
        self.id: str                      = f"node-{value}-{str(uuid.uuid4())[:5]}"
        self.value                        = value
        self.left: Optional["TreeNode"]   = None
        self.right: Optional["TreeNode"]  = None


class BinarySearchTree:
    def __init__(self):
        self.root: Optional[TreeNode] = None
        self.size: int                = 0

    def in_order(self) -> List:
        out: List = []

        def walk(node: Optional[TreeNode]):
            if node is None:
                return
            walk(node.left)
            out.append(node.value)
            walk(node.right)

        walk(self.root)
        return out

    def to_dict(self) -> dict:
        return {"in_order": self.in_order(), "size": self.size}

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"


def empty_tree(size: Optional[int] = None) -> BinarySearchTree:
    return BinarySearchTree()


def draw_tree(tree: BinarySearchTree, active: Sequence[str] = ()) -> GraphProjection:
    graph = GraphProjection(directed=True)

    def place(node: TreeNode, x: float, y: float, offset: float):
        graph.create_node(
            x=x, y=y, value=node.value, node_id=node.id,
            color=Tint.CANDIDATE if node.id in active else None, is_active=node.id in active,
        )
        if node.left is not None:
            graph.create_edge(node.id, node.left.id)
            place(node.left, x - offset, y + LEVEL_HEIGHT, offset / SHRINK)
        if node.right is not None:
            graph.create_edge(node.id, node.right.id)
            place(node.right, x + offset, y + LEVEL_HEIGHT, offset / SHRINK)

    if tree.root is not None:
        place(tree.root, ROOT_X, ROOT_Y, ROOT_OFFSET)
    return graph


def insert(tree: BinarySearchTree, value=None) -> Producer:
    if value is None:
        yield projection(draw_tree(tree), description="Nothing inserted: no value given.")
        return

    new_node = TreeNode(value)

    if tree.root is None:
        tree.root = new_node
        tree.size += 1
        yield projection(draw_tree(tree, [new_node.id]), active=new_node.id,
                         description=f"Tree empty. {value} becomes root.")
        yield projection(draw_tree(tree), description="Ready")
        return

    current = tree.root
    while True:
        yield projection(draw_tree(tree, [current.id]), active=current.id,
                         description=f"Comparing {value} vs {current.value}")
        if value < current.value:
            if current.left is None:
                current.left = new_node
                side = "left"
                break
            current = current.left
        else:
            if current.right is None:
                current.right = new_node
                side = "right"
                break
            current = current.right

    tree.size += 1
    yield projection(draw_tree(tree, [new_node.id]), active=new_node.id,
                     description=f"Inserted {value} {side} of {current.value}")
    yield projection(draw_tree(tree), description="Ready")
