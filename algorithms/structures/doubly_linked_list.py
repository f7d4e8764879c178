"""
doubly_linked_list.py — Interactive Doubly Linked List
======================================================
Real linked nodes with `next` / `prev` pointers. Each link is drawn as
two arrows (next above, prev below); the head is purple, the tail pink.
"""

import uuid
from typing import Iterator, List, Optional

from algorithms.step import Producer, projection
from projection.graph import GraphProjection
from projection.node import Tint

START_X = 100
ROW_Y   = 200
SPACING = 120


class ListNode:
    __slots__ = ("id", "value", "next", "prev")

    def __init__(self, value):
        self.id: str                      = f"dll-{str(uuid.uuid4())[:5]}"
        self.value                        = value
        self.next: Optional["ListNode"]   = None
        self.prev: Optional["ListNode"]   = None

    def __repr__(self) -> str:
        return f"ListNode({self.value})"


class DoublyLinkedList:
    """Head/tail pointers plus a running size."""

    def __init__(self, values=()):
        self.head: Optional[ListNode] = None
        self.tail: Optional[ListNode] = None
        self.size: int                = 0
        for v in values:
            self.append_node(ListNode(v))

    def prepend_node(self, node: ListNode):
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self.size += 1

    def append_node(self, node: ListNode):
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            node.prev = self.tail
            self.tail = node
        self.size += 1

    def remove_head(self) -> Optional[ListNode]:
        node = self.head
        if node is None:
            return None
        if node is self.tail:
            self.head = self.tail = None
        else:
            self.head = node.next
            self.head.prev = None
            node.next = None
        self.size -= 1
        return node

    def __iter__(self) -> Iterator[ListNode]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def values(self) -> List:
        return [node.value for node in self]

    def to_dict(self) -> dict:
        return {"values": self.values(), "size": self.size}

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({self.values()})"


def starter_list(size: Optional[int] = None) -> DoublyLinkedList:
    return DoublyLinkedList([10, 20, 30])


def draw_list(lst: DoublyLinkedList, active_id: Optional[str] = None) -> GraphProjection:
    graph = GraphProjection(directed=True)
    for idx, node in enumerate(lst):
        if node is lst.head:
            colour = Tint.HEAD
        elif node is lst.tail:
            colour = Tint.TAIL
        else:
            colour = None
        graph.create_node(
            x=START_X + idx * SPACING, y=ROW_Y, value=node.value, node_id=node.id,
            color=colour, is_active=node.id == active_id,
        )
        if node.next is not None:
            graph.create_edge(node.id, node.next.id, color=Tint.LINK)
            graph.create_edge(node.next.id, node.id, color=Tint.MUTED)
    return graph


def prepend(lst: DoublyLinkedList, value=None) -> Producer:
    if value is None:
        yield projection(draw_list(lst), description="Nothing prepended: no value given.")
        return
    node = ListNode(value)
    lst.prepend_node(node)
    yield projection(draw_list(lst, node.id), active=node.id, description=f"Prepended {value} to head")
    yield projection(draw_list(lst), description="Ready")


def append(lst: DoublyLinkedList, value=None) -> Producer:
    if value is None:
        yield projection(draw_list(lst), description="Nothing appended: no value given.")
        return
    node = ListNode(value)
    lst.append_node(node)
    yield projection(draw_list(lst, node.id), active=node.id, description=f"Appended {value} to tail")
    yield projection(draw_list(lst), description="Ready")


def delete_head(lst: DoublyLinkedList) -> Producer:
    if lst.head is None:
        yield projection(draw_list(lst), description="List is empty: no head to delete.")
        return

    head = lst.head
    yield projection(draw_list(lst, head.id), active=head.id, description=f"Deleting head: {head.value}")
    lst.remove_head()
    yield projection(draw_list(lst), description="Head deleted")
