"""A minimal singly linked list node and a short demonstration."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One cell of a singly linked list."""

    item: Any
    next: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        node: ListNode | None = self
        while node is not None:
            yield node.item
            node = node.next


def demonstrate_linked_list() -> str:
    """Link two nodes, print what they hold and return the printed text."""
    second = ListNode(200)
    first = ListNode(100, second)
    text = (
        "Linked list demonstration:\n"
        f"Node 1: {first.item}\n"
        f"Node 2: {first.next.item}\n"
    )
    print(text, end="")
    return text