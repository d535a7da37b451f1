from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Iterable, Optional, Any


@dataclass(eq=False)
class Node:
    data: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list that grows at the head."""

    def __init__(self, initial_values: Optional[Iterable[Any]] = None):
        self.head: Optional[Node] = None
        self.length = 0
        if initial_values is not None:
            for value in initial_values:
                self.prepend(value)

    def prepend(self, value: Any) -> Node:
        node = Node(value, self.head)
        self.head = node
        self.length += 1
        return node

    def delete_head(self) -> None:
        if self.head is None:
            return
        self.head = self.head.next
        self.length -= 1

    def delete_all_by_value(self, value: Any) -> None:
        while self.head is not None and self.head.data == value:
            self.delete_head()
        if self.head is None:
            return

        prev = self.head
        while prev.next is not None:
            if prev.next.data == value:
                prev.next = prev.next.next
                self.length -= 1
            else:
                prev = prev.next

    def search(self, value: Any) -> Optional[Node]:
        """First node holding `value`, or None."""
        for node in self._nodes():
            if node.data == value:
                return node
        return None

    def to_list(self) -> list[Any]:
        return list(self)

    def print(self) -> None:
        if self.head is None:
            return
        print(self)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self.length

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def __str__(self):
        return " ".join(str(value) for value in self)

    def __repr__(self):
        return f"LinkedList({self.to_list()!r})"
