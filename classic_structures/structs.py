from __future__ import annotations
from typing import Iterator, Iterable, Generic, Optional
from typing import TypeVar

from tqdm import trange

from .type import Comparable

T = TypeVar("T", bound=Comparable)


class EmptyHeapError(IndexError):
    """Raised when the maximum of an empty heap is requested."""


class MaxHeap(Generic[T]):
    """Binary max-heap stored as a complete binary tree in a flat list.

    The children of index ``i`` sit at ``2i + 1`` and ``2i + 2`` and every
    parent is greater than or equal to its children, so ``heap[0]`` is the
    maximum. Not thread-safe.
    """

    def __init__(self, initial_heap: Optional[Iterable[T]] = None):
        self.heap: list[T] = []
        if initial_heap is not None:
            for item in initial_heap:
                self.insert(item)

    @staticmethod
    def parent_index(index: int) -> int:
        # clamped so the root never maps to a negative index
        return max(0, (index - 1) // 2)

    @staticmethod
    def left_index(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def right_index(index: int) -> int:
        return 2 * index + 2

    def insert(self, value: T) -> None:
        """Append `value` and bubble it up to its place."""
        self.heap.append(value)
        self.sift_up(len(self.heap) - 1)

    def extract_max(self) -> T:
        """Remove and return the largest key.

        Raises EmptyHeapError on an empty heap instead of returning a
        sentinel, so a stored ``0`` is never confused with "nothing".
        """
        if not self.heap:
            raise EmptyHeapError("extract_max from empty heap")

        root = self.heap[0]
        last = self.heap.pop()
        if self.heap:
            self.heap[0] = last
            self.sift_down(0)
        return root

    def peek_max(self) -> T:
        if not self.heap:
            raise EmptyHeapError("peek_max from empty heap")
        return self.heap[0]

    def sift_up(self, index: int) -> None:
        while index > 0:
            parent = self.parent_index(index)

            # Swap with parent if greater
            if self.heap[index] > self.heap[parent]:
                self.heap[index], self.heap[parent] = self.heap[parent], self.heap[index]
                index = parent
            else:
                break

    def sift_down(self, index: int) -> None:
        length = len(self.heap)

        while True:
            left = self.left_index(index)
            right = self.right_index(index)

            if left >= length:
                break
            chosen = left
            # left child wins ties
            if right < length and self.heap[right] > self.heap[left]:
                chosen = right

            if self.heap[chosen] > self.heap[index]:
                self.heap[chosen], self.heap[index] = self.heap[index], self.heap[chosen]
                index = chosen
            else:
                break

    def is_valid(self) -> bool:
        return all(
            not self.heap[i] > self.heap[self.parent_index(i)]
            for i in range(1, len(self.heap))
        )

    push = insert
    pop = extract_max
    peek = peek_max

    def size(self) -> int:
        return len(self.heap)

    def is_empty(self) -> bool:
        return len(self.heap) == 0

    def copy(self) -> MaxHeap[T]:
        new_heap = MaxHeap[T]()
        new_heap.heap = self.heap[:]
        return new_heap

    def __len__(self) -> int:
        return len(self.heap)

    def __bool__(self) -> bool:
        return bool(self.heap)

    def __iter__(self) -> Iterator[T]:
        return iter(self.heap)

    def __str__(self):
        return str(self.heap)

    def __repr__(self):
        return f"MaxHeap({self.heap!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaxHeap):
            return NotImplemented
        return self.heap == other.heap


def heapsort(values: Iterable[T], *, progress: bool = False) -> list[T]:
    """Return `values` in non-increasing order by draining a MaxHeap."""
    heap = MaxHeap[T](values)
    return [heap.extract_max() for _ in trange(len(heap), desc="Extracting", disable=not progress)]
