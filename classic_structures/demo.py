from __future__ import annotations

import argparse
from typing import Callable, Iterable, Optional, Sequence

import numpy as np

from .linked_list import LinkedList
from .structs import MaxHeap, EmptyHeapError, heapsort
from .viz import show_heap

DEFAULT_HEAP_ITEMS = (10, 20, 30, 5, 7, 9, 11, 13, 15, 17)
DEFAULT_LIST_ITEMS = (9, 32, 52, 62, 3, 235, 351, 52, 11)
SEPARATOR = "=-" * 18 + "="


def random_items(
    count: int,
    *,
    low: int = 0,
    high: int = 100,
    rng: Optional[np.random.Generator] = None,
) -> list[int]:
    if rng is None:
        rng = np.random.default_rng()
    return [int(v) for v in rng.integers(low, high, size=count)]


def heap_demo(
    items: Iterable[int] = DEFAULT_HEAP_ITEMS,
    extractions: int = 5,
    *,
    check: bool = False,
    out: Callable[[str], None] = print,
) -> tuple[MaxHeap[int], list[int]]:
    """Fill a heap one key at a time, then drain part of it, printing each state."""
    heap = MaxHeap[int]()

    for item in items:
        heap.insert(item)
        out(f"insert {item}: {heap}")
        if check and not heap.is_valid():
            raise RuntimeError(f"heap order broken after inserting {item}: {heap}")

    extracted = []
    for _ in range(extractions):
        try:
            value = heap.extract_max()
        except EmptyHeapError:
            out("extract_max: heap is empty")
            continue
        extracted.append(value)
        out(f"extract_max -> {value}: {heap}")
        if check and not heap.is_valid():
            raise RuntimeError(f"heap order broken after extracting {value}: {heap}")

    return heap, extracted


def linked_list_demo(
    items: Iterable[int] = DEFAULT_LIST_ITEMS,
    *,
    out: Callable[[str], None] = print,
) -> LinkedList:
    linked_list = LinkedList(items)

    def show(lst: LinkedList, label: str = "Linked list") -> None:
        if lst:
            out(str(lst))
        out(f"{label} length is: {len(lst)}")
        out(SEPARATOR)

    show(linked_list)

    for value, note in ((52, ""), (500, "; no node holds it"), (11, "; target is head node")):
        out(f"Deleting by data = {value}{note}")
        linked_list.delete_all_by_value(value)
        show(linked_list)

    out("Deleting head")
    linked_list.delete_head()
    show(linked_list)

    for value in (235, 666):
        out(f"Searching for {value}")
        node = linked_list.search(value)
        out(f"search result: {node.data if node is not None else None}")
        out(SEPARATOR)

    out("Empty list")
    empty_list = LinkedList()
    empty_list.delete_all_by_value(10)
    empty_list.delete_head()
    show(empty_list, "Empty linked list")

    return linked_list


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classic-structures",
        description="Walk through a binary max-heap or a singly linked list.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    heap_parser = subparsers.add_parser("heap", help="insert keys then extract the maximum")
    heap_parser.add_argument("--items", type=int, nargs="+", default=list(DEFAULT_HEAP_ITEMS))
    heap_parser.add_argument("--random", type=int, metavar="N", help="use N random keys instead of --items")
    heap_parser.add_argument("--seed", type=int, default=None)
    heap_parser.add_argument("--extractions", type=int, default=5)
    heap_parser.add_argument("--check", action="store_true", help="verify heap order after every step")
    heap_parser.add_argument("--plot", action="store_true", help="draw the final heap")

    sort_parser = subparsers.add_parser("heapsort", help="sort keys in non-increasing order")
    sort_parser.add_argument("values", type=int, nargs="*")
    sort_parser.add_argument("--random", type=int, metavar="N")
    sort_parser.add_argument("--seed", type=int, default=None)
    sort_parser.add_argument("--progress", action="store_true")

    list_parser = subparsers.add_parser("linked-list", help="prepend, delete and search a linked list")
    list_parser.add_argument("--items", type=int, nargs="+", default=list(DEFAULT_LIST_ITEMS))

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "heap":
        items = args.items
        if args.random is not None:
            items = random_items(args.random, rng=np.random.default_rng(args.seed))
        heap, _ = heap_demo(items, args.extractions, check=args.check)
        if args.plot:
            show_heap(heap)
    elif args.command == "heapsort":
        values = args.values
        if args.random is not None:
            values = random_items(args.random, rng=np.random.default_rng(args.seed))
        print(heapsort(values, progress=args.progress))
    else:
        linked_list_demo(args.items)

    return 0
