from __future__ import annotations

from typing import Optional

import numpy as np
from matplotlib import pyplot as plt
from matplotlib.axes import Axes

from .structs import MaxHeap


def tree_positions(size: int) -> np.ndarray:
    """(x, y) of every array slot when drawn as its implicit binary tree."""
    positions = np.zeros((size, 2))
    for i in range(size):
        level = int(np.floor(np.log2(i + 1)))
        offset = i + 1 - 2**level
        positions[i] = ((offset + 0.5) / 2**level, -level)
    return positions


def draw_heap(heap: MaxHeap, ax: Optional[Axes] = None) -> Axes:
    if ax is None:
        _, ax = plt.subplots()

    positions = tree_positions(len(heap))
    for i in range(1, len(heap)):
        parent = heap.parent_index(i)
        ax.plot(
            [positions[parent, 0], positions[i, 0]],
            [positions[parent, 1], positions[i, 1]],
            color="gray",
            zorder=1,
        )
    for (x, y), value in zip(positions, heap):
        ax.scatter(x, y, s=600, color="white", edgecolors="black", zorder=2)
        ax.annotate(str(value), (x, y), ha="center", va="center", zorder=3)

    ax.set_axis_off()
    return ax


def show_heap(heap: MaxHeap) -> None:
    draw_heap(heap)
    plt.show()
