import numpy as np
from matplotlib import pyplot as plt

from classic_structures import MaxHeap
from classic_structures.viz import tree_positions, draw_heap


def test_tree_positions():
    positions = tree_positions(4)
    assert np.allclose(positions[0], [0.5, 0])
    assert np.allclose(positions[1], [0.25, -1])
    assert np.allclose(positions[2], [0.75, -1])
    assert np.allclose(positions[3], [0.125, -2])


def test_draw_heap():
    heap = MaxHeap([4, 8, 1, 6])
    ax = draw_heap(heap)
    assert len(ax.lines) == 3
    assert [t.get_text() for t in ax.texts] == ["8", "6", "1", "4"]
    plt.close(ax.figure)
