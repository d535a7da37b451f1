from importlib import metadata

from .structs import MaxHeap, EmptyHeapError, heapsort
from .linked_list import LinkedList, Node
from . import demo
from . import viz


__version__ = metadata.version("classic_structures")

__all__ = ["MaxHeap", "EmptyHeapError", "heapsort", "LinkedList", "Node", "demo", "viz"]
