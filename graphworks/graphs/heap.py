"""
Array-backed binary min-heaps.

BinaryHeap stores plain integers in a fixed-capacity numpy array whose unused
slots hold ``BinaryHeap.INFINITY``; it doubles its capacity when full.
BinaryHeapEdge stores weighted edges in a list, ordered by weight, and is the
priority queue behind Prim's algorithm and the heap-driven Dijkstra.

Both use the standard complete-binary-tree index mapping: the parent of ``i``
is ``(i - 1) // 2`` and its children are ``2i + 1`` and ``2i + 2``.

Complexity: insert and remove are O(log n); peek is O(1).
"""

from typing import List, Optional, Tuple

import numpy as np

from ..diagnostics.core import assert_heap_valid, is_heap_valid
from ..diagnostics.debug_mode import run_check
from ..logging import get_logger
from .primitives import Edge

logger = get_logger(__name__)


def parent_index(index: int) -> int:
    return (index - 1) // 2


def left_child_index(index: int) -> int:
    return 2 * index + 1


class BinaryHeap:
    """
    Min-heap of integers in a fixed-capacity array.

    ``remove()`` on an empty heap raises IndexError, as ``list.pop()`` and
    ``heapq.heappop()`` do.

    Example:
        >>> heap = BinaryHeap()
        >>> for value in [4, 10, 8, 6, 3]:
        ...     _ = heap.insert(value)
        >>> [heap.remove() for _ in range(len(heap))]
        [3, 4, 6, 8, 10]
    """

    INFINITY = int(np.iinfo(np.int64).max)

    def __init__(self, capacity: int = 32):
        if capacity < 1:
            raise ValueError(f"Heap capacity must be positive, got {capacity}")
        self._nodes = np.full(capacity, self.INFINITY, dtype=np.int64)
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def _resize(self) -> None:
        old_capacity = len(self._nodes)
        grown = np.full(2 * old_capacity, self.INFINITY, dtype=np.int64)
        grown[:old_capacity] = self._nodes
        self._nodes = grown
        logger.debug("Heap capacity grown from %d to %d", old_capacity, len(grown))

    def insert(self, value: int) -> bool:
        """
        Insert a value as the next leaf and sift it up.

        Returns:
            Always True; the array grows when full.

        Raises:
            ValueError: If value is not an integer representable as int64.
        """
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"BinaryHeap stores integers, got {value!r}")
        bounds = np.iinfo(np.int64)
        if not bounds.min <= value <= bounds.max:
            raise ValueError(f"Value {value} does not fit in int64")

        if self._size >= len(self._nodes):
            self._resize()

        self._nodes[self._size] = value
        self._sift_up(self._size)
        self._size += 1

        run_check(assert_heap_valid, self)
        return True

    def remove(self) -> int:
        """
        Remove and return the minimum.

        The last leaf moves to the root and is sifted down.

        Raises:
            IndexError: If the heap is empty.
        """
        if self._size == 0:
            raise IndexError("remove from an empty heap")

        root = int(self._nodes[0])
        self._size -= 1
        self._nodes[0] = self._nodes[self._size]
        self._nodes[self._size] = self.INFINITY
        self._sift_down(0)

        run_check(assert_heap_valid, self)
        return root

    def peek(self) -> int:
        """
        Return the minimum without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if self._size == 0:
            raise IndexError("peek at an empty heap")
        return int(self._nodes[0])

    def is_leaf(self, index: int) -> bool:
        return left_child_index(index) >= self._size

    def _best_child(self, index: int) -> Optional[int]:
        if self.is_leaf(index):
            return None
        left = left_child_index(index)
        right = left + 1
        if right >= self._size or self._nodes[left] <= self._nodes[right]:
            return left
        return right

    def _swap(self, i: int, j: int) -> None:
        self._nodes[i], self._nodes[j] = self._nodes[j], self._nodes[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = parent_index(index)
            if self._nodes[parent] <= self._nodes[index]:
                break
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index: int) -> None:
        while True:
            child = self._best_child(index)
            if child is None or self._nodes[index] <= self._nodes[child]:
                break
            self._swap(index, child)
            index = child

    def keys(self) -> List[int]:
        """Ordering keys in array order (the values themselves)."""
        return self._nodes[: self._size].tolist()

    def to_list(self) -> List[int]:
        """Stored values in array (level) order."""
        return self.keys()

    def is_valid(self) -> bool:
        """Return True if every internal node is <= both of its children."""
        return is_heap_valid(self)

    def __repr__(self) -> str:
        return f"BinaryHeap({self.to_list()})"


class BinaryHeapEdge:
    """
    Min-heap of weighted edges, keyed by weight.

    Edges of equal weight leave the heap in insertion order: each entry
    carries a sequence number that breaks ties.

    Example:
        >>> heap = BinaryHeapEdge()
        >>> _ = heap.insert(0, 1, 5)
        >>> _ = heap.insert(0, 2, 2)
        >>> heap.remove()
        Edge(u=0, v=2, weight=2)
    """

    def __init__(self):
        self._entries: List[Tuple[int, int, Edge]] = []
        self._counter = 0

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def _key(self, index: int) -> Tuple[int, int]:
        weight, seq, _ = self._entries[index]
        return weight, seq

    def insert(self, u: int, v: int, weight: int) -> bool:
        """
        Insert the edge ``(u, v, weight)`` as the next leaf and sift it up.

        Returns:
            Always True.
        """
        self._entries.append((weight, self._counter, Edge(u, v, weight)))
        self._counter += 1
        self._sift_up(len(self._entries) - 1)

        run_check(assert_heap_valid, self)
        return True

    def remove(self) -> Edge:
        """
        Remove and return the edge of minimum weight.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._entries:
            raise IndexError("remove from an empty heap")

        root = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._entries[0] = last
            self._sift_down(0)

        run_check(assert_heap_valid, self)
        return root[2]

    def peek(self) -> Edge:
        """
        Return the edge of minimum weight without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._entries:
            raise IndexError("peek at an empty heap")
        return self._entries[0][2]

    def is_leaf(self, index: int) -> bool:
        return left_child_index(index) >= len(self._entries)

    def _best_child(self, index: int) -> Optional[int]:
        if self.is_leaf(index):
            return None
        left = left_child_index(index)
        right = left + 1
        if right >= len(self._entries) or self._key(left) <= self._key(right):
            return left
        return right

    def _swap(self, i: int, j: int) -> None:
        self._entries[i], self._entries[j] = self._entries[j], self._entries[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = parent_index(index)
            if self._key(parent) <= self._key(index):
                break
            self._swap(parent, index)
            index = parent

    def _sift_down(self, index: int) -> None:
        while True:
            child = self._best_child(index)
            if child is None or self._key(index) <= self._key(child):
                break
            self._swap(index, child)
            index = child

    def keys(self) -> List[int]:
        """Edge weights in array order."""
        return [weight for weight, _, _ in self._entries]

    def to_list(self) -> List[Edge]:
        """Stored edges in array (level) order."""
        return [edge for _, _, edge in self._entries]

    def is_valid(self) -> bool:
        """Return True if every internal edge weighs <= both of its children."""
        return is_heap_valid(self)

    def __repr__(self) -> str:
        return f"BinaryHeapEdge({self.to_list()})"
