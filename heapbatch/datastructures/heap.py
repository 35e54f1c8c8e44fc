from __future__ import annotations
from enum import Enum
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ..errors import EmptyHeapError
from .dynamic_array import DynamicArray

T = TypeVar("T")

# Outcomes of Heap._heap_compare
NOT_SATISFIED = -1
EQUAL = 0
SATISFIED = 1


class HeapType(Enum):
    """Which extreme element sits at the root of a heap."""

    MIN = "min"
    MAX = "max"


def parent_index(i: int) -> int:
    return (i - 1) // 2


def left_child_index(i: int) -> int:
    return 2 * i + 1


def right_child_index(i: int) -> int:
    return 2 * i + 2


class Heap(Generic[T]):
    """A binary heap over totally ordered values, min- or max-first.

    The ordering is fixed at construction and defaults to ``HeapType.MAX``.
    Elements with equal keys come out in no particular order.

    Not thread-safe: share an instance between threads only under an
    external lock.
    """

    __slots__ = ("_type", "_data")

    def __init__(self, heap_type: HeapType = HeapType.MAX, it: Optional[Iterable[T]] = None) -> None:
        self._type = heap_type
        self._data: DynamicArray[T] = DynamicArray()
        if it is not None:
            for v in it:
                self.insert(v)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _heap_compare(self, one: T, two: T) -> int:
        """Three-way compare of `one` against `two`, inverted for a min-heap.

        SATISFIED means `one` belongs closer to the root than `two`.
        """
        if one > two:  # type: ignore[operator]
            val = SATISFIED
        elif one < two:  # type: ignore[operator]
            val = NOT_SATISFIED
        else:
            return EQUAL
        return -val if self._type is HeapType.MIN else val

    def _sift_up(self, idx: int) -> None:
        data = self._data
        while idx > 0:
            parent = parent_index(idx)
            if self._heap_compare(data[parent], data[idx]) != NOT_SATISFIED:
                break
            data.swap(idx, parent)
            idx = parent

    def _down_heap_target(self, idx: int) -> int:
        """Return the child `idx` must swap with, or `idx` itself if none."""
        data = self._data
        n = len(data)
        left = left_child_index(idx)
        right = right_child_index(idx)
        if left >= n:
            return idx
        value = data[idx]
        left_value = data[left]
        if right >= n:
            if self._heap_compare(value, left_value) == NOT_SATISFIED:
                return left
            return idx
        right_value = data[right]
        if (
            self._heap_compare(left_value, right_value) == SATISFIED
            and self._heap_compare(value, left_value) == NOT_SATISFIED
        ):
            return left
        if self._heap_compare(value, right_value) == NOT_SATISFIED:
            return right
        return idx

    def _sift_down(self, idx: int) -> None:
        while True:
            target = self._down_heap_target(idx)
            if target == idx:
                break
            self._data.swap(idx, target)
            idx = target

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def heap_type(self) -> HeapType:
        return self._type

    def size(self) -> int:
        """Number of stored elements (O(1))."""
        return len(self._data)

    def insert(self, value: T) -> None:
        """Insert `value` and restore the heap property upward (O(log n))."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def peek(self) -> Optional[T]:
        """Return the root without removing it, or None when empty (O(1))."""
        return self._data[0] if self._data else None

    def remove(self) -> T:
        """Remove and return the root (O(log n)).

        Raises:
            EmptyHeapError: if the heap is empty.
        """
        data = self._data
        if not data:
            raise EmptyHeapError("heap is empty")
        data.swap(0, len(data) - 1)
        top = data.pop()
        if data:
            self._sift_down(0)
        return top

    def drain(self) -> Iterator[T]:
        """Yield and remove every element, root first."""
        while self._data:
            yield self.remove()

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def to_list(self) -> List[T]:
        """Copy of the backing storage, root first, in heap (not sorted) order."""
        return self._data.to_py()

    def __repr__(self) -> str:
        return f"Heap(heap_type={self._type.name}, size={len(self._data)})"


def heap_sort(values: Iterable[T], heap_type: HeapType = HeapType.MIN) -> List[T]:
    """Sort `values` through a heap: ascending for MIN, descending for MAX."""
    return list(Heap(heap_type, values).drain())
