from __future__ import annotations
import ctypes
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ..errors import InvalidIndexError

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """Growable contiguous storage backing the binary heap.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` sized to `capacity`.
    • Capacity doubles when full and halves once the array is a quarter full,
      never dropping below the initial capacity.
    • Only the tail is ever removed, so `pop()` is O(1).
    • `swap()` is strict about bounds: heap code calling it with a bad index
      is a bug, reported as InvalidIndexError.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    _INITIAL_CAPACITY = 4

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._capacity = self._INITIAL_CAPACITY
        self._buf = self._make_array(self._capacity)
        self._size = 0
        if it is not None:
            for v in it:
                self.append(v)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        if capacity <= 0:
            capacity = 1
        return (capacity * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move live elements into a fresh buffer of `new_capacity` slots."""
        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]

        self._buf = new_buf
        self._capacity = new_capacity

    def _normalize_index(self, idx: int) -> int:
        """Map negative indices and validate bounds; raises IndexError."""
        if idx < 0:
            idx += self._size
        if idx < 0 or idx >= self._size:
            raise IndexError("array index out of range")
        return idx

    def _valid_index(self, idx: int) -> bool:
        return 0 <= idx < self._size

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, value: T) -> None:
        """Append `value` at the tail. Amortized O(1)."""
        if self._size >= self._capacity:
            self._resize(self._capacity * 2)
        self._buf[self._size] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the tail element.

        Raises:
            IndexError: if the array is empty.
        """
        if self._size == 0:
            raise IndexError("pop from empty array")

        self._size -= 1
        val = self._buf[self._size]
        self._buf[self._size] = None

        if self._capacity > self._INITIAL_CAPACITY and self._size <= self._capacity // 4:
            self._resize(max(self._INITIAL_CAPACITY, self._capacity // 2))

        return val  # type: ignore[return-value]

    def swap(self, one: int, two: int) -> None:
        """Exchange the elements at positions `one` and `two`.

        Raises:
            InvalidIndexError: if either index is outside ``[0, len)``.
        """
        if not self._valid_index(one) or not self._valid_index(two):
            raise InvalidIndexError(f"invalid indexes {one} {two} in size {self._size}")
        buf = self._buf
        buf[one], buf[two] = buf[two], buf[one]

    def clear(self) -> None:
        """Drop all elements and return to the initial capacity."""
        self._capacity = self._INITIAL_CAPACITY
        self._buf = self._make_array(self._capacity)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._normalize_index(idx)]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: T) -> None:
        self._buf[self._normalize_index(idx)] = value

    def to_py(self) -> List[T]:
        """Copy the live elements into a plain Python list."""
        return [self._buf[i] for i in range(self._size)]

    def __bool__(self) -> bool:
        return self._size != 0

    def __repr__(self) -> str:
        return f"DynamicArray({self.to_py()!r})"
