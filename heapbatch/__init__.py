"""Binary-heap batch processing: min/max heaps, a stdin batch driver and a small template engine."""

from .datastructures import Heap, HeapType, heap_sort
from .errors import EmptyHeapError, HeapBatchError

__version__ = "0.1.0"

__all__ = [
    "Heap",
    "HeapType",
    "heap_sort",
    "EmptyHeapError",
    "HeapBatchError",
]
