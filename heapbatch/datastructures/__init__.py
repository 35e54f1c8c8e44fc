from .dynamic_array import DynamicArray
from .heap import Heap, HeapType, heap_sort

__all__ = [
    "DynamicArray",
    "Heap",
    "HeapType",
    "heap_sort",
]
