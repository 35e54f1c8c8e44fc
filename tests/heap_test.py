import random

import pytest

from heapbatch.datastructures import Heap, HeapType, heap_sort
from heapbatch.datastructures.heap import (
    NOT_SATISFIED,
    left_child_index,
    parent_index,
    right_child_index,
)
from heapbatch.errors import EmptyHeapError


def assert_heap_property(h):
    data = h.to_list()
    for i in range(1, len(data)):
        assert h._heap_compare(data[parent_index(i)], data[i]) != NOT_SATISFIED


def drain(h):
    return [h.remove() for _ in range(h.size())]


def test_index_arithmetic():
    assert parent_index(1) == 0
    assert parent_index(2) == 0
    assert parent_index(5) == 2
    assert parent_index(6) == 2
    assert left_child_index(0) == 1
    assert right_child_index(0) == 2
    assert left_child_index(3) == 7
    assert right_child_index(3) == 8


def test_default_heap_is_max():
    h = Heap()
    assert h.heap_type is HeapType.MAX
    for v in [3, 9, 1]:
        h.insert(v)
    assert h.peek() == 9


def test_max_heap_scenario():
    h = Heap(HeapType.MAX)
    for v in [1, 2, 2, 4, 5]:
        h.insert(v)
    assert drain(h) == [5, 4, 2, 2, 1]


def test_min_heap_scenario():
    h = Heap(HeapType.MIN)
    for v in [2, 1, 2, 5, 4]:
        h.insert(v)
    assert drain(h) == [1, 2, 2, 4, 5]


def test_empty_heap_peek_and_remove():
    h = Heap(HeapType.MAX)
    assert h.peek() is None
    with pytest.raises(EmptyHeapError):
        h.remove()
    assert h.size() == 0


def test_peek_remove_size_transitions():
    h = Heap(HeapType.MAX)
    h.insert(1)
    h.insert(2)
    assert h.peek() == 2
    assert h.size() == 2
    assert h.remove() == 2
    assert h.size() == 1
    assert h.remove() == 1
    assert h.size() == 0


def test_single_element_min_heap():
    h = Heap(HeapType.MIN)
    h.insert(7)
    assert h.peek() == 7
    assert h.remove() == 7
    with pytest.raises(EmptyHeapError):
        h.remove()
    assert h.peek() is None


def test_heap_usable_after_empty_error():
    h = Heap(HeapType.MIN)
    with pytest.raises(IndexError):
        h.remove()
    h.insert(3)
    h.insert(1)
    assert h.remove() == 1
    assert len(h) == 1


def test_char_max_heap():
    h = Heap()
    for c in "abcde":
        h.insert(c)
    assert drain(h) == ["e", "d", "c", "b", "a"]


@pytest.mark.parametrize("heap_type", [HeapType.MIN, HeapType.MAX])
def test_invariant_holds_after_each_insert(heap_type):
    rng = random.Random(1234)
    h = Heap(heap_type)
    for _ in range(200):
        h.insert(rng.randint(-50, 50))
        assert_heap_property(h)


@pytest.mark.parametrize("heap_type", [HeapType.MIN, HeapType.MAX])
def test_invariant_holds_after_each_remove(heap_type):
    rng = random.Random(99)
    h = Heap(heap_type, [rng.random() for _ in range(150)])
    while h.size():
        h.remove()
        assert_heap_property(h)


@pytest.mark.parametrize("seed", range(5))
def test_round_trip_matches_sorted(seed):
    rng = random.Random(seed)
    data = [rng.randint(0, 20) for _ in range(rng.randint(0, 100))]
    h_min = Heap(HeapType.MIN, data)
    h_max = Heap(HeapType.MAX, data)
    assert list(h_min.drain()) == sorted(data)
    assert list(h_max.drain()) == sorted(data, reverse=True)
    assert h_min.size() == 0
    assert h_max.size() == 0


def test_size_accounting():
    h = Heap(HeapType.MIN)
    for i in range(10):
        h.insert(i)
        assert h.size() == i + 1
    for j in range(4):
        h.remove()
    assert h.size() == 6
    assert len(h) == 6


def test_interleaved_insert_remove():
    h = Heap(HeapType.MIN, [5, 3, 8])
    assert h.remove() == 3
    h.insert(1)
    h.insert(9)
    assert h.peek() == 1
    assert list(h.drain()) == [1, 5, 8, 9]


def test_peek_does_not_mutate():
    h = Heap(HeapType.MAX, [4, 7, 2])
    before = h.to_list()
    assert h.peek() == 7
    assert h.to_list() == before


def test_heap_sort():
    assert heap_sort([3, 1, 2]) == [1, 2, 3]
    assert heap_sort([3, 1, 2], HeapType.MAX) == [3, 2, 1]
    assert heap_sort([]) == []
    assert heap_sort(["pear", "apple"]) == ["apple", "pear"]


def test_truthiness_and_repr():
    h = Heap(HeapType.MIN)
    assert not h
    assert repr(h) == "Heap(heap_type=MIN, size=0)"
    h.insert(4)
    assert h
    assert repr(h) == "Heap(heap_type=MIN, size=1)"
