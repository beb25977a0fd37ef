from enum import Enum
from typing import TypeVar, Generic, List, Iterator, Iterable, Callable, Optional, MutableSequence, Any

T = TypeVar('T')

Comparer = Callable[[Any, Any], int]


class HeapType(Enum):
    MAX_HEAP = "max"
    MIN_HEAP = "min"


DEFAULT_CAPACITY = 4
DEFAULT_HEAP_TYPE = HeapType.MAX_HEAP


class EmptyHeapError(IndexError):
    pass


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the elements' own ordering."""
    return (a > b) - (a < b)


class _ReversedComparer:
    # A class rather than a lambda so MIN_HEAP instances stay picklable.
    def __init__(self, comparer: Comparer) -> None:
        self.comparer = comparer

    def __call__(self, a: Any, b: Any) -> int:
        return self.comparer(b, a)


class Heap(Generic[T]):
    """Binary heap over a growable array with a pluggable comparer.

    The comparer is a cmp-style function returning a negative number, zero
    or a positive number. For MIN_HEAP its operands are swapped internally, so
    sift-up and sift-down always bring the "greatest" element to the root.

    The comparer must be a consistent total order. An inconsistent comparer
    is not detected and silently breaks the heap property.

    Iteration walks the backing array in level order, not in sorted order.
    Mutating the heap while iterating raises RuntimeError.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        heap_type: HeapType = DEFAULT_HEAP_TYPE,
        comparer: Optional[Comparer] = None,
    ) -> None:
        if not isinstance(capacity, int) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        if not isinstance(heap_type, HeapType):
            raise ValueError(f"heap_type must be a HeapType, got {heap_type!r}")
        if comparer is not None and not callable(comparer):
            raise TypeError("comparer must be callable")

        self._capacity = capacity
        self._size = 0
        self._data: List[Optional[T]] = [None] * capacity
        self._version = 0
        self._heap_type = heap_type
        self._comparer: Comparer = comparer if comparer is not None else natural_compare
        if heap_type is HeapType.MAX_HEAP:
            self._compare: Comparer = self._comparer
        else:
            self._compare = _ReversedComparer(self._comparer)

    # Observers
    @property
    def count(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def heap_type(self) -> HeapType:
        return self._heap_type

    @property
    def comparer(self) -> Comparer:
        """The comparer as supplied, before any MIN_HEAP inversion."""
        return self._comparer

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    # Core operations
    def peek(self) -> T:
        if self._size == 0:
            raise EmptyHeapError("peek from empty heap")
        return self._data[0]

    def push(self, item: T) -> None:
        if self._size == self._capacity:
            self._reserve(1 if self._capacity == 0 else self._capacity * 2)
        self._data[self._size] = item
        self._size += 1
        self._version += 1
        self._sift_up(self._size - 1)

    def add(self, item: T) -> None:
        self.push(item)

    def pop(self) -> T:
        if self._size == 0:
            raise EmptyHeapError("pop from empty heap")
        return self._remove_at(0)

    def remove(self, item: T) -> bool:
        """Remove the first element comparing equal to item.

        Equality is decided by the comparer (compare == 0), so with a comparer
        that only looks at part of an element, any equally ranked element may
        be the one removed. Returns False and leaves the heap untouched when
        nothing matches.
        """
        index = self._index_of(item)
        if index == -1:
            return False
        self._remove_at(index)
        return True

    def contains(self, item: T) -> bool:
        return self._index_of(item) != -1

    def clear(self) -> None:
        for i in range(self._size):
            self._data[i] = None
        self._size = 0
        self._version += 1

    def copy_to(self, target: MutableSequence[T], offset: int = 0) -> None:
        if offset < 0 or offset > len(target):
            raise IndexError("copy_to: offset out of range")
        if len(target) - offset < self._size:
            raise IndexError("copy_to: destination is too small")
        for i in range(self._size):
            target[offset + i] = self._data[i]

    def copy(self) -> 'Heap[T]':
        clone: Heap[T] = Heap(self._capacity, self._heap_type, self._comparer)
        clone._data = self._data.copy()
        clone._size = self._size
        return clone

    @staticmethod
    def from_array(
        arr: Iterable[T],
        heap_type: HeapType = DEFAULT_HEAP_TYPE,
        comparer: Optional[Comparer] = None,
    ) -> 'Heap[T]':
        """Build a heap from an array.

        Note: Creates a shallow copy of the input array.
        """
        items = list(arr)
        heap: Heap[T] = Heap(max(len(items), DEFAULT_CAPACITY), heap_type, comparer)
        heap._data[:len(items)] = items
        heap._size = len(items)
        for i in range(heap._size // 2 - 1, -1, -1):
            heap._sift_down(i)
        return heap

    # Internal helpers
    def _reserve(self, new_cap: int) -> None:
        new_data: List[Optional[T]] = [None] * new_cap
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data
        self._capacity = new_cap

    def _greater(self, i: int, j: int) -> bool:
        return self._compare(self._data[i], self._data[j]) > 0

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _index_of(self, item: T) -> int:
        for i in range(self._size):
            if self._compare(item, self._data[i]) == 0:
                return i
        return -1

    def _remove_at(self, index: int) -> T:
        item = self._data[index]
        last = self._size - 1
        self._swap(index, last)
        self._data[last] = None
        self._size = last
        self._version += 1
        if index < self._size:
            # The element moved in from the end may belong above or below index.
            self._sift_down(index)
            self._sift_up(index)
        return item

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if not self._greater(index, parent):
                break
            self._swap(index, parent)
            index = parent

    def _greater_child(self, index: int) -> int:
        left = 2 * index + 1
        right = 2 * index + 2
        if right < self._size and self._greater(right, left):
            return right
        if left < self._size:
            return left
        return -1

    def _sift_down(self, index: int) -> None:
        child = self._greater_child(index)
        while child != -1 and self._greater(child, index):
            self._swap(index, child)
            index = child
            child = self._greater_child(index)

    def _iterate(self, version: int) -> Iterator[T]:
        index = 0
        while True:
            if self._version != version:
                raise RuntimeError("heap mutated during iteration")
            if index >= self._size:
                return
            yield self._data[index]
            index += 1

    # Dunder methods
    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def __iter__(self) -> Iterator[T]:
        return self._iterate(self._version)

    def __repr__(self) -> str:
        return f"Heap({self._data[:self._size]!r}, heap_type={self._heap_type})"

    def __str__(self) -> str:
        return f"Heap(count={self._size})"
