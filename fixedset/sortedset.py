"""
Fixed-capacity sorted string set.

Elements are kept in ascending order in the first `size()` slots of a numpy
object array. Lookups use binary search; inserts and removals shift the tail
of the array by one slot.
"""

import bisect
import logging
from typing import Any, Iterator, Optional

import numpy as np

from .errors import AllocationFailureError, NullElementError, NullSetError, SetFullError
from .slots import check_available, validate_capacity

logger = logging.getLogger(__name__)


class SortedStringSet:
    """
    String set that keeps its elements sorted.

    Ordering is by code point, which matches byte-wise ordering of the UTF-8
    encoding. elements() and iteration yield strings in that order.
    """

    def __init__(self, capacity: int):
        """
        Create an empty sorted set.

        Args:
            capacity: Maximum number of elements (>= 0)

        Raises:
            TypeError: If capacity is not an integer
            InvalidCapacityError: If capacity is negative
            AllocationFailureError: If the element array cannot be allocated
        """
        capacity = validate_capacity(capacity)
        nbytes = capacity * np.dtype(object).itemsize
        check_available(nbytes)

        try:
            self._data = np.empty(capacity, dtype=object)
        except MemoryError as e:
            raise AllocationFailureError(nbytes) from e

        self._capacity = capacity
        self._count = 0
        self._closed = False

        logger.debug("Created SortedStringSet with capacity %d", capacity)

    def _require_open(self) -> np.ndarray:
        if self._closed:
            raise NullSetError("SortedStringSet has been destroyed")
        return self._data

    def _position(self, element: str) -> int:
        """Leftmost index at which `element` could be inserted."""
        return bisect.bisect_left(self._data, element, 0, self._count)

    def _index_of(self, element: Any) -> int:
        """Index of `element`, or -1 if it is absent or not a str."""
        if not isinstance(element, str):
            return -1
        pos = self._position(element)
        if pos < self._count and self._data[pos] == element:
            return pos
        return -1

    @property
    def capacity(self) -> int:
        self._require_open()
        return self._capacity

    def add(self, element: str) -> bool:
        """
        Insert a string at its sorted position.

        Returns:
            True if inserted, False if already present

        Raises:
            NullElementError: If element is None
            TypeError: If element is not a str
            SetFullError: If the element is new and the set is full
        """
        data = self._require_open()
        if element is None:
            raise NullElementError()
        if not isinstance(element, str):
            raise TypeError(f"SortedStringSet elements must be str, got {type(element).__name__}")

        pos = self._position(element)
        if pos < self._count and data[pos] == element:
            return False

        if self._count == self._capacity:
            logger.warning("Rejected insert into full SortedStringSet (capacity %d)",
                           self._capacity)
            raise SetFullError(self._capacity)

        data[pos + 1:self._count + 1] = data[pos:self._count]
        data[pos] = str.__str__(element)
        self._count += 1
        return True

    def insert(self, element: str) -> bool:
        return self.add(element)

    def remove(self, element: str) -> bool:
        """Remove `element` if present; missing elements and None are ignored."""
        data = self._require_open()
        pos = self._index_of(element)
        if pos < 0:
            return False

        data[pos:self._count - 1] = data[pos + 1:self._count]
        self._count -= 1
        data[self._count] = None
        return True

    def erase(self, element: str) -> bool:
        return self.remove(element)

    def discard(self, element: str) -> None:
        self.remove(element)

    def find(self, element: str) -> Optional[str]:
        """Return the stored string equal to `element`, or None."""
        data = self._require_open()
        pos = self._index_of(element)
        if pos < 0:
            return None
        return data[pos]

    def contains(self, element: str) -> bool:
        self._require_open()
        return self._index_of(element) >= 0

    def size(self) -> int:
        self._require_open()
        return self._count

    def empty(self) -> bool:
        return self.size() == 0

    def elements(self) -> np.ndarray:
        """New object array of the elements in ascending order."""
        data = self._require_open()
        try:
            return data[:self._count].copy()
        except MemoryError as e:
            raise AllocationFailureError(self._count * np.dtype(object).itemsize) from e

    def clear(self) -> None:
        data = self._require_open()
        data[:] = None
        self._count = 0
        logger.debug("Cleared SortedStringSet")

    def destroy(self) -> None:
        """Release all elements; further operations raise NullSetError."""
        data = self._require_open()
        data[:] = None
        self._data = None
        self._count = 0
        self._closed = True
        logger.debug("Destroyed SortedStringSet")

    def close(self) -> None:
        if not self._closed:
            self.destroy()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def nbytes(self) -> int:
        return self._require_open().nbytes

    def check_invariants(self) -> None:
        """Verify the stored prefix is strictly increasing and the tail is empty."""
        data = self._require_open()
        for i in range(1, self._count):
            if not data[i - 1] < data[i]:
                raise AssertionError(f"Elements {i - 1} and {i} are out of order")
        for i in range(self._count, self._capacity):
            if data[i] is not None:
                raise AssertionError(f"Slot {i} past the end is not empty")

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[str]:
        return iter(self.elements().tolist())

    def __bool__(self) -> bool:
        return not self.empty()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __str__(self) -> str:
        if self._closed:
            return "SortedStringSet(destroyed)"
        return f"SortedStringSet(capacity={self._capacity}, size={self._count})"

    def __repr__(self) -> str:
        return self.__str__()
