"""
Fixed-capacity hash set using open addressing.

Elements live directly in a SlotArray. Collisions are resolved by linear
probing and removals leave tombstones, so capacity never changes and no
rehashing ever happens.
"""

import logging
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

import numpy as np

from .errors import AllocationFailureError, NullElementError, NullSetError, SetFullError
from .probe import lookup, probe_length, probe_path_is_continuous
from .slots import SlotArray, SlotState
from .strategy import HashStrategy, make_strategy

logger = logging.getLogger(__name__)

T = TypeVar('T')


class HashSet(Generic[T]):
    """
    Hash set with a fixed number of slots.

    By default the set borrows the elements it is given: it keeps the
    reference and never copies or mutates it. Pass `clone` to store a copy
    instead.

    Example:
        >>> s = HashSet(8)
        >>> s.add((1, 2))
        True
        >>> (1, 2) in s
        True
    """

    def __init__(self, capacity: int,
                 hash: Optional[Callable[[T], int]] = None,
                 compare: Optional[Callable[[T, T], int]] = None,
                 clone: Optional[Callable[[T], T]] = None,
                 strategy: Optional[HashStrategy] = None):
        """
        Create an empty set.

        Args:
            capacity: Maximum number of elements (>= 0)
            hash: Hash function, given together with compare
            compare: Compare function returning 0 iff its arguments are equal
            clone: Optional copy function applied to elements on insert
            strategy: Hash/equality strategy object (instead of hash/compare)

        Raises:
            TypeError: If capacity is not an integer or clone is not callable
            InvalidCapacityError: If capacity is negative
            AllocationFailureError: If the slot arrays cannot be allocated
            ValueError: If the strategy arguments are inconsistent
        """
        if clone is not None and not callable(clone):
            raise TypeError("clone must be callable")

        self._strategy = make_strategy(hash, compare, strategy)
        self._clone = clone
        self._slots = SlotArray(capacity)
        self._count = 0

        logger.debug("Created %s with capacity %d (%d bytes)",
                     type(self).__name__, self._slots.capacity, self._slots.nbytes)

    # Hooks for specializations

    def _accepts(self, element: Any) -> bool:
        """Whether `element` could ever be a member."""
        return element is not None

    def _check_element(self, element: Any) -> None:
        if element is None:
            raise NullElementError()

    def _store(self, element: T) -> T:
        """Value actually kept in the slot for a newly added element."""
        if self._clone is not None:
            return self._clone(element)
        return element

    def _require_open(self) -> SlotArray:
        if self._slots is None:
            raise NullSetError(f"{type(self).__name__} has been destroyed")
        return self._slots

    # Core operations

    @property
    def capacity(self) -> int:
        """Fixed number of slots."""
        return self._require_open().capacity

    @property
    def strategy(self) -> HashStrategy:
        return self._strategy

    def add(self, element: T) -> bool:
        """
        Add an element to the set.

        Adding an element that is already present does nothing.

        Args:
            element: Element to add

        Returns:
            True if the element was inserted, False if it was already present

        Raises:
            NullElementError: If element is None
            SetFullError: If the element is new and no slot is free
        """
        slots = self._require_open()
        self._check_element(element)

        found, index = lookup(slots, self._strategy, element)
        if found:
            return False

        if index == slots.capacity:
            logger.warning("Rejected insert into full %s (capacity %d)",
                           type(self).__name__, slots.capacity)
            raise SetFullError(slots.capacity)

        previous = slots.occupy(index, self._store(element))
        if previous == SlotState.TOMBSTONE:
            logger.debug("Reclaimed tombstone at slot %d", index)
        self._count += 1
        return True

    def insert(self, element: T) -> bool:
        """Alias for add()."""
        return self.add(element)

    def remove(self, element: T) -> bool:
        """
        Remove an element if present.

        Missing elements and None are ignored.

        Returns:
            True if an element was removed
        """
        slots = self._require_open()
        if not self._accepts(element):
            return False

        found, index = lookup(slots, self._strategy, element)
        if not found:
            return False

        slots.vacate(index)
        self._count -= 1
        return True

    def erase(self, element: T) -> bool:
        """Alias for remove()."""
        return self.remove(element)

    def discard(self, element: T) -> None:
        """Remove an element if present, returning nothing."""
        self.remove(element)

    def find(self, element: T) -> Optional[T]:
        """
        Look up an element.

        Args:
            element: Element to look for (None is never found)

        Returns:
            The stored element equal to `element`, or None if absent
        """
        slots = self._require_open()
        if not self._accepts(element):
            return None

        found, index = lookup(slots, self._strategy, element)
        if not found:
            return None
        return slots.data[index]

    def contains(self, element: T) -> bool:
        """Check if element exists in the set."""
        slots = self._require_open()
        if not self._accepts(element):
            return False
        return lookup(slots, self._strategy, element).found

    def size(self) -> int:
        """Get current number of elements."""
        self._require_open()
        return self._count

    def empty(self) -> bool:
        """Check if the set is empty."""
        return self.size() == 0

    def elements(self) -> np.ndarray:
        """
        Snapshot the current elements.

        Returns:
            New object array of length size(), in slot-index order

        Raises:
            AllocationFailureError: If the snapshot cannot be allocated
        """
        slots = self._require_open()
        try:
            return slots.occupied_elements()
        except MemoryError as e:
            raise AllocationFailureError(self._count * np.dtype(object).itemsize) from e

    def clear(self) -> None:
        """Remove every element and turn all slots (tombstones too) EMPTY."""
        slots = self._require_open()
        slots.reset()
        self._count = 0
        logger.debug("Cleared %s", type(self).__name__)

    def destroy(self) -> None:
        """
        Release the slot arrays and every stored element.

        Any further operation raises NullSetError.
        """
        slots = self._require_open()
        slots.reset()
        self._slots = None
        self._count = 0
        logger.debug("Destroyed %s", type(self).__name__)

    def close(self) -> None:
        """Destroy the set if it is still open."""
        if self._slots is not None:
            self.destroy()

    @property
    def closed(self) -> bool:
        return self._slots is None

    # Introspection

    @property
    def tombstones(self) -> int:
        """Number of slots holding a tombstone."""
        return self._require_open().count(SlotState.TOMBSTONE)

    @property
    def nbytes(self) -> int:
        return self._require_open().nbytes

    def slot_states(self) -> np.ndarray:
        """Copy of the per-slot state flags (see SlotState)."""
        return self._require_open().flags.copy()

    def probe_length(self, element: T) -> int:
        """Number of slots a lookup of `element` inspects."""
        slots = self._require_open()
        if not self._accepts(element):
            return 0
        return probe_length(slots, self._strategy, element)

    def check_invariants(self) -> None:
        """
        Verify the table's structural invariants.

        Raises:
            AssertionError: If the element count is wrong, an element is
                unreachable from its home slot, or two elements are equal
        """
        slots = self._require_open()
        occupied = np.flatnonzero(slots.occupied_mask())

        if len(occupied) != self._count:
            raise AssertionError(
                f"count is {self._count} but {len(occupied)} slots are occupied")

        for index in occupied:
            if not probe_path_is_continuous(slots, self._strategy, int(index)):
                raise AssertionError(f"Element in slot {index} is not reachable from its home slot")
            found, where = lookup(slots, self._strategy, slots.data[index])
            if not found or where != index:
                raise AssertionError(
                    f"Element in slot {index} shadowed by an equal element in slot {where}")

    # Python protocol support

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements().tolist())

    def __bool__(self) -> bool:
        return not self.empty()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __str__(self) -> str:
        if self.closed:
            return f"{type(self).__name__}(destroyed)"
        return f"{type(self).__name__}(capacity={self.capacity}, size={self._count})"

    def __repr__(self) -> str:
        return self.__str__()
