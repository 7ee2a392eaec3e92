"""
Slot storage for open-addressed sets.

A SlotArray holds two parallel numpy arrays of fixed length: a uint8 array of
slot states and an object array of elements. An element is only meaningful
while its slot is OCCUPIED.
"""

import logging
from enum import IntEnum
from typing import Any

import numpy as np
import psutil

from .config import SLOT_DTYPE, memory_check_enabled
from .errors import AllocationFailureError, InvalidCapacityError

logger = logging.getLogger(__name__)


class SlotState(IntEnum):
    """State of a single slot."""

    EMPTY = 0
    OCCUPIED = 1
    TOMBSTONE = 2


def estimate_nbytes(capacity: int) -> int:
    """Bytes needed by the flags and data arrays for `capacity` slots."""
    per_slot = np.dtype(SLOT_DTYPE).itemsize + np.dtype(object).itemsize
    return capacity * per_slot


def check_available(nbytes: int) -> None:
    """
    Raise AllocationFailureError if `nbytes` cannot fit in available memory.

    The check is skipped when disabled through FIXEDSET_CHECK_MEMORY.
    """
    if nbytes == 0 or not memory_check_enabled():
        return
    available = psutil.virtual_memory().available
    if nbytes > available:
        logger.warning("Refusing to allocate %d bytes, only %d available",
                       nbytes, available)
        raise AllocationFailureError(nbytes, available)


def validate_capacity(capacity) -> int:
    """
    Check a requested capacity.

    Args:
        capacity: Requested number of slots

    Returns:
        The capacity as a plain int

    Raises:
        TypeError: If capacity is not an integer
        InvalidCapacityError: If capacity is negative
    """
    if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
        raise TypeError(f"capacity must be an integer, got {type(capacity).__name__}")
    capacity = int(capacity)
    if capacity < 0:
        raise InvalidCapacityError(capacity)
    return capacity


class SlotArray:
    """
    Fixed-length parallel arrays of slot states and elements.

    All slots start EMPTY. Slots move EMPTY -> OCCUPIED, OCCUPIED -> TOMBSTONE
    and TOMBSTONE -> OCCUPIED; only reset() turns them back to EMPTY.
    """

    def __init__(self, capacity: int):
        """
        Allocate slot arrays.

        Args:
            capacity: Number of slots

        Raises:
            TypeError: If capacity is not an integer
            InvalidCapacityError: If capacity is negative
            AllocationFailureError: If the arrays cannot be allocated
        """
        self.capacity = validate_capacity(capacity)
        nbytes = estimate_nbytes(self.capacity)
        check_available(nbytes)

        try:
            # EMPTY is 0, so zeroed flags start every slot empty
            self.flags = np.zeros(self.capacity, dtype=SLOT_DTYPE)
            self.data = np.empty(self.capacity, dtype=object)
        except MemoryError as e:
            logger.warning("Slot allocation of %d bytes failed", nbytes)
            raise AllocationFailureError(nbytes) from e

    def state(self, index: int) -> SlotState:
        """Get the state of slot `index`."""
        return SlotState(int(self.flags[index]))

    def element(self, index: int) -> Any:
        """
        Get the element stored in slot `index`.

        Raises:
            ValueError: If the slot is not OCCUPIED
        """
        if self.flags[index] != SlotState.OCCUPIED:
            raise ValueError(f"Slot {index} is not occupied")
        return self.data[index]

    def occupy(self, index: int, element: Any) -> SlotState:
        """
        Store `element` in slot `index` and mark it OCCUPIED.

        Returns:
            The state the slot had before
        """
        previous = self.state(index)
        if previous == SlotState.OCCUPIED:
            raise ValueError(f"Slot {index} is already occupied")
        self.data[index] = element
        self.flags[index] = SlotState.OCCUPIED
        return previous

    def vacate(self, index: int) -> Any:
        """
        Turn OCCUPIED slot `index` into a TOMBSTONE.

        Returns:
            The element that was stored there
        """
        element = self.element(index)
        self.data[index] = None
        self.flags[index] = SlotState.TOMBSTONE
        return element

    def reset(self) -> None:
        """Mark every slot EMPTY and drop all stored elements."""
        self.flags[:] = SlotState.EMPTY
        self.data[:] = None

    def occupied_mask(self) -> np.ndarray:
        return self.flags == SlotState.OCCUPIED

    def occupied_elements(self) -> np.ndarray:
        """Fresh object array of OCCUPIED elements in slot-index order."""
        return self.data[self.occupied_mask()]

    def count(self, state: SlotState) -> int:
        """Number of slots currently in `state`."""
        return int(np.count_nonzero(self.flags == state))

    @property
    def nbytes(self) -> int:
        return self.flags.nbytes + self.data.nbytes

    def __len__(self) -> int:
        return self.capacity

    def __repr__(self):
        return (f"SlotArray(capacity={self.capacity}, "
                f"occupied={self.count(SlotState.OCCUPIED)}, "
                f"tombstones={self.count(SlotState.TOMBSTONE)})")
