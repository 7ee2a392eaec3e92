"""
Linear probing over a SlotArray.

lookup() walks the probe sequence of a key and reports either the slot that
holds an equal element, or the slot a new element should go to.
"""

from typing import Any, Iterator, NamedTuple

from .slots import SlotArray, SlotState
from .strategy import HashStrategy


class LookupResult(NamedTuple):
    """Outcome of a slot lookup"""
    found: bool
    index: int


def home_slot(hash_value: int, capacity: int) -> int:
    """First slot inspected for a key with the given hash."""
    return hash_value % capacity


def probe_sequence(home: int, capacity: int) -> Iterator[int]:
    """
    Yield home, home+1, ..., home+capacity-1, all modulo capacity.

    Every slot index appears exactly once.
    """
    for i in range(capacity):
        yield (home + i) % capacity


def lookup(slots: SlotArray, strategy: HashStrategy, key: Any) -> LookupResult:
    """
    Find `key` or the slot where it would be inserted.

    The scan stops at the first EMPTY slot or at an OCCUPIED slot whose
    element equals `key`. Tombstones never stop the scan; the first one seen
    is remembered and preferred over a later EMPTY slot as insert position.

    Args:
        slots: Slot storage to search
        strategy: Hash/equality strategy
        key: Element to look for

    Returns:
        LookupResult(True, i) if slot i holds an equal element.
        LookupResult(False, i) where i is the first tombstone on the path, or
        the terminating EMPTY slot if no tombstone came first.
        LookupResult(False, capacity) if there is no room at all.
    """
    capacity = slots.capacity
    if capacity == 0:
        return LookupResult(False, capacity)

    flags = slots.flags
    data = slots.data
    first_tombstone = capacity

    for index in probe_sequence(home_slot(strategy.hash(key), capacity), capacity):
        state = flags[index]

        if state == SlotState.EMPTY:
            if first_tombstone != capacity:
                return LookupResult(False, first_tombstone)
            return LookupResult(False, index)

        if state == SlotState.OCCUPIED:
            if strategy.equal(data[index], key):
                return LookupResult(True, index)
        elif first_tombstone == capacity:
            first_tombstone = index

    return LookupResult(False, first_tombstone)


def probe_length(slots: SlotArray, strategy: HashStrategy, key: Any) -> int:
    """Number of slots lookup() inspects before it can answer for `key`."""
    capacity = slots.capacity
    if capacity == 0:
        return 0

    inspected = 0
    for index in probe_sequence(home_slot(strategy.hash(key), capacity), capacity):
        inspected += 1
        state = slots.flags[index]
        if state == SlotState.EMPTY:
            break
        if state == SlotState.OCCUPIED and strategy.equal(slots.data[index], key):
            break
    return inspected


def probe_path_is_continuous(slots: SlotArray, strategy: HashStrategy, index: int) -> bool:
    """
    Check that no EMPTY slot lies between the home slot of the element in
    OCCUPIED slot `index` and `index` itself.
    """
    capacity = slots.capacity
    home = home_slot(strategy.hash(slots.element(index)), capacity)
    for probe in probe_sequence(home, capacity):
        if probe == index:
            return True
        if slots.flags[probe] == SlotState.EMPTY:
            return False
    return False
