"""
Functional interface over the set classes.

Each function mirrors one method, but also checks the set handle itself:
passing None (or a destroyed set) raises NullSetError.
"""

from typing import Any, Callable, Optional, Union

import numpy as np

from .errors import NullSetError
from .hashset import HashSet
from .sortedset import SortedStringSet
from .stringset import StringSet

AnySet = Union[HashSet, SortedStringSet]


def _require(s: Optional[AnySet]) -> AnySet:
    if s is None:
        raise NullSetError()
    if s.closed:
        raise NullSetError(f"{type(s).__name__} has been destroyed")
    return s


def create_set(max_elts: int,
               hash: Optional[Callable[[Any], int]] = None,
               compare: Optional[Callable[[Any, Any], int]] = None,
               clone: Optional[Callable[[Any], Any]] = None) -> HashSet:
    """
    Create a generic set.

    Args:
        max_elts: Capacity (>= 0)
        hash: Hash function; Python's hash() if omitted
        compare: Compare function returning 0 iff equal; == if omitted
        clone: Optional copy function applied on insert

    Returns:
        New HashSet
    """
    return HashSet(max_elts, hash=hash, compare=compare, clone=clone)


def create_string_set(max_elts: int) -> StringSet:
    """Create a hashed string set."""
    return StringSet(max_elts)


def create_sorted_string_set(max_elts: int) -> SortedStringSet:
    """Create a sorted string set."""
    return SortedStringSet(max_elts)


def destroy_set(s: AnySet) -> None:
    _require(s).destroy()


def num_elements(s: AnySet) -> int:
    return _require(s).size()


def add_element(s: AnySet, elt: Any) -> None:
    """Add `elt` to `s`; duplicates are ignored."""
    _require(s).add(elt)


def remove_element(s: AnySet, elt: Any) -> None:
    """Remove `elt` from `s`; missing elements and None are ignored."""
    _require(s).remove(elt)


def find_element(s: AnySet, elt: Any) -> Optional[Any]:
    """Return the stored element equal to `elt`, or None."""
    return _require(s).find(elt)


def get_elements(s: AnySet) -> np.ndarray:
    """Return a new array holding the elements of `s`."""
    return _require(s).elements()
