"""
fixedset - Fixed-capacity open-addressed set containers

Sets are backed by a fixed number of slots, use linear probing to resolve
collisions and tombstones for removal. A generic set with pluggable hash and
compare functions, a hashed string set and a sorted string set are provided.
"""

import logging

__version__ = "1.0.0"

from .errors import (
    SetError, InvalidCapacityError, AllocationFailureError,
    SetFullError, NullSetError, NullElementError,
)
from .slots import SlotState, SlotArray
from .strategy import (
    HashStrategy, FunctionStrategy, NativeStrategy, StringStrategy, polynomial_hash,
)
from .probe import LookupResult, lookup
from .hashset import HashSet
from .stringset import StringSet
from .sortedset import SortedStringSet
from .api import (
    create_set, create_string_set, create_sorted_string_set, destroy_set,
    num_elements, add_element, remove_element, find_element, get_elements,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "SetError", "InvalidCapacityError", "AllocationFailureError",
    "SetFullError", "NullSetError", "NullElementError",
    # Building blocks
    "SlotState", "SlotArray", "LookupResult", "lookup",
    "HashStrategy", "FunctionStrategy", "NativeStrategy", "StringStrategy", "polynomial_hash",
    # Sets
    "HashSet", "StringSet", "SortedStringSet",
    # Functional interface
    "create_set", "create_string_set", "create_sorted_string_set", "destroy_set",
    "num_elements", "add_element", "remove_element", "find_element", "get_elements",
]
