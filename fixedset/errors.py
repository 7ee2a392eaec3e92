"""
Exceptions raised by fixed-capacity sets.

Every error derives from SetError and from the builtin exception that best
describes it, so callers can catch either.
"""


class SetError(Exception):
    """Base class for all fixedset errors."""


class InvalidCapacityError(SetError, ValueError):
    """Capacity passed at construction is negative."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Capacity must be >= 0, got {capacity}")


class AllocationFailureError(SetError, MemoryError):
    """Slot arrays (or a snapshot) could not be allocated."""

    def __init__(self, requested_bytes: int, available_bytes=None):
        self.requested_bytes = requested_bytes
        self.available_bytes = available_bytes
        if available_bytes is None:
            message = f"Failed to allocate {requested_bytes} bytes"
        else:
            message = (f"Failed to allocate {requested_bytes} bytes "
                       f"({available_bytes} bytes available)")
        super().__init__(message)


class SetFullError(SetError, RuntimeError):
    """No Empty or Tombstone slot is left for a new element."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Set is full (capacity {capacity})")


class NullSetError(SetError, TypeError):
    """Operation called on a missing or destroyed set."""

    def __init__(self, message: str = "Set handle is null or destroyed"):
        super().__init__(message)


class NullElementError(SetError, ValueError):
    """None passed where an element is required."""

    def __init__(self):
        super().__init__("Element must not be None")
