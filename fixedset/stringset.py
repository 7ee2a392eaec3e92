"""
Fixed-capacity set of strings placed by polynomial hash.
"""

from typing import Any

from .hashset import HashSet
from .strategy import StringStrategy


class StringSet(HashSet[str]):
    """
    Open-addressed string set.

    Elements are placed by polynomial_hash() and matched by exact string
    equality. Only str elements are accepted.
    """

    def __init__(self, capacity: int):
        super().__init__(capacity, strategy=StringStrategy())

    def _accepts(self, element: Any) -> bool:
        return isinstance(element, str)

    def _check_element(self, element: Any) -> None:
        super()._check_element(element)
        if not isinstance(element, str):
            raise TypeError(f"StringSet elements must be str, got {type(element).__name__}")

    def _store(self, element: str) -> str:
        # str subclasses are stored as plain str so the set owns its value
        return str.__str__(element)
