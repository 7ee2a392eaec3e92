"""
Hash and equality strategies used to place and match elements.

A strategy supplies two operations:

    hash(element) -> non-negative int
    equal(a, b) -> bool

Strategies must be consistent: equal(a, b) implies hash(a) == hash(b).
"""

from typing import Any, Callable, Optional, Protocol

from .config import HASH_MASK, HASH_MULTIPLIER


class HashStrategy(Protocol):
    """Capability required by HashSet to place and compare elements."""

    def hash(self, element: Any) -> int:
        ...

    def equal(self, a: Any, b: Any) -> bool:
        ...


def polynomial_hash(text: str) -> int:
    """
    Polynomial string hash over the UTF-8 bytes of `text`.

    Computes h = 31*h + byte for each byte, wrapped to an unsigned 32-bit
    value. The result depends only on the bytes, so it is stable across
    processes (unlike the builtin hash()).

    Args:
        text: String (or bytes) to hash

    Returns:
        Hash value in [0, 2**32)
    """
    data = text.encode('utf-8') if isinstance(text, str) else bytes(text)
    value = 0
    for byte in data:
        value = (value * HASH_MULTIPLIER + byte) & HASH_MASK
    return value


class FunctionStrategy:
    """
    Strategy built from a hash function and a compare function.

    `compare(a, b)` follows the three-way convention: it returns 0 if and only
    if a and b are equal. Any other return value means "not equal".
    """

    def __init__(self, hash: Callable[[Any], int], compare: Callable[[Any, Any], int]):
        if not callable(hash) or not callable(compare):
            raise TypeError("hash and compare must be callable")
        self._hash = hash
        self._compare = compare

    def hash(self, element: Any) -> int:
        return int(self._hash(element))

    def equal(self, a: Any, b: Any) -> bool:
        return self._compare(a, b) == 0

    def __repr__(self):
        return f"FunctionStrategy(hash={self._hash!r}, compare={self._compare!r})"


class NativeStrategy:
    """Strategy using Python's builtin hash() and ==."""

    def hash(self, element: Any) -> int:
        return hash(element)

    def equal(self, a: Any, b: Any) -> bool:
        return a == b

    def __repr__(self):
        return "NativeStrategy()"


class StringStrategy:
    """Polynomial hash with exact string equality."""

    def hash(self, element: str) -> int:
        return polynomial_hash(element)

    def equal(self, a: str, b: str) -> bool:
        return a == b

    def __repr__(self):
        return "StringStrategy()"


def make_strategy(hash: Optional[Callable[[Any], int]] = None,
                  compare: Optional[Callable[[Any, Any], int]] = None,
                  strategy: Optional[HashStrategy] = None) -> HashStrategy:
    """
    Resolve constructor arguments into a single strategy object.

    Args:
        hash: Hash function (requires compare)
        compare: Three-way compare function, 0 means equal (requires hash)
        strategy: Ready-made strategy object

    Returns:
        The strategy to use; NativeStrategy if nothing was given

    Raises:
        ValueError: If strategy is combined with hash/compare, or only one
            of hash/compare is given
    """
    if strategy is not None:
        if hash is not None or compare is not None:
            raise ValueError("Pass either strategy or hash/compare, not both")
        return strategy

    if hash is None and compare is None:
        return NativeStrategy()

    if hash is None or compare is None:
        raise ValueError("hash and compare must be given together")

    return FunctionStrategy(hash, compare)
