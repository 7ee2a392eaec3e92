#!/usr/bin/env python3
"""Basic example of using fixedset containers."""

import numpy as np
from fixedset import HashSet, SetFullError, SlotState, SortedStringSet, StringSet, polynomial_hash


def main():
    print("=== fixedset Python Example ===\n")

    # Example 1: StringSet
    print("1. StringSet Example:")
    print("   Creating string set with capacity 4...")
    words = StringSet(4)

    for word in ["a", "b", "e"]:
        words.add(word)
        print(f"   Added: {word!r} (home slot {polynomial_hash(word) % 4})")

    print(f"   Slots: {words.slot_states()}")
    words.remove("a")
    print("   Removed 'a', slot 1 is now a tombstone")
    print(f"   Slots: {words.slot_states()}")
    print(f"   'e' still found: {words.find('e')!r}")

    words.add("i")
    print(f"   Added 'i', reused slot 1: {words.slot_states()[1] == SlotState.OCCUPIED}")
    print(f"   Elements: {words.elements()}")

    # Example 2: Capacity limit
    print("\n2. Capacity Example:")
    words.add("z")
    try:
        words.add("overflow")
    except SetFullError as e:
        print(f"   {e}")

    # Example 3: SortedStringSet
    print("\n3. SortedStringSet Example:")
    fruit = SortedStringSet(8)
    for name in ["pear", "apple", "fig", "banana"]:
        fruit.add(name)
    print(f"   Elements in order: {list(fruit)}")

    # Example 4: Generic HashSet with custom strategy
    print("\n4. Generic HashSet Example:")
    points = HashSet(16,
                     hash=lambda p: int(p[0] * 73856093) ^ int(p[1] * 19349663),
                     compare=lambda a, b: 0 if np.array_equal(a, b) else 1,
                     clone=np.copy)

    point = np.array([1, 2])
    points.add(point)
    point[0] = 99
    print(f"   Stored copy unaffected by caller: {points.find(np.array([1, 2]))}")
    print(f"   {points}")

    words.destroy()
    fruit.destroy()
    points.destroy()
    print("\nCleaned up.")


if __name__ == "__main__":
    main()
