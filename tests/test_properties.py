"""
Property-based tests: every set behaves like Python's builtin set as long as
it has room, and the hashed sets keep their probe paths intact.
"""

from collections import Counter

import hypothesis.strategies as st
import pytest
from hypothesis import given
from hypothesis.stateful import RuleBasedStateMachine, initialize, invariant, rule

from fixedset import HashSet, SetFullError, SlotState, SortedStringSet, StringSet, polynomial_hash

from .strategies import bucket_hash, capacities, operations, three_way, words

pytestmark = pytest.mark.property


def apply(s, model, ops):
    """Run ops against a set and a builtin-set model."""
    for op, word in ops:
        if op == "add":
            if word in model or len(model) < s.capacity:
                s.add(word)
                model.add(word)
            else:
                with pytest.raises(SetFullError):
                    s.add(word)
        else:
            assert s.remove(word) == (word in model)
            model.discard(word)


SET_FACTORIES = [
    StringSet,
    SortedStringSet,
    lambda capacity: HashSet(capacity),
    lambda capacity: HashSet(capacity, hash=bucket_hash, compare=three_way),
]


@pytest.mark.parametrize("factory", SET_FACTORIES)
@given(capacity=capacities, ops=operations, probes=st.lists(words, max_size=10))
def test_membership_matches_model(factory, capacity, ops, probes):
    """An element is found exactly when it was added more often than removed."""
    s = factory(capacity)
    model = set()
    apply(s, model, ops)

    assert s.size() == len(model)
    for word in list(model) + probes:
        found = s.find(word)
        if word in model:
            assert found == word
        else:
            assert found is None


@pytest.mark.parametrize("factory", SET_FACTORIES)
@given(capacity=capacities, ops=operations)
def test_snapshot_complete(factory, capacity, ops):
    """elements() holds each member exactly once."""
    s = factory(capacity)
    model = set()
    apply(s, model, ops)

    snapshot = s.elements()
    assert len(snapshot) == s.size()
    assert Counter(snapshot.tolist()) == Counter(model)


@given(capacity=capacities, ops=operations)
def test_sorted_snapshot_is_sorted(capacity, ops):
    s = SortedStringSet(capacity)
    apply(s, set(), ops)
    snapshot = s.elements().tolist()
    assert snapshot == sorted(snapshot)


@pytest.mark.parametrize("factory", SET_FACTORIES)
@given(capacity=capacities, ops=operations, word=words)
def test_add_is_idempotent(factory, capacity, ops, word):
    s = factory(capacity)
    model = set()
    apply(s, model, ops)
    if word not in model and len(model) == capacity:
        return

    s.add(word)
    before = sorted(s.elements().tolist())
    assert s.add(word) == False
    assert sorted(s.elements().tolist()) == before
    assert s.size() == len(before)


@pytest.mark.parametrize("factory", SET_FACTORIES)
@given(capacity=capacities, ops=operations, word=words)
def test_removing_absent_element_is_noop(factory, capacity, ops, word):
    s = factory(capacity)
    model = set()
    apply(s, model, ops)
    s.discard(word)

    before = s.elements().tolist()
    assert s.remove(word) == False
    assert s.elements().tolist() == before


@pytest.mark.parametrize("factory", [
    StringSet,
    lambda capacity: HashSet(capacity, hash=bucket_hash, compare=three_way),
])
@given(capacity=capacities, ops=operations)
def test_probe_continuity(factory, capacity, ops):
    """Every stored element stays reachable from its home slot."""
    s = factory(capacity)
    apply(s, set(), ops)
    s.check_invariants()


@given(capacity=capacities, a=words, b=words)
def test_tombstone_reuse(capacity, a, b):
    """add(a); remove(a); add(b) with a shared home puts b in that home slot."""
    home = polynomial_hash(a) % capacity
    if polynomial_hash(b) % capacity != home:
        return

    s = StringSet(capacity)
    s.add(a)
    s.remove(a)
    s.add(b)
    assert s.slot_states()[home] == SlotState.OCCUPIED
    assert s.elements().tolist() == [b]


class CaseInsensitive:
    """Key whose equality ignores case."""

    def __init__(self, text):
        self.text = text

    def __eq__(self, other):
        return isinstance(other, CaseInsensitive) and self.text.lower() == other.text.lower()

    def __hash__(self):
        return hash(self.text.lower())


@given(word=st.text(alphabet="aAbBcC", min_size=1, max_size=4))
def test_equal_keys_find_stored_element(word):
    """A key equal to a stored element finds it even if it is a different object."""
    s = HashSet(8)
    stored = CaseInsensitive(word)
    s.add(stored)
    assert s.find(CaseInsensitive(word.swapcase())) is stored


class StringSetMachine(RuleBasedStateMachine):
    """Random add/remove/clear sequences checked against a builtin set."""

    @initialize(capacity=capacities)
    def create(self, capacity):
        self.set = StringSet(capacity)
        self.model = set()

    @rule(word=words)
    def add(self, word):
        if word in self.model or len(self.model) < self.set.capacity:
            assert self.set.add(word) == (word not in self.model)
            self.model.add(word)
        else:
            with pytest.raises(SetFullError):
                self.set.add(word)

    @rule(word=words)
    def remove(self, word):
        assert self.set.remove(word) == (word in self.model)
        self.model.discard(word)

    @rule(word=words)
    def find(self, word):
        assert (self.set.find(word) is not None) == (word in self.model)

    @rule()
    def clear(self):
        self.set.clear()
        self.model.clear()

    @invariant()
    def consistent(self):
        if not hasattr(self, "set"):
            return
        assert len(self.set) == len(self.model)
        assert self.set.tombstones + len(self.model) <= self.set.capacity
        self.set.check_invariants()


TestStringSetMachine = StringSetMachine.TestCase
