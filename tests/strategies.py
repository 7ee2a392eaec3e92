import hypothesis.strategies as st

# Small alphabet so collisions, duplicates and removals of present elements are common
words = st.text(alphabet="abcdefgh", min_size=1, max_size=3)

capacities = st.integers(min_value=1, max_value=16)

operations = st.lists(
    st.tuples(st.sampled_from(["add", "remove"]), words),
    max_size=60,
)


def bucket_hash(element: str) -> int:
    """Deliberately poor hash: only the string length matters."""
    return len(element)


def three_way(a, b) -> int:
    return 0 if a == b else 1
