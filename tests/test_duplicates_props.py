"""Property checks for the duplicate detector (hypothesis)."""
from hypothesis import given, strategies as st

from srt_dupes.duplicates import find_duplicates

items_st = st.lists(st.integers(min_value=0, max_value=3), max_size=40)


def _has_doubled_run(items, max_len=3):
    n = len(items)
    return any(
        items[i : i + L] == items[i + L : i + 2 * L]
        for i in range(n)
        for L in range(1, max_len + 1)
        if i + 2 * L <= n
    )


@given(items_st)
def test_result_invariants(items):
    res = find_duplicates(items)
    assert 0 <= len(res.sequence) <= 3
    if res.sequence:
        assert res.count >= 1
    else:
        assert res.count == 0


@given(items_st)
def test_empty_iff_no_doubled_run(items):
    res = find_duplicates(items)
    assert bool(res.sequence) == _has_doubled_run(items)


@given(items_st)
def test_pure_and_idempotent(items):
    before = list(items)
    assert find_duplicates(items) == find_duplicates(items)
    assert items == before


@given(st.lists(st.integers(), unique=True, max_size=30))
def test_distinct_values_never_repeat(items):
    res = find_duplicates(items)
    assert res.sequence == [] and res.count == 0


@given(st.text(min_size=1, max_size=5), st.integers(min_value=2, max_value=20))
def test_uniform_run_counts_every_item(line, n):
    res = find_duplicates([line] * n)
    assert res.sequence == [line]
    assert res.count == n
