"""Tests for the power-of-two capacity policy."""

from hypothesis import given, settings
from hypothesis import strategies as st

from chesscli.strbuf.growth import MIN_CAPACITY, WORD_SIZE, capacity_for


class TestCapacityFor:
    """Example-based checks of capacity_for()."""

    def test_floor_is_two_words(self) -> None:
        assert MIN_CAPACITY == 2 * WORD_SIZE
        assert capacity_for(0) == MIN_CAPACITY
        assert capacity_for(1) == MIN_CAPACITY

    def test_exact_floor(self) -> None:
        assert capacity_for(MIN_CAPACITY) == MIN_CAPACITY

    def test_one_past_floor_doubles(self) -> None:
        assert capacity_for(MIN_CAPACITY + 1) == 2 * MIN_CAPACITY

    def test_rounds_up_to_power_of_two(self) -> None:
        assert capacity_for(100) == 128
        assert capacity_for(1000) == 1024
        assert capacity_for(1024) == 1024
        assert capacity_for(1025) == 2048


class TestCapacityForProperties:
    """Property-based checks of capacity_for()."""

    @given(st.integers(min_value=0, max_value=1 << 40))
    @settings(max_examples=200)
    def test_power_of_two_above_floor(self, n: int) -> None:
        p = capacity_for(n)
        assert p & (p - 1) == 0, f"{p} is not a power of two"
        assert p >= MIN_CAPACITY
        assert p >= n

    @given(st.integers(min_value=0, max_value=1 << 40))
    @settings(max_examples=200)
    def test_smallest_such_value(self, n: int) -> None:
        p = capacity_for(n)
        assert p == MIN_CAPACITY or p // 2 < n

    @given(
        st.integers(min_value=0, max_value=1 << 30),
        st.integers(min_value=0, max_value=1 << 30),
    )
    @settings(max_examples=200)
    def test_monotonic(self, a: int, b: int) -> None:
        low, high = sorted((a, b))
        assert capacity_for(low) <= capacity_for(high)
