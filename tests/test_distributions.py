"""Tests for tinymt_rng.distributions module."""

from __future__ import annotations

import jax.numpy as jnp
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tinymt_rng.distributions import partition, partition_range, switch
from tinymt_rng.engine import UINT32_MAX, TinyMT32
from tinymt_rng.exceptions import InvalidArgumentError

VERY_LARGE_EPSILON = 0.001


class TestPartition:
    """Tests for partition."""

    def test_length_without_zero(self):
        rng = TinyMT32(1, 3, 3, 7)
        assert partition(rng, 5, 1.0, add_zero=False).shape == (5,)

    def test_length_with_zero(self):
        rng = TinyMT32(1, 3, 3, 7)
        assert partition(rng, 5, 1.0, add_zero=True).shape == (6,)

    def test_no_variance_gives_equal_gaps(self):
        rng = TinyMT32(1, 3, 3, 7)
        d = partition(rng, 5, 1.0, add_zero=True)
        assert float(d[0]) == 0.0
        for i in range(1, 6):
            assert float(d[i] - d[i - 1]) == pytest.approx(1 / 5, abs=VERY_LARGE_EPSILON)

    def test_non_decreasing(self):
        rng = TinyMT32(1, 3, 3, 7)
        d = partition(rng, 5, 1.0, add_zero=True)
        for i in range(1, 6):
            assert float(d[i]) >= float(d[i - 1])

    def test_dtype(self):
        assert partition(TinyMT32(0), 3).dtype == jnp.float32

    def test_consumes_one_draw_per_interval(self, sequence):
        source = sequence([0] * 4)
        partition(source, 4, 2.0, add_zero=True)
        assert source.drawn == 4

    def test_uneven_lengths_follow_draws(self, sequence):
        # raw lengths 1 and 3 normalize to 0.25 and 0.75
        source = sequence([0, 0x80000000])
        d = partition(source, 2, 5.0)
        assert jnp.allclose(d, jnp.array([0.25, 1.0]))

    def test_negative_variation(self):
        with pytest.raises(InvalidArgumentError):
            partition(TinyMT32(0), 5, -0.1)

    def test_no_intervals(self):
        with pytest.raises(InvalidArgumentError):
            partition(TinyMT32(0), 0)

    @given(
        st.integers(min_value=0, max_value=UINT32_MAX),
        st.integers(min_value=1, max_value=20),
        st.floats(min_value=0.0, max_value=10.0),
    )
    @settings(max_examples=20, deadline=None)
    def test_covers_unit_interval_property(self, seed, n, variation):
        d = partition(TinyMT32(seed), n, variation)
        assert d.shape == (n,)
        assert bool(jnp.all(jnp.diff(d) >= 0))
        assert float(d[0]) > 0.0
        assert float(d[-1]) == pytest.approx(1.0, abs=1e-4)


class TestPartitionRange:
    """Tests for partition_range."""

    def test_maps_onto_range(self):
        d = partition_range(TinyMT32(1, 3, 3, 7), 4, 1.0, 10.0, 20.0)
        assert jnp.allclose(d, jnp.array([12.5, 15.0, 17.5, 20.0]))

    def test_add_zero_starts_at_min(self):
        d = partition_range(TinyMT32(1), 3, 2.0, -5.0, 5.0, add_zero=True)
        assert d.shape == (4,)
        assert float(d[0]) == -5.0
        assert float(d[-1]) == pytest.approx(5.0, abs=1e-4)


class TestSwitch:
    """Tests for switch."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [(0, 0), (3, 0), (4, 1), (5, 1), (6, 2), (7, 0), (13, 2)],
    )
    def test_cumulative_walk(self, constant, word, expected):
        assert switch(constant(word), (4, 2, 1)) == expected

    def test_zero_weight_skipped(self, constant):
        assert switch(constant(0), (0, 1, 1)) == 1

    def test_single_weight(self, constant):
        assert switch(constant(UINT32_MAX), (9,)) == 0

    def test_equal_weights(self, constant):
        assert [switch(constant(w), (1, 1, 1, 1)) for w in range(4)] == [0, 1, 2, 3]

    def test_empty(self, constant):
        with pytest.raises(InvalidArgumentError):
            switch(constant(0), ())

    def test_all_zero(self, constant):
        with pytest.raises(InvalidArgumentError):
            switch(constant(0), (0, 0))

    def test_negative_weight(self, constant):
        with pytest.raises(InvalidArgumentError):
            switch(constant(0), (3, -1))

    def test_frequencies(self):
        rng = TinyMT32(1, 3, 3, 7)
        counts = [0, 0, 0]
        for _ in range(7000):
            counts[switch(rng, (4, 2, 1))] += 1
        assert 3800 < counts[0] < 4200
        assert 1800 < counts[1] < 2200
        assert 850 < counts[2] < 1150

    @given(
        st.integers(min_value=0, max_value=UINT32_MAX),
        st.lists(st.integers(min_value=0, max_value=5), min_size=1, max_size=8).filter(any),
    )
    @settings(max_examples=50)
    def test_never_picks_zero_weight_property(self, seed, weights):
        rng = TinyMT32(seed)
        for _ in range(10):
            index = switch(rng, weights)
            assert 0 <= index < len(weights)
            assert weights[index] > 0
