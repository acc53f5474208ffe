import numpy as np
import pytest

from models.autocorr import LagOutOfRangeError, LengthMismatchError, TimeSeries, align_lag, lagged_pair


def _make_series() -> TimeSeries:
    return TimeSeries.from_values([1.0, 2.0, 3.0, 4.0, 5.0])


def test_lag_zero_returns_input_twice():
    series = _make_series()
    first, second = lagged_pair(series, 0)

    np.testing.assert_array_equal(first, series.values)
    np.testing.assert_array_equal(second, series.values)


def test_lag_drops_unmatched_boundaries():
    first, second = lagged_pair(_make_series(), 2)

    np.testing.assert_array_equal(first, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(second, [3.0, 4.0, 5.0])


def test_align_lag_pairs_two_different_sequences():
    first, second = align_lag([1, 2, 3, 4], [10, 20, 30, 40], 1)

    np.testing.assert_array_equal(first, [1, 2, 3])
    np.testing.assert_array_equal(second, [20, 30, 40])


def test_aligned_arrays_are_independent_of_source():
    series = _make_series()
    first, _ = lagged_pair(series, 1)
    first[0] = 99.0

    assert series.values[0] == 1.0


@pytest.mark.parametrize("lag", [-1, 5, 6, 1.5])
def test_lag_out_of_range(lag):
    with pytest.raises(LagOutOfRangeError):
        lagged_pair(_make_series(), lag)


def test_length_mismatch():
    with pytest.raises(LengthMismatchError):
        align_lag([1, 2, 3], [1, 2], 0)
