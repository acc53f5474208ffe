import dataclasses

import numpy as np
import pandas as pd
import pytest

from models.autocorr import InvalidRangeError, InvalidSeriesError, TimeSeries, generate_white_noise, make_rng


def test_from_values_builds_evenly_spaced_index():
    ts = TimeSeries.from_values([1.0, 2.0, 3.0], start="2018-01-01", step="1min", label="x")

    assert len(ts) == 3
    assert ts.step == pd.Timedelta(minutes=1)
    assert ts.timestamps[0] == pd.Timestamp("2018-01-01")
    assert ts.to_series().name == "x"


def test_time_series_is_immutable():
    ts = TimeSeries.from_values([1.0, 2.0, 3.0])

    with pytest.raises(ValueError):
        ts.values[0] = 10.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        ts.label = "changed"  # type: ignore[misc]


def test_time_series_rejects_uneven_or_unsorted_timestamps():
    uneven = pd.DatetimeIndex(["2018-01-01 00:00", "2018-01-01 00:01", "2018-01-01 00:03"])
    unsorted = pd.DatetimeIndex(["2018-01-01 00:01", "2018-01-01 00:00"])

    with pytest.raises(InvalidSeriesError):
        TimeSeries(timestamps=uneven, values=np.zeros(3))
    with pytest.raises(InvalidSeriesError):
        TimeSeries(timestamps=unsorted, values=np.zeros(2))
    with pytest.raises(InvalidSeriesError):
        TimeSeries(timestamps=uneven, values=np.zeros(2))


def test_generate_white_noise_includes_end_timestamp():
    ts = generate_white_noise("2018-01-01 00:00", "2018-01-01 00:09", "1min", seed=3)

    assert len(ts) == 10
    assert ts.timestamps[-1] == pd.Timestamp("2018-01-01 00:09")
    assert ts.label == "White noise"


def test_generate_white_noise_is_reproducible_for_a_seed():
    first = generate_white_noise("2018-01-01", "2018-01-02", "1h", seed=8092)
    second = generate_white_noise("2018-01-01", "2018-01-02", "1h", rng=make_rng(8092))

    np.testing.assert_array_equal(first.values, second.values)


def test_shared_generator_advances_between_calls():
    rng = make_rng(8092)
    first = generate_white_noise("2018-01-01", "2018-01-02", "1h", rng)
    second = generate_white_noise("2018-01-01", "2018-01-02", "1h", rng)

    assert not np.array_equal(first.values, second.values)


def test_generate_white_noise_respects_scale():
    ts = generate_white_noise("2018-01-01", "2018-03-01", "1min", seed=11, scale=2.0)

    assert np.std(ts.values, ddof=1) == pytest.approx(2.0, rel=0.02)


@pytest.mark.parametrize(
    "start, end, step",
    [
        ("2018-01-02", "2018-01-01", "1min"),
        ("2018-01-01", "2018-01-01", "1min"),
        ("2018-01-01", "2018-01-02", "0min"),
        ("2018-01-01", "2018-01-02", "-1min"),
    ],
)
def test_generate_white_noise_rejects_bad_ranges(start, end, step):
    with pytest.raises(InvalidRangeError):
        generate_white_noise(start, end, step, seed=1)


def test_generate_white_noise_requires_random_state():
    with pytest.raises(ValueError):
        generate_white_noise("2018-01-01", "2018-01-02", "1h")
