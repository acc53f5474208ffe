import numpy as np
import pytest

from models.autocorr import InvalidWindowError, TimeSeries, moving_average


def _make_ramp(n: int = 10) -> TimeSeries:
    return TimeSeries.from_values(np.arange(1, n + 1), start="2018-01-01", step="1min", label="ramp")


def test_three_point_average_of_ramp():
    result = moving_average(_make_ramp(), window=3)

    np.testing.assert_allclose(result.values, [2, 3, 4, 5, 6, 7, 8, 9])
    assert result.label == "Moving average"


def test_centered_average_drops_one_point_per_side():
    ramp = _make_ramp()
    result = moving_average(ramp, window=3)

    assert len(result) == len(ramp) - 2
    assert result.timestamps.equals(ramp.timestamps[1:-1])
    assert result.step == ramp.step


def test_trailing_and_leading_alignment_only_move_timestamps():
    ramp = _make_ramp()
    centered = moving_average(ramp, window=3)
    trailing = moving_average(ramp, window=3, align="trailing")
    leading = moving_average(ramp, window=3, align="leading")

    np.testing.assert_array_equal(trailing.values, centered.values)
    np.testing.assert_array_equal(leading.values, centered.values)
    assert trailing.timestamps.equals(ramp.timestamps[2:])
    assert leading.timestamps.equals(ramp.timestamps[:-2])


def test_even_window_allowed_when_not_centered():
    result = moving_average(_make_ramp(4), window=2, align="trailing")

    np.testing.assert_allclose(result.values, [1.5, 2.5, 3.5])


def test_full_length_window_returns_single_mean():
    result = moving_average(_make_ramp(5), window=5)

    assert len(result) == 1
    assert result.values[0] == pytest.approx(3.0)


def test_window_of_one_is_identity():
    ramp = _make_ramp()
    result = moving_average(ramp, window=1, label=None)

    np.testing.assert_array_equal(result.values, ramp.values)
    assert result.label == "ramp"


@pytest.mark.parametrize("window", [0, -1, 2, 4, 11, 3.0])
def test_invalid_centered_windows(window):
    with pytest.raises(InvalidWindowError):
        moving_average(_make_ramp(), window=window)


def test_unknown_alignment():
    with pytest.raises(ValueError):
        moving_average(_make_ramp(), window=3, align="middle")  # type: ignore[arg-type]
