"""Align two realizations of a series at a time offset."""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

from .errors import LagOutOfRangeError, LengthMismatchError
from .series import TimeSeries

SeriesLike = Union[TimeSeries, Sequence[float], np.ndarray]


def as_array(data: SeriesLike) -> np.ndarray:
    """Values of a TimeSeries, or a 1-D float array built from any sequence."""
    if isinstance(data, TimeSeries):
        return data.values
    array = np.asarray(data, dtype=float)
    if array.ndim != 1:
        raise ValueError("sequences must be one-dimensional")
    return array


def align_lag(first: SeriesLike, second: SeriesLike, lag: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(first[:n-lag], second[lag:])`` so position t pairs x_t with y_{t+lag}."""
    x = as_array(first)
    y = as_array(second)
    if x.shape[0] != y.shape[0]:
        raise LengthMismatchError(f"cannot align sequences of length {x.shape[0]} and {y.shape[0]}")
    if isinstance(lag, bool) or not isinstance(lag, (int, np.integer)):
        raise LagOutOfRangeError(f"lag must be an integer, got {lag!r}")

    n = x.shape[0]
    if lag < 0 or lag >= n:
        raise LagOutOfRangeError(f"lag {lag} outside [0, {n - 1}]")

    return x[:n - lag].copy(), y[lag:].copy()


def lagged_pair(series: SeriesLike, lag: int) -> Tuple[np.ndarray, np.ndarray]:
    """Pair a series with itself shifted by ``lag`` steps."""
    return align_lag(series, series, lag)
