"""Sample estimators: mean, variance, covariance, correlation and the ACF."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
from tqdm import tqdm

from .errors import (
    DegenerateVarianceError,
    InsufficientDataError,
    LagOutOfRangeError,
    LengthMismatchError,
)
from .lag import SeriesLike, as_array, lagged_pair


def _cross_moment(x: np.ndarray, y: np.ndarray) -> float:
    # Shared by variance and covariance so that cov(x, x) == var(x) bit for bit.
    n = x.shape[0]
    return float(np.sum((x - x.mean()) * (y - y.mean())) / (n - 1))


def mean(seq: SeriesLike) -> float:
    x = as_array(seq)
    if x.shape[0] == 0:
        raise InsufficientDataError("mean of an empty sequence")
    return float(x.mean())


def variance(seq: SeriesLike) -> float:
    """Unbiased sample variance (divisor n - 1)."""
    x = as_array(seq)
    if x.shape[0] < 2:
        raise InsufficientDataError(f"variance needs at least 2 values, got {x.shape[0]}")
    return _cross_moment(x, x)


def covariance(seq_a: SeriesLike, seq_b: SeriesLike) -> float:
    """Unbiased sample covariance of two aligned sequences (divisor n - 1)."""
    x = as_array(seq_a)
    y = as_array(seq_b)
    if x.shape[0] != y.shape[0]:
        raise LengthMismatchError(f"covariance of sequences of length {x.shape[0]} and {y.shape[0]}")
    if x.shape[0] < 2:
        raise InsufficientDataError(f"covariance needs at least 2 pairs, got {x.shape[0]}")
    return _cross_moment(x, y)


def correlation(seq_a: SeriesLike, seq_b: SeriesLike) -> float:
    """Pearson correlation ``cov(a, b) / sqrt(var(a) * var(b))``, bounded to [-1, 1]."""
    cov_ab = covariance(seq_a, seq_b)
    var_a = variance(seq_a)
    var_b = variance(seq_b)
    if var_a == 0.0 or var_b == 0.0:
        raise DegenerateVarianceError("correlation is undefined for a constant sequence")
    # var_a * var_b leaves float range for finite variances near 1e-180 or 1e160.
    if var_a == var_b:
        value = cov_ab / var_a
    else:
        value = (cov_ab / math.sqrt(var_a)) / math.sqrt(var_b)
    return float(np.clip(value, -1.0, 1.0))


def autocovariance(series: SeriesLike, lag: int) -> float:
    """Sample estimate of cov(x_t, x_{t+lag})."""
    return covariance(*lagged_pair(series, lag))


def autocorrelation(series: SeriesLike, lag: int) -> float:
    """Sample estimate of corr(x_t, x_{t+lag})."""
    return correlation(*lagged_pair(series, lag))


def acf(series: SeriesLike, max_lag: int, show_progress: bool = False) -> pd.DataFrame:
    """
    Autocovariance and autocorrelation for every lag in ``0..max_lag``.

    Each lag uses the two overlapping sub-sequences of length ``n - lag``,
    so ``max_lag`` may be at most ``n - 2``.

    Returns:
        pd.DataFrame: Indexed by ``lag`` with columns ``autocovariance``,
        ``autocorrelation`` and ``n_pairs``.
    """
    x = as_array(series)
    n = x.shape[0]
    if isinstance(max_lag, bool) or not isinstance(max_lag, (int, np.integer)):
        raise LagOutOfRangeError(f"max_lag must be an integer, got {max_lag!r}")
    if max_lag < 0 or max_lag > n - 2:
        raise LagOutOfRangeError(f"max_lag {max_lag} outside [0, {n - 2}] for {n} values")

    lags = range(max_lag + 1)
    if show_progress:
        lags = tqdm(lags, desc="Computing autocorrelation", unit="lag")

    rows = []
    for lag in lags:
        head, tail = lagged_pair(x, lag)
        rows.append({
            'lag': lag,
            'autocovariance': covariance(head, tail),
            'autocorrelation': correlation(head, tail),
            'n_pairs': head.shape[0],
        })
    return pd.DataFrame(rows).set_index('lag')
