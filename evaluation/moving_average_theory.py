"""Analytic ACF of a moving average of white noise, and the empirical comparison."""

from __future__ import annotations

import math
from typing import Iterable, Tuple

import pandas as pd
from scipy import stats

from models.autocorr import TimeSeries, autocorrelation, autocovariance
from models.autocorr.errors import InvalidWindowError


def _check_window(window: int) -> None:
    if window < 1:
        raise InvalidWindowError(f"window must be >= 1, got {window}")


def theoretical_autocovariance(lag: int, window: int = 3, sigma2: float = 1.0) -> float:
    """gamma(h) = sigma2 * (w - |h|) / w**2 for |h| < w, zero beyond the window."""
    _check_window(window)
    overlap = window - abs(lag)
    if overlap <= 0:
        return 0.0
    return sigma2 * overlap / window ** 2


def theoretical_autocorrelation(lag: int, window: int = 3) -> float:
    """rho(h) = (w - |h|) / w for |h| < w, zero beyond the window."""
    _check_window(window)
    return max(window - abs(lag), 0) / window


def white_noise_band(n: int, alpha: float = 0.05) -> Tuple[float, float]:
    """Two-sided band a white-noise sample ACF stays in with probability 1 - alpha."""
    if n < 1:
        raise ValueError("n must be positive")
    half_width = stats.norm.ppf(1.0 - alpha / 2.0) / math.sqrt(n)
    return -half_width, half_width


def compare_with_theory(
    series: TimeSeries,
    window: int = 3,
    sigma2: float = 1.0,
    lags: Iterable[int] = (0, 1, 2, 3),
) -> pd.DataFrame:
    """
    Tabulate sample autocovariance/ACF of a smoothed white-noise series
    next to the analytic values.

    Args:
        series: Moving average of white noise with variance ``sigma2``.
        window: Window used to build ``series``.
        sigma2: Variance of the underlying white noise.
        lags: Lags to evaluate.

    Returns:
        pd.DataFrame: Indexed by lag.
    """
    rows = []
    for lag in lags:
        empirical_gamma = autocovariance(series, lag)
        empirical_rho = autocorrelation(series, lag)
        true_gamma = theoretical_autocovariance(lag, window, sigma2)
        true_rho = theoretical_autocorrelation(lag, window)
        rows.append({
            'lag': lag,
            'autocovariance': empirical_gamma,
            'true_autocovariance': true_gamma,
            'autocovariance_abs_error': abs(empirical_gamma - true_gamma),
            'autocorrelation': empirical_rho,
            'true_autocorrelation': true_rho,
            'autocorrelation_abs_error': abs(empirical_rho - true_rho),
        })
    return pd.DataFrame(rows).set_index('lag')
