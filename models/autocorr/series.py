"""Evenly spaced time series and the seeded white-noise generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from .errors import InvalidRangeError, InvalidSeriesError

logger = logging.getLogger(__name__)

TimestampLike = Union[str, pd.Timestamp, np.datetime64]
StepLike = Union[str, pd.Timedelta, np.timedelta64]

DEFAULT_START = "2018-01-01 01:00"
DEFAULT_STEP = "1min"


@dataclass(frozen=True, eq=False)
class TimeSeries:
    """Immutable (timestamp, value) sequence with a fixed step."""

    timestamps: pd.DatetimeIndex
    values: np.ndarray
    label: str = ""

    def __post_init__(self):
        index = pd.DatetimeIndex(self.timestamps)
        values = np.array(self.values, dtype=float)
        if values.ndim != 1:
            raise InvalidSeriesError("values must be shape (N,)")
        if values.shape[0] != len(index):
            raise InvalidSeriesError(
                f"values ({values.shape[0]}) and timestamps ({len(index)}) differ in length"
            )
        if len(index) > 1:
            deltas = np.diff(index.asi8)
            if np.any(deltas <= 0):
                raise InvalidSeriesError("timestamps must be strictly increasing")
            if np.any(deltas != deltas[0]):
                raise InvalidSeriesError("timestamps must be evenly spaced")
        values.setflags(write=False)
        object.__setattr__(self, "timestamps", index)
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return self.values.shape[0]

    @property
    def step(self) -> Optional[pd.Timedelta]:
        if len(self) < 2:
            return None
        return self.timestamps[1] - self.timestamps[0]

    def to_series(self) -> pd.Series:
        return pd.Series(self.values, index=self.timestamps, name=self.label or None)

    @classmethod
    def from_values(
        cls,
        values: Sequence[float],
        start: TimestampLike = DEFAULT_START,
        step: StepLike = DEFAULT_STEP,
        label: str = "",
    ) -> "TimeSeries":
        """Attach evenly spaced timestamps to an existing sequence of values."""
        values = np.asarray(values, dtype=float)
        step_td = _as_step(step)
        timestamps = pd.date_range(start=pd.Timestamp(start), periods=values.shape[0], freq=step_td)
        return cls(timestamps=timestamps, values=values, label=label)


def _as_step(step: StepLike) -> pd.Timedelta:
    step_td = pd.Timedelta(step)
    if step_td <= pd.Timedelta(0):
        raise InvalidRangeError(f"step must be positive, got {step_td}")
    return step_td


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Return the generator handle every random draw in a run is threaded through."""
    return np.random.default_rng(seed)


def generate_white_noise(
    start: TimestampLike,
    end: TimestampLike,
    step: StepLike,
    rng: Optional[np.random.Generator] = None,
    *,
    seed: Optional[int] = None,
    scale: float = 1.0,
    label: str = "White noise",
) -> TimeSeries:
    """
    Draw i.i.d. normal values on the timestamps ``start, start + step, ..., <= end``.

    Args:
        start: First timestamp.
        end: Last admissible timestamp (inclusive).
        step: Spacing between consecutive timestamps.
        rng: Generator to draw from. Advanced in place by ``n`` normal draws.
        seed: Builds a fresh generator when ``rng`` is not given.
        scale: Standard deviation of the noise.
        label: Label carried by the returned series.

    Returns:
        TimeSeries: Values drawn from N(0, scale**2).
    """
    if rng is None:
        if seed is None:
            raise ValueError("either rng or seed must be provided")
        rng = make_rng(seed)

    start_ts = pd.Timestamp(start)
    end_ts = pd.Timestamp(end)
    if end_ts <= start_ts:
        raise InvalidRangeError(f"end ({end_ts}) must be after start ({start_ts})")
    step_td = _as_step(step)
    if scale <= 0:
        raise InvalidRangeError(f"scale must be positive, got {scale}")

    timestamps = pd.date_range(start=start_ts, end=end_ts, freq=step_td)
    values = rng.normal(0.0, scale, size=len(timestamps))
    logger.debug("Generated %d white-noise values from %s to %s", len(timestamps), start_ts, timestamps[-1])
    return TimeSeries(timestamps=timestamps, values=values, label=label)
