"""Smoothing transforms over TimeSeries."""

from __future__ import annotations

import logging
from typing import Literal, Optional

import numpy as np
import pandas as pd

from .errors import InvalidWindowError
from .series import TimeSeries

logger = logging.getLogger(__name__)

Alignment = Literal["center", "trailing", "leading"]


def moving_average(
    series: TimeSeries,
    window: int = 3,
    align: Alignment = "center",
    label: Optional[str] = "Moving average",
) -> TimeSeries:
    """
    Mean of every ``window`` consecutive values, without padding.

    The result has ``len(series) - window + 1`` points. ``align`` decides
    which source timestamp each mean is attached to: the middle of the
    window (``"center"``, odd windows only), its last point (``"trailing"``)
    or its first point (``"leading"``).
    """
    if align not in ("center", "trailing", "leading"):
        raise ValueError(f"Unknown align '{align}'. Use 'center', 'trailing' or 'leading'.")
    if isinstance(window, bool) or not isinstance(window, (int, np.integer)):
        raise InvalidWindowError(f"window must be an integer, got {window!r}")

    n = len(series)
    if window < 1:
        raise InvalidWindowError(f"window must be >= 1, got {window}")
    if window > n:
        raise InvalidWindowError(f"window ({window}) exceeds series length ({n})")
    if align == "center" and window % 2 == 0:
        raise InvalidWindowError(f"centered window must be odd, got {window}")

    rolled = pd.Series(series.values).rolling(window).mean().to_numpy()[window - 1:]

    if align == "center":
        half = window // 2
        timestamps = series.timestamps[half:n - half]
    elif align == "trailing":
        timestamps = series.timestamps[window - 1:]
    else:
        timestamps = series.timestamps[:n - window + 1]

    logger.debug("Moving average (window=%d, align=%s): %d -> %d points", window, align, n, rolled.shape[0])
    return TimeSeries(timestamps=timestamps, values=rolled, label=label if label is not None else series.label)
