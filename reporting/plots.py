from __future__ import annotations

from typing import Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from models.autocorr import TimeSeries  # noqa: E402


def plot_series(*series: TimeSeries, limit: Optional[int] = 100, title: Optional[str] = None) -> Figure:
    """Overlay the first ``limit`` points of each series. The caller decides whether to save."""
    if not series:
        raise ValueError("at least one series is required")
    fig, ax = plt.subplots(figsize=(9, 4))
    for ts in series:
        stop = len(ts) if limit is None else min(limit, len(ts))
        ax.plot(ts.timestamps[:stop], ts.values[:stop], label=ts.label or None)
    if any(ts.label for ts in series):
        ax.legend()
    if title:
        ax.set_title(title)
    ax.set_xlabel('timestamp')
    fig.tight_layout()
    return fig
