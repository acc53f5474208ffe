"""Descriptive statistics for evenly spaced time series."""

from .errors import (  # noqa: F401
    AutocorrError,
    DegenerateVarianceError,
    InsufficientDataError,
    InvalidRangeError,
    InvalidSeriesError,
    InvalidWindowError,
    LagOutOfRangeError,
    LengthMismatchError,
)
from .series import TimeSeries, generate_white_noise, make_rng  # noqa: F401
from .transforms import moving_average  # noqa: F401
from .lag import align_lag, lagged_pair  # noqa: F401
from .sample_stats import (  # noqa: F401
    acf,
    autocorrelation,
    autocovariance,
    correlation,
    covariance,
    mean,
    variance,
)
