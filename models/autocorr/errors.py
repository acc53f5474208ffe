"""Validation errors raised by the autocorrelation toolkit."""

from __future__ import annotations


class AutocorrError(ValueError):
    """Base class for all precondition failures in this package."""


class InvalidSeriesError(AutocorrError):
    """Timestamps and values do not form an evenly spaced series."""


class InvalidRangeError(AutocorrError):
    """Generator range is empty or the step is not positive."""


class InvalidWindowError(AutocorrError):
    """Moving-average window is not usable for the given series."""


class LagOutOfRangeError(AutocorrError):
    """Lag is negative or leaves no overlapping observations."""


class LengthMismatchError(AutocorrError):
    """Two sequences that must be aligned have different lengths."""


class InsufficientDataError(AutocorrError):
    """Too few observations for an unbiased estimate."""


class DegenerateVarianceError(AutocorrError):
    """A correlation was requested for a sequence with zero variance."""
