"""
Exception types raised by the frame statistics pipeline.
"""


class FrameStatisticsError(Exception):
    """Base class for all frame statistics errors."""


class StatisticsConfigError(FrameStatisticsError):
    """Raised when the statistics subsystem is configured incorrectly."""


class FrameFormatError(FrameStatisticsError, ValueError):
    """Raised when an incoming sample frame does not have the expected shape."""
