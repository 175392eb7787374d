"""Core components for frame statistics."""

from .errors import FrameStatisticsError, StatisticsConfigError, FrameFormatError
from .types import SampleFrame, StatisticsConfig, TimerRecord, TimerSample, TimerSnapshot
from .statistics import FrameStatistics

__all__ = [
    "FrameStatistics",
    "FrameStatisticsError",
    "FrameFormatError",
    "SampleFrame",
    "StatisticsConfig",
    "StatisticsConfigError",
    "TimerRecord",
    "TimerSample",
    "TimerSnapshot",
]
