"""
Frame Statistics - live GPU/CPU timer ranking for overlay display
"""

__version__ = "1.0.0"

from .core.statistics import FrameStatistics
from .core.types import SampleFrame, StatisticsConfig, TimerRecord, TimerSample, TimerSnapshot
from .core.errors import FrameStatisticsError, FrameFormatError, StatisticsConfigError

__all__ = [
    "FrameStatistics",
    "SampleFrame",
    "StatisticsConfig",
    "TimerRecord",
    "TimerSample",
    "TimerSnapshot",
    "FrameStatisticsError",
    "FrameFormatError",
    "StatisticsConfigError",
]
