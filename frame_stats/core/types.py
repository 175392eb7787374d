"""
Type definitions for frame statistics.
"""

from dataclasses import dataclass, field
from typing import Dict, NamedTuple

from .errors import StatisticsConfigError


class TimerSample(NamedTuple):
    """One timer's reading for a single frame, in nanoseconds."""
    gpu: float
    cpu: float


@dataclass
class SampleFrame:
    """All timer readings delivered for one frame plus the measured frame rate."""
    samples: Dict[str, TimerSample] = field(default_factory=dict)
    frame_rate: float = 0.0


class TimerSnapshot(NamedTuple):
    """Immutable view of a timer handed to renderers."""
    name: str
    avg_time_gpu: float
    avg_time_cpu: float
    color: str
    time_gpu: float = 0.0
    time_cpu: float = 0.0

    @property
    def avg_time_total(self) -> float:
        return self.avg_time_gpu + self.avg_time_cpu


@dataclass
class TimerRecord:
    """Mutable per-timer state kept in the registry across frames."""
    name: str
    time_gpu: float
    time_cpu: float
    avg_time_gpu: float
    avg_time_cpu: float
    color: str

    @classmethod
    def first_observation(cls, name: str, gpu: float, cpu: float, color: str) -> 'TimerRecord':
        """Create a record whose averages start at the first raw reading."""
        return cls(
            name=name,
            time_gpu=gpu,
            time_cpu=cpu,
            avg_time_gpu=gpu,
            avg_time_cpu=cpu,
            color=color,
        )

    @property
    def avg_time_total(self) -> float:
        """Combined smoothed cost used for ranking."""
        return self.avg_time_gpu + self.avg_time_cpu

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            name=self.name,
            avg_time_gpu=self.avg_time_gpu,
            avg_time_cpu=self.avg_time_cpu,
            color=self.color,
            time_gpu=self.time_gpu,
            time_cpu=self.time_cpu,
        )


class StatisticsConfig:
    """Configuration for frame statistics aggregation and display."""
    
    def __init__(
        self,
        min_time: float = 1000,
        alpha: float = 0.95,
        max_value: float = 1e9 / 30,
        max_entries: int = 10,
        lightness: float = 0.5,
        saturation: float = 0.3
    ):
        """
        Initialize frame statistics configuration.
        
        Args:
            min_time: Significance threshold in nanoseconds. A timer is dropped once
                      its raw and smoothed GPU/CPU times are all at or below it.
                      Default: 1000
            
            alpha: Exponential smoothing constant. Values closer to 1 react slower
                   and give a calmer display. Must be in [0, 1).
                   Default: 0.95
            
            max_value: Time in nanoseconds that maps to a full-width bar.
                       Default: one frame at 30 fps
            
            max_entries: Number of ranked timers a renderer should display.
                         The ranking itself is never truncated.
                         Default: 10
            
            lightness: Lightness used by the default HashColorProvider. Default: 0.5
            
            saturation: Saturation used by the default HashColorProvider. Default: 0.3
        """
        if min_time < 0:
            raise StatisticsConfigError(f"min_time must be non-negative, got {min_time}")
        if not 0 <= alpha < 1:
            raise StatisticsConfigError(f"alpha must be in [0, 1), got {alpha}")
        if max_value <= 0:
            raise StatisticsConfigError(f"max_value must be positive, got {max_value}")
        if max_entries < 0:
            raise StatisticsConfigError(f"max_entries must be non-negative, got {max_entries}")
        
        self.min_time = min_time
        self.alpha = alpha
        self.max_value = max_value
        self.max_entries = max_entries
        self.lightness = lightness
        self.saturation = saturation
