"""
Per-frame timer aggregation: merge, retire, smooth and rank.
"""

from typing import List, Set

from ..core.errors import StatisticsConfigError
from ..core.types import SampleFrame, StatisticsConfig, TimerRecord, TimerSnapshot
from .registry import ColorFn, TimerRegistry


class TimerAggregator:
    """Moves a TimerRegistry from last frame's state to this frame's state."""
    
    def __init__(self, registry: TimerRegistry, color_fn: ColorFn, config: StatisticsConfig = None):
        """
        Initialize with the registry to mutate and the color collaborator.
        
        Args:
            registry: TimerRegistry owned by the caller
            color_fn: Callable mapping a timer name to a display color
            config: StatisticsConfig, defaults are used when omitted
            
        Raises:
            StatisticsConfigError: If no color collaborator is supplied
        """
        if color_fn is None or not callable(color_fn):
            raise StatisticsConfigError(
                "A color provider (callable name -> color) is required to create timer records"
            )
        self.registry = registry
        self.color_fn = color_fn
        self.config = config or StatisticsConfig()
    
    def aggregate(self, frame: SampleFrame) -> List[TimerSnapshot]:
        """
        Apply one frame to the registry and return the complete ranking.
        
        The steps run in a fixed order, each one working on the output of the
        previous step.
        
        Args:
            frame: SampleFrame for the current frame
            
        Returns:
            Snapshots of all surviving timers, most expensive first
        """
        # Step 1: Overwrite or zero the raw times of tracked timers
        consumed = self.reset_times(frame)
        
        # Step 2: Create records for names seen for the first time
        self.add_new_elements(frame, consumed)
        
        # Step 3: Retire timers with negligible contribution
        self.remove_insignificant()
        
        # Step 4: Advance the moving averages of the survivors
        self.update_averages()
        
        # Step 5: Rank by combined smoothed cost
        return [record.snapshot() for record in self.rank()]
    
    def reset_times(self, frame: SampleFrame) -> Set[str]:
        """
        Copy this frame's readings into tracked records, zeroing the rest.
        
        Readings are taken literally here, including negative GPU times; the
        "not present" meaning of a negative GPU time only applies to new names.
        
        Returns:
            Names from the frame that matched an existing record
        """
        consumed = set()
        for record in self.registry.all():
            sample = frame.samples.get(record.name)
            if sample is not None:
                record.time_gpu = sample.gpu
                record.time_cpu = sample.cpu
                consumed.add(record.name)
            else:
                record.time_gpu = 0
                record.time_cpu = 0
        return consumed
    
    def add_new_elements(self, frame: SampleFrame, consumed: Set[str]) -> int:
        """
        Create records for unconsumed names with a non-negative GPU time.
        
        Returns:
            Number of records created
        """
        created = 0
        for name, sample in frame.samples.items():
            if name in consumed or sample.gpu < 0:
                continue
            self.registry.upsert_raw(name, sample.gpu, sample.cpu, self.color_fn)
            created += 1
        return created
    
    def is_insignificant(self, record: TimerRecord) -> bool:
        """True when raw and smoothed GPU/CPU times are all at or below min_time."""
        min_time = self.config.min_time
        return (record.time_gpu <= min_time and record.time_cpu <= min_time
                and record.avg_time_gpu <= min_time and record.avg_time_cpu <= min_time)
    
    def remove_insignificant(self) -> int:
        """Drop negligible timers. Returns the number removed."""
        return self.registry.remove_where(self.is_insignificant)
    
    def update_averages(self):
        """Exponentially smooth the raw times of every tracked record."""
        alpha = self.config.alpha
        for record in self.registry.all():
            record.avg_time_gpu = record.avg_time_gpu * alpha + record.time_gpu * (1 - alpha)
            record.avg_time_cpu = record.avg_time_cpu * alpha + record.time_cpu * (1 - alpha)
    
    def rank(self) -> List[TimerRecord]:
        """
        Sort records by descending combined average and store that order.
        
        The sort is stable, so timers with equal cost keep their previous order.
        """
        ranked = sorted(self.registry.all(), key=lambda r: r.avg_time_total, reverse=True)
        self.registry.reorder(ranked)
        return ranked
