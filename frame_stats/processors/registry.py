"""
Name-keyed registry of timer records.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Optional

from ..core.types import TimerRecord

ColorFn = Callable[[str], str]


class TimerRegistry:
    """
    Owns every TimerRecord that is currently being tracked.
    
    Records are keyed by timer name. Iteration follows the order last set with
    reorder(), or insertion order for records created since.
    """
    
    def __init__(self):
        self._records: Dict[str, TimerRecord] = {}
    
    def __len__(self) -> int:
        return len(self._records)
    
    def __contains__(self, name: str) -> bool:
        return name in self._records
    
    def __iter__(self) -> Iterator[TimerRecord]:
        return iter(list(self._records.values()))
    
    def get(self, name: str) -> Optional[TimerRecord]:
        """Return the record for name, or None if it is not tracked."""
        return self._records.get(name)
    
    def upsert_raw(self, name: str, gpu: float, cpu: float, color_fn: ColorFn) -> TimerRecord:
        """
        Store this frame's raw times for a timer.
        
        An existing record only has its raw fields overwritten. A new record starts
        with its averages equal to the raw times and gets its color from color_fn,
        which is not called for names that are already tracked.
        
        Args:
            name: Timer name
            gpu: Raw GPU time for this frame
            cpu: Raw CPU time for this frame
            color_fn: Callable mapping a timer name to a display color
            
        Returns:
            The updated or newly created record
        """
        record = self._records.get(name)
        if record is not None:
            record.time_gpu = gpu
            record.time_cpu = cpu
            return record
        
        record = TimerRecord.first_observation(name, gpu, cpu, color_fn(name))
        self._records[name] = record
        return record
    
    def remove_where(self, predicate: Callable[[TimerRecord], bool]) -> int:
        """
        Drop all records matching predicate.
        
        Returns:
            Number of records removed
        """
        doomed = [name for name, record in self._records.items() if predicate(record)]
        for name in doomed:
            del self._records[name]
        return len(doomed)
    
    def all(self) -> List[TimerRecord]:
        """Return all records in the registry's current order."""
        return list(self._records.values())
    
    def reorder(self, records: Iterable[TimerRecord]):
        """
        Adopt the order of records. Every tracked record must appear exactly once.
        """
        ordered = {record.name: record for record in records}
        if ordered.keys() != self._records.keys():
            raise ValueError("reorder() must be given exactly the tracked records")
        self._records = ordered
    
    def clear(self):
        self._records.clear()
