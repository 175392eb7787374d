"""
Main frame statistics orchestrator.
"""

import threading
from typing import Any, List, Optional

from ..colors import ColorProvider, HashColorProvider
from ..processors import FrameFileProcessor, TimerAggregator, TimerRegistry, parse_sample_frame
from .types import SampleFrame, StatisticsConfig, TimerSnapshot


class FrameStatistics:
    """Owns the timer registry and turns incoming frames into a ranking."""
    
    def __init__(
        self,
        config: Optional[StatisticsConfig] = None,
        color_provider: Optional[ColorProvider] = None
    ):
        """
        Initialize the FrameStatistics.
        
        Args:
            config: StatisticsConfig, defaults are used when omitted
            color_provider: Callable mapping a timer name to a color. When omitted a
                            HashColorProvider with the configured lightness and saturation
                            is used.
        """
        self.config = config or StatisticsConfig()
        
        if color_provider is None:
            color_provider = HashColorProvider(
                lightness=self.config.lightness,
                saturation=self.config.saturation
            )
        
        self.registry = TimerRegistry()
        self.aggregator = TimerAggregator(self.registry, color_provider, self.config)
        self.file_processor = FrameFileProcessor()
        
        self._ranking: List[TimerSnapshot] = []
        self._frame_rate = 0.0
        self._frame_count = 0

        # Guards registry and counters; callers building results from several
        # properties hold it too so they see a single frame's state
        self.lock = threading.RLock()

    @property
    def ranking(self) -> List[TimerSnapshot]:
        """Full ranking produced by the last frame, most expensive first."""
        with self.lock:
            return list(self._ranking)
    
    @property
    def frame_rate(self) -> float:
        return self._frame_rate
    
    @property
    def frame_count(self) -> int:
        return self._frame_count
    
    def set_data(self, data: Any, frame_rate: Any) -> List[TimerSnapshot]:
        """
        Validate one frame of transport data and apply it.
        
        Args:
            data: JSON text or decoded mapping of name -> [gpu, cpu]
            frame_rate: Measured frame rate for display
            
        Returns:
            The new ranking
            
        Raises:
            FrameFormatError: If data or frame_rate is malformed
        """
        return self.process_frame(parse_sample_frame(data, frame_rate))
    
    def process_frame(self, frame: SampleFrame) -> List[TimerSnapshot]:
        """Apply an already validated frame and return the new ranking."""
        with self.lock:
            self._ranking = self.aggregator.aggregate(frame)
            self._frame_rate = frame.frame_rate
            self._frame_count += 1
            return self.ranking
    
    def process_recording(self, file_path: str) -> int:
        """
        Replay every frame of a recorded session in order.
        
        The whole recording is read and validated before the first frame is
        applied, so a malformed recording leaves the current state untouched.
        
        Args:
            file_path: Path to the recording JSON file
            
        Returns:
            Number of frames processed
            
        Raises:
            FrameFormatError: If the recording or any frame in it is malformed
        """
        frames = self.file_processor.process_file(file_path)
        
        with self.lock:
            for frame in frames:
                self.process_frame(frame)
            
            print(f"\nTracking {len(self.registry)} timers after {len(frames)} frames")
        return len(frames)
    
    def top(self, n: Optional[int] = None) -> List[TimerSnapshot]:
        """Return the first n ranked timers, max_entries when n is omitted."""
        if n is None:
            n = self.config.max_entries
        with self.lock:
            return self._ranking[:max(n, 0)]
    
    def reset(self):
        """Forget all timers and counters."""
        with self.lock:
            self.registry.clear()
            self._ranking = []
            self._frame_rate = 0.0
            self._frame_count = 0
