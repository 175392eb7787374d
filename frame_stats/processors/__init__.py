"""Processors for per-frame timer data."""

from .registry import TimerRegistry
from .aggregator import TimerAggregator
from .frame_parser import parse_sample, parse_sample_frame
from .file_processor import FrameFileProcessor

__all__ = [
    "TimerRegistry",
    "TimerAggregator",
    "FrameFileProcessor",
    "parse_sample",
    "parse_sample_frame",
]
