"""Formatters for overlay output."""

from .time_formatter import NS_PER_MS, bar_width, format_frame_rate, format_time

__all__ = ["NS_PER_MS", "bar_width", "format_frame_rate", "format_time"]
