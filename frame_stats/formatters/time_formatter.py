"""
Formatting utilities for overlay labels and bar sizes.
"""

NS_PER_MS = 1_000_000


def format_time(ns: float) -> str:
    """
    Format a duration in nanoseconds as milliseconds with one decimal.
    
    Args:
        ns: Time in nanoseconds
        
    Returns:
        Formatted time string (e.g., "4.8 ms")
    """
    return f"{ns / NS_PER_MS:.1f} ms"


def format_frame_rate(frame_rate: float) -> str:
    """Format a frame rate with two decimals (e.g., "59.94")."""
    return f"{frame_rate:.2f}"


def bar_width(value: float, max_width: float, max_value: float) -> float:
    """
    Width of a bar proportional to value, where max_value fills max_width.
    
    Values above max_value produce bars wider than max_width; clipping is up to
    the renderer.
    """
    if max_value <= 0:
        return 0.0
    return max_width * value / max_value
