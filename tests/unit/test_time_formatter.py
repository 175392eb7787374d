"""
Unit tests for frame_stats.formatters.time_formatter module.
"""
import pytest
from frame_stats.formatters.time_formatter import bar_width, format_frame_rate, format_time


class TestFormatTime:
    """Tests for the format_time() function."""
    
    def test_format_milliseconds(self):
        """Nanoseconds are shown as milliseconds with one decimal."""
        assert format_time(5000000) == "5.0 ms"
        assert format_time(4760000) == "4.8 ms"
        assert format_time(33333333.3) == "33.3 ms"
    
    def test_zero_time(self):
        assert format_time(0) == "0.0 ms"
    
    def test_very_small_time(self):
        assert format_time(1000) == "0.0 ms"
        assert format_time(60000) == "0.1 ms"
    
    def test_large_values(self):
        assert format_time(1e9) == "1000.0 ms"


class TestFormatFrameRate:
    """Tests for the format_frame_rate() function."""
    
    def test_two_decimals(self):
        assert format_frame_rate(60) == "60.00"
        assert format_frame_rate(59.9412) == "59.94"
        assert format_frame_rate(0) == "0.00"


class TestBarWidth:
    """Tests for the bar_width() function."""
    
    def test_proportional(self):
        assert bar_width(1e9 / 60, 300, 1e9 / 30) == pytest.approx(150)
    
    def test_full_width_at_max_value(self):
        assert bar_width(1e9 / 30, 300, 1e9 / 30) == pytest.approx(300)
    
    def test_exceeds_max_value(self):
        assert bar_width(2e9 / 30, 300, 1e9 / 30) == pytest.approx(600)
    
    def test_zero_value(self):
        assert bar_width(0, 300, 1e9 / 30) == 0
    
    def test_non_positive_scale(self):
        assert bar_width(100, 300, 0) == 0.0
