"""
Pytest configuration and shared fixtures for frame statistics tests.
"""
import json
import pytest

from frame_stats import FrameStatistics, StatisticsConfig
from frame_stats.processors import TimerAggregator, TimerRegistry


class RecordingColorProvider:
    """Color provider that remembers every name it was asked about."""
    
    def __init__(self):
        self.calls = []
    
    def __call__(self, name):
        self.calls.append(name)
        return f"color:{name}"


@pytest.fixture
def color_provider():
    """Deterministic color provider that records its calls."""
    return RecordingColorProvider()


@pytest.fixture
def config():
    """Default statistics configuration."""
    return StatisticsConfig()


@pytest.fixture
def registry():
    """Empty timer registry."""
    return TimerRegistry()


@pytest.fixture
def aggregator(registry, color_provider, config):
    """Aggregator over the shared registry fixture."""
    return TimerAggregator(registry, color_provider, config)


@pytest.fixture
def statistics(color_provider):
    """FrameStatistics with a recording color provider."""
    return FrameStatistics(color_provider=color_provider)


@pytest.fixture
def sample_frame_data():
    """One frame of transport data as the renderer sends it."""
    return {
        "Render": [8000000, 2000000],
        "Shadows": [3000000, 500000],
        "UI": [400000, 900000],
    }


@pytest.fixture
def recording_file(tmp_path):
    """Create a recording JSON file and return a helper function."""
    def _create_file(frames, name="recording.json"):
        file_path = tmp_path / name
        with open(file_path, "w") as f:
            json.dump({"frames": frames}, f)
        return str(file_path)
    
    return _create_file
