"""
Unit tests for frame_stats.web.result_builder module.
"""
import pytest
from frame_stats import FrameStatistics, StatisticsConfig
from frame_stats.web.result_builder import prepare_results


class TestPrepareResults:
    """Tests for the prepare_results() function."""
    
    def test_empty_statistics(self, statistics):
        results = prepare_results(statistics)
        
        assert results['entries'] == []
        assert results['timer_count'] == 0
        assert results['frame_count'] == 0
        assert results['frame_rate_formatted'] == "0.00"
    
    def test_entries_follow_ranking(self, statistics, sample_frame_data):
        statistics.set_data(sample_frame_data, 60.0)
        results = prepare_results(statistics, max_width=300)
        
        assert [e['name'] for e in results['entries']] == ["Render", "Shadows", "UI"]
        assert [e['rank'] for e in results['entries']] == [1, 2, 3]
        assert results['frame_rate_formatted'] == "60.00"
        assert results['frame_count'] == 1
    
    def test_entry_labels_and_widths(self, statistics):
        statistics.set_data({"Render": [1e9 / 60, 2e6]}, 60.0)
        entry = prepare_results(statistics, max_width=300)['entries'][0]
        
        assert entry['color'] == "color:Render"
        assert entry['avg_time_gpu_formatted'] == "16.7 ms"
        assert entry['avg_time_cpu_formatted'] == "2.0 ms"
        assert entry['width_gpu'] == pytest.approx(150)
        assert entry['width_cpu'] == pytest.approx(300 * 2e6 / (1e9 / 30))
    
    def test_truncated_to_max_entries(self, color_provider):
        statistics = FrameStatistics(StatisticsConfig(max_entries=3), color_provider)
        statistics.set_data({f"T{i}": [5000 + i, 0] for i in range(8)}, 30)
        
        results = prepare_results(statistics)
        
        assert len(results['entries']) == 3
        assert results['timer_count'] == 8
        assert [e['name'] for e in results['entries']] == ["T7", "T6", "T5"]
    
    def test_limit_override(self, statistics, sample_frame_data):
        statistics.set_data(sample_frame_data, 60.0)
        assert len(prepare_results(statistics, limit=1)['entries']) == 1
