"""Integration tests for the analyze_frames command line tool."""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from analyze_frames import main


class TestAnalyzeFramesCli:
    """Tests for analyze_frames.main()."""
    
    def test_prints_ranking(self, recording_file, capsys):
        path = recording_file([
            {"data": {"Render": [8000000, 2000000], "Shadows": [3000000, 0]}, "frameRate": 60},
        ])
        
        main([path])
        
        output = capsys.readouterr().out
        assert "FPS: 60.00" in output
        assert output.index("Render") < output.index("Shadows")
        assert "8.0 ms" in output
    
    def test_top_limits_rows(self, recording_file, capsys):
        path = recording_file([
            {"data": {"A": [9000000, 0], "B": [5000000, 0], "C": [1000000, 0]}, "frameRate": 60},
        ])
        
        main([path, '--top', '1'])
        
        table = capsys.readouterr().out.split("FPS:")[1]
        assert "A" in table
        assert "  B  " not in table
    
    def test_no_significant_timers(self, recording_file, capsys):
        path = recording_file([{"data": {"Tiny": [10, 10]}, "frameRate": 60}])
        
        main([path])
        
        assert "No significant timers." in capsys.readouterr().out
    
    def test_missing_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.json")])
        
        assert exc.value.code == 1
        assert "not found" in capsys.readouterr().out
    
    def test_invalid_alpha_exits(self, recording_file):
        path = recording_file([])
        
        with pytest.raises(SystemExit) as exc:
            main([path, '--alpha', '1.5'])
        
        assert exc.value.code == 1
    
    def test_truncated_recording_exits(self, tmp_path, capsys):
        path = tmp_path / "truncated.json"
        path.write_text('{"frames": [{"data": {"Render": [5000000, 0]}')
        
        with pytest.raises(SystemExit) as exc:
            main([str(path)])
        
        assert exc.value.code == 1
        assert "Error: Recording is not valid JSON" in capsys.readouterr().out
