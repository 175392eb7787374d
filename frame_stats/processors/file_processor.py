"""
Recorded frame stream processing using streaming parser.
"""

import ijson
from typing import Iterator, List

from ..core.errors import FrameFormatError
from ..core.types import SampleFrame
from .frame_parser import parse_sample_frame


class FrameFileProcessor:
    """Reads recorded statistics sessions frame by frame."""
    
    @staticmethod
    def iter_frames(file_path: str) -> Iterator[SampleFrame]:
        """
        Stream frames from a recording without loading it into memory.
        
        The recording is a JSON document of the form
        {"frames": [{"data": {...} or "<json>", "frameRate": 60.0}, ...]}.
        
        Args:
            file_path: Path to the recording JSON file
            
        Yields:
            SampleFrame for each recorded frame, in order
        """
        print(f"Processing {file_path}...")
        
        with open(file_path, 'rb') as f:
            frame_count = 0
            
            try:
                for entry in ijson.items(f, 'frames.item', use_float=True):
                    if not isinstance(entry, dict):
                        raise FrameFormatError(f"Frame {frame_count} is not an object")
                    
                    yield parse_sample_frame(entry.get('data', {}), entry.get('frameRate', 0.0))
                    frame_count += 1
                    
                    if frame_count % 100 == 0:
                        print(f"  Read {frame_count} frames...")
            except ijson.JSONError as e:
                raise FrameFormatError(f"Recording is not valid JSON after {frame_count} frames: {e}") from e
        
        print(f"Completed reading file: {frame_count} frames found.")
    
    @classmethod
    def process_file(cls, file_path: str) -> List[SampleFrame]:
        """
        Read a whole recording.
        
        Args:
            file_path: Path to the recording JSON file
            
        Returns:
            List of SampleFrames in recorded order
        """
        return list(cls.iter_frames(file_path))
