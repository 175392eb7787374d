"""
Validation of raw sample data arriving from the transport.
"""

import json
import math
from numbers import Real
from typing import Any, Mapping, Union

from ..core.errors import FrameFormatError
from ..core.types import SampleFrame, TimerSample


def _to_number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise FrameFormatError(f"{what} must be a number, got {value!r}")
    try:
        finite = math.isfinite(value)
    except OverflowError as e:
        raise FrameFormatError(f"{what} is too large") from e
    if not finite:
        raise FrameFormatError(f"{what} must be finite, got {value!r}")
    return value


def parse_sample(name: Any, value: Any) -> TimerSample:
    """
    Validate one `name: [gpu, cpu]` entry.
    
    Args:
        name: Timer name, must be a string
        value: Two-element list or tuple of numbers
        
    Returns:
        TimerSample with the GPU and CPU times
        
    Raises:
        FrameFormatError: If the entry is not well formed
    """
    if not isinstance(name, str):
        raise FrameFormatError(f"Timer name must be a string, got {name!r}")
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise FrameFormatError(f"Timer '{name}' must map to [gpu, cpu], got {value!r}")
    
    gpu = _to_number(value[0], f"GPU time of '{name}'")
    cpu = _to_number(value[1], f"CPU time of '{name}'")
    return TimerSample(gpu, cpu)


def parse_sample_frame(data: Union[str, bytes, Mapping[str, Any]], frame_rate: Any = 0.0) -> SampleFrame:
    """
    Turn one frame of transport data into a SampleFrame.
    
    Example:
        parse_sample_frame('{"Render": [5000000, 1200000]}', 60.0)
    
    Args:
        data: JSON text or an already decoded mapping of name -> [gpu, cpu]
        frame_rate: Measured frame rate, passed through for display
        
    Returns:
        Validated SampleFrame
        
    Raises:
        FrameFormatError: If the data or frame rate is malformed
    """
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError and oversized integer literals
            raise FrameFormatError(f"Sample data is not valid JSON: {e}") from e
    
    if not isinstance(data, Mapping):
        raise FrameFormatError(f"Sample data must be an object, got {type(data).__name__}")
    
    samples = {name: parse_sample(name, value) for name, value in data.items()}
    return SampleFrame(samples=samples, frame_rate=_to_number(frame_rate, "Frame rate"))
