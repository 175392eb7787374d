"""
Result builder for overlay and JSON output.
"""

from ..formatters import bar_width, format_frame_rate, format_time

DEFAULT_MAX_WIDTH = 300


def prepare_results(statistics, max_width: float = DEFAULT_MAX_WIDTH, limit: int = None):
    """
    Convert the current ranking to a structured format for JSON/HTML output.
    
    Only the first entries of the ranking are included, as many as the
    configuration's max_entries unless limit says otherwise.
    
    Args:
        statistics: FrameStatistics instance that has processed at least zero frames
        max_width: Pixel width of a bar that represents max_value
        limit: Optional override for the number of entries
        
    Returns:
        Dictionary with structured results for rendering
    """
    config = statistics.config
    entries = []
    for rank, timer in enumerate(statistics.top(limit), start=1):
        entries.append({
            'rank': rank,
            'name': timer.name,
            'color': timer.color,
            'avg_time_gpu': timer.avg_time_gpu,
            'avg_time_cpu': timer.avg_time_cpu,
            'avg_time_gpu_formatted': format_time(timer.avg_time_gpu),
            'avg_time_cpu_formatted': format_time(timer.avg_time_cpu),
            'width_gpu': bar_width(timer.avg_time_gpu, max_width, config.max_value),
            'width_cpu': bar_width(timer.avg_time_cpu, max_width, config.max_value),
        })
    
    return {
        'frame_rate': statistics.frame_rate,
        'frame_rate_formatted': format_frame_rate(statistics.frame_rate),
        'frame_count': statistics.frame_count,
        'timer_count': len(statistics.ranking),
        'max_width': max_width,
        'entries': entries,
    }
