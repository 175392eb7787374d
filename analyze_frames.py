#!/usr/bin/env python3
"""
Frame Statistics - replay a recorded timer stream and print the ranking
"""

import sys
from frame_stats import FrameStatistics, StatisticsConfig, FrameStatisticsError
from frame_stats.formatters import format_frame_rate, format_time


def print_ranking(statistics, top):
    """Print the top entries of the current ranking as a table."""
    ranking = statistics.top(top)
    print(f"\nFPS: {format_frame_rate(statistics.frame_rate)}")
    if not ranking:
        print("No significant timers.")
        return
    
    width = max(len(timer.name) for timer in ranking)
    print(f"{'#':>3}  {'Timer':<{width}}  {'GPU':>10}  {'CPU':>10}")
    for rank, timer in enumerate(ranking, start=1):
        print(f"{rank:>3}  {timer.name:<{width}}  "
              f"{format_time(timer.avg_time_gpu):>10}  {format_time(timer.avg_time_cpu):>10}")


def main(argv=None):
    import argparse
    parser = argparse.ArgumentParser(
        description='Replay a recorded frame statistics session and show where time is spent.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python analyze_frames.py recording.json
  python analyze_frames.py recording.json --top 20
  python analyze_frames.py recording.json --alpha 0.9 --min-time 5000
        """
    )
    parser.add_argument('input_file', help='Path to the recording JSON file')
    parser.add_argument('--top', type=int, default=10, help='Number of timers to show (default: 10)')
    parser.add_argument('--alpha', type=float, default=0.95, help='Smoothing constant (default: 0.95)')
    parser.add_argument('--min-time', type=float, default=1000,
                       help='Significance threshold in nanoseconds (default: 1000)')
    args = parser.parse_args(argv)
    
    try:
        config = StatisticsConfig(min_time=args.min_time, alpha=args.alpha, max_entries=args.top)
        statistics = FrameStatistics(config=config)
        
        print(f"\nConfiguration:")
        print(f"  Input file: {args.input_file}")
        print(f"  Smoothing constant: {args.alpha}")
        print(f"  Significance threshold: {args.min_time} ns\n")
        statistics.process_recording(args.input_file)
        print_ranking(statistics, args.top)
    except FileNotFoundError:
        print(f"Error: File '{args.input_file}' not found.")
        sys.exit(1)
    except FrameStatisticsError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
