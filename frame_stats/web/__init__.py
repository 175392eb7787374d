"""Web output helpers."""

from .result_builder import DEFAULT_MAX_WIDTH, prepare_results

__all__ = ["DEFAULT_MAX_WIDTH", "prepare_results"]
