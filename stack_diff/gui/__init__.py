"""
GUI components for the stack-diff result viewer.

The Qt window lives in result_window and is imported on demand so the rest
of the tool works without a display.
"""

from .rows import ResultTable, build_tables

__all__ = [
    "ResultTable",
    "build_tables"
]
