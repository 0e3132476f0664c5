"""
stack-diff: Stack Dump Comparison Tool

Compares two stack dumps (e.g. goroutine profiles taken at two points in
time) and reports which stacks changed in count, which exist only on the
left and which exist only on the right, ranked by severity.

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "Stack Diff Developers"
__description__ = "Stack dump comparison tool"

from .core import (
    Snapshot, StackRecord, PairedRecord, DiffResult,
    parse_dump, diff_snapshots, rank_result, visible_changes
)
from .utils.config import ConfigManager, DiffOptions

__all__ = [
    "Snapshot",
    "StackRecord",
    "PairedRecord",
    "DiffResult",
    "parse_dump",
    "diff_snapshots",
    "rank_result",
    "visible_changes",
    "ConfigManager",
    "DiffOptions",
    "__version__",
    "__author__",
    "__description__"
]
