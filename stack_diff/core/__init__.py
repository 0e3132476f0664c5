"""
Core parsing and diff pipeline for stack dump comparison.
"""

from .errors import StackDiffError, ConfigError, DumpReadError, ParseError, ReportWriteError
from .parser import parse_dump, parse_pieces, parse_record, split_records
from .fingerprint import fingerprint, fnv1a_32, format_fingerprint
from .snapshot import Snapshot, StackRecord
from .loader import read_dump, load_snapshot
from .diff_engine import DiffResult, PairedRecord, diff_snapshots
from .ranker import rank_result, rank_records, rank_pairs, visible_changes

__all__ = [
    "StackDiffError",
    "ConfigError",
    "DumpReadError",
    "ParseError",
    "ReportWriteError",
    "parse_dump",
    "parse_record",
    "parse_pieces",
    "split_records",
    "fingerprint",
    "fnv1a_32",
    "format_fingerprint",
    "Snapshot",
    "StackRecord",
    "read_dump",
    "load_snapshot",
    "DiffResult",
    "PairedRecord",
    "diff_snapshots",
    "rank_result",
    "rank_records",
    "rank_pairs",
    "visible_changes"
]
