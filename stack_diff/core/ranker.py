"""
Severity ranking of diff results.

Severity is the larger of the two counts of a matched pair, or the count of
an unmatched stack. Lists are ordered by descending severity only; entries
with equal severity come out in no particular order.
"""

from typing import Iterable, List

from .diff_engine import DiffResult, PairedRecord
from .snapshot import StackRecord


def rank_records(records: Iterable[StackRecord]) -> List[StackRecord]:
    return sorted(records, key=lambda record: record.severity, reverse=True)


def rank_pairs(pairs: Iterable[PairedRecord]) -> List[PairedRecord]:
    return sorted(pairs, key=lambda pair: pair.severity, reverse=True)


def rank_result(result: DiffResult) -> DiffResult:
    """Return a new DiffResult with every list ordered by descending severity."""
    return DiffResult(
        changed=rank_pairs(result.changed),
        left_only=rank_records(result.left_only),
        right_only=rank_records(result.right_only),
    )


def visible_changes(changed: Iterable[PairedRecord], omit_identical: bool) -> List[PairedRecord]:
    """
    Rendering-time filter for changed pairs.

    With omit_identical set, pairs whose counts are equal are dropped. Such
    pairs are only reported when the diff threshold is negative.
    """
    if not omit_identical:
        return list(changed)
    return [pair for pair in changed if not pair.is_identical]
