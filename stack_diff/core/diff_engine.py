"""
Three-way comparison of two snapshots.

Classifies every stack of a left and a right snapshot as:

- changed: present on both sides with counts that differ by more than the
  diff threshold,
- left only: never matched by a right stack,
- right only: no matching left stack.

The pass is linear in the number of records. A disposable copy of the left
buckets is consumed as right records match, so whatever is still in it at
the end is exactly the left-only set and the input snapshots are never
modified.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .snapshot import Snapshot, StackRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairedRecord:
    """A stack present in both snapshots."""
    left_count: int
    right_count: int
    body: str
    fingerprint: int = field(default=0, compare=False)

    @property
    def severity(self) -> int:
        return max(self.left_count, self.right_count)

    @property
    def delta(self) -> int:
        return self.right_count - self.left_count

    @property
    def is_identical(self) -> bool:
        return self.left_count == self.right_count

    def render(self) -> str:
        return f"Left: {self.left_count} Right: {self.right_count} @ {self.body}"


@dataclass
class DiffResult:
    """Outcome of one diff. Lists are unordered until ranked."""
    changed: List[PairedRecord] = field(default_factory=list)
    left_only: List[StackRecord] = field(default_factory=list)
    right_only: List[StackRecord] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.changed or self.left_only or self.right_only)


def diff_snapshots(left: Snapshot, right: Snapshot, diff_threshold: int) -> DiffResult:
    """
    Compare two snapshots.

    Args:
        left: Snapshot of the left dump
        right: Snapshot of the right dump
        diff_threshold: Matched stacks are reported only when
            abs(left count - right count) > diff_threshold. A negative
            threshold reports every matched stack, equal counts included.

    Returns:
        Unranked DiffResult
    """
    result = DiffResult()
    remaining = left.buckets()

    for r in right:
        bucket = remaining.get(r.fingerprint, [])
        match_index = next((i for i, l in enumerate(bucket) if l.body == r.body), None)
        if match_index is None:
            result.right_only.append(r)
            continue

        l = bucket.pop(match_index)
        if not bucket:
            del remaining[r.fingerprint]
        if abs(l.count - r.count) > diff_threshold:
            result.changed.append(PairedRecord(l.count, r.count, l.body, l.fingerprint))

    for bucket in remaining.values():
        result.left_only.extend(bucket)

    logger.info(f"Diff {left.source or 'left'} vs {right.source or 'right'}: "
                f"{len(result.changed)} changed, {len(result.left_only)} left only, "
                f"{len(result.right_only)} right only")
    return result
