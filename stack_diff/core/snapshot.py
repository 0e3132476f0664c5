"""
Snapshot of one stack dump.

A Snapshot holds the distinct stacks of a single dump, keyed by body
fingerprint, after dropping every record whose count does not exceed the
minimum-count threshold. It is built once and read-only afterwards.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .fingerprint import Hasher, fingerprint, format_fingerprint
from .parser import parse_pieces, split_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StackRecord:
    """One distinct stack and the number of tasks sharing it."""
    count: int
    body: str
    fingerprint: int = field(default=0, compare=False)

    @property
    def severity(self) -> int:
        return self.count

    def render(self) -> str:
        return f"{self.count} @ {self.body}"


class Snapshot:
    """
    Threshold-filtered, deduplicated records of a single dump.

    Records are stored in buckets keyed by fingerprint. A record whose body
    is already in its bucket replaces the earlier one (later insertion
    wins); a record that only shares the fingerprint with a different body
    is chained next to it so a hash collision never merges two stacks.
    """

    def __init__(self, source: str = "", hasher: Hasher = fingerprint):
        self.source = source
        self.hasher = hasher
        self.raw_record_count = 0
        self._buckets: Dict[int, List[StackRecord]] = {}

    @classmethod
    def from_records(cls, records: Iterable[Tuple[int, str]], over: int,
                     source: str = "", hasher: Hasher = fingerprint) -> 'Snapshot':
        """
        Build a snapshot from parsed (count, body) pairs.

        Args:
            records: Parsed pairs in dump order
            over: Records with count <= over are discarded
            source: Label of the dump (usually its path)
            hasher: Fingerprint function for bodies

        Returns:
            New Snapshot
        """
        snapshot = cls(source=source, hasher=hasher)
        for count, body in records:
            snapshot.raw_record_count += 1
            if count > over:
                snapshot._insert(StackRecord(count, body, hasher(body)))
        return snapshot

    @classmethod
    def from_text(cls, text: str, over: int, source: str = "",
                  hasher: Hasher = fingerprint) -> 'Snapshot':
        """Parse dump text and build its snapshot."""
        pieces = split_records(text)
        snapshot = cls.from_records(parse_pieces(pieces), over, source=source, hasher=hasher)
        logger.info(f"{source or '<text>'} {len(pieces)} pieces: "
                    f"{snapshot.raw_record_count} records parsed, "
                    f"{len(snapshot)} kept with count > {over}")
        return snapshot

    def _insert(self, record: StackRecord):
        bucket = self._buckets.setdefault(record.fingerprint, [])
        for i, existing in enumerate(bucket):
            if existing.body == record.body:
                bucket[i] = record
                return
        if bucket:
            logger.debug(f"Fingerprint collision in {self.source or '<text>'}: "
                         f"{format_fingerprint(record.fingerprint)}")
        bucket.append(record)

    def lookup(self, record: StackRecord) -> Optional[StackRecord]:
        """Return the record with the same body as `record`, if any."""
        for candidate in self._buckets.get(self.hasher(record.body), ()):
            if candidate.body == record.body:
                return candidate
        return None

    def __contains__(self, record: StackRecord) -> bool:
        return self.lookup(record) is not None

    def buckets(self) -> Dict[int, List[StackRecord]]:
        """Copy of the fingerprint buckets, safe for the caller to mutate."""
        return {key: list(bucket) for key, bucket in self._buckets.items()}

    def records(self) -> List[StackRecord]:
        return [record for bucket in self._buckets.values() for record in bucket]

    def __iter__(self) -> Iterator[StackRecord]:
        return iter(self.records())

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def __repr__(self) -> str:
        return f"Snapshot(source={self.source!r}, records={len(self)})"
