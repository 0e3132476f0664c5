"""
Table rows for the result viewer.

Kept free of Qt imports so the table content can be built and checked
without a display.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ..core.diff_engine import DiffResult
from ..core.fingerprint import format_fingerprint
from ..core.ranker import visible_changes


@dataclass
class ResultTable:
    """One tab of the viewer: column headers, cell rows and full bodies."""
    title: str
    headers: Tuple[str, ...]
    rows: List[Tuple[str, ...]]
    bodies: List[str]


def first_line(body: str) -> str:
    return body.split("\n", 1)[0]


def build_tables(result: DiffResult, omit_identical: bool = True) -> List[ResultTable]:
    """Build the Changed / Left only / Right only tables of a ranked result."""
    changed = visible_changes(result.changed, omit_identical)
    tables = [
        ResultTable(
            title=f"Changed ({len(changed)})",
            headers=("Left", "Right", "Delta", "Fingerprint", "Stack"),
            rows=[(str(pair.left_count), str(pair.right_count), f"{pair.delta:+d}",
                   format_fingerprint(pair.fingerprint), first_line(pair.body))
                  for pair in changed],
            bodies=[pair.body for pair in changed],
        ),
    ]
    for title, records in (("Left only", result.left_only), ("Right only", result.right_only)):
        tables.append(ResultTable(
            title=f"{title} ({len(records)})",
            headers=("Count", "Fingerprint", "Stack"),
            rows=[(str(record.count), format_fingerprint(record.fingerprint), first_line(record.body))
                  for record in records],
            bodies=[record.body for record in records],
        ))
    return tables
