"""JSON report of a ranked diff result."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from .. import __version__
from ..core.diff_engine import DiffResult, PairedRecord
from ..core.errors import ReportWriteError
from ..core.fingerprint import format_fingerprint
from ..core.ranker import visible_changes
from ..core.snapshot import StackRecord
from ..utils.config import DiffOptions

logger = logging.getLogger(__name__)


def _pair_to_dict(pair: PairedRecord) -> Dict[str, Any]:
    return {
        "fingerprint": format_fingerprint(pair.fingerprint),
        "left_count": pair.left_count,
        "right_count": pair.right_count,
        "delta": pair.delta,
        "severity": pair.severity,
        "body": pair.body,
    }


def _record_to_dict(record: StackRecord) -> Dict[str, Any]:
    return {
        "fingerprint": format_fingerprint(record.fingerprint),
        "count": record.count,
        "body": record.body,
    }


def build_report(result: DiffResult, options: DiffOptions) -> Dict[str, Any]:
    """
    Build the JSON-serializable report of a ranked result.

    The omit-identical filter is applied to the changed section the same way
    the console output applies it.
    """
    changed = visible_changes(result.changed, options.omit_identical)
    return {
        "metadata": {
            "tool": "stack-diff",
            "version": __version__,
            "generated_at": datetime.now().isoformat(),
            "left": options.left,
            "right": options.right,
            "options": {
                "over": options.over,
                "diff": options.diff,
                "omit_identical": options.omit_identical,
            },
        },
        "statistics": {
            "changed": len(changed),
            "left_only": len(result.left_only),
            "right_only": len(result.right_only),
        },
        "changed": [_pair_to_dict(pair) for pair in changed],
        "left_only": [_record_to_dict(record) for record in result.left_only],
        "right_only": [_record_to_dict(record) for record in result.right_only],
    }


def render_json(result: DiffResult, options: DiffOptions) -> str:
    return json.dumps(build_report(result, options), indent=2)


def write_json_report(result: DiffResult, options: DiffOptions, path: str | Path) -> Path:
    """
    Write the JSON report to `path`.

    Raises:
        ReportWriteError: If the report file cannot be written
    """
    report_path = Path(path)
    try:
        report_path.write_text(render_json(result, options), encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(str(report_path), e.strerror or str(e)) from e
    logger.info(f"Report saved to {report_path}")
    return report_path
