"""
Console rendering of a ranked diff result.

Output layout:

    Left: <L> Right: <R> @ <body>     one line per visible changed stack
    Left not Right                    only when left-only stacks exist
    <count> @ <body>
    Right not Left                    only when right-only stacks exist
    <count> @ <body>
"""

from typing import List, TextIO

from ..core.diff_engine import DiffResult
from ..core.ranker import visible_changes

LEFT_ONLY_HEADER = "Left not Right"
RIGHT_ONLY_HEADER = "Right not Left"


def render_lines(result: DiffResult, omit_identical: bool = True) -> List[str]:
    """Render an already ranked result into output lines."""
    lines = [pair.render() for pair in visible_changes(result.changed, omit_identical)]

    if result.left_only:
        lines.append(LEFT_ONLY_HEADER)
        lines.extend(record.render() for record in result.left_only)

    if result.right_only:
        lines.append(RIGHT_ONLY_HEADER)
        lines.extend(record.render() for record in result.right_only)

    return lines


def render_text(result: DiffResult, omit_identical: bool = True) -> str:
    lines = render_lines(result, omit_identical)
    return "\n".join(lines) + "\n" if lines else ""


def write_text(result: DiffResult, stream: TextIO, omit_identical: bool = True):
    stream.write(render_text(result, omit_identical))
    stream.flush()
