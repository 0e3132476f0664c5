"""
Report Generation Module.

Renders ranked diff results as console text or JSON.
"""
from .text_report import render_lines, render_text, write_text
from .json_report import build_report, render_json, write_json_report

__all__ = [
    "render_lines",
    "render_text",
    "write_text",
    "build_report",
    "render_json",
    "write_json_report"
]
