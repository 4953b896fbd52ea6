"""Report rendering: fixed-width text tables and JSON."""

from __future__ import annotations

from typing import TextIO

from claimdiff.models.reports import ClaimComparison
from claimdiff.render.json_report import render_json
from claimdiff.render.text import render_comparison

__all__ = ["render_comparison", "render_json", "write_report"]


def write_report(comparison: ClaimComparison, sink: TextIO, output_format: str = "text", json_indent: int = 2) -> None:
    """Render *comparison* in *output_format* and write it to *sink*."""
    if output_format == "json":
        sink.write(render_json(comparison, indent=json_indent))
    else:
        sink.write(render_comparison(comparison))
