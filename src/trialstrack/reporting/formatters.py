"""Output formatters for track reports."""

from __future__ import annotations

import json
from pathlib import Path

from trialstrack.reporting.report import TrackReport


def to_json(report: TrackReport, indent: int = 2) -> str:
    """Format report as JSON string."""
    return json.dumps(report.to_dict(), indent=indent, default=str)


def to_markdown(report: TrackReport) -> str:
    """Format report as Markdown."""
    lines = [
        "# Track Report",
        "",
        "| Field | Value |",
        "|-------|-------|",
        f"| Source | `{report.source_file}` |",
        f"| Game | {report.game} |",
        f"| Header size | {report.header_size} |",
        f"| Properties | `{report.properties_hex}` |",
        f"| lc / lp / pb | {report.lc} / {report.lp} / {report.pb} |",
        f"| Dictionary size | {report.dict_size} |",
        f"| Declared size | {report.declared_size} |",
        f"| Compressed size | {report.compressed_size} |",
        f"| Ratio | {report.compression_ratio:.2%} |",
    ]
    return "\n".join(lines) + "\n"


def save_report(report: TrackReport, path: Path) -> None:
    """Save report to file. Format is determined by extension (.json or .md)."""
    suffix = path.suffix.lower()
    if suffix == ".md":
        content = to_markdown(report)
    else:
        content = to_json(report)
    path.write_text(content, encoding="utf-8")
