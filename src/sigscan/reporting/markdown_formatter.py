"""Markdown rendering of scan reports."""

from typing import List, Sequence

from ..extraction import ExtractionRecord, FileExtraction, ScanReport

# (attribute, heading, digest label, show line) in rendering order
_SECTIONS = (
    ("functions", "Functions", "Selector", True),
    ("getters", "Getters (for public variables)", "Selector", False),
    ("errors", "Custom Errors", "Signature", True),
    ("requires", "Require Statements", "Signature", True),
)


def _format_record(record: ExtractionRecord, label: str, show_line: bool) -> str:
    item = f"`{record.display_text}` | {label}: `{record.signature.digest_hex}`"
    if show_line:
        return f"- Line {record.line_number}: {item}"
    return f"- {item}"


def _format_section(title: str, records: Sequence[ExtractionRecord], label: str, show_line: bool) -> str:
    lines = [f"#### {title}:"]
    lines.extend(_format_record(record, label, show_line) for record in records)
    return "\n".join(lines) + "\n\n"


def format_file_section(extraction: FileExtraction) -> str:
    """
    Render one file: header, non-empty subsections, separator.

    A file without any record still gets its header and separator.
    """
    parts: List[str] = [f"### {extraction.relative_path}\n\n"]
    for attr, title, label, show_line in _SECTIONS:
        records = getattr(extraction, attr)
        if records:
            parts.append(_format_section(title, records, label, show_line))
    parts.append("---\n\n")
    return "".join(parts)


def format_scan_report(report: ScanReport) -> str:
    """
    Render the whole scan as markdown.

    No timestamp is included so identical input yields identical output.

    Args:
        report: Aggregated scan result

    Returns:
        Markdown document
    """
    header = (
        "# Signature Report\n\n"
        f"**Source Directory:** {report.root}\n\n"
        f"**Files Processed:** {len(report.files)}\n\n"
        f"**Records Extracted:** {report.total_records}\n\n"
        f"**Skipped Paths:** {len(report.failures)}\n\n"
        "---\n\n"
    )
    body = "".join(format_file_section(extraction) for extraction in report.files)

    if report.failures:
        skipped = ["## Skipped Files\n"]
        skipped.extend(
            f"- `{failure.path}` ({failure.stage}): {failure.error}" for failure in report.failures
        )
        body += "\n".join(skipped) + "\n"

    return header + body
