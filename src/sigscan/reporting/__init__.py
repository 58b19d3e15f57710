"""Report formatting and output writers."""

from .generators import generate_markdown_report, save_json_results
from .markdown_formatter import format_file_section, format_scan_report

__all__ = [
    "format_file_section",
    "format_scan_report",
    "generate_markdown_report",
    "save_json_results",
]
