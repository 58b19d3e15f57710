"""Top-level markdown/json report writers."""

import json
import logging
from pathlib import Path

from ..extraction import ScanReport
from .markdown_formatter import format_scan_report

logger = logging.getLogger(__name__)


def generate_markdown_report(report: ScanReport, output_file: Path):
    """
    Write the markdown report, creating parent directories as needed.

    Args:
        report: Aggregated scan result
        output_file: Path to the markdown file
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(format_scan_report(report))

    logger.info(f"Markdown report saved to {output_file}")


def save_json_results(report: ScanReport, json_output: Path):
    """
    Save scan results to a JSON file.

    Args:
        report: Aggregated scan result
        json_output: Path to JSON output file
    """
    logger.info(f"Saving JSON results to {json_output}")
    json_output.parent.mkdir(parents=True, exist_ok=True)
    with open(json_output, 'w', encoding='utf-8') as f:
        json.dump(report.to_output(), f, indent=2, sort_keys=True, ensure_ascii=False)
