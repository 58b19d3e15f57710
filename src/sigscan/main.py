#!/usr/bin/env python3
"""
Main entry point for the Solidity signature scanner.

This script orchestrates the scan workflow:
1. Parse command-line arguments
2. Initialize the scanner
3. Scan the source tree
4. Write reports
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .config import ScanSettings, env_flag
from .core import SignatureScanner
from .errors import ScanError
from .extraction import ScanReport
from .reporting import generate_markdown_report, save_json_results

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_PARTIAL = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Extract functions, custom errors, require messages and public getters '
                    'from Solidity sources and compute their 4-byte signatures',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (can also be set in .env file):
  SIGSCAN_SOURCE_DIR          Directory to scan recursively
  SIGSCAN_OUTPUT_FILE         Markdown report path
  SIGSCAN_JSON_OUTPUT         JSON report path (optional)
  SIGSCAN_EXTENSION           Source file extension (default: .sol)
  SIGSCAN_MAX_WORKERS         Files processed concurrently (default: CPU count)
  SIGSCAN_STRICT              Skip malformed declarations instead of degrading them
  SIGSCAN_NORMALIZE_ALIASES   Rewrite uint/int/fixed/ufixed aliases (default: true)

Priority: Command-line arguments > Environment variables > Defaults

Exit status: 0 all files processed, 2 some paths skipped, 1 nothing processed
        """
    )
    parser.add_argument(
        'source_dir',
        nargs='?',
        type=Path,
        default=os.getenv('SIGSCAN_SOURCE_DIR'),
        help='Directory containing the source files (env: SIGSCAN_SOURCE_DIR)'
    )
    parser.add_argument(
        'output_file',
        nargs='?',
        type=Path,
        default=os.getenv('SIGSCAN_OUTPUT_FILE'),
        help='Path of the markdown report (env: SIGSCAN_OUTPUT_FILE)'
    )
    parser.add_argument(
        '--json-output',
        type=Path,
        default=os.getenv('SIGSCAN_JSON_OUTPUT'),
        help='Also write the results as JSON (env: SIGSCAN_JSON_OUTPUT, optional)'
    )
    parser.add_argument(
        '--extension',
        default=os.getenv('SIGSCAN_EXTENSION') or '.sol',
        help='Extension of the files to scan (env: SIGSCAN_EXTENSION, default: .sol)'
    )
    parser.add_argument(
        '--max-workers',
        type=int,
        default=int(os.getenv('SIGSCAN_MAX_WORKERS') or '0') or None,
        help='Maximum files processed concurrently (env: SIGSCAN_MAX_WORKERS, default: CPU count)'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        default=env_flag('SIGSCAN_STRICT'),
        help='Skip declarations with malformed parameters and warn on ambiguous lines (env: SIGSCAN_STRICT)'
    )
    parser.add_argument(
        '--no-alias-normalization',
        dest='normalize_aliases',
        action='store_false',
        default=env_flag('SIGSCAN_NORMALIZE_ALIASES', default=True),
        help='Keep uint/int/fixed/ufixed aliases as written (env: SIGSCAN_NORMALIZE_ALIASES=false)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Enable debug mode to log to file (default: False)'
    )
    return parser


def _configure_logging(debug: bool):
    if debug:
        # Create output directory for log file
        output_dir = Path("output")
        output_dir.mkdir(exist_ok=True)

        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(output_dir / 'sigscan.log')
            ]
        )
    else:
        # Disable logging output when debug is False
        logging.basicConfig(
            level=logging.CRITICAL,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.NullHandler()
            ]
        )


def exit_code_for(report: ScanReport) -> int:
    """0 when every path was processed, 2 on partial success, 1 when nothing was."""
    if not report.failures:
        return EXIT_OK
    if not report.files:
        return EXIT_FAILURE
    return EXIT_PARTIAL


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    # Load environment variables before argparse reads its defaults
    load_dotenv(override=True)

    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.debug)

    # Validate required arguments
    if not args.source_dir:
        parser.error("source_dir is required (or set SIGSCAN_SOURCE_DIR environment variable)")
    if not args.output_file:
        parser.error("output_file is required (or set SIGSCAN_OUTPUT_FILE environment variable)")

    settings_kwargs = dict(
        source_dir=args.source_dir,
        output_file=args.output_file,
        json_output=args.json_output,
        extension=args.extension,
        strict=args.strict,
        normalize_aliases=args.normalize_aliases,
    )
    if args.max_workers is not None:
        settings_kwargs['max_workers'] = args.max_workers
    try:
        settings = ScanSettings(**settings_kwargs)
    except ValidationError as e:
        parser.error(f"invalid configuration: {e}")

    scanner = SignatureScanner.from_settings(settings)

    try:
        report = scanner.scan(settings.source_dir)
    except ScanError as e:
        logger.error(f"❌ {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    generate_markdown_report(report, settings.output_file)
    if settings.json_output:
        save_json_results(report, settings.json_output)

    logger.info(f"\n{'='*60}")
    logger.info("Scan complete!")
    logger.info(f"Markdown report: {settings.output_file}")
    if settings.json_output:
        logger.info(f"JSON results: {settings.json_output}")
    logger.info(f"{'='*60}\n")

    exit_code = exit_code_for(report)
    if exit_code == EXIT_OK:
        print('Finished processing all files.')
    else:
        print(f'Finished with {len(report.failures)} skipped path(s); see the report for details.',
              file=sys.stderr)
    return exit_code


if __name__ == '__main__':
    sys.exit(main())
